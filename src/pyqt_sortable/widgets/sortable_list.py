"""
Drag-and-drop sortable list widget.

Renders a sequence of items through a caller-supplied render callback and
lets the user reorder them by dragging one item over another. All index
arithmetic and session state live in SortableDragController; this module only
translates Qt drag events into controller triggers and re-renders items whose
render flags changed.
"""

import logging
from collections import Counter
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, Union

from PyQt6.QtCore import QByteArray, QMimeData, QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QDrag
from PyQt6.QtWidgets import QApplication, QBoxLayout, QFrame, QLabel, QVBoxLayout, QWidget

from pyqt_sortable.core import (
    Direction, DragOverGuard, DragOverItem, ItemGeometry, SortableDragController, SortableItemProps,
)
from pyqt_sortable.exceptions import DuplicateItemKeyError
from pyqt_sortable.protocols import get_sortable_config
from pyqt_sortable.theming import ColorScheme, StyleSheetGenerator
from .drag_over_filter import QtDragOverListener

logger = logging.getLogger(__name__)

RenderItem = Callable[[SortableItemProps, int], QWidget]

_BOX_DIRECTIONS = {
    Direction.VERTICAL: QBoxLayout.Direction.TopToBottom,
    Direction.HORIZONTAL: QBoxLayout.Direction.LeftToRight,
}


def create_item_label(props: SortableItemProps, direction: Union[Direction, str] = Direction.VERTICAL,
                      style_generator: Optional[StyleSheetGenerator] = None,
                      text_fn: Callable[[Any], str] = str) -> QLabel:
    """Build a QLabel for one item, styled from its render flags."""
    generator = style_generator or StyleSheetGenerator()
    label = QLabel(text_fn(props.item))
    label.setStyleSheet(generator.generate_item_style(props, direction))
    return label


def default_item_renderer(direction: Union[Direction, str] = Direction.VERTICAL,
                          color_scheme: Optional[ColorScheme] = None,
                          text_fn: Callable[[Any], str] = str) -> RenderItem:
    """
    Build a render callback that shows each item as a styled label.

    The dragged item is dimmed and the insertion seam is drawn on the item
    edge the drop would insert at.
    """
    generator = StyleSheetGenerator(color_scheme)

    def render(props: SortableItemProps, index: int) -> QWidget:
        return create_item_label(props, direction, generator, text_fn)

    return render


class _SortableItemFrame(QFrame):
    """Draggable, droppable wrapper around one rendered item."""

    def __init__(self, owner: "SortableListWidget", key: Hashable, parent=None):
        super().__init__(parent)
        self._owner = owner
        self.key = key
        self._content: Optional[QWidget] = None
        self._props: Optional[SortableItemProps] = None
        self._press_pos: Optional[QPoint] = None

        self.setAcceptDrops(True)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

    @property
    def props(self) -> Optional[SortableItemProps]:
        return self._props

    @property
    def content(self) -> Optional[QWidget]:
        return self._content

    def invalidate(self):
        """Force the next update_content() to rebuild the content."""
        self._props = None

    def update_content(self, props: SortableItemProps, render_item: RenderItem) -> bool:
        """Re-render the content if the flags changed. Returns True if it did."""
        if self._content is not None and props == self._props:
            return False

        widget = render_item(props, props.index)
        if self._content is not None:
            self.layout().removeWidget(self._content)
            self._content.setParent(None)
            self._content.deleteLater()
        self.layout().addWidget(widget)
        self._content = widget
        self._props = props
        return True

    # ---------- Drag source ----------
    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = event.position().toPoint()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._press_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            return super().mouseMoveEvent(event)

        distance = (event.position().toPoint() - self._press_pos).manhattanLength()
        if distance < self._owner.drag_start_distance():
            return super().mouseMoveEvent(event)

        hot_spot = self._press_pos
        self._press_pos = None
        self._owner._start_drag(self, hot_spot)

    def mouseReleaseEvent(self, event):
        self._press_pos = None
        super().mouseReleaseEvent(event)

    # ---------- Drop target ----------
    def dragEnterEvent(self, event):
        if not self._owner._accepts_drag(event):
            event.ignore()
            return
        self._owner._on_drag_enter(self)
        event.acceptProposedAction()

    def dragMoveEvent(self, event):
        if not self._owner._accepts_drag(event):
            event.ignore()
            return
        self._owner._on_drag_move(self, event.position())
        event.acceptProposedAction()

    def dropEvent(self, event):
        # The session ends when QDrag.exec() returns in the source list
        if not self._owner._accepts_drag(event):
            event.ignore()
            return
        event.acceptProposedAction()


class SortableListWidget(QWidget):
    """
    List of items reorderable by drag and drop.

    Usage:
        items = ["item #1", "item #2", "item #3"]
        widget = SortableListWidget(items, on_sort=create_sort_handler(lambda: items, store))
        widget.items_reordered.connect(self._on_reordered)

    The render callback receives each item's SortableItemProps and its index
    and returns the widget to display. Items are matched across set_items()
    calls by compute_key(item); without a key function the index is the key.
    """

    items_reordered = pyqtSignal(int, int)  # source_index, target_index

    def __init__(self, items: Optional[Sequence[Any]] = None,
                 render_item: Optional[RenderItem] = None,
                 on_sort: Optional[Callable[[int, int], None]] = None,
                 compute_key: Optional[Callable[[Any], Hashable]] = None,
                 direction: Union[Direction, str, None] = None,
                 color_scheme: Optional[ColorScheme] = None,
                 parent=None):
        super().__init__(parent)
        self._config = get_sortable_config()
        self._direction = Direction.coerce(direction or self._config.default_direction)
        self._render_item = render_item
        self._on_sort = on_sort
        self._compute_key = compute_key
        self._style_generator = StyleSheetGenerator(color_scheme, self._config)

        self._items: List[Any] = []
        self._frames: Dict[Hashable, _SortableItemFrame] = {}
        self._ordered_frames: List[_SortableItemFrame] = []

        if self._config.suppress_drag_over:
            guard = DragOverGuard(self._create_drag_over_listener)
        else:
            guard = DragOverGuard()
        self._controller = SortableDragController(
            on_sort=self._handle_sort,
            item_count=lambda: len(self._items),
            drag_over_guard=guard,
        )

        self._setup_ui()
        self.set_items(items or [])

    def _setup_ui(self):
        self.setObjectName("SortableList")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(self._style_generator.generate_list_style(self.objectName()))

        self._layout = QBoxLayout(_BOX_DIRECTIONS[self._direction], self)
        self._layout.setContentsMargins(10, 10, 10, 10)
        self._layout.setSpacing(self._config.item_spacing)

    # ---------- Public API ----------
    @property
    def controller(self) -> SortableDragController:
        return self._controller

    def items(self) -> List[Any]:
        return list(self._items)

    def direction(self) -> Direction:
        return self._direction

    def set_direction(self, direction: Union[Direction, str]):
        """Switch between vertical and horizontal layout."""
        self._direction = Direction.coerce(direction)
        self._layout.setDirection(_BOX_DIRECTIONS[self._direction])
        # Seam edges depend on direction, so force a full re-render
        for frame in self._ordered_frames:
            frame.invalidate()
        self._refresh()

    def set_on_sort(self, on_sort: Optional[Callable[[int, int], None]]):
        self._on_sort = on_sort

    def item_widget(self, index: int) -> Optional[QWidget]:
        """Rendered content widget for the item at `index`."""
        if not 0 <= index < len(self._ordered_frames):
            return None
        return self._ordered_frames[index].content

    def item_props(self) -> List[SortableItemProps]:
        """Current render flags for every item."""
        return self._controller.item_props(self._items)

    def set_items(self, items: Sequence[Any]):
        """
        Replace the displayed items.

        Frames whose key survives are reused and moved; frames for departed
        keys are deleted.

        Raises:
            DuplicateItemKeyError: If two items share a key
        """
        new_items = list(items)
        keys = [self._key_for(item, index) for index, item in enumerate(new_items)]
        duplicates = [key for key, count in Counter(keys).items() if count > 1]
        if duplicates:
            raise DuplicateItemKeyError(f"Item keys must be unique, duplicated: {duplicates}")

        self._items = new_items
        for key in set(self._frames) - set(keys):
            frame = self._frames.pop(key)
            self._layout.removeWidget(frame)
            frame.hide()
            frame.deleteLater()

        ordered = []
        for key in keys:
            frame = self._frames.get(key)
            if frame is None:
                frame = _SortableItemFrame(self, key, self)
                self._frames[key] = frame
            ordered.append(frame)

        for frame in ordered:
            self._layout.removeWidget(frame)
        for frame in ordered:
            self._layout.addWidget(frame)
        self._ordered_frames = ordered

        logger.debug(f"SortableListWidget showing {len(new_items)} items")
        self._refresh()

    def drag_start_distance(self) -> int:
        if self._config.drag_start_distance is not None:
            return self._config.drag_start_distance
        return QApplication.startDragDistance()

    # ---------- Rendering ----------
    def _key_for(self, item: Any, index: int) -> Hashable:
        if self._compute_key is None:
            return index
        return self._compute_key(item)

    def _render(self, props: SortableItemProps, index: int) -> QWidget:
        if self._render_item is not None:
            return self._render_item(props, index)
        return create_item_label(props, self._direction, self._style_generator)

    def _refresh(self):
        """Re-derive render flags and re-render items whose flags changed."""
        for frame, props in zip(self._ordered_frames, self.item_props()):
            frame.update_content(props, self._render)

    # ---------- Drag session ----------
    def _create_drag_over_listener(self) -> QtDragOverListener:
        return QtDragOverListener(self.window(), self._config.mime_type)

    def _index_of(self, frame: _SortableItemFrame) -> Optional[int]:
        try:
            return self._ordered_frames.index(frame)
        except ValueError:
            return None

    def _accepts_drag(self, event) -> bool:
        mime = event.mimeData()
        return (
            self._controller.is_dragging
            and mime is not None
            and mime.hasFormat(self._config.mime_type)
            and event.source() in self._ordered_frames
        )

    def _start_drag(self, frame: _SortableItemFrame, hot_spot: QPoint):
        index = self._index_of(frame)
        if index is None:
            return

        self._controller.begin_drag(index)
        self._refresh()

        mime = QMimeData()
        mime.setData(self._config.mime_type, QByteArray(str(index).encode()))
        drag = QDrag(frame)
        drag.setMimeData(mime)
        drag.setPixmap(frame.grab())
        drag.setHotSpot(hot_spot)
        try:
            drag.exec(Qt.DropAction.MoveAction)
        finally:
            self._finish_drag()

    def _finish_drag(self):
        try:
            self._controller.end_drag()
        except Exception:
            logger.exception("Sort callback failed")
        self._refresh()

    def _on_drag_enter(self, frame: _SortableItemFrame):
        index = self._index_of(frame)
        if index is None:
            return
        self._controller.hover(index)
        self._refresh()

    def _on_drag_move(self, frame: _SortableItemFrame, pos):
        index = self._index_of(frame)
        if index is None:
            return

        previous_target = self._controller.target_index
        geometry = ItemGeometry(top=0, left=0, width=frame.width(), height=frame.height())
        self._controller.dispatch(DragOverItem.from_pointer(geometry, pos.x(), pos.y(), index, self._direction))
        if self._controller.target_index != previous_target:
            self._refresh()

    def _handle_sort(self, source_index: int, target_index: int):
        if self._on_sort is not None:
            self._on_sort(source_index, target_index)
        self.items_reordered.emit(source_index, target_index)
