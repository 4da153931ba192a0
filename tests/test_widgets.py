"""Tests for sortable list widgets."""

import pytest
from PyQt6.QtCore import QMimeData, QPointF
from PyQt6.QtWidgets import QBoxLayout, QLabel, QWidget

from pyqt_sortable.core import InsertPosition, create_sort_handler
from pyqt_sortable.exceptions import DuplicateItemKeyError
from pyqt_sortable.protocols import SortableConfig, set_sortable_config


def test_sortable_list_widget_creation(qapp, five_items):
    """Test SortableListWidget renders one label per item."""
    from pyqt_sortable.widgets import SortableListWidget

    widget = SortableListWidget(five_items)
    assert widget.items() == five_items
    assert widget.direction().value == "vertical"

    label = widget.item_widget(0)
    assert isinstance(label, QLabel)
    assert label.text() == "item #1"
    assert widget.item_widget(5) is None


def test_direction_from_config(qapp, five_items):
    from pyqt_sortable.widgets import SortableListWidget

    set_sortable_config(SortableConfig(default_direction="horizontal"))
    widget = SortableListWidget(five_items)
    assert widget.direction().value == "horizontal"
    assert widget.layout().direction() == QBoxLayout.Direction.LeftToRight

    widget.set_direction("vertical")
    assert widget.layout().direction() == QBoxLayout.Direction.TopToBottom


def test_custom_renderer_receives_props(qapp, five_items):
    from pyqt_sortable.widgets import SortableListWidget

    calls = []

    def render(props, index):
        calls.append((props.item, index))
        return QWidget()

    SortableListWidget(five_items, render_item=render)
    assert calls == [(item, i) for i, item in enumerate(five_items)]


def test_frames_reconciled_by_key(qapp):
    from pyqt_sortable.widgets import SortableListWidget

    items = [{"title": "a"}, {"title": "b"}, {"title": "c"}]
    widget = SortableListWidget(items, compute_key=lambda item: item["title"])
    frame_a = widget._frames["a"]

    widget.set_items([items[1], items[0]])
    assert widget._frames["a"] is frame_a
    assert set(widget._frames) == {"a", "b"}
    assert widget._ordered_frames[1] is frame_a


def test_index_keys_allow_equal_items(qapp):
    from pyqt_sortable.widgets import SortableListWidget

    widget = SortableListWidget(["x", "y", "x"])
    assert widget.items() == ["x", "y", "x"]
    assert set(widget._frames) == {0, 1, 2}


def test_duplicate_keys_with_key_function(qapp):
    from pyqt_sortable.widgets import SortableListWidget

    widget = SortableListWidget(compute_key=lambda item: item.lower())
    with pytest.raises(DuplicateItemKeyError):
        widget.set_items(["A", "b", "a"])


def test_drag_session_rerenders_and_reorders(qapp, five_items):
    from pyqt_sortable.widgets import SortableListWidget

    widget = SortableListWidget(five_items, compute_key=str)
    widget.set_on_sort(create_sort_handler(widget.items, widget.set_items))
    reordered = []
    widget.items_reordered.connect(lambda source, target: reordered.append((source, target)))

    widget.controller.begin_drag(0)
    widget._refresh()
    assert widget.item_props()[0].is_dragged

    widget.controller.update_target(InsertPosition.AFTER, 3)
    widget._refresh()
    assert "border-bottom: 3px solid #ffff00;" in widget.item_widget(3).styleSheet()
    assert "border-top: 3px solid #ffff00;" in widget.item_widget(4).styleSheet()

    widget._finish_drag()
    assert reordered == [(0, 3)]
    assert widget.items() == ["item #2", "item #3", "item #4", "item #1", "item #5"]
    assert not any(p.is_dragged for p in widget.item_props())


def test_drag_over_listener_scoped_to_session(qapp, five_items):
    from pyqt_sortable.widgets import QtDragOverListener

    window = QWidget()
    listener = QtDragOverListener(window, "application/x-test")
    assert not window.acceptDrops()

    listener.install()
    assert listener.is_installed
    assert window.acceptDrops()

    listener.uninstall()
    assert not listener.is_installed
    assert not window.acceptDrops()


class _DragEventStub:
    """Minimal stand-in for QDragMoveEvent's mimeData()/source() accessors."""

    def __init__(self, mime_type, source):
        self._mime = QMimeData()
        self._mime.setData(mime_type, b"0")
        self._source = source

    def mimeData(self):
        return self._mime

    def source(self):
        return self._source


def _shown_list(qapp, items, **kwargs):
    from pyqt_sortable.widgets import SortableListWidget

    widget = SortableListWidget(items, compute_key=str, **kwargs)
    widget.resize(600, 600)
    widget.show()
    qapp.processEvents()
    return widget


def test_pointer_over_vertical_frame_resolves_target(qapp, five_items):
    widget = _shown_list(qapp, five_items)
    widget.set_on_sort(create_sort_handler(widget.items, widget.set_items))
    frame = widget._ordered_frames[3]
    assert frame.height() > 0

    widget.controller.begin_drag(0)
    widget._on_drag_enter(frame)
    assert widget.controller.hovered_index == 3
    assert widget.item_props()[3].is_hovered

    widget._on_drag_move(frame, QPointF(frame.width() / 2, frame.height() * 0.75))
    assert widget.controller.target_index == 3
    assert "border-bottom: 3px solid #ffff00;" in widget.item_widget(3).styleSheet()
    assert "border-top: 3px solid #ffff00;" in widget.item_widget(4).styleSheet()

    widget._on_drag_move(frame, QPointF(frame.width() / 2, frame.height() * 0.25))
    assert widget.controller.target_index == 2
    assert "border-bottom: 3px solid #ffff00;" in widget.item_widget(2).styleSheet()
    assert "border-top: 3px solid #ffff00;" in widget.item_widget(3).styleSheet()
    assert "border-bottom: 3px" not in widget.item_widget(3).styleSheet()

    widget._finish_drag()
    assert widget.items() == ["item #2", "item #3", "item #1", "item #4", "item #5"]
    assert not widget.controller.is_dragging
    widget.close()


def test_pointer_over_horizontal_frame_resolves_target(qapp, five_items):
    widget = _shown_list(qapp, five_items, direction="horizontal")
    frame = widget._ordered_frames[1]
    assert frame.width() > 0

    widget.controller.begin_drag(4)
    widget._on_drag_enter(frame)

    widget._on_drag_move(frame, QPointF(frame.width() * 0.25, frame.height() / 2))
    assert widget.controller.target_index == 1
    assert "border-left: 3px solid #ffff00;" in widget.item_widget(1).styleSheet()
    assert "border-right: 3px solid #ffff00;" in widget.item_widget(0).styleSheet()

    widget._on_drag_move(frame, QPointF(frame.width() * 0.75, frame.height() / 2))
    assert widget.controller.target_index == 2
    assert "border-left: 3px solid #ffff00;" in widget.item_widget(2).styleSheet()
    assert "border-right: 3px solid #ffff00;" in widget.item_widget(1).styleSheet()

    widget._finish_drag()
    assert widget.controller.target_index is None
    widget.close()


def test_accepts_only_own_drags(qapp, five_items):
    from pyqt_sortable.protocols import get_sortable_config

    widget = _shown_list(qapp, five_items)
    other = _shown_list(qapp, ["x", "y"])
    mime_type = get_sortable_config().mime_type
    own_frame = widget._ordered_frames[0]

    assert not widget._accepts_drag(_DragEventStub(mime_type, own_frame))

    widget.controller.begin_drag(0)
    assert widget._accepts_drag(_DragEventStub(mime_type, own_frame))
    assert not widget._accepts_drag(_DragEventStub("text/plain", own_frame))
    assert not widget._accepts_drag(_DragEventStub(mime_type, other._ordered_frames[0]))
    assert not widget._accepts_drag(_DragEventStub(mime_type, None))

    widget._finish_drag()
    widget.close()
    other.close()
