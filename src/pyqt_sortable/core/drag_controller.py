"""
Imperative drag session owned by one sortable list.

Wraps the pure `handle()` transition function with the four triggers a UI
layer fires (begin, hover, update target, end), validates indices against the
live item count, emits reorder requests to the sort callback, and holds the
drag-over listener for exactly the lifetime of the session.
"""

import logging
from contextlib import ExitStack
from typing import Callable, List, Optional, Sequence, TypeVar

from pyqt_sortable.exceptions import InvalidDragIndexError
from .drag_over_guard import DragOverGuard
from .drag_session import (
    ActiveSession, DragEnd, DragEnterItem, DragEvent, DragOverItem,
    DragSessionState, DragStart, IdleSession, ReorderCommand, handle,
)
from .insert_position import InsertPosition
from .target_index import SortableItemProps, compute_item_props

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SortableDragController:
    """
    Tracks one drag session and turns completed drags into sort requests.

    Usage:
        controller = SortableDragController(on_sort=model.move, item_count=lambda: len(items))
        controller.begin_drag(0)
        controller.hover(3)
        controller.update_target(InsertPosition.AFTER, 3)
        controller.end_drag()  # calls model.move(0, 3)

    A controller must not be shared between lists rendered at the same time.
    """

    def __init__(self, on_sort: Optional[Callable[[int, int], None]] = None,
                 item_count: Optional[Callable[[], int]] = None,
                 drag_over_guard: Optional[DragOverGuard] = None):
        self._on_sort = on_sort
        self._item_count = item_count
        self._guard = drag_over_guard or DragOverGuard()
        self._state: DragSessionState = IdleSession()
        self._session_resources = ExitStack()

    # ---------- State accessors ----------
    @property
    def state(self) -> DragSessionState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state.is_active

    @property
    def source_index(self) -> Optional[int]:
        return self._state.source_index if isinstance(self._state, ActiveSession) else None

    @property
    def hovered_index(self) -> Optional[int]:
        return self._state.hovered_index if isinstance(self._state, ActiveSession) else None

    @property
    def target_index(self) -> Optional[int]:
        return self._state.target_index if isinstance(self._state, ActiveSession) else None

    def set_on_sort(self, on_sort: Optional[Callable[[int, int], None]]):
        self._on_sort = on_sort

    def item_props(self, items: Sequence[T]) -> List[SortableItemProps[T]]:
        """Render flags for `items` under the current session."""
        return compute_item_props(items, self.source_index, self.target_index, self.hovered_index)

    # ---------- Triggers ----------
    def begin_drag(self, index: int):
        """Start a session dragging item `index`."""
        self._validate_index(index)
        self.dispatch(DragStart(index))

    def hover(self, index: int):
        """Record that the pointer entered item `index`."""
        self._validate_index(index)
        self.dispatch(DragEnterItem(index))

    def update_target(self, position: InsertPosition, index: int):
        """Recompute the drop target for the pointer over item `index`. No-op when idle."""
        self.dispatch(DragOverItem(position, index))

    def end_drag(self) -> Optional[ReorderCommand]:
        """Finish the session, emitting a sort request if a target was resolved."""
        return self.dispatch(DragEnd())

    def dispatch(self, event: DragEvent) -> Optional[ReorderCommand]:
        """
        Apply a drag event and run its side effects.

        Returns:
            The reorder command emitted by a DragEnd, if any
        """
        was_active = self._state.is_active
        transition = handle(self._state, event)
        self._state = transition.state

        if isinstance(event, DragStart):
            logger.debug(f"Drag started at index {event.index}")
            if not was_active:
                self._session_resources.enter_context(self._guard.acquire(self))
            return None

        if isinstance(event, DragEnd):
            try:
                return self._emit(transition.command)
            finally:
                # Always release, even when the sort callback raises
                self._session_resources.close()
                if was_active:
                    logger.debug("Drag session reset")

        return None

    # ---------- Internals ----------
    def _validate_index(self, index: int):
        if self._item_count is None:
            return
        count = self._item_count()
        if not 0 <= index < count:
            raise InvalidDragIndexError(index, count)

    def _emit(self, command: Optional[ReorderCommand]) -> Optional[ReorderCommand]:
        if command is None:
            logger.debug("Drag ended without a target; no reorder")
            return None

        if self._item_count is not None:
            count = self._item_count()
            if not (0 <= command.source_index < count and 0 <= command.target_index < count):
                logger.warning(
                    f"Dropping stale reorder {command.source_index} -> {command.target_index} "
                    f"for {count} items"
                )
                return None

        logger.debug(f"Reorder requested: {command.source_index} -> {command.target_index}")
        if self._on_sort is not None:
            self._on_sort(command.source_index, command.target_index)
        return command
