"""
Core drag-and-drop ordering logic.

Pure Python with no Qt dependency: insertion side and target index
resolution, render flag derivation, and the drag session state machine.
"""

from .insert_position import Direction, InsertPosition, ItemGeometry, calculate_insert_position
from .target_index import (
    SortableItemProps,
    calculate_target_index,
    compute_item_props,
    create_sort_handler,
    move_item,
    should_insert_after,
    should_insert_before,
)
from .drag_session import (
    ActiveSession,
    DragEnd,
    DragEnterItem,
    DragEvent,
    DragOverItem,
    DragSessionState,
    DragStart,
    IdleSession,
    ReorderCommand,
    Transition,
    handle,
)
from .drag_over_guard import DragOverGuard, DragOverListener, NullDragOverListener
from .drag_controller import SortableDragController

__all__ = [
    "Direction",
    "InsertPosition",
    "ItemGeometry",
    "calculate_insert_position",
    "SortableItemProps",
    "calculate_target_index",
    "compute_item_props",
    "create_sort_handler",
    "move_item",
    "should_insert_after",
    "should_insert_before",
    "ActiveSession",
    "DragEnd",
    "DragEnterItem",
    "DragEvent",
    "DragOverItem",
    "DragSessionState",
    "DragStart",
    "IdleSession",
    "ReorderCommand",
    "Transition",
    "handle",
    "DragOverGuard",
    "DragOverListener",
    "NullDragOverListener",
    "SortableDragController",
]
