"""
pyqt-sortable: drag-and-drop reorderable lists for PyQt6.

Architecture:
- Core: pure ordering logic with no Qt dependency (insertion side, target
  index, render flags, drag session state machine)
- Protocols: process-wide configuration hooks
- Theming: color schemes and item stylesheets for drag indicators
- Widgets: SortableListWidget, the PyQt6 rendering layer

The core and configuration are re-exported here; import widgets and theming
from their subpackages (they require PyQt6).
"""

__version__ = "0.1.0"

from .core import (
    ActiveSession,
    Direction,
    DragEnd,
    DragEnterItem,
    DragEvent,
    DragOverGuard,
    DragOverItem,
    DragOverListener,
    DragSessionState,
    DragStart,
    IdleSession,
    InsertPosition,
    ItemGeometry,
    NullDragOverListener,
    ReorderCommand,
    SortableDragController,
    SortableItemProps,
    Transition,
    calculate_insert_position,
    calculate_target_index,
    compute_item_props,
    create_sort_handler,
    handle,
    move_item,
    should_insert_after,
    should_insert_before,
)
from .exceptions import (
    DragOverGuardError,
    DuplicateItemKeyError,
    InvalidDragIndexError,
    SortableListError,
)
from .protocols import SortableConfig, get_sortable_config, set_sortable_config

__all__ = [
    "__version__",
    "ActiveSession",
    "Direction",
    "DragEnd",
    "DragEnterItem",
    "DragEvent",
    "DragOverGuard",
    "DragOverItem",
    "DragOverListener",
    "DragSessionState",
    "DragStart",
    "IdleSession",
    "InsertPosition",
    "ItemGeometry",
    "NullDragOverListener",
    "ReorderCommand",
    "SortableDragController",
    "SortableItemProps",
    "Transition",
    "calculate_insert_position",
    "calculate_target_index",
    "compute_item_props",
    "create_sort_handler",
    "handle",
    "move_item",
    "should_insert_after",
    "should_insert_before",
    "DragOverGuardError",
    "DuplicateItemKeyError",
    "InvalidDragIndexError",
    "SortableListError",
    "SortableConfig",
    "get_sortable_config",
    "set_sortable_config",
]
