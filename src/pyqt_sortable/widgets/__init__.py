"""
PyQt6 widgets for drag-and-drop sortable lists.

Thin Qt layer over pyqt_sortable.core: translates drag events into session
triggers and renders items from their render flags.
"""

from .drag_over_filter import QtDragOverListener
from .sortable_list import (
    RenderItem,
    SortableListWidget,
    create_item_label,
    default_item_renderer,
)

__all__ = [
    "QtDragOverListener",
    "RenderItem",
    "SortableListWidget",
    "create_item_label",
    "default_item_renderer",
]
