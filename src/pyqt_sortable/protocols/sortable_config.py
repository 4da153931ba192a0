"""Base configuration class for sortable lists.

Provides hooks for applications to customize drag-and-drop behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SortableConfig:
    """Base configuration for sortable list behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        default_direction: Layout direction used when a list is created without one
        mime_type: MIME format carrying the dragged index between item frames
        drag_start_distance: Pixels the pointer must travel before a drag starts
            (None uses the platform's QApplication.startDragDistance())
        suppress_drag_over: Whether to accept drag-over anywhere while a session is active
        indicator_width: Width in pixels of the insertion seam
        dragged_opacity: Opacity applied to the item being dragged
        item_spacing: Gap in pixels between items
    """

    default_direction: str = "vertical"
    mime_type: str = "application/x-pyqt-sortable-index"
    drag_start_distance: Optional[int] = None
    suppress_drag_over: bool = True
    indicator_width: int = 3
    dragged_opacity: float = 0.3
    item_spacing: int = 4


# Global config instance (set by application)
_sortable_config: Optional[SortableConfig] = None


def set_sortable_config(config: Optional[SortableConfig]) -> None:
    """Set the global sortable list configuration.

    Args:
        config: SortableConfig instance, or None to restore defaults
    """
    global _sortable_config
    _sortable_config = config


def get_sortable_config() -> SortableConfig:
    """Get the current sortable list configuration.

    Returns:
        Current SortableConfig or default if not set
    """
    if _sortable_config is None:
        return SortableConfig()
    return _sortable_config
