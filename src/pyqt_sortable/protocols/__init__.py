"""
Application-level configuration hooks.

Lets an application set process-wide defaults for every sortable list.
"""

from .sortable_config import SortableConfig, set_sortable_config, get_sortable_config

__all__ = [
    "SortableConfig",
    "set_sortable_config",
    "get_sortable_config",
]
