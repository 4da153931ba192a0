"""
Theming and styling system.

Color schemes and stylesheet generation for list containers, items, and
drag-and-drop indicators.
"""

from .color_scheme import ColorScheme
from .style_generator import StyleSheetGenerator

__all__ = [
    "ColorScheme",
    "StyleSheetGenerator",
]
