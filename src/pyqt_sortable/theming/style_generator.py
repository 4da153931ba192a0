"""
QStyleSheet generator for sortable lists.

Turns a ColorScheme and an item's render flags into stylesheet strings, so
item renderers paint the insertion seam on the correct edge for the list's
direction.
"""

import logging
from typing import Optional, Union

from pyqt_sortable.core import Direction, SortableItemProps
from pyqt_sortable.protocols import SortableConfig, get_sortable_config
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)

# Leading/trailing border edges per layout direction
_EDGES = {
    Direction.VERTICAL: ("top", "bottom"),
    Direction.HORIZONTAL: ("left", "right"),
}


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from ColorScheme objects.

    Usage:
        generator = StyleSheetGenerator(ColorScheme())
        label.setStyleSheet(generator.generate_item_style(props, Direction.VERTICAL))
    """

    def __init__(self, color_scheme: Optional[ColorScheme] = None,
                 config: Optional[SortableConfig] = None):
        self.color_scheme = color_scheme or ColorScheme()
        self._config = config

    @property
    def config(self) -> SortableConfig:
        return self._config or get_sortable_config()

    def update_color_scheme(self, color_scheme: ColorScheme):
        """
        Update the color scheme used for style generation.

        Args:
            color_scheme: New ColorScheme instance
        """
        self.color_scheme = color_scheme

    def _rgba(self, color, alpha: float) -> str:
        r, g, b = color
        return f"rgba({r}, {g}, {b}, {int(round(alpha * 255))})"

    def generate_list_style(self, object_name: str) -> str:
        """
        Generate QStyleSheet for the list container.

        Args:
            object_name: objectName of the container, used as the selector

        Returns:
            str: QStyleSheet scoped to the container
        """
        cs = self.color_scheme
        return f"""
            QWidget#{object_name} {{
                background-color: {cs.to_hex(cs.list_bg)};
                border: 1px solid {cs.to_hex(cs.list_border)};
            }}
        """

    def generate_item_style(self, props: SortableItemProps,
                            direction: Union[Direction, str] = Direction.VERTICAL) -> str:
        """
        Generate QStyleSheet for one item from its render flags.

        The dragged item is dimmed; the insertion seam is drawn on the leading
        edge for insert-before and on the trailing edge for insert-after.

        Args:
            props: Render flags of the item
            direction: Layout direction of the list

        Returns:
            str: QStyleSheet for the item widget
        """
        cs = self.color_scheme
        cfg = self.config
        leading, trailing = _EDGES[Direction.coerce(direction)]

        opacity = cfg.dragged_opacity if props.is_dragged else 1.0
        if props.is_dragged:
            background = cs.to_hex(cs.dragged_item_bg)
        elif props.is_hovered:
            background = cs.to_hex(cs.item_hover_bg)
        else:
            background = cs.to_hex(cs.item_bg)

        rules = [
            "padding: 20px 10px;",
            f"background-color: {background};",
            f"color: {self._rgba(cs.item_text, opacity)};",
            f"border: 2px solid {self._rgba(cs.item_border, opacity)};",
        ]
        indicator = cs.to_hex(cs.insert_indicator)
        if props.is_drag_item_insert_before:
            rules.append(f"border-{leading}: {cfg.indicator_width}px solid {indicator};")
        if props.is_drag_item_insert_after:
            rules.append(f"border-{trailing}: {cfg.indicator_width}px solid {indicator};")

        return "\n".join(rules)
