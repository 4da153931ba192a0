"""
Color scheme for sortable lists.

Centralizes the colors used by the list container, its items, and the
drag-and-drop indicators, with dark/light variants and JSON configuration.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)


@dataclass
class ColorScheme:
    """
    Semantic colors for a sortable list.

    The insertion indicator defaults to yellow so the seam stands out against
    both item and list backgrounds.
    """

    # ========== CONTAINER ==========
    list_bg: Tuple[int, int, int] = (204, 204, 204)     # #cccccc - List background
    list_border: Tuple[int, int, int] = (85, 85, 85)    # #555555 - List border

    # ========== ITEMS ==========
    item_bg: Tuple[int, int, int] = (255, 255, 255)     # #ffffff - Item background
    item_border: Tuple[int, int, int] = (0, 0, 0)       # #000000 - Item border
    item_text: Tuple[int, int, int] = (0, 0, 0)         # #000000 - Item text
    item_hover_bg: Tuple[int, int, int] = (235, 245, 255)  # #ebf5ff - Item under the pointer

    # ========== DRAG INDICATORS ==========
    insert_indicator: Tuple[int, int, int] = (255, 255, 0)  # #ffff00 - Insertion seam
    dragged_item_bg: Tuple[int, int, int] = (240, 240, 240)  # #f0f0f0 - Item being dragged

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        """
        Convert RGB tuple to QColor object.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            QColor: Qt color object
        """
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Create a dark theme variant."""
        return cls(
            list_bg=(30, 30, 30),
            list_border=(85, 85, 85),
            item_bg=(64, 64, 64),
            item_border=(102, 102, 102),
            item_text=(255, 255, 255),
            item_hover_bg=(80, 80, 80),
            insert_indicator=(0, 170, 255),
            dragged_item_bg=(42, 42, 42),
        )

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """Create a light theme variant (the default colors)."""
        return cls()

    @classmethod
    def load_color_scheme_from_config(cls, config_path: Optional[str] = None) -> 'ColorScheme':
        """
        Load color scheme from external configuration file.

        Args:
            config_path: Path to JSON config file (optional)

        Returns:
            ColorScheme: Loaded color scheme or default if file not found
        """
        if config_path and Path(config_path).exists():
            try:
                with open(config_path, 'r') as f:
                    config = json.load(f)

                known = set(cls.__dataclass_fields__)
                scheme_kwargs = {
                    key: tuple(value)
                    for key, value in config.items()
                    if key in known and isinstance(value, list) and len(value) == 3
                }
                return cls(**scheme_kwargs)

            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load color scheme from {config_path}: {e}")

        return cls()

    def get_color_dict(self) -> Dict[str, Tuple[int, int, int]]:
        """
        Get all colors as a dictionary for serialization or inspection.

        Returns:
            Dict[str, Tuple[int, int, int]]: Dictionary of color name to RGB tuple
        """
        return {name: getattr(self, name) for name in self.__dataclass_fields__}

    def save_to_json(self, config_path: str) -> bool:
        """
        Save color scheme to JSON configuration file.

        Args:
            config_path: Path to save JSON config file

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            json_dict = {k: list(v) for k, v in self.get_color_dict().items()}
            with open(config_path, 'w') as f:
                json.dump(json_dict, f, indent=2, sort_keys=True)

            logger.info(f"Color scheme saved to {config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save color scheme to {config_path}: {e}")
            return False
