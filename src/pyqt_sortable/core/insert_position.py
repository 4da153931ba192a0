"""
Insertion side resolution for a pointer hovering over an item.

Splits the hovered item's bounding box at its midpoint along the layout axis:
the first half means "insert before", the second half "insert after".
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union


class Direction(Enum):
    """Layout direction of a sortable list."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def coerce(cls, value: Union["Direction", str]) -> "Direction":
        """Accept either a Direction or its string value ('vertical' / 'horizontal')."""
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


class InsertPosition(IntEnum):
    """Side of the hovered item the dragged item would land on."""
    BEFORE = 0
    AFTER = 1


@dataclass(frozen=True)
class ItemGeometry:
    """Bounding box of an item, in the same coordinate space as the pointer."""
    top: float
    left: float
    width: float
    height: float


def calculate_insert_position(geometry: ItemGeometry, x: float, y: float,
                              direction: Union[Direction, str] = Direction.VERTICAL) -> InsertPosition:
    """
    Resolve the insertion side for a pointer at (x, y).

    Args:
        geometry: Bounding box of the hovered item
        x: Pointer x coordinate
        y: Pointer y coordinate
        direction: Layout direction; picks the y-axis (vertical) or x-axis (horizontal)

    Returns:
        InsertPosition.BEFORE if the pointer is in the leading half, AFTER otherwise.
        A pointer exactly on the midpoint resolves to AFTER.
    """
    if Direction.coerce(direction) is Direction.VERTICAL:
        midpoint = geometry.top + geometry.height / 2
        return InsertPosition.BEFORE if y < midpoint else InsertPosition.AFTER

    midpoint = geometry.left + geometry.width / 2
    return InsertPosition.BEFORE if x < midpoint else InsertPosition.AFTER
