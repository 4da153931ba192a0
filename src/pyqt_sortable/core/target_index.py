"""
Target index resolution and per-item insertion indicators.

The list is treated as "closed up" at the source position before the dragged
item is reinserted, so the same insertion side maps to a different target
depending on whether the hovered item sits ahead of or behind the source.
The indicator functions are the inverse mapping: given a target they find the
one seam (after item i / before item i+1) the drop would insert into.

Everything here is pure and total; no function raises on stale or
out-of-range indices.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from .insert_position import InsertPosition

logger = logging.getLogger(__name__)

T = TypeVar("T")


def calculate_target_index(position: InsertPosition, source_index: int, index: int) -> int:
    """
    Compute the index the dragged item would occupy if dropped on item `index`.

    Args:
        position: Insertion side relative to the hovered item
        source_index: Index of the item being dragged
        index: Index of the hovered item

    Returns:
        Target index in the reordered sequence
    """
    if source_index == index:
        return index

    if source_index < index:
        if position == InsertPosition.BEFORE:
            return max(0, index - 1)
        return index

    if position == InsertPosition.BEFORE:
        return index
    return index + 1


def should_insert_before(source_index: Optional[int], target_index: Optional[int], index: int) -> bool:
    """Whether item `index` should show the insertion seam on its leading edge."""
    if source_index is None or target_index is None:
        return False
    if target_index >= source_index:
        return target_index == index - 1
    return target_index == index


def should_insert_after(source_index: Optional[int], target_index: Optional[int], index: int) -> bool:
    """Whether item `index` should show the insertion seam on its trailing edge."""
    if source_index is None or target_index is None:
        return False
    if target_index > source_index:
        return target_index == index
    return target_index == index + 1


@dataclass(frozen=True)
class SortableItemProps(Generic[T]):
    """Render flags handed to the item renderer. Derived on every state change."""
    item: T
    index: int
    is_drag_item_insert_before: bool = False
    is_drag_item_insert_after: bool = False
    is_dragged: bool = False
    is_hovered: bool = False


def _live_index(index: Optional[int], item_count: int) -> Optional[int]:
    if index is None or not 0 <= index < item_count:
        return None
    return index


def compute_item_props(items: Sequence[T], source_index: Optional[int] = None,
                       target_index: Optional[int] = None,
                       hovered_index: Optional[int] = None) -> List[SortableItemProps[T]]:
    """
    Derive render flags for every item.

    Indices outside the current sequence (left over after the items changed
    mid-drag) are treated as absent, so they never produce an indicator.
    """
    count = len(items)
    source = _live_index(source_index, count)
    target = _live_index(target_index, count)
    hovered = _live_index(hovered_index, count)

    return [
        SortableItemProps(
            item=item,
            index=i,
            is_drag_item_insert_before=should_insert_before(source, target, i),
            is_drag_item_insert_after=should_insert_after(source, target, i),
            is_dragged=source == i,
            is_hovered=hovered == i,
        )
        for i, item in enumerate(items)
    ]


def move_item(items: Sequence[T], source_index: int, target_index: int) -> List[T]:
    """
    Return a new list with the item at `source_index` moved to `target_index`.

    Out-of-range indices leave the order unchanged.
    """
    result = list(items)
    count = len(result)
    if not (0 <= source_index < count and 0 <= target_index < count):
        logger.warning(f"Ignoring move {source_index} -> {target_index} for {count} items")
        return result
    if source_index == target_index:
        return result

    moved = result.pop(source_index)
    result.insert(target_index, moved)
    return result


def create_sort_handler(get_items: Callable[[], Sequence[T]],
                        set_items: Callable[[List[T]], Any]) -> Callable[[int, int], None]:
    """
    Build an on_sort callback that applies each reorder to caller-owned items.

    Usage:
        items = ["a", "b", "c"]
        def store(new_items):
            items[:] = new_items
        on_sort = create_sort_handler(lambda: items, store)

    Args:
        get_items: Returns the current items
        set_items: Receives the reordered list

    Returns:
        Callable taking (source_index, target_index)
    """
    def on_sort(source_index: int, target_index: int) -> None:
        if source_index == target_index:
            return
        set_items(move_item(get_items(), source_index, target_index))

    return on_sort
