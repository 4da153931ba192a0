"""Sortable list exceptions."""


class SortableListError(Exception):
    """Base class for errors raised by pyqt-sortable."""


class InvalidDragIndexError(SortableListError, IndexError):
    """Raised when a drag trigger names an index outside the current item sequence."""

    def __init__(self, index: int, item_count: int):
        self.index = index
        self.item_count = item_count
        super().__init__(f"Drag index {index} out of range for {item_count} items")


class DragOverGuardError(SortableListError, RuntimeError):
    """Raised when a session tries to acquire the drag-over listener twice."""


class DuplicateItemKeyError(SortableListError, ValueError):
    """Raised when the key function maps two items to the same key."""
