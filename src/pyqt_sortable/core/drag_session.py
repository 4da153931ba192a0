"""
Drag session states, events, and the pure transition function.

A session is either idle or active. An active session always has a source
index; the hovered and target indices exist only inside an active session,
so a target without a source cannot be represented.

    state = IdleSession()
    state, command = handle(state, DragStart(0))
    state, command = handle(state, DragOverItem(InsertPosition.AFTER, 3))
    state, command = handle(state, DragEnd())
    # command == ReorderCommand(source_index=0, target_index=3)
"""

from dataclasses import dataclass, replace
from typing import NamedTuple, Optional, Union

from .insert_position import (
    Direction, InsertPosition, ItemGeometry, calculate_insert_position,
)
from .target_index import calculate_target_index


@dataclass(frozen=True)
class IdleSession:
    """No drag in progress."""

    @property
    def is_active(self) -> bool:
        return False


@dataclass(frozen=True)
class ActiveSession:
    """A drag in progress, started from `source_index`."""
    source_index: int
    hovered_index: Optional[int] = None
    target_index: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return True


DragSessionState = Union[IdleSession, ActiveSession]


@dataclass(frozen=True)
class DragStart:
    index: int


@dataclass(frozen=True)
class DragEnterItem:
    index: int


@dataclass(frozen=True)
class DragOverItem:
    position: InsertPosition
    index: int

    @classmethod
    def from_pointer(cls, geometry: ItemGeometry, x: float, y: float, index: int,
                     direction: Union[Direction, str] = Direction.VERTICAL) -> "DragOverItem":
        """Build the event from the hovered item's geometry and the pointer location."""
        return cls(calculate_insert_position(geometry, x, y, direction), index)


@dataclass(frozen=True)
class DragEnd:
    pass


DragEvent = Union[DragStart, DragEnterItem, DragOverItem, DragEnd]


class ReorderCommand(NamedTuple):
    """Reorder request emitted by a completed drag."""
    source_index: int
    target_index: int


class Transition(NamedTuple):
    state: DragSessionState
    command: Optional[ReorderCommand] = None


def handle(state: DragSessionState, event: DragEvent) -> Transition:
    """
    Apply one drag event to a session state.

    Args:
        state: Current session state
        event: Tagged drag event

    Returns:
        Transition with the next state and, for a DragEnd that had a resolved
        target, the reorder command to emit.

    Raises:
        TypeError: If `event` is not one of the known drag events
    """
    if isinstance(event, DragStart):
        # Restarting drops any hover/target left by the previous source
        return Transition(ActiveSession(source_index=event.index))

    if isinstance(event, DragEnd):
        if isinstance(state, ActiveSession) and state.target_index is not None:
            return Transition(IdleSession(), ReorderCommand(state.source_index, state.target_index))
        return Transition(IdleSession())

    if isinstance(event, DragEnterItem):
        if not isinstance(state, ActiveSession):
            return Transition(state)
        return Transition(replace(state, hovered_index=event.index))

    if isinstance(event, DragOverItem):
        if not isinstance(state, ActiveSession):
            return Transition(state)
        target = calculate_target_index(event.position, state.source_index, event.index)
        return Transition(replace(state, target_index=target))

    raise TypeError(f"Unknown drag event: {event!r}")
