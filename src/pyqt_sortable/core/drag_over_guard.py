"""
Scoped lifetime for the process-wide drag-over listener.

While a drag session is active the platform's default drag-over refusal is
suppressed so a drop is accepted anywhere. The listener doing that is global
(it sits on the application), so its lifetime is tied to the session that
needs it:

    guard = DragOverGuard(QtDragOverListener)
    with guard.acquire(session_owner):
        ...  # listener installed
    # listener removed, even on exception

Each owner gets its own listener instance. Releasing one session never
uninstalls a listener held by another list's session.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Callable, Dict, Iterator

from pyqt_sortable.exceptions import DragOverGuardError

logger = logging.getLogger(__name__)


class DragOverListener(ABC):
    """A global drag-over hook that can be installed and removed."""

    @abstractmethod
    def install(self) -> None:
        """Start suppressing the default drag-over behavior."""

    @abstractmethod
    def uninstall(self) -> None:
        """Stop suppressing the default drag-over behavior."""


class NullDragOverListener(DragOverListener):
    """Listener for contexts without a UI event loop."""

    def install(self) -> None:
        pass

    def uninstall(self) -> None:
        pass


class DragOverGuard:
    """Hands out one installed listener per active drag session."""

    def __init__(self, listener_factory: Callable[[], DragOverListener] = NullDragOverListener):
        self._listener_factory = listener_factory
        self._active: Dict[int, DragOverListener] = {}

    @contextmanager
    def acquire(self, owner: object) -> Iterator[DragOverListener]:
        """
        Install a listener for `owner` for the duration of the with-block.

        Args:
            owner: The session holding the listener (identity is used as key)

        Raises:
            DragOverGuardError: If `owner` already holds a listener
        """
        key = id(owner)
        if key in self._active:
            raise DragOverGuardError(f"{type(owner).__name__} already holds a drag-over listener")

        listener = self._listener_factory()
        listener.install()
        self._active[key] = listener
        logger.debug(f"Installed drag-over listener for {type(owner).__name__} ({len(self._active)} active)")
        try:
            yield listener
        finally:
            self._active.pop(key, None)
            listener.uninstall()
            logger.debug(f"Removed drag-over listener for {type(owner).__name__} ({len(self._active)} active)")

    def is_held_by(self, owner: object) -> bool:
        return id(owner) in self._active

    @property
    def active_count(self) -> int:
        return len(self._active)
