"""
Qt drag-over listener: accept a sortable drag anywhere in the window.

By default Qt refuses a drag over any widget that does not accept drops,
showing the "forbidden" cursor. While a session is active this listener makes
the list's window accept drops and installs an application-wide event filter
that accepts drag enter/move events carrying the list's MIME format.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtWidgets import QApplication, QWidget

from pyqt_sortable.core import DragOverListener

logger = logging.getLogger(__name__)

_DRAG_EVENT_TYPES = (QEvent.Type.DragEnter, QEvent.Type.DragMove)


class _DragOverFilter(QObject):
    """Accepts drag enter/move events carrying one MIME format."""

    def __init__(self, mime_type: str, parent=None):
        super().__init__(parent)
        self._mime_type = mime_type

    def eventFilter(self, obj, event):
        if event.type() in _DRAG_EVENT_TYPES:
            mime = event.mimeData()
            if mime is not None and mime.hasFormat(self._mime_type):
                event.acceptProposedAction()
        # Never consume: item frames still see the event
        return False


class QtDragOverListener(DragOverListener):
    """Per-session drag-over suppression for one window."""

    def __init__(self, window: Optional[QWidget], mime_type: str):
        self._window = window
        self._mime_type = mime_type
        self._filter: Optional[_DragOverFilter] = None
        self._previous_accept_drops: Optional[bool] = None

    def install(self) -> None:
        app = QApplication.instance()
        if app is None:
            logger.warning("No QApplication; drag-over suppression disabled")
            return

        self._filter = _DragOverFilter(self._mime_type)
        app.installEventFilter(self._filter)
        if self._window is not None:
            self._previous_accept_drops = self._window.acceptDrops()
            self._window.setAcceptDrops(True)

    def uninstall(self) -> None:
        if self._filter is not None:
            app = QApplication.instance()
            if app is not None:
                app.removeEventFilter(self._filter)
            self._filter.deleteLater()
            self._filter = None

        if self._window is not None and self._previous_accept_drops is not None:
            self._window.setAcceptDrops(self._previous_accept_drops)
            self._previous_accept_drops = None

    @property
    def is_installed(self) -> bool:
        return self._filter is not None
