"""pytest configuration and fixtures for pyqt-sortable tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def five_items():
    return ["item #1", "item #2", "item #3", "item #4", "item #5"]


@pytest.fixture(autouse=True)
def reset_sortable_config():
    """Restore default configuration after each test."""
    from pyqt_sortable.protocols import set_sortable_config

    yield
    set_sortable_config(None)
