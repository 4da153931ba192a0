"""Tests for configuration hooks."""

from pyqt_sortable.protocols import SortableConfig, get_sortable_config, set_sortable_config


def test_default_config():
    config = get_sortable_config()
    assert config.default_direction == "vertical"
    assert config.suppress_drag_over is True
    assert config.drag_start_distance is None
    assert config.mime_type == "application/x-pyqt-sortable-index"


def test_set_config_is_global():
    custom = SortableConfig(default_direction="horizontal", indicator_width=5)
    set_sortable_config(custom)
    assert get_sortable_config() is custom

    set_sortable_config(None)
    assert get_sortable_config().default_direction == "vertical"
