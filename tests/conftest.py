"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from huepicker.colors import from_rgb
from huepicker.core import PickerController
from huepicker.models import PickerConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Default picker config (alpha enabled, starts on red)."""
    return PickerConfig()


@pytest.fixture
def opaque_config():
    """Picker config with alpha disabled."""
    return PickerConfig(enable_alpha=False)


@pytest.fixture
def controller(config):
    """Controller holding opaque red."""
    return PickerController(config)


@pytest.fixture
def orange():
    """Opaque orange (255, 128, 0)."""
    return from_rgb(255, 128, 0)


@pytest.fixture
def muted_blue():
    """A color that is not degenerate in RGB, HSV or HSL, with partial alpha."""
    from huepicker.models import HSVColor

    return HSVColor(alpha=0.8, hue=200.0, saturation=0.6, value=0.7)
