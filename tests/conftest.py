"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from ataxxie.core.notation import STARTING_LAYOUT, position_from_layout
from ataxxie.core.position import Position

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

# Every square within reach of Red's a1 holds blue: Red must pass.
FORCED_PASS_LAYOUT = "7/7/7/7/bbb4/bbb4/rbb4 r 0"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt application for worker tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def start_position() -> Position:
    return position_from_layout(STARTING_LAYOUT)


@pytest.fixture
def forced_pass_position() -> Position:
    return position_from_layout(FORCED_PASS_LAYOUT)
