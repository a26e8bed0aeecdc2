# Headless Qt for widget tests; must be set before pytest-qt creates the QApplication.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from responsive.design.breakpoints import BreakpointRegistry  # noqa: E402


FRAMEWORK = {"MOBILE": 0, "TABLET": 600, "DESKTOP": 1024}


@pytest.fixture
def make_registry():
    """Factory building registries over MOBILE/TABLET/DESKTOP breakpoints."""

    def _make(width, orientation="portrait", thresholds=None):
        return BreakpointRegistry.from_mapping(
            width, thresholds or FRAMEWORK, orientation=orientation
        )

    return _make
