# -*- coding: utf-8 -*-
"""
Shared fixtures for the wizard tests.
"""

import os
import sys
from pathlib import Path

# Keep test runs out of the log directory (must be set before app.config loads)
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from ui.wizards.framework import FINISH, NONE, HeadlessSurface, PanelDescriptor, Wizard


class HookRecorder:
    """Collects (hook, panel_id) pairs in call order."""

    def __init__(self):
        self.calls = []

    def descriptor(self, panel_id, next_id=FINISH, previous_id=NONE, content=None):
        return PanelDescriptor(
            panel_id,
            content=content,
            next_id=next_id,
            previous_id=previous_id,
            on_about_to_hide=lambda ctx: self.calls.append(("about_to_hide", panel_id)),
            on_about_to_display=lambda ctx: self.calls.append(("about_to_display", panel_id)),
            on_displaying=lambda ctx: self.calls.append(("displaying", panel_id)),
        )

    def hooks_for(self, panel_id):
        return [hook for hook, pid in self.calls if pid == panel_id]


@pytest.fixture
def recorder():
    return HookRecorder()


@pytest.fixture
def surface():
    return HeadlessSurface()


@pytest.fixture
def wizard(qapp, surface):
    """Wizard without widgets."""
    return Wizard(surface=surface)


@pytest.fixture
def license_chain_wizard(wizard, recorder):
    """
    Wizard with the chain WELCOME → INSTALL → LICENSE → UNINSTALL → FINISH,
    showing WELCOME.
    """
    wizard.register_panel("WELCOME", recorder.descriptor("WELCOME", next_id="INSTALL"))
    wizard.register_panel(
        "INSTALL", recorder.descriptor("INSTALL", next_id="LICENSE", previous_id="WELCOME")
    )
    wizard.register_panel(
        "LICENSE", recorder.descriptor("LICENSE", next_id="UNINSTALL", previous_id="INSTALL")
    )
    wizard.register_panel(
        "UNINSTALL", recorder.descriptor("UNINSTALL", next_id=FINISH, previous_id="LICENSE")
    )
    wizard.set_current_panel("WELCOME")
    recorder.calls.clear()
    return wizard
