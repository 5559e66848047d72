# -*- coding: utf-8 -*-
"""
Wizard Controller - Turns Back/Next/Cancel requests into wizard transitions.

Handles:
- Back and Next along the current descriptor's transition rules
- Finishing and cancelling the wizard
- Deriving the navigation button state from the current descriptor
"""

from PyQt5.QtCore import QObject, pyqtSlot

from app.config import Config
from services.exceptions import ProgrammerMisuseError
from .panel_descriptor import FINISH, NONE, PanelDescriptor
from .wizard_context import WizardState
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardController(QObject):
    """
    Reacts to navigation requests for one wizard.

    Holds no state of its own besides the wizard it belongs to.
    """

    def __init__(self, wizard: 'Wizard'):
        super().__init__(wizard)
        self.wizard = wizard

    def _require_current_descriptor(self, action: str) -> PanelDescriptor:
        descriptor = self.wizard.model.get_current_panel_descriptor()
        if descriptor is None:
            raise ProgrammerMisuseError(f"{action} requested before any panel was shown")
        return descriptor

    def _is_closed(self) -> bool:
        return self.wizard.context.status is WizardState.CLOSED

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    @pyqtSlot()
    def on_back(self):
        """Handle back button."""
        if self._is_closed():
            logger.debug("Back ignored: wizard is closed")
            return

        descriptor = self._require_current_descriptor("Back")
        previous_id = self.wizard.run_rule(descriptor, "get_previous_panel_id")
        if previous_id is None:
            return
        if previous_id is NONE:
            logger.debug(f"Cannot go back: {descriptor.panel_id!r} has no previous panel")
            return

        logger.info(f"Navigating back: {descriptor.panel_id!r} → {previous_id!r}")
        self.wizard.set_current_panel(previous_id)

    @pyqtSlot()
    def on_next(self):
        """Handle next/finish button."""
        if self._is_closed():
            logger.debug("Next ignored: wizard is closed")
            return

        descriptor = self._require_current_descriptor("Next")
        next_id = self.wizard.run_rule(descriptor, "get_next_panel_id")
        if next_id is None:
            return
        if next_id is FINISH:
            logger.info(f"Finishing wizard from {descriptor.panel_id!r}")
            self.wizard.close(self.wizard.FINISH_RETURN_CODE)
            return
        if next_id is NONE:
            logger.debug(f"Cannot go next: {descriptor.panel_id!r} has no next panel")
            return

        logger.info(f"Navigating: {descriptor.panel_id!r} → {next_id!r}")
        self.wizard.set_current_panel(next_id)

    @pyqtSlot()
    def on_cancel(self):
        """Handle cancel button. Closes the wizard without calling any hook."""
        logger.info("Wizard cancelled")
        self.wizard.close(self.wizard.CANCEL_RETURN_CODE)

    # =========================================================================
    # Button rules
    # =========================================================================

    def reset_buttons_to_panel_rules(self):
        """
        Set the navigation buttons from the current descriptor's rules.

        Runs on every current panel change, before the incoming panel's
        about_to_display hook, which may override the result.
        """
        descriptor = self.wizard.model.get_current_panel_descriptor()
        if descriptor is None:
            return

        model = self.wizard.model
        model.set_cancel_button_text(Config.WIZARD_CANCEL_TEXT)
        model.set_cancel_button_enabled(True)

        previous_id = self.wizard.run_rule(descriptor, "get_previous_panel_id")
        next_id = self.wizard.run_rule(descriptor, "get_next_panel_id")
        if previous_id is None or next_id is None:
            return

        model.set_back_button_enabled(previous_id is not NONE)
        model.set_next_button_enabled(next_id is not NONE)

        if next_id is FINISH:
            model.set_next_button_text(Config.WIZARD_FINISH_TEXT)
        else:
            model.set_next_button_text(Config.WIZARD_NEXT_TEXT)
