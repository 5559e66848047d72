# -*- coding: utf-8 -*-
"""
Wizard - Owns the model and controller of one wizard and drives transitions.

Provides:
- Panel registration
- Switching the current panel with its lifecycle hooks
- Closing with a result code
- Forwarding of model notifications to the host UI
"""

from enum import IntEnum
from typing import Any, Hashable, Optional
import threading

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QWidget

from services.exceptions import HookError, ProgrammerMisuseError, UnknownPanelIdError
from app.config import Config
from .display_surface import DisplaySurface
from .error_boundary import ErrorBoundary
from .panel_descriptor import PanelDescriptor, is_sentinel
from .wizard_context import WizardContext, WizardState
from .wizard_controller import WizardController
from .wizard_dialog import WizardDialog
from .wizard_model import (
    CURRENT_PANEL_DESCRIPTOR_PROPERTY,
    WizardModel,
    parse_button_property,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardResult(IntEnum):
    """Result codes reported when a wizard closes."""
    FINISH = 0
    CANCEL = 1
    ERROR = 2


FINISH_RETURN_CODE = WizardResult.FINISH
CANCEL_RETURN_CODE = WizardResult.CANCEL
ERROR_RETURN_CODE = WizardResult.ERROR


class Wizard(QObject):
    """
    Multi-step wizard.

    States:
    - UNINITIALIZED until the first panel is shown
    - SHOWING while a panel is current
    - CLOSED once close() was called; navigation is ignored from then on

    Usage:
        wizard = Wizard()
        wizard.register_panel("WELCOME", PanelDescriptor("WELCOME", page, next_id=FINISH))
        wizard.set_current_panel("WELCOME")
        code = wizard.show_modal_dialog()
    """

    FINISH_RETURN_CODE = FINISH_RETURN_CODE
    CANCEL_RETURN_CODE = CANCEL_RETURN_CODE
    ERROR_RETURN_CODE = ERROR_RETURN_CODE

    # Signals
    current_panel_changed = pyqtSignal(object, object)  # old_panel_id, new_panel_id
    button_property_changed = pyqtSignal(str, str, object)  # button, attribute, value
    wizard_closed = pyqtSignal(int)  # return code

    def __init__(
        self,
        model: Optional[WizardModel] = None,
        surface: Optional[DisplaySurface] = None,
        owner: Optional[QWidget] = None
    ):
        """
        Initialize the wizard.

        Args:
            model: Model to use; a new one is created if omitted
            surface: Host surface; a WizardDialog is created if omitted
            owner: Parent widget of the default WizardDialog
        """
        super().__init__()
        self._owner_thread = threading.get_ident()

        self.model = model if model is not None else WizardModel(self)
        self.context = WizardContext(self)
        self.error_boundary = ErrorBoundary(self)
        self.controller = WizardController(self)
        self.surface = surface if surface is not None else WizardDialog(owner)

        self.model.add_property_change_listener(self.property_change)
        self.model.listener_failed.connect(self.error_boundary.error_occurred)
        self.surface.attach(self)

        if self.model.get_back_button_text() is None:
            self.model.set_back_button_text(Config.WIZARD_BACK_TEXT)
        if self.model.get_next_button_text() is None:
            self.model.set_next_button_text(Config.WIZARD_NEXT_TEXT)
        if self.model.get_cancel_button_text() is None:
            self.model.set_cancel_button_text(Config.WIZARD_CANCEL_TEXT)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> WizardState:
        return self.context.status

    def get_model(self) -> WizardModel:
        return self.model

    def get_return_code(self) -> Optional[int]:
        """Get the code recorded by the last close(), or None before."""
        return self.context.return_code

    def set_title(self, title: str):
        self.surface.set_title(title)

    def _check_thread(self):
        if Config.ENFORCE_THREAD_AFFINITY:
            assert threading.get_ident() == self._owner_thread, (
                "Wizard used from a thread other than the one that created it"
            )

    # =========================================================================
    # Panels
    # =========================================================================

    def register_panel(self, panel_id: Hashable, descriptor: PanelDescriptor):
        """
        Register a panel.

        Hands the content to the display surface, binds the descriptor to
        this wizard's context and adds it to the model. Registering an id
        twice replaces the earlier descriptor.
        """
        self._check_thread()
        if is_sentinel(panel_id):
            raise ProgrammerMisuseError(f"{panel_id!r} cannot be used as a panel id")

        self.surface.add_panel(panel_id, descriptor.content)
        descriptor.bind(self.context)
        self.model.register_panel(panel_id, descriptor)
        logger.debug(f"Registered panel {panel_id!r}")

    def set_current_panel(self, panel_id: Hashable) -> bool:
        """
        Switch to a panel.

        An undefined or unknown id closes the wizard with ERROR_RETURN_CODE
        and leaves the current panel unchanged.

        Returns:
            True if the panel is now current
        """
        self._check_thread()
        if self.state is WizardState.CLOSED:
            logger.warning(f"Ignoring switch to {panel_id!r}: wizard is closed")
            return False

        try:
            if is_sentinel(panel_id):
                raise UnknownPanelIdError(panel_id, context="set_current_panel")
            return self._switch_to(panel_id)

        except UnknownPanelIdError as e:
            logger.error(f"{e}; closing wizard")
            self.close(ERROR_RETURN_CODE)
            return False

        except HookError:
            self.close(ERROR_RETURN_CODE)
            return False

    def _switch_to(self, panel_id: Hashable) -> bool:
        if not self.model.has_panel(panel_id):
            raise UnknownPanelIdError(panel_id, context="set_current_panel")

        old_descriptor = self.model.get_current_panel_descriptor()
        if old_descriptor is not None:
            self._run_hook(old_descriptor, "about_to_hide")
            if self.state is WizardState.CLOSED:
                return False

        self.context.mark_panel_shown(panel_id)
        if not self.model.set_current_panel(panel_id):
            raise UnknownPanelIdError(panel_id, context="set_current_panel")
        new_descriptor = self.model.get_current_panel_descriptor()
        if self._superseded(new_descriptor):
            return False

        self._run_hook(new_descriptor, "about_to_display")
        if self._superseded(new_descriptor):
            return False

        self.surface.show_panel(panel_id)
        self._run_hook(new_descriptor, "displaying")
        if self._superseded(new_descriptor):
            return False

        logger.info(f"Panel {panel_id!r} is now current")
        return True

    def _superseded(self, descriptor: PanelDescriptor) -> bool:
        # A hook or the button reset closed the wizard or navigated elsewhere
        return (
            self.state is WizardState.CLOSED
            or self.model.get_current_panel_descriptor() is not descriptor
        )

    def _run_hook(self, descriptor: PanelDescriptor, hook_name: str):
        logger.debug(f"{hook_name}: {descriptor.panel_id!r}")
        self.error_boundary.run(descriptor.panel_id, hook_name, getattr(descriptor, hook_name))

    def run_rule(self, descriptor: PanelDescriptor, rule_name: str) -> Any:
        """
        Evaluate a transition rule of a descriptor.

        Returns:
            The panel id, FINISH or NONE; None if the rule failed, in which
            case the wizard was closed with ERROR_RETURN_CODE
        """
        try:
            return self.error_boundary.run(
                descriptor.panel_id, rule_name, getattr(descriptor, rule_name)
            )
        except HookError:
            self.close(ERROR_RETURN_CODE)
            return None

    # =========================================================================
    # Closing
    # =========================================================================

    def close(self, code: int):
        """Record the result code and close the display surface."""
        self._check_thread()
        logger.info(f"Closing wizard with code {code}")
        self.context.mark_closed(code)
        self.surface.close_surface()
        self.wizard_closed.emit(int(code))

    def show_modal_dialog(self) -> Optional[int]:
        """
        Show the wizard and block until it closes.

        Returns:
            The result code passed to close()
        """
        self._check_thread()
        if self.state is WizardState.CLOSED:
            return self.get_return_code()
        if self.model.get_current_panel_descriptor() is None:
            raise ProgrammerMisuseError("show_modal_dialog called before any panel was shown")

        self.surface.exec_modal()
        return self.get_return_code()

    # =========================================================================
    # Model notifications
    # =========================================================================

    def property_change(self, name: str, old_value: Any, new_value: Any):
        """Handle a model property change."""
        if name == CURRENT_PANEL_DESCRIPTOR_PROPERTY:
            self.controller.reset_buttons_to_panel_rules()
            old_id = old_value.panel_id if old_value is not None else None
            new_id = new_value.panel_id if new_value is not None else None
            self.current_panel_changed.emit(old_id, new_id)
            return

        parsed = parse_button_property(name)
        if parsed is not None:
            button, attribute = parsed
            self.button_property_changed.emit(button.value, attribute.value, new_value)
