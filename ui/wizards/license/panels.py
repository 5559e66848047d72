# -*- coding: utf-8 -*-
"""
License Wizard Panels - Descriptors of the license wizard steps.

Panels:
- WELCOME_PANEL: Choose to install, display or uninstall a license
- INSTALL_PANEL: Install a license key file
- LICENSE_PANEL: Show the content of the installed license
- UNINSTALL_PANEL: Remove the installed license
"""

from typing import Any, Callable, List, Optional

from services.exceptions import LicenseException
from services.license_service import (
    LicenseContent,
    LicenseInstalledEvent,
    LicenseManager,
    LicenseUninstalledEvent,
)
from ui.wizards.framework import FINISH, NONE, PanelDescriptor
from utils.logger import get_logger

logger = get_logger(__name__)


WELCOME_PANEL = "WELCOME_PANEL"
INSTALL_PANEL = "INSTALL_PANEL"
LICENSE_PANEL = "LICENSE_PANEL"
UNINSTALL_PANEL = "UNINSTALL_PANEL"

# Context keys
ACTION_KEY = "license_action"
INSTALLED_KEY = "license_installed"
CONTENT_KEY = "license_content"
ERROR_KEY = "license_error"


class LicenseAction:
    INSTALL = "install"
    DISPLAY = "display"
    UNINSTALL = "uninstall"

    TARGETS = {
        INSTALL: INSTALL_PANEL,
        DISPLAY: LICENSE_PANEL,
        UNINSTALL: UNINSTALL_PANEL,
    }


class LicensePanelDescriptor(PanelDescriptor):
    """Base class of the license wizard descriptors."""

    PANEL_ID = None

    def __init__(self, manager: LicenseManager, content: Any = None):
        super().__init__(self.PANEL_ID, content=content)
        self.manager = manager

    def _report_failure(self, operation: str, error: LicenseException):
        logger.error(f"License {operation} failed: {error}")
        self.context.update_data(ERROR_KEY, error.message)
        if self.content is not None:
            self.content.show_error(error.message)

    def _clear_failure(self):
        self.context.update_data(ERROR_KEY, None)


class WelcomePanelDescriptor(LicensePanelDescriptor):
    """First panel. Next depends on the chosen action."""

    PANEL_ID = WELCOME_PANEL

    def choose(self, action: str):
        """Select what the wizard should do next."""
        if action not in LicenseAction.TARGETS:
            raise ValueError(f"Unknown license action: {action!r}")
        self.context.update_data(ACTION_KEY, action)

    def get_next_panel_id(self):
        action = self.context.get_data(ACTION_KEY, LicenseAction.INSTALL)
        return LicenseAction.TARGETS[action]

    def get_previous_panel_id(self):
        return NONE


class InstallPanelDescriptor(LicensePanelDescriptor):
    """Installs a license key. Next stays disabled until that succeeds."""

    PANEL_ID = INSTALL_PANEL

    def __init__(self, manager: LicenseManager, content: Any = None):
        super().__init__(manager, content)
        self._installed_listeners: List[Callable[[LicenseInstalledEvent], None]] = []

    def add_license_installed_listener(self, listener: Callable[[LicenseInstalledEvent], None]):
        self._installed_listeners.append(listener)

    def remove_license_installed_listener(self, listener: Callable[[LicenseInstalledEvent], None]):
        if listener in self._installed_listeners:
            self._installed_listeners.remove(listener)

    def get_next_panel_id(self):
        return LICENSE_PANEL

    def get_previous_panel_id(self):
        return WELCOME_PANEL

    def about_to_display(self):
        self._clear_failure()
        self.context.set_next_button_enabled(bool(self.context.get_data(INSTALLED_KEY)))

    def install_license(self, path) -> bool:
        """
        Install the license key stored in a file.

        Returns:
            True if the license was installed
        """
        try:
            content = self.manager.install(path)
        except LicenseException as e:
            self._report_failure("installation", e)
            return False

        self._clear_failure()
        self.context.update_data(INSTALLED_KEY, True)
        self.context.update_data(CONTENT_KEY, content)
        self.context.set_next_button_enabled(True)
        self._fire_license_installed(content)
        return True

    def _fire_license_installed(self, content: LicenseContent):
        event = LicenseInstalledEvent(source=self, content=content)
        for listener in list(self._installed_listeners):
            listener(event)


class LicenseContentPanelDescriptor(LicensePanelDescriptor):
    """Shows the installed license. Back leads to INSTALL_PANEL after an installation."""

    PANEL_ID = LICENSE_PANEL

    def get_next_panel_id(self):
        return FINISH

    def get_previous_panel_id(self):
        if self.context.get_data(INSTALLED_KEY):
            return INSTALL_PANEL
        return WELCOME_PANEL

    def about_to_display(self):
        try:
            content = self.manager.verify()
        except LicenseException as e:
            self.context.update_data(CONTENT_KEY, None)
            self._report_failure("verification", e)
            return

        self._clear_failure()
        self.context.update_data(CONTENT_KEY, content)
        if self.content is not None:
            self.content.show_license(content)


class UninstallPanelDescriptor(LicensePanelDescriptor):
    """Removes the installed license. Next stays disabled until that succeeds."""

    PANEL_ID = UNINSTALL_PANEL

    def __init__(self, manager: LicenseManager, content: Any = None):
        super().__init__(manager, content)
        self._uninstalled_listeners: List[Callable[[LicenseUninstalledEvent], None]] = []

    def add_license_uninstalled_listener(self, listener: Callable[[LicenseUninstalledEvent], None]):
        self._uninstalled_listeners.append(listener)

    def remove_license_uninstalled_listener(self, listener: Callable[[LicenseUninstalledEvent], None]):
        if listener in self._uninstalled_listeners:
            self._uninstalled_listeners.remove(listener)

    def get_next_panel_id(self):
        return FINISH

    def get_previous_panel_id(self):
        return WELCOME_PANEL

    def about_to_display(self):
        self._clear_failure()
        if self.content is not None:
            self.content.set_uninstall_enabled(True)
        self.context.set_next_button_enabled(False)

    def uninstall_license(self) -> bool:
        """
        Remove the installed license.

        Returns:
            True if the license was removed
        """
        try:
            self.manager.uninstall()
        except LicenseException as e:
            self._report_failure("uninstallation", e)
            return False

        self._clear_failure()
        self.context.update_data(INSTALLED_KEY, False)
        self.context.update_data(CONTENT_KEY, None)
        if self.content is not None:
            self.content.set_uninstall_enabled(False)
        self.context.set_next_button_enabled(True)
        self._fire_license_uninstalled()
        return True

    def _fire_license_uninstalled(self):
        event = LicenseUninstalledEvent(source=self)
        for listener in list(self._uninstalled_listeners):
            listener(event)


def create_license_panels(manager: LicenseManager) -> List[LicensePanelDescriptor]:
    """Create the four license wizard descriptors without content."""
    return [
        WelcomePanelDescriptor(manager),
        InstallPanelDescriptor(manager),
        LicenseContentPanelDescriptor(manager),
        UninstallPanelDescriptor(manager),
    ]
