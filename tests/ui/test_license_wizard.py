# -*- coding: utf-8 -*-
"""
Tests for the license wizard.

Tests cover:
- Install, display and uninstall flows without widgets
- Failures reported through the wizard context
- The same flows driven through the dialog pages
"""

import pytest

from app.config import Config
from services.license_service import MemoryLicenseManager
from ui.wizards.framework import HeadlessSurface, WizardResult, WizardState
from ui.wizards.license import (
    INSTALL_PANEL,
    LICENSE_PANEL,
    UNINSTALL_PANEL,
    WELCOME_PANEL,
    LicenseAction,
    LicenseWizard,
)
from ui.wizards.license.pages import InstallPage, LicenseContentPage, UninstallPage, WelcomePage
from ui.wizards.license.panels import CONTENT_KEY, ERROR_KEY, INSTALLED_KEY


@pytest.fixture
def manager():
    return MemoryLicenseManager("Demo Product", holder="ACME")


@pytest.fixture
def key_file(tmp_path):
    path = tmp_path / "demo.lic"
    path.write_text("LICENSE-KEY")
    return path


@pytest.fixture
def license_wizard(qapp, manager):
    """License wizard without widgets."""
    return LicenseWizard(manager, surface=HeadlessSurface())


class TestInstallFlow:
    """Install a key, look at it, finish."""

    def test_starts_on_welcome(self, license_wizard):
        assert license_wizard.context.current_panel_id == WELCOME_PANEL
        assert license_wizard.model.get_back_button_enabled() is False
        assert license_wizard.model.get_next_button_enabled() is True
        assert license_wizard.surface.title == "Demo Product - License Wizard"

    def test_panels_have_no_content_without_dialog(self, license_wizard):
        assert all(d.content is None for d in license_wizard.panels.values())

    def test_install_is_default_action(self, license_wizard):
        license_wizard.controller.on_next()

        assert license_wizard.context.current_panel_id == INSTALL_PANEL
        assert license_wizard.model.get_next_button_enabled() is False

    def test_install_enables_next(self, license_wizard, key_file):
        events = []
        install = license_wizard.panels[INSTALL_PANEL]
        install.add_license_installed_listener(events.append)
        license_wizard.controller.on_next()

        assert install.install_license(key_file) is True

        assert license_wizard.model.get_next_button_enabled() is True
        assert license_wizard.context.get_data(INSTALLED_KEY) is True
        assert len(events) == 1
        assert events[0].content.info == "demo.lic"
        assert events[0].source is install

    def test_removed_listener_is_not_called(self, license_wizard, key_file):
        events = []
        install = license_wizard.panels[INSTALL_PANEL]
        install.add_license_installed_listener(events.append)
        install.remove_license_installed_listener(events.append)
        license_wizard.controller.on_next()

        install.install_license(key_file)

        assert events == []

    def test_missing_key_file_reports_error(self, license_wizard, tmp_path):
        license_wizard.controller.on_next()

        ok = license_wizard.panels[INSTALL_PANEL].install_license(tmp_path / "missing.lic")

        assert ok is False
        assert "not found" in license_wizard.context.get_data(ERROR_KEY)
        assert license_wizard.model.get_next_button_enabled() is False
        assert license_wizard.state is WizardState.SHOWING

    def test_full_install_flow(self, license_wizard, key_file):
        controller = license_wizard.controller
        controller.on_next()
        license_wizard.panels[INSTALL_PANEL].install_license(key_file)

        controller.on_next()
        assert license_wizard.context.current_panel_id == LICENSE_PANEL
        assert license_wizard.context.get_data(CONTENT_KEY).holder == "ACME"
        assert license_wizard.model.get_next_button_text() == Config.WIZARD_FINISH_TEXT

        controller.on_back()
        assert license_wizard.context.current_panel_id == INSTALL_PANEL
        assert license_wizard.model.get_next_button_enabled() is True

        controller.on_next()
        controller.on_next()
        assert license_wizard.get_return_code() == WizardResult.FINISH


class TestDisplayFlow:
    """Display the installed license."""

    def test_display_installed_license(self, license_wizard, manager, key_file):
        manager.install(key_file)
        license_wizard.panels[WELCOME_PANEL].choose(LicenseAction.DISPLAY)

        license_wizard.controller.on_next()

        assert license_wizard.context.current_panel_id == LICENSE_PANEL
        assert license_wizard.context.get_data(CONTENT_KEY).subject == "Demo Product"
        assert license_wizard.context.get_data(ERROR_KEY) is None

    def test_display_without_license_reports_error(self, license_wizard):
        license_wizard.panels[WELCOME_PANEL].choose(LicenseAction.DISPLAY)

        license_wizard.controller.on_next()

        assert license_wizard.context.current_panel_id == LICENSE_PANEL
        assert license_wizard.context.get_data(CONTENT_KEY) is None
        assert "No license installed" in license_wizard.context.get_data(ERROR_KEY)

    def test_back_without_install_returns_to_welcome(self, license_wizard):
        license_wizard.panels[WELCOME_PANEL].choose(LicenseAction.DISPLAY)
        license_wizard.controller.on_next()

        license_wizard.controller.on_back()

        assert license_wizard.context.current_panel_id == WELCOME_PANEL


class TestUninstallFlow:
    """Remove the installed license."""

    def test_uninstall_flow(self, license_wizard, manager, key_file):
        events = []
        manager.install(key_file)
        uninstall = license_wizard.panels[UNINSTALL_PANEL]
        uninstall.add_license_uninstalled_listener(events.append)
        license_wizard.panels[WELCOME_PANEL].choose(LicenseAction.UNINSTALL)

        license_wizard.controller.on_next()
        assert license_wizard.context.current_panel_id == UNINSTALL_PANEL
        assert license_wizard.model.get_next_button_enabled() is False

        assert uninstall.uninstall_license() is True
        assert license_wizard.model.get_next_button_enabled() is True
        assert len(events) == 1

        license_wizard.controller.on_next()
        assert license_wizard.get_return_code() == WizardResult.FINISH

    def test_uninstall_without_license_reports_error(self, license_wizard):
        license_wizard.panels[WELCOME_PANEL].choose(LicenseAction.UNINSTALL)
        license_wizard.controller.on_next()

        assert license_wizard.panels[UNINSTALL_PANEL].uninstall_license() is False

        assert license_wizard.context.get_data(ERROR_KEY) is not None
        assert license_wizard.model.get_next_button_enabled() is False


def test_unknown_action_is_rejected(license_wizard):
    with pytest.raises(ValueError):
        license_wizard.panels[WELCOME_PANEL].choose("reinstall")


class TestDialogPages:
    """Drive the license wizard through its pages."""

    @pytest.fixture
    def dialog_wizard(self, qtbot, manager):
        wizard = LicenseWizard(manager)
        qtbot.addWidget(wizard.surface)
        return wizard

    def test_pages_created(self, dialog_wizard):
        panels = dialog_wizard.panels

        assert isinstance(panels[WELCOME_PANEL].content, WelcomePage)
        assert isinstance(panels[INSTALL_PANEL].content, InstallPage)
        assert isinstance(panels[LICENSE_PANEL].content, LicenseContentPage)
        assert isinstance(panels[UNINSTALL_PANEL].content, UninstallPage)
        assert dialog_wizard.surface.windowTitle() == "Demo Product - License Wizard"

    def test_radio_button_chooses_action(self, dialog_wizard):
        welcome = dialog_wizard.panels[WELCOME_PANEL].content

        welcome.radio_buttons[LicenseAction.UNINSTALL].setChecked(True)
        dialog_wizard.surface.btn_next.click()

        assert dialog_wizard.context.current_panel_id == UNINSTALL_PANEL

    def test_install_through_page(self, dialog_wizard, key_file):
        dialog = dialog_wizard.surface
        dialog.btn_next.click()
        page = dialog_wizard.panels[INSTALL_PANEL].content
        assert dialog.btn_next.isEnabled() is False

        page.path_input.setText(str(key_file))
        page.btn_install.click()

        assert dialog.btn_next.isEnabled() is True
        dialog.btn_next.click()
        license_page = dialog_wizard.panels[LICENSE_PANEL].content
        assert license_page.subject_value.text() == "Demo Product"
        assert license_page.holder_value.text() == "ACME"

    def test_install_page_shows_error(self, dialog_wizard, tmp_path):
        dialog_wizard.surface.btn_next.click()
        page = dialog_wizard.panels[INSTALL_PANEL].content

        page.path_input.setText(str(tmp_path / "missing.lic"))
        page.btn_install.click()

        assert "not found" in page.error_label.text()

    def test_empty_path_asks_for_file(self, dialog_wizard):
        dialog_wizard.surface.btn_next.click()
        page = dialog_wizard.panels[INSTALL_PANEL].content

        page.btn_install.click()

        assert page.error_label.text() == "Please select a license key file."

    def test_uninstall_through_page(self, dialog_wizard, manager, key_file):
        manager.install(key_file)
        dialog_wizard.panels[WELCOME_PANEL].content.radio_buttons[LicenseAction.UNINSTALL].setChecked(True)
        dialog_wizard.surface.btn_next.click()
        page = dialog_wizard.panels[UNINSTALL_PANEL].content

        page.btn_uninstall.click()

        assert page.btn_uninstall.isEnabled() is False
        assert dialog_wizard.surface.btn_next.isEnabled() is True
        dialog_wizard.surface.btn_next.click()
        assert dialog_wizard.get_return_code() == WizardResult.FINISH
