# -*- coding: utf-8 -*-
"""
License Wizard - Installs, displays and uninstalls a product license.

Flow:
    WELCOME ─install──> INSTALL ──> LICENSE ──> finish
            ─display──> LICENSE ──> finish
            ─uninstall> UNINSTALL ──> finish
"""

from typing import Dict, Optional

from PyQt5.QtWidgets import QWidget

from services.license_service import LicenseManager
from ui.wizards.framework import DisplaySurface, Wizard, WizardDialog
from .pages import create_page
from .panels import WELCOME_PANEL, LicensePanelDescriptor, create_license_panels
from utils.logger import get_logger

logger = get_logger(__name__)


class LicenseWizard(Wizard):
    """
    Wizard over a LicenseManager.

    Pages are only created when the wizard runs in a WizardDialog; with any
    other surface the panels have no content.
    """

    def __init__(
        self,
        manager: LicenseManager,
        surface: Optional[DisplaySurface] = None,
        owner: Optional[QWidget] = None
    ):
        super().__init__(surface=surface, owner=owner)
        self.manager = manager
        self.panels: Dict[str, LicensePanelDescriptor] = {}

        self.set_title(f"{manager.subject} - License Wizard")

        with_pages = isinstance(self.surface, WizardDialog)
        for descriptor in create_license_panels(manager):
            if with_pages:
                descriptor.content = create_page(descriptor)
            self.register_panel(descriptor.panel_id, descriptor)
            self.panels[descriptor.panel_id] = descriptor

        logger.info(f"License wizard created for {manager.subject}")
        self.set_current_panel(WELCOME_PANEL)
