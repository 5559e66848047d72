# -*- coding: utf-8 -*-
"""
License Wizard Package.

This package contains:
- LicenseWizard: Wizard over a LicenseManager
- Panels: Descriptors of the welcome, install, license and uninstall steps
- Pages: Widgets shown for those steps in a WizardDialog
"""

from .license_wizard import LicenseWizard
from .panels import (
    WELCOME_PANEL,
    INSTALL_PANEL,
    LICENSE_PANEL,
    UNINSTALL_PANEL,
    LicenseAction,
)

__all__ = [
    'LicenseWizard',
    'WELCOME_PANEL',
    'INSTALL_PANEL',
    'LICENSE_PANEL',
    'UNINSTALL_PANEL',
    'LicenseAction',
]
