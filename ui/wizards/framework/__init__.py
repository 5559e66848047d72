# -*- coding: utf-8 -*-
"""
Wizard Framework - Navigation engine for multi-step wizards.

Provides the panel descriptor contract, the wizard model and controller,
the orchestrating Wizard and the host surfaces it can run in.
"""

from .panel_descriptor import PanelDescriptor, FINISH, NONE
from .wizard_context import WizardContext, WizardState
from .wizard_model import WizardModel, WizardButton, ButtonAttribute
from .wizard_controller import WizardController
from .error_boundary import ErrorBoundary
from .display_surface import DisplaySurface, HeadlessSurface
from .wizard_dialog import WizardDialog
from .wizard import (
    Wizard,
    WizardResult,
    FINISH_RETURN_CODE,
    CANCEL_RETURN_CODE,
    ERROR_RETURN_CODE,
)

__all__ = [
    'PanelDescriptor',
    'FINISH',
    'NONE',
    'WizardContext',
    'WizardState',
    'WizardModel',
    'WizardButton',
    'ButtonAttribute',
    'WizardController',
    'ErrorBoundary',
    'DisplaySurface',
    'HeadlessSurface',
    'WizardDialog',
    'Wizard',
    'WizardResult',
    'FINISH_RETURN_CODE',
    'CANCEL_RETURN_CODE',
    'ERROR_RETURN_CODE',
]
