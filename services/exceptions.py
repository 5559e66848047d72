# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class WizardException(Exception):
    """Base exception for wizard navigation errors."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class UnknownPanelIdError(WizardException):
    """Raised when a panel id is undefined or absent from the registry."""

    def __init__(self, panel_id, context: str = None):
        super().__init__(f"Unknown panel id: {panel_id!r}", context=context)
        self.panel_id = panel_id


class ProgrammerMisuseError(WizardException):
    """Raised when the wizard API is used in an invalid order."""


class HookError(WizardException):
    """Exception raised inside a panel lifecycle hook."""

    def __init__(self, panel_id, hook_name: str, original_error: Exception = None):
        super().__init__(
            f"{hook_name} failed for panel {panel_id!r}: {original_error}",
            context=hook_name
        )
        self.panel_id = panel_id
        self.hook_name = hook_name
        self.original_error = original_error


class LicenseException(Exception):
    """Exception raised by a license store."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
