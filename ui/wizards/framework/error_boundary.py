# -*- coding: utf-8 -*-
"""
Error Boundary for panel lifecycle hooks.

Runs descriptor hooks and transition rules so that a failure:
- Is logged with the panel and hook name
- Is reported through the error_occurred signal
- Reaches the wizard as a HookError instead of an arbitrary exception
"""

from typing import Any, Callable, Hashable, Optional

from PyQt5.QtCore import pyqtSignal, QObject

from services.exceptions import HookError
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """
    Error boundary around the descriptor calls made by a wizard.
    """

    error_occurred = pyqtSignal(str, str)  # error_type, error_message

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.error_count = 0
        self.last_error: Optional[Exception] = None

    def run(self, panel_id: Hashable, hook_name: str, func: Callable[[], Any]) -> Any:
        """
        Call a descriptor method.

        Args:
            panel_id: Id of the panel the method belongs to
            hook_name: Name of the method for logging
            func: Zero-argument callable

        Returns:
            Whatever func returns

        Raises:
            HookError: If func raised
        """
        try:
            return func()

        except (MemoryError, KeyboardInterrupt):
            raise

        except Exception as e:
            self._handle_error(e, panel_id, hook_name)
            raise HookError(panel_id, hook_name, e) from e

    def _handle_error(self, error: Exception, panel_id: Hashable, hook_name: str):
        self.error_count += 1
        self.last_error = error

        logger.error(
            f"Error in panel {panel_id!r} during {hook_name}: {error}",
            exc_info=True
        )
        self.error_occurred.emit(type(error).__name__, str(error))

    def get_error_summary(self) -> str:
        """Get summary of errors that occurred."""
        if self.error_count == 0:
            return "No errors"

        return (
            f"Errors: {self.error_count}\n"
            f"Last error: {type(self.last_error).__name__} - {str(self.last_error)}"
        )
