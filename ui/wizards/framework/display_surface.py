# -*- coding: utf-8 -*-
"""
Display Surface - What a wizard needs from the host UI.

The wizard never inspects panel content. It only asks the surface to:
- Keep the content of each panel under its id
- Show the content of one panel
- Run a modal loop until the wizard closes, and end it
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, List, Optional

from PyQt5.QtCore import QEventLoop

from utils.logger import get_logger

logger = get_logger(__name__)


class DisplaySurface(ABC):
    """
    Abstract host surface of a wizard.

    Subclasses must implement:
    - add_panel(): Store the content of a panel
    - show_panel(): Make a panel visible
    - close_surface(): Hide the surface and end the modal loop
    - exec_modal(): Block until close_surface() is called
    """

    @abstractmethod
    def add_panel(self, panel_id: Hashable, content: Any):
        pass

    @abstractmethod
    def show_panel(self, panel_id: Hashable):
        pass

    @abstractmethod
    def close_surface(self):
        pass

    @abstractmethod
    def exec_modal(self):
        pass

    def attach(self, wizard: 'Wizard'):
        """
        Called once by the wizard that owns the surface.

        Override to wire host buttons to the controller and the wizard's
        notifications to host widgets.
        """
        pass

    def set_title(self, title: str):
        """Set the title shown by the host. Override to customize."""
        pass


class HeadlessSurface(DisplaySurface):
    """
    Surface without widgets.

    Records the panels it was given and which one is visible. The modal
    loop is a plain QEventLoop, so a running Qt application can drive the
    wizard through queued events while exec_modal() blocks.
    """

    def __init__(self):
        self.panels: Dict[Hashable, Any] = {}
        self.shown: List[Hashable] = []
        self.visible_panel_id: Optional[Hashable] = None
        self.closed = False
        self.title = ""
        self._loop: Optional[QEventLoop] = None

    def add_panel(self, panel_id: Hashable, content: Any):
        self.panels[panel_id] = content

    def show_panel(self, panel_id: Hashable):
        self.visible_panel_id = panel_id
        self.shown.append(panel_id)

    def close_surface(self):
        self.closed = True
        if self._loop is not None and self._loop.isRunning():
            self._loop.quit()

    def exec_modal(self):
        if self.closed:
            return
        self._loop = QEventLoop()
        logger.debug("Entering headless modal loop")
        self._loop.exec_()
        self._loop = None

    def set_title(self, title: str):
        self.title = title
