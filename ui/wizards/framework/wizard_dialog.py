# -*- coding: utf-8 -*-
"""
Wizard Dialog - Qt host surface for a wizard.

Provides:
- Panel container (one page per panel id)
- Navigation buttons (Back, Next, Cancel) wired to the wizard controller
- Button text/icon/enabled updates from the wizard's notifications
- Modal loop ended by the wizard closing
"""

from abc import ABCMeta
from typing import Any, Dict, Hashable, Optional

from PyQt5.QtWidgets import (
    QDialog, QFrame, QHBoxLayout, QPushButton, QStackedWidget, QVBoxLayout, QWidget
)
from PyQt5.QtGui import QIcon

from app.config import Config
from .display_surface import DisplaySurface
from .wizard_model import ButtonAttribute, WizardButton
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class WizardDialog(QDialog, DisplaySurface, metaclass=ABCQWidgetMeta):
    """
    Dialog showing one wizard panel at a time above a row of buttons.

    Escape and the window close button act like Cancel once a wizard is
    attached.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._pages: Dict[Hashable, QWidget] = {}
        self._cancel_handler = None
        self._setup_ui()

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the dialog UI."""
        self.setObjectName("wizardDialog")
        self.setMinimumSize(Config.WIZARD_MIN_WIDTH, Config.WIZARD_MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Panel container
        border = Config.WIZARD_BORDER
        self.card_container = QWidget()
        card_layout = QVBoxLayout(self.card_container)
        card_layout.setContentsMargins(border, border, border, border)
        self.card_stack = QStackedWidget()
        card_layout.addWidget(self.card_stack)
        main_layout.addWidget(self.card_container, 1)

        # Separator
        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setFrameShadow(QFrame.Sunken)
        main_layout.addWidget(separator)

        # Footer with navigation buttons
        main_layout.addWidget(self._create_footer())

    def _create_footer(self) -> QWidget:
        """Create footer with Back, Next and Cancel on the right."""
        footer = QWidget()
        layout = QHBoxLayout(footer)
        border = Config.WIZARD_BORDER
        layout.setContentsMargins(border, border, border, border)
        layout.setSpacing(0)
        layout.addStretch()

        self.btn_back = QPushButton()
        self.btn_back.setObjectName("back")
        layout.addWidget(self.btn_back)
        layout.addSpacing(10)

        self.btn_next = QPushButton()
        self.btn_next.setObjectName("next")
        self.btn_next.setDefault(True)
        layout.addWidget(self.btn_next)
        layout.addSpacing(30)

        self.btn_cancel = QPushButton()
        self.btn_cancel.setObjectName("cancel")
        layout.addWidget(self.btn_cancel)

        self._buttons = {
            WizardButton.BACK: self.btn_back,
            WizardButton.NEXT: self.btn_next,
            WizardButton.CANCEL: self.btn_cancel,
        }
        return footer

    # =========================================================================
    # DisplaySurface
    # =========================================================================

    def attach(self, wizard: 'Wizard'):
        self.btn_back.clicked.connect(wizard.controller.on_back)
        self.btn_next.clicked.connect(wizard.controller.on_next)
        self.btn_cancel.clicked.connect(wizard.controller.on_cancel)
        self._cancel_handler = wizard.controller.on_cancel
        wizard.button_property_changed.connect(self._on_button_property_changed)

        # Apply the state the model already holds; unset values keep the widget defaults
        for button in WizardButton:
            for attribute in ButtonAttribute:
                value = wizard.model.get_button_property(button, attribute)
                if value is not None:
                    self._on_button_property_changed(button.value, attribute.value, value)

    def add_panel(self, panel_id: Hashable, content: Any):
        page = content if isinstance(content, QWidget) else QWidget()
        old_page = self._pages.pop(panel_id, None)
        if old_page is page:
            self._pages[panel_id] = page
            return
        was_visible = old_page is not None and self.card_stack.currentWidget() is old_page
        self.card_stack.addWidget(page)
        if was_visible:
            self.card_stack.setCurrentWidget(page)
        if old_page is not None:
            self.card_stack.removeWidget(old_page)
        self._pages[panel_id] = page

    def show_panel(self, panel_id: Hashable):
        self.card_stack.setCurrentWidget(self._pages[panel_id])

    def page_for(self, panel_id: Hashable) -> Optional[QWidget]:
        return self._pages.get(panel_id)

    def close_surface(self):
        self.done(QDialog.Accepted)

    def exec_modal(self):
        self.exec_()

    def set_title(self, title: str):
        self.setWindowTitle(title)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def reject(self):
        """Handle Escape and the window close button."""
        if self._cancel_handler is not None:
            self._cancel_handler()
        else:
            super().reject()

    def _on_button_property_changed(self, button: str, attribute: str, value: Any):
        """Apply a button notification to the matching push button."""
        widget = self._buttons[WizardButton(button)]
        attribute = ButtonAttribute(attribute)

        if attribute is ButtonAttribute.TEXT:
            widget.setText("" if value is None else str(value))
        elif attribute is ButtonAttribute.ENABLED:
            widget.setEnabled(bool(value))
        elif attribute is ButtonAttribute.ICON:
            widget.setIcon(QIcon() if value is None else QIcon(value))
