# -*- coding: utf-8 -*-
"""
License Wizard Pages - Widgets shown for the license wizard panels.

Each page forwards user actions to its panel descriptor and offers the
small update methods the descriptor calls back (show_error, show_license,
set_uninstall_enabled).
"""

from PyQt5.QtWidgets import (
    QButtonGroup, QFileDialog, QFormLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QRadioButton, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt

from services.license_service import LicenseContent
from .panels import (
    InstallPanelDescriptor,
    LicenseAction,
    LicenseContentPanelDescriptor,
    LicensePanelDescriptor,
    UninstallPanelDescriptor,
    WelcomePanelDescriptor,
)


class LicensePage(QWidget):
    """Common layout: a bold prompt, the page body and an error line."""

    def __init__(self, descriptor: LicensePanelDescriptor, prompt: str, parent=None):
        super().__init__(parent)
        self.descriptor = descriptor

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setSpacing(15)

        self.prompt_label = QLabel(prompt)
        self.prompt_label.setWordWrap(True)
        font = self.prompt_label.font()
        font.setBold(True)
        self.prompt_label.setFont(font)
        self.main_layout.addWidget(self.prompt_label)

        self.body_layout = QVBoxLayout()
        self.main_layout.addLayout(self.body_layout)
        self.main_layout.addStretch()

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #E74C3C;")
        self.error_label.hide()
        self.main_layout.addWidget(self.error_label)

    def show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def clear_error(self):
        self.show_error("")


class WelcomePage(LicensePage):
    def __init__(self, descriptor: WelcomePanelDescriptor, parent=None):
        subject = descriptor.manager.subject
        super().__init__(descriptor, f"This wizard manages the license for {subject}.", parent)

        self.button_group = QButtonGroup(self)
        self.radio_buttons = {}
        for action, text in (
            (LicenseAction.INSTALL, "Install a license key"),
            (LicenseAction.DISPLAY, "Display the installed license"),
            (LicenseAction.UNINSTALL, "Uninstall the installed license"),
        ):
            radio = QRadioButton(text)
            radio.setObjectName(action)
            radio.toggled.connect(lambda checked, a=action: self._on_action_toggled(a, checked))
            self.button_group.addButton(radio)
            self.body_layout.addWidget(radio)
            self.radio_buttons[action] = radio

        self.radio_buttons[LicenseAction.INSTALL].setChecked(True)

    def _on_action_toggled(self, action: str, checked: bool):
        if checked and self.descriptor.context is not None:
            self.descriptor.choose(action)


class InstallPage(LicensePage):
    def __init__(self, descriptor: InstallPanelDescriptor, parent=None):
        super().__init__(descriptor, "Select the license key file to install.", parent)

        row = QHBoxLayout()
        self.path_input = QLineEdit()
        self.path_input.setObjectName("licenseKeyPath")
        row.addWidget(self.path_input, 1)

        self.btn_browse = QPushButton("Browse...")
        self.btn_browse.clicked.connect(self._on_browse)
        row.addWidget(self.btn_browse)
        self.body_layout.addLayout(row)

        self.btn_install = QPushButton("Install")
        self.btn_install.setObjectName("install")
        self.btn_install.clicked.connect(self._on_install)
        self.body_layout.addWidget(self.btn_install, 0, Qt.AlignLeft)

    def _on_browse(self):
        path, _ = QFileDialog.getOpenFileName(self, "License Key File")
        if path:
            self.path_input.setText(path)

    def _on_install(self):
        path = self.path_input.text().strip()
        if not path:
            self.show_error("Please select a license key file.")
            return
        if self.descriptor.install_license(path):
            self.clear_error()


class LicenseContentPage(LicensePage):
    def __init__(self, descriptor: LicenseContentPanelDescriptor, parent=None):
        super().__init__(descriptor, "Installed license:", parent)

        form = QFormLayout()
        self.subject_value = QLabel("-")
        self.holder_value = QLabel("-")
        self.issuer_value = QLabel("-")
        self.issued_value = QLabel("-")
        self.not_after_value = QLabel("-")
        self.info_value = QLabel("-")
        form.addRow("Subject:", self.subject_value)
        form.addRow("Holder:", self.holder_value)
        form.addRow("Issuer:", self.issuer_value)
        form.addRow("Issued:", self.issued_value)
        form.addRow("Valid until:", self.not_after_value)
        form.addRow("Info:", self.info_value)
        self.body_layout.addLayout(form)

    def show_license(self, content: LicenseContent):
        self.clear_error()
        self.subject_value.setText(content.subject or "-")
        self.holder_value.setText(content.holder or "-")
        self.issuer_value.setText(content.issuer or "-")
        self.issued_value.setText(content.issued.strftime("%Y-%m-%d %H:%M") if content.issued else "-")
        self.not_after_value.setText(content.not_after.strftime("%Y-%m-%d") if content.not_after else "-")
        self.info_value.setText(content.info or "-")


class UninstallPage(LicensePage):
    def __init__(self, descriptor: UninstallPanelDescriptor, parent=None):
        subject = descriptor.manager.subject
        super().__init__(descriptor, f"Uninstall the license for {subject}?", parent)

        self.btn_uninstall = QPushButton("Uninstall")
        self.btn_uninstall.setObjectName("uninstall")
        self.btn_uninstall.clicked.connect(self._on_uninstall)
        self.body_layout.addWidget(self.btn_uninstall, 0, Qt.AlignLeft)

    def set_uninstall_enabled(self, enabled: bool):
        self.btn_uninstall.setEnabled(enabled)

    def _on_uninstall(self):
        if self.descriptor.uninstall_license():
            self.clear_error()


PAGE_CLASSES = {
    WelcomePanelDescriptor: WelcomePage,
    InstallPanelDescriptor: InstallPage,
    LicenseContentPanelDescriptor: LicenseContentPage,
    UninstallPanelDescriptor: UninstallPage,
}


def create_page(descriptor: LicensePanelDescriptor) -> LicensePage:
    """Create the page widget for a license panel descriptor."""
    return PAGE_CLASSES[type(descriptor)](descriptor)
