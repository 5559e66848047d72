#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
License Wizard - Main entry point for the application

Runs the license wizard over an in-memory license store and exits with
the wizard's result code (0 finish, 1 cancel, 2 error).
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.license_service import MemoryLicenseManager
from ui.wizards.license import LicenseWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        # Create Qt application
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        subject = sys.argv[1] if len(sys.argv) > 1 else Config.APP_NAME

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_TITLE} for {subject}")
        logger.info("=" * 80)

        wizard = LicenseWizard(MemoryLicenseManager(subject))
        exit_code = wizard.show_modal_dialog()

        logger.info(f"License wizard closed with code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(int(LicenseWizard.ERROR_RETURN_CODE))


if __name__ == "__main__":
    main()
