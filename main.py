#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Template Studio - template upload wizard
Main entry point for the application
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from app.main_window import MainWindow
from services.api_client import get_api_client
from services.translation_manager import set_language
from services.wizard.draft_store import WizardDraftStore
from services.wizard.state_manager import WizardStateManager
from utils.logger import setup_logger
from ui.font_utils import set_application_default_font


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        set_application_default_font()

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        set_language(Config.LANGUAGE)
        logger.info(f">> Language: {Config.LANGUAGE}")
        logger.info(f">> API: {Config.API_BASE_URL}")

        draft_store = WizardDraftStore() if Config.DRAFTS_ENABLED else None
        state_manager = WizardStateManager(draft_store=draft_store)

        window = MainWindow(state_manager, api_client=get_api_client(), draft_store=draft_store)
        window.show()
        window.offer_draft_resume()
        logger.info(">> Main window created and displayed")

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
