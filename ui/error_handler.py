# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QWidget, QMessageBox

from services.error_mapper import map_exception
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps exceptions to user-facing messages and shows standard dialogs."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_dialog: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show dialog.

        Args:
            error: The exception to handle
            parent: Parent widget for dialog
            context: Context for error mapping (e.g., "upload", "submission")
            show_dialog: Whether to show dialog to user

        Returns:
            User-friendly error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=error)

        message = map_exception(error, context)

        if show_dialog and parent:
            ErrorHandler.show_error(parent, message)

        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

    @staticmethod
    def show_success(parent: QWidget, message: str, title: str = None):
        QMessageBox.information(parent, title or tr("dialog.success"), message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = None) -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent,
            title or tr("dialog.confirm"),
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )
        return reply == QMessageBox.Yes
