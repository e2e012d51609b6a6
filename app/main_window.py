# -*- coding: utf-8 -*-
"""
Main application window hosting the template upload wizard.
"""

from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QMainWindow, QShortcut
from PyQt5.QtGui import QKeySequence

from .config import Config
from services.api_client import TemplateApiClient
from services.translation_manager import tr, get_layout_direction
from services.wizard.draft_store import WizardDraftStore
from services.wizard.state_manager import WizardStateManager
from ui.error_handler import ErrorHandler
from ui.wizards.template_upload import TemplateUploadWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Window owning one wizard session at a time."""

    def __init__(self, state_manager: WizardStateManager,
                 api_client: Optional[TemplateApiClient] = None,
                 draft_store: Optional[WizardDraftStore] = None,
                 parent=None):
        super().__init__(parent)
        self.state_manager = state_manager
        self.draft_store = draft_store

        self._setup_window()

        self.wizard = TemplateUploadWizard(state_manager, api_client=api_client)
        self.wizard.wizard_completed.connect(self._on_wizard_completed)
        self.wizard.wizard_cancelled.connect(self._on_wizard_cancelled)
        self.setCentralWidget(self.wizard)

        # Ctrl+N: start over
        self.reset_shortcut = QShortcut(QKeySequence("Ctrl+N"), self)
        self.reset_shortcut.activated.connect(self.wizard.reset)

    def _setup_window(self):
        self.setWindowTitle(f"{Config.APP_NAME} - {tr('wizard.title')}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)
        self.setLayoutDirection(get_layout_direction())

    def offer_draft_resume(self, confirm=None) -> bool:
        """
        Ask to continue a saved draft.

        Returns:
            True if a draft was restored
        """
        if self.draft_store is None:
            return False
        draft = self.draft_store.load()
        if not draft:
            return False
        if confirm is None:
            confirm = lambda: ErrorHandler.confirm(self, tr("wizard.resume_draft"))
        if not confirm():
            self.draft_store.clear()
            return False
        if not self.state_manager.restore(draft):
            logger.warning("Saved draft could not be restored, discarding it")
            self.draft_store.clear()
            return False
        return True

    def _on_wizard_completed(self, result: Dict[str, Any]):
        logger.info(f"Template created: {result.get('result_id')}")
        ErrorHandler.show_success(
            self,
            f"{tr('wizard.completed')}\n{tr('completion.template_id', id=result.get('result_id'))}"
        )

    def _on_wizard_cancelled(self):
        logger.info("Wizard cancelled, starting a new session")
        self.statusBar().showMessage(tr("wizard.cancelled"), 5000)
        self.state_manager.reset()
