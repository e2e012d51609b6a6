# -*- coding: utf-8 -*-
"""
Upload Step - Step 1 of the Template Upload Wizard.

Validates the chosen file and uploads it in three phases on a worker
thread: initiate session, PUT to the presigned URL, complete session.
"""

from functools import partial
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QLabel, QHBoxLayout, QProgressBar, QFileDialog, QFrame, QVBoxLayout
from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Config
from services.api_client import TemplateApiClient, get_api_client
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.step_data import UploadData
from ui.components.action_button import ActionButton
from ui.design_system import Colors, ComponentStyles
from ui.error_handler import ErrorHandler
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep, with_error_boundary
from utils.file_types import (
    guess_mime_type, validate_template_file, format_file_size, get_file_type_label
)
from utils.logger import get_logger

logger = get_logger(__name__)


class UploadWorker(QThread):
    """Background worker for the three-phase template upload."""

    progress = pyqtSignal(int, str)  # percent, status text
    succeeded = pyqtSignal(dict)  # {"uploadId", "publicUrl"}
    failed = pyqtSignal(object)  # exception

    def __init__(self, api_client: TemplateApiClient, file_path: str,
                 file_name: str, file_type: str, file_size: int):
        super().__init__()
        self.api_client = api_client
        self.file_path = file_path
        self.file_name = file_name
        self.file_type = file_type
        self.file_size = file_size

    def run(self):
        """Run upload in background."""
        try:
            content = Path(self.file_path).read_bytes()

            self.progress.emit(10, tr("upload.status.initiating"))
            session = self.api_client.initiate_upload(self.file_name, self.file_type, self.file_size)

            self.progress.emit(40, tr("upload.status.uploading"))
            self.api_client.upload_to_storage(session["presignedUrl"], content, self.file_type)

            self.progress.emit(80, tr("upload.status.finalizing"))
            completed = self.api_client.complete_upload(session["uploadId"], self.file_name)
        except Exception as e:
            logger.error(f"Upload of {self.file_name} failed: {e}")
            self.failed.emit(e)
            return

        self.succeeded.emit({
            "uploadId": completed.get("uploadId") or session["uploadId"],
            "publicUrl": completed["publicUrl"],
        })


class UploadStep(BaseStep):
    """Step 1: Template file upload."""

    LOGICAL_STEP = LogicalStep.UPLOAD

    def __init__(self, state_manager, on_step_complete, parent=None,
                 api_client: Optional[TemplateApiClient] = None):
        self.api_client = api_client or get_api_client()
        self._active_worker: Optional[UploadWorker] = None
        super().__init__(state_manager, on_step_complete, parent)

    def setup_ui(self):
        layout = self.main_layout

        hint = QLabel(tr("upload.hint", limit=format_file_size(Config.MAX_UPLOAD_SIZE)))
        hint.setWordWrap(True)
        hint.setFont(create_font(size=FontManager.SIZE_BODY))
        hint.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(hint)

        card = QFrame()
        card.setStyleSheet(ComponentStyles.get_card_style())
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)
        card_layout.setSpacing(12)

        file_row = QHBoxLayout()
        self.file_label = QLabel(tr("upload.no_file"))
        self.file_label.setFont(create_font(size=FontManager.SIZE_SUBHEADING, weight=FontManager.WEIGHT_MEDIUM))
        self.file_label.setStyleSheet("border: none;")
        file_row.addWidget(self.file_label, 1)

        self.browse_button = ActionButton(tr("button.browse"), variant="outline", width=130, height=36)
        self.browse_button.clicked.connect(lambda: self.choose_file())
        file_row.addWidget(self.browse_button)
        card_layout.addLayout(file_row)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(ComponentStyles.get_progress_bar_style())
        self.progress_bar.hide()
        card_layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(f"border: none; color: {Colors.TEXT_SECONDARY};")
        card_layout.addWidget(self.status_label)

        layout.addWidget(card)
        layout.addStretch()

    def populate_data(self):
        upload = self.get_step_data()
        if upload is None or not upload.file_name:
            return
        self.file_label.setText(
            f"{upload.file_name}  ({get_file_type_label(upload.file_name)}, {format_file_size(upload.file_size)})"
        )
        if upload.is_uploaded:
            self.progress_bar.setValue(100)
            self.progress_bar.show()
            self.status_label.setText(tr("upload.status.done"))

    def choose_file(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, tr("upload.file_dialog"), "", tr("upload.file_filter")
        )
        if file_path:
            self.select_file(file_path)

    @with_error_boundary("selecting file")
    def select_file(self, file_path: str) -> bool:
        """
        Validate a file and start uploading it.

        Returns:
            True if the upload was started
        """
        path = Path(file_path)
        file_name = path.name
        file_type = guess_mime_type(file_name)
        try:
            file_size = path.stat().st_size
        except OSError as e:
            logger.warning(f"Cannot read {file_path}: {e}")
            self.report_error(tr("upload.error.read_failed"))
            return False

        is_valid, message = validate_template_file(file_name, file_size, file_type)
        if not is_valid:
            self.report_error(message)
            return False

        stored = self.save_step_data(UploadData(
            file_name=file_name,
            file_type=file_type,
            file_size=file_size,
        ))
        if not stored:
            # Rejected by the state manager, which recorded the reason
            return False

        self.clear_error()
        self.populate_data()
        self.status_label.setText(tr("upload.status.initiating"))
        self.progress_bar.setValue(0)
        self.progress_bar.show()

        logger.info(f"Uploading {file_name} ({file_type}, {file_size} bytes)")
        worker = UploadWorker(self.api_client, str(path), file_name, file_type, file_size)
        worker.progress.connect(partial(self._on_upload_progress, worker))
        worker.succeeded.connect(partial(self._on_upload_succeeded, worker))
        worker.failed.connect(partial(self._on_upload_failed, worker))
        self._active_worker = worker
        self.start_worker(worker)
        return True

    def _is_current_worker(self, worker: UploadWorker) -> bool:
        return not self.is_destroyed and worker is self._active_worker

    def _on_upload_progress(self, worker: UploadWorker, percent: int, status: str):
        if not self._is_current_worker(worker):
            return
        self.progress_bar.setValue(percent)
        self.status_label.setText(status)

    def _on_upload_succeeded(self, worker: UploadWorker, result: Dict[str, Any]):
        if not self._is_current_worker(worker):
            return
        self._active_worker = None
        self.progress_bar.setValue(100)
        self.status_label.setText(tr("upload.status.done"))
        stored = self.save_step_data(
            upload_id=result["uploadId"],
            public_url=result["publicUrl"],
            is_uploaded=True,
            upload_progress=100,
        )
        if stored:
            logger.info(f"Upload complete: {result['publicUrl']}")
            self.complete_step()

    def _on_upload_failed(self, worker: UploadWorker, error: Exception):
        if not self._is_current_worker(worker):
            return
        self._active_worker = None
        self.progress_bar.hide()
        self.status_label.setText("")
        message = ErrorHandler.handle(error, self, "upload", show_dialog=False)
        self.save_step_data(is_uploaded=False, upload_progress=0)
        self.report_error(f"{tr('error.upload.failed')}: {message}")
