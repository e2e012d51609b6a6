# -*- coding: utf-8 -*-
"""
Metadata Step - name, description, category and tags of the template.

Categories are loaded from the API on a worker thread. Only categories the
server issued can be selected; new ones are created through the API.
"""

from typing import Any, Dict, List, Optional

from PyQt5.QtWidgets import (
    QLabel, QHBoxLayout, QFormLayout, QLineEdit, QTextEdit, QComboBox,
    QListWidget, QFrame, QVBoxLayout, QInputDialog
)
from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Config
from services.api_client import TemplateApiClient, get_api_client
from services.error_mapper import map_exception
from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from ui.components.action_button import ActionButton
from ui.design_system import Colors, ComponentStyles
from ui.wizards.framework import BaseStep, with_error_boundary
from utils.logger import get_logger

logger = get_logger(__name__)


class CategoriesWorker(QThread):
    """Background worker loading template categories."""

    succeeded = pyqtSignal(list)
    failed = pyqtSignal(object)

    def __init__(self, api_client: TemplateApiClient):
        super().__init__()
        self.api_client = api_client

    def run(self):
        try:
            categories = self.api_client.get_categories()
        except Exception as e:
            logger.warning(f"Could not load categories: {e}")
            self.failed.emit(e)
            return
        self.succeeded.emit(categories)


class CreateCategoryWorker(QThread):
    """Background worker creating a template category."""

    succeeded = pyqtSignal(dict)
    failed = pyqtSignal(object)

    def __init__(self, api_client: TemplateApiClient, name: str):
        super().__init__()
        self.api_client = api_client
        self.name = name

    def run(self):
        try:
            category = self.api_client.create_category(self.name)
        except Exception as e:
            logger.warning(f"Could not create category '{self.name}': {e}")
            self.failed.emit(e)
            return
        self.succeeded.emit(category)


class MetadataStep(BaseStep):
    """Template metadata form."""

    LOGICAL_STEP = LogicalStep.METADATA

    def __init__(self, state_manager, on_step_complete, parent=None,
                 api_client: Optional[TemplateApiClient] = None,
                 load_categories: bool = True):
        self.api_client = api_client or get_api_client()
        self.categories: List[Dict[str, Any]] = []
        self._populating = False
        super().__init__(state_manager, on_step_complete, parent)
        if load_categories:
            self.load_categories()

    def setup_ui(self):
        layout = self.main_layout

        form_card = QFrame()
        form_card.setStyleSheet(ComponentStyles.get_card_style() + ComponentStyles.get_input_style())
        card_layout = QVBoxLayout(form_card)
        card_layout.setContentsMargins(16, 16, 16, 16)

        form = QFormLayout()
        form.setSpacing(12)

        self.name_input = QLineEdit()
        self.name_input.setMaxLength(Config.MAX_TEMPLATE_NAME_LENGTH)
        self.name_input.textChanged.connect(self._on_name_changed)
        form.addRow(self._caption("metadata.name", required=True), self.name_input)

        self.description_input = QTextEdit()
        self.description_input.setFixedHeight(90)
        self.description_input.textChanged.connect(self._on_description_changed)
        form.addRow(self._caption("metadata.description"), self.description_input)

        category_row = QHBoxLayout()
        self.category_combo = QComboBox()
        self.category_combo.currentIndexChanged.connect(self._on_category_changed)
        category_row.addWidget(self.category_combo, 1)
        self.new_category_button = ActionButton(tr("metadata.new_category"), variant="outline",
                                                width=130, height=34)
        self.new_category_button.clicked.connect(lambda: self.create_category())
        category_row.addWidget(self.new_category_button)
        form.addRow(self._caption("metadata.category", required=True), category_row)

        tag_row = QHBoxLayout()
        self.tag_input = QLineEdit()
        self.tag_input.setPlaceholderText(tr("metadata.tag_placeholder"))
        self.tag_input.returnPressed.connect(lambda: self.add_tag())
        tag_row.addWidget(self.tag_input, 1)
        self.add_tag_button = ActionButton(tr("button.add"), variant="outline", width=80, height=34)
        self.add_tag_button.clicked.connect(lambda: self.add_tag())
        tag_row.addWidget(self.add_tag_button)
        form.addRow(self._caption("metadata.tags"), tag_row)

        self.tag_list = QListWidget()
        self.tag_list.setFixedHeight(90)
        self.tag_list.itemDoubleClicked.connect(lambda item: self.remove_tag(item.text()))
        form.addRow("", self.tag_list)

        self.no_tags_label = QLabel(tr("metadata.no_tags"))
        self.no_tags_label.setStyleSheet(f"border: none; color: {Colors.TEXT_SECONDARY};")
        form.addRow("", self.no_tags_label)

        card_layout.addLayout(form)
        layout.addWidget(form_card)

        notice_row = QHBoxLayout()
        self.notice_label = QLabel("")
        self.notice_label.setStyleSheet(f"color: {Colors.WARNING};")
        notice_row.addWidget(self.notice_label, 1)
        self.retry_button = ActionButton(tr("button.retry"), variant="outline", width=100, height=34)
        self.retry_button.clicked.connect(self.load_categories)
        notice_row.addWidget(self.retry_button)
        layout.addLayout(notice_row)
        self._show_notice(None)
        layout.addStretch()

        # Until the server list arrives only the saved category is offered
        self._set_categories(self._saved_category())

    @staticmethod
    def _caption(key: str, required: bool = False) -> QLabel:
        label = QLabel(f"{tr(key)} *" if required else tr(key))
        label.setStyleSheet("border: none;")
        return label

    # ==================== Data ====================

    def populate_data(self):
        metadata = self.get_step_data()
        self._populating = True
        try:
            if metadata is not None:
                self.name_input.setText(metadata.name)
                self.description_input.setPlainText(metadata.description)
                self._select_category(metadata.category_id)
            self._refresh_tags(metadata.tags if metadata else [])
        finally:
            self._populating = False

    def _save(self, **changes) -> bool:
        if self._populating:
            return False
        return self.save_step_data(**changes)

    def _on_name_changed(self, text: str):
        self._save(name=text)

    def _on_description_changed(self):
        self._save(description=self.description_input.toPlainText())

    def _on_category_changed(self, index: int):
        category_id = self.category_combo.itemData(index) or ""
        category_name = self.category_combo.itemText(index) if category_id else ""
        self._save(category_id=category_id, category_name=category_name)

    # ==================== Categories ====================

    def load_categories(self):
        self._show_notice(None)
        worker = CategoriesWorker(self.api_client)
        worker.succeeded.connect(self._on_categories_loaded)
        worker.failed.connect(self._on_categories_failed)
        self.start_worker(worker)

    def _on_categories_loaded(self, categories: List[Dict[str, Any]]):
        if self.is_destroyed:
            return
        valid = [c for c in categories if isinstance(c, dict) and c.get("id") and c.get("name")]
        if not valid:
            self._on_categories_failed(None)
            return
        self._set_categories(valid, drop_missing=True)

    def _on_categories_failed(self, error: Optional[Exception]):
        if self.is_destroyed:
            return
        self._show_notice(tr("metadata.categories_load_failed"))

    def _show_notice(self, message: Optional[str]):
        self.notice_label.setText(message or "")
        self.notice_label.setVisible(bool(message))
        self.retry_button.setVisible(bool(message))

    def _saved_category(self) -> List[Dict[str, Any]]:
        metadata = self.get_step_data()
        if metadata is None or not metadata.category_id:
            return []
        return [{"id": metadata.category_id, "name": metadata.category_name or metadata.category_id}]

    def _set_categories(self, categories: List[Dict[str, Any]], drop_missing: bool = False):
        """
        Fill the category combo.

        With `drop_missing` the list is the server's; a saved category that
        is no longer in it is cleared from the wizard state.
        """
        self.categories = [{"id": str(c["id"]), "name": c["name"]} for c in categories]
        metadata = self.get_step_data()
        selected = metadata.category_id if metadata else ""

        self._populating = True
        try:
            self.category_combo.clear()
            self.category_combo.addItem(tr("metadata.select_category"), "")
            for category in self.categories:
                self.category_combo.addItem(category["name"], category["id"])
            self._select_category(selected)
        finally:
            self._populating = False

        if drop_missing and selected and self.category_combo.findData(selected) < 0:
            logger.info(f"Saved category '{selected}' is no longer available")
            self.save_step_data(category_id="", category_name="")

    def _select_category(self, category_id: str):
        index = self.category_combo.findData(category_id) if category_id else 0
        self.category_combo.setCurrentIndex(max(index, 0))

    @with_error_boundary("creating category")
    def create_category(self, name: Optional[str] = None) -> bool:
        """
        Create a category on the server and select it once it exists.

        Args:
            name: Category name; asks the user when omitted
        """
        if name is None:
            name, accepted = QInputDialog.getText(
                self, tr("metadata.new_category"), tr("metadata.new_category_prompt")
            )
            if not accepted:
                return False
        name = name.strip()
        if not name:
            return False

        self.new_category_button.setEnabled(False)
        worker = CreateCategoryWorker(self.api_client, name)
        worker.succeeded.connect(self._on_category_created)
        worker.failed.connect(self._on_category_create_failed)
        self.start_worker(worker)
        return True

    def _on_category_created(self, category: Dict[str, Any]):
        if self.is_destroyed:
            return
        self.new_category_button.setEnabled(True)
        category_id = str(category["id"])
        categories = [c for c in self.categories if c["id"] != category_id]
        categories.append({"id": category_id, "name": category.get("name") or category_id})
        self._set_categories(categories)
        self._select_category(category_id)
        self.clear_error()

    def _on_category_create_failed(self, error: Exception):
        if self.is_destroyed:
            return
        self.new_category_button.setEnabled(True)
        self.report_error(map_exception(error, "creating category"))

    # ==================== Tags ====================

    def get_tags(self) -> List[str]:
        metadata = self.get_step_data()
        return list(metadata.tags) if metadata else []

    @with_error_boundary("adding tag")
    def add_tag(self, text: Optional[str] = None) -> bool:
        """Add a tag from `text` or the tag input; duplicates are ignored."""
        tag = (text if text is not None else self.tag_input.text()).strip()
        if not tag:
            return False

        tags = self.get_tags()
        if tag in tags:
            self.tag_input.clear()
            return False
        if len(tags) >= Config.MAX_TEMPLATE_TAGS:
            self.report_error(tr("validation.metadata.too_many_tags", max=Config.MAX_TEMPLATE_TAGS))
            return False

        tags.append(tag)
        self.tag_input.clear()
        if self._save(tags=tags):
            self._refresh_tags(tags)
            return True
        return False

    @with_error_boundary("removing tag")
    def remove_tag(self, tag: str) -> bool:
        tags = self.get_tags()
        if tag not in tags:
            return False
        tags.remove(tag)
        if self._save(tags=tags):
            self._refresh_tags(tags)
            return True
        return False

    def _refresh_tags(self, tags: List[str]):
        self.tag_list.clear()
        self.tag_list.addItems(tags)
        self.tag_list.setVisible(bool(tags))
        self.no_tags_label.setVisible(not tags)
