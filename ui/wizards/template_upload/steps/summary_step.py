# -*- coding: utf-8 -*-
"""
Summary Step - read-only review of everything entered so far.
"""

from typing import List, Tuple

from PyQt5.QtWidgets import QLabel, QFormLayout, QFrame, QVBoxLayout, QCheckBox

from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from ui.design_system import ComponentStyles
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep
from utils.file_types import format_file_size, get_file_type_label


class SummaryStep(BaseStep):
    """Review and confirm the template information."""

    LOGICAL_STEP = LogicalStep.SUMMARY

    def setup_ui(self):
        layout = self.main_layout

        card = QFrame()
        card.setStyleSheet(ComponentStyles.get_card_style())
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 16, 16, 16)

        self.form = QFormLayout()
        self.form.setSpacing(10)
        card_layout.addLayout(self.form)
        layout.addWidget(card)

        self.confirm_checkbox = QCheckBox(tr("summary.confirm"))
        self.confirm_checkbox.toggled.connect(self._on_confirm_toggled)
        layout.addWidget(self.confirm_checkbox)
        layout.addStretch()

    def get_summary_rows(self) -> List[Tuple[str, str]]:
        """(caption, value) pairs shown in the review."""
        none = tr("summary.none")
        upload = self.state_manager.get_step_data(LogicalStep.UPLOAD)
        metadata = self.state_manager.get_step_data(LogicalStep.METADATA)

        rows = []
        if upload is not None:
            rows.append((tr("summary.file"), upload.file_name or none))
            rows.append((tr("summary.file_type"), get_file_type_label(upload.file_name)))
            rows.append((tr("summary.file_size"), format_file_size(upload.file_size)))
        if metadata is not None:
            rows.append((tr("summary.name"), metadata.name.strip() or none))
            rows.append((tr("summary.description"), metadata.description.strip() or none))
            rows.append((tr("summary.category"), metadata.category_name or none))
            rows.append((tr("summary.tags"), ", ".join(metadata.tags) or none))
        if self.state_manager.is_png_component_definition_required():
            definition = self.state_manager.get_step_data(LogicalStep.COMPONENT_DEFINITION)
            count = len(definition.components) if definition else 0
            rows.append((tr("summary.components"), str(count)))
        return rows

    def populate_data(self):
        while self.form.rowCount():
            self.form.removeRow(0)

        for caption, value in self.get_summary_rows():
            caption_label = QLabel(caption)
            caption_label.setFont(create_font(weight=FontManager.WEIGHT_SEMIBOLD))
            caption_label.setStyleSheet("border: none;")
            value_label = QLabel(value)
            value_label.setWordWrap(True)
            value_label.setStyleSheet("border: none;")
            self.form.addRow(caption_label, value_label)

        summary = self.get_step_data()
        self.confirm_checkbox.blockSignals(True)
        self.confirm_checkbox.setChecked(bool(summary and summary.is_reviewed))
        self.confirm_checkbox.blockSignals(False)

    def _on_confirm_toggled(self, checked: bool):
        self.save_step_data(is_reviewed=checked)
