# -*- coding: utf-8 -*-
"""
Completion Step - final step; shows submission readiness and the result.
"""

from typing import Any, Dict

from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import Qt

from services.translation_manager import tr
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager
from ui.design_system import Colors
from ui.font_utils import create_font, FontManager
from ui.wizards.framework import BaseStep


class CompletionStep(BaseStep):
    """Final step: submit and show the created template id."""

    LOGICAL_STEP = LogicalStep.COMPLETION

    def setup_ui(self):
        layout = self.main_layout
        layout.addStretch()

        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        self.status_label.setFont(create_font(size=FontManager.SIZE_HEADING, weight=FontManager.WEIGHT_SEMIBOLD))
        layout.addWidget(self.status_label)

        self.template_id_label = QLabel("")
        self.template_id_label.setAlignment(Qt.AlignCenter)
        self.template_id_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        self.template_id_label.hide()
        layout.addWidget(self.template_id_label)

        layout.addStretch()

        self.listen(WizardStateManager.WIZARD_COMPLETED, self._on_wizard_completed)

    def populate_data(self):
        completion = self.get_step_data()
        if completion is not None and completion.is_submitted:
            self._show_success(completion.template_id)
        else:
            self.status_label.setText(tr("completion.ready"))
            self.status_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY};")

    def _on_wizard_completed(self, data: Dict[str, Any]):
        self._show_success(data.get("result_id"))

    def _show_success(self, template_id: str):
        self.status_label.setText(tr("completion.success"))
        self.status_label.setStyleSheet(f"color: {Colors.SUCCESS};")
        if template_id:
            self.template_id_label.setText(tr("completion.template_id", id=template_id))
            self.template_id_label.show()
