# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Cancel, Back and Next/Complete buttons.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout
from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.design_system import Colors


class WizardFooter(QWidget):
    """
    Reusable wizard footer component.

    Signals:
        previous_clicked: Back button clicked
        next_clicked: Next/Complete button clicked
        cancel_clicked: Cancel button clicked
    """

    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    cancel_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("wizardFooter")
        self.setStyleSheet(f"""
            QWidget#wizardFooter {{
                background-color: {Colors.HEADER_BG};
                border-top: 1px solid {Colors.DIVIDER};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = ActionButton(tr("button.cancel"), variant="secondary")
        self.btn_cancel.clicked.connect(self.cancel_clicked.emit)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = ActionButton(tr("button.back"), variant="secondary")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(tr("button.next"), variant="primary", width=140)
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        self.btn_next.setEnabled(enabled)

    def set_previous_enabled(self, enabled: bool):
        self.btn_previous.setEnabled(enabled)

    def set_cancel_enabled(self, enabled: bool):
        self.btn_cancel.setEnabled(enabled)

    def set_next_text(self, text: str):
        self.btn_next.setText(text)
