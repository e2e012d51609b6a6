# -*- coding: utf-8 -*-
"""
Wizard Header Component - title, subtitle, step label and progress bar.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar

from ui.font_utils import create_font, FontManager
from ui.design_system import Colors, ComponentStyles


class WizardHeader(QWidget):
    """
    Reusable wizard header component.

    Usage:
        header = WizardHeader(title=tr("wizard.title"), subtitle=tr("wizard.subtitle"))
        header.set_progress(tr("wizard.step_of", current=1, total=5), 0)
    """

    def __init__(self, title: str, subtitle: str = "", parent=None):
        super().__init__(parent)
        self.title_text = title
        self.subtitle_text = subtitle

        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("wizardHeader")
        self.setStyleSheet(f"""
            QWidget#wizardHeader {{
                background-color: {Colors.HEADER_BG};
                border-bottom: 1px solid {Colors.DIVIDER};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(self.title_text)
        self.title_label.setFont(create_font(size=18, weight=FontManager.WEIGHT_SEMIBOLD))
        self.title_label.setStyleSheet(f"background: transparent; border: none; color: {Colors.PAGE_TITLE};")
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(self.subtitle_text)
        self.subtitle_label.setFont(create_font(size=11, weight=FontManager.WEIGHT_REGULAR))
        self.subtitle_label.setStyleSheet(f"background: transparent; border: none; color: {Colors.PAGE_SUBTITLE};")
        self.subtitle_label.setVisible(bool(self.subtitle_text))
        layout.addWidget(self.subtitle_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.step_label = QLabel("")
        self.step_label.setFont(create_font(size=10, weight=FontManager.WEIGHT_MEDIUM))
        self.step_label.setStyleSheet(f"background: transparent; border: none; color: {Colors.TEXT_SECONDARY};")
        progress_layout.addWidget(self.step_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(ComponentStyles.get_progress_bar_style())
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)

    def set_progress(self, step_label: str, percentage: float):
        """Update the "Step X of Y" label and the progress bar."""
        self.step_label.setText(step_label)
        self.progress_bar.setValue(int(round(percentage)))
