# -*- coding: utf-8 -*-
"""
Step Indicator Bar - numbered step chips with titles.

Completed steps are green, the current step is blue; reachable steps can
be clicked to jump to them.
"""

from typing import List, TYPE_CHECKING

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt5.QtCore import Qt, pyqtSignal

from ui.design_system import Colors

if TYPE_CHECKING:
    from ui.wizards.framework.step_navigator import StepIndicator


class StepIndicatorBar(QWidget):
    """Row of step indicators rebuilt on every set_indicators() call."""

    step_clicked = pyqtSignal(int)  # step number

    def __init__(self, parent=None):
        super().__init__(parent)
        self.buttons: List[QPushButton] = []

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(20, 8, 20, 8)
        self._layout.setSpacing(8)

    def set_indicators(self, indicators: List['StepIndicator']):
        for button in self.buttons:
            self._layout.removeWidget(button)
            button.deleteLater()
        self.buttons = []

        for indicator in indicators:
            prefix = "✓" if indicator.is_completed and not indicator.is_current else str(indicator.number)
            button = QPushButton(f"{prefix}  {indicator.title}")
            button.setEnabled(indicator.is_reachable)
            button.setCursor(Qt.PointingHandCursor)
            button.setProperty("stepNumber", indicator.number)
            button.setStyleSheet(self._style_for(indicator))
            button.clicked.connect(lambda _checked=False, n=indicator.number: self.step_clicked.emit(n))
            self._layout.addWidget(button)
            self.buttons.append(button)

    @staticmethod
    def _style_for(indicator: 'StepIndicator') -> str:
        if indicator.is_current:
            background, color = Colors.STEP_ACTIVE, Colors.PRIMARY_WHITE
        elif indicator.is_completed:
            background, color = Colors.STEP_COMPLETED, Colors.PRIMARY_WHITE
        else:
            background, color = Colors.STEP_PENDING, Colors.TEXT_PRIMARY
        return f"""
            QPushButton {{
                background-color: {background};
                color: {color};
                border: none;
                border-radius: 14px;
                padding: 6px 14px;
            }}
            QPushButton:disabled {{
                color: {Colors.TEXT_SECONDARY};
            }}
        """
