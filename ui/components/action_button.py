# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer and the step forms.
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from ui.design_system import Colors


class ActionButton(QPushButton):
    """
    Push button with the shared variant styles.

    Variants:
    - primary: Blue solid - main actions (Next, Complete)
    - secondary: Gray - secondary actions (Cancel, Back)
    - outline: Light blue with border - in-form actions (Add, Browse)

    Usage:
        btn = ActionButton(tr("button.next"), variant="primary")
        btn = ActionButton(tr("button.add"), variant="outline", width=90, height=36)
    """

    VARIANTS = ("primary", "secondary", "outline")

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 114,
        height: int = 44,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary" or "outline"
            width: Minimum width in pixels (grows with longer text)
            height: Button height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)

        self.setMinimumWidth(width)
        self.setFixedHeight(height)
        self.setCursor(Qt.PointingHandCursor)

        self.variant = variant
        self._apply_style(variant)

    def _apply_style(self, variant: str):
        if variant == "primary":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Colors.PRIMARY_BLUE};
                    color: white;
                    border: none;
                    padding: 8px 12px;
                    border-radius: 4px;
                    font-size: 13px;
                }}
                QPushButton:hover {{
                    background-color: {Colors.PRIMARY_BLUE_HOVER};
                }}
                QPushButton:disabled {{
                    background-color: #adb5bd;
                }}
            """)
        elif variant == "secondary":
            self.setStyleSheet("""
                QPushButton {
                    background-color: #6c757d;
                    color: white;
                    border: none;
                    padding: 8px 12px;
                    border-radius: 4px;
                    font-size: 13px;
                }
                QPushButton:hover {
                    background-color: #5c636a;
                }
                QPushButton:disabled {
                    background-color: #adb5bd;
                }
            """)
        elif variant == "outline":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: #F0F7FF;
                    color: {Colors.PRIMARY_BLUE};
                    border: 1px solid {Colors.PRIMARY_BLUE};
                    padding: 6px 12px;
                    border-radius: 8px;
                    font-size: 10.5pt;
                }}
                QPushButton:hover {{
                    background-color: #E0EAFF;
                    border-color: {Colors.PRIMARY_BLUE_HOVER};
                }}
                QPushButton:disabled {{
                    background-color: #F8F9FA;
                    color: #ADB5BD;
                    border-color: #DEE2E6;
                }}
            """)
        else:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {', '.join(self.VARIANTS)}")
