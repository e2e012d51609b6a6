# -*- coding: utf-8 -*-
"""
Design System - colors and shared component styles for
Template Studio.
"""


class Colors:
    """Color palette."""

    # Brand
    PRIMARY_BLUE = "#3890DF"
    PRIMARY_BLUE_HOVER = "#2870BF"
    PRIMARY_WHITE = "#FFFFFF"

    # Backgrounds
    BACKGROUND = "#f0f7ff"
    SURFACE = "#FFFFFF"
    HEADER_BG = "#f8f9fa"

    # Text
    TEXT_PRIMARY = "#2C3E50"
    TEXT_SECONDARY = "#7F8C9B"
    TEXT_DISABLED = "#BDC3C7"
    PAGE_TITLE = "#212B36"
    PAGE_SUBTITLE = "#637381"

    # Borders
    BORDER_DEFAULT = "#E1E8ED"
    DIVIDER = "#dee2e6"

    # Status
    SUCCESS = "#27AE60"
    WARNING = "#F39C12"
    ERROR = "#E74C3C"
    ERROR_BG = "#FDEDEC"
    INFO = "#3498DB"

    # Step indicators
    STEP_ACTIVE = PRIMARY_BLUE
    STEP_COMPLETED = SUCCESS
    STEP_PENDING = "#CED4DA"


class ComponentStyles:
    """Reusable stylesheet snippets."""

    @staticmethod
    def get_input_style():
        return f"""
            QLineEdit, QTextEdit, QComboBox, QSpinBox {{
                background-color: {Colors.SURFACE};
                border: 1px solid {Colors.BORDER_DEFAULT};
                border-radius: 6px;
                padding: 6px 10px;
                color: {Colors.TEXT_PRIMARY};
            }}
            QLineEdit:focus, QTextEdit:focus, QComboBox:focus, QSpinBox:focus {{
                border-color: {Colors.PRIMARY_BLUE};
            }}
        """

    @staticmethod
    def get_card_style():
        return f"""
            QFrame {{
                background-color: {Colors.SURFACE};
                border: 1px solid {Colors.BORDER_DEFAULT};
                border-radius: 8px;
            }}
        """

    @staticmethod
    def get_error_banner_style():
        return f"""
            QLabel {{
                background-color: {Colors.ERROR_BG};
                color: {Colors.ERROR};
                border: 1px solid {Colors.ERROR};
                border-radius: 6px;
                padding: 8px 12px;
            }}
        """

    @staticmethod
    def get_progress_bar_style():
        return f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Colors.PRIMARY_BLUE};
                border-radius: 3px;
            }}
        """
