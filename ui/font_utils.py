# -*- coding: utf-8 -*-
"""
Font Utilities.

Single place for font configuration; widgets get QFont objects from
create_font() instead of setting fonts in stylesheets.

Usage:
    from ui.font_utils import create_font, FontManager

    label.setFont(create_font(size=14, weight=FontManager.WEIGHT_SEMIBOLD))
"""

from typing import Optional, List

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication


class FontManager:
    """Font configuration and factory."""

    PRIMARY_FONT_FAMILY = "IBM Plex Sans Arabic"
    FALLBACK_FONT_FAMILY = "Calibri"

    # Default sizes (in points)
    SIZE_SMALL = 8
    SIZE_BODY = 10
    SIZE_SUBHEADING = 12
    SIZE_HEADING = 14
    SIZE_TITLE = 18

    # Weights (CSS scale)
    WEIGHT_LIGHT = 300
    WEIGHT_REGULAR = 400
    WEIGHT_MEDIUM = 500
    WEIGHT_SEMIBOLD = 600
    WEIGHT_BOLD = 700

    @staticmethod
    def _qt_weight(weight: int) -> int:
        """Map a CSS weight to Qt's 0-99 scale."""
        if weight >= 700:
            return QFont.Bold
        if weight >= 600:
            return QFont.DemiBold
        if weight >= 500:
            return QFont.Medium
        if weight >= 400:
            return QFont.Normal
        return QFont.Light

    @staticmethod
    def create_font(
        size: int = SIZE_BODY,
        weight: int = WEIGHT_REGULAR,
        letter_spacing: float = 0.0,
        families: Optional[List[str]] = None
    ) -> QFont:
        """
        Create a QFont.

        Args:
            size: Font size in points
            weight: CSS font weight (300-700)
            letter_spacing: Letter spacing in pixels
            families: Font families (default: primary then fallback)
        """
        if families is None:
            families = [
                FontManager.PRIMARY_FONT_FAMILY,
                FontManager.FALLBACK_FONT_FAMILY
            ]

        font = QFont()
        font.setFamilies(families)
        font.setPointSize(size)
        font.setWeight(FontManager._qt_weight(weight))
        font.setLetterSpacing(QFont.AbsoluteSpacing, letter_spacing)
        return font

    @staticmethod
    def set_application_default():
        """Default font for the whole application (call once at startup)."""
        QApplication.setFont(FontManager.create_font())


def create_font(
    size: int = FontManager.SIZE_BODY,
    weight: int = FontManager.WEIGHT_REGULAR,
    letter_spacing: float = 0.0,
    families: Optional[List[str]] = None
) -> QFont:
    """Convenience wrapper for FontManager.create_font()."""
    return FontManager.create_font(size, weight, letter_spacing, families)


def set_application_default_font():
    FontManager.set_application_default()
