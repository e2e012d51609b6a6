# -*- coding: utf-8 -*-
"""
Template Studio Utility Module
"""

from .logger import get_logger, setup_logger
from .file_types import is_png_like, get_file_extension, format_file_size

__all__ = [
    "get_logger",
    "setup_logger",
    "is_png_like",
    "get_file_extension",
    "format_file_size",
]
