# -*- coding: utf-8 -*-
"""
File type helpers for template uploads.

is_png_like() decides whether the wizard needs the component definition
step: raster PNG uploads get it, Figma/vector uploads skip it.
"""

import mimetypes
from pathlib import PurePath
from typing import Optional, Tuple

PNG_MIME_TYPES = ("image/png", "image/x-png", "image/apng")
PNG_EXTENSIONS = (".png", ".apng")
FIGMA_MIME_TYPE = "application/figma"
FIGMA_EXTENSION = ".fig"


def get_file_extension(file_name: str) -> str:
    """Return the lower-case extension including the dot ('' if none)."""
    if not file_name:
        return ""
    return PurePath(file_name).suffix.lower()


def guess_mime_type(file_name: str) -> str:
    """Guess a MIME type from a file name; .fig maps to application/figma."""
    extension = get_file_extension(file_name)
    if extension == FIGMA_EXTENSION:
        return FIGMA_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(file_name)
    return mime_type or "application/octet-stream"


def is_png_like(file_name_or_mime_type: Optional[str]) -> bool:
    """
    Check whether a file name or MIME type denotes a PNG-family raster image.

    Args:
        file_name_or_mime_type: e.g. "image/png", "hero.PNG", "design.fig"

    Returns:
        True for PNG MIME types and .png/.apng file names
    """
    if not file_name_or_mime_type:
        return False

    value = file_name_or_mime_type.strip().lower()
    if "/" in value and not value.endswith(PNG_EXTENSIONS):
        # MIME type, possibly with parameters ("image/png; q=0.9")
        return value.split(";")[0].strip() in PNG_MIME_TYPES

    return get_file_extension(value) in PNG_EXTENSIONS


def get_file_type_label(file_name: str) -> str:
    """Human readable file type for summaries."""
    extension = get_file_extension(file_name)
    if extension == FIGMA_EXTENSION:
        return "Figma File"
    if extension in PNG_EXTENSIONS:
        return "PNG Image"
    return "Unknown"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count as e.g. '1.5 MB'."""
    if not size_bytes:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    size = float(size_bytes)
    index = 0
    while size >= 1024 and index < len(units) - 1:
        size /= 1024
        index += 1

    if index == 0:
        return f"{int(size)} Bytes"
    return f"{round(size, 2):g} {units[index]}"


def validate_template_file(file_name: str, file_size: int,
                           mime_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Validate a template file before upload.

    Returns:
        Tuple of (is_valid, error_message)
    """
    from app.config import Config
    from services.translation_manager import tr

    extension = get_file_extension(file_name)
    mime_type = mime_type or guess_mime_type(file_name)

    if extension not in Config.ALLOWED_EXTENSIONS and mime_type not in Config.ALLOWED_MIME_TYPES:
        return False, tr("upload.error.invalid_type")

    if file_size is None or file_size <= 0:
        return False, tr("upload.error.empty_file")

    if file_size > Config.MAX_UPLOAD_SIZE:
        return False, tr("upload.error.too_large",
                         limit=format_file_size(Config.MAX_UPLOAD_SIZE))

    return True, ""
