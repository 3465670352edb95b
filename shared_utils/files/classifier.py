"""
shared_utils/files/classifier.py

Classification queries over the supported MIME types.

All lookups are exact and case-sensitive: ``"image/PNG"`` is not supported.
Members of FileType compare equal to their MIME strings, so either may be
passed.
"""

from __future__ import annotations

from typing import List, Optional

from shared_utils.core.constants import UNKNOWN_FILE_LABEL
from shared_utils.files.file_types import (
    ALL_FILE_TYPES,
    DOCUMENT_FILE_TYPES,
    FILE_TYPE_LABELS,
    IMAGE_FILE_TYPES,
    TEXT_FILE_TYPES,
    FileContentCategory,
    FileType,
)


def is_image_type(mime_type: str) -> bool:
    return mime_type in IMAGE_FILE_TYPES


def is_document_type(mime_type: str) -> bool:
    """True for PDF, the only document type."""
    return mime_type in DOCUMENT_FILE_TYPES


def is_text_type(mime_type: str) -> bool:
    return mime_type in TEXT_FILE_TYPES


def is_supported_type(mime_type: str) -> bool:
    return mime_type in ALL_FILE_TYPES


def get_content_category(mime_type: str) -> Optional[FileContentCategory]:
    """
    Return the content category for a MIME type, or None if it is unsupported.

    The groups are disjoint, so the order of the checks is not observable.
    """
    if is_image_type(mime_type):
        return FileContentCategory.IMAGE
    if is_document_type(mime_type):
        return FileContentCategory.DOCUMENT
    if is_text_type(mime_type):
        return FileContentCategory.TEXT
    return None


def get_supported_types() -> List[str]:
    """Return a new list of every supported MIME string, in declaration order."""
    return [file_type.value for file_type in ALL_FILE_TYPES]


def get_unsupported_type_error(mime_type: str) -> str:
    """Return a user-facing message for a rejected MIME type."""
    return (
        f"Unsupported file media type: {mime_type}. "
        f"Supported types: {', '.join(get_supported_types())}"
    )


def get_file_type_label(mime_type: str) -> str:
    """
    Return a short label for a MIME type, e.g. "PDF", "JPEG", "Markdown".

    Unknown types fall back to the upper-cased subtype ("video/mp4" -> "MP4").
    When there is no subtype to read, ``UNKNOWN_FILE_LABEL`` is returned.
    """
    if isinstance(mime_type, FileType):
        mime_type = mime_type.value

    label = FILE_TYPE_LABELS.get(mime_type)
    if label is not None:
        return label

    parts = mime_type.split("/")
    if len(parts) > 1 and parts[1]:
        return parts[1].upper()
    return UNKNOWN_FILE_LABEL
