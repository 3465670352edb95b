"""
shared_utils/files/file_types.py

The supported MIME-type universe for LLM provider uploads.

FileType members are partitioned into three disjoint groups (image, document,
text); each group maps one-to-one onto a FileContentCategory. The lookup
tables below are built once at import time and are read-only.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Literal, Mapping, Tuple, Union


class FileType(str, Enum):
    """Supported file MIME types."""

    # Images
    IMAGE_JPEG = "image/jpeg"
    IMAGE_PNG = "image/png"
    IMAGE_GIF = "image/gif"
    IMAGE_WEBP = "image/webp"
    # Documents
    PDF = "application/pdf"
    # Text
    TEXT_PLAIN = "text/plain"
    TEXT_CSV = "text/csv"
    TEXT_HTML = "text/html"
    TEXT_MARKDOWN = "text/markdown"


class FileContentCategory(str, Enum):
    """How a provider should treat the file content."""

    IMAGE = "image"
    DOCUMENT = "document"
    TEXT = "text"


#: Image MIME types, for providers whose SDKs require a literal union.
ImageMediaType = Literal["image/jpeg", "image/png", "image/gif", "image/webp"]


# ── File type groups ───────────────────────────────────────────────────────────

IMAGE_FILE_TYPES: Tuple[FileType, ...] = (
    FileType.IMAGE_JPEG,
    FileType.IMAGE_PNG,
    FileType.IMAGE_GIF,
    FileType.IMAGE_WEBP,
)

DOCUMENT_FILE_TYPES: Tuple[FileType, ...] = (
    FileType.PDF,
)

TEXT_FILE_TYPES: Tuple[FileType, ...] = (
    FileType.TEXT_PLAIN,
    FileType.TEXT_CSV,
    FileType.TEXT_HTML,
    FileType.TEXT_MARKDOWN,
)

ALL_FILE_TYPES: Tuple[FileType, ...] = (
    *IMAGE_FILE_TYPES,
    *DOCUMENT_FILE_TYPES,
    *TEXT_FILE_TYPES,
)


# ── Lookup tables ──────────────────────────────────────────────────────────────

#: Accepted filename extensions per type (client-side upload validation).
FILE_TYPE_EXTENSIONS: Mapping[FileType, Tuple[str, ...]] = MappingProxyType({
    FileType.IMAGE_JPEG: (".jpg", ".jpeg"),
    FileType.IMAGE_PNG: (".png",),
    FileType.IMAGE_GIF: (".gif",),
    FileType.IMAGE_WEBP: (".webp",),
    FileType.PDF: (".pdf",),
    FileType.TEXT_PLAIN: (".txt",),
    FileType.TEXT_CSV: (".csv",),
    FileType.TEXT_HTML: (".html", ".htm"),
    FileType.TEXT_MARKDOWN: (".md", ".markdown"),
})

#: Short human-readable labels, keyed by the raw MIME string.
FILE_TYPE_LABELS: Mapping[str, str] = MappingProxyType({
    FileType.PDF.value: "PDF",
    FileType.IMAGE_JPEG.value: "JPEG",
    FileType.IMAGE_PNG.value: "PNG",
    FileType.IMAGE_WEBP.value: "WebP",
    FileType.IMAGE_GIF.value: "GIF",
    FileType.TEXT_PLAIN.value: "TXT",
    FileType.TEXT_CSV.value: "CSV",
    FileType.TEXT_HTML.value: "HTML",
    FileType.TEXT_MARKDOWN.value: "Markdown",
})


def get_accepted_types_record(
    file_types: Iterable[Union[FileType, str]],
) -> Dict[str, List[str]]:
    """
    Build a ``{mime_type: [extensions]}`` record for client upload components.

    Args:
        file_types: FileType members (or their MIME strings) to include.

    Returns:
        A new dict keyed by MIME string; each value is a fresh list.

    Raises:
        ValueError: If a string is not a member of FileType.
    """
    record: Dict[str, List[str]] = {}
    for value in file_types:
        file_type = FileType(value)
        record[file_type.value] = list(FILE_TYPE_EXTENSIONS[file_type])
    return record
