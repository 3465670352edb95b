"""shared_utils/files/__init__.py — public API of the files package."""

from shared_utils.files.classifier import (
    get_content_category,
    get_file_type_label,
    get_supported_types,
    get_unsupported_type_error,
    is_document_type,
    is_image_type,
    is_supported_type,
    is_text_type,
)
from shared_utils.files.data_url import decode_base64_text, parse_data_url
from shared_utils.files.models import ParsedFileData
from shared_utils.files.file_types import (
    ALL_FILE_TYPES,
    DOCUMENT_FILE_TYPES,
    FILE_TYPE_EXTENSIONS,
    FILE_TYPE_LABELS,
    IMAGE_FILE_TYPES,
    TEXT_FILE_TYPES,
    FileContentCategory,
    FileType,
    ImageMediaType,
    get_accepted_types_record,
)

__all__ = [
    "FileType",
    "FileContentCategory",
    "ImageMediaType",
    "IMAGE_FILE_TYPES",
    "DOCUMENT_FILE_TYPES",
    "TEXT_FILE_TYPES",
    "ALL_FILE_TYPES",
    "FILE_TYPE_EXTENSIONS",
    "FILE_TYPE_LABELS",
    "get_accepted_types_record",
    "is_image_type",
    "is_document_type",
    "is_text_type",
    "is_supported_type",
    "get_content_category",
    "get_supported_types",
    "get_unsupported_type_error",
    "get_file_type_label",
    "decode_base64_text",
    "parse_data_url",
    "ParsedFileData",
]
