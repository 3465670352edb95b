"""
shared_utils: stateless helpers shared by the LLM provider integrations.

    files       MIME-type registry, classification and data-URL parsing
    dates       date arithmetic, comparison and display formatting
    comparison  order-insensitive structural equality
"""

from shared_utils.comparison import canonicalize, deep_equal, sorted_arrays_equal
from shared_utils.core.exceptions import Base64DecodeError, InvalidDateError, SharedUtilsError
from shared_utils.dates import (
    DateInput,
    add_days,
    diff_in_days,
    end_of_day,
    format_date,
    is_future,
    is_past,
    is_same_day,
    is_within_range,
    max_date,
    min_date,
    now_iso,
    start_of_day,
    subtract_days,
    to_date_string,
    to_display_date,
    to_relative_string,
)
from shared_utils.files import (
    ALL_FILE_TYPES,
    DOCUMENT_FILE_TYPES,
    FILE_TYPE_EXTENSIONS,
    FILE_TYPE_LABELS,
    IMAGE_FILE_TYPES,
    TEXT_FILE_TYPES,
    FileContentCategory,
    FileType,
    ImageMediaType,
    ParsedFileData,
    decode_base64_text,
    get_accepted_types_record,
    get_content_category,
    get_file_type_label,
    get_supported_types,
    get_unsupported_type_error,
    is_document_type,
    is_image_type,
    is_supported_type,
    is_text_type,
    parse_data_url,
)

__all__ = [
    # files
    "FileType",
    "FileContentCategory",
    "ImageMediaType",
    "IMAGE_FILE_TYPES",
    "DOCUMENT_FILE_TYPES",
    "TEXT_FILE_TYPES",
    "ALL_FILE_TYPES",
    "FILE_TYPE_EXTENSIONS",
    "FILE_TYPE_LABELS",
    "ParsedFileData",
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
    # dates
    "DateInput",
    "to_date_string",
    "now_iso",
    "is_past",
    "is_future",
    "add_days",
    "subtract_days",
    "diff_in_days",
    "start_of_day",
    "end_of_day",
    "is_same_day",
    "max_date",
    "min_date",
    "is_within_range",
    "to_display_date",
    "format_date",
    "to_relative_string",
    # comparison
    "canonicalize",
    "deep_equal",
    "sorted_arrays_equal",
    # errors
    "SharedUtilsError",
    "Base64DecodeError",
    "InvalidDateError",
]
