"""
shared_utils/files/data_url.py

Parses ``data:<mime>;base64,<payload>`` strings into ParsedFileData.

Rejections (wrong scheme, no payload, no MIME type, unsupported MIME type)
return None. A TEXT payload that cannot be decoded raises Base64DecodeError
instead of producing garbled text.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from shared_utils.core.constants import DATA_URL_PREFIX
from shared_utils.core.exceptions import Base64DecodeError
from shared_utils.core.logger import get_logger
from shared_utils.files.classifier import get_content_category
from shared_utils.files.file_types import FileContentCategory
from shared_utils.files.models import ParsedFileData

logger = get_logger(__name__)


def decode_base64_text(base64_data: str) -> str:
    """
    Decode a standard-alphabet base64 string into UTF-8 text.

    Missing ``=`` padding is tolerated. An empty string decodes to "".

    Raises:
        Base64DecodeError: If the input is not valid base64 or the bytes are
                           not valid UTF-8.
    """
    padded = base64_data + "=" * (-len(base64_data) % 4)
    try:
        raw = base64.b64decode(padded, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        logger.warning("Could not decode base64 text payload (%d chars): %s", len(base64_data), exc)
        raise Base64DecodeError(f"Payload is not valid base64-encoded UTF-8 text: {exc}") from exc


def parse_data_url(data_url: str) -> Optional[ParsedFileData]:
    """
    Parse a data URL and extract the file information.

    Args:
        data_url: A string such as ``data:image/png;base64,iVBORw0KGgo=``.

    Returns:
        ParsedFileData, or None if the string is not a usable data URL.
        ``base64_data`` is returned unmodified; it is only decoded for
        TEXT types, into ``text_content``.

    Raises:
        Base64DecodeError: If a TEXT payload cannot be decoded.
    """
    if not data_url.startswith(DATA_URL_PREFIX):
        logger.debug("Rejected data URL: missing '%s' prefix.", DATA_URL_PREFIX)
        return None

    media_type_section, _, base64_data = data_url.partition(",")
    if not base64_data:
        logger.debug("Rejected data URL: no payload after the comma.")
        return None

    mime_type = media_type_section[len(DATA_URL_PREFIX):].split(";")[0]
    if not mime_type:
        logger.debug("Rejected data URL: no MIME type.")
        return None

    category = get_content_category(mime_type)
    if category is None:
        logger.debug("Rejected data URL: unsupported MIME type '%s'.", mime_type)
        return None

    text_content = None
    if category is FileContentCategory.TEXT:
        text_content = decode_base64_text(base64_data)

    return ParsedFileData(
        category=category,
        mime_type=mime_type,
        base64_data=base64_data,
        text_content=text_content,
    )
