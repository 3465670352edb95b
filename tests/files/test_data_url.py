"""
tests/files/test_data_url.py

Tests for parse_data_url and decode_base64_text.
"""

import base64
import logging

import pytest
from pydantic import ValidationError

from shared_utils.core.exceptions import Base64DecodeError, SharedUtilsError
from shared_utils.files.data_url import decode_base64_text, parse_data_url
from shared_utils.files.file_types import FileContentCategory
from shared_utils.files.models import ParsedFileData


class TestDecodeBase64Text:

    def test_decodes_ascii(self, b64) -> None:
        assert decode_base64_text(b64("Hello, World!")) == "Hello, World!"

    def test_preserves_multibyte_characters(self, b64) -> None:
        text = "Café ☕ 日本"
        assert decode_base64_text(b64(text)) == text

    def test_empty_string(self) -> None:
        assert decode_base64_text("") == ""

    def test_missing_padding_is_tolerated(self, b64) -> None:
        encoded = b64("ab")            # "YWI="
        assert decode_base64_text(encoded.rstrip("=")) == "ab"

    def test_invalid_alphabet_raises(self) -> None:
        with pytest.raises(Base64DecodeError):
            decode_base64_text("not base64!")

    def test_non_utf8_bytes_raise(self) -> None:
        payload = base64.b64encode(b"\xff\xfe\xfd").decode("ascii")

        with pytest.raises(Base64DecodeError, match="UTF-8"):
            decode_base64_text(payload)

    def test_error_is_part_of_package_hierarchy(self) -> None:
        with pytest.raises(SharedUtilsError):
            decode_base64_text("a")


class TestParsedFileData:

    def test_text_content_allowed_for_text(self) -> None:
        data = ParsedFileData(
            category=FileContentCategory.TEXT,
            mime_type="text/plain",
            base64_data="aGk=",
            text_content="hi",
        )
        assert data.text_content == "hi"

    @pytest.mark.parametrize("category", ["image", "document"])
    def test_text_content_rejected_for_binary_categories(self, category: str) -> None:
        with pytest.raises(ValidationError, match="only allowed for the text category"):
            ParsedFileData(
                category=category,
                mime_type="image/png",
                base64_data="aGk=",
                text_content="hi",
            )


class TestParseDataUrl:

    # ── Accepted ───────────────────────────────────────────────────────────────

    def test_image_data_url(self, png_data_url) -> None:
        result = parse_data_url(png_data_url)

        assert result == ParsedFileData(
            category=FileContentCategory.IMAGE,
            mime_type="image/png",
            base64_data="iVBORw0KGgo=",
        )
        assert result.text_content is None

    def test_pdf_data_url(self) -> None:
        result = parse_data_url("data:application/pdf;base64,JVBERi0=")

        assert result is not None
        assert result.category is FileContentCategory.DOCUMENT
        assert result.mime_type == "application/pdf"
        assert result.base64_data == "JVBERi0="
        assert result.text_content is None

    def test_text_data_url_is_decoded(self, text_data_url, sample_text, b64) -> None:
        result = parse_data_url(text_data_url)

        assert result == ParsedFileData(
            category=FileContentCategory.TEXT,
            mime_type="text/plain",
            base64_data=b64(sample_text),
            text_content=sample_text,
        )

    def test_serialised_shape_omits_text_content_for_binary_types(self, png_data_url) -> None:
        dumped = parse_data_url(png_data_url).model_dump(mode="json", exclude_none=True)

        assert dumped == {
            "category": "image",
            "mime_type": "image/png",
            "base64_data": "iVBORw0KGgo=",
        }

    def test_binary_payload_is_not_validated(self) -> None:
        """Image and document payloads are passed through untouched."""
        result = parse_data_url("data:image/gif;base64,@@not-base64@@")

        assert result is not None
        assert result.base64_data == "@@not-base64@@"

    def test_markdown_with_unicode(self, b64) -> None:
        text = "# Titel\n\nGrüße, ça va?"
        result = parse_data_url(f"data:text/markdown;base64,{b64(text)}")

        assert result.text_content == text

    def test_extra_parameters_before_base64_are_ignored(self, b64) -> None:
        result = parse_data_url(f"data:text/csv;charset=utf-8;base64,{b64('a,b')}")

        assert result.mime_type == "text/csv"
        assert result.text_content == "a,b"

    # ── Rejected ───────────────────────────────────────────────────────────────

    def test_non_data_url_returns_none(self) -> None:
        assert parse_data_url("https://example.com") is None

    def test_missing_comma_returns_none(self) -> None:
        assert parse_data_url("data:image/png;base64") is None

    def test_empty_payload_returns_none(self) -> None:
        assert parse_data_url("data:image/png;base64,") is None

    def test_missing_mime_type_returns_none(self) -> None:
        assert parse_data_url("data:;base64,abc") is None

    def test_unsupported_mime_type_returns_none(self) -> None:
        assert parse_data_url("data:application/json;base64,e30=") is None

    def test_prefix_is_case_sensitive(self, png_data_url) -> None:
        assert parse_data_url(png_data_url.replace("data:", "DATA:")) is None

    def test_rejection_is_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="shared_utils.files.data_url"):
            parse_data_url("data:video/mp4;base64,AAAA")

        assert "unsupported MIME type 'video/mp4'" in caplog.text

    # ── Decode failures ────────────────────────────────────────────────────────

    def test_undecodable_text_payload_raises(self) -> None:
        with pytest.raises(Base64DecodeError):
            parse_data_url("data:text/plain;base64,%%%")
