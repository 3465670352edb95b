"""
shared_utils/files/models.py

Pydantic DTO for parsed file payloads.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from shared_utils.files.file_types import FileContentCategory


class ParsedFileData(BaseModel):
    """
    The structured contents of a ``data:`` URL.

        {
            "category": "text",
            "mime_type": "text/plain",
            "base64_data": "SGVsbG8sIFdvcmxkIQ==",
            "text_content": "Hello, World!"
        }

    ``text_content`` is only populated for the TEXT category.
    """

    category: FileContentCategory
    mime_type: str
    base64_data: str = Field(description="Payload exactly as it appeared after the comma.")
    text_content: Optional[str] = None

    @model_validator(mode="after")
    def text_content_only_for_text(self) -> "ParsedFileData":
        if self.text_content is not None and self.category is not FileContentCategory.TEXT:
            raise ValueError(
                f"text_content is only allowed for the text category, not {self.category.value}."
            )
        return self
