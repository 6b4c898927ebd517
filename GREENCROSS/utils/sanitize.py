"""
utils/sanitize.py

Helpers for stripping HTML from customer-supplied text before it is
echoed into the preorder email.
"""

import html
from typing import ClassVar, Tuple

import bleach
from pydantic import BaseModel, field_validator
from pydantic_core.core_schema import ValidationInfo

# No markup survives; preorder emails are plain text.
ALLOWED_TAGS = []
ALLOWED_ATTRIBUTES = {}


def sanitize_text(user_input: str, max_length: int = 500) -> str:
    """
    Strip tags and enforce a length limit.
    Entities bleach escapes are decoded again; the result is plain text.
    """
    if not user_input:
        return ""

    trimmed = user_input[:max_length]

    cleaned = bleach.clean(
        trimmed,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True
    )

    return html.unescape(cleaned).strip()


class SanitizedModel(BaseModel):
    """
    Base model that sanitizes every incoming string field.
    Fields listed in UNSANITIZED_FIELDS are passed through untouched.
    """

    UNSANITIZED_FIELDS: ClassVar[Tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def sanitize_all_strings(cls, v, info: ValidationInfo):
        if isinstance(v, str):
            if info.field_name in cls.UNSANITIZED_FIELDS:
                return v
            return sanitize_text(v, max_length=1000)
        return v
