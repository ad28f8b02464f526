"""Domain value objects for the engagement store.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from engage.domain.value.common import RootValueObject

# C0 control characters except tab and newline, plus DEL
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

COMMENT_TEXT_MAX_LENGTH = 600


class Avatar(str, Enum):
    """Avatar identifiers a commenter can pick from."""

    ICON_01 = "icon_01"
    ICON_02 = "icon_02"
    ICON_03 = "icon_03"
    ICON_04 = "icon_04"
    ICON_05 = "icon_05"
    ICON_06 = "icon_06"

    @classmethod
    def default(cls) -> "Avatar":
        """Avatar used when the client doesn't pick one."""
        return cls.ICON_01


class UserName(RootValueObject[str]):
    """Display name attached to a comment.

    1-16 characters, ASCII letters and digits only.
    Examples: 'alice', 'Naruto99'
    """

    @field_validator("root")
    @classmethod
    def validate_user_name(cls, v: str) -> str:
        """Validate user name format."""
        if not re.fullmatch(r"[A-Za-z0-9]{1,16}", v):
            raise ValueError(
                "User name must be 1-16 characters, letters and numbers only"
            )
        return v


class LikerId(RootValueObject[str]):
    """Token identifying who liked a comment.

    Derived from the author name on the client; 1-32 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_liker_id(cls, v: str) -> str:
        """Validate the token length."""
        if len(v) < 1 or len(v) > 32:
            raise ValueError("User ID must be 1-32 characters")
        return v


class CommentText(RootValueObject[str]):
    """Sanitized comment body.

    Surrounding whitespace and control characters are removed before the
    1-600 character limit is checked.
    """

    @field_validator("root")
    @classmethod
    def sanitize_and_validate(cls, v: str) -> str:
        """Sanitize text, then enforce the length limit."""
        cleaned = _CONTROL_CHARS.sub("", v).strip()
        if not cleaned:
            raise ValueError("Comment text must not be empty")
        if len(cleaned) > COMMENT_TEXT_MAX_LENGTH:
            raise ValueError(
                f"Comment text is too long (maximum {COMMENT_TEXT_MAX_LENGTH} characters)"
            )
        return cleaned
