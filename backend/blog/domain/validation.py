"""Article form validation rules.

Lengths are counted in code points (``len`` on ``str``), so a title written in
multi-byte characters is measured by what the reader sees, not by its UTF-8
size.
"""

from enum import Enum

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 40
BODY_MIN_LENGTH = 10


class ValidationCode(str, Enum):
    """Reason a single field was rejected."""

    EMPTY = "EMPTY"
    LENGTH = "LENGTH"


MESSAGES: dict[tuple[str, ValidationCode], str] = {
    ("title", ValidationCode.EMPTY): "Title is required",
    ("title", ValidationCode.LENGTH): (
        f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
    ),
    ("body", ValidationCode.EMPTY): "Body is required",
    ("body", ValidationCode.LENGTH): f"Body must be at least {BODY_MIN_LENGTH} characters",
}


def check_article_fields(title: str, body: str) -> dict[str, ValidationCode]:
    """Return the failing rule per field; an empty dict means both fields pass."""
    codes: dict[str, ValidationCode] = {}

    if title == "":
        codes["title"] = ValidationCode.EMPTY
    elif not TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
        codes["title"] = ValidationCode.LENGTH

    if body == "":
        codes["body"] = ValidationCode.EMPTY
    elif len(body) < BODY_MIN_LENGTH:
        codes["body"] = ValidationCode.LENGTH

    return codes


def validate_article(title: str, body: str) -> dict[str, str]:
    """Validate raw form values and return ``{field: message}`` for each failure."""
    return {
        field: MESSAGES[(field, code)]
        for field, code in check_article_fields(title, body).items()
    }
