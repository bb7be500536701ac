"""
Field validation for values written to the widget root.

Each validated field maps to a pattern and to the message reported when a
value does not match it.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from typing import Any, Dict, Pattern

from .exceptions import ValidationError

# Characters allowed in the path part of an id.
_ID_PATH = r"[a-zA-Z0-9\-.?,'/\\+&%$#_]"

# Matching is always done with fullmatch, so the patterns carry no anchors.
VALIDATION_PATTERNS: Dict[str, Pattern[str]] = {
    # host[:port...][/path]. Without a colon the host is part of the path run;
    # with one, the host is everything before the first colon.
    "id": re.compile(
        r"[0-9a-zA-Z](?:"
        + _ID_PATH
        + r"*|(?:[-.\w]*[0-9a-zA-Z])?:(?:[0-9]*:)*"
        + _ID_PATH
        + r"*)",
        re.ASCII,
    ),
    "version": re.compile(r"[0-9]+\.[0-9]+\.[0-9]+"),
    "android-version-code": re.compile(r"[0-9]+"),
    "ios-bundle-version": re.compile(r"[1-9][0-9]*(?:\.[0-9]+){0,2}"),
}

VALIDATION_MESSAGES: Dict[str, str] = {
    "id": "Please provide a valid id.",
    "version": "Please provide a valid version number.",
    "android-version-code": "Please provide a valid Android version code.",
    "ios-bundle-version": "Please provide a valid iOS bundle version number.",
}


def is_valid(field: str, value: Any) -> bool:
    """Return True if value matches the pattern registered for field."""
    pattern = VALIDATION_PATTERNS[field]
    if value is None or isinstance(value, bool):
        return False
    return pattern.fullmatch(str(value)) is not None


def validate_field(field: str, value: Any) -> str:
    """
    Validate value for field and return it as a string.

    Raises:
        ValidationError: If value does not match the field pattern
        KeyError: If field has no registered pattern
    """
    if not is_valid(field, value):
        raise ValidationError(VALIDATION_MESSAGES[field], field=field, value=value)
    return str(value)
