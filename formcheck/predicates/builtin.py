"""Built-in field predicates.

Each predicate takes the normalized field value and the rule's opaque ``args``
and returns a boolean. None of them mutate the field.
"""

from __future__ import annotations

import re
from typing import Any

EMAIL_RE = re.compile(r"[A-Z0-9._%+\-']+@(?:[A-Z0-9-]+\.)+[A-Z]{2,10}", re.IGNORECASE)
VALID_CHARS_RE = re.compile(r"[A-Za-z\-\s]*")
VALID_CHARS_EXT1_RE = re.compile(r"[A-Za-z@&\-'\s]*")


def required(value: str, args: Any = None) -> bool:
    """True when the value has at least one character."""
    return len(value) >= 1


def email(value: str, args: Any = None) -> bool:
    """True when the value looks like ``local@domain.tld``."""
    return EMAIL_RE.fullmatch(value) is not None


def valid_chars(value: str, args: Any = None) -> bool:
    """Letters, hyphens and whitespace only. The empty string passes."""
    return VALID_CHARS_RE.fullmatch(value) is not None


def valid_chars_ext1(value: str, args: Any = None) -> bool:
    """Like ``valid_chars`` but also allows ``@``, ``&`` and apostrophes."""
    return VALID_CHARS_EXT1_RE.fullmatch(value) is not None


BUILTIN_PREDICATES = {
    "Required": required,
    "Email": email,
    "ValidChars": valid_chars,
    "ValidCharsExt1": valid_chars_ext1,
}
