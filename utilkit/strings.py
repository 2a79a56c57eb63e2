from __future__ import annotations

import re

from .errors import check_args
from .regex import is_valid_hex_color

STRING_ERROR = "Argument should be a String!"
NUMBER_ERROR = "Argument should be a Number!"


def _capitalize(text: str, every_word: bool = False) -> str:
    check_args(text, "string", STRING_ERROR)
    if text.strip() == "":
        return text
    capitalized = text[0].upper() + text[1:].strip()
    if not every_word:
        return capitalized
    return " ".join(word[:1].upper() + word[1:] for word in capitalized.split(" "))


def capitalize(text: str) -> str:
    return _capitalize(text)


def capitalize_all(text: str) -> str:
    return _capitalize(text, every_word=True)


def truncated_string(text: str, start: int = 0, end: int = 30) -> str:
    """Cut ``text`` to ``[start:end]`` and mark the cut with ``...``.

    The text is stripped first. Blank input or ``start >= end`` returns the
    stripped text, and text no longer than ``end`` is returned without the
    ellipsis.
    """
    check_args(text, "string", STRING_ERROR)
    check_args(start, "number", NUMBER_ERROR)
    check_args(end, "number", NUMBER_ERROR)
    trimmed = text.strip()

    if trimmed == "" or start >= end:
        return trimmed
    if start >= len(text):
        return text
    if len(text) <= end:
        return trimmed[start:]
    return trimmed[start:end] + "..."


def is_hex_color(text: str) -> bool:
    check_args(text, "string", STRING_ERROR)
    return is_valid_hex_color(text)


def _filter_chars(text: str, chars: str, remove: bool) -> str:
    check_args(text, "string", STRING_ERROR)
    check_args(chars, "string", STRING_ERROR)
    if chars == "":
        return text if remove else ""
    # chars is the body of a character class, so ranges like "a-z" work
    pattern = f"[{chars}]+" if remove else f"[^{chars}]+"
    return re.sub(pattern, "", text)


def blacklist(text: str, chars: str) -> str:
    return _filter_chars(text, chars, remove=True)


def whitelist(text: str, chars: str) -> str:
    return _filter_chars(text, chars, remove=False)


def equals(text: str, comparison: str) -> bool:
    check_args(text, "string", STRING_ERROR)
    check_args(comparison, "string", STRING_ERROR)
    return text == comparison


def is_lowercase(text: str) -> bool:
    check_args(text, "string", STRING_ERROR)
    return text == text.lower()


def is_uppercase(text: str) -> bool:
    check_args(text, "string", STRING_ERROR)
    return text == text.upper()
