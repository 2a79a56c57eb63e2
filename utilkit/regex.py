from __future__ import annotations

import re
from dataclasses import dataclass

CHAR_RE = re.compile(r"[A-Za-z]")
UPPER_RE = re.compile(r"[A-Z]")
SYMBOL_RE = re.compile(r"[$&+,:;=?@#|'<>.^*()%!-]")
NUMBER_RE = re.compile(r"[0-9]")
MAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[A-Za-z]{2,3}$")
# letters, digits and underscores, 3 to 20 characters
USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]{3,20}$")
HEX_COLOR_RE = re.compile(r"^#?([0-9A-F]{3}|[0-9A-F]{4}|[0-9A-F]{6}|[0-9A-F]{8})$", re.IGNORECASE)
URL_RE = re.compile(
    r"^((https?|ftp)://)(www\.)?[a-zA-Z0-9@:%._+~#?&/=^\s-]{2,256}\.[a-z]{2,6}\b"
    r"([-a-zA-Z0-9@:%._+~#?&/=]*)$"
)


@dataclass
class PasswordCounts:
    char_count: int
    symbol_count: int
    number_count: int
    has_uppercase: bool


def _matches(pattern: re.Pattern[str], text: str) -> bool:
    return pattern.fullmatch(text) is not None


def is_valid_username(text: str) -> bool:
    return _matches(USERNAME_RE, text)


def is_valid_url_pattern(text: str) -> bool:
    return _matches(URL_RE, text)


def is_valid_mail(text: str) -> bool:
    return _matches(MAIL_RE, text)


def is_valid_hex_color(text: str) -> bool:
    return _matches(HEX_COLOR_RE, text)


def password_counts(text: str) -> PasswordCounts:
    return PasswordCounts(
        char_count=len(CHAR_RE.findall(text)),
        symbol_count=len(SYMBOL_RE.findall(text)),
        number_count=len(NUMBER_RE.findall(text)),
        has_uppercase=UPPER_RE.search(text) is not None,
    )
