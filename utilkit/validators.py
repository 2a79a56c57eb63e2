from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from .errors import check_args, check_args_list
from .phones import PHONE_PATTERNS
from .regex import (
    is_valid_mail,
    is_valid_url_pattern,
    is_valid_username,
    password_counts,
)

DEFAULT_DISALLOWED_WORDS = ("admin", "root", "password")


@dataclass
class PasswordMatch:
    is_too_short: bool
    is_matched: bool


@dataclass
class PasswordStrength:
    has_char: bool = True
    has_symbol: bool = True
    has_number: bool = True
    has_uppercase: bool = True

    @property
    def is_strong(self) -> bool:
        return self.has_char and self.has_symbol and self.has_number and self.has_uppercase


def is_password_matched(password: str, confirm_password: str, min_length: int) -> PasswordMatch:
    check_args(password, "string", "Password should be strings!")
    check_args(confirm_password, "string", "Confirm Password should be strings!")

    return PasswordMatch(
        is_too_short=len(password) < min_length or len(confirm_password) < min_length,
        is_matched=password == confirm_password,
    )


def is_strong_password(
    password: str,
    min_chars: int = 2,
    min_symbols: int = 2,
    min_numbers: int = 2,
) -> PasswordStrength:
    """Report which strength rules ``password`` satisfies.

    Each flag is independent, so a caller can show every failed rule at once.
    """
    check_args(password, "string", "Password Must be string!")
    counts = password_counts(password)

    return PasswordStrength(
        has_char=counts.char_count >= min_chars,
        has_symbol=counts.symbol_count >= min_symbols,
        has_number=counts.number_count >= min_numbers,
        has_uppercase=counts.has_uppercase,
    )


def is_valid_date(date: str) -> bool:
    check_args(
        date,
        "string",
        'Invalid date format. Please provide a date string (e.g., "2023-09-05").',
    )
    try:
        parsed = datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        return False
    return parsed.date().isoformat() == date


def is_valid_email(email: str) -> bool:
    check_args(email, "string", "Email Must be string!")
    return is_valid_mail(email.lower())


def is_valid_file_extension(allowed_extensions: Sequence[str], file_name: str) -> bool:
    check_args(file_name, "string", "The fileName parameter must be a string.")
    check_args_list(allowed_extensions, "The allowedExtensions parameter must be an array.")

    if not allowed_extensions:
        raise ValueError("The allowedExtensions array must contain at least one allowed extension.")

    extension = file_name.split(".")[-1]
    if not extension:
        raise ValueError(f'The fileName "{file_name}" does not have a valid file extension.')

    return extension.lower() in allowed_extensions


def is_valid_phone_number(phone_number: str, locale: str) -> bool:
    check_args(phone_number, "string", "Phone Number Must be string!")
    pattern = PHONE_PATTERNS.get(locale)
    if pattern is None:
        return False
    return pattern.match(phone_number.strip()) is not None


def is_valid_url(url: str) -> bool:
    check_args(url, "string", "URL must be string!")
    if url == "":
        return False
    return is_valid_url_pattern(url)


def is_valid_user_name(
    user_name: str,
    disallowed_words: Sequence[str] = DEFAULT_DISALLOWED_WORDS,
) -> bool:
    check_args(user_name, "string", "User Name must be string!")
    check_args_list(disallowed_words, "Disallowed Words must be an Array of String!")

    if not is_valid_username(user_name):
        return False
    return user_name.lower() not in disallowed_words
