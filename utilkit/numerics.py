from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Sequence

from .errors import check_args_list

KILOBYTE = 1024
MEGABYTE = 1048576

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class AcceptedFile:
    path: Path
    src: str


@dataclass
class RejectedFile:
    name: str
    size: str


@dataclass
class FileSizeReport:
    accepted: list[AcceptedFile] = field(default_factory=list)
    rejected: list[RejectedFile] = field(default_factory=list)


def to_fixed(value: float, digits: int = 1) -> str:
    # Exact decimal rounding, half away from zero, so 1.25 gives "1.3".
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_leading_int(value: str | int) -> int:
    if isinstance(value, int):
        return value
    match = _LEADING_INT_RE.match(str(value))
    if match is None:
        raise ValueError(f"Cannot read a number of seconds from {value!r}")
    return int(match.group(1))


def video_duration(seconds: str | int) -> str:
    if not seconds:
        return "00:00"
    total = parse_leading_int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    prefix = f"{hours:02d}:" if hours else ""
    return f"{prefix}{minutes:02d}:{secs:02d}"


def file_size(value: float) -> str:
    if value < KILOBYTE:
        return f"{format_number(value)}bytes"
    if value < MEGABYTE:
        return f"{to_fixed(value / KILOBYTE)}KB"
    return f"{to_fixed(value / MEGABYTE)}MB"


def clamp(n: float, minimum: float, maximum: float) -> float:
    if n < minimum:
        return minimum
    if n > maximum:
        return maximum
    return n


def _shorten(num: float, divisor: int, suffix: str) -> str:
    text = to_fixed(num / divisor)
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}{suffix}"


def shorten_large_number(num: float) -> str | float:
    if num >= 1_000_000_000:
        return _shorten(num, 1_000_000_000, "G")
    if num >= 1_000_000:
        return _shorten(num, 1_000_000, "M")
    if num >= 1_000:
        return _shorten(num, 1_000, "K")
    return num


def calculate_size_files(files: Sequence[Path | str], size: float = 3) -> FileSizeReport:
    """Split local files into those within ``size`` MiB and those over it.

    Accepted files carry a ``file://`` URI in ``src``; rejected ones carry a
    human readable size message. Missing files raise ``FileNotFoundError``.
    """
    check_args_list(files, "The FileList parameter must be an array.")
    limit = round(size * MEGABYTE)
    report = FileSizeReport()

    for item in files:
        path = Path(item)
        file_bytes = path.stat().st_size
        if file_bytes <= limit:
            report.accepted.append(AcceptedFile(path=path, src=path.resolve().as_uri()))
        else:
            report.rejected.append(
                RejectedFile(name=path.name, size=f"This image weighs {file_size(file_bytes)}")
            )
    return report
