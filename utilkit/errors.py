from __future__ import annotations

from typing import Any


class InvalidArgumentKind(TypeError):
    """Raised when an argument is not of the kind an operation requires."""


_KINDS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "number": (int, float),
    "boolean": (bool,),
    "object": (dict,),
}


def is_kind(value: Any, kind: str) -> bool:
    try:
        types = _KINDS[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown argument kind: {kind}") from exc
    if kind == "number" and isinstance(value, bool):
        return False
    return isinstance(value, types)


def check_args(value: Any, kind: str, message: str) -> None:
    if not is_kind(value, kind):
        raise InvalidArgumentKind(message)


def check_args_list(value: Any, message: str) -> None:
    if not isinstance(value, (list, tuple)):
        raise InvalidArgumentKind(message)
