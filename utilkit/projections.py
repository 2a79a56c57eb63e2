from __future__ import annotations

from typing import Any, Sequence

from .errors import check_args, check_args_list
from .merge import UNDEFINED, Structure


def _check(obj: Any, keys: Any) -> None:
    check_args(obj, "object", "Argument should be a Object!")
    check_args_list(keys, "Keys should be an Array!")


def pick(obj: Structure, keys: Sequence[str]) -> Structure:
    _check(obj, keys)
    return {key: obj[key] for key in keys if key in obj}


def inclusive_pick(obj: Structure, keys: Sequence[str]) -> Structure:
    """Like :func:`pick`, but every requested key is present; missing ones map to UNDEFINED."""
    _check(obj, keys)
    return {key: obj.get(key, UNDEFINED) for key in keys}


def omit(obj: Structure, keys: Sequence[str]) -> Structure:
    _check(obj, keys)
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}
