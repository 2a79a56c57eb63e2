from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .debug import debug_log
from .errors import InvalidArgumentKind

JsonValue = Any
Structure = dict[str, JsonValue]

UNSAFE_KEYS = frozenset({"__proto__", "constructor", "prototype"})


class _Undefined:
    """Marker for a key that is present but explicitly undefined."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self


UNDEFINED = _Undefined()


@dataclass(frozen=True)
class MergePolicy:
    allow_undefined_overrides: bool = True
    merge_arrays: bool = True
    unique_array_items: bool = True


def is_plain_structure(value: Any) -> bool:
    # dict subclasses (Counter, OrderedDict, defaultdict) are opaque values
    return type(value) is dict


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def same_value(left: Any, right: Any) -> bool:
    # 1, 1.0 and True compare equal in Python but are distinct items here.
    return type(left) is type(right) and left == right


def unique_items(items: list[JsonValue]) -> list[JsonValue]:
    result: list[JsonValue] = []
    for item in items:
        if not any(same_value(item, existing) for existing in result):
            result.append(item)
    return result


def clone(value: JsonValue) -> JsonValue:
    if is_plain_structure(value):
        return {key: clone(item) for key, item in value.items()}
    if is_array(value):
        return [clone(item) for item in value]
    return value


class Merger:
    """Deep merge of plain structures under a fixed :class:`MergePolicy`.

    Sources are applied left to right onto the destination, which is mutated
    and returned. Lists and plain structures taken from a source are cloned,
    so sources are never changed by later merges. Any value that is not a
    plain ``dict`` (dates, class instances, dict subclasses, ``None``) is
    treated as a scalar.
    """

    def __init__(self, policy: MergePolicy | None = None) -> None:
        self.policy = policy or MergePolicy()

    def merge(self, destination: Structure, *sources: Structure) -> Structure:
        for index, obj in enumerate((destination, *sources)):
            validate_structure(obj, index)
        for source in sources:
            self._merge_into(destination, source)
        return destination

    def _merge_into(self, result: Structure, source: Structure) -> None:
        for key, value in source.items():
            if key in UNSAFE_KEYS:
                debug_log(f"[utilkit.merge] skipped unsafe key {key!r}")
                continue

            current = result.get(key, UNDEFINED)
            if is_array(current) and is_array(value):
                result[key] = self.merge_lists(current, value)
            elif is_plain_structure(current) and is_plain_structure(value):
                self._merge_into(current, value)
            elif value is UNDEFINED:
                if self.policy.allow_undefined_overrides:
                    result[key] = UNDEFINED
            else:
                result[key] = clone(value)

    def merge_lists(self, base: list[JsonValue], override: list[JsonValue]) -> list[JsonValue]:
        if not self.policy.merge_arrays:
            return clone(override)
        combined = [clone(item) for item in [*base, *override]]
        if self.policy.unique_array_items:
            return unique_items(combined)
        return combined


def validate_structure(obj: Any, position: int = 0) -> None:
    if is_array(obj):
        raise InvalidArgumentKind("Arguments provided to merge must be objects, not arrays.")
    if not isinstance(obj, dict):
        raise InvalidArgumentKind(
            f"Arguments provided to merge must be objects, got {type(obj).__name__} at position {position}."
        )


default_merger = Merger()


def merge(*objects: Structure) -> Structure:
    if not objects:
        return {}
    return default_merger.merge(*objects)
