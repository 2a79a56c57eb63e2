from __future__ import annotations

from typing import Any, Sequence

from .errors import check_args_list


def array_move_mutable(items: list[Any], from_index: int, to_index: int) -> None:
    length = len(items)
    start = length + from_index if from_index < 0 else from_index
    if not 0 <= start < length:
        return

    end = length + to_index if to_index < 0 else to_index
    item = items.pop(start)
    items.insert(end, item)


def array_move_immutable(items: Sequence[Any], from_index: int, to_index: int) -> list[Any]:
    """Return a copy of ``items`` with one element moved.

    Negative indices count from the end. The input is left untouched, and an
    out-of-range ``from_index`` yields an unchanged copy.

        >>> array_move_immutable(["a", "b", "c"], 1, 2)
        ['a', 'c', 'b']
    """
    check_args_list(items, "The array parameter must be an array.")
    moved = list(items)
    array_move_mutable(moved, from_index, to_index)
    return moved
