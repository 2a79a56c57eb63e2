from __future__ import annotations

import os

from .debug import TRUE_VALUES
from .merge import MergePolicy

FALSE_VALUES = {"0", "false", "no", "off"}


def get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (one of: 1, true, yes, on, 0, false, no, off)")


def policy_from_env(base: MergePolicy | None = None) -> MergePolicy:
    base = base or MergePolicy()
    return MergePolicy(
        allow_undefined_overrides=get_bool(
            "UTILKIT_ALLOW_UNDEFINED_OVERRIDES", base.allow_undefined_overrides
        ),
        merge_arrays=get_bool("UTILKIT_MERGE_ARRAYS", base.merge_arrays),
        unique_array_items=get_bool("UTILKIT_UNIQUE_ARRAY_ITEMS", base.unique_array_items),
    )
