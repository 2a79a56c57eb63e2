from __future__ import annotations

import os
import sys

TRUE_VALUES = {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    value = os.getenv("UTILKIT_DEBUG", "")
    return value.lower() in TRUE_VALUES


def debug_log(message: str) -> None:
    if debug_enabled():
        print(message, file=sys.stderr)
