from __future__ import annotations

import re

_NANP = r"^((\+1|1)?( |-)?)?(\([2-9][0-9]{2}\)|[2-9][0-9]{2})( |-)?([2-9][0-9]{2}( |-)?[0-9]{4})$"

PHONE_PATTERNS: dict[str, re.Pattern[str]] = {
    "en-US": re.compile(_NANP),
    "en-CA": re.compile(_NANP),
    "en-GB": re.compile(r"^(\+?44|0)7\d{9}$"),
    "en-AU": re.compile(r"^(\+?61|0)4\d{8}$"),
    "en-IN": re.compile(r"^(\+?91|0)?[6789]\d{9}$"),
    "de-DE": re.compile(r"^((\+49|0)1)(5[0-25-9]\d|6([23]|0\d?)|7([0-57-9]|6\d))\d{7,9}$"),
    "fr-FR": re.compile(r"^(\+?33|0)[67]\d{8}$"),
    "es-ES": re.compile(r"^(\+?34)?[67]\d{8}$"),
    "it-IT": re.compile(r"^(\+?39)?\s?3\d{2} ?\d{6,7}$"),
    "nl-NL": re.compile(r"^(((\+|00)?31\(0\))|((\+|00)?31)|0)6{1}\d{8}$"),
    "pt-BR": re.compile(
        r"^((\+?55 ?[1-9]{2} ?)|(\+?55 ?\([1-9]{2}\) ?)|(0[1-9]{2} ?)|(\([1-9]{2}\) ?)|([1-9]{2} ?))"
        r"((\d{4}-?\d{4})|(9[1-9]{1}\d{3}-?\d{4}))$"
    ),
    "es-MX": re.compile(r"^(\+?52)?(1|01)?\d{10,11}$"),
    "es-CO": re.compile(r"^(\+?57)?3(0(0|1|2|4|5)|1\d|2[0-4]|5(0|1))\d{7}$"),
    "ja-JP": re.compile(r"^(\+81[ -]?(\(0\))?|0)[6789]0[ -]?\d{4}[ -]?\d{4}$"),
}
