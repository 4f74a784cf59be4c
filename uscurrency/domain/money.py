from __future__ import annotations

import math
import re

_FLOAT_PREFIX_RE = re.compile(r"^\s*([-+]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?))")
_CURRENCY_SYMBOLS = ("$", ",")


def strip_currency_symbols(text: str) -> str:
    for symbol in _CURRENCY_SYMBOLS:
        text = text.replace(symbol, "")
    return text


def parse_float_prefix(text: str) -> float:
    """Read the leading decimal number of ``text``, ignoring anything after it.

    Returns ``nan`` when the text does not start with a number.
    """
    match = _FLOAT_PREFIX_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def parse_currency_to_cents(text: str) -> int | float:
    scaled = parse_float_prefix(strip_currency_symbols(text)) * 100
    if not math.isfinite(scaled):
        return scaled
    return round(scaled)


def format_cents(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    dollars, rem = divmod(abs(cents), 100)
    return f"{sign}${dollars:,}.{rem:02d}"
