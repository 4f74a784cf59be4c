from __future__ import annotations

import json
import math
from typing import Any


def encode_value(value: Any) -> str:
    """JSON rendering of an offending value for error messages."""
    if isinstance(value, float) and not math.isfinite(value):
        return "null"
    return json.dumps(value, default=repr)


class CurrencyTypeError(TypeError):
    """Base class for values the USCurrency scalar refuses to convert."""

    def __init__(self, value: Any, message: str):
        self.value = value
        super().__init__(message)


class TypeMismatch(CurrencyTypeError):
    def __init__(self, value: Any, expected: str):
        super().__init__(value, f"Currency cannot represent non {expected} type {encode_value(value)}")


class InvalidLiteral(CurrencyTypeError):
    def __init__(self, value: Any):
        super().__init__(value, f"Currency cannot represent an invalid currency-string {value}.")
