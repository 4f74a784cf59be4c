"""The ``USCurrency`` GraphQL scalar.

Input:
    Takes a currency string such as ``"$22,900.00"`` and converts it to an
    integer count of cents.

Output:
    Serializes an integer count of cents to a currency string.
"""
from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any

from graphql import GraphQLScalarType, StringValueNode, ValueNode, print_ast

from uscurrency.core.errors import InvalidLiteral, TypeMismatch
from uscurrency.core.logging import get_logger
from uscurrency.domain.money import format_cents, parse_currency_to_cents

logger = get_logger(__name__)


def _truncate_to_cents(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return None
    try:
        return int(value)
    except (ValueError, OverflowError):
        # nan and infinities have no integer value
        return None


def serialize_currency(value: Any) -> str:
    cents = _truncate_to_cents(value)
    if cents is None:
        logger.debug("Refusing to serialize %r as USCurrency", value)
        raise TypeMismatch(value, "integer")
    return format_cents(cents)


def parse_currency_value(value: Any) -> int | float:
    if not isinstance(value, str):
        logger.debug("Refusing to parse %r as USCurrency", value)
        raise TypeMismatch(value, "string")
    return parse_currency_to_cents(value)


def parse_currency_literal(value_node: ValueNode, _variables: dict[str, Any] | None = None) -> int | float:
    if isinstance(value_node, StringValueNode) and isinstance(value_node.value, str):
        return parse_currency_to_cents(value_node.value)
    raw = print_ast(value_node)
    logger.debug("Refusing USCurrency literal %s", raw)
    raise InvalidLiteral(raw)


USCurrency = GraphQLScalarType(
    name="USCurrency",
    description="A currency string, such as $21.25",
    serialize=serialize_currency,
    parse_value=parse_currency_value,
    parse_literal=parse_currency_literal,
)
