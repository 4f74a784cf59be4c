from __future__ import annotations

import threading
from typing import Any

from graphql import GraphQLArgument, GraphQLField, GraphQLObjectType, GraphQLSchema

from uscurrency.scalars.us_currency import USCurrency


class CurrencyStore:
    """Keeps the last amount set through ``setCurrency``, in cents."""

    def __init__(self, cents: int | float | None = None):
        self._cents = cents
        self._lock = threading.Lock()

    def get(self) -> int | float | None:
        with self._lock:
            return self._cents

    def set(self, cents: int | float | None) -> int | float | None:
        with self._lock:
            self._cents = cents
            return cents


def build_schema(store: CurrencyStore) -> GraphQLSchema:
    def resolve_currency_value(_source: Any, _info: Any) -> int | float | None:
        return store.get()

    def resolve_set_currency(_source: Any, _info: Any, currencyValue: int | float | None = None) -> int | float | None:
        return store.set(currencyValue)

    return GraphQLSchema(
        query=GraphQLObjectType(
            name="Query",
            fields={
                "currencyValue": GraphQLField(USCurrency, resolve=resolve_currency_value),
            },
        ),
        mutation=GraphQLObjectType(
            name="Mutation",
            fields={
                "setCurrency": GraphQLField(
                    USCurrency,
                    args={"currencyValue": GraphQLArgument(USCurrency)},
                    resolve=resolve_set_currency,
                ),
            },
        ),
    )
