from __future__ import annotations

from graphql import graphql_sync

from uscurrency.api.schema import CurrencyStore, build_schema


def _run(store: CurrencyStore, query: str, variables: dict | None = None):
    return graphql_sync(build_schema(store), query, variable_values=variables)


def test_fail_serializing() -> None:
    result = _run(CurrencyStore("invalid"), "{ currencyValue }")
    assert result.errors
    assert result.errors[0].message == 'Currency cannot represent non integer type "invalid"'


def test_serialize_number_value() -> None:
    result = _run(CurrencyStore(12500), "{ currencyValue }")
    assert result.errors is None
    assert result.data == {"currencyValue": "$125.00"}


def test_serialize_grouped_value() -> None:
    result = _run(CurrencyStore(2290000), "{ currencyValue }")
    assert result.data == {"currencyValue": "$22,900.00"}


def test_fail_parsing_int_literal() -> None:
    store = CurrencyStore()
    result = _run(store, "mutation { setCurrency(currencyValue: 2332) }")
    assert result.errors
    assert "Currency cannot represent an invalid currency-string 2332." in result.errors[0].message
    assert store.get() is None


def test_parse_string_literal() -> None:
    store = CurrencyStore()
    result = _run(store, 'mutation { setCurrency(currencyValue: "$12.50") }')
    assert result.errors is None
    assert store.get() == 1250
    assert result.data == {"setCurrency": "$12.50"}


def test_parse_grouped_string_literal() -> None:
    store = CurrencyStore()
    result = _run(store, 'mutation { setCurrency(currencyValue: "$22,900.00") }')
    assert result.errors is None
    assert store.get() == 2290000


def test_parse_variable() -> None:
    store = CurrencyStore()
    query = "mutation set($currency: USCurrency!) { setCurrency(currencyValue: $currency) }"
    result = _run(store, query, {"currency": "$22,900.00"})
    assert result.errors is None
    assert store.get() == 2290000
    assert result.data == {"setCurrency": "$22,900.00"}


def test_non_string_variable_uses_type_message() -> None:
    store = CurrencyStore()
    query = "mutation set($currency: USCurrency!) { setCurrency(currencyValue: $currency) }"
    result = _run(store, query, {"currency": 2290000})
    assert result.errors
    message = result.errors[0].message
    assert "Currency cannot represent non string type 2290000" in message
    assert "invalid currency-string" not in message
    assert store.get() is None
