from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from graphql import graphql_sync
from pydantic import BaseModel, ConfigDict, Field

from uscurrency.api.schema import CurrencyStore, build_schema
from uscurrency.core.config import get_settings
from uscurrency.core.logging import get_logger

logger = get_logger(__name__)
settings = get_settings()
store = CurrencyStore()
schema = build_schema(store)

router = APIRouter(tags=["graphql"])


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


@router.post(settings.graphql_path)
def execute_graphql(payload: GraphQLRequest) -> dict[str, Any]:
    result = graphql_sync(
        schema,
        payload.query,
        variable_values=payload.variables,
        operation_name=payload.operation_name,
    )
    if result.errors:
        logger.info("GraphQL request finished with %d error(s)", len(result.errors))
    return result.formatted
