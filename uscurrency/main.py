from __future__ import annotations

from fastapi import FastAPI

from uscurrency.api import routes_graphql
from uscurrency.core.config import get_settings
from uscurrency.core.logging import get_logger

logger = get_logger()
settings = get_settings()

app = FastAPI(title=settings.app_name)
app.include_router(routes_graphql.router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "environment": settings.environment}


@app.on_event("startup")
def startup() -> None:
    logger.info("Serving USCurrency schema at %s (env=%s)", settings.graphql_path, settings.environment)
