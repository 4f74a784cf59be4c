from __future__ import annotations

import uvicorn

from uscurrency.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "uscurrency.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "dev",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
