#!/usr/bin/env python3
"""Create the database schema from the table metadata."""

import asyncio
import sys

import logfire

from newsboard.config import Settings
from newsboard.persistence.database import create_engine, create_schema
from newsboard.persistence.tables import metadata
from newsboard.util.observability import configure_logfire


async def init_db(settings: Settings) -> None:
    """Create all missing tables."""
    engine = create_engine(settings)
    try:
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(init_db(settings))
        logfire.info("Database initialized", tables=sorted(metadata.tables))
        return 0
    except Exception as e:
        logfire.error(
            "Database initialization failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
