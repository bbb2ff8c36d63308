"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, blogger.configs
System role: Database schema initialization

Usage:
    python -m blogger.boundary.db.create_tables
    python -m blogger.boundary.db.create_tables --drop
"""

import argparse
import asyncio
import logging

from blogger.boundary.db.connection import create_all, drop_all, get_async_engine
from blogger.configs import get_settings
from blogger.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from blogger.boundary.db import models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(drop_first: bool = False) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        drop_first: Drop every table before creating (development only)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine(get_settings().database)
    try:
        if drop_first:
            await drop_all(engine)
            logger.warning("All tables dropped")
        await create_all(engine)
        logger.info("All tables created successfully")
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the blog database schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    asyncio.run(create_all_tables(drop_first=args.drop))


if __name__ == "__main__":
    main()
