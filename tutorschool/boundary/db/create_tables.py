"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, tutorschool.configs
System role: Database schema initialization

Usage:
    python -m tutorschool.boundary.db.create_tables
"""

import asyncio
import logging

from tutorschool.boundary.db.base import Base
from tutorschool.boundary.db.connection import get_async_engine
from tutorschool.observability import configure_logging

# Import all models to register them with Base.metadata
import tutorschool.boundary.db.models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully", extra={"table_count": len(Base.metadata.tables)})


if __name__ == "__main__":
    configure_logging()
    asyncio.run(create_all_tables())
