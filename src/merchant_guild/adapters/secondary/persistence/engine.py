"""SQLAlchemy engine factory for the record store.

Selects the backend from configuration:
- db_path=":memory:" -> SQLite in-memory (tests)
- otherwise -> SQLite file, from the explicit path, MERCHANT_GUILD_DB_PATH
  or var/merchant_guild.db
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("var/merchant_guild.db")


def create_engine_from_config(db_path: Optional[Union[str, Path]] = None) -> Engine:
    """
    Create SQLAlchemy engine from configuration.

    Args:
        db_path: Optional explicit database path. Use ":memory:" for an
                 in-memory database. None uses the environment or default.

    Returns:
        Configured SQLAlchemy Engine instance
    """
    if str(db_path) == ":memory:":
        # StaticPool keeps one connection, otherwise every connection
        # would open a fresh empty database
        logger.info("Creating SQLite in-memory engine (testing mode)")
        return create_engine(
            "sqlite:///:memory:",
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
            json_serializer=json.dumps,
            json_deserializer=json.loads,
        )

    if db_path is not None:
        sqlite_path = Path(db_path)
    else:
        env_path = os.environ.get("MERCHANT_GUILD_DB_PATH")
        sqlite_path = Path(env_path) if env_path else DEFAULT_DB_PATH

    sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Creating SQLite file engine: {sqlite_path}")

    engine = create_engine(
        f"sqlite:///{sqlite_path}",
        connect_args={'check_same_thread': False},
        json_serializer=json.dumps,
        json_deserializer=json.loads,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine
