"""SQLAlchemy-backed record store"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import insert, select, update as sql_update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ....domain.shared.exceptions import PersistenceError
from ....ports.outbound.record_store import IRecordStore
from .models import records

logger = logging.getLogger(__name__)


class SQLAlchemyRecordStore(IRecordStore):
    """
    Record store keeping each document in one row.

    save() runs in a single transaction, so a reader sees either the previous
    document or the new one, never a truncated write.
    """

    def __init__(self, engine: Engine):
        self._engine = engine

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    select(records.c.document).where(records.c.record_key == key)
                ).fetchone()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read record '{key}': {e}") from e

        if row is None:
            return None
        return row.document

    def save(self, key: str, document: Dict[str, Any]) -> None:
        now = datetime.now(timezone.utc)
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    sql_update(records)
                    .where(records.c.record_key == key)
                    .values(document=document, updated_at=now)
                )
                if result.rowcount == 0:
                    conn.execute(
                        insert(records).values(record_key=key, document=document, updated_at=now)
                    )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to write record '{key}': {e}") from e
        logger.debug(f"Saved record {key}")
