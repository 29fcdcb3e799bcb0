"""SQLAlchemy table definitions for the merchant guild database.

Tables are defined with SQLAlchemy Core (not the ORM). Every persisted record
is one JSON document addressed by its key.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, JSON, MetaData, String, Table

metadata = MetaData()

# Whole-document records: "cities", "goods", "player"
records = Table(
    'records',
    metadata,
    Column('record_key', String, primary_key=True),
    Column('document', JSON, nullable=False),
    Column('updated_at', DateTime(timezone=True), nullable=False,
           default=lambda: datetime.now(timezone.utc)),
)
