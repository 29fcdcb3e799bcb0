"""Persistence adapters"""
from .engine import create_engine_from_config
from .record_store import SQLAlchemyRecordStore
from .player_repository import PlayerRepository
from .catalog_repository import CatalogRepository

__all__ = [
    'create_engine_from_config',
    'SQLAlchemyRecordStore',
    'PlayerRepository',
    'CatalogRepository',
]
