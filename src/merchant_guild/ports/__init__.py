"""Convenience re-export of port interfaces"""
from .outbound.record_store import IRecordStore
from .outbound.repositories import IPlayerRepository, ICatalogRepository
from .outbound.clock import Clock, system_clock

__all__ = ['IRecordStore', 'IPlayerRepository', 'ICatalogRepository', 'Clock', 'system_clock']
