"""Travel domain - journey completion and ambushes"""

from .resolver import ArrivalReport, TravelResolver

__all__ = ['ArrivalReport', 'TravelResolver']
