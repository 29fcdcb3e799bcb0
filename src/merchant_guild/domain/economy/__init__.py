"""Economy domain - price generation and market events"""

from .events import EVENT_CATALOG, MarketEvent, drawable_events, find_event
from .pricing import MarketGenerator
from .rules import ECONOMY_RULES, EconomyProfile
from .simulation import EventScheduler, GlobalNews, SimulationState

__all__ = [
    'EVENT_CATALOG',
    'MarketEvent',
    'drawable_events',
    'find_event',
    'MarketGenerator',
    'ECONOMY_RULES',
    'EconomyProfile',
    'EventScheduler',
    'GlobalNews',
    'SimulationState',
]
