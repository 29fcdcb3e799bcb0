"""Narrative market events distorting the price of goods in one city"""
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class MarketEvent:
    """
    Supply/demand shock value object

    The neutral ("calm") event stands for the absence of any shock and is
    never drawn by the scheduler.
    """
    id: str
    title: str
    message: str
    target_city: Optional[str]
    affected_goods: FrozenSet[str]
    multiplier: float
    is_neutral: bool = False

    def __post_init__(self):
        if self.multiplier <= 0:
            raise ValueError("event multiplier must be positive")

    def affects(self, city_id: str, good_id: str) -> bool:
        return (
            not self.is_neutral
            and self.target_city == city_id
            and good_id in self.affected_goods
        )


EVENT_CATALOG: Tuple[MarketEvent, ...] = (
    MarketEvent(
        id="famine_aethelgard",
        title="Famine in Aethelgard",
        message="Blight has ruined the harvest and Aethelgard's granaries are running dry.",
        target_city="aethelgard",
        affected_goods=frozenset({"wheat"}),
        multiplier=5.0,
    ),
    MarketEvent(
        id="mine_collapse_ironpeak",
        title="Collapse at Ironpeak",
        message="A shaft collapsed in the deep mines; iron is suddenly scarce.",
        target_city="ironpeak",
        affected_goods=frozenset({"iron"}),
        multiplier=3.0,
    ),
    MarketEvent(
        id="war_levy_oakhaven",
        title="War levy in Oakhaven",
        message="The duke is arming his levies and Oakhaven's smiths pay any price for iron and timber.",
        target_city="oakhaven",
        affected_goods=frozenset({"iron", "wood"}),
        multiplier=2.5,
    ),
    MarketEvent(
        id="storm_saltmere",
        title="Storms over Saltmere",
        message="Storms keep the fleet in harbour; fish and spices fetch a fortune.",
        target_city="saltmere",
        affected_goods=frozenset({"fish", "spices"}),
        multiplier=2.0,
    ),
    MarketEvent(
        id="bumper_harvest_aethelgard",
        title="Bumper harvest in Aethelgard",
        message="The fields overflow and Aethelgard sells grain and wine for a pittance.",
        target_city="aethelgard",
        affected_goods=frozenset({"wheat", "wine"}),
        multiplier=0.5,
    ),
    MarketEvent(
        id="timber_glut_greenwood",
        title="Timber glut in Greenwood",
        message="The loggers cleared a whole valley; Greenwood is drowning in wood.",
        target_city="greenwood",
        affected_goods=frozenset({"wood"}),
        multiplier=0.4,
    ),
    MarketEvent(
        id="calm",
        title="Calm markets",
        message="Trade flows as usual across the realm.",
        target_city=None,
        affected_goods=frozenset(),
        multiplier=1.0,
        is_neutral=True,
    ),
)


def drawable_events(catalog: Tuple[MarketEvent, ...] = EVENT_CATALOG) -> Tuple[MarketEvent, ...]:
    """Events the scheduler may activate (everything except neutral entries)"""
    return tuple(event for event in catalog if not event.is_neutral)


def find_event(event_id: str, catalog: Tuple[MarketEvent, ...] = EVENT_CATALOG) -> Optional[MarketEvent]:
    for event in catalog:
        if event.id == event_id:
            return event
    return None
