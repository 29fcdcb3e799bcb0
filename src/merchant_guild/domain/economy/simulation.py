"""
Simulation state and the event scheduler rotating market shocks.

The scheduler is the only writer of the active event, the market snapshot and
the news record. Every reader receives the SimulationState explicitly.
"""
import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

from ..shared.catalog import Catalog
from ..shared.market import MarketSnapshot
from .events import EVENT_CATALOG, MarketEvent, drawable_events
from .pricing import MarketGenerator

logger = logging.getLogger(__name__)

CALM_NEWS = "The markets are calm. Prices follow their usual course across the realm."


@dataclass(frozen=True)
class GlobalNews:
    """Latest economic headline, shared by every reader"""
    id: int         # epoch milliseconds of the change, increases monotonically
    text: str


def _news_token(now: datetime, previous: Optional[GlobalNews] = None) -> int:
    token = int(now.timestamp() * 1000)
    if previous is not None and token <= previous.id:
        token = previous.id + 1
    return token


class SimulationState:
    """
    Process-wide simulation state owned by the EventScheduler

    Holds the active event (None means calm), the market snapshot derived
    from it, the current news and the deadline of the next rotation. The lock
    serializes operations that read the snapshot and write the player record
    against scheduler ticks.
    """

    def __init__(
        self,
        catalog: Catalog,
        snapshot: MarketSnapshot,
        news: GlobalNews,
        deadline: datetime,
        active_event: Optional[MarketEvent] = None
    ):
        self.catalog = catalog
        self.snapshot = snapshot
        self.news = news
        self.deadline = deadline
        self.active_event = active_event
        self.lock = asyncio.Lock()

    @classmethod
    def start(
        cls,
        catalog: Catalog,
        generator: MarketGenerator,
        period: timedelta,
        now: datetime
    ) -> "SimulationState":
        """Calm initial state with the first rotation due one period from now"""
        return cls(
            catalog=catalog,
            snapshot=generator.refresh(catalog, None),
            news=GlobalNews(id=_news_token(now), text=CALM_NEWS),
            deadline=now + period,
        )

    def remaining(self, now: datetime) -> timedelta:
        return max(self.deadline - now, timedelta(0))


class EventScheduler:
    """
    Rotates the active market event on a fixed period

    State machine: calm <-> any drawable event. On each tick past the deadline
    the deadline moves one period ahead, an event is drawn with probability
    EVENT_CHANCE (uniformly among non-neutral events) or the markets turn calm,
    the news is rewritten and the markets are regenerated.
    """

    EVENT_CHANCE = 0.7
    DEFAULT_PERIOD = timedelta(milliseconds=180_000)

    def __init__(
        self,
        state: SimulationState,
        generator: MarketGenerator,
        period: timedelta = DEFAULT_PERIOD,
        rng: Optional[random.Random] = None,
        events: Tuple[MarketEvent, ...] = EVENT_CATALOG
    ):
        if period <= timedelta(0):
            raise ValueError("event period must be positive")
        self._state = state
        self._generator = generator
        self._period = period
        self._rng = rng or random.Random()
        self._candidates = drawable_events(events)

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def period(self) -> timedelta:
        return self._period

    def draw_event(self) -> Optional[MarketEvent]:
        if not self._candidates or self._rng.random() >= self.EVENT_CHANCE:
            return None
        return self._rng.choice(self._candidates)

    def compose_news(self, event: Optional[MarketEvent]) -> str:
        if event is None:
            return CALM_NEWS
        minutes = max(1, round(self._period.total_seconds() / 60))
        return f"{event.title}: {event.message} The effects should last about {minutes} minutes."

    def advance(self, now: datetime) -> bool:
        """
        Rotate the event if the deadline has passed.

        Returns:
            True if a rotation happened, False if the call was a no-op
        """
        state = self._state
        if now < state.deadline:
            return False

        state.deadline = now + self._period
        event = self.draw_event()
        state.active_event = event
        state.news = GlobalNews(id=_news_token(now, state.news), text=self.compose_news(event))
        state.snapshot = self._generator.refresh(state.catalog, event)

        if event is None:
            logger.info("Markets turned calm")
        else:
            logger.info(f"New market event: {event.id} ({event.target_city} x{event.multiplier})")
        return True

    async def tick(self, now: datetime) -> bool:
        """Rotate under the simulation lock so no operation observes a partial refresh"""
        async with self._state.lock:
            return self.advance(now)

    async def run(
        self,
        clock: Callable[[], datetime],
        stop: asyncio.Event,
        interval: float = 1.0
    ) -> None:
        """Tick every interval seconds until stop is set"""
        logger.info(f"Event scheduler running (period={self._period}, interval={interval}s)")
        while not stop.is_set():
            try:
                await self.tick(clock())
            except Exception as e:
                logger.error(f"Event scheduler tick failed: {e}", exc_info=True)
            try:
                await asyncio.wait_for(stop.wait(), timeout=interval)
            except asyncio.TimeoutError:
                pass
        logger.info("Event scheduler stopped")
