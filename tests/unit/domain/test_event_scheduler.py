"""Unit tests for EventScheduler"""
import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from merchant_guild.domain.economy.events import EVENT_CATALOG, drawable_events
from merchant_guild.domain.economy.simulation import (
    CALM_NEWS,
    EventScheduler,
    GlobalNews,
    SimulationState,
)
from merchant_guild.domain.shared.catalog import Catalog
from merchant_guild.domain.shared.market import MarketSnapshot

NOON = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
PERIOD = timedelta(seconds=180)


@pytest.fixture
def generator():
    generator = Mock()
    generator.refresh.side_effect = lambda catalog, event: MarketSnapshot(
        event_id=event.id if event else None
    )
    return generator


@pytest.fixture
def state(generator):
    return SimulationState.start(Catalog(goods=(), cities=()), generator, PERIOD, NOON)


def test_neutral_event_is_never_drawn():
    candidates = drawable_events()
    assert all(not event.is_neutral for event in candidates)
    assert len(candidates) == len(EVENT_CATALOG) - 1


def test_draw_chooses_among_drawable_events(state, generator):
    rng = Mock()
    rng.random.return_value = 0.69
    rng.choice.side_effect = lambda candidates: candidates[0]

    event = EventScheduler(state, generator, PERIOD, rng=rng).draw_event()

    assert event is drawable_events()[0]
    rng.choice.assert_called_once_with(drawable_events())


def test_draw_turns_calm_above_the_event_chance(state, generator):
    rng = Mock()
    rng.random.return_value = 0.7
    assert EventScheduler(state, generator, PERIOD, rng=rng).draw_event() is None
    rng.choice.assert_not_called()


def test_calm_news_does_not_mention_duration(state, generator):
    scheduler = EventScheduler(state, generator, PERIOD, rng=Mock())
    assert scheduler.compose_news(None) == CALM_NEWS


def test_advance_moves_deadline_from_the_tick_time(state, generator):
    rng = Mock()
    rng.random.return_value = 0.9
    scheduler = EventScheduler(state, generator, PERIOD, rng=rng)

    late = NOON + PERIOD + timedelta(seconds=42)
    assert scheduler.advance(late) is True
    assert state.deadline == late + PERIOD
    assert scheduler.advance(late + timedelta(seconds=1)) is False
    assert generator.refresh.call_count == 2   # start + one rotation


def test_news_id_stays_monotonic_when_clock_repeats(state, generator):
    rng = Mock()
    rng.random.return_value = 0.9
    state.news = GlobalNews(id=int((NOON + PERIOD).timestamp() * 1000) + 5, text=CALM_NEWS)

    EventScheduler(state, generator, PERIOD, rng=rng).advance(NOON + PERIOD)

    assert state.news.id == int((NOON + PERIOD).timestamp() * 1000) + 6


def test_period_must_be_positive(state, generator):
    with pytest.raises(ValueError):
        EventScheduler(state, generator, timedelta(0))


def test_remaining_never_negative(state):
    assert state.remaining(NOON) == PERIOD
    assert state.remaining(NOON + timedelta(hours=1)) == timedelta(0)


def test_run_ticks_until_stopped(state, generator):
    rng = Mock()
    rng.random.return_value = 0.9
    scheduler = EventScheduler(state, generator, PERIOD, rng=rng)
    ticks = []

    def clock():
        ticks.append(1)
        return NOON + PERIOD

    async def scenario():
        stop = asyncio.Event()
        task = asyncio.create_task(scheduler.run(clock, stop, interval=0.01))
        await asyncio.sleep(0.05)
        stop.set()
        await asyncio.wait_for(task, timeout=1)

    asyncio.run(scenario())

    assert ticks
    assert state.deadline == NOON + PERIOD + PERIOD


def test_tick_waits_for_the_simulation_lock(state, generator):
    rng = Mock()
    rng.random.return_value = 0.9
    scheduler = EventScheduler(state, generator, PERIOD, rng=rng)

    async def scenario():
        async with state.lock:
            tick = asyncio.create_task(scheduler.tick(NOON + PERIOD))
            await asyncio.sleep(0.01)
            assert not tick.done()
            assert state.deadline == NOON + PERIOD
        return await tick

    assert asyncio.run(scenario()) is True
