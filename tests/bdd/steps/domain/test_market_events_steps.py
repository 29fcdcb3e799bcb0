"""BDD step definitions for market event rotation"""
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from pytest_bdd import scenarios, given, when, then, parsers

from merchant_guild.adapters.secondary.persistence.catalog_repository import DEFAULT_DATA_DIR
from merchant_guild.adapters.secondary.persistence.mappers import CatalogMapper
from merchant_guild.domain.economy.events import find_event
from merchant_guild.domain.economy.pricing import MarketGenerator
from merchant_guild.domain.economy.simulation import CALM_NEWS, EventScheduler, SimulationState
from merchant_guild.domain.shared.catalog import Catalog

# Load scenarios
scenarios('../../features/domain/market_events.feature')

NOON = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def _reference_catalog() -> Catalog:
    with open(DEFAULT_DATA_DIR / "goods.json", encoding="utf-8") as f:
        goods = CatalogMapper.goods_from_document({"goods": json.load(f)})
    with open(DEFAULT_DATA_DIR / "cities.json", encoding="utf-8") as f:
        cities = CatalogMapper.cities_from_document({"cities": json.load(f)})
    return Catalog(goods=tuple(goods), cities=tuple(cities))


@given(parsers.parse('a calm simulation started at noon with a {seconds:d} second period'))
def calm_simulation(context, seconds):
    price_rng = Mock()
    price_rng.uniform.return_value = 1.0
    price_rng.randint.return_value = 30
    generator = MarketGenerator(rng=price_rng)

    period = timedelta(seconds=seconds)
    state = SimulationState.start(_reference_catalog(), generator, period, NOON)
    draw_rng = Mock()
    draw_rng.random.return_value = 0.99

    context['state'] = state
    context['draw_rng'] = draw_rng
    context['first_news_id'] = state.news.id
    context['scheduler'] = EventScheduler(state, generator, period=period, rng=draw_rng)


@given(parsers.parse('the next draw picks "{event_id}"'))
def next_draw_picks(context, event_id):
    context['draw_rng'].random.return_value = 0.1
    context['draw_rng'].choice.side_effect = lambda candidates: find_event(event_id)


@given('the next draw picks no event')
def next_draw_calm(context):
    context['draw_rng'].random.return_value = 0.7


@given(parsers.parse('the scheduler ticks {seconds:d} seconds after noon'))
@when(parsers.parse('the scheduler ticks {seconds:d} seconds after noon'))
def scheduler_ticks(context, seconds):
    context['rotated'] = context['scheduler'].advance(NOON + timedelta(seconds=seconds))


@then('no rotation happened')
def no_rotation(context):
    assert context['rotated'] is False


@then('a rotation happened')
def rotation(context):
    assert context['rotated'] is True


@then(parsers.parse('the active event is "{event_id}"'))
def active_event_is(context, event_id):
    assert context['state'].active_event.id == event_id


@then('the markets are calm')
def markets_calm(context):
    state = context['state']
    assert state.active_event is None
    assert state.snapshot.event_id is None
    assert state.snapshot.market_for("aethelgard").sell_offer("wheat").price == 24


@then(parsers.parse('the markets reflect "{event_id}"'))
def markets_reflect(context, event_id):
    snapshot = context['state'].snapshot
    assert snapshot.event_id == event_id
    assert snapshot.market_for("aethelgard").sell_offer("wheat").price == 120


@then(parsers.parse('the news reads "{text}"'))
def news_reads(context, text):
    assert context['state'].news.text == text


@then('the news reads the calm bulletin')
def news_calm(context):
    assert context['state'].news.text == CALM_NEWS


@then(parsers.parse('the next rotation is due {seconds:d} seconds after noon'))
def next_deadline(context, seconds):
    assert context['state'].deadline == NOON + timedelta(seconds=seconds)


@then('the news id increased')
def news_id_increased(context):
    assert context['state'].news.id > context['first_news_id']
