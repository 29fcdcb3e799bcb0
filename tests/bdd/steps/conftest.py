"""Step definitions shared by every guild feature"""
import asyncio

import pytest
from pytest_bdd import given, then, parsers

from merchant_guild.adapters.primary.gateway import GuildGateway
from merchant_guild.configuration.container import (
    get_mediator,
    get_player_repository,
    get_simulation_state,
)
from merchant_guild.domain.shared.market import BuyOrder, CityMarket, MarketSnapshot, SellOffer


@pytest.fixture
def gateway(clock):
    return GuildGateway(get_mediator())


def _replace_market(city_id: str, offer: SellOffer = None, order: BuyOrder = None) -> None:
    state = get_simulation_state()
    market = state.snapshot.market_for(city_id) or CityMarket(city_id=city_id)
    selling = market.selling
    buying = market.buying
    if offer is not None:
        selling = tuple(o for o in selling if o.good_id != offer.good_id) + (offer,)
    if order is not None:
        buying = tuple(o for o in buying if o.good_id != order.good_id) + (order,)

    markets = dict(state.snapshot.markets)
    markets[city_id] = CityMarket(city_id=city_id, selling=selling, buying=buying)
    state.snapshot = MarketSnapshot(markets=markets, event_id=state.snapshot.event_id)


@given('a fresh guild')
def fresh_guild(context, gateway):
    context['gateway'] = gateway
    context['result'] = asyncio.run(gateway.reset())
    assert context['result'].ok


@given(parsers.parse('the merchant "{name}" is hired'))
def merchant_is_hired(context, name):
    player = get_player_repository().load()
    while not player.find_merchant(name).hired:
        player.hire_next_merchant()
    get_player_repository().save(player)


@given(parsers.parse('"{name}" carries {quantity:d} "{good_id}"'))
def merchant_carries(context, name, quantity, good_id):
    player = get_player_repository().load()
    player.find_merchant(name).load(good_id, quantity)
    get_player_repository().save(player)


@given(parsers.parse('the market of "{city_id}" sells "{good_id}" at {price:d} gold'))
def market_sells(city_id, good_id, price):
    _replace_market(city_id, offer=SellOffer(good_id=good_id, name=good_id.title(), price=price, stock=50))


@given(parsers.parse('the market of "{city_id}" buys "{good_id}" at {price:d} gold'))
def market_buys(city_id, good_id, price):
    _replace_market(city_id, order=BuyOrder(good_id=good_id, name=good_id.title(), price=price, demand=10))


@then('the operation succeeds')
def operation_succeeds(context):
    result = context['result']
    assert result.ok, result.error
    assert result.error is None


@then(parsers.parse('the operation fails with "{kind}"'))
def operation_fails(context, kind):
    result = context['result']
    assert not result.ok
    assert result.error.kind == kind
    assert result.error.message


@then(parsers.parse('the player has {gold:d} gold'))
def player_has_gold(gold):
    assert get_player_repository().load().gold == gold


@then(parsers.parse('"{name}" carries {quantity:d} "{good_id}"'))
def merchant_holds(name, quantity, good_id):
    merchant = get_player_repository().load().find_merchant(name)
    assert merchant.quantity_of(good_id) == quantity


@then(parsers.parse('"{name}" is idle in "{city_id}"'))
def merchant_idle_in(name, city_id):
    merchant = get_player_repository().load().find_merchant(name)
    assert merchant.status == "idle"
    assert merchant.is_free()
    assert merchant.current_location == city_id
    assert merchant.destination is None
    assert merchant.arrival_time is None
