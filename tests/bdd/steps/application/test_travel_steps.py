"""BDD step definitions for travel resolution"""
import asyncio
from unittest.mock import Mock

import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from merchant_guild.adapters.primary.gateway import GuildGateway
from merchant_guild.configuration import container
from merchant_guild.domain.travel.resolver import TravelResolver

# Load scenarios
scenarios('../../features/application/travel.feature')


@pytest.fixture
def bandit_rng():
    rng = Mock()
    rng.random.return_value = 0.99
    rng.choice.side_effect = lambda options: options[0]
    return rng


@given('a fresh guild with predictable bandits')
def fresh_guild_with_bandits(context, clock, bandit_rng, monkeypatch):
    # Installed before the mediator is built so the player query uses it
    monkeypatch.setattr(container, "_travel_resolver", TravelResolver(rng=bandit_rng))
    context['gateway'] = GuildGateway(container.get_mediator())
    assert asyncio.run(context['gateway'].reset()).ok


@given('the road is safe')
def road_is_safe(bandit_rng):
    bandit_rng.random.return_value = 0.99


@given('bandits lie in wait')
def bandits_strike(bandit_rng):
    bandit_rng.random.return_value = 0.0


@given(parsers.parse('"{name}" left for "{city_id}"'))
def merchant_left(context, name, city_id):
    result = asyncio.run(context['gateway'].dispatch(name, city_id))
    assert result.ok, result.error


@when(parsers.parse('{seconds:d} seconds pass and the player is read'))
def time_passes_and_player_read(context, clock, seconds):
    clock.advance(seconds)
    context['result'] = asyncio.run(context['gateway'].get_player())
    assert context['result'].ok, context['result'].error


@when('the player is read again')
def player_read_again(context):
    context['result'] = asyncio.run(context['gateway'].get_player())


@then('no event is reported')
def no_event(context):
    assert context['result'].data["events"] == []


@then(parsers.parse('the event "{message}" is reported'))
def event_reported(context, message):
    assert context['result'].data["events"] == [message]


@then(parsers.parse('"{name}" is still on the road'))
def still_traveling(context, name):
    merchants = {m["name"]: m for m in context['result'].data["merchants"]}
    assert merchants[name]["status"] == "traveling"
    assert merchants[name]["free"] is False
