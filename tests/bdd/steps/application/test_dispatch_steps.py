"""BDD step definitions for dispatching merchants"""
import asyncio
from datetime import timedelta

from pytest_bdd import scenarios, given, when, then, parsers

from merchant_guild.configuration.container import get_player_repository

# Load scenarios
scenarios('../../features/application/dispatch.feature')


@given(parsers.parse('I dispatch "{name}" to "{city_id}"'))
@when(parsers.parse('I dispatch "{name}" to "{city_id}"'))
def dispatch_merchant(context, name, city_id):
    context['result'] = asyncio.run(context['gateway'].dispatch(name, city_id))


@then(parsers.parse('"{name}" is traveling to "{city_id}"'))
def merchant_traveling(name, city_id):
    merchant = get_player_repository().load().find_merchant(name)
    assert merchant.status == "traveling"
    assert not merchant.free
    assert merchant.destination == city_id
    assert merchant.current_location == "oakhaven"


@then(parsers.parse('"{name}" arrives {seconds:d} seconds from now'))
def merchant_arrival(clock, name, seconds):
    merchant = get_player_repository().load().find_merchant(name)
    assert merchant.arrival_time == clock() + timedelta(seconds=seconds)
