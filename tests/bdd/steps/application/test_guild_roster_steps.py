"""BDD step definitions for hiring and resetting the guild"""
import asyncio

from pytest_bdd import scenarios, given, when, then, parsers

from merchant_guild.configuration.container import get_player_repository, get_simulation_state

# Load scenarios
scenarios('../../features/application/guild_roster.feature')


@given('I hire a merchant')
@when('I hire a merchant')
def hire_merchant(context):
    context['result'] = asyncio.run(context['gateway'].hire())


@given(parsers.parse('"{name}" has set out for "{city_id}"'))
def merchant_set_out(context, name, city_id):
    result = asyncio.run(context['gateway'].dispatch(name, city_id))
    assert result.ok, result.error


@when('I reset the guild')
def reset_guild(context):
    context['result'] = asyncio.run(context['gateway'].reset())
    assert context['result'].ok


@when('the player is read')
def read_player(context):
    context['result'] = asyncio.run(context['gateway'].get_player())
    assert context['result'].ok


@then(parsers.parse('the guild has {count:d} merchants, none hired'))
def merchants_none_hired(context, count):
    merchants = context['result'].data["merchants"]
    assert [m["name"] for m in merchants] == ["Aldric", "Brenna", "Corvin"][:count]
    assert not any(m["hired"] for m in merchants)


@then(parsers.parse('every merchant is idle in "{city_id}" with an empty hold'))
def merchants_idle_and_empty(context, city_id):
    good_ids = {good.id for good in get_simulation_state().catalog.goods}
    for merchant in context['result'].data["merchants"]:
        assert merchant["status"] == "idle"
        assert merchant["free"] is True
        assert merchant["currentLocation"] == city_id
        assert merchant["destination"] is None
        assert merchant["arrivalTime"] is None
        assert set(merchant["inventory"]) == good_ids
        assert all(quantity == 0 for quantity in merchant["inventory"].values())
    assert all(quantity == 0 for quantity in context['result'].data["inventory"].values())


@then(parsers.parse('"{name}" is on the payroll'))
def on_payroll(name):
    assert get_player_repository().load().find_merchant(name).hired


@then(parsers.parse('"{name}" is not on the payroll'))
def not_on_payroll(name):
    assert not get_player_repository().load().find_merchant(name).hired
