"""Unit tests for settings and the dependency container"""
from pathlib import Path

from merchant_guild.configuration import container
from merchant_guild.configuration.settings import Settings


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("MERCHANT_GUILD_DB_PATH", "/tmp/guild.db")
    monkeypatch.setenv("MERCHANT_GUILD_EVENT_PERIOD_MS", "5000")
    monkeypatch.setenv("MERCHANT_GUILD_TICK_SECONDS", "0.5")
    monkeypatch.setenv("MERCHANT_GUILD_DAEMON_SOCKET", "/tmp/guild.sock")
    monkeypatch.setenv("MERCHANT_GUILD_RANDOM_SEED", "42")

    settings = Settings().apply_env()

    assert settings.db_path == Path("/tmp/guild.db")
    assert settings.event_period_ms == 5000
    assert settings.tick_seconds == 0.5
    assert settings.socket_path == Path("/tmp/guild.sock")
    assert settings.random_seed == 42


def test_memory_database_path_is_kept_verbatim(monkeypatch):
    monkeypatch.setenv("MERCHANT_GUILD_DB_PATH", ":memory:")
    assert Settings().apply_env().db_path == ":memory:"


def test_defaults_without_environment(monkeypatch):
    for name in ("MERCHANT_GUILD_DB_PATH", "MERCHANT_GUILD_EVENT_PERIOD_MS", "MERCHANT_GUILD_RANDOM_SEED"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings().apply_env()

    assert settings.event_period_ms == 180_000
    assert settings.random_seed is None


def test_container_bootstraps_reference_data_and_player(clock):
    state = container.get_simulation_state()

    assert len(state.catalog.goods) == 9
    assert len(state.catalog.cities) == 5
    assert state.active_event is None
    assert state.deadline == clock() + container._event_period()
    assert container.get_player_repository().load().gold == 1000


def test_container_keeps_existing_player(clock):
    repo = container.get_player_repository()
    container.get_simulation_state()
    player = repo.load()
    player.add_gold(250)
    repo.save(player)

    # A second bootstrap against the same database must not overwrite the player
    container._state = None
    container.get_simulation_state()

    assert repo.load().gold == 1250


def test_mediator_handles_every_operation():
    from merchant_guild.application.catalog.queries import ListCitiesQuery, ListGoodsQuery
    from merchant_guild.application.market.queries import GetCityMarketQuery, GetNewsQuery
    from merchant_guild.application.navigation.commands import DispatchMerchantCommand
    from merchant_guild.application.player.commands import HireMerchantCommand, ResetPlayerCommand
    from merchant_guild.application.player.queries import GetPlayerQuery
    from merchant_guild.application.trading.commands import ExecuteTradeCommand

    mediator = container.get_mediator()

    for request_type in (ListCitiesQuery, ListGoodsQuery, GetCityMarketQuery, GetNewsQuery,
                         DispatchMerchantCommand, HireMerchantCommand, ResetPlayerCommand,
                         GetPlayerQuery, ExecuteTradeCommand):
        assert mediator.has_handler(request_type)
