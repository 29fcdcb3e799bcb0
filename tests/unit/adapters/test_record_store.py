"""Unit tests for the SQLAlchemy record store and repositories"""
import pytest
from sqlalchemy import text

from merchant_guild.adapters.secondary.persistence.catalog_repository import (
    CITIES_KEY,
    GOODS_KEY,
    CatalogRepository,
)
from merchant_guild.adapters.secondary.persistence.engine import create_engine_from_config
from merchant_guild.adapters.secondary.persistence.models import metadata
from merchant_guild.adapters.secondary.persistence.player_repository import PLAYER_KEY, PlayerRepository
from merchant_guild.adapters.secondary.persistence.record_store import SQLAlchemyRecordStore
from merchant_guild.application.player.commands import build_default_player
from merchant_guild.domain.shared.exceptions import PersistenceError, RecordNotFoundError


@pytest.fixture
def engine():
    engine = create_engine_from_config(":memory:")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return SQLAlchemyRecordStore(engine)


def test_missing_record_loads_as_none(store):
    assert store.load("player") is None


def test_save_overwrites_whole_document(store):
    store.save("player", {"name": "Guildmaster", "gold": 1000, "merchants": []})
    store.save("player", {"name": "Guildmaster", "gold": 5})
    assert store.load("player") == {"name": "Guildmaster", "gold": 5}


def test_storage_failure_becomes_persistence_error(engine, store):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE records"))

    with pytest.raises(PersistenceError) as exc_info:
        store.save("player", {"gold": 1})
    assert exc_info.value.kind == "PersistenceFailure"

    with pytest.raises(PersistenceError):
        store.load("player")


def test_player_document_round_trip(store):
    repo = PlayerRepository(store)
    player = build_default_player(["wheat", "iron"])
    player.hire_next_merchant()
    player.find_merchant("Aldric").load("iron", 7)

    repo.save(player)
    document = store.load(PLAYER_KEY)
    loaded = repo.load()

    assert document["inventory"] == {"wheat": 0, "iron": 7}
    assert document["merchants"][0]["currentLocation"] == "oakhaven"
    assert document["merchants"][0]["arrivalTime"] is None
    assert loaded.gold == 1000
    assert loaded.find_merchant("Aldric").hired
    assert loaded.find_merchant("Aldric").quantity_of("iron") == 7
    assert loaded.inventory == {"wheat": 0, "iron": 7}


def test_traveling_merchant_round_trip(store, clock):
    repo = PlayerRepository(store)
    player = build_default_player(["wheat"])
    player.hire_next_merchant()
    player.find_merchant("Aldric").start_journey("aethelgard", clock())

    repo.save(player)
    merchant = repo.load().find_merchant("Aldric")

    assert merchant.is_traveling()
    assert merchant.arrival_time == clock()
    assert merchant.destination == "aethelgard"


def test_epoch_millisecond_arrival_times_are_accepted(store, clock):
    document = {
        "name": "Guildmaster",
        "gold": 10,
        "merchants": [{
            "name": "Aldric", "hired": True, "free": False, "capacity": 50,
            "currentLocation": "oakhaven", "status": "traveling", "destination": "aethelgard",
            "arrivalTime": int(clock().timestamp() * 1000), "inventory": {"wheat": 3},
        }],
    }
    store.save(PLAYER_KEY, document)

    assert PlayerRepository(store).load().find_merchant("Aldric").arrival_time == clock()


def test_missing_player_record(store):
    with pytest.raises(RecordNotFoundError):
        PlayerRepository(store).load()


def test_corrupted_player_record(store):
    store.save(PLAYER_KEY, {"name": "Guildmaster", "gold": -3, "merchants": []})
    with pytest.raises(PersistenceError):
        PlayerRepository(store).load()


def test_seeding_reference_data_once(store):
    repo = CatalogRepository(store)

    assert repo.seed_reference_data() is True
    assert repo.seed_reference_data() is False

    catalog = repo.load_catalog()
    assert [good.id for good in catalog.goods][:3] == ["wheat", "wine", "iron"]
    assert catalog.route_between("oakhaven", "aethelgard").distance == 30
    assert set(store.load(GOODS_KEY)) == {"goods"}
    assert set(store.load(CITIES_KEY)) == {"cities"}


def test_catalog_requires_reference_records(store):
    with pytest.raises(RecordNotFoundError):
        CatalogRepository(store).load_catalog()


def test_malformed_merchant_inventory_is_a_persistence_error(store):
    store.save(PLAYER_KEY, {
        "name": "Guildmaster",
        "gold": 10,
        "merchants": [{
            "name": "Aldric", "capacity": 50, "currentLocation": "oakhaven",
            "inventory": ["wheat", 3],
        }],
    })

    with pytest.raises(PersistenceError) as exc_info:
        PlayerRepository(store).load()
    assert exc_info.value.kind == "PersistenceFailure"


def test_base_prices_keep_their_numeric_type(store):
    repo = CatalogRepository(store)
    repo.seed_reference_data()

    wheat = repo.load_catalog().get_good("wheat")

    assert wheat.base_price == 30
    assert isinstance(wheat.base_price, int)
