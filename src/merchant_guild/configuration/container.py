"""
Dependency Injection Container.

Provides singleton instances and factory methods for:
- Database engine and record store
- Repositories
- Simulation state, event scheduler and domain services
- Mediator with all handlers registered
- Pipeline behaviors (middleware)
"""
import logging
import random
from datetime import timedelta
from typing import Optional

from sqlalchemy import Engine

from ..pymediatr import Mediator
from ..adapters.secondary.persistence.catalog_repository import CatalogRepository
from ..adapters.secondary.persistence.engine import create_engine_from_config
from ..adapters.secondary.persistence.models import metadata
from ..adapters.secondary.persistence.player_repository import PLAYER_KEY, PlayerRepository
from ..adapters.secondary.persistence.record_store import SQLAlchemyRecordStore
from ..application.catalog.queries import (
    ListCitiesHandler,
    ListCitiesQuery,
    ListGoodsHandler,
    ListGoodsQuery,
)
from ..application.common.behaviors import (
    LoggingBehavior,
    SimulationLockBehavior,
    ValidationBehavior,
)
from ..application.market.queries import (
    GetCityMarketHandler,
    GetCityMarketQuery,
    GetNewsHandler,
    GetNewsQuery,
)
from ..application.navigation.commands import DispatchMerchantCommand, DispatchMerchantHandler
from ..application.player.commands import (
    HireMerchantCommand,
    HireMerchantHandler,
    ResetPlayerCommand,
    ResetPlayerHandler,
    build_default_player,
)
from ..application.player.queries import GetPlayerHandler, GetPlayerQuery
from ..application.trading.commands import ExecuteTradeCommand, ExecuteTradeHandler
from ..domain.economy.pricing import MarketGenerator
from ..domain.economy.simulation import EventScheduler, SimulationState
from ..domain.travel.resolver import TravelResolver
from ..ports.outbound.clock import Clock, system_clock
from ..ports.outbound.record_store import IRecordStore
from .settings import settings

logger = logging.getLogger(__name__)


# Singleton instances
_engine: Optional[Engine] = None
_record_store: Optional[IRecordStore] = None
_player_repo: Optional[PlayerRepository] = None
_catalog_repo: Optional[CatalogRepository] = None
_rng: Optional[random.Random] = None
_market_generator: Optional[MarketGenerator] = None
_state: Optional[SimulationState] = None
_scheduler: Optional[EventScheduler] = None
_travel_resolver: Optional[TravelResolver] = None
_mediator: Optional[Mediator] = None
_clock: Clock = system_clock


def get_engine() -> Engine:
    """
    Get or create the SQLAlchemy engine, creating the schema on first use.

    Returns:
        Engine: Singleton engine instance
    """
    global _engine
    if _engine is None:
        _engine = create_engine_from_config(settings.db_path)
        metadata.create_all(_engine)
    return _engine


def get_record_store() -> IRecordStore:
    global _record_store
    if _record_store is None:
        _record_store = SQLAlchemyRecordStore(get_engine())
    return _record_store


def get_player_repository() -> PlayerRepository:
    global _player_repo
    if _player_repo is None:
        _player_repo = PlayerRepository(get_record_store())
    return _player_repo


def get_catalog_repository() -> CatalogRepository:
    global _catalog_repo
    if _catalog_repo is None:
        _catalog_repo = CatalogRepository(get_record_store())
    return _catalog_repo


def get_rng() -> random.Random:
    """Shared random source, seeded from settings when a seed is configured"""
    global _rng
    if _rng is None:
        _rng = random.Random(settings.random_seed)
    return _rng


def get_clock() -> Clock:
    return _clock


def set_clock(clock: Clock) -> None:
    """Replace the time source (tests drive time explicitly)"""
    global _clock
    _clock = clock


def get_market_generator() -> MarketGenerator:
    global _market_generator
    if _market_generator is None:
        _market_generator = MarketGenerator(get_rng())
    return _market_generator


def get_travel_resolver() -> TravelResolver:
    global _travel_resolver
    if _travel_resolver is None:
        _travel_resolver = TravelResolver(get_rng())
    return _travel_resolver


def _event_period() -> timedelta:
    return timedelta(milliseconds=settings.event_period_ms)


def get_simulation_state() -> SimulationState:
    """
    Get or create the simulation state.

    On first call the reference data is seeded if missing, the catalog is
    loaded, a default player is stored if none exists and the initial calm
    markets are generated.
    """
    global _state
    if _state is None:
        catalog_repo = get_catalog_repository()
        catalog_repo.seed_reference_data()
        catalog = catalog_repo.load_catalog()

        store = get_record_store()
        if store.load(PLAYER_KEY) is None:
            get_player_repository().save(build_default_player(good.id for good in catalog.goods))
            logger.info("Created default player record")

        _state = SimulationState.start(catalog, get_market_generator(), _event_period(), get_clock()())
    return _state


def get_event_scheduler() -> EventScheduler:
    global _scheduler
    if _scheduler is None:
        _scheduler = EventScheduler(
            get_simulation_state(),
            get_market_generator(),
            period=_event_period(),
            rng=get_rng(),
        )
    return _scheduler


def get_mediator() -> Mediator:
    """
    Get or create configured mediator with all handlers registered.

    Behaviors execute in order: Logging -> Validation -> SimulationLock -> Handler

    Returns:
        Mediator: Fully configured mediator instance
    """
    global _mediator
    if _mediator is None:
        state = get_simulation_state()
        player_repo = get_player_repository()
        resolver = get_travel_resolver()

        _mediator = Mediator()
        _mediator.register_behavior(LoggingBehavior())
        _mediator.register_behavior(ValidationBehavior())
        _mediator.register_behavior(SimulationLockBehavior(state))

        # ===== Player =====
        _mediator.register_handler(
            GetPlayerQuery,
            lambda: GetPlayerHandler(player_repo, state, resolver, get_clock())
        )
        _mediator.register_handler(
            HireMerchantCommand,
            lambda: HireMerchantHandler(player_repo)
        )
        _mediator.register_handler(
            ResetPlayerCommand,
            lambda: ResetPlayerHandler(player_repo, state)
        )

        # ===== Trading & Navigation =====
        _mediator.register_handler(
            ExecuteTradeCommand,
            lambda: ExecuteTradeHandler(player_repo, state)
        )
        _mediator.register_handler(
            DispatchMerchantCommand,
            lambda: DispatchMerchantHandler(player_repo, state, get_clock())
        )

        # ===== Catalog & Market =====
        _mediator.register_handler(ListCitiesQuery, lambda: ListCitiesHandler(state))
        _mediator.register_handler(ListGoodsQuery, lambda: ListGoodsHandler(state))
        _mediator.register_handler(GetCityMarketQuery, lambda: GetCityMarketHandler(state))
        _mediator.register_handler(GetNewsQuery, lambda: GetNewsHandler(state, get_clock()))

    return _mediator


def reset_container():
    """
    Reset all singleton instances.

    Useful for testing to ensure clean state between tests.
    """
    global _engine, _record_store, _player_repo, _catalog_repo, _rng
    global _market_generator, _state, _scheduler, _travel_resolver, _mediator, _clock

    # Dispose the engine so an in-memory database is discarded
    if _engine is not None:
        _engine.dispose()

    _engine = None
    _record_store = None
    _player_repo = None
    _catalog_repo = None
    _rng = None
    _market_generator = None
    _state = None
    _scheduler = None
    _travel_resolver = None
    _mediator = None
    _clock = system_clock
