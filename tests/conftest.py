import pytest
from datetime import datetime, timedelta, timezone


class FakeClock:
    """Clock frozen at a given instant, moved forward explicitly by tests"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture(autouse=True)
def use_test_database():
    """
    Override settings to use in-memory database for all tests.
    Each test gets a fresh, isolated database.
    """
    from merchant_guild.configuration.settings import settings
    from merchant_guild.configuration.container import reset_container

    original_db_path = settings.db_path
    settings.db_path = ":memory:"

    # Reset container to ensure it uses the test database
    reset_container()

    yield

    settings.db_path = original_db_path
    reset_container()


@pytest.fixture
def clock():
    """Frozen clock installed in the container"""
    from merchant_guild.configuration.container import set_clock

    fake = FakeClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))
    set_clock(fake)
    return fake


@pytest.fixture
def context():
    """Shared context for BDD steps"""
    return {}
