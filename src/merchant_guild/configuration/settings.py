"""
Application settings and configuration.

Defaults can be overridden through MERCHANT_GUILD_* environment variables
(the daemon loads them from a .env file first).
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        db_path: SQLite database file, or ":memory:"
        event_period_ms: Lifetime of a market event before the next draw
        tick_seconds: How often the scheduler checks the deadline
        socket_path: Unix socket of the daemon
        pid_path: PID file guarding against a second daemon
        random_seed: Seed for reproducible runs, None for system entropy
    """
    db_path: Union[Path, str] = Path("var/merchant_guild.db")
    event_period_ms: float = 180_000
    tick_seconds: float = 1.0
    socket_path: Path = Path("var/guild.sock")
    pid_path: Path = Path("var/guild.pid")
    random_seed: Optional[int] = None

    def apply_env(self) -> "Settings":
        """Override fields from the environment, in place"""
        db_path = os.environ.get("MERCHANT_GUILD_DB_PATH")
        if db_path:
            self.db_path = db_path if db_path == ":memory:" else Path(db_path)
        self.event_period_ms = _env_float("MERCHANT_GUILD_EVENT_PERIOD_MS", self.event_period_ms)
        self.tick_seconds = _env_float("MERCHANT_GUILD_TICK_SECONDS", self.tick_seconds)
        socket_path = os.environ.get("MERCHANT_GUILD_DAEMON_SOCKET")
        if socket_path:
            self.socket_path = Path(socket_path)
        pid_path = os.environ.get("MERCHANT_GUILD_DAEMON_PID")
        if pid_path:
            self.pid_path = Path(pid_path)
        seed = os.environ.get("MERCHANT_GUILD_RANDOM_SEED")
        if seed:
            self.random_seed = int(seed)
        return self


# Global settings instance
settings = Settings().apply_env()
