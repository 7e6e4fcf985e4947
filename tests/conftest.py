import threading
from datetime import datetime, timezone
from os import environ
from pathlib import Path
from typing import Any, Callable

from dotenv import load_dotenv
from pytest import fixture

from hmacmint.cache import ReplayCache
from hmacmint.keys import KeyBinding
from hmacmint.services import TokenBuilder

# Load all env variables.
load_dotenv(Path(__file__).parent / ".env")

FROZEN_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
FROZEN_TIMESTAMP = int(FROZEN_NOW.timestamp())


class InMemoryRedis:
    """Implements the two Redis commands ReplayCache relies on."""

    def __init__(self) -> None:
        self.store: dict[str, Any] = {}
        self.expiries: dict[str, int | None] = {}
        self._lock = threading.Lock()

    def set(self, name: str, value: Any, ex: int | None = None, nx: bool = False) -> bool | None:
        with self._lock:
            if nx and name in self.store:
                return None
            self.store[name] = value
            self.expiries[name] = ex
            return True

    def exists(self, *names: str) -> int:
        return sum(1 for name in names if name in self.store)


@fixture
def frozen_clock() -> Callable[[], datetime]:
    return lambda: FROZEN_NOW


@fixture
def frozen_timestamp() -> int:
    return FROZEN_TIMESTAMP


@fixture(scope="session")
def key() -> KeyBinding:
    """Signing key loaded from the test environment."""
    return KeyBinding(secret=environ["TOKEN_SECRET_KEY"], algorithm=environ["TOKEN_ALGORITHM"])


@fixture
def builder(frozen_clock: Callable[[], datetime]) -> TokenBuilder:
    return TokenBuilder(clock=frozen_clock)


@fixture
def redis_client() -> InMemoryRedis:
    return InMemoryRedis()


@fixture
def replay_cache(redis_client: InMemoryRedis) -> ReplayCache:
    return ReplayCache(client=redis_client)  # type: ignore[arg-type]
