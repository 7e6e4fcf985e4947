from __future__ import annotations

from os import environ

import redis


class ReplayCache:
    """
    Stores used token IDs (JTIs) in Redis with an expiry matching the token lifetime.
    Use a dedicated Redis DB or key prefix.
    """

    def __init__(
        self,
        redis_url: str | None = None,
        key_prefix: str = "token:jti:",
        client: redis.Redis | None = None,
    ) -> None:
        if client is None:
            client = redis.from_url(  # type: ignore
                redis_url or environ.get("REDIS_URL", "redis://localhost:6379/0")
            )
        self._redis_client = client
        self._key_prefix = key_prefix

    def _build_key(self, token_id: str) -> str:
        return f"{self._key_prefix}{token_id}"

    def mark_as_used(self, token_id: str, ttl_seconds: int) -> bool:
        """
        Atomically mark a token as used.
        Returns False if it was already marked; the first expiry is kept.
        """
        return bool(
            self._redis_client.set(self._build_key(token_id), 1, ex=max(1, ttl_seconds), nx=True)
        )

    def is_used(self, token_id: str) -> bool:
        """Check if a token ID has already been used."""
        return bool(self._redis_client.exists(self._build_key(token_id)))
