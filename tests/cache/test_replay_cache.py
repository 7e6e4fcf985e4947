from hmacmint.cache import ReplayCache


def test_mark_as_used(replay_cache: ReplayCache, redis_client) -> None:
    """Marked token IDs are reported as used, under the key prefix."""
    assert not replay_cache.is_used("abc")

    replay_cache.mark_as_used("abc", 60)

    assert replay_cache.is_used("abc")
    assert redis_client.expiries["token:jti:abc"] == 60


def test_mark_reports_first_use_only(replay_cache: ReplayCache) -> None:
    """Only the first mark of a token ID succeeds."""
    assert replay_cache.mark_as_used("abc", 60) is True
    assert replay_cache.mark_as_used("abc", 60) is False


def test_mark_keeps_first_expiry(replay_cache: ReplayCache, redis_client) -> None:
    """Marking twice keeps the first expiry."""
    replay_cache.mark_as_used("abc", 60)
    replay_cache.mark_as_used("abc", 600)

    assert redis_client.expiries["token:jti:abc"] == 60


def test_expiry_is_at_least_one_second(replay_cache: ReplayCache, redis_client) -> None:
    """Expiries never drop below one second."""
    replay_cache.mark_as_used("late", -5)

    assert redis_client.expiries["token:jti:late"] == 1


def test_custom_prefix(redis_client) -> None:
    """Keys use the configured prefix."""
    cache = ReplayCache(client=redis_client, key_prefix="svc-a:jti:")
    cache.mark_as_used("abc", 10)

    assert "svc-a:jti:abc" in redis_client.store
