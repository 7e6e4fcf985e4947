from ._replay_cache import ReplayCache

__all__ = ["ReplayCache"]
