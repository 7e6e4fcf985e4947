from __future__ import annotations

from typing import NamedTuple


class TokenPair(NamedTuple):
    """Short-lived access token and the long-lived refresh token issued with it."""

    access_token: str
    refresh_token: str
