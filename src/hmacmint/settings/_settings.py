from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta

from hmacmint.exceptions import TokenConfigurationError
from hmacmint.schema import resolve_lifetime

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """
    Settings for token issuance and validation.

    Attributes:
        issuer (str | None): The entity that issues the token.
        audience (str | None): The intended recipient of the token.
        access_lifetime (timedelta): How long access tokens stay valid (default: 2 hours).
        refresh_lifetime (timedelta): How long refresh tokens stay valid (default: 1 day).
        clock_skew_leeway (int): Allowed clock skew in seconds (default: 0).
        prevent_replay (bool): Whether a token `jti` may only be validated once (default: False).
        embed_data (bool): Whether custom claims are also nested under `data` (default: True).
        redis_url (str | None): Redis connection used for replay prevention.

    Example:
    ```
        settings = Settings(
            issuer="svc-a",
            audience="web",
            access_lifetime=timedelta(minutes=15),
            refresh_lifetime=timedelta(weeks=1),
        )
    ```
    """

    issuer: str | None = None
    audience: str | None = None
    access_lifetime: timedelta = timedelta(seconds=7200)
    refresh_lifetime: timedelta = timedelta(seconds=86400)
    clock_skew_leeway: int = 0
    prevent_replay: bool = False
    embed_data: bool = True
    redis_url: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from environment variables:
        - TOKEN_ISSUER, TOKEN_AUDIENCE
        - TOKEN_ACCESS_LIFETIME, TOKEN_REFRESH_LIFETIME = seconds or "1day" / "1week" / "1month"
        - TOKEN_CLOCK_SKEW_LEEWAY = seconds
        - TOKEN_PREVENT_REPLAY, TOKEN_EMBED_DATA = true / false
        - REDIS_URL
        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            issuer=env.get("TOKEN_ISSUER") or None,
            audience=env.get("TOKEN_AUDIENCE") or None,
            access_lifetime=_lifetime(env, "TOKEN_ACCESS_LIFETIME", defaults.access_lifetime),
            refresh_lifetime=_lifetime(env, "TOKEN_REFRESH_LIFETIME", defaults.refresh_lifetime),
            clock_skew_leeway=_integer(env, "TOKEN_CLOCK_SKEW_LEEWAY", defaults.clock_skew_leeway),
            prevent_replay=_flag(env, "TOKEN_PREVENT_REPLAY", defaults.prevent_replay),
            embed_data=_flag(env, "TOKEN_EMBED_DATA", defaults.embed_data),
            redis_url=env.get("REDIS_URL") or None,
        )


def _integer(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise TokenConfigurationError(
            f"{name} is set to '{raw}', but it must be a whole number of seconds, for example:\n\n"
            f"    {name} = '30'"
        ) from None


def _lifetime(env: Mapping[str, str], name: str, default: timedelta) -> timedelta:
    raw = env.get(name)
    if not raw:
        return default
    value: int | str = int(raw) if raw.isdigit() else raw
    try:
        return timedelta(seconds=resolve_lifetime(value))
    except TokenConfigurationError as error:
        raise TokenConfigurationError(
            f"{name} is set to '{raw}', but it must be a number of seconds "
            "or one of '1day', '1week', '1month', for example:\n\n"
            f"    {name} = '3600'"
        ) from error


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if not raw:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise TokenConfigurationError(
        f"{name} is set to '{raw}', but it must be 'true' or 'false'."
    )
