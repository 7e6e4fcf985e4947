from __future__ import annotations

import logging
import secrets
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from hmacmint.codec import encode_segment
from hmacmint.exceptions import InvalidArgumentError
from hmacmint.keys import HashAlgorithm, KeyBinding
from hmacmint.schema import Lifetime, resolve_lifetime

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_LIFETIME = 7200
DEFAULT_REFRESH_LIFETIME = 86400


def _current_time() -> datetime:
    return datetime.now(timezone.utc)


def _new_token_id() -> str:
    return secrets.token_hex(16)


class TokenBuilder:
    """
    Collects issuer, subject, audience and lifetime settings and signs a token.

    Setters return the builder so calls can be chained:
    ```
        token = (
            TokenBuilder()
            .with_issuer("svc-a")
            .with_subject("user-42")
            .with_access_lifetime("1week")
            .sign({"role": "admin"}, KeyBinding("s3cr3t", "HS256"))
        )
    ```

    A builder is meant for a single issuance and holds mutable state without
    locking: use a fresh instance per token (or per thread).
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        jti_factory: Callable[[], str] | None = None,
        embed_data: bool = True,
    ) -> None:
        self._clock = clock or _current_time
        self._jti_factory = jti_factory or _new_token_id
        self._embed_data = embed_data
        self.access_lifetime = DEFAULT_ACCESS_LIFETIME
        self.refresh_lifetime = DEFAULT_REFRESH_LIFETIME
        self.issuer: str | None = None
        self.subject: str | None = None
        self.audience: str | None = None
        self.not_before: str | int | None = None

    def with_access_lifetime(self, value: Lifetime) -> TokenBuilder:
        """Set the access token lifetime in seconds or as "1day", "1week", "1month"."""
        self.access_lifetime = resolve_lifetime(value)
        return self

    def with_refresh_lifetime(self, value: Lifetime) -> TokenBuilder:
        """Set the refresh token lifetime in seconds or as "1day", "1week", "1month"."""
        self.refresh_lifetime = resolve_lifetime(value)
        return self

    def with_issuer(self, issuer: str) -> TokenBuilder:
        self.issuer = issuer
        return self

    def with_subject(self, subject: str) -> TokenBuilder:
        if not subject:
            raise InvalidArgumentError("subject is empty")
        self.subject = subject
        return self

    def with_audience(self, audience: str) -> TokenBuilder:
        self.audience = audience
        return self

    def with_not_before(self, timestamp: str | int) -> TokenBuilder:
        """Set `nbf` as a Unix timestamp. The value is written to the token as given."""
        self.not_before = timestamp
        return self

    def build_claims(
        self,
        custom_claims: Mapping[str, Any],
        refresh: bool = False,
        sensitive: bool = False,
    ) -> dict[str, Any]:
        """Assemble the payload claims, registered claims taking precedence over custom ones."""
        issued_at = int(self._clock().timestamp())

        claims: dict[str, Any] = {"iat": issued_at}
        if self._embed_data:
            claims["data"] = dict(custom_claims)
        if self.issuer:
            claims["iss"] = self.issuer
        if self.subject:
            claims["sub"] = self.subject
        if self.audience:
            claims["aud"] = self.audience
        if sensitive:
            claims["jti"] = self._jti_factory()
        claims["exp"] = issued_at + (self.refresh_lifetime if refresh else self.access_lifetime)
        if self.not_before not in (None, ""):
            claims["nbf"] = self.not_before

        return {**custom_claims, **claims}

    def sign(
        self,
        custom_claims: Mapping[str, Any],
        key: KeyBinding,
        refresh: bool = False,
        sensitive: bool = False,
    ) -> str:
        """
        Sign `custom_claims` with `key` and return `<header>.<payload>.<signature>`.

        `refresh` selects the refresh lifetime for `exp`; `sensitive` adds a
        one-time `jti`. Raises UnsupportedAlgorithmError for an unknown algorithm.
        """
        algorithm = HashAlgorithm.resolve(key.algorithm)

        header = encode_segment({"typ": "JWT", "alg": algorithm.value})
        claims = self.build_claims(custom_claims, refresh=refresh, sensitive=sensitive)
        payload = encode_segment(claims)
        signature = algorithm.sign(f"{header}.{payload}", key.secret)

        logger.debug(
            "Signed %s token alg=%s exp=%s jti=%s",
            "refresh" if refresh else "access",
            algorithm.value,
            claims["exp"],
            "yes" if sensitive else "no",
        )
        return ".".join([header, payload, signature])
