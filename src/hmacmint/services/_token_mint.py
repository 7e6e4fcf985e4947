from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from os import environ
from typing import Any

from hmacmint.cache import ReplayCache
from hmacmint.exceptions import TokenConfigurationError
from hmacmint.keys import HashAlgorithm, KeyBinding
from hmacmint.schema import ClaimDict
from hmacmint.settings import Settings

from ._token_builder import TokenBuilder
from ._token_pair import TokenPair
from ._token_verifier import TokenVerifier

logger = logging.getLogger(__name__)


class TokenMint:
    """
    High-level API to issue access/refresh tokens and validate them.
    """

    def __init__(
        self,
        settings: Settings,
        key: KeyBinding | None = None,
        replay_cache: ReplayCache | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.settings = settings
        self.key = key or self._load_environ_key()
        if replay_cache is None and settings.prevent_replay:
            replay_cache = ReplayCache(redis_url=settings.redis_url)
        self.replay_cache = replay_cache
        self._clock = clock
        self.verifier = TokenVerifier(
            key=self.key,
            clock=clock,
            leeway=settings.clock_skew_leeway,
            replay_cache=replay_cache,
        )

    @staticmethod
    def _load_environ_key() -> KeyBinding:
        """
        Example loader:
        - TOKEN_SECRET_KEY = "a long random secret"
        - TOKEN_ALGORITHM = "HS256" (default)
        """
        secret = environ.get("TOKEN_SECRET_KEY")
        if not secret:
            raise TokenConfigurationError(
                "The TOKEN_SECRET_KEY environment variable is missing. "
                "You must set it to the shared secret used to sign tokens, for example:\n\n"
                "    TOKEN_SECRET_KEY = '<your-secret>'"
            )
        algorithm = environ.get("TOKEN_ALGORITHM") or HashAlgorithm.HS256.value
        return KeyBinding(secret=secret, algorithm=algorithm)

    def builder(self) -> TokenBuilder:
        """Return a fresh builder configured from the settings."""
        builder = TokenBuilder(clock=self._clock, embed_data=self.settings.embed_data)
        builder.with_access_lifetime(self.settings.access_lifetime)
        builder.with_refresh_lifetime(self.settings.refresh_lifetime)
        if self.settings.issuer:
            builder.with_issuer(self.settings.issuer)
        if self.settings.audience:
            builder.with_audience(self.settings.audience)
        return builder

    def issue_access_token(
        self,
        subject: str,
        extra_claims: Mapping[str, Any] | None = None,
        sensitive: bool = False,
    ) -> str:
        return self._issue(subject, extra_claims, refresh=False, sensitive=sensitive)

    def issue_refresh_token(
        self,
        subject: str,
        extra_claims: Mapping[str, Any] | None = None,
        sensitive: bool = False,
    ) -> str:
        return self._issue(subject, extra_claims, refresh=True, sensitive=sensitive)

    def issue_pair(
        self,
        subject: str,
        extra_claims: Mapping[str, Any] | None = None,
        sensitive: bool = False,
    ) -> TokenPair:
        """Issue an access token and a refresh token for the same subject and claims."""
        return TokenPair(
            access_token=self.issue_access_token(subject, extra_claims, sensitive=sensitive),
            refresh_token=self.issue_refresh_token(subject, extra_claims, sensitive=sensitive),
        )

    def _issue(
        self,
        subject: str,
        extra_claims: Mapping[str, Any] | None,
        refresh: bool,
        sensitive: bool,
    ) -> str:
        builder = self.builder().with_subject(subject)
        logger.debug("Issuing %s token for sub=%s", "refresh" if refresh else "access", subject)
        return builder.sign(extra_claims or {}, self.key, refresh=refresh, sensitive=sensitive)

    def validate_token(self, token: str, allow_reuse: bool = False) -> ClaimDict:
        """
        Validate signature, lifetime, issuer and audience; with replay prevention
        enabled a token carrying a `jti` is accepted only once.
        Returns decoded claims if valid; raises InvalidTokenError on failure.
        """
        return self.verifier.verify(
            token,
            issuer=self.settings.issuer,
            audience=self.settings.audience,
            allow_reuse=allow_reuse,
        )
