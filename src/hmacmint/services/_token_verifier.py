from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, cast

from jwt import (
    DecodeError,
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidAlgorithmError,
    InvalidAudienceError,
    InvalidIssuerError,
    InvalidSignatureError,
    InvalidTokenError,
    MissingRequiredClaimError,
)

from hmacmint.cache import ReplayCache
from hmacmint.codec import decode_segment, split_token
from hmacmint.keys import KeyBinding
from hmacmint.schema import ClaimDict

logger = logging.getLogger(__name__)


class TokenVerifier:
    """
    Checks tokens produced by TokenBuilder: signature, lifetime window,
    optional issuer/audience and, with a replay cache, one-time `jti` use.

    Every rejection raises a subclass of jwt.InvalidTokenError.
    """

    def __init__(
        self,
        key: KeyBinding,
        clock: Callable[[], datetime] | None = None,
        leeway: int = 0,
        replay_cache: ReplayCache | None = None,
    ) -> None:
        self.key = key
        self.leeway = leeway
        self.replay_cache = replay_cache
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def verify(
        self,
        token: str,
        issuer: str | None = None,
        audience: str | None = None,
        allow_reuse: bool = False,
    ) -> ClaimDict:
        """
        Verify `token` and return its claims.
        Raises InvalidTokenError (or a subclass) on failure.
        """
        try:
            claims = self._verify(token, issuer=issuer, audience=audience)
            self._prevent_replay(claims, allow_reuse=allow_reuse)
        except InvalidTokenError as error:
            logger.warning("Rejected token: %s", error)
            raise
        return claims

    def _verify(self, token: str, issuer: str | None, audience: str | None) -> ClaimDict:
        header_segment, payload_segment, signature = split_token(token)

        header = decode_segment(header_segment)
        if header.get("typ") != "JWT":
            raise DecodeError("Invalid token type")
        algorithm = self.key.hash_algorithm
        if header.get("alg") != algorithm.value:
            raise InvalidAlgorithmError("The specified alg value is not allowed")

        signing_input = f"{header_segment}.{payload_segment}"
        if not algorithm.verify(signing_input, self.key.secret, signature):
            raise InvalidSignatureError("Signature verification failed")

        claims = cast(ClaimDict, decode_segment(payload_segment))
        for claim in ("iat", "exp"):
            if claim not in claims:
                raise MissingRequiredClaimError(claim)

        now = int(self._clock().timestamp())
        expires_at = _timestamp(claims["exp"], "exp")
        if now >= expires_at + self.leeway:
            raise ExpiredSignatureError("Signature has expired")
        if "nbf" in claims:
            not_before = _timestamp(claims["nbf"], "nbf")
            if now < not_before - self.leeway:
                raise ImmatureSignatureError("The token is not yet valid (nbf)")

        if issuer is not None and claims.get("iss") != issuer:
            raise InvalidIssuerError("Invalid issuer")
        if audience is not None and claims.get("aud") != audience:
            raise InvalidAudienceError("Audience doesn't match")

        return claims

    def _prevent_replay(self, claims: ClaimDict, allow_reuse: bool) -> None:
        if self.replay_cache is None or "jti" not in claims:
            return
        token_id = claims["jti"]
        if allow_reuse and self.replay_cache.is_used(token_id):
            return
        # Mark token as used for remaining TTL; SET NX decides which caller wins.
        ttl_seconds = _timestamp(claims["exp"], "exp") - int(self._clock().timestamp())
        if not self.replay_cache.mark_as_used(token_id, ttl_seconds) and not allow_reuse:
            raise InvalidTokenError("Token has already been used")


def _timestamp(value: Any, claim: str) -> int:
    # nbf may have been supplied as a string by the issuer.
    if isinstance(value, bool):
        raise DecodeError(f"{claim} must be a Unix timestamp")
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise DecodeError(f"{claim} must be a Unix timestamp") from None
