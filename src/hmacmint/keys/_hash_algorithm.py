from __future__ import annotations

from enum import Enum

from jwt.algorithms import HMACAlgorithm
from jwt.utils import force_bytes

from hmacmint.exceptions import UnsupportedAlgorithmError


class HashAlgorithm(str, Enum):
    """
    Keyed hashing algorithms a token can be signed with.

    Each member dispatches to PyJWT's HMAC implementation for the matching
    SHA-2 digest. Signatures are rendered as lowercase hex.
    """

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    @classmethod
    def resolve(cls, name: str | HashAlgorithm) -> HashAlgorithm:
        """Return the member named `name` or raise UnsupportedAlgorithmError."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name!r}") from None

    @property
    def implementation(self) -> HMACAlgorithm:
        return _IMPLEMENTATIONS[self]

    def sign(self, message: str, secret: str | bytes) -> str:
        """Return the hex HMAC of `message` keyed with `secret`."""
        # Secrets are opaque: skip prepare_key, which refuses PEM or SSH-looking text.
        return self.implementation.sign(message.encode("utf-8"), force_bytes(secret)).hex()

    def verify(self, message: str, secret: str | bytes, signature: str) -> bool:
        """Check a hex signature against `message` in constant time."""
        try:
            expected = bytes.fromhex(signature)
        except ValueError:
            return False
        return self.implementation.verify(message.encode("utf-8"), force_bytes(secret), expected)


_IMPLEMENTATIONS: dict[HashAlgorithm, HMACAlgorithm] = {
    HashAlgorithm.HS256: HMACAlgorithm(HMACAlgorithm.SHA256),
    HashAlgorithm.HS384: HMACAlgorithm(HMACAlgorithm.SHA384),
    HashAlgorithm.HS512: HMACAlgorithm(HMACAlgorithm.SHA512),
}
