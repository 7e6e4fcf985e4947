from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from hmacmint.exceptions import InvalidArgumentError, TypeMismatchError

from ._hash_algorithm import HashAlgorithm


@dataclass(frozen=True)
class KeyBinding:
    """
    Pairs an HMAC secret with the algorithm used to sign tokens with it.

    Attributes:
        secret (str | bytes): The shared signing secret.
        algorithm (str): One of "HS256", "HS384" or "HS512".

    Example:
    ```
        key = KeyBinding(secret="s3cr3t", algorithm="HS256")
        key = KeyBinding.from_pair(("s3cr3t", "HS512"))
    ```
    """

    secret: str | bytes
    algorithm: str

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (str, bytes)):
            raise TypeMismatchError("secret must be a string")
        if not isinstance(self.algorithm, str):
            raise TypeMismatchError("algorithm must be a string")

        if not self.secret:
            raise InvalidArgumentError("secret is empty")
        if not self.algorithm:
            raise InvalidArgumentError("algorithm is empty")

        # Store the plain name so equality and repr do not depend on the enum.
        object.__setattr__(self, "algorithm", HashAlgorithm.resolve(self.algorithm).value)

    @classmethod
    def from_pair(cls, pair: Sequence[Any]) -> KeyBinding:
        """Build a binding from an ordered `(secret, algorithm)` pair."""
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise TypeMismatchError("expected a (secret, algorithm) pair")
        secret, algorithm = pair
        return cls(secret=secret, algorithm=algorithm)

    @property
    def hash_algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.resolve(self.algorithm)

    def __repr__(self) -> str:
        return f"KeyBinding(secret='***', algorithm={self.algorithm!r})"
