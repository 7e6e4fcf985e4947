from ._hash_algorithm import HashAlgorithm
from ._key_binding import KeyBinding

__all__ = ["HashAlgorithm", "KeyBinding"]
