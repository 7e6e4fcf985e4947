from hmacmint.cache import ReplayCache
from hmacmint.keys import HashAlgorithm, KeyBinding
from hmacmint.schema import ClaimDict, Preset
from hmacmint.services import TokenBuilder, TokenMint, TokenPair, TokenVerifier
from hmacmint.settings import Settings

__all__ = [
    "ClaimDict",
    "HashAlgorithm",
    "KeyBinding",
    "Preset",
    "ReplayCache",
    "Settings",
    "TokenBuilder",
    "TokenMint",
    "TokenPair",
    "TokenVerifier",
]
