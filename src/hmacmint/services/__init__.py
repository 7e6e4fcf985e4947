from ._token_builder import TokenBuilder
from ._token_mint import TokenMint
from ._token_pair import TokenPair
from ._token_verifier import TokenVerifier

__all__ = ["TokenBuilder", "TokenMint", "TokenPair", "TokenVerifier"]
