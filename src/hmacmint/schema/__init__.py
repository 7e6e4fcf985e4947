from ._claim_dict import ClaimDict
from ._lifetime import Lifetime, Preset, resolve_lifetime

__all__ = ["ClaimDict", "Lifetime", "Preset", "resolve_lifetime"]
