class TokenConfigurationError(Exception):
    """Raised when a key, lifetime or setting is unusable for signing tokens."""


class InvalidArgumentError(TokenConfigurationError, ValueError):
    """A required value is empty or not one of the accepted values."""


class TypeMismatchError(TokenConfigurationError, TypeError):
    """A value does not have the expected type."""


class UnsupportedAlgorithmError(TokenConfigurationError):
    """The algorithm name is not one of HS256, HS384 or HS512."""
