from pytest import mark, raises

from hmacmint.exceptions import (
    InvalidArgumentError,
    TypeMismatchError,
    UnsupportedAlgorithmError,
)
from hmacmint.keys import HashAlgorithm, KeyBinding


@mark.parametrize("algorithm", ["HS256", "HS384", "HS512"])
def test_accessors_return_inputs(algorithm: str) -> None:
    """Secret and algorithm are exposed exactly as given."""
    key = KeyBinding(secret="s3cr3t", algorithm=algorithm)

    assert key.secret == "s3cr3t"
    assert key.algorithm == algorithm
    assert key.hash_algorithm is HashAlgorithm(algorithm)


def test_accepts_enum_member() -> None:
    """Enum members and byte secrets are accepted."""
    key = KeyBinding(secret=b"raw-bytes", algorithm=HashAlgorithm.HS384)

    assert key.algorithm == "HS384"
    assert key.secret == b"raw-bytes"


def test_from_pair() -> None:
    """The (secret, algorithm) pair form builds the same binding."""
    assert KeyBinding.from_pair(("s3cr3t", "HS512")) == KeyBinding("s3cr3t", "HS512")
    assert KeyBinding.from_pair(["s3cr3t", "HS256"]).algorithm == "HS256"


@mark.parametrize("pair", [("only-one",), ("a", "HS256", "extra"), "s3", None])
def test_from_pair_rejects_malformed_pair(pair: object) -> None:
    """Anything but a two-element sequence is rejected."""
    with raises(TypeMismatchError):
        KeyBinding.from_pair(pair)  # type: ignore[arg-type]


@mark.parametrize(
    "secret, algorithm",
    [("", "HS256"), ("s3cr3t", ""), (b"", "HS256")],
)
def test_empty_values_rejected(secret: str, algorithm: str) -> None:
    """Empty secret or algorithm raises InvalidArgumentError."""
    with raises(InvalidArgumentError):
        KeyBinding(secret=secret, algorithm=algorithm)


@mark.parametrize(
    "secret, algorithm",
    [(12345, "HS256"), ("s3cr3t", 256), (None, "HS256"), ("s3cr3t", None)],
)
def test_non_string_values_rejected(secret: object, algorithm: object) -> None:
    """Non-string secret or algorithm raises TypeMismatchError."""
    with raises(TypeMismatchError):
        KeyBinding(secret=secret, algorithm=algorithm)  # type: ignore[arg-type]


@mark.parametrize("algorithm", ["RS256", "hs256", "none", "HS1024"])
def test_unknown_algorithm_rejected_at_construction(algorithm: str) -> None:
    """Unknown algorithms are rejected when the binding is built."""
    with raises(UnsupportedAlgorithmError):
        KeyBinding(secret="s3cr3t", algorithm=algorithm)


def test_binding_is_immutable() -> None:
    """Fields cannot be reassigned."""
    key = KeyBinding(secret="s3cr3t", algorithm="HS256")

    with raises(AttributeError):
        key.secret = "other"  # type: ignore[misc]


def test_repr_hides_secret() -> None:
    """The secret never appears in the repr."""
    assert "s3cr3t" not in repr(KeyBinding(secret="s3cr3t", algorithm="HS256"))
