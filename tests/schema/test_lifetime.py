from datetime import timedelta

from pytest import mark, raises

from hmacmint.exceptions import InvalidArgumentError, TypeMismatchError
from hmacmint.schema import Preset, resolve_lifetime


@mark.parametrize(
    "value, seconds",
    [
        ("1day", 86400),
        ("1week", 604800),
        ("1month", 2592000),
        (Preset.ONE_WEEK, 604800),
        (300, 300),
        (timedelta(minutes=15), 900),
    ],
)
def test_resolve_lifetime(value, seconds: int) -> None:
    """Seconds, presets and timedeltas resolve to seconds."""
    assert resolve_lifetime(value) == seconds


def test_unknown_preset_rejected() -> None:
    """Unrecognised preset names are an error, not a silent no-op."""
    with raises(InvalidArgumentError):
        resolve_lifetime("1year")


@mark.parametrize("value", [True, 1.5, None, [86400]])
def test_wrong_type_rejected(value: object) -> None:
    """Lifetimes of any other type raise TypeMismatchError."""
    with raises(TypeMismatchError):
        resolve_lifetime(value)  # type: ignore[arg-type]
