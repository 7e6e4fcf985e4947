from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Union

from hmacmint.exceptions import InvalidArgumentError, TypeMismatchError


class Preset(str, Enum):
    """Named token lifetimes."""

    ONE_DAY = "1day"
    ONE_WEEK = "1week"
    ONE_MONTH = "1month"

    @property
    def seconds(self) -> int:
        return _PRESET_SECONDS[self]


_PRESET_SECONDS: dict[Preset, int] = {
    Preset.ONE_DAY: 86400,
    Preset.ONE_WEEK: 604800,
    Preset.ONE_MONTH: 2592000,
}

Lifetime = Union[int, str, Preset, timedelta]


def resolve_lifetime(value: Lifetime) -> int:
    """
    Resolve a lifetime to a number of seconds.

    Accepts an int number of seconds, a Preset (or its name such as "1week")
    or a timedelta. Unknown preset names raise InvalidArgumentError rather
    than being ignored.
    """
    if isinstance(value, bool):
        raise TypeMismatchError("lifetime must be seconds, a preset or a timedelta")
    if isinstance(value, int):
        return value
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, str):
        try:
            return Preset(value).seconds
        except ValueError:
            choices = ", ".join(preset.value for preset in Preset)
            raise InvalidArgumentError(
                f"Unknown lifetime preset {value!r}, expected one of: {choices}"
            ) from None
    raise TypeMismatchError("lifetime must be seconds, a preset or a timedelta")
