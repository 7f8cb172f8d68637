"""Permission mode parsing and comparison."""

from __future__ import annotations

from dirsure.errors import InvalidModeError

PERMISSION_MASK = 0o777
OCTAL_DIGITS = frozenset("01234567")


def normalize_mode(spec: str | int) -> int:
    """
    Converts "521" or 0o521 into permission bits.
    Strings are read as octal; ints are taken as already holding the bits.
    """
    if isinstance(spec, bool):
        raise InvalidModeError(spec)
    if isinstance(spec, str):
        if not spec or not set(spec) <= OCTAL_DIGITS:
            raise InvalidModeError(spec)
        value = int(spec, 8)
    elif isinstance(spec, int):
        value = spec
    else:
        raise InvalidModeError(spec)
    if value < 0 or value > PERMISSION_MASK:
        raise InvalidModeError(spec)
    return value


def permission_bits(live_mode: int) -> int:
    return live_mode & PERMISSION_MASK


def mode_matches(live_mode: int, desired: int) -> bool:
    return permission_bits(live_mode) == desired
