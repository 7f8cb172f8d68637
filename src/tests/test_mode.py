import stat

import pytest

from dirsure.errors import InvalidModeError
from dirsure.mode import mode_matches, normalize_mode, permission_bits
from dirsure.models import DirOptions


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("521", 0o521),
        ("0755", 0o755),
        ("0", 0),
        (0o721, 0o721),
        (0, 0),
    ],
)
def test_normalize_mode_accepts_octal_strings_and_ints(spec: str | int, expected: int) -> None:
    assert normalize_mode(spec) == expected


@pytest.mark.parametrize("spec", ["", "   ", " 700 ", "\t755", "755\n", "abc", "789", "7a5", "0o755", "-755", "4755", 0o1000, -1, True, 7.5, None])
def test_normalize_mode_rejects_malformed_specs(spec: object) -> None:
    with pytest.raises(InvalidModeError):
        normalize_mode(spec)  # type: ignore[arg-type]


def test_invalid_mode_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid permission mode '9x'"):
        normalize_mode("9x")


def test_mode_matches_ignores_type_bits() -> None:
    live = stat.S_IFDIR | 0o521

    assert permission_bits(live) == 0o521
    assert mode_matches(live, 0o521) is True
    assert mode_matches(live, 0o721) is False
    assert mode_matches(stat.S_IFREG | 0o644, 0o644) is True


def test_string_and_int_forms_build_the_same_options() -> None:
    assert DirOptions.build(mode="521") == DirOptions.build(mode=0o521)
    assert DirOptions.build().mode is None


def test_options_defaults() -> None:
    options = DirOptions.build()

    assert options.exists is True
    assert options.empty is False


def test_build_coerces_falsy_flags() -> None:
    options = DirOptions.build(exists=None, empty=None)

    assert options.exists is True
    assert options.empty is False
