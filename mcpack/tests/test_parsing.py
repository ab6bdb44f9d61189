import pytest

from mcpack.errors import InvalidArgumentError, ManifestError
from mcpack.utils.parsing import U64_MAX, parse_bool, parse_u64


@pytest.mark.parametrize("value,expected", [("true", True), ("false", False)])
def test_parse_bool(value: str, expected: bool) -> None:
    assert parse_bool(value) is expected


def test_parse_bool_passes_through_bools() -> None:
    assert parse_bool(True) is True
    assert parse_bool(False) is False


@pytest.mark.parametrize("value", ["True", "FALSE", "yes", "1", "", " true"])
def test_parse_bool_rejects_other_strings(value: str) -> None:
    """Only the exact lowercase literals are accepted."""
    with pytest.raises(InvalidArgumentError):
        parse_bool(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0", 0),
        ("123456", 123456),
        ("+42", 42),
        ("007", 7),
        (str(U64_MAX), U64_MAX),
        (789, 789),
    ],
)
def test_parse_u64(value: str | int, expected: int) -> None:
    assert parse_u64(value) == expected


@pytest.mark.parametrize(
    "value",
    ["abc", "", "-1", "1.5", "1_000", " 12", "12 ", "0x10", str(U64_MAX + 1), -1, True],
)
def test_parse_u64_rejects_invalid(value: str | int) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_u64(value)


def test_invalid_argument_error_types() -> None:
    """Test that argument errors are both manifest errors and value errors."""
    with pytest.raises(ValueError, match="project ID"):
        parse_u64("nope", "project ID")
    assert issubclass(InvalidArgumentError, ManifestError)
