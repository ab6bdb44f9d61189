import re
import logging

from mcpack.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

U64_MAX = 2**64 - 1

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def parse_bool(value: str | bool) -> bool:
    """
    Parse a command-line boolean.
    Only the literal strings "true" and "false" are accepted.

    Args:
        value: Raw argument value

    Returns:
        Parsed boolean
    """
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    raise InvalidArgumentError(f"Expected 'true' or 'false', got {value!r}")


def parse_u64(value: str | int, name: str = "value") -> int:
    """
    Parse an unsigned 64-bit integer such as a CurseForge project or file ID.

    Args:
        value: Raw argument value, digits with an optional leading '+'
        name: Argument name used in error messages

    Returns:
        Parsed integer in the range [0, 2**64 - 1]
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {name} {value!r}: expected an integer")
    if isinstance(value, int):
        number = value
    else:
        if not _UNSIGNED_PATTERN.fullmatch(value):
            raise InvalidArgumentError(
                f"Invalid {name} {value!r}: expected a non-negative integer"
            )
        number = int(value)

    if not 0 <= number <= U64_MAX:
        raise InvalidArgumentError(
            f"Invalid {name} {value!r}: must be between 0 and {U64_MAX}"
        )

    logger.debug(f"Parsed {name} {number} from {value!r}")
    return number
