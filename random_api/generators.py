import string
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Optional, Union

from .source import RandomSource

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

MIN_LENGTH = 1
MAX_LENGTH = 1024
DEFAULT_LENGTH = 8

MIN_DECIMALS = 0
MAX_DECIMALS = 10
DEFAULT_DECIMALS = 2

NUMBER, DECIMAL, STRING = CUSTOM_TYPES = ("number", "decimal", "string")

_TYPE_CHOICES = ", ".join(repr(t) for t in CUSTOM_TYPES[:-1]) + " or " + repr(CUSTOM_TYPES[-1])


class InvalidArgument(ValueError):
    """Request parameters rejected before any value is drawn."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def _inclusive_range(source: RandomSource, low: int, high: int) -> int:
    if low > high:
        raise InvalidArgument("min cannot be greater than max")
    # the exclusive-upper generator gets high + 1
    if high == INT32_MAX:
        raise InvalidArgument(
            "max must be lower than 2147483647 so that max+1 does not overflow"
        )
    return source.uniform_int(low, high + 1)


def _check_length(length: int) -> int:
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise InvalidArgument(
            f"length must be between {MIN_LENGTH} and {MAX_LENGTH}"
        )
    return length


def _check_decimals(decimals: int) -> int:
    if decimals < MIN_DECIMALS or decimals > MAX_DECIMALS:
        raise InvalidArgument(
            f"decimals must be between {MIN_DECIMALS} and {MAX_DECIMALS}"
        )
    return decimals


# -------------------------------------------------------------------
# Operations
# -------------------------------------------------------------------

def random_number(
    source: RandomSource, min: Optional[int] = None, max: Optional[int] = None
) -> int:
    """Integer in [0, INT32_MAX) without bounds, otherwise in [min, max]."""
    if min is None and max is None:
        return source.uniform_int(0, INT32_MAX)

    if min is None or max is None:
        raise InvalidArgument("both min and max are required")

    return _inclusive_range(source, min, max)


def random_decimal(source: RandomSource) -> Decimal:
    # repr() is the shortest string that round-trips the float
    return Decimal(repr(source.uniform_float01()))


def random_string(source: RandomSource, length: int = DEFAULT_LENGTH) -> str:
    _check_length(length)
    return "".join(
        ALPHABET[source.secure_uniform_int(0, len(ALPHABET))]
        for _ in range(length)
    )


def random_rounded_decimal(source: RandomSource, decimals: int) -> Decimal:
    """[0, 1) draw rounded half-to-even to `decimals` fractional digits."""
    _check_decimals(decimals)
    quantum = Decimal(1).scaleb(-decimals)
    return random_decimal(source).quantize(quantum, rounding=ROUND_HALF_EVEN)


def random_custom(
    source: RandomSource,
    type: Optional[str],
    min: Optional[int] = None,
    max: Optional[int] = None,
    decimals: Optional[int] = None,
    length: Optional[int] = None,
) -> Union[int, Decimal, str]:
    """
    Dispatch on `type` (trimmed, case-insensitive):

    * ``number``  - needs both `min` and `max`, inclusive range
    * ``decimal`` - rounded to `decimals` digits, default 2
    * ``string``  - alphanumeric of `length` chars, default 8
    """
    if type is None:
        raise InvalidArgument(f"type is required: {_TYPE_CHOICES}")

    kind = type.strip().lower()

    if kind == NUMBER:
        if min is None or max is None:
            raise InvalidArgument("type 'number' requires both min and max")
        return _inclusive_range(source, min, max)

    if kind == DECIMAL:
        if decimals is None:
            decimals = DEFAULT_DECIMALS
        return random_rounded_decimal(source, decimals)

    if kind == STRING:
        if length is None:
            length = DEFAULT_LENGTH
        return random_string(source, length)

    raise InvalidArgument(f"invalid type; use {_TYPE_CHOICES}")
