"""Input checks shared by the transition engines."""

from pool_model.errors import InvalidAmount, Overflow
from pool_model.safe_int import S


def require_quantity(name: str, value: int) -> int:
    """Validate a caller-supplied quantity.

    Raises:
        InvalidAmount: If value is not an int or is negative
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidAmount(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidAmount(f"{name} cannot be negative: {value}")
    return value


def require_within_ceiling(name: str, value: int, ceiling: int) -> int:
    """Raise Overflow if a resulting reserve or balance exceeds the ceiling."""
    if not S(value).fits_within(ceiling):
        raise Overflow(f"{name} exceeds ceiling: {value} > {ceiling}")
    return value
