"""Number rendering for demo output."""
from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Render a number without losing digits.

    Whole floats drop their fractional part (``2.0`` -> ``"2"``); every other
    value uses Python's shortest round-trip representation.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
