"""General utility functions"""

from numbers import Integral
from typing import Any

# Times are whole milliseconds and lanes are indices
Number = int


def is_integer(value: Any) -> bool:
    """bools are ints as far as python is concerned, they are not numbers
    as far as a chart is concerned. Floats are refused even when integral,
    a 2.0 lane means the value went through some arithmetic it shouldn't
    have"""
    return isinstance(value, Integral) and not isinstance(value, bool)
