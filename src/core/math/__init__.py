"""
Core math modules для wanshu-magnitude

Численные примитивы, гарантирующие тотальность операций над мантиссой.
"""

from src.core.math.numerical_safeguards import (
    DECIMAL_FORMAT_PRECISION,
    as_number,
    format_fixed,
    ieee_apply,
    ieee_divide,
    is_number,
    is_valid_float,
    round_half_up,
    safe_pow,
    scale_down,
    to_float,
)

__all__ = [
    # Constants
    "DECIMAL_FORMAT_PRECISION",
    # Number checks
    "is_number",
    "is_valid_float",
    "as_number",
    "to_float",
    # IEEE-754 arithmetic
    "ieee_apply",
    "scale_down",
    "ieee_divide",
    "safe_pow",
    # Rounding and formatting
    "round_half_up",
    "format_fixed",
]
