"""
Domain models and value objects.

Contains the NumberWithUnit value type, the magnitude unit table,
the plain-record model and the formatting policy.
"""

from src.core.domain.formatting import (
    DEFAULT_FORMAT_CONFIG,
    FormatConfig,
    format_magnitude,
)
from src.core.domain.number_with_unit import NumberWithUnit
from src.core.domain.record import MagnitudeRecord
from src.core.domain.units import (
    MAX_UNIT_INDEX,
    NUMBER_UNITS,
    UNIT_BASE,
    is_valid_unit,
    unit_scale,
    unit_suffix,
)

__all__ = [
    # Units module
    "UNIT_BASE",
    "NUMBER_UNITS",
    "MAX_UNIT_INDEX",
    "is_valid_unit",
    "unit_suffix",
    "unit_scale",
    # Formatting
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    "format_magnitude",
    # Record model
    "MagnitudeRecord",
    # Value type
    "NumberWithUnit",
]
