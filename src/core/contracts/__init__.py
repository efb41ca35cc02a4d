"""
Contract Validation Module

Модуль для строгой валидации JSON контрактов плоской записи величины.
"""

from .validators import (
    MAGNITUDE_RECORD_SCHEMA,
    SCHEMA_DIR,
    ContractValidator,
    MagnitudeRecordValidator,
    SchemaLoader,
    default_schema_loader,
    validate_magnitude_record,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "MAGNITUDE_RECORD_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MagnitudeRecordValidator",
    # Functions
    "default_schema_loader",
    "validate_magnitude_record",
]
