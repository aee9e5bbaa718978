"""
Contract Validation Module

Модуль для сериализации Sign и валидации сериализованных значений
против JSON Schema контрактов.
"""

from .serialization import (
    SIGN_NAMES,
    dump_sign,
    dump_sign_json,
    load_sign,
    load_sign_json,
)
from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    SchemaLoader,
    SignValidator,
    validate_sign,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "SIGN_NAMES",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SignValidator",
    # Functions
    "validate_sign",
    "dump_sign",
    "load_sign",
    "dump_sign_json",
    "load_sign_json",
]
