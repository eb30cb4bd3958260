"""Exception taxonomy for record generation, pools and violation scenarios."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all generation failures."""


class SchemaConfigError(GenerationError, ValueError):
    """Schema set is unusable (nested-schema cycle, invalid field definition)."""


class UnknownFieldTypeError(GenerationError, ValueError):
    """No handler is registered for a field type tag."""

    def __init__(self, field_type: str) -> None:
        super().__init__(f"Unknown field type: {field_type}")
        self.field_type = field_type


class PoolExhaustedError(GenerationError, LookupError):
    """Draw from an empty identity pool."""

    def __init__(self, pool_name: str, message: str) -> None:
        super().__init__(message)
        self.pool_name = pool_name


class PoolStorageError(GenerationError, OSError):
    """Pool snapshot could not be read or parsed."""


class UnknownRuleError(GenerationError, KeyError):
    """Rule code not present in the catalog."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown rule code: {self.code}"
