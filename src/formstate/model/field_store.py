"""FieldStore: current value of every field in a form.

The schema is the key set of the default values and never changes for the
lifetime of a store. Every write replaces the whole mapping instead of
mutating it, so observers can compare ``fields`` by identity to detect
changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from formstate.model.errors import FieldValueError, SchemaError, UnknownFieldError

FieldValue = str | int | float


def is_field_value(value: object) -> bool:
    """Check if value is a string or a number (bool excluded)."""
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def validate_schema(defaults: Mapping[str, FieldValue]) -> tuple[str, ...]:
    """Validate default values and return the schema keys in order.

    Raises SchemaError if the defaults are empty, have non-string keys, or
    hold values that are not strings or numbers.
    """
    if not isinstance(defaults, Mapping):
        raise SchemaError(f"Default values must be a mapping, got {type(defaults).__name__}")
    if not defaults:
        raise SchemaError("Default values must define at least one field")
    for name, value in defaults.items():
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Field names must be non-empty strings, got {name!r}")
        if not is_field_value(value):
            raise SchemaError(
                f"Default for field {name!r} must be a string or number, got {type(value).__name__}"
            )
    return tuple(defaults)


class FieldStore:
    """Holds the current value of each field, keyed by field name."""

    def __init__(self, defaults: Mapping[str, FieldValue]) -> None:
        self._names = validate_schema(defaults)
        self._defaults: Mapping[str, FieldValue] = MappingProxyType(dict(defaults))
        self._values: Mapping[str, FieldValue] = self._defaults

    @property
    def names(self) -> tuple[str, ...]:
        """Schema keys in definition order."""
        return self._names

    @property
    def defaults(self) -> Mapping[str, FieldValue]:
        return self._defaults

    @property
    def fields(self) -> Mapping[str, FieldValue]:
        """Read-only view of the current values."""
        return self._values

    def check_name(self, name: object) -> str:
        """Return name if it belongs to the schema, else raise UnknownFieldError."""
        if name not in self._defaults:
            raise UnknownFieldError(name, self._names)
        return name  # type: ignore[return-value]

    def get_one(self, name: str) -> FieldValue:
        return self._values[self.check_name(name)]

    def get_many(self, *names: str) -> dict[str, FieldValue]:
        """Return the requested fields; names outside the schema are omitted."""
        wanted = set(names)
        return {name: value for name, value in self._values.items() if name in wanted}

    def set_one(self, name: str, value: FieldValue) -> bool:
        """Write a single field.

        Returns:
            True if the stored value changed
        """
        self.check_name(name)
        self._check_value(name, value)
        if self._same(self._values[name], value):
            return False
        self._values = MappingProxyType({**self._values, name: value})
        return True

    def set_many(self, values: Mapping[str, FieldValue]) -> bool:
        """Merge values into the store as a single replacement.

        Nothing is written if any key is unknown or any value is invalid.

        Returns:
            True if at least one stored value changed
        """
        for name, value in values.items():
            self.check_name(name)
            self._check_value(name, value)
        changed = {
            name: value
            for name, value in values.items()
            if not self._same(self._values[name], value)
        }
        if not changed:
            return False
        self._values = MappingProxyType({**self._values, **changed})
        return True

    def reset(self, overrides: Mapping[str, FieldValue] | None = None) -> bool:
        """Replace the values with the defaults merged with overrides.

        Returns:
            True if the stored values changed
        """
        overrides = overrides or {}
        for name, value in overrides.items():
            self.check_name(name)
            self._check_value(name, value)
        merged = {**self._defaults, **overrides}
        if all(self._same(self._values[name], merged[name]) for name in self._names):
            return False
        self._values = MappingProxyType(merged)
        return True

    @staticmethod
    def _check_value(name: str, value: object) -> None:
        if not is_field_value(value):
            raise FieldValueError(
                f"Value for field {name!r} must be a string or number, got {type(value).__name__}"
            )

    @staticmethod
    def _same(current: FieldValue, new: FieldValue) -> bool:
        # "1" and 1 are different values
        return type(current) is type(new) and current == new
