"""Exceptions raised by the form state model."""


class FormStateError(Exception):
    """Base class for form state errors."""


class UnknownFieldError(FormStateError, KeyError):
    """Raised when a field name is not part of the form schema."""

    def __init__(self, name: object, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        if self.known:
            return f"Unknown field {self.name!r} (known fields: {', '.join(self.known)})"
        return f"Unknown field {self.name!r}"


class SchemaError(FormStateError, ValueError):
    """Raised when the default values do not describe a valid schema."""


class FieldValueError(FormStateError, TypeError):
    """Raised when a field value is not a string or a number."""
