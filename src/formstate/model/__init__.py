"""Model classes for formstate."""

from formstate.model.errors import (
    FieldValueError,
    FormStateError,
    SchemaError,
    UnknownFieldError,
)
from formstate.model.field_store import FieldStore, FieldValue, is_field_value, validate_schema
from formstate.model.flags import FlagTracker
from formstate.model.events import FieldEvent, SubmitEvent, event_field_name, event_field_value
from formstate.model.status import SubmissionStatus, SubmitStates

__all__ = [
    # Errors
    "FieldValueError",
    "FormStateError",
    "SchemaError",
    "UnknownFieldError",
    # Stores
    "FieldStore",
    "FieldValue",
    "FlagTracker",
    "is_field_value",
    "validate_schema",
    # Events
    "FieldEvent",
    "SubmitEvent",
    "event_field_name",
    "event_field_value",
    # Submission
    "SubmissionStatus",
    "SubmitStates",
]
