"""formstate: form state and submission lifecycle controller."""

from formstate.config import FormConfig, SubmitPolicy
from formstate.controller import FieldBinding, FormController
from formstate.model import (
    FieldEvent,
    FieldValueError,
    FormStateError,
    SchemaError,
    SubmissionStatus,
    SubmitEvent,
    SubmitStates,
    UnknownFieldError,
)

__version__ = "0.1.0"

__all__ = [
    "FieldBinding",
    "FieldEvent",
    "FieldValueError",
    "FormConfig",
    "FormController",
    "FormStateError",
    "SchemaError",
    "SubmissionStatus",
    "SubmitEvent",
    "SubmitPolicy",
    "SubmitStates",
    "UnknownFieldError",
    "__version__",
]
