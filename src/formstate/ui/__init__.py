"""UI module: Textual widgets and event wiring for a FormController."""

from formstate.ui.compose import compose_form
from formstate.ui.events import FormEventsMixin
from formstate.ui.widgets import (
    FieldInput,
    FieldRow,
    coerce_input_value,
    format_flags,
    format_status,
    input_type_for,
)
from formstate.ui import ids

__all__ = [
    "FieldInput",
    "FieldRow",
    "FormEventsMixin",
    "coerce_input_value",
    "compose_form",
    "format_flags",
    "format_status",
    "ids",
    "input_type_for",
]
