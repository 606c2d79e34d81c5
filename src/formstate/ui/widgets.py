"""Form widgets: FieldInput and FieldRow."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Input, Label, Static

from formstate.controller import FieldBinding
from formstate.model import FieldValue, SubmitStates
from formstate.ui import ids


def input_type_for(default: FieldValue) -> str:
    """Pick the Textual Input type matching a field's default value."""
    if isinstance(default, int):
        return "integer"
    if isinstance(default, float):
        return "number"
    return "text"


def coerce_input_value(raw: str, default: FieldValue) -> FieldValue:
    """Convert text typed into an input back to the type of the field's default.

    Partial numeric input ("", "-", "1e") is kept as text.
    """
    if isinstance(default, str):
        return raw
    try:
        return int(raw) if isinstance(default, int) else float(raw)
    except ValueError:
        return raw


def format_flags(dirty: bool, touched: bool, blurred: bool) -> str:
    """Render a field's interaction flags as a short status line."""
    parts = [
        label
        for label, enabled in (("dirty", dirty), ("touched", touched), ("blurred", blurred))
        if enabled
    ]
    return ", ".join(parts) if parts else "pristine"


def format_status(states: SubmitStates) -> str:
    """Render the submit status for the status bar."""
    if states.is_error and states.error is not None:
        return f"Status: {states.status.value} ({states.error})"
    return f"Status: {states.status.value}"


class FieldInput(Input):
    """An Input bound to one form field.

    The widget name is the field name, so event handlers can dispatch on
    ``event.input.name``.
    """

    def __init__(self, binding: FieldBinding, placeholder: str = "") -> None:
        super().__init__(
            value=str(binding.value),
            placeholder=placeholder,
            type=input_type_for(binding.value),
            name=binding.name,
            id=ids.field_id(binding.name),
            classes=ids.FIELD_CLASS,
        )
        self.field_name = binding.name

    def show_value(self, value: FieldValue) -> None:
        """Display a value written by the controller without echoing a change event."""
        # "1.50" already shows 1.5; leave the user's text alone
        if coerce_input_value(self.value, value) == value:
            return
        with self.prevent(Input.Changed):
            self.value = str(value)


class FieldRow(Container):
    """Label, input and flag line for one field."""

    def __init__(self, binding: FieldBinding, label: str | None = None) -> None:
        super().__init__(classes=ids.FIELD_ROW_CLASS)
        self.binding = binding
        self.label = label or binding.name.replace("_", " ").capitalize()

    def compose(self) -> ComposeResult:
        yield Label(self.label)
        yield FieldInput(self.binding)
        yield Static(
            format_flags(False, False, False),
            id=ids.flags_id(self.binding.name),
            classes=ids.FLAGS_CLASS,
        )
