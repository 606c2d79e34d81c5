"""Widget ID constants for the form UI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from formstate.ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def field_id(name: str) -> str:
    """Widget ID of the input bound to a field."""
    return f"field-{name}"


def flags_id(name: str) -> str:
    """Widget ID of the flag line shown under a field."""
    return f"flags-{name}"


# Container IDs
FORM_TITLE = "form-title"
FORM_FIELDS = "form-fields"
FORM_BUTTONS = "form-buttons"
STATUS_BAR = "status-bar"

# Buttons
SUBMIT_BTN = "submit-btn"
RESET_BTN = "reset-btn"

# Classes
FIELD_CLASS = "form-field"
FIELD_ROW_CLASS = "form-field-row"
FLAGS_CLASS = "form-field-flags"
