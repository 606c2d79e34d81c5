"""Compose the widgets for a whole form."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Static

from formstate.ui import ids
from formstate.ui.widgets import FieldRow, format_status

if TYPE_CHECKING:
    from formstate.controller import FormController


def compose_form(
    form: FormController,
    title: str = "Form",
    labels: Mapping[str, str] | None = None,
) -> ComposeResult:
    """Yield a title, one FieldRow per field, the buttons and a status bar."""
    labels = labels or {}
    yield Static(title, id=ids.FORM_TITLE)
    with VerticalScroll(id=ids.FORM_FIELDS):
        for name in form.names:
            yield FieldRow(form.control(name), labels.get(name))
    with Horizontal(id=ids.FORM_BUTTONS):
        yield Button("Submit", id=ids.SUBMIT_BTN, variant="primary")
        yield Button("Reset", id=ids.RESET_BTN)
    yield Static(format_status(form.submit_states), id=ids.STATUS_BAR)
