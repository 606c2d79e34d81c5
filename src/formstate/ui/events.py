"""Form event handlers: adapt Textual messages into FormController events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from textual import events, on
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Static

from formstate.model import FieldEvent
from formstate.ui import ids
from formstate.ui.ids import css
from formstate.ui.widgets import FieldInput, coerce_input_value, format_flags, format_status

if TYPE_CHECKING:
    from formstate.controller import FormController

log = logging.getLogger(__name__)


class FormEventsMixin:
    """Mixin wiring FieldInput widgets and the form buttons to a FormController.

    The host must provide ``form`` and be a Textual message pump (an App,
    Screen or container widget) whose descendants include the FieldInputs.
    """

    form: FormController
    query_one: Callable
    query: Callable

    @on(Input.Changed, f".{ids.FIELD_CLASS}")
    def on_field_changed(self, event: Input.Changed) -> None:
        name = event.input.name
        if name is None:
            return
        value = coerce_input_value(event.value, self.form.default_values[name])
        self.form.field_handlers.handle_change(FieldEvent(name, value))

    @on(events.DescendantFocus)
    def on_field_focus(self, event: events.DescendantFocus) -> None:
        if isinstance(event.widget, FieldInput):
            self.form.field_handlers.handle_focus(FieldEvent(event.widget.field_name))

    @on(events.DescendantBlur)
    def on_field_blur(self, event: events.DescendantBlur) -> None:
        if isinstance(event.widget, FieldInput):
            self.form.field_handlers.handle_blur(FieldEvent(event.widget.field_name))

    @on(Input.Submitted, f".{ids.FIELD_CLASS}")
    def on_field_submitted(self, event: Input.Submitted) -> None:
        """Enter in any field submits the form."""
        self.form.handle_submit(event)

    @on(Button.Pressed, css(ids.SUBMIT_BTN))
    def on_submit_pressed(self, event: Button.Pressed) -> None:
        self.form.handle_submit(event)

    @on(Button.Pressed, css(ids.RESET_BTN))
    def on_reset_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.form.reset()
        self.form.reset_status()

    def sync_form_widgets(self, form: Any = None) -> None:
        """Reflect the controller state in the widgets.

        Suitable as a FormController listener.
        """
        states = self.form.field_states
        for field_input in self.query(FieldInput):
            field_input.show_value(states.fields[field_input.field_name])
        for name in self.form.names:
            try:
                flags = self.query_one(css(ids.flags_id(name)), Static)
            except NoMatches:
                continue
            flags.update(
                format_flags(states.is_dirty[name], states.is_touched[name], states.is_blurred[name])
            )

        submit = self.form.submit_states
        try:
            self.query_one(css(ids.SUBMIT_BTN), Button).disabled = submit.is_loading
        except NoMatches:
            log.debug("Submit button not found")
        try:
            self.query_one(css(ids.STATUS_BAR), Static).update(format_status(submit))
        except NoMatches:
            log.debug("Status bar not found")
