"""FormController: the single object a UI layer binds to.

Composes a FieldStore, a FlagTracker, a SubmissionController and a
BindingFactory, and groups their surface the way a form needs it:

    form = FormController({"email": "", "age": 18}, on_submit=save)

    form.field_states.fields["email"]      # current values
    form.field_states.is_dirty["email"]    # interaction flags
    form.field_handlers.handle_change(FieldEvent("email", "a@b.c"))
    form.controllers.set_many({"age": 21}, make_dirty=True)
    form.control("email")                  # FieldBinding for one input
    form.handle_submit(event)              # -> asyncio.Task or None
    form.submit_states.is_loading

Observers register with ``subscribe()`` and are called once per observable
state transition. A batch write is one transition; a write that changes
nothing is none.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from formstate.config import FormConfig
from formstate.controller.binding import BindingFactory, FieldBinding
from formstate.controller.submission import SubmissionController, SubmitCallback
from formstate.model import (
    FieldStore,
    FieldValue,
    FlagTracker,
    SubmitStates,
    event_field_name,
    event_field_value,
)

log = logging.getLogger(__name__)

Listener = Callable[["FormController"], None]


@dataclass(frozen=True)
class FieldStates:
    """Read-only snapshot of values and interaction flags."""

    fields: Mapping[str, FieldValue]
    is_blurred: Mapping[str, bool]
    is_touched: Mapping[str, bool]
    is_dirty: Mapping[str, bool]


@dataclass(frozen=True)
class FieldHandlers:
    """The three input-event consumers."""

    handle_change: Callable[[Any], None]
    handle_blur: Callable[[Any], None]
    handle_focus: Callable[[Any], None]


@dataclass(frozen=True)
class Controllers:
    """Imperative accessors."""

    set_one: Callable[..., None]
    get_one: Callable[[str], FieldValue]
    set_many: Callable[..., None]
    get_many: Callable[..., dict[str, FieldValue]]


class FormController:
    """Form state and submission lifecycle for a fixed set of fields."""

    def __init__(
        self,
        default_values: Mapping[str, FieldValue],
        on_submit: SubmitCallback,
        config: FormConfig | None = None,
    ) -> None:
        self.config = config or FormConfig()
        self._store = FieldStore(default_values)
        self._flags = FlagTracker(self._store.names)
        self._submission = SubmissionController(
            on_submit, self.config.submit_policy, on_transition=self._notify
        )
        self._listeners: list[Listener] = []

        # Bound once so every binding shares the same handler objects
        self._handlers = FieldHandlers(
            handle_change=self.handle_change,
            handle_blur=self.handle_blur,
            handle_focus=self.handle_focus,
        )
        self._controllers = Controllers(
            set_one=self.set_one,
            get_one=self.get_one,
            set_many=self.set_many,
            get_many=self.get_many,
        )
        self._bindings = BindingFactory(
            self._store,
            on_change=self._handlers.handle_change,
            on_blur=self._handlers.handle_blur,
            on_focus=self._handlers.handle_focus,
        )

    # -- Snapshots -----------------------------------------------------------

    @property
    def names(self) -> tuple[str, ...]:
        return self._store.names

    @property
    def default_values(self) -> Mapping[str, FieldValue]:
        return self._store.defaults

    @property
    def field_states(self) -> FieldStates:
        return FieldStates(
            fields=self._store.fields,
            is_blurred=self._flags.blurred,
            is_touched=self._flags.touched,
            is_dirty=self._flags.dirty,
        )

    @property
    def field_handlers(self) -> FieldHandlers:
        return self._handlers

    @property
    def controllers(self) -> Controllers:
        return self._controllers

    @property
    def submit_states(self) -> SubmitStates:
        return self._submission.state

    # -- Event handlers ------------------------------------------------------

    def handle_change(self, event: Any) -> None:
        """Store the event's value and mark the field dirty."""
        name = self._store.check_name(event_field_name(event))
        value = event_field_value(event)
        changed = self._store.set_one(name, value)
        flagged = self._flags.mark_dirty(name)
        if changed or flagged:
            self._notify()

    def handle_blur(self, event: Any) -> None:
        if self._flags.mark_blurred(event_field_name(event)):
            self._notify()

    def handle_focus(self, event: Any) -> None:
        if self._flags.mark_touched(event_field_name(event)):
            self._notify()

    # -- Accessors -----------------------------------------------------------

    def get_one(self, name: str) -> FieldValue:
        return self._store.get_one(name)

    def get_many(self, *names: str) -> dict[str, FieldValue]:
        return self._store.get_many(*names)

    def set_one(self, name: str, value: FieldValue, make_dirty: bool = False) -> None:
        """Write one field, optionally marking it dirty."""
        changed = self._store.set_one(name, value)
        flagged = make_dirty and self._flags.mark_dirty(name)
        if changed or flagged:
            self._notify()

    def set_many(self, values: Mapping[str, FieldValue], make_dirty: bool = False) -> None:
        """Merge several fields in one transition, optionally marking them dirty."""
        changed = self._store.set_many(values)
        flagged = make_dirty and self._flags.mark_many_dirty(values)
        if changed or flagged:
            self._notify()

    def control(self, name: str) -> FieldBinding:
        return self._bindings.control(name)

    def reset(
        self,
        values: Mapping[str, FieldValue] | None = None,
        clear_flags: bool | None = None,
    ) -> None:
        """Reset fields to the defaults merged with ``values``.

        Flags are kept unless ``clear_flags`` is true, or it is None and the
        config enables reset_clears_flags. Submission status is not touched.
        """
        if clear_flags is None:
            clear_flags = self.config.reset_clears_flags
        changed = self._store.reset(values)
        cleared = clear_flags and self._flags.clear()
        log.debug(f"Form reset (overrides={dict(values or {})}, clear_flags={clear_flags})")
        if changed or cleared:
            self._notify()

    # -- Submission ----------------------------------------------------------

    def handle_submit(self, event: Any = None) -> asyncio.Task[None] | None:
        """Cancel the submit event and run the submit callback as a task.

        The status is LOADING by the time this returns. Must be called from
        code running inside an event loop.

        Returns:
            The task running the callback, or None if the submit was ignored
        """
        _cancel_event(event)
        return self._submission.schedule(self._store.fields)

    async def submit(self, event: Any = None) -> bool:
        """Run a submission inline and wait for it to settle.

        Returns:
            False if the submit was ignored
        """
        _cancel_event(event)
        return await self._submission.submit(self._store.fields)

    def reset_status(self) -> None:
        self._submission.reset_status()

    def close(self) -> None:
        """Dispose the controller: later results and submits are discarded."""
        self._submission.close()
        self._listeners.clear()

    # -- Observers -----------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener after every state transition.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                log.exception(f"Form listener {listener!r} failed")


def _cancel_event(event: Any) -> None:
    """Suppress the default action and propagation of a submit event."""
    if event is None:
        return
    for method in ("prevent_default", "stop"):
        cancel = getattr(event, method, None)
        if callable(cancel):
            cancel()
