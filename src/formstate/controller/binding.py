"""BindingFactory: per-field descriptors a UI binding layer attaches to inputs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from formstate.model import FieldStore, FieldValue

EventHandler = Callable[[Any], None]


@dataclass(frozen=True)
class FieldBinding:
    """Everything an input element needs to display and mutate one field."""

    name: str
    value: FieldValue
    on_change: EventHandler
    on_blur: EventHandler
    on_focus: EventHandler


class BindingFactory:
    """Builds FieldBinding descriptors from the current store state.

    The same three handlers serve every field; they dispatch on the field
    name carried by the event. Bindings are rebuilt on every call so the
    value is never stale.
    """

    def __init__(
        self,
        store: FieldStore,
        on_change: EventHandler,
        on_blur: EventHandler,
        on_focus: EventHandler,
    ) -> None:
        self._store = store
        self._on_change = on_change
        self._on_blur = on_blur
        self._on_focus = on_focus

    def control(self, name: str) -> FieldBinding:
        return FieldBinding(
            name=name,
            value=self._store.get_one(name),
            on_change=self._on_change,
            on_blur=self._on_blur,
            on_focus=self._on_focus,
        )
