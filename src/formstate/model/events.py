"""Plain event types consumed by the form handlers.

UI binding layers adapt their native events to these shapes before handing
them to the controller.
"""

from dataclasses import dataclass

from formstate.model.field_store import FieldValue


@dataclass(frozen=True)
class FieldEvent:
    """An input event for one field.

    ``value`` is only meaningful for change events; focus and blur events
    leave it as None.
    """

    name: str
    value: FieldValue | None = None


@dataclass
class SubmitEvent:
    """A submit trigger whose default action and propagation can be cancelled."""

    default_prevented: bool = False
    stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop(self) -> None:
        self.stopped = True


def event_field_name(event: object) -> str:
    """Return the field name an event refers to.

    Accepts a FieldEvent or any object shaped like ``event.target.name``.
    """
    if isinstance(event, FieldEvent):
        return event.name
    target = getattr(event, "target", None)
    name = getattr(target, "name", None)
    if not isinstance(name, str):
        raise TypeError(f"Cannot read a field name from {event!r}")
    return name


def event_field_value(event: object) -> FieldValue:
    """Return the value carried by a change event."""
    if isinstance(event, FieldEvent):
        if event.value is None:
            raise TypeError(f"Change event for {event.name!r} carries no value")
        return event.value
    target = getattr(event, "target", None)
    if target is None or not hasattr(target, "value"):
        raise TypeError(f"Cannot read a field value from {event!r}")
    return target.value
