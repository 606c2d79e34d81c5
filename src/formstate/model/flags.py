"""FlagTracker: per-field dirty, touched and blurred flags.

Flags only ever flip from False to True. Marking a flag that is already set
is a no-op and reports no change, so callers can skip notifying observers.
The only way back to False is an explicit ``clear()``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from formstate.model.errors import UnknownFieldError

DIRTY = "dirty"
TOUCHED = "touched"
BLURRED = "blurred"

FLAG_KINDS = (DIRTY, TOUCHED, BLURRED)


def _all_false(names: Iterable[str]) -> Mapping[str, bool]:
    return MappingProxyType({name: False for name in names})


class FlagTracker:
    """Three independent boolean maps over the same set of field names."""

    def __init__(self, names: Iterable[str]) -> None:
        self._names = tuple(names)
        self._flags: dict[str, Mapping[str, bool]] = {
            kind: _all_false(self._names) for kind in FLAG_KINDS
        }

    @property
    def dirty(self) -> Mapping[str, bool]:
        return self._flags[DIRTY]

    @property
    def touched(self) -> Mapping[str, bool]:
        return self._flags[TOUCHED]

    @property
    def blurred(self) -> Mapping[str, bool]:
        return self._flags[BLURRED]

    def mark_dirty(self, name: str) -> bool:
        return self._mark(DIRTY, [name])

    def mark_touched(self, name: str) -> bool:
        return self._mark(TOUCHED, [name])

    def mark_blurred(self, name: str) -> bool:
        return self._mark(BLURRED, [name])

    def mark_many_dirty(self, names: Iterable[str]) -> bool:
        """Set dirty for every name in one replacement of the dirty map."""
        return self._mark(DIRTY, list(names))

    def clear(self) -> bool:
        """Reset every flag to False.

        Returns:
            True if any flag was set before the call
        """
        was_set = any(any(flags.values()) for flags in self._flags.values())
        if was_set:
            self._flags = {kind: _all_false(self._names) for kind in FLAG_KINDS}
        return was_set

    def _mark(self, kind: str, names: list[str]) -> bool:
        current = self._flags[kind]
        for name in names:
            if name not in current:
                raise UnknownFieldError(name, self._names)
        pending = [name for name in names if not current[name]]
        if not pending:
            return False
        self._flags[kind] = MappingProxyType({**current, **dict.fromkeys(pending, True)})
        return True
