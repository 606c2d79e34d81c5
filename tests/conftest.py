"""Shared fixtures for formstate tests."""

import pytest

from formstate import FormController


class SubmitRecorder:
    """Async submit callback that records every payload it receives."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[dict] = []
        self.error = error

    async def __call__(self, fields) -> None:
        self.calls.append(dict(fields))
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def xdg_state(monkeypatch, tmp_path):
    """Keep log files written by the demo app inside the test tmpdir."""
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))


@pytest.fixture
def defaults():
    """Default values for a small signup form."""
    return {"name": "", "email": "", "age": 18}


@pytest.fixture
def recorder():
    """Submit callback that succeeds."""
    return SubmitRecorder()


@pytest.fixture
def failing_recorder():
    """Submit callback that raises."""
    return SubmitRecorder(error=RuntimeError("backend unavailable"))


@pytest.fixture
def form(defaults, recorder):
    """FormController over the signup defaults with a succeeding callback."""
    return FormController(defaults, recorder)


@pytest.fixture
def notifications(form):
    """List that receives one entry per form state transition."""
    seen = []
    form.subscribe(seen.append)
    return seen
