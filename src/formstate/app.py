"""Demo TUI application: one form bound to a FormController."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding

from formstate.config import FormConfig
from formstate.controller import FormController, SubmitCallback
from formstate.model import FieldValue
from formstate.ui import FormEventsMixin, compose_form

log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "formstate"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "formstate.log"


def configure_logging(level: int = logging.DEBUG) -> Path:
    """Send log records to a file; the terminal belongs to the TUI."""
    log_path = _get_log_path()
    logging.basicConfig(
        filename=str(log_path),
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return log_path


class FormDemoApp(FormEventsMixin, App):
    """TUI showing a form, its interaction flags and its submit status."""

    TITLE = "formstate demo"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+s", "submit", "Submit", show=True),
        Binding("ctrl+r", "reset", "Reset", show=True),
        Binding("escape", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        default_values: Mapping[str, FieldValue],
        on_submit: SubmitCallback,
        config: FormConfig | None = None,
        title: str = "Form",
        labels: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__()
        self.form = FormController(default_values, on_submit, config)
        self.form_title = title
        self.labels = dict(labels or {})
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield from compose_form(self.form, self.form_title, self.labels)

    def on_mount(self) -> None:
        self._unsubscribe = self.form.subscribe(self.sync_form_widgets)
        self.sync_form_widgets()
        log.info(f"Form mounted with fields: {', '.join(self.form.names)}")

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
        self.form.close()

    def action_submit(self) -> None:
        self.form.handle_submit()

    def action_reset(self) -> None:
        self.form.reset()
        self.form.reset_status()
