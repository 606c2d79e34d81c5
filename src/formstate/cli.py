"""Command-line interface for the formstate demo."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formstate import __version__
from formstate.config import FormConfig, SubmitPolicy
from formstate.controller import SubmitCallback
from formstate.model import FieldValue, FormStateError

log = logging.getLogger(__name__)

DEFAULT_FIELDS: dict[str, FieldValue] = {
    "name": "",
    "email": "",
    "age": 18,
}


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    fields: dict[str, FieldValue] = field(default_factory=lambda: dict(DEFAULT_FIELDS))
    fail: bool = False
    delay: float = 1.0
    policy: SubmitPolicy = SubmitPolicy.IGNORE
    reset_clears_flags: bool = False
    log_level: str = "DEBUG"


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def parse_field_spec(spec: str) -> tuple[str, FieldValue]:
    """Parse NAME=VALUE into a field name and a default value.

    Integers and floats are recognised; anything else stays a string.
    """
    if "=" not in spec:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {spec!r}")
    name, raw = spec.split("=", 1)
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"Missing field name in {spec!r}")
    for convert in (int, float):
        try:
            return name, convert(raw)
        except ValueError:
            continue
    return name, raw


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="formstate-demo",
        description="Interactive demo of a form bound to a FormController.",
    )
    parser.add_argument(
        "--field",
        metavar="NAME=VALUE",
        action="append",
        type=parse_field_spec,
        default=[],
        help="Add a field with its default value (repeatable; replaces the built-in fields)",
    )
    parser.add_argument("--fail", action="store_true", help="Make every submission fail")
    parser.add_argument(
        "--delay", type=float, default=1.0, metavar="SECONDS", help="Simulated submit latency"
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in SubmitPolicy],
        default=SubmitPolicy.IGNORE.value,
        help="What to do with a submit while one is in flight",
    )
    parser.add_argument(
        "--reset-clears-flags", action="store_true", help="Clear interaction flags on reset"
    )
    parser.add_argument(
        "--log-level",
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level of the log file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments."""
    args = create_parser().parse_args(argv)
    parsed = ParsedArgs(
        fail=args.fail,
        delay=max(args.delay, 0.0),
        policy=SubmitPolicy(args.policy),
        reset_clears_flags=args.reset_clears_flags,
        log_level=args.log_level,
    )
    if args.field:
        parsed.fields = dict(args.field)
    return parsed


def make_submit_callback(delay: float, fail: bool) -> SubmitCallback:
    """Build the demo submit callback: wait, then succeed or raise."""

    async def on_submit(fields: Mapping[str, Any]) -> None:
        log.info(f"Submitting {dict(fields)}")
        await asyncio.sleep(delay)
        if fail:
            raise RuntimeError("Submission rejected by demo backend")

    return on_submit


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from formstate.app import FormDemoApp, configure_logging

    args = parse_args(argv)
    log_path = configure_logging(getattr(logging, args.log_level))
    log.debug(f"Logging to {log_path}")

    config = FormConfig(
        submit_policy=args.policy,
        reset_clears_flags=args.reset_clears_flags,
    )
    try:
        app = FormDemoApp(
            args.fields,
            make_submit_callback(args.delay, args.fail),
            config,
            title="formstate demo",
        )
    except FormStateError as e:
        print_error_box("Invalid form definition", str(e))
        sys.exit(1)

    app.run()

    states = app.form.field_states
    print(f"Status: {app.form.submit_states.status.value}")
    for name in app.form.names:
        marker = "*" if states.is_dirty[name] else " "
        print(f" {marker} {name} = {states.fields[name]!r}")


if __name__ == "__main__":
    main()
