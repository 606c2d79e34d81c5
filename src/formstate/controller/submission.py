"""SubmissionController: idle/loading/success/error lifecycle of one form submit."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from formstate.config import SubmitPolicy
from formstate.model import SubmissionStatus, SubmitStates

log = logging.getLogger(__name__)

SubmitCallback = Callable[[Mapping[str, Any]], Awaitable[None]]


class SubmissionController:
    """Drives a caller-supplied async submit callback through the status machine.

    ``begin()`` moves to LOADING synchronously; ``run()`` awaits the callback
    and settles on SUCCESS or ERROR. Exceptions raised by the callback are
    logged and kept as the error payload, never re-raised.

    Re-entrant submits follow the SubmitPolicy. IGNORE drops a submit that
    arrives while a callback is still running. RACE lets every submit run, so
    whichever settles last decides the final status.
    """

    def __init__(
        self,
        callback: SubmitCallback,
        policy: SubmitPolicy = SubmitPolicy.IGNORE,
        on_transition: Callable[[], None] | None = None,
    ) -> None:
        self._callback = callback
        self._policy = policy
        self._on_transition = on_transition
        self._state = SubmitStates(SubmissionStatus.IDLE)
        self._submissions = 0
        self._in_flight = 0
        self._closed = False
        # Scheduled tasks are referenced until done so they are not collected mid-run
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> SubmitStates:
        return self._state

    @property
    def status(self) -> SubmissionStatus:
        return self._state.status

    @property
    def in_flight(self) -> int:
        """Number of submissions whose callback has not settled yet."""
        return self._in_flight

    @property
    def tasks(self) -> frozenset[asyncio.Task[None]]:
        """Tasks started by schedule() that have not finished."""
        return frozenset(self._tasks)

    def begin(self) -> int | None:
        """Enter LOADING for a new submission.

        Under IGNORE a submit is dropped while any callback is still running,
        even if reset_status() already moved the status away from LOADING.

        Returns:
            Submission number to pass to run(), or None if the submit is ignored
        """
        if self._closed:
            log.debug("Submit ignored: controller closed")
            return None
        if self._policy is SubmitPolicy.IGNORE and self._in_flight > 0:
            log.debug(f"Submit ignored: submission #{self._submissions} still running")
            return None
        self._submissions += 1
        self._in_flight += 1
        log.debug(f"Submission #{self._submissions} started")
        self._transition(SubmitStates(SubmissionStatus.LOADING))
        return self._submissions

    async def run(self, submission: int, fields: Mapping[str, Any]) -> None:
        """Await the callback for a submission started with begin()."""
        try:
            await self._callback(fields)
        except Exception as e:
            self._in_flight -= 1
            log.warning(f"Submission #{submission} failed: {e!r}")
            self._settle(submission, SubmitStates(SubmissionStatus.ERROR, error=e))
        except BaseException:
            self._in_flight -= 1
            raise
        else:
            self._in_flight -= 1
            self._settle(submission, SubmitStates(SubmissionStatus.SUCCESS))

    async def submit(self, fields: Mapping[str, Any]) -> bool:
        """Begin and run a submission inline.

        Returns:
            False if the submit was ignored
        """
        submission = self.begin()
        if submission is None:
            return False
        await self.run(submission, fields)
        return True

    def schedule(self, fields: Mapping[str, Any]) -> asyncio.Task[None] | None:
        """Begin a submission and run its callback as a task on the running loop.

        The controller keeps a reference to the task until it finishes, so
        callers may drop the returned task.
        """
        loop = asyncio.get_running_loop()
        submission = self.begin()
        if submission is None:
            return None
        task = loop.create_task(self.run(submission, fields), name=f"form-submit-{submission}")
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def reset_status(self) -> None:
        """Return to IDLE. An in-flight submission still settles afterwards."""
        if self._state.status is SubmissionStatus.IDLE:
            return
        self._transition(SubmitStates(SubmissionStatus.IDLE))

    def close(self) -> None:
        """Stop accepting submits and discard results that settle later."""
        self._closed = True

    def _settle(self, submission: int, state: SubmitStates) -> None:
        if self._closed:
            log.debug(f"Submission #{submission} settled after close, result discarded")
            return
        log.debug(f"Submission #{submission} settled: {state.status.value}")
        self._transition(state)

    def _transition(self, state: SubmitStates) -> None:
        self._state = state
        if self._on_transition is None:
            return
        try:
            self._on_transition()
        except Exception:
            log.exception(f"Transition callback failed on {state.status.value}")
