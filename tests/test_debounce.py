"""Tests for the debounced forward-pass scheduler."""

from __future__ import annotations

from mnist_visualizer.services.debounce import Debouncer


class _DummyRoot:
    """Minimal stand-in for tk root after/cancel scheduling APIs."""

    def __init__(self) -> None:
        self.jobs: dict[str, object] = {}
        self.cancelled: list[str] = []
        self.delays: list[int] = []
        self._next = 0

    def after(self, delay_ms: int, fn):  # noqa: ANN001 - callback type not important for this unit test
        self._next += 1
        job = f"job-{self._next}"
        self.jobs[job] = fn
        self.delays.append(delay_ms)
        return job

    def after_cancel(self, job: str) -> None:
        self.cancelled.append(job)
        self.jobs.pop(job, None)

    def fire_all(self) -> None:
        jobs = list(self.jobs.values())
        self.jobs.clear()
        for fn in jobs:
            fn()


def test_trigger_schedules_after_delay() -> None:
    root = _DummyRoot()
    calls: list[int] = []
    debouncer = Debouncer(root, 50, lambda: calls.append(1))

    debouncer.trigger()

    assert root.delays == [50]
    assert debouncer.pending
    assert calls == []


def test_rapid_triggers_collapse_into_one_call() -> None:
    root = _DummyRoot()
    calls: list[int] = []
    debouncer = Debouncer(root, 50, lambda: calls.append(1))

    debouncer.trigger()
    debouncer.trigger()
    debouncer.trigger()

    # Each new stroke cancels the previous pending job.
    assert root.cancelled == ["job-1", "job-2"]
    assert len(root.jobs) == 1

    root.fire_all()
    assert calls == [1]
    assert not debouncer.pending


def test_cancel_drops_pending_call() -> None:
    root = _DummyRoot()
    calls: list[int] = []
    debouncer = Debouncer(root, 50, lambda: calls.append(1))

    debouncer.trigger()
    debouncer.cancel()
    root.fire_all()

    assert calls == []
    assert not debouncer.pending
    # Cancelling twice is harmless.
    debouncer.cancel()
    assert root.cancelled == ["job-1"]
