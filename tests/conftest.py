"""Shared fakes and fixtures for Looper tests."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import asynccontextmanager
from typing import Any

import pytest

from looper.core.loop import ActionSpec, LoopTiming, NotFoundError, StopCondition


class FakeExecutor:
    """Records every action it is asked to run."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.calls: list[ActionSpec] = []
        self.fail_on_call = fail_on_call

    async def run(self, action: ActionSpec) -> None:
        if self.fail_on_call is not None and len(self.calls) + 1 == self.fail_on_call:
            raise NotFoundError(action.ref, action.element)
        self.calls.append(action)


class FakeEvaluator:
    """Returns scripted results; repeats the last one once the script runs out."""

    def __init__(self, results: Iterable[bool] = (False,), fail_on_call: int | None = None) -> None:
        self.results = list(results)
        self.calls = 0
        self.fail_on_call = fail_on_call

    async def evaluate(self, condition: StopCondition) -> bool:
        index = min(self.calls, len(self.results) - 1)
        self.calls += 1
        if self.calls == self.fail_on_call:
            raise NotFoundError(condition.ref, condition.element)
        return self.results[index]


class FakeScope:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @asynccontextmanager
    async def wait_for_completion(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class FakeSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FakeClock:
    """Monotonic clock that advances by ``step`` seconds on every read."""

    def __init__(self, step: float = 0.0) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current


UNTIL_VISIBLE = {
    "element": "Done banner",
    "ref": "#done",
    "assertion": {"assertionType": "toBeVisible"},
}

CLICK_NEXT = {"element": "Next button", "ref": "#next", "type": "click"}


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def scope() -> FakeScope:
    return FakeScope()


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()


@pytest.fixture
def timing() -> LoopTiming:
    return LoopTiming(for_delay_ms=300, condition_delay_ms=100, timeout_ms=30000)


@pytest.fixture
def make_executor() -> type[FakeExecutor]:
    return FakeExecutor


@pytest.fixture
def make_evaluator() -> type[FakeEvaluator]:
    return FakeEvaluator


@pytest.fixture
def make_clock() -> type[FakeClock]:
    return FakeClock


@pytest.fixture
def until_visible() -> dict[str, Any]:
    return dict(UNTIL_VISIBLE)


@pytest.fixture
def make_params():
    """Build a raw invocation payload; the action defaults to clicking a Next button."""

    def _make(loop: dict[str, Any], action: dict[str, Any] | None = None, **extra: Any) -> dict[str, Any]:
        return {"loop": loop, "action": action or dict(CLICK_NEXT), **extra}

    return _make
