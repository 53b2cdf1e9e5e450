"""Loop controller driving for / while / do-while iteration."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Self, TypeAlias, assert_never

from rich.console import Console

from .errors import LoopSpecError
from .models import DEFAULT_MAX_ITERATIONS, ELEMENT_ATTACHED_TIMEOUT_MS, LoopType
from .recorder import EvidenceRecorder

if TYPE_CHECKING:
    from looper.core.config.main import LoopConfig

    from .collaborators import ActionExecutor, ConditionEvaluator
    from .models import ActionSpec, IterationRecord, Limits, LoopSpec, StopCondition


console = Console()

SleepFunc: TypeAlias = Callable[[float], Awaitable[object]]
ClockFunc: TypeAlias = Callable[[], float]


class StopReason(StrEnum):
    COMPLETED = "completed"
    CONDITION_MET = "condition met"
    MAX_ITERATIONS = "max iterations reached"
    TIMEOUT = "timeout reached"


@dataclass(frozen=True)
class LoopTiming:
    """Delays and safety timeout of a loop, in milliseconds."""

    for_delay_ms: int = 300
    condition_delay_ms: int = 100
    timeout_ms: int = ELEMENT_ATTACHED_TIMEOUT_MS

    @classmethod
    def from_config(cls, config: LoopConfig) -> Self:
        return cls(
            for_delay_ms=config.for_delay_ms,
            condition_delay_ms=config.condition_delay_ms,
            timeout_ms=config.timeout_ms,
        )


@dataclass(frozen=True)
class LoopOutcome:
    iterations: int
    evidence: tuple[IterationRecord, ...]
    stop_reason: StopReason


class LoopController:
    """Runs one action repeatedly under a single loop discipline.

    Iterations are strictly sequential. Reaching the iteration cap or the
    timeout ends the loop normally; errors from the executor or evaluator
    abort it and propagate unchanged.
    """

    def __init__(
        self,
        executor: ActionExecutor,
        evaluator: ConditionEvaluator,
        timing: LoopTiming | None = None,
        *,
        sleep: SleepFunc = asyncio.sleep,
        clock: ClockFunc = time.monotonic,
        verbose: bool = False,
    ) -> None:
        self.executor = executor
        self.evaluator = evaluator
        self.timing = timing or LoopTiming()
        self._sleep = sleep
        self._clock = clock
        self.verbose = verbose

    async def run(self, loop: LoopSpec, action: ActionSpec, limits: Limits | None = None) -> LoopOutcome:
        max_iterations = (limits and limits.max_iterations) or DEFAULT_MAX_ITERATIONS
        recorder = EvidenceRecorder(loop.type)

        match loop.type:
            case LoopType.FOR:
                if loop.iterations is None:
                    raise LoopSpecError("loop.iterations", "is required when loop.type is 'for'")
                reason = await self._run_for(loop.iterations, action, recorder)
            case LoopType.WHILE:
                reason = await self._run_while(self._until(loop), action, max_iterations, recorder)
            case LoopType.DO_WHILE:
                reason = await self._run_do_while(self._until(loop), action, max_iterations, recorder)
            case _:
                assert_never(loop.type)

        if self.verbose:
            console.print(f"🏁 {loop.type.value} loop stopped after {len(recorder)} iteration(s): {reason.value}")
        return LoopOutcome(iterations=len(recorder), evidence=recorder.evidence, stop_reason=reason)

    @staticmethod
    def _until(loop: LoopSpec) -> StopCondition:
        if loop.until is None:
            raise LoopSpecError("loop.until", f"is required when loop.type is {loop.type.value!r}")
        return loop.until

    async def _run_for(self, iterations: int, action: ActionSpec, recorder: EvidenceRecorder) -> StopReason:
        for _ in range(iterations):
            await self._perform(action, recorder, self.timing.for_delay_ms)
        return StopReason.COMPLETED

    async def _run_while(
        self,
        until: StopCondition,
        action: ActionSpec,
        max_iterations: int,
        recorder: EvidenceRecorder,
    ) -> StopReason:
        start = self._clock()
        while True:
            if len(recorder) >= max_iterations:
                return StopReason.MAX_ITERATIONS
            if self._timed_out(start):
                return StopReason.TIMEOUT
            if await self.evaluator.evaluate(until):
                return StopReason.CONDITION_MET
            await self._perform(action, recorder, self.timing.condition_delay_ms)

    async def _run_do_while(
        self,
        until: StopCondition,
        action: ActionSpec,
        max_iterations: int,
        recorder: EvidenceRecorder,
    ) -> StopReason:
        start = self._clock()
        while True:
            await self._perform(action, recorder, self.timing.condition_delay_ms)
            if await self.evaluator.evaluate(until):
                return StopReason.CONDITION_MET
            if len(recorder) >= max_iterations:
                return StopReason.MAX_ITERATIONS
            if self._timed_out(start):
                return StopReason.TIMEOUT

    async def _perform(self, action: ActionSpec, recorder: EvidenceRecorder, delay_ms: int) -> None:
        await self.executor.run(action)
        entry = recorder.append(action)
        if self.verbose:
            console.print(f"🔁 {entry.message}")
        await self._sleep(delay_ms / 1000)

    def _timed_out(self, start: float) -> bool:
        return (self._clock() - start) * 1000 > self.timing.timeout_ms
