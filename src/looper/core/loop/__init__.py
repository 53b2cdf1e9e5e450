"""Repeat an element action under for / while / do-while semantics."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .collaborators import ActionExecutor, ConditionEvaluator, PageActionExecutor, PageConditionEvaluator
from .controller import LoopController, LoopOutcome, LoopTiming, StopReason
from .errors import ActionError, LoopError, LoopSpecError, NotFoundError
from .models import (
    DEFAULT_MAX_ITERATIONS,
    ActionSpec,
    ActionType,
    AssertionType,
    CheckStatus,
    IterationRecord,
    Limits,
    LoopSpec,
    LoopType,
    RepeatActionParams,
    Report,
    StopCondition,
)
from .report import build_report
from .validation import parse_params, validate_params

if TYPE_CHECKING:
    from looper.core.tab import ExecutionScope


async def repeat_action(
    raw: RepeatActionParams | dict[str, Any],
    executor: ActionExecutor,
    evaluator: ConditionEvaluator,
    scope: ExecutionScope,
    *,
    timing: LoopTiming | None = None,
    default_max_iterations: int = DEFAULT_MAX_ITERATIONS,
    verbose: bool = False,
    **controller_kwargs: Any,
) -> Report:
    """Run one repeat action invocation and return its report.

    Invalid input raises ``LoopSpecError`` before any element is touched.
    Errors from the executor or evaluator abort the run and propagate.
    """
    params = parse_params(raw)
    validate_params(params)
    max_iterations = (params.limits and params.limits.max_iterations) or default_max_iterations
    limits = Limits(max_iterations=max_iterations)

    controller = LoopController(executor, evaluator, timing, verbose=verbose, **controller_kwargs)
    async with scope.wait_for_completion():
        outcome = await controller.run(params.loop, params.action, limits)

    return build_report(outcome.iterations, params.loop, params.action, outcome.evidence)


__all__ = [
    "ActionError",
    "ActionExecutor",
    "ActionSpec",
    "ActionType",
    "AssertionType",
    "CheckStatus",
    "ConditionEvaluator",
    "IterationRecord",
    "Limits",
    "LoopController",
    "LoopError",
    "LoopOutcome",
    "LoopSpec",
    "LoopSpecError",
    "LoopTiming",
    "LoopType",
    "NotFoundError",
    "PageActionExecutor",
    "PageConditionEvaluator",
    "RepeatActionParams",
    "Report",
    "StopCondition",
    "StopReason",
    "build_report",
    "parse_params",
    "repeat_action",
    "validate_params",
]
