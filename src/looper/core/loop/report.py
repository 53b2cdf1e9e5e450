"""Verdict and report construction."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from .models import CheckResult, CheckStatus, LoopType, Report, Summary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import ActionSpec, IterationRecord, LoopSpec


def expected_outcome(loop: LoopSpec) -> str:
    match loop.type:
        case LoopType.FOR:
            return f"{loop.iterations} iterations"
        case LoopType.WHILE | LoopType.DO_WHILE:
            return "condition met or maxIterations reached"
        case _:
            assert_never(loop.type)


def build_report(
    iteration_count: int,
    loop: LoopSpec,
    action: ActionSpec,
    evidence: Iterable[IterationRecord],
) -> Report:
    """Build the final report.

    A run passes when at least one iteration was performed, whatever the loop
    type and whether or not its stop condition was ever met.
    """
    status = CheckStatus.PASS if iteration_count > 0 else CheckStatus.FAIL
    passed = 1 if status is CheckStatus.PASS else 0

    return Report(
        action=action,
        loop=loop,
        summary=Summary(
            total=iteration_count,
            passed=passed,
            failed=1 - passed,
            status=status,
            evidence=tuple(evidence),
        ),
        checks=(
            CheckResult(
                operator=loop.type,
                expected=expected_outcome(loop),
                actual=iteration_count,
                result=status,
            ),
        ),
    )
