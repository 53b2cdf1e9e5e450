"""Evidence recording for loop iterations."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from .models import IterationRecord, LoopType

if TYPE_CHECKING:
    from .models import ActionSpec


def iteration_message(iteration: int, loop_type: LoopType) -> str:
    match loop_type:
        case LoopType.FOR:
            return f"Performed for-loop iteration {iteration}"
        case LoopType.WHILE:
            return f"Performed while-loop iteration {iteration}"
        case LoopType.DO_WHILE:
            return f"Performed do-while iteration {iteration}"
        case _:
            assert_never(loop_type)


def record(iteration: int, action: ActionSpec, loop_type: LoopType) -> IterationRecord:
    return IterationRecord(iteration=iteration, action=action, message=iteration_message(iteration, loop_type))


class EvidenceRecorder:
    """Append-only log of completed iterations."""

    def __init__(self, loop_type: LoopType) -> None:
        self.loop_type = loop_type
        self._records: list[IterationRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def append(self, action: ActionSpec) -> IterationRecord:
        """Record the next completed iteration and return it."""
        entry = record(len(self._records) + 1, action, self.loop_type)
        self._records.append(entry)
        return entry

    @property
    def evidence(self) -> tuple[IterationRecord, ...]:
        return tuple(self._records)
