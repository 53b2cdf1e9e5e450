"""Input parsing and pre-run checks for the repeat action."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from pydantic import ValidationError

from .errors import LoopSpecError
from .models import ActionType, LoopType, RepeatActionParams

if TYPE_CHECKING:
    from .models import ActionSpec, LoopSpec


def parse_params(raw: RepeatActionParams | dict[str, Any]) -> RepeatActionParams:
    """Parse a raw payload, reporting the first schema violation as a ``LoopSpecError``."""
    if isinstance(raw, RepeatActionParams):
        return raw

    try:
        return RepeatActionParams.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "params"
        raise LoopSpecError(field, first["msg"]) from e


def validate_loop(loop: LoopSpec) -> None:
    match loop.type:
        case LoopType.FOR:
            if loop.iterations is None:
                raise LoopSpecError("loop.iterations", f"is required when loop.type is {loop.type.value!r}")
        case LoopType.WHILE | LoopType.DO_WHILE:
            if loop.until is None:
                raise LoopSpecError("loop.until", f"is required when loop.type is {loop.type.value!r}")
        case _:
            assert_never(loop.type)


def validate_action(action: ActionSpec) -> None:
    match action.type:
        case ActionType.CLICK | ActionType.HOVER:
            pass
        case ActionType.FILL | ActionType.PRESS:
            if action.value is None:
                raise LoopSpecError("action.value", f"is required for {action.type.value!r} actions")
        case _:
            assert_never(action.type)


def validate_params(params: RepeatActionParams) -> None:
    """Reject specs that cannot run, before any element is touched."""
    validate_loop(params.loop)
    validate_action(params.action)
