"""Data models for the repeat action loop."""

from __future__ import annotations

from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt
from pydantic.alias_generators import to_camel

DEFAULT_MAX_ITERATIONS = 20
ELEMENT_ATTACHED_TIMEOUT_MS = 30_000


class LoopType(StrEnum):
    FOR = "for"
    WHILE = "while"
    DO_WHILE = "do-while"


class ActionType(StrEnum):
    CLICK = "click"
    HOVER = "hover"
    FILL = "fill"
    PRESS = "press"


class AssertionType(StrEnum):
    TO_BE_VISIBLE = "toBeVisible"
    TO_BE_HIDDEN = "toBeHidden"
    TO_BE_ENABLED = "toBeEnabled"
    TO_BE_DISABLED = "toBeDisabled"


class CheckStatus(StrEnum):
    PASS = "pass"
    FAIL = "fail"


class WireModel(BaseModel):
    """Base for models exchanged with the host: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ElementRef(WireModel):
    """Reference to a page element."""

    element: str = ""  # human-readable description, used in messages only
    ref: str


class Assertion(WireModel):
    assertion_type: AssertionType


class StopCondition(ElementRef):
    """Predicate over an element's state; ``negate`` inverts the result."""

    assertion: Assertion
    negate: bool = False


class ActionSpec(ElementRef):
    type: ActionType = Field(validation_alias=AliasChoices("type", "actionType"))
    value: str | None = None


class LoopSpec(WireModel):
    type: LoopType
    iterations: NonNegativeInt | None = None
    until: StopCondition | None = None


class Limits(WireModel):
    max_iterations: PositiveInt | None = None  # falls back to the configured cap


class RepeatActionParams(WireModel):
    """Invocation payload of the repeat action."""

    loop: LoopSpec
    action: ActionSpec
    limits: Limits | None = None


class IterationRecord(WireModel):
    model_config = ConfigDict(frozen=True)

    iteration: PositiveInt
    action: ActionSpec
    message: str


class CheckResult(WireModel):
    model_config = ConfigDict(frozen=True)

    property: str = "action-execution"
    operator: LoopType
    expected: str
    actual: int
    result: CheckStatus


class Summary(WireModel):
    model_config = ConfigDict(frozen=True)

    total: int
    passed: int
    failed: int
    status: CheckStatus
    evidence: tuple[IterationRecord, ...]


class Report(WireModel):
    """Final verdict of a repeat action run."""

    model_config = ConfigDict(frozen=True)

    action: ActionSpec
    loop: LoopSpec
    summary: Summary
    checks: tuple[CheckResult, ...]

    @property
    def passed(self) -> bool:
        return self.summary.status is CheckStatus.PASS

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)
