"""The ``repeat_action`` browser tool."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from looper.core.config.main import LooperConfig
from looper.core.loop import (
    LoopTiming,
    PageActionExecutor,
    PageConditionEvaluator,
    RepeatActionParams,
    repeat_action,
)

if TYPE_CHECKING:
    from looper.core.tab import TabSession


class ToolSchema(BaseModel):
    """Description of a tool as exposed to the host."""

    name: str
    title: str
    description: str
    input_schema: dict[str, Any]
    read_only: bool = False


REPEAT_ACTION_TOOL = ToolSchema(
    name="repeat_action",
    title="Repeat Action",
    description="Repeats a user action (click, hover, fill, press) using for / while / do-while semantics",
    input_schema=RepeatActionParams.model_json_schema(by_alias=True),
    read_only=True,
)


async def handle(tab: TabSession, raw_params: dict[str, Any], config: LooperConfig | None = None) -> str:
    """Run ``repeat_action`` on the tab and return the report as JSON text."""
    config = config or LooperConfig.load_or_default()
    report = await repeat_action(
        raw_params,
        PageActionExecutor(tab.page),
        PageConditionEvaluator(tab.page),
        tab,
        timing=LoopTiming.from_config(config.loop),
        default_max_iterations=config.loop.max_iterations,
        verbose=config.verbose,
    )
    return report.to_json()
