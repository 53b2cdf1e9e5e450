"""Browser tools exposed to the host."""

from .repeat_action import REPEAT_ACTION_TOOL, ToolSchema, handle

TOOLS: dict[str, ToolSchema] = {REPEAT_ACTION_TOOL.name: REPEAT_ACTION_TOOL}

__all__ = ["REPEAT_ACTION_TOOL", "TOOLS", "ToolSchema", "handle"]
