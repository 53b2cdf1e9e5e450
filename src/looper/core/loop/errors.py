"""Errors raised by the repeat action loop."""

from __future__ import annotations


class LoopError(Exception):
    """Base class for all loop errors."""


class LoopSpecError(LoopError):
    """The loop or action specification is structurally invalid."""

    def __init__(self, field: str, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(f"repeat_action: {field!r} {constraint}")


class NotFoundError(LoopError):
    """An element reference could not be resolved."""

    def __init__(self, ref: str, element: str = "", reason: str = "") -> None:
        self.ref = ref
        self.element = element
        self.reason = reason
        target = f"{element} ({ref!r})" if element else repr(ref)
        message = f"Element {target} could not be resolved: {reason}" if reason else f"Element {target} not found"
        super().__init__(message)


class ActionError(LoopError):
    """Interacting with a resolved element failed."""

    def __init__(self, action: str, ref: str, reason: str) -> None:
        self.action = action
        self.ref = ref
        self.reason = reason
        super().__init__(f"{action} on {ref!r} failed: {reason}")
