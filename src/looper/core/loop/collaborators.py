"""Collaborators that perform actions and evaluate stop conditions against a page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, assert_never

from playwright.async_api import Error as PlaywrightError

from .errors import ActionError, LoopSpecError, NotFoundError
from .models import ActionType, AssertionType

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page

    from .models import ActionSpec, StopCondition


class ActionExecutor(Protocol):
    async def run(self, action: ActionSpec) -> None: ...


class ConditionEvaluator(Protocol):
    async def evaluate(self, condition: StopCondition) -> bool: ...


def _require_ref(ref: str, element: str) -> str:
    if not ref.strip():
        raise NotFoundError(ref, element)
    return ref


class PageActionExecutor:
    """Performs click / hover / fill / press on elements of a Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page

    async def locate(self, ref: str, element: str = "") -> Locator:
        locator = self.page.locator(_require_ref(ref, element))
        try:
            count = await locator.count()
        except PlaywrightError as e:
            raise NotFoundError(ref, element, e.message) from e
        if count == 0:
            raise NotFoundError(ref, element)
        return locator

    async def run(self, action: ActionSpec) -> None:
        if action.type in (ActionType.FILL, ActionType.PRESS) and action.value is None:
            raise LoopSpecError("action.value", f"is required for {action.type.value!r} actions")

        locator = await self.locate(action.ref, action.element)
        try:
            match action.type:
                case ActionType.CLICK:
                    await locator.click()
                case ActionType.HOVER:
                    await locator.hover()
                case ActionType.FILL:
                    await locator.fill(action.value)
                case ActionType.PRESS:
                    await locator.press(action.value)
                case _:
                    assert_never(action.type)
        except PlaywrightError as e:
            raise ActionError(action.type.value, action.ref, e.message) from e


class PageConditionEvaluator:
    """Evaluates element state assertions on a Playwright page.

    A missing element is not an error: visibility checks report it as hidden,
    enabled/disabled checks report ``False``.
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    def locate(self, ref: str, element: str = "") -> Locator:
        return self.page.locator(_require_ref(ref, element))

    async def evaluate(self, condition: StopCondition) -> bool:
        locator = self.locate(condition.ref, condition.element)
        try:
            result = await self._check(locator, condition.assertion.assertion_type)
        except PlaywrightError as e:
            raise NotFoundError(condition.ref, condition.element, e.message) from e
        return not result if condition.negate else result

    async def _check(self, locator: Locator, assertion_type: AssertionType) -> bool:
        match assertion_type:
            case AssertionType.TO_BE_VISIBLE:
                return await locator.is_visible()
            case AssertionType.TO_BE_HIDDEN:
                return await locator.is_hidden()
            case AssertionType.TO_BE_ENABLED:
                return await locator.count() > 0 and await locator.is_enabled()
            case AssertionType.TO_BE_DISABLED:
                return await locator.count() > 0 and await locator.is_disabled()
            case _:
                assert_never(assertion_type)
