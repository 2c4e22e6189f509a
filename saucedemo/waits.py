"""Explicit waits: block until the page reaches a state or the timeout elapses.

Every page object method that touches the DOM goes through a ``Waiter``. The
timeouts are read once from ``Settings`` when the session is opened.

Presence checks return a ``PresenceCheck`` instead of a bare boolean so that a
caller can tell an element that is legitimately absent from a check that broke
(strict mode violation, closed page, ...). The page objects collapse it to a
``bool`` in their ``is_*`` predicates.
"""

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config import Settings
from .exceptions import WaitTimeoutError
from .log import get_logger

logger = get_logger(__name__)


class Presence(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    CHECK_FAILED = "check_failed"


@dataclass(frozen=True)
class PresenceCheck:
    state: Presence
    reason: str = ""

    @classmethod
    def present(cls) -> "PresenceCheck":
        return cls(Presence.PRESENT)

    @classmethod
    def absent(cls, reason: str = "") -> "PresenceCheck":
        return cls(Presence.ABSENT, reason)

    @classmethod
    def failed(cls, reason: str) -> "PresenceCheck":
        return cls(Presence.CHECK_FAILED, reason)

    def __bool__(self) -> bool:
        return self.state is Presence.PRESENT


class Waiter:
    """Poll-until-condition helpers bound to the configured timeouts"""

    def __init__(self, explicit_wait: float, implicit_wait: float = 0.0, poll_interval: float = 0.1):
        self.explicit_wait = explicit_wait
        self.implicit_wait = implicit_wait
        self.poll_interval = poll_interval

    @classmethod
    def from_settings(cls, settings: Settings) -> "Waiter":
        return cls(explicit_wait=settings.explicit_wait, implicit_wait=settings.implicit_wait)

    @property
    def timeout_ms(self) -> float:
        return self.explicit_wait * 1000

    async def visible(self, target: Locator, description: str = "") -> Locator:
        """Wait until the target is attached and visible"""
        what = description or str(target)
        logger.debug("wait.visible", target=what)
        try:
            await target.wait_for(state="visible", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise WaitTimeoutError(
                f"Expected {what} to be visible within {self.explicit_wait}s"
            ) from e
        return target

    async def all_visible(self, target: Locator, description: str = "") -> Locator:
        """Wait until the target matches at least one element and every match is visible"""
        what = description or str(target)

        async def every_match_visible() -> bool:
            elements = await target.all()
            if not elements:
                return False
            for element in elements:
                if not await element.is_visible():
                    return False
            return True

        logger.debug("wait.all_visible", target=what)
        await self.until(every_match_visible, f"all of {what} to be visible")
        return target

    async def invisible(self, target: Locator, description: str = "") -> None:
        """Wait until the target is detached or hidden"""
        what = description or str(target)
        logger.debug("wait.invisible", target=what)
        try:
            await target.wait_for(state="hidden", timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise WaitTimeoutError(
                f"Expected {what} to disappear within {self.explicit_wait}s"
            ) from e

    async def until(self, condition: Callable[[], Awaitable[Any]], description: str) -> Any:
        """Poll an async predicate until it returns a truthy value"""
        deadline = time.monotonic() + self.explicit_wait
        while True:
            result = await condition()
            if result:
                return result
            if time.monotonic() >= deadline:
                raise WaitTimeoutError(
                    f"Timed out after {self.explicit_wait}s waiting for {description}"
                )
            await asyncio.sleep(self.poll_interval)

    async def probe(self, target: Locator, timeout: Optional[float] = None) -> PresenceCheck:
        """Check whether the target becomes visible within the implicit wait"""
        seconds = self.implicit_wait if timeout is None else timeout
        try:
            # Playwright treats a zero timeout as "wait forever"
            if seconds <= 0:
                if await target.is_visible():
                    return PresenceCheck.present()
                return PresenceCheck.absent(f"{target} is not visible")
            await target.wait_for(state="visible", timeout=seconds * 1000)
            return PresenceCheck.present()
        except PlaywrightTimeoutError:
            return PresenceCheck.absent(f"{target} not visible within {seconds}s")
        except PlaywrightError as e:
            logger.warning("wait.probe_failed", target=str(target), error=str(e))
            return PresenceCheck.failed(str(e))
