"""Helpers the pytest harness wraps scenarios with: retries, screenshots and output folders"""

import asyncio
import functools
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .browser_engine import BrowserEngine
from .config import Settings, get_settings
from .log import get_logger
from .pages.base import BasePage
from .session import Session

logger = get_logger(__name__)


def ensure_directories(settings: Optional[Settings] = None) -> List[Path]:
    """Create the output directories the suite writes to"""
    settings = settings or get_settings()
    directories = [Path(settings.screenshot_path)]
    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)
    return directories


async def capture_screenshot(
    engine: BrowserEngine,
    session: Session,
    name: str,
    directory: Optional[Union[str, Path]] = None,
) -> Path:
    """Write a full page screenshot of the active tab as <name>_<timestamp>.png"""
    directory = Path(directory or session.settings.screenshot_path)
    directory.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_name = re.sub(r"[^\w.-]+", "_", name).strip("_")
    path = directory / f"{safe_name}_{timestamp}.png"
    path.write_bytes(await engine.take_screenshot(session))

    logger.info("screenshot.saved", path=str(path), url=session.page.url)
    return path


def _session_in(kwargs: Dict[str, Any]) -> Optional[Session]:
    for value in kwargs.values():
        if isinstance(value, Session):
            return value
        if isinstance(value, BasePage):
            return value.session
    return None


def retry(times: Optional[int] = None, delay: float = 0.0):
    """Rerun an async scenario up to `times` more attempts after a failure.

    Before each rerun the session passed to the scenario (directly or through
    a page object argument) is reset to the login page. The last failure is
    re-raised.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            reruns = get_settings().retry_count if times is None else times
            attempt = 0
            while True:
                attempt += 1
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if attempt > reruns:
                        logger.error("scenario.failed", scenario=func.__name__, attempts=attempt, error=str(e))
                        raise

                    logger.warning(
                        "scenario.retrying",
                        scenario=func.__name__,
                        attempt=attempt,
                        reruns=reruns,
                        error=str(e),
                    )
                    session = _session_in(kwargs)
                    if session is not None:
                        await session.reset()
                    if delay:
                        await asyncio.sleep(delay)

        return wrapper

    return decorator
