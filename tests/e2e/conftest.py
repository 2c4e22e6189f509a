"""Fixtures for the end-to-end scenarios against the live storefront.

Each scenario gets its own browser, context and login page. A failed scenario
leaves a full page screenshot under ``Settings.screenshot_path`` and logs the
state of the browser.

Usage:
    pytest tests/e2e --e2e
"""

import pytest
import pytest_asyncio
import structlog

from saucedemo.browser_engine import BrowserEngine
from saucedemo.config import get_settings
from saucedemo.harness import capture_screenshot, ensure_directories
from saucedemo.log import configure_logging, get_logger
from saucedemo.pages import LoginPage

logger = get_logger(__name__)


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can see failures"""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session")
def settings():
    settings = get_settings()
    configure_logging(settings)
    ensure_directories(settings)
    return settings


@pytest_asyncio.fixture
async def engine(settings):
    engine = BrowserEngine(settings)
    await engine.initialize()
    yield engine
    await engine.cleanup()


@pytest_asyncio.fixture
async def session(engine, request):
    """Browser context for one scenario; screenshot on failure"""
    structlog.contextvars.bind_contextvars(test=request.node.name)
    session = await engine.open_session(request.node.name)
    yield session

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        logger.error("scenario.failed", **await engine.get_page_context(session))
        await capture_screenshot(engine, session, request.node.name)
    structlog.contextvars.clear_contextvars()


@pytest_asyncio.fixture
async def login_page(session):
    return await LoginPage(session).go_to_login_page()
