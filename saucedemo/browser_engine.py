from playwright.async_api import async_playwright, Browser, Page, Playwright
from typing import Dict, Optional, Any

from .config import Settings, get_settings
from .exceptions import BrowserSetupError
from .log import get_logger
from .session import Session

logger = get_logger(__name__)


class BrowserEngine:
    """Launches the configured browser and hands out one Session per scenario"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.sessions: Dict[str, Session] = {}

    async def initialize(self):
        """Initialize Playwright and browser"""
        self.playwright = await async_playwright().start()
        launcher = getattr(self.playwright, self.settings.browser, None)
        if launcher is None:
            await self.playwright.stop()
            raise BrowserSetupError(f"Unsupported browser: {self.settings.browser}")

        args = []
        if self.settings.browser == "chromium":
            args = ['--no-sandbox', '--disable-setuid-sandbox']
        self.browser = await launcher.launch(headless=self.settings.headless, args=args)
        logger.info("browser.launched", browser=self.settings.browser, headless=self.settings.headless)

    async def open_session(self, session_id: str = "default") -> Session:
        """Get existing session or create a new browser context for it"""

        if session_id in self.sessions:
            return self.sessions[session_id]
        if self.browser is None:
            raise BrowserSetupError("BrowserEngine.initialize() must be awaited before opening a session")

        context = await self.browser.new_context(
            viewport={"width": self.settings.viewport_width, "height": self.settings.viewport_height},
            ignore_https_errors=True,
        )
        context.set_default_timeout(self.settings.explicit_wait * 1000)
        context.set_default_navigation_timeout(self.settings.explicit_wait * 1000)
        context.on("page", lambda page: self._attach_listeners(session_id, page))

        page = await context.new_page()
        session = Session(session_id, context, page, self.settings)
        self.sessions[session_id] = session
        logger.info("session.opened", session_id=session_id)
        return session

    def _attach_listeners(self, session_id: str, page: Page):
        """Route console output and uncaught page errors to the log"""
        page.on("console", lambda msg: logger.debug("page.console", session_id=session_id, text=msg.text))
        page.on("pageerror", lambda err: logger.warning("page.error", session_id=session_id, error=str(err)))

    def get_session(self, session_id: str = "default") -> Optional[Session]:
        return self.sessions.get(session_id)

    async def close_session(self, session_id: str = "default"):
        """Close the browser context of a session and forget it"""
        session = self.sessions.pop(session_id, None)
        if session is None:
            return
        await session.context.close()
        logger.info("session.closed", session_id=session_id, events=len(session.history))

    async def take_screenshot(self, session: Session) -> bytes:
        """Take a full page screenshot of the active tab"""
        return await session.page.screenshot(full_page=True)

    async def get_page_context(self, session: Session) -> Dict[str, Any]:
        """Describe the active tab for failure diagnostics"""
        return {
            "url": session.page.url,
            "title": await session.page.title(),
            "tabs": [page.url for page in session.context.pages],
        }

    async def cleanup(self):
        """Clean up browser resources"""
        for session_id in list(self.sessions):
            await self.close_session(session_id)
        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None
