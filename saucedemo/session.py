from typing import Dict, Any, List, Optional
from datetime import datetime
import json

from playwright.async_api import BrowserContext, Page

from .config import Settings
from .waits import Waiter


class Session:
    """One browser context bound to one running scenario.

    Page objects hold the session rather than a raw page so that they always
    act on the active tab, including after ``switch_to_new_tab``.
    """

    def __init__(self, session_id: str, context: BrowserContext, page: Page, settings: Settings):
        self.id = session_id
        self.context = context
        self.page = page
        self.settings = settings
        self.waits = Waiter.from_settings(settings)
        self.origin_page: Optional[Page] = None
        self.created_at = datetime.now().isoformat()
        self.updated_at = self.created_at
        self.history: List[Dict[str, Any]] = []

    def record(self, event: str, **details: Any):
        """Append an entry to the session history"""
        self.history.append({
            "timestamp": datetime.now().isoformat(),
            "event": event,
            "url": self.page.url,
            **details
        })
        self.updated_at = datetime.now().isoformat()

    def get_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get session history, most recent last"""
        if limit:
            return self.history[-limit:]
        return list(self.history)

    def activate(self, page: Page):
        """Make another tab of this context the active one"""
        self.page = page
        self.record("activate_tab")

    async def reset(self):
        """Back to a logged-out login page with an empty cart, on the first tab"""
        pages = list(self.context.pages)
        if pages:
            for page in pages[1:]:
                await page.close()
            self.page = pages[0]
        else:
            self.page = await self.context.new_page()
        self.origin_page = None

        await self.context.clear_cookies()
        await self.page.goto(self.settings.base_url)
        # the cart lives in localStorage
        await self.page.evaluate("() => window.localStorage.clear()")
        await self.page.reload()
        self.record("reset")

    def summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "event_count": len(self.history),
            "current_url": self.page.url,
            "tab_count": len(self.context.pages),
        }

    def export(self) -> str:
        """Export summary and history as JSON"""
        return json.dumps({**self.summary(), "history": self.history}, indent=2, default=str)
