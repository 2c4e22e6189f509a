"""
Swag Labs E2E Suite

Page objects over Playwright for driving the saucedemo storefront end to end.
"""

__version__ = "0.1.0"

from . import messages
from .browser_engine import BrowserEngine
from .config import Settings, get_settings
from .exceptions import StorefrontError
from .harness import capture_screenshot, ensure_directories, retry
from .locators import Locator
from .log import configure_logging, get_logger
from .models import ProductRecord
from .pages import LoginPage, PageObject, Screen, detect_screen
from .session import Session
from .test_data import TestDataProvider
from .waits import PresenceCheck, Waiter

__all__ = [
    "BrowserEngine",
    "Locator",
    "LoginPage",
    "PageObject",
    "PresenceCheck",
    "ProductRecord",
    "Screen",
    "Session",
    "Settings",
    "StorefrontError",
    "TestDataProvider",
    "Waiter",
    "capture_screenshot",
    "configure_logging",
    "detect_screen",
    "ensure_directories",
    "get_logger",
    "get_settings",
    "messages",
    "retry"
]
