from dataclasses import dataclass
from typing import Optional, Union

from ..locators import LoginLocators, ProductCatalogLocators
from ..log import get_logger
from .base import BasePage, Screen
from .catalog import ProductCatalogPage

logger = get_logger(__name__)


@dataclass
class LoginSucceeded:
    page: ProductCatalogPage


@dataclass
class LoginFailed:
    page: "LoginPage"
    message: str


LoginResult = Union[LoginSucceeded, LoginFailed]


class LoginPage(BasePage):
    screen = Screen.LOGIN
    markers = (LoginLocators.USERNAME, LoginLocators.LOGIN_BUTTON)

    async def login(self, username: str, password: str) -> ProductCatalogPage:
        """Fill the credentials and submit.

        The catalog page is returned whether or not the credentials were
        accepted; use ``submit_login`` to get the outcome.
        """
        logger.info("login.attempt", username=username)
        await self.waits.visible(self.find(LoginLocators.USERNAME), "username field")
        await self.find(LoginLocators.USERNAME).fill(username)
        await self.find(LoginLocators.PASSWORD).fill(password)
        await self.find(LoginLocators.LOGIN_BUTTON).click()
        self.session.record("login", username=username)
        return ProductCatalogPage(self.session)

    async def submit_login(self, username: str, password: str) -> LoginResult:
        """Log in and wait until either the catalog or an error message shows"""
        catalog = await self.login(username, password)
        sort_dropdown = self.find(ProductCatalogLocators.SORT_DROPDOWN)
        error = self.find(LoginLocators.ERROR_MESSAGE)

        async def outcome() -> Optional[str]:
            if await sort_dropdown.is_visible():
                return "catalog"
            if await error.is_visible():
                return "error"
            return None

        if await self.waits.until(outcome, "login to land on the catalog or show an error") == "catalog":
            logger.info("login.succeeded", username=username)
            return LoginSucceeded(catalog)

        message = await self.get_error_message()
        logger.info("login.rejected", username=username, message=message)
        return LoginFailed(self, message)

    async def get_error_message(self) -> str:
        return await self.read_text(LoginLocators.ERROR_MESSAGE)

    async def is_on_login_page(self) -> bool:
        return bool(await self.check_on_page())
