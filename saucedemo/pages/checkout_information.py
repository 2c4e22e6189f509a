from typing import TYPE_CHECKING

from ..locators import CheckoutYourInformationLocators as L
from ..log import get_logger
from .base import BasePage, Screen
from .checkout_overview import CheckoutOverviewPage

if TYPE_CHECKING:
    from .cart import CartPage

logger = get_logger(__name__)


class CheckoutYourInformationPage(BasePage):
    screen = Screen.CHECKOUT_INFORMATION
    markers = (L.FIRST_NAME,)

    async def enter_checkout_information(self, first_name: str, last_name: str, postal_code: str):
        """Fill the three fields without submitting the form"""
        await self.waits.visible(self.find(L.FIRST_NAME), "first name field")
        await self.find(L.FIRST_NAME).fill(first_name)
        await self.find(L.LAST_NAME).fill(last_name)
        await self.find(L.POSTAL_CODE).fill(postal_code)
        logger.info("checkout.information_entered", first_name=first_name, last_name=last_name, postal_code=postal_code)

    async def click_continue_button(self) -> CheckoutOverviewPage:
        button = await self.waits.visible(self.find(L.CONTINUE_BUTTON), "continue button")
        await button.click()
        self.session.record("navigate", screen=Screen.CHECKOUT_OVERVIEW.value)
        return CheckoutOverviewPage(self.session)

    async def click_cancel_button(self) -> "CartPage":
        from .cart import CartPage

        button = await self.waits.visible(self.find(L.CANCEL_BUTTON), "cancel button")
        await button.click()
        self.session.record("navigate", screen=Screen.CART.value)
        return CartPage(self.session)

    async def get_error_message(self) -> str:
        return await self.read_text(L.ERROR_MESSAGE)

    async def is_on_checkout_your_information_page(self) -> bool:
        return bool(await self.check_on_page())
