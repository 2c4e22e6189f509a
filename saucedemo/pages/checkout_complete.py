from ..locators import CheckoutCompleteLocators as L
from .base import BasePage, Screen
from .catalog import ProductCatalogPage


class CheckoutCompletePage(BasePage):
    screen = Screen.CHECKOUT_COMPLETE
    markers = (L.HEADER,)

    async def get_complete_header_text(self) -> str:
        return await self.read_text(L.HEADER)

    async def get_complete_message_text(self) -> str:
        return await self.read_text(L.TEXT)

    async def click_back_home_button(self) -> ProductCatalogPage:
        button = await self.waits.visible(self.find(L.BACK_HOME_BUTTON), "back home button")
        await button.click()
        self.session.record("navigate", screen=Screen.PRODUCT_CATALOG.value)
        return ProductCatalogPage(self.session)

    async def is_on_checkout_complete_page(self) -> bool:
        return bool(await self.check_on_page())
