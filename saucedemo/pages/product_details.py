from typing import TYPE_CHECKING

from ..exceptions import ElementNotFoundError
from ..locators import ProductDetailsLocators as L
from ..log import get_logger
from ..models import ProductRecord
from .base import BasePage, Screen
from .catalog import ProductCatalogPage

if TYPE_CHECKING:
    from .checkout_overview import CheckoutOverviewPage

logger = get_logger(__name__)


class ProductDetailsPage(BasePage):
    screen = Screen.PRODUCT_DETAILS
    markers = (L.BACK_TO_PRODUCTS_BUTTON,)

    async def get_product_name(self) -> str:
        return await self.read_text(L.NAME)

    async def get_product_description(self) -> str:
        return await self.read_text(L.DESCRIPTION)

    async def get_product_price(self) -> str:
        return await self.read_text(L.PRICE)

    async def get_product_details(self) -> ProductRecord:
        return ProductRecord(
            name=await self.get_product_name(),
            description=await self.get_product_description(),
            price=await self.get_product_price(),
        )

    async def _click_cart_button(self, locator, name: str) -> bool:
        """Click an add/remove button; a hidden one is skipped, a missing one raises"""
        button = self.find(locator)
        if not await button.count():
            raise ElementNotFoundError(f"{name} button is not on the product details page")
        if not await button.is_visible():
            logger.warning("details.button_hidden", button=name)
            return False
        await button.click()
        return True

    async def click_add_to_cart_button(self):
        if await self._click_cart_button(L.ADD_TO_CART_BUTTON, "add-to-cart"):
            self.session.record("cart_add")

    async def click_remove_button(self):
        if await self._click_cart_button(L.REMOVE_BUTTON, "remove"):
            self.session.record("cart_remove")

    async def is_add_to_cart_button_displayed(self) -> bool:
        return bool(await self.waits.probe(self.find(L.ADD_TO_CART_BUTTON)))

    async def is_remove_button_displayed(self) -> bool:
        return bool(await self.waits.probe(self.find(L.REMOVE_BUTTON)))

    async def click_back_to_products(self) -> ProductCatalogPage:
        button = await self.waits.visible(self.find(L.BACK_TO_PRODUCTS_BUTTON), "back to products button")
        await button.click()
        self.session.record("navigate", screen=Screen.PRODUCT_CATALOG.value)
        return ProductCatalogPage(self.session)

    async def navigate_back_to_checkout_overview(self) -> "CheckoutOverviewPage":
        """Browser back to the overview this page was opened from"""
        from .checkout_overview import CheckoutOverviewPage

        await self.page.go_back()
        self.session.record("back", screen=Screen.CHECKOUT_OVERVIEW.value)
        return CheckoutOverviewPage(self.session)

    async def is_on_product_details_page(self) -> bool:
        return bool(await self.check_on_page())
