from typing import List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator as PlaywrightLocator

from ..exceptions import ElementNotFoundError
from ..locators import CartLocators as L
from ..log import get_logger
from ..models import ProductRecord
from ..waits import Presence
from .base import BasePage, Screen
from .catalog import ProductCatalogPage
from .checkout_information import CheckoutYourInformationPage
from .product_details import ProductDetailsPage

logger = get_logger(__name__)


class CartPage(BasePage):
    screen = Screen.CART
    markers = (L.CHECKOUT_BUTTON,)

    async def get_cart_items(self) -> List[PlaywrightLocator]:
        return await self._rows(L.ITEMS, wait=False)

    async def get_cart_item_by_name(self, product_name: str) -> Optional[PlaywrightLocator]:
        return await self._row_by_name(await self.get_cart_items(), L.ITEM_NAME, product_name)

    async def _require_item(self, product_name: str) -> PlaywrightLocator:
        item = await self.get_cart_item_by_name(product_name)
        if item is None:
            raise ElementNotFoundError(f"Product '{product_name}' not found in the cart")
        return item

    async def is_product_in_cart(self, product_name: str) -> bool:
        return await self.get_cart_item_by_name(product_name) is not None

    async def is_cart_empty(self) -> bool:
        check = await self.waits.probe(self.find(L.ITEMS).first)
        return check.state is Presence.ABSENT

    async def get_product_description(self, product_name: str) -> str:
        item = await self._require_item(product_name)
        return (await L.ITEM_DESCRIPTION.within(item).inner_text()).strip()

    async def get_product_price(self, product_name: str) -> str:
        item = await self._require_item(product_name)
        return (await L.ITEM_PRICE.within(item).inner_text()).strip()

    async def get_all_product_details(self) -> List[ProductRecord]:
        return [
            await self._product_record(item, L.ITEM_NAME, L.ITEM_DESCRIPTION, L.ITEM_PRICE)
            for item in await self.get_cart_items()
        ]

    async def remove_product_from_cart(self, product_name: str):
        item = await self.get_cart_item_by_name(product_name)
        if item is None:
            logger.warning("cart.product_missing", product=product_name, action="remove")
            return
        await L.ITEM_REMOVE_BUTTON.within(item).click()
        self.session.record("cart_remove", product=product_name)
        logger.info("cart.removed", product=product_name)

    async def is_remove_button_displayed(self) -> bool:
        try:
            for item in await self.get_cart_items():
                if await L.ITEM_REMOVE_BUTTON.within(item).is_visible():
                    return True
        except PlaywrightError as e:
            logger.warning("cart.remove_button_check_failed", error=str(e))
        return False

    async def click_continue_shopping_button(self) -> ProductCatalogPage:
        await self.find(L.CONTINUE_SHOPPING_BUTTON).click()
        self.session.record("navigate", screen=Screen.PRODUCT_CATALOG.value)
        return ProductCatalogPage(self.session)

    async def click_checkout_button(self) -> CheckoutYourInformationPage:
        await self.find(L.CHECKOUT_BUTTON).click()
        self.session.record("navigate", screen=Screen.CHECKOUT_INFORMATION.value)
        return CheckoutYourInformationPage(self.session)

    async def go_to_product_details_page(self, product_name: str) -> ProductDetailsPage:
        item = await self.get_cart_item_by_name(product_name)
        if item is None:
            raise ElementNotFoundError(f"Product '{product_name}' not found for navigation")
        await L.ITEM_NAME.within(item).click()
        self.session.record("navigate", screen=Screen.PRODUCT_DETAILS.value, product=product_name)
        return ProductDetailsPage(self.session)

    async def is_on_cart_page(self) -> bool:
        return bool(await self.check_on_page())
