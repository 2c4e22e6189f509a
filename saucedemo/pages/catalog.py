from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from playwright.async_api import Locator as PlaywrightLocator

from ..exceptions import ElementNotFoundError
from ..locators import Locator, ProductCatalogLocators as L
from ..log import get_logger
from ..models import ProductRecord
from .base import BasePage, Screen, parse_amount

if TYPE_CHECKING:
    from .product_details import ProductDetailsPage

logger = get_logger(__name__)


class SortOption(str, Enum):
    NAME_ASC = "Name (A to Z)"
    NAME_DESC = "Name (Z to A)"
    PRICE_ASC = "Price (low to high)"
    PRICE_DESC = "Price (high to low)"

    @property
    def by_price(self) -> bool:
        return self in (SortOption.PRICE_ASC, SortOption.PRICE_DESC)

    @property
    def ascending(self) -> bool:
        return self in (SortOption.NAME_ASC, SortOption.PRICE_ASC)


def is_sorted(values: Sequence, ascending: bool = True) -> bool:
    """Whether consecutive values never step against the requested direction"""
    for previous, current in zip(values, values[1:]):
        if ascending and previous > current:
            return False
        if not ascending and previous < current:
            return False
    return True


class ProductCatalogPage(BasePage):
    screen = Screen.PRODUCT_CATALOG
    markers = (L.SORT_DROPDOWN,)

    async def get_product_list(self) -> List[PlaywrightLocator]:
        return await self._rows(L.PRODUCTS)

    async def get_all_product_details(self) -> List[ProductRecord]:
        return [
            await self._product_record(row, L.PRODUCT_NAME, L.PRODUCT_DESCRIPTION, L.PRODUCT_PRICE)
            for row in await self.get_product_list()
        ]

    async def get_all_product_names(self) -> List[str]:
        return [
            (await L.PRODUCT_NAME.within(row).inner_text()).strip()
            for row in await self.get_product_list()
        ]

    async def get_all_product_prices(self) -> List[Decimal]:
        return [
            parse_amount(await L.PRODUCT_PRICE.within(row).inner_text())
            for row in await self.get_product_list()
        ]

    async def get_product_by_name(self, product_name: str) -> Optional[PlaywrightLocator]:
        logger.debug("catalog.search", product=product_name)
        return await self._row_by_name(await self.get_product_list(), L.PRODUCT_NAME, product_name)

    async def add_product_to_cart(self, product_name: str):
        await self._click_in_row(product_name, L.ADD_TO_CART_BUTTON, "add")

    async def remove_product_from_cart(self, product_name: str):
        await self._click_in_row(product_name, L.REMOVE_BUTTON, "remove")

    async def _click_in_row(self, product_name: str, button: Locator, action: str):
        product = await self.get_product_by_name(product_name)
        if product is None:
            logger.warning("catalog.product_missing", product=product_name, action=action)
            return
        await button.within(product).click()
        self.session.record(f"cart_{action}", product=product_name)
        logger.info("catalog.cart_updated", product=product_name, action=action)

    async def sort_products(self, sort_option: Union[SortOption, str]):
        """Pick a sort option and log whether the re-read list honours it"""
        option = SortOption(sort_option)
        logger.info("catalog.sorting", option=option.value)
        await self.find(L.SORT_DROPDOWN).select_option(label=option.value)
        await self.waits.visible(self.find(L.PRODUCTS).first, "product list")

        if option.by_price:
            values = await self.get_all_product_prices()
        else:
            values = await self.get_all_product_names()

        if is_sorted(values, option.ascending):
            logger.info("catalog.sorted", option=option.value)
        else:
            logger.warning("catalog.sort_mismatch", option=option.value, values=[str(v) for v in values])

    async def go_to_product_details_by_name(self, product_name: str) -> "ProductDetailsPage":
        return await self._open_details(product_name, L.PRODUCT_NAME)

    async def go_to_product_details_by_image(self, product_name: str) -> "ProductDetailsPage":
        return await self._open_details(product_name, L.PRODUCT_IMAGE)

    async def _open_details(self, product_name: str, target: Locator) -> "ProductDetailsPage":
        from .product_details import ProductDetailsPage

        product = await self.get_product_by_name(product_name)
        if product is None:
            raise ElementNotFoundError(f"Product '{product_name}' not found for navigation")

        element = target.within(product)
        if not await element.is_visible():
            raise ElementNotFoundError(f"{target} of product '{product_name}' is not displayed")
        await element.click()
        self.session.record("navigate", screen=Screen.PRODUCT_DETAILS.value, product=product_name)
        return ProductDetailsPage(self.session)

    async def is_on_product_catalog_page(self) -> bool:
        return bool(await self.check_on_page())
