from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator as PlaywrightLocator

from ..exceptions import ElementNotFoundError, ParseError, WaitTimeoutError
from ..locators import CheckoutOverviewLocators as L
from ..log import get_logger
from ..models import ProductRecord
from ..waits import Presence
from .base import BasePage, Screen, parse_amount
from .catalog import ProductCatalogPage
from .checkout_complete import CheckoutCompletePage
from .product_details import ProductDetailsPage

logger = get_logger(__name__)

CENT = Decimal("0.01")

ITEM_TOTAL_PREFIX = "Item total: $"
TAX_PREFIX = "Tax: $"
TOTAL_PREFIX = "Total: $"


class CheckoutOverviewPage(BasePage):
    screen = Screen.CHECKOUT_OVERVIEW
    markers = (L.FINISH_BUTTON,)

    async def get_overview_items(self) -> List[PlaywrightLocator]:
        return await self._rows(L.ITEMS, wait=False)

    async def get_cart_item_by_name(self, product_name: str) -> Optional[PlaywrightLocator]:
        return await self._row_by_name(await self.get_overview_items(), L.ITEM_NAME, product_name)

    async def is_product_in_overview_cart(self, product_name: str) -> bool:
        return await self.get_cart_item_by_name(product_name) is not None

    async def get_all_product_details(self) -> List[ProductRecord]:
        return [
            await self._product_record(item, L.ITEM_NAME, L.ITEM_DESCRIPTION, L.ITEM_PRICE)
            for item in await self.get_overview_items()
        ]

    async def get_payment_information(self) -> str:
        return await self.read_text(L.PAYMENT_INFORMATION)

    async def get_shipping_information(self) -> str:
        return await self.read_text(L.SHIPPING_INFORMATION)

    async def verify_total_computation(self, tax_rate: float) -> bool:
        """Check the displayed tax and total against the displayed item total.

        tax = round(item_total * tax_rate), total = round(item_total + tax), both
        rounded half-up to the cent. Any value that cannot be read or parsed
        makes the check fail instead of raising.
        """
        try:
            item_total = parse_amount(await self.read_text(L.ITEM_TOTAL), ITEM_TOTAL_PREFIX)
            tax = parse_amount(await self.read_text(L.TAX), TAX_PREFIX)
            total = parse_amount(await self.read_text(L.TOTAL), TOTAL_PREFIX)
        except (ParseError, WaitTimeoutError, PlaywrightError) as e:
            logger.warning("checkout.totals_unreadable", error=str(e))
            return False

        computed_tax = (item_total * Decimal(str(tax_rate))).quantize(CENT, rounding=ROUND_HALF_UP)
        computed_total = (item_total + computed_tax).quantize(CENT, rounding=ROUND_HALF_UP)
        matches = computed_tax == tax and computed_total == total
        logger.info(
            "checkout.totals",
            item_total=str(item_total),
            tax=str(tax),
            computed_tax=str(computed_tax),
            total=str(total),
            computed_total=str(computed_total),
            matches=matches,
        )
        return matches

    async def click_finish_button(self) -> CheckoutCompletePage:
        button = await self.waits.visible(self.find(L.FINISH_BUTTON), "finish button")
        await button.click()
        self.session.record("navigate", screen=Screen.CHECKOUT_COMPLETE.value)
        return CheckoutCompletePage(self.session)

    async def click_cancel_button(self) -> ProductCatalogPage:
        button = await self.waits.visible(self.find(L.CANCEL_BUTTON), "cancel button")
        await button.click()
        self.session.record("navigate", screen=Screen.PRODUCT_CATALOG.value)
        return ProductCatalogPage(self.session)

    async def go_to_product_details_page(self, product_name: str) -> ProductDetailsPage:
        item = await self.get_cart_item_by_name(product_name)
        if item is None:
            raise ElementNotFoundError(f"Product '{product_name}' not found for navigation")
        await L.ITEM_NAME.within(item).click()
        self.session.record("navigate", screen=Screen.PRODUCT_DETAILS.value, product=product_name)
        return ProductDetailsPage(self.session)

    async def is_cart_empty(self) -> bool:
        check = await self.waits.probe(self.find(L.ITEMS).first)
        return check.state is Presence.ABSENT

    async def is_on_checkout_overview_page(self) -> bool:
        return bool(await self.check_on_page())
