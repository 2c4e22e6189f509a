import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page

from ..exceptions import ElementNotFoundError, ParseError, ScreenMismatchError, StorefrontError
from ..locators import CommonLocators, Locator
from ..log import get_logger
from ..models import ProductRecord
from ..session import Session
from ..waits import PresenceCheck

if TYPE_CHECKING:
    from .cart import CartPage
    from .login import LoginPage

logger = get_logger(__name__)

BLANK_TAB_URL = "about:blank"


class Screen(str, Enum):
    LOGIN = "login"
    PRODUCT_CATALOG = "product_catalog"
    PRODUCT_DETAILS = "product_details"
    CART = "cart"
    CHECKOUT_INFORMATION = "checkout_information"
    CHECKOUT_OVERVIEW = "checkout_overview"
    CHECKOUT_COMPLETE = "checkout_complete"


def parse_amount(text: str, prefix: str = "") -> Decimal:
    """Parse a money label such as "$29.99" or "Tax: $2.40".

    With a prefix, exactly that literal is removed; without one every character
    that is not a digit or a dot is dropped.
    """
    raw = text.strip()
    if prefix:
        raw = raw.replace(prefix, "", 1)
    else:
        raw = re.sub(r"[^\d.]", "", raw)
    try:
        value = Decimal(raw)
    except InvalidOperation as e:
        raise ParseError(f"Cannot parse amount from {text!r}") from e
    if not value.is_finite():
        raise ParseError(f"Amount is not a finite number: {text!r}")
    return value


class BasePage:
    """Behaviour shared by every screen: menu, footer, tabs and the cart badge"""

    screen: ClassVar[Screen]
    # Elements that identify the screen; all must be visible for check_on_page
    markers: ClassVar[Tuple[Locator, ...]] = ()

    def __init__(self, session: Session):
        self.session = session
        self.waits = session.waits
        self.settings = session.settings

    @property
    def page(self) -> Page:
        """The session's active tab"""
        return self.session.page

    def find(self, locator: Locator) -> PlaywrightLocator:
        return locator.within(self.page)

    async def read_text(self, locator: Locator) -> str:
        """Wait for an element and return its visible text"""
        element = await self.waits.visible(self.find(locator), str(locator))
        return (await element.inner_text()).strip()

    async def check_on_page(self, timeout: Optional[float] = None) -> PresenceCheck:
        """Probe the identifying elements of this screen"""
        for marker in self.markers:
            check = await self.waits.probe(self.find(marker), timeout)
            if not check:
                logger.debug("page.check", screen=self.screen.value, state=check.state.value, reason=check.reason)
                return check
        return PresenceCheck.present()

    async def ensure(self) -> "BasePage":
        """Raise unless the browser is showing this screen"""
        check = await self.check_on_page()
        if not check:
            raise ScreenMismatchError(
                f"Expected the {self.screen.value} screen at {self.page.url}, "
                f"but the check was {check.state.value}: {check.reason}"
            )
        return self

    # -------------------------------------------------------------------------
    # Hamburger menu
    # -------------------------------------------------------------------------

    async def open_hamburger_menu(self):
        """Open the slide-out menu unless its first entry is already visible"""
        items = self.find(CommonLocators.MENU_ITEMS)
        if await items.count() > 0 and await items.first.is_visible():
            logger.info("menu.already_open")
            return

        logger.info("menu.opening")
        burger = await self.waits.visible(self.find(CommonLocators.BURGER_BUTTON), "burger button")
        await burger.click()
        await self.waits.all_visible(items, "hamburger menu items")

    async def click_menu_item(self, name: str):
        """Click a menu entry by case-insensitive exact text; "About" opens in a new tab"""
        await self.open_hamburger_menu()

        labels = []
        for item in await self.find(CommonLocators.MENU_ITEMS).all():
            label = (await item.inner_text()).strip()
            labels.append(label)
            if label.lower() != name.lower():
                continue

            if label.lower() == "about":
                await item.click(modifiers=["ControlOrMeta"])
            else:
                await item.click()
            self.session.record("menu_item", name=label)
            logger.info("menu.clicked", item=label)
            return

        logger.info("menu.available", items=labels)
        raise ElementNotFoundError(f"Menu item not found: {name}")

    async def reset_app_state(self):
        """Reset the app from the menu and wait for the cart badge to go away"""
        logger.info("app.resetting")
        await self.click_menu_item("Reset App State")
        await self.waits.invisible(self.find(CommonLocators.CART_BADGE), "cart badge")
        logger.info("app.reset", cart_count=0)

    async def logout(self) -> "LoginPage":
        from .login import LoginPage

        logger.info("app.logout")
        await self.click_menu_item("Logout")
        return LoginPage(self.session)

    # -------------------------------------------------------------------------
    # Footer and tabs
    # -------------------------------------------------------------------------

    async def click_social_link(self, platform: str):
        """Click the footer link whose href mentions the platform"""
        for link in await self.find(CommonLocators.SOCIAL_LINKS).all():
            href = await link.get_attribute("href")
            logger.debug("footer.link", href=href)
            if href and platform.lower() in href.lower():
                await link.click()
                self.session.record("social_link", platform=platform, href=href)
                return
        raise ElementNotFoundError(f"Social media link not found: {platform}")

    async def switch_to_new_tab(self) -> str:
        """Focus the most recently opened other tab once it has left about:blank"""
        origin = self.page
        context = self.session.context

        async def other_tab() -> Optional[Page]:
            for candidate in reversed(context.pages):
                if candidate is not origin:
                    return candidate
            return None

        new_tab = await self.waits.until(other_tab, "a new tab to open")
        self.session.origin_page = origin
        self.session.activate(new_tab)

        async def loaded() -> bool:
            return new_tab.url != BLANK_TAB_URL

        await self.waits.until(loaded, "the new tab to load")
        await new_tab.bring_to_front()
        logger.info("tab.switched", url=new_tab.url)
        return new_tab.url

    async def close_tab_and_return(self):
        """Close the active tab and focus the tab that opened it"""
        closing = self.page
        target = self.session.origin_page
        await closing.close()

        if target is None or target.is_closed():
            remaining = self.session.context.pages
            if not remaining:
                raise StorefrontError("No open tab left to return to")
            target = remaining[0]

        self.session.origin_page = None
        self.session.activate(target)
        await target.bring_to_front()
        logger.info("tab.returned", url=target.url)

    def get_current_url(self) -> str:
        url = self.page.url
        logger.info("page.url", url=url)
        return url

    async def go_to_login_page(self) -> "LoginPage":
        from .login import LoginPage

        await self.page.goto(self.settings.base_url)
        self.session.record("goto", url=self.settings.base_url)
        return LoginPage(self.session)

    # -------------------------------------------------------------------------
    # Cart header
    # -------------------------------------------------------------------------

    async def get_cart_item_count(self) -> int:
        """Number on the cart badge, 0 when the badge is absent or unreadable"""
        badge = self.find(CommonLocators.CART_BADGE)
        try:
            if await badge.count() == 0 or not await badge.is_visible():
                logger.info("cart.badge_hidden", count=0)
                return 0
            count = int((await badge.inner_text()).strip())
        except (PlaywrightError, ValueError) as e:
            logger.warning("cart.count_failed", error=str(e), count=0)
            return 0
        logger.info("cart.count", count=count)
        return count

    async def navigate_to_cart(self) -> "CartPage":
        from .cart import CartPage

        await self.find(CommonLocators.CART_LINK).click()
        self.session.record("navigate", screen=Screen.CART.value)
        return CartPage(self.session)

    # -------------------------------------------------------------------------
    # Product rows (catalog, cart and overview share the same markup)
    # -------------------------------------------------------------------------

    async def _rows(self, rows: Locator, wait: bool = True) -> List[PlaywrightLocator]:
        """All rendered rows; an empty list when none shows up within the implicit wait"""
        matches = self.find(rows)
        if wait:
            await self.waits.visible(matches.first, str(rows))
        elif not await self.waits.probe(matches.first):
            return []
        return await matches.all()

    async def _row_by_name(self, rows: List[PlaywrightLocator], name_locator: Locator, name: str) -> Optional[PlaywrightLocator]:
        for row in rows:
            if (await name_locator.within(row).inner_text()).strip() == name:
                return row
        return None

    async def _product_record(self, row: PlaywrightLocator, name: Locator, description: Locator, price: Locator) -> ProductRecord:
        return ProductRecord(
            name=(await name.within(row).inner_text()).strip(),
            description=(await description.within(row).inner_text()).strip(),
            price=(await price.within(row).inner_text()).strip(),
        )
