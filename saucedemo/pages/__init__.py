"""Page objects, one per storefront screen.

Every navigation method returns the page object for the screen it lands on,
so a scenario always holds a handle typed for the current screen. When the
landing screen depends on the application (a rejected login, a browser back),
``detect_screen`` looks at the browser and returns the matching page object.
"""

from typing import Union

from ..exceptions import ScreenMismatchError, WaitTimeoutError
from ..session import Session
from .base import BasePage, Screen, parse_amount
from .cart import CartPage
from .catalog import ProductCatalogPage, SortOption, is_sorted
from .checkout_complete import CheckoutCompletePage
from .checkout_information import CheckoutYourInformationPage
from .checkout_overview import CheckoutOverviewPage
from .login import LoginFailed, LoginPage, LoginResult, LoginSucceeded
from .product_details import ProductDetailsPage

PageObject = Union[
    LoginPage,
    ProductCatalogPage,
    ProductDetailsPage,
    CartPage,
    CheckoutYourInformationPage,
    CheckoutOverviewPage,
    CheckoutCompletePage,
]

SCREEN_PAGES = {
    Screen.LOGIN: LoginPage,
    Screen.PRODUCT_CATALOG: ProductCatalogPage,
    Screen.PRODUCT_DETAILS: ProductDetailsPage,
    Screen.CART: CartPage,
    Screen.CHECKOUT_INFORMATION: CheckoutYourInformationPage,
    Screen.CHECKOUT_OVERVIEW: CheckoutOverviewPage,
    Screen.CHECKOUT_COMPLETE: CheckoutCompletePage,
}


async def detect_screen(session: Session) -> PageObject:
    """Return the page object for the screen the active tab is showing"""
    candidates = [page_class(session) for page_class in SCREEN_PAGES.values()]

    async def shown():
        for candidate in candidates:
            if await candidate.check_on_page(timeout=0):
                return candidate
        return None

    try:
        return await session.waits.until(shown, "a known storefront screen")
    except WaitTimeoutError as e:
        raise ScreenMismatchError(f"No known screen is shown at {session.page.url}") from e


__all__ = [
    "BasePage",
    "CartPage",
    "CheckoutCompletePage",
    "CheckoutOverviewPage",
    "CheckoutYourInformationPage",
    "LoginFailed",
    "LoginPage",
    "LoginResult",
    "LoginSucceeded",
    "PageObject",
    "ProductCatalogPage",
    "ProductDetailsPage",
    "SCREEN_PAGES",
    "Screen",
    "SortOption",
    "detect_screen",
    "is_sorted",
    "parse_amount",
]
