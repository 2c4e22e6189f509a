"""Element locator sets, one per storefront screen"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page


class Strategy(str, Enum):
    ID = "id"
    CSS = "css"
    XPATH = "xpath"
    CLASS_NAME = "class_name"


@dataclass(frozen=True)
class Locator:
    """A (strategy, selector) pair identifying zero or more DOM elements"""

    strategy: Strategy
    selector: str

    @classmethod
    def by_id(cls, selector: str) -> "Locator":
        return cls(Strategy.ID, selector)

    @classmethod
    def by_css(cls, selector: str) -> "Locator":
        return cls(Strategy.CSS, selector)

    @classmethod
    def by_xpath(cls, selector: str) -> "Locator":
        return cls(Strategy.XPATH, selector)

    @classmethod
    def by_class_name(cls, selector: str) -> "Locator":
        return cls(Strategy.CLASS_NAME, selector)

    @property
    def query(self) -> str:
        """Selector string in Playwright's selector syntax"""
        if self.strategy is Strategy.ID:
            return f'[id="{self.selector}"]'
        if self.strategy is Strategy.XPATH:
            return f"xpath={self.selector}"
        if self.strategy is Strategy.CLASS_NAME:
            return f".{self.selector}"
        return self.selector

    def within(self, root: Union[Page, PlaywrightLocator]) -> PlaywrightLocator:
        """Resolve against a page, or against the descendants of an element"""
        return root.locator(self.query)

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.selector}"


class CommonLocators:
    BURGER_BUTTON = Locator.by_id("react-burger-menu-btn")
    MENU_ITEMS = Locator.by_xpath("//a[@class='bm-item menu-item']")
    SOCIAL_LINKS = Locator.by_xpath("//footer//a")
    CART_LINK = Locator.by_css(".shopping_cart_link")
    CART_BADGE = Locator.by_css(".shopping_cart_badge")


class LoginLocators:
    USERNAME = Locator.by_id("user-name")
    PASSWORD = Locator.by_id("password")
    LOGIN_BUTTON = Locator.by_id("login-button")
    ERROR_MESSAGE = Locator.by_css(".error-message-container")


class ProductCatalogLocators:
    SORT_DROPDOWN = Locator.by_css(".product_sort_container")
    PRODUCTS = Locator.by_css(".inventory_item")
    PRODUCT_NAME = Locator.by_css(".inventory_item_name")
    PRODUCT_DESCRIPTION = Locator.by_css(".inventory_item_desc")
    PRODUCT_PRICE = Locator.by_css(".inventory_item_price")
    PRODUCT_IMAGE = Locator.by_css(".inventory_item_img")
    ADD_TO_CART_BUTTON = Locator.by_css(".btn_inventory")
    REMOVE_BUTTON = Locator.by_css(".btn_secondary")


class ProductDetailsLocators:
    NAME = Locator.by_css(".inventory_details_name")
    DESCRIPTION = Locator.by_css(".inventory_details_desc")
    PRICE = Locator.by_css(".inventory_details_price")
    ADD_TO_CART_BUTTON = Locator.by_id("add-to-cart")
    REMOVE_BUTTON = Locator.by_id("remove")
    BACK_TO_PRODUCTS_BUTTON = Locator.by_css(".inventory_details_back_button")


class CartLocators:
    CONTINUE_SHOPPING_BUTTON = Locator.by_id("continue-shopping")
    CHECKOUT_BUTTON = Locator.by_id("checkout")
    ITEMS = Locator.by_css(".cart_item")
    ITEM_NAME = Locator.by_css(".inventory_item_name")
    ITEM_DESCRIPTION = Locator.by_css(".inventory_item_desc")
    ITEM_PRICE = Locator.by_css(".inventory_item_price")
    ITEM_REMOVE_BUTTON = Locator.by_css(".cart_button")


class CheckoutYourInformationLocators:
    FIRST_NAME = Locator.by_id("first-name")
    LAST_NAME = Locator.by_id("last-name")
    POSTAL_CODE = Locator.by_id("postal-code")
    CONTINUE_BUTTON = Locator.by_id("continue")
    CANCEL_BUTTON = Locator.by_id("cancel")
    ERROR_MESSAGE = Locator.by_xpath("//h3[@data-test='error']")


class CheckoutOverviewLocators:
    ITEMS = CartLocators.ITEMS
    ITEM_NAME = CartLocators.ITEM_NAME
    ITEM_DESCRIPTION = CartLocators.ITEM_DESCRIPTION
    ITEM_PRICE = CartLocators.ITEM_PRICE
    ITEM_TOTAL = Locator.by_css(".summary_subtotal_label")
    TAX = Locator.by_css(".summary_tax_label")
    TOTAL = Locator.by_css(".summary_total_label")
    PAYMENT_INFORMATION = Locator.by_css(".summary_info div:nth-child(2)")
    SHIPPING_INFORMATION = Locator.by_css(".summary_info div:nth-child(4)")
    FINISH_BUTTON = Locator.by_id("finish")
    CANCEL_BUTTON = Locator.by_id("cancel")


class CheckoutCompleteLocators:
    HEADER = Locator.by_class_name("complete-header")
    TEXT = Locator.by_class_name("complete-text")
    BACK_HOME_BUTTON = Locator.by_id("back-to-products")
