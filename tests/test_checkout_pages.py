import pytest
from decimal import Decimal

from saucedemo import messages
from saucedemo.locators import CheckoutOverviewLocators
from saucedemo.pages import (
    CartPage,
    CheckoutCompletePage,
    CheckoutOverviewPage,
    CheckoutYourInformationPage,
    ProductCatalogPage,
)

BACKPACK = "Sauce Labs Backpack"
BIKE_LIGHT = "Sauce Labs Bike Light"
BOLT_SHIRT = "Sauce Labs Bolt T-Shirt"


@pytest.fixture
def information_page(app, session):
    app.add_to_cart(BACKPACK, BIKE_LIGHT)
    app.show(session.page, "checkout-step-one.html")
    return CheckoutYourInformationPage(session)


@pytest.fixture
def overview_page(app, session):
    app.add_to_cart(BACKPACK, BIKE_LIGHT)
    app.show(session.page, "checkout-step-two.html")
    return CheckoutOverviewPage(session)


class TestCheckoutYourInformationPage:
    """Test the checkout form"""

    @pytest.mark.asyncio
    async def test_continue(self, information_page):
        """Test complete details lead to the overview"""
        await information_page.enter_checkout_information("John", "Doe", "12345")
        overview_page = await information_page.click_continue_button()

        assert isinstance(overview_page, CheckoutOverviewPage)
        assert await overview_page.is_on_checkout_overview_page()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("first_name, last_name, postal_code, expected", [
        ("", "Doe", "12345", messages.FIRST_NAME_REQUIRED),
        ("", "", "", messages.FIRST_NAME_REQUIRED),
        ("John", "", "12345", messages.LAST_NAME_REQUIRED),
        ("John", "", "", messages.LAST_NAME_REQUIRED),
        ("John", "Doe", "", messages.POSTAL_CODE_REQUIRED),
    ])
    async def test_missing_field(self, information_page, first_name, last_name, postal_code, expected):
        """Test the message names the first missing field"""
        await information_page.enter_checkout_information(first_name, last_name, postal_code)
        await information_page.click_continue_button()

        assert await information_page.get_error_message() == expected
        assert await information_page.is_on_checkout_your_information_page()
        assert messages.expected_checkout_error(first_name, last_name, postal_code) == expected

    @pytest.mark.asyncio
    async def test_enter_does_not_submit(self, information_page):
        """Test filling the form stays on the form"""
        await information_page.enter_checkout_information("John", "Doe", "12345")
        assert await information_page.is_on_checkout_your_information_page()

    @pytest.mark.asyncio
    async def test_cancel(self, information_page):
        """Test cancelling returns to the cart"""
        cart_page = await information_page.click_cancel_button()

        assert isinstance(cart_page, CartPage)
        assert await cart_page.is_on_cart_page()


class TestCheckoutOverviewPage:
    """Test the order summary"""

    @pytest.mark.asyncio
    async def test_items(self, overview_page):
        """Test the summary lists the cart"""
        assert await overview_page.is_product_in_overview_cart(BACKPACK)
        assert not await overview_page.is_product_in_overview_cart(BOLT_SHIRT)
        assert not await overview_page.is_cart_empty()
        assert [r.price for r in await overview_page.get_all_product_details()] == ["$29.99", "$9.99"]

    @pytest.mark.asyncio
    async def test_information(self, overview_page):
        """Test payment and shipping labels"""
        assert await overview_page.get_payment_information() == messages.PAYMENT_INFORMATION
        assert await overview_page.get_shipping_information() == messages.SHIPPING_INFORMATION

    @pytest.mark.asyncio
    async def test_verify_total_computation(self, overview_page, settings):
        """Test tax and total against the item total"""
        assert await overview_page.verify_total_computation(settings.tax_rate)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("names, tax, total", [
        ([BACKPACK, BIKE_LIGHT], "3.20", "43.18"),
        ([BOLT_SHIRT], "1.28", "17.27"),
        (["Sauce Labs Onesie"], "0.64", "8.63"),
        ([BIKE_LIGHT], "0.80", "10.79"),
    ])
    async def test_half_up_rounding(self, app, session, settings, names, tax, total):
        """Test carts whose tax needs rounding to the cent"""
        app.add_to_cart(*names)
        app.show(session.page, "checkout-step-two.html")
        overview_page = CheckoutOverviewPage(session)

        assert await overview_page.read_text(CheckoutOverviewLocators.TAX) == f"Tax: ${tax}"
        assert await overview_page.read_text(CheckoutOverviewLocators.TOTAL) == f"Total: ${total}"
        assert await overview_page.verify_total_computation(settings.tax_rate)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tax, total, expected", [
        ("0.03", "0.28", True),
        ("0.02", "0.27", False),
    ])
    async def test_rounds_ties_up(self, app, overview_page, monkeypatch, tax, total, expected):
        """Test a tax landing exactly on half a cent rounds up"""
        monkeypatch.setattr(app, "totals", lambda: (Decimal("0.25"), Decimal(tax), Decimal(total)))
        assert await overview_page.verify_total_computation(0.1) is expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize("item_total", ["Infinity", "NaN"])
    async def test_verify_total_not_finite(self, app, overview_page, monkeypatch, item_total):
        """Test a non-numeric item total fails the check instead of raising"""
        monkeypatch.setattr(app, "totals", lambda: (Decimal(item_total), Decimal("2.40"), Decimal("32.39")))
        assert await overview_page.verify_total_computation(0.08) is False

    @pytest.mark.asyncio
    async def test_verify_total_mismatch(self, app, overview_page, settings):
        """Test a wrong tax fails the check"""
        app.tax_offset = Decimal("0.01")
        assert not await overview_page.verify_total_computation(settings.tax_rate)

    @pytest.mark.asyncio
    async def test_verify_total_wrong_rate(self, overview_page):
        """Test another rate fails the check"""
        assert not await overview_page.verify_total_computation(0.1)

    @pytest.mark.asyncio
    async def test_verify_total_unreadable(self, overview_page):
        """Test an unreadable screen fails the check instead of raising"""
        catalog_page = await overview_page.click_cancel_button()
        assert not await CheckoutOverviewPage(catalog_page.session).verify_total_computation(0.08)

    @pytest.mark.asyncio
    async def test_cancel(self, overview_page):
        """Test cancelling returns to the catalog"""
        catalog_page = await overview_page.click_cancel_button()

        assert isinstance(catalog_page, ProductCatalogPage)
        assert await catalog_page.is_on_product_catalog_page()


class TestCheckoutCompletePage:
    """Test finishing an order"""

    @pytest.mark.asyncio
    async def test_finish(self, overview_page):
        """Test the confirmation texts and the emptied cart"""
        complete_page = await overview_page.click_finish_button()

        assert isinstance(complete_page, CheckoutCompletePage)
        assert await complete_page.is_on_checkout_complete_page()
        assert await complete_page.get_complete_header_text() == messages.THANK_YOU_FOR_YOUR_ORDER
        assert await complete_page.get_complete_message_text() == messages.ORDER_DISPATCHED_MESSAGE
        assert await complete_page.get_cart_item_count() == 0

    @pytest.mark.asyncio
    async def test_back_home(self, overview_page):
        """Test returning to the catalog"""
        complete_page = await overview_page.click_finish_button()
        catalog_page = await complete_page.click_back_home_button()

        assert await catalog_page.is_on_product_catalog_page()


class TestProductRoundTrip:
    """Test product text is identical on every screen that lists it"""

    @pytest.mark.asyncio
    async def test_catalog_cart_and_overview_agree(self, catalog_page):
        names = [BACKPACK, BOLT_SHIRT]
        for name in names:
            await catalog_page.add_product_to_cart(name)
        in_catalog = {r.name: r for r in await catalog_page.get_all_product_details()}

        cart_page = await catalog_page.navigate_to_cart()
        in_cart = await cart_page.get_all_product_details()

        information_page = await cart_page.click_checkout_button()
        await information_page.enter_checkout_information("John", "Doe", "12345")
        overview_page = await information_page.click_continue_button()
        in_overview = await overview_page.get_all_product_details()

        assert [r.name for r in in_cart] == names
        assert in_overview == in_cart
        assert all(in_catalog[r.name] == r for r in in_cart)
