import pytest

from saucedemo.harness import retry
from saucedemo.pages import SortOption, is_sorted
from tests.e2e.data import provider, user_id

pytestmark = pytest.mark.e2e

USERS = provider.valid_users()


@pytest.mark.asyncio
@pytest.mark.parametrize("user", USERS, ids=user_id)
@retry()
async def test_product_details(login_page, user):
    """Test the catalog shows every product as recorded"""
    catalog_page = await login_page.login(user.username, user.password)
    shown = await catalog_page.get_all_product_details()

    for product in provider.products():
        assert product in shown


@pytest.mark.asyncio
@pytest.mark.parametrize("user", USERS, ids=user_id)
@retry()
async def test_add_and_remove_products(login_page, user):
    """Test the badge follows every add and remove"""
    catalog_page = await login_page.login(user.username, user.password)
    count = await catalog_page.get_cart_item_count()

    for product in provider.products():
        await catalog_page.add_product_to_cart(product.name)
        assert await catalog_page.get_cart_item_count() == count + 1
        await catalog_page.remove_product_from_cart(product.name)
        assert await catalog_page.get_cart_item_count() == count


@pytest.mark.asyncio
@pytest.mark.parametrize("user", USERS, ids=user_id)
@retry()
async def test_product_sorting(login_page, user):
    """Test every sort option orders the list"""
    catalog_page = await login_page.login(user.username, user.password)

    for option in SortOption:
        await catalog_page.sort_products(option)
        if option.by_price:
            values = await catalog_page.get_all_product_prices()
        else:
            values = await catalog_page.get_all_product_names()
        assert is_sorted(values, option.ascending), option.value
