import pytest
from pathlib import Path

from saucedemo.config import Settings
from saucedemo.pages import CartPage, LoginPage, ProductCatalogPage
from saucedemo.session import Session
from tests.fake_storefront import ABOUT_URL, BASE_URL, SOCIAL_URLS, FakeSauceDemo

DATA_PATH = Path(__file__).parent / "data" / "test_data.json"


def pytest_addoption(parser):
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="run the end-to-end scenarios against the live storefront",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: drives a real browser against the live storefront")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="needs --e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at the fake storefront with short waits"""
    return Settings(
        _env_file=None,
        base_url=BASE_URL,
        explicit_wait=0.3,
        implicit_wait=0.5,
        about_page_url=ABOUT_URL,
        twitter_url=SOCIAL_URLS["Twitter"],
        facebook_url=SOCIAL_URLS["Facebook"],
        linkedin_url=SOCIAL_URLS["LinkedIn"],
        test_data_path=DATA_PATH,
        screenshot_path=tmp_path / "screenshots",
    )


@pytest.fixture
def app():
    return FakeSauceDemo()


@pytest.fixture
def session(app, settings):
    """Session on a fresh fake browser context, showing the login page"""
    context = app.new_context()
    page = context.open_page(BASE_URL)
    return Session("unit", context, page, settings)


@pytest.fixture
def login_page(session):
    return LoginPage(session)


@pytest.fixture
def catalog_page(app, session):
    app.show(session.page, "inventory.html")
    return ProductCatalogPage(session)


@pytest.fixture
def cart_page(app, session):
    app.show(session.page, "cart.html")
    return CartPage(session)
