"""Exceptions raised by the page object layer."""


class StorefrontError(Exception):
    """Base exception for all page object failures."""

    pass


class WaitTimeoutError(StorefrontError, TimeoutError):
    """A wait's condition never became true within the explicit wait."""

    pass


class ElementNotFoundError(StorefrontError):
    """A named menu item, social link or product could not be located."""

    pass


class ParseError(StorefrontError, ValueError):
    """Text scraped from the page could not be converted to a number."""

    pass


class ScreenMismatchError(StorefrontError):
    """The browser is not showing the screen the caller expected."""

    pass


class BrowserSetupError(StorefrontError):
    """Browser initialization failed."""

    pass
