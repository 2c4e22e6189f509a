"""User-facing messages rendered by the storefront."""

# Login
USERNAME_REQUIRED = "Epic sadface: Username is required"
PASSWORD_REQUIRED = "Epic sadface: Password is required"
INVALID_CREDENTIALS = "Epic sadface: Username and password do not match any user in this service"
LOCKED_OUT_USER = "Epic sadface: Sorry, this user has been locked out."

# Checkout: Your Information
FIRST_NAME_REQUIRED = "Error: First Name is required"
LAST_NAME_REQUIRED = "Error: Last Name is required"
POSTAL_CODE_REQUIRED = "Error: Postal Code is required"

# Checkout: Overview
PAYMENT_INFORMATION = "SauceCard #31337"
SHIPPING_INFORMATION = "Free Pony Express Delivery!"

# Checkout: Complete
THANK_YOU_FOR_YOUR_ORDER = "Thank you for your order!"
ORDER_DISPATCHED_MESSAGE = "Your order has been dispatched, and will arrive just as fast as the pony can get there!"


def expected_login_error(username: str, password: str) -> str:
    """Message the login form shows for a rejected username/password pair"""
    if not username:
        return USERNAME_REQUIRED
    if not password:
        return PASSWORD_REQUIRED
    if username == "locked_out_user":
        return LOCKED_OUT_USER
    return INVALID_CREDENTIALS


def expected_checkout_error(first_name: str, last_name: str, postal_code: str) -> str:
    """Message the checkout form shows for the first missing field"""
    if not first_name:
        return FIRST_NAME_REQUIRED
    if not last_name:
        return LAST_NAME_REQUIRED
    if not postal_code:
        return POSTAL_CODE_REQUIRED
    raise ValueError("All checkout fields are filled, no error message is expected")
