"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Swag Labs pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .inventory_page import InventoryPage
from .product_details_page import ProductDetailsPage
from .cart_page import CartPage
from .checkout_page import CheckoutPage

__all__ = [
    "LoginPage",
    "InventoryPage",
    "ProductDetailsPage",
    "CartPage",
    "CheckoutPage",
]
