"""
================================================================================
Cart Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import allure
from loguru import logger
from playwright.async_api import Locator

from saucedemo_suite.ui_testing.framework.page_base import BasePage

if TYPE_CHECKING:
    from saucedemo_suite.ui_testing.pages.checkout_page import CheckoutPage
    from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage
    from saucedemo_suite.ui_testing.pages.product_details_page import ProductDetailsPage


class CartPage(BasePage):
    """Shopping cart (async)."""

    URL_PATH = "/cart.html"

    @property
    def cart_header(self) -> Locator:
        return self.page.locator(".title")

    @property
    def continue_shopping_button(self) -> Locator:
        return self.page.locator("[data-test='continue-shopping']")

    @property
    def checkout_button(self) -> Locator:
        return self.page.locator("[data-test='checkout']")

    @property
    def cart_items(self) -> Locator:
        return self.page.locator(".cart_item")

    @property
    def item_names(self) -> Locator:
        return self.page.locator(".cart_item .inventory_item_name")

    @property
    def item_prices(self) -> Locator:
        return self.page.locator(".cart_item .inventory_item_price")

    @property
    def shopping_cart_badge(self) -> Locator:
        return self.page.locator(".shopping_cart_badge")

    def _item(self, item_name: str) -> Locator:
        return self.cart_items.filter(
            has=self.page.locator(".inventory_item_name", has_text=item_name)
        )

    @allure.step("Check if cart page is loaded")
    async def is_cart_page_loaded(self) -> bool:
        return await self.is_displayed_at("cart.html", self.checkout_button, "Checkout button")

    async def get_cart_header_text(self) -> str:
        return await self.get_text(self.cart_header, "Cart header")

    @allure.step("Get number of items in cart")
    async def get_cart_item_count(self) -> int:
        count = await self.cart_items.count()
        logger.info(f"Cart item count: {count}")
        return count

    async def is_cart_empty(self) -> bool:
        return await self.get_cart_item_count() == 0

    async def get_cart_item_names(self) -> List[str]:
        return await self.all_texts(self.item_names, "Cart item names")

    async def get_cart_item_prices(self) -> List[str]:
        return await self.all_texts(self.item_prices, "Cart item prices")

    async def get_item_quantity(self, item_name: str) -> int:
        text = await self.get_text(self._item(item_name).locator(".cart_quantity"), f"Quantity of {item_name}")
        return int(text.strip())

    async def get_item_price(self, item_name: str) -> str:
        return await self.get_text(self._item(item_name).locator(".inventory_item_price"), f"Price of {item_name}")

    async def get_item_description(self, item_name: str) -> str:
        return await self.get_text(self._item(item_name).locator(".inventory_item_desc"), f"Description of {item_name}")

    async def is_item_in_cart(self, item_name: str) -> bool:
        return await self._item(item_name).count() > 0

    @allure.step("Remove item from cart: {item_name}")
    async def remove_item_from_cart(self, item_name: str) -> "CartPage":
        button = self.page.locator(f"[id='remove-{self.item_slug(item_name)}']")
        await self.click(button, f"Remove: {item_name}")
        return self

    @allure.step("Remove all items from cart")
    async def remove_all_items(self) -> "CartPage":
        for name in await self.get_cart_item_names():
            await self.remove_item_from_cart(name)
        return self

    @allure.step("Continue shopping")
    async def continue_shopping(self) -> "InventoryPage":
        from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage

        await self.click(self.continue_shopping_button, "Continue shopping button")
        return await self._arrive(InventoryPage)

    @allure.step("Proceed to checkout")
    async def proceed_to_checkout(self) -> "CheckoutPage":
        from saucedemo_suite.ui_testing.pages.checkout_page import CheckoutPage

        await self.click(self.checkout_button, "Checkout button")
        return await self._arrive(CheckoutPage)

    async def get_shopping_cart_badge_count(self) -> int:
        if not await self.is_visible(self.shopping_cart_badge, "Cart badge"):
            return 0
        return int(await self.get_text(self.shopping_cart_badge, "Cart badge"))

    @allure.step("Open item: {item_name}")
    async def click_item_name(self, item_name: str) -> "ProductDetailsPage":
        from saucedemo_suite.ui_testing.pages.product_details_page import ProductDetailsPage

        link = self.page.locator(".inventory_item_name", has_text=item_name)
        await self.click(link, f"Item name: {item_name}")
        return await self._arrive(ProductDetailsPage)
