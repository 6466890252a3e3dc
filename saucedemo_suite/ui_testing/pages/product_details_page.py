"""
================================================================================
Product Details Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import allure
from playwright.async_api import Locator

from saucedemo_suite.ui_testing.framework.page_base import BasePage

if TYPE_CHECKING:
    from saucedemo_suite.ui_testing.pages.cart_page import CartPage
    from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage


class ProductDetailsPage(BasePage):
    """Single product view (async)."""

    URL_PATH = "/inventory-item.html"

    @property
    def back_to_products_button(self) -> Locator:
        return self.page.locator("[data-test='back-to-products']")

    @property
    def product_image(self) -> Locator:
        return self.page.locator(".inventory_details_img")

    @property
    def product_name(self) -> Locator:
        return self.page.locator(".inventory_details_name")

    @property
    def product_description(self) -> Locator:
        return self.page.locator(".inventory_details_desc")

    @property
    def product_price(self) -> Locator:
        return self.page.locator(".inventory_details_price")

    @property
    def add_to_cart_button(self) -> Locator:
        return self.page.locator("button[id*='add-to-cart']")

    @property
    def remove_button(self) -> Locator:
        return self.page.locator("button[id*='remove']")

    @property
    def shopping_cart_badge(self) -> Locator:
        return self.page.locator(".shopping_cart_badge")

    @property
    def shopping_cart_link(self) -> Locator:
        return self.page.locator(".shopping_cart_link")

    @allure.step("Check if product details page is loaded")
    async def is_product_details_page_loaded(self) -> bool:
        return await self.is_displayed_at("inventory-item.html", self.product_name, "Product name")

    async def get_product_name(self) -> str:
        return await self.get_text(self.product_name, "Product name")

    async def get_product_description(self) -> str:
        return await self.get_text(self.product_description, "Product description")

    async def get_product_price(self) -> str:
        return await self.get_text(self.product_price, "Product price")

    async def is_product_image_displayed(self) -> bool:
        return await self.is_visible(self.product_image, "Product image")

    @allure.step("Add product to cart")
    async def add_to_cart(self) -> "ProductDetailsPage":
        await self.click(self.add_to_cart_button, "Add to cart button")
        return self

    @allure.step("Remove product from cart")
    async def remove_from_cart(self) -> "ProductDetailsPage":
        await self.click(self.remove_button, "Remove button")
        return self

    async def is_product_added_to_cart(self) -> bool:
        return await self.is_visible(self.remove_button, "Remove button")

    async def get_cart_item_count(self) -> int:
        if not await self.is_visible(self.shopping_cart_badge, "Cart badge"):
            return 0
        return int(await self.get_text(self.shopping_cart_badge, "Cart badge"))

    @allure.step("Back to products")
    async def back_to_products(self) -> "InventoryPage":
        from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage

        await self.click(self.back_to_products_button, "Back to products button")
        return await self._arrive(InventoryPage)

    @allure.step("Open shopping cart")
    async def click_shopping_cart(self) -> "CartPage":
        from saucedemo_suite.ui_testing.pages.cart_page import CartPage

        await self.click(self.shopping_cart_link, "Shopping cart")
        return await self._arrive(CartPage)
