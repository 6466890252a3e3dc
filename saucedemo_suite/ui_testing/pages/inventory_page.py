"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Product listing: catalogue reads, add/remove to cart, sorting and the
burger menu (logout, reset app state).

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import allure
from loguru import logger
from playwright.async_api import Locator

from saucedemo_suite.ui_testing.framework.page_base import BasePage

if TYPE_CHECKING:
    from saucedemo_suite.ui_testing.pages.cart_page import CartPage
    from saucedemo_suite.ui_testing.pages.login_page import LoginPage
    from saucedemo_suite.ui_testing.pages.product_details_page import ProductDetailsPage


# Values of the sort dropdown
SORT_NAME_ASC = "az"
SORT_NAME_DESC = "za"
SORT_PRICE_ASC = "lohi"
SORT_PRICE_DESC = "hilo"


class InventoryPage(BasePage):
    """Inventory page object (async)."""

    URL_PATH = "/inventory.html"

    @property
    def app_logo(self) -> Locator:
        return self.page.locator(".app_logo")

    @property
    def shopping_cart_link(self) -> Locator:
        return self.page.locator(".shopping_cart_link")

    @property
    def shopping_cart_badge(self) -> Locator:
        return self.page.locator(".shopping_cart_badge")

    @property
    def menu_button(self) -> Locator:
        return self.page.locator("#react-burger-menu-btn")

    @property
    def close_menu_button(self) -> Locator:
        return self.page.locator("#react-burger-cross-btn")

    @property
    def logout_link(self) -> Locator:
        return self.page.locator("#logout_sidebar_link")

    @property
    def reset_app_state_link(self) -> Locator:
        return self.page.locator("#reset_sidebar_link")

    @property
    def sort_dropdown(self) -> Locator:
        return self.page.locator("[data-test='product-sort-container']")

    @property
    def inventory_container(self) -> Locator:
        return self.page.locator(".inventory_container")

    @property
    def inventory_items(self) -> Locator:
        return self.page.locator(".inventory_item")

    @property
    def item_names(self) -> Locator:
        return self.page.locator(".inventory_item_name")

    @property
    def item_prices(self) -> Locator:
        return self.page.locator(".inventory_item_price")

    def _item(self, product_name: str) -> Locator:
        return self.inventory_items.filter(
            has=self.page.locator(".inventory_item_name", has_text=product_name)
        )

    def _add_button(self, product_name: str) -> Locator:
        return self.page.locator(f"[id='add-to-cart-{self.item_slug(product_name)}']")

    def _remove_button(self, product_name: str) -> Locator:
        return self.page.locator(f"[id='remove-{self.item_slug(product_name)}']")

    @allure.step("Check if inventory page is loaded")
    async def is_inventory_page_loaded(self) -> bool:
        return await self.is_displayed_at("inventory.html", self.inventory_container, "Inventory container")

    async def get_app_logo_text(self) -> str:
        return await self.get_text(self.app_logo, "App logo")

    @allure.step("Get number of products")
    async def get_product_count(self) -> int:
        count = await self.inventory_items.count()
        logger.info(f"Product count: {count}")
        return count

    async def get_product_names(self) -> List[str]:
        return await self.all_texts(self.item_names, "Product names")

    async def get_product_prices(self) -> List[str]:
        return await self.all_texts(self.item_prices, "Product prices")

    @allure.step("Add product to cart: {product_name}")
    async def add_product_to_cart(self, product_name: str) -> "InventoryPage":
        button = self._add_button(product_name)
        await self.scroll_into_view(button, f"Add to cart: {product_name}")
        await self.click(button, f"Add to cart: {product_name}")
        return self

    @allure.step("Remove product from cart: {product_name}")
    async def remove_product_from_cart(self, product_name: str) -> "InventoryPage":
        await self.click(self._remove_button(product_name), f"Remove: {product_name}")
        return self

    async def is_product_in_cart(self, product_name: str) -> bool:
        return await self.is_visible(self._remove_button(product_name), f"Remove: {product_name}")

    async def get_product_price(self, product_name: str) -> str:
        return await self.get_text(
            self._item(product_name).locator(".inventory_item_price"),
            f"Price of {product_name}",
        )

    async def get_product_description(self, product_name: str) -> str:
        return await self.get_text(
            self._item(product_name).locator(".inventory_item_desc"),
            f"Description of {product_name}",
        )

    @allure.step("Open product details: {product_name}")
    async def click_product_name(self, product_name: str) -> "ProductDetailsPage":
        from saucedemo_suite.ui_testing.pages.product_details_page import ProductDetailsPage

        link = self.page.locator(".inventory_item_name", has_text=product_name)
        await self.click(link, f"Product name: {product_name}")
        return await self._arrive(ProductDetailsPage)

    @allure.step("Get cart item count")
    async def get_cart_item_count(self) -> int:
        if not await self.is_visible(self.shopping_cart_badge, "Cart badge"):
            return 0
        return int(await self.get_text(self.shopping_cart_badge, "Cart badge"))

    @allure.step("Open shopping cart")
    async def click_shopping_cart(self) -> "CartPage":
        from saucedemo_suite.ui_testing.pages.cart_page import CartPage

        await self.click(self.shopping_cart_link, "Shopping cart")
        return await self._arrive(CartPage)

    @allure.step("Sort products by: {sort_option}")
    async def sort_products(self, sort_option: str) -> "InventoryPage":
        await self.select_option(self.sort_dropdown, sort_option, "Sort dropdown")
        return self

    @allure.step("Open menu")
    async def open_menu(self) -> "InventoryPage":
        await self.click(self.menu_button, "Menu button")
        await self.wait_for_visible(self.logout_link, "Logout link")
        return self

    @allure.step("Close menu")
    async def close_menu(self) -> "InventoryPage":
        await self.click(self.close_menu_button, "Close menu button")
        await self.logout_link.wait_for(state="hidden")
        return self

    async def is_menu_open(self) -> bool:
        return await self.is_visible(self.logout_link, "Logout link")

    @allure.step("Logout")
    async def logout(self) -> "LoginPage":
        from saucedemo_suite.ui_testing.pages.login_page import LoginPage

        await self.open_menu()
        await self.click(self.logout_link, "Logout link")
        login = self._peer(LoginPage)
        await login.wait_for_visible(login.login_button, "Login button")
        return login

    @allure.step("Reset app state")
    async def reset_app_state(self) -> "InventoryPage":
        await self.open_menu()
        await self.click(self.reset_app_state_link, "Reset app state link")
        await self.close_menu()
        return self
