"""
================================================================================
Checkout Page Object (Async / Playwright)
================================================================================

Covers the three checkout steps: information form, overview and completion.

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
    from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage


class CheckoutPage(BasePage):
    """Checkout flow (async)."""

    URL_PATH = "/checkout-step-one.html"

    @property
    def checkout_title(self) -> Locator:
        return self.page.locator(".title")

    @property
    def first_name_field(self) -> Locator:
        return self.page.locator("[data-test='firstName']")

    @property
    def last_name_field(self) -> Locator:
        return self.page.locator("[data-test='lastName']")

    @property
    def postal_code_field(self) -> Locator:
        return self.page.locator("[data-test='postalCode']")

    @property
    def continue_button(self) -> Locator:
        return self.page.locator("[data-test='continue']")

    @property
    def cancel_button(self) -> Locator:
        return self.page.locator("[data-test='cancel']")

    @property
    def error_message(self) -> Locator:
        return self.page.locator("[data-test='error']")

    @property
    def error_button(self) -> Locator:
        return self.page.locator(".error-button")

    @property
    def finish_button(self) -> Locator:
        return self.page.locator("[data-test='finish']")

    @property
    def cart_items(self) -> Locator:
        return self.page.locator(".cart_item")

    @property
    def item_names(self) -> Locator:
        return self.page.locator(".cart_item .inventory_item_name")

    @property
    def payment_information(self) -> Locator:
        return self.page.locator("[data-test='payment-info-value']")

    @property
    def shipping_information(self) -> Locator:
        return self.page.locator("[data-test='shipping-info-value']")

    @property
    def item_total(self) -> Locator:
        return self.page.locator(".summary_subtotal_label")

    @property
    def tax(self) -> Locator:
        return self.page.locator(".summary_tax_label")

    @property
    def total(self) -> Locator:
        return self.page.locator(".summary_total_label")

    @property
    def complete_header(self) -> Locator:
        return self.page.locator(".complete-header")

    @property
    def complete_text(self) -> Locator:
        return self.page.locator(".complete-text")

    @property
    def back_home_button(self) -> Locator:
        return self.page.locator("[data-test='back-to-products']")

    def _item(self, item_name: str) -> Locator:
        return self.cart_items.filter(
            has=self.page.locator(".inventory_item_name", has_text=item_name)
        )

    # =========================================================================
    # Step checks
    # =========================================================================

    @allure.step("Check if checkout information page is loaded")
    async def is_checkout_information_page_loaded(self) -> bool:
        return await self.is_displayed_at("checkout-step-one.html", self.first_name_field, "First name field")

    @allure.step("Check if checkout overview page is loaded")
    async def is_checkout_overview_page_loaded(self) -> bool:
        return await self.is_displayed_at("checkout-step-two.html", self.finish_button, "Finish button")

    @allure.step("Check if checkout complete page is loaded")
    async def is_checkout_complete_page_loaded(self) -> bool:
        return await self.is_displayed_at("checkout-complete.html", self.complete_header, "Complete header")

    async def get_checkout_title(self) -> str:
        return await self.get_text(self.checkout_title, "Checkout title")

    # =========================================================================
    # Information step
    # =========================================================================

    async def enter_first_name(self, first_name: str) -> "CheckoutPage":
        await self.fill(self.first_name_field, first_name, "First name field")
        return self

    async def enter_last_name(self, last_name: str) -> "CheckoutPage":
        await self.fill(self.last_name_field, last_name, "Last name field")
        return self

    async def enter_postal_code(self, postal_code: str) -> "CheckoutPage":
        await self.fill(self.postal_code_field, postal_code, "Postal code field")
        return self

    @allure.step("Fill checkout information: {first_name} {last_name}, {postal_code}")
    async def fill_checkout_information(
        self, first_name: str, last_name: str, postal_code: str
    ) -> "CheckoutPage":
        await self.enter_first_name(first_name)
        await self.enter_last_name(last_name)
        await self.enter_postal_code(postal_code)
        return self

    @allure.step("Click continue")
    async def click_continue(self) -> "CheckoutPage":
        await self.click(self.continue_button, "Continue button")
        return self

    @allure.step("Click cancel")
    async def click_cancel(self) -> "CartPage":
        from saucedemo_suite.ui_testing.pages.cart_page import CartPage

        await self.click(self.cancel_button, "Cancel button")
        return await self._arrive(CartPage)

    async def get_error_message(self) -> str:
        if await self.is_visible(self.error_message, "Error message"):
            return await self.get_text(self.error_message, "Error message")
        return ""

    async def is_error_message_displayed(self) -> bool:
        return await self.is_visible(self.error_message, "Error message")

    @allure.step("Clear error message")
    async def clear_error_message(self) -> "CheckoutPage":
        if await self.is_visible(self.error_button, "Error close button"):
            await self.click(self.error_button, "Error close button")
        return self

    # =========================================================================
    # Overview step
    # =========================================================================

    async def get_checkout_item_names(self) -> List[str]:
        return await self.all_texts(self.item_names, "Checkout item names")

    async def get_checkout_item_count(self) -> int:
        count = await self.cart_items.count()
        logger.info(f"Checkout item count: {count}")
        return count

    async def get_item_quantity(self, item_name: str) -> int:
        text = await self.get_text(self._item(item_name).locator(".cart_quantity"), f"Quantity of {item_name}")
        return int(text.strip())

    async def get_item_price(self, item_name: str) -> str:
        return await self.get_text(self._item(item_name).locator(".inventory_item_price"), f"Price of {item_name}")

    async def get_payment_information(self) -> str:
        return await self.get_text(self.payment_information, "Payment information")

    async def get_shipping_information(self) -> str:
        return await self.get_text(self.shipping_information, "Shipping information")

    async def get_item_total(self) -> str:
        return await self.get_text(self.item_total, "Item total")

    async def get_tax(self) -> str:
        return await self.get_text(self.tax, "Tax")

    async def get_total(self) -> str:
        return await self.get_text(self.total, "Total")

    @allure.step("Click finish")
    async def click_finish(self) -> "CheckoutPage":
        # Finish sits below the order summary
        await self.scroll_into_view(self.finish_button, "Finish button")
        await self.click(self.finish_button, "Finish button")
        return self

    @allure.step("Cancel order from overview")
    async def cancel_overview(self) -> "InventoryPage":
        from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage

        await self.click(self.cancel_button, "Cancel button")
        return await self._arrive(InventoryPage)

    # =========================================================================
    # Complete step
    # =========================================================================

    async def get_complete_header(self) -> str:
        return await self.get_text(self.complete_header, "Complete header")

    async def get_complete_text(self) -> str:
        return await self.get_text(self.complete_text, "Complete text")

    @allure.step("Back home")
    async def click_back_home(self) -> "InventoryPage":
        from saucedemo_suite.ui_testing.pages.inventory_page import InventoryPage

        await self.click(self.back_home_button, "Back home button")
        return await self._arrive(InventoryPage)

    @allure.step("Complete checkout for {first_name} {last_name}, {postal_code}")
    async def complete_checkout(
        self, first_name: str, last_name: str, postal_code: str
    ) -> "CheckoutPage":
        """Fill the form, continue to the overview and finish the order."""
        await self.fill_checkout_information(first_name, last_name, postal_code)
        await self.click_continue()
        await self.click_finish()
        return self
