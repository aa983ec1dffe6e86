"""Tests for checkout details and outbound messages"""

import pytest
from urllib.parse import unquote
from pydantic import ValidationError

from storefront.cart import SelectedAddOn
from storefront.catalog.models import PaymentMethod
from storefront.checkout import (
    OrderDetails,
    ServiceType,
    compose_inquiry_message,
    compose_order_message,
    delivery_enabled,
    describe_line,
    effective_payment_methods,
    messenger_link,
    payment_method_name,
)
from storefront.errors import CheckoutError


@pytest.fixture
def pickup_details():
    return OrderDetails(customer_name="Juan Dela Cruz", contact_number="0917 123 4567")


class TestOrderDetails:

    def test_defaults(self, pickup_details):
        assert pickup_details.service_type == ServiceType.PICKUP
        assert pickup_details.payment_method == "gcash-maya"

    @pytest.mark.parametrize("field", ["customer_name", "contact_number"])
    def test_required_fields(self, field):
        data = {"customer_name": "Juan", "contact_number": "0917"}
        data[field] = "   "

        with pytest.raises(ValidationError):
            OrderDetails(**data)

    def test_delivery_requires_address(self):
        with pytest.raises(ValidationError):
            OrderDetails(customer_name="Juan", contact_number="0917", service_type="delivery")

    def test_delivery_with_address(self):
        details = OrderDetails(customer_name="Juan", contact_number="0917",
                               service_type="delivery", address=" 12 Rizal St ")
        assert details.address == "12 Rizal St"


class TestPaymentMethods:

    def test_builtins_follow_catalog_methods(self):
        methods = effective_payment_methods([PaymentMethod(id="gcash", name="GCash")])

        assert [m.id for m in methods] == ["gcash", "gcash-maya", "bank-transfer", "cash"]

    def test_catalog_method_overrides_builtin(self):
        methods = effective_payment_methods([PaymentMethod(id="cash", name="Cash on pickup")])

        assert [m.id for m in methods].count("cash") == 1
        assert payment_method_name(methods, "cash") == "Cash on pickup"

    def test_unknown_method_name_falls_back_to_id(self):
        assert payment_method_name(effective_payment_methods(), "crypto") == "crypto"

    def test_delivery_enabled(self):
        assert delivery_enabled({"delivery_enabled": "true"})
        assert not delivery_enabled({"delivery_enabled": "false"})
        assert not delivery_enabled({})


class TestOrderMessage:

    def test_describe_line(self, cart, addon_item, sized_item, large, syringe, cotton):
        plain = cart.add_item(sized_item, 1)
        sized = cart.add_item(sized_item, 2, large)
        extras = cart.add_item(addon_item, 1, None, [SelectedAddOn(syringe, 2), SelectedAddOn(cotton, 1)])

        assert describe_line(plain) == "• Vitamin C Syrup"
        assert describe_line(sized) == "• Vitamin C Syrup (Large) [qty 2]"
        assert describe_line(extras) == "• Insulin Pen + Syringe x2, Cotton Balls"

    def test_pickup_message(self, cart, plain_item, pickup_details):
        cart.add_item(plain_item, 2)

        message = compose_order_message(pickup_details, cart.get_lines(), "Gcash/Maya", store_name="Botika RBT")

        assert message.startswith("🛒 Botika RBT INQUIRY")
        assert "👤 Customer: Juan Dela Cruz" in message
        assert "📍 Service: Pickup" in message
        assert "• Paracetamol 500mg [qty 2]" in message
        assert "💰 Estimated total: ₱200.00" in message
        assert "💳 Payment: Gcash/Maya" in message
        assert "Address" not in message
        assert "Notes" not in message
        assert message.endswith("Thank you for choosing Botika RBT! 💊")

    def test_delivery_message(self, cart, plain_item):
        cart.add_item(plain_item)
        details = OrderDetails(customer_name="Ana", contact_number="0918", service_type="delivery",
                               address="12 Rizal St", landmark="near church", notes="ring twice")

        message = compose_order_message(details, cart.get_lines())

        assert "📍 Service: Delivery" in message
        assert "🏠 Address: 12 Rizal St" in message
        assert "🗺️ Landmark: near church" in message
        assert "🛵 DELIVERY" in message
        assert "📝 Notes: ring twice" in message
        assert "💳 Payment: gcash-maya" in message

    def test_lines_keep_cart_order(self, cart, plain_item, sized_item, pickup_details):
        cart.add_item(sized_item)
        cart.add_item(plain_item)

        message = compose_order_message(pickup_details, cart.get_lines())

        assert message.index("Vitamin C Syrup") < message.index("Paracetamol")

    def test_empty_cart_is_rejected(self, pickup_details):
        with pytest.raises(CheckoutError):
            compose_order_message(pickup_details, [])


class TestInquiry:

    def test_inquiry_message(self):
        message = compose_inquiry_message("Do you have insulin?", subject="Stock", store_name="Botika RBT")

        assert message.startswith("📧 GENERAL INQUIRY - Botika RBT")
        assert "📌 Subject: Stock" in message
        assert "Do you have insulin?" in message

    def test_inquiry_without_subject(self):
        assert "Subject" not in compose_inquiry_message("hello")

    def test_blank_inquiry_is_rejected(self):
        with pytest.raises(CheckoutError):
            compose_inquiry_message("  \n ")

    def test_messenger_link(self):
        url = messenger_link("Hi there & thanks", page="Botika.RBT")

        assert url.startswith("https://m.me/Botika.RBT?text=")
        assert " " not in url
        assert unquote(url.split("text=", 1)[1]) == "Hi there & thanks"
