"""
Outbound inquiry messages.

Orders and general inquiries are sent as free text through a Messenger
deep link; the shop confirms them by hand.
"""
from typing import Iterable, Optional
from urllib.parse import quote

from storefront import config
from storefront.cart.models import CartLine
from storefront.errors import CheckoutError, ERROR_CART_EMPTY, ERROR_MESSAGE_REQUIRED
from storefront.services.money import format_money, sum_money

from .models import OrderDetails, ServiceType


def describe_line(line: CartLine) -> str:
    """One line of the order text, e.g. "• Name (Large) + Syrup, Pearls x2"."""
    text = f"• {line.name}"
    if line.selected_variation is not None:
        text += f" ({line.selected_variation.name})"
    if line.selected_add_ons:
        text += " + " + ", ".join(selected.label for selected in line.selected_add_ons)
    if line.quantity > 1:
        text += f" [qty {line.quantity}]"
    return text


def compose_order_message(
    details: OrderDetails,
    lines: Iterable[CartLine],
    payment_method_name: Optional[str] = None,
    store_name: Optional[str] = None,
    currency: Optional[str] = None,
) -> str:
    """
    Build the order inquiry text.

    Args:
        details: Validated customer details
        lines: Cart lines in display order
        payment_method_name: Display name of the chosen payment method
        store_name: Store name used in the header and sign-off
        currency: Currency code for the total

    Raises:
        CheckoutError: No lines to order
    """
    lines = list(lines)
    if not lines:
        raise CheckoutError(ERROR_CART_EMPTY)

    store_name = store_name or config.STORE_NAME
    currency = currency or config.CURRENCY
    is_delivery = details.service_type == ServiceType.DELIVERY

    parts = [
        f"🛒 {store_name} INQUIRY",
        "",
        f"👤 Customer: {details.customer_name}",
        f"📞 Contact: {details.contact_number}",
        f"📍 Service: {details.service_type.value.capitalize()}",
    ]
    if is_delivery:
        parts.append(f"🏠 Address: {details.address}")
        if details.landmark:
            parts.append(f"🗺️ Landmark: {details.landmark}")

    parts += ["", "📋 INQUIRY DETAILS:"]
    parts += [describe_line(line) for line in lines]
    if is_delivery:
        parts.append("🛵 DELIVERY")

    total = sum_money(line.total_price for line in lines)
    parts += [
        "",
        f"💰 Estimated total: {format_money(total, currency)}",
        f"💳 Payment: {payment_method_name or details.payment_method}",
    ]
    if details.notes:
        parts += ["", f"📝 Notes: {details.notes}"]

    parts += ["", f"Please confirm this inquiry to proceed. Thank you for choosing {store_name}! 💊"]
    return "\n".join(parts)


def compose_inquiry_message(message: str, subject: str = "", store_name: Optional[str] = None) -> str:
    """Build a general inquiry text. Blank messages are rejected."""
    if not message or not message.strip():
        raise CheckoutError(ERROR_MESSAGE_REQUIRED)

    store_name = store_name or config.STORE_NAME
    parts = [f"📧 GENERAL INQUIRY - {store_name}"]
    if subject and subject.strip():
        parts += ["", f"📌 Subject: {subject.strip()}"]
    parts += [
        "",
        "💬 Message:",
        message.strip(),
        "",
        f"Thank you for contacting {store_name}! We'll get back to you soon. 💊",
    ]
    return "\n".join(parts)


def messenger_link(text: str, page: Optional[str] = None) -> str:
    """Messenger deep link that opens a chat with ``text`` prefilled."""
    page = page or config.MESSENGER_PAGE
    return f"{config.MESSENGER_BASE_URL}/{page}?text={quote(text, safe='')}"
