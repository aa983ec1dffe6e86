"""Checkout package: order details and outbound inquiry messages."""
from .models import (
    OrderDetails,
    ServiceType,
    delivery_enabled,
    effective_payment_methods,
    payment_method_name,
)
from .message import compose_inquiry_message, compose_order_message, describe_line, messenger_link

__all__ = [
    "OrderDetails",
    "ServiceType",
    "delivery_enabled",
    "effective_payment_methods",
    "payment_method_name",
    "compose_inquiry_message",
    "compose_order_message",
    "describe_line",
    "messenger_link",
]
