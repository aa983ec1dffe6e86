"""
Common Error Constants

Centralized error messages shared by the cart engine, checkout and routers.
"""

# Cart errors
ERROR_ITEM_UNAVAILABLE = "Item is currently unavailable"
ERROR_INVALID_QUANTITY = "quantity must be a positive integer"
ERROR_INVALID_ADD_ON_COUNT = "add-on count must be a positive integer"
ERROR_UNKNOWN_VARIATION = "Variation does not belong to this item"
ERROR_UNKNOWN_ADD_ON = "Add-on does not belong to this item"
ERROR_CART_EMPTY = "Cart is empty"

# Catalog errors
ERROR_ITEM_NOT_FOUND = "Item not found"
ERROR_CATALOG_UNAVAILABLE = "Catalog service unavailable"

# Checkout errors
ERROR_NAME_REQUIRED = "Customer name is required"
ERROR_CONTACT_REQUIRED = "Contact number is required"
ERROR_ADDRESS_REQUIRED = "Address is required for delivery"
ERROR_DELIVERY_DISABLED = "Delivery is not available"
ERROR_MESSAGE_REQUIRED = "Message is required"


class CartValidationError(ValueError):
    """Raised when a cart operation is rejected at the call boundary."""


class CheckoutError(ValueError):
    """Raised when an order cannot be composed from the given details."""
