"""Errors reported back to the caller as a message."""


class InventoryError(Exception):
    """Base class for inventory errors."""

    pass


class ProductValidationError(InventoryError):
    """Raised when form values cannot be turned into a valid product."""

    pass


class DuplicateProductError(InventoryError):
    """Raised when a product id is already in use by a live record."""

    pass
