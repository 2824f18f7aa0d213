"""Service layer for mission supply records."""

from src.supplies.services.errors import (
    DuplicateProductError,
    InventoryError,
    ProductValidationError,
)
from src.supplies.services.inventory_service import InventoryService
from src.supplies.services.product_factory import build_product
from src.supplies.services.product_store import ProductStore

__all__ = [
    "DuplicateProductError",
    "InventoryError",
    "InventoryService",
    "ProductStore",
    "ProductValidationError",
    "build_product",
]
