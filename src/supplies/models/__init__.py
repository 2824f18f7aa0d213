"""Data models module."""

from src.supplies.models.product import (
    CATEGORY_LABELS,
    CommunicationEquipmentDetails,
    FoodDetails,
    MedicalEquipmentDetails,
    Product,
    ProductCategory,
    ProductDecodeError,
    ProductDetails,
    ToolDetails,
    product_from_dict,
)
from src.supplies.models.product_form import ProductForm

__all__ = [
    "CATEGORY_LABELS",
    "CommunicationEquipmentDetails",
    "FoodDetails",
    "MedicalEquipmentDetails",
    "Product",
    "ProductCategory",
    "ProductDecodeError",
    "ProductDetails",
    "ProductForm",
    "ToolDetails",
    "product_from_dict",
]
