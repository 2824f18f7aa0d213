"""Builds Product records from form submissions."""

import math
from typing import Optional

from src.supplies.models.product import (
    CATEGORY_LABELS,
    CommunicationEquipmentDetails,
    FoodDetails,
    MedicalEquipmentDetails,
    Product,
    ProductCategory,
    ProductDetails,
    ToolDetails,
)
from src.supplies.models.product_form import ProductForm
from src.supplies.services.errors import ProductValidationError

# Text fields that must be filled in for each category
REQUIRED_FIELDS = {
    ProductCategory.FOOD: ("expiration_date", "food_type", "calories_per_serving"),
    ProductCategory.MEDICAL_EQUIPMENT: ("specific_use", "sterilization_date", "udt"),
    ProductCategory.TOOL: ("function", "material"),
    ProductCategory.COMMUNICATION_EQUIPMENT: ("comm_type", "frequency_range", "power"),
}


def build_product(form: ProductForm, product_id: Optional[str] = None) -> Product:
    """
    Build a Product from the values of a product form.

    Args:
        form: Category selection plus the entered field values.
        product_id: Id to stamp on the record instead of the form's id,
            used when replacing an existing record.

    Returns:
        The new Product.

    Raises:
        ProductValidationError: If a required field is empty, a text field
            holds characters that cannot be stored, a numeric field does not
            parse to a finite number, or a quantity is negative.
    """
    record_id = product_id if product_id is not None else form.id
    if _is_blank(record_id) or _is_blank(form.name) or _is_blank(form.weight_kg) or _is_blank(form.volume_m3):
        raise ProductValidationError("Complete all basic fields (ID, Name, Weight, Volume)")

    _check_text("id", record_id)
    _check_text("name", form.name)
    weight_kg = _parse_number(form, "weight_kg", float)
    volume_m3 = _parse_number(form, "volume_m3", float)

    for field_name in REQUIRED_FIELDS[form.category]:
        value = getattr(form, field_name)
        if _is_blank(value):
            raise ProductValidationError(f"Complete all {CATEGORY_LABELS[form.category]} fields")
        _check_text(field_name, value)

    details = _build_details(form)

    return Product(
        id=record_id,
        name=form.name,
        weight_kg=weight_kg,
        volume_m3=volume_m3,
        details=details,
    )


def _build_details(form: ProductForm) -> ProductDetails:
    if form.category == ProductCategory.FOOD:
        return FoodDetails(
            expiration_date=form.expiration_date,
            food_type=form.food_type,
            calories_per_serving=_parse_number(form, "calories_per_serving", int),
        )
    if form.category == ProductCategory.MEDICAL_EQUIPMENT:
        return MedicalEquipmentDetails(
            specific_use=form.specific_use,
            is_sterilized=form.is_sterilized,
            sterilization_date=form.sterilization_date,
            udt=form.udt,
        )
    if form.category == ProductCategory.TOOL:
        return ToolDetails(
            function=form.function,
            material=form.material,
            requires_power=form.requires_power,
        )
    return CommunicationEquipmentDetails(
        comm_type=form.comm_type,
        frequency_range=_parse_number(form, "frequency_range", float),
        power=_parse_number(form, "power", int),
    )


def _parse_number(form: ProductForm, field_name: str, number_type):
    raw = getattr(form, field_name).strip()
    try:
        if "_" in raw:
            raise ValueError(raw)
        value = number_type(raw)
    except ValueError:
        raise ProductValidationError(f"Invalid numeric format in field '{field_name}'") from None

    if not math.isfinite(value):
        raise ProductValidationError(f"Invalid numeric format in field '{field_name}'")
    if value < 0:
        raise ProductValidationError(f"Field '{field_name}' must not be negative")
    return value


def _check_text(field_name: str, value: str) -> None:
    """Reject text that cannot be written out as UTF-8, e.g. lone surrogates."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ProductValidationError(f"Invalid characters in field '{field_name}'") from None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
