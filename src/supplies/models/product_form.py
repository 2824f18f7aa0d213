"""Request model carrying a category selection plus raw field values."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.supplies.models.product import ProductCategory


class ProductForm(BaseModel):
    """Values as entered in a product form.

    Text inputs arrive as strings and are parsed when the record is built,
    so a non-numeric weight produces a validation message rather than a
    schema error. Only the selected category's fields need to be filled in.
    """

    # JSON numbers are accepted and parsed like typed-in text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    category: ProductCategory
    id: Optional[str] = None
    name: Optional[str] = None
    weight_kg: Optional[str] = None
    volume_m3: Optional[str] = None

    # Food
    expiration_date: Optional[str] = None
    food_type: Optional[str] = None
    calories_per_serving: Optional[str] = None

    # Medical equipment
    specific_use: Optional[str] = None
    is_sterilized: bool = False
    sterilization_date: Optional[str] = None
    udt: Optional[str] = None

    # Tool
    function: Optional[str] = None
    material: Optional[str] = None
    requires_power: bool = False

    # Communication equipment
    comm_type: Optional[str] = None
    frequency_range: Optional[str] = None
    power: Optional[str] = None
