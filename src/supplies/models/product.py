"""Product data models for mission supply records.

A product carries the shared base fields and exactly one variant detail
object. The variant is identified by its ``ProductCategory`` tag.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Type, Union


class ProductCategory(str, Enum):
    FOOD = "food"
    MEDICAL_EQUIPMENT = "medical_equipment"
    TOOL = "tool"
    COMMUNICATION_EQUIPMENT = "communication_equipment"


CATEGORY_LABELS = {
    ProductCategory.FOOD: "Food",
    ProductCategory.MEDICAL_EQUIPMENT: "Medical Equipment",
    ProductCategory.TOOL: "Tool",
    ProductCategory.COMMUNICATION_EQUIPMENT: "Communication Equipment",
}


class ProductDecodeError(Exception):
    """Raised when a stored record cannot be turned back into a Product."""

    pass


@dataclass(frozen=True)
class FoodDetails:
    category: ClassVar[ProductCategory] = ProductCategory.FOOD

    expiration_date: str
    food_type: str
    calories_per_serving: int


@dataclass(frozen=True)
class MedicalEquipmentDetails:
    category: ClassVar[ProductCategory] = ProductCategory.MEDICAL_EQUIPMENT

    specific_use: str
    is_sterilized: bool
    sterilization_date: str
    udt: str

    def requires_resterilization(self) -> bool:
        """True when the item is not sterilized or has no sterilization date."""
        return not self.is_sterilized or not self.sterilization_date

    def fit_for_critical_procedures(self) -> bool:
        return self.is_sterilized and bool(self.sterilization_date)

    def safety_info(self, name: str) -> str:
        if self.is_sterilized:
            status = f"STERILIZED (Date: {self.sterilization_date})"
        else:
            status = "NOT STERILIZED"
        return f"Equipment: {name} - Use: {self.specific_use} - Status: {status} - UDT: {self.udt}"


@dataclass(frozen=True)
class ToolDetails:
    category: ClassVar[ProductCategory] = ProductCategory.TOOL

    EVA_MATERIALS: ClassVar[tuple] = ("titanium", "stainless steel", "composite")
    EMERGENCY_KEYWORDS: ClassVar[tuple] = ("cutting", "escape", "survival")

    function: str
    material: str
    requires_power: bool

    def is_eva_suitable(self) -> bool:
        """Whether the material holds up outside the vehicle."""
        material = (self.material or "").lower()
        return any(candidate in material for candidate in self.EVA_MATERIALS)

    def packing_priority(self, weight_kg: float) -> int:
        """Score used to order tools when packing; higher packs first."""
        priority = 1
        if self.function and "repair" in self.function.lower():
            priority += 2
        if not self.requires_power:
            priority += 1
        if weight_kg < 2.0:
            priority += 1
        return priority

    def is_emergency_tool(self) -> bool:
        function = (self.function or "").lower()
        return any(keyword in function for keyword in self.EMERGENCY_KEYWORDS)

    def technical_description(self, name: str) -> str:
        power_type = "Electric" if self.requires_power else "Manual"
        return f"{name} - {self.function} ({self.material}, {power_type})"


@dataclass(frozen=True)
class CommunicationEquipmentDetails:
    category: ClassVar[ProductCategory] = ProductCategory.COMMUNICATION_EQUIPMENT

    comm_type: str
    frequency_range: float  # MHz
    power: int  # W

    def estimated_range(self) -> float:
        """Simplified free-space range estimate."""
        if self.frequency_range == 0:
            return 0.0
        return (self.power * 10) / (self.frequency_range / 1000)

    def is_long_distance_capable(self) -> bool:
        return self.power > 100 and self.frequency_range < 3000


ProductDetails = Union[
    FoodDetails,
    MedicalEquipmentDetails,
    ToolDetails,
    CommunicationEquipmentDetails,
]

DETAILS_BY_CATEGORY: Dict[ProductCategory, Type] = {
    FoodDetails.category: FoodDetails,
    MedicalEquipmentDetails.category: MedicalEquipmentDetails,
    ToolDetails.category: ToolDetails,
    CommunicationEquipmentDetails.category: CommunicationEquipmentDetails,
}

BASE_FIELDS = ("id", "name", "weight_kg", "volume_m3")

# Coercions applied to decoded values; anything not listed stays a string.
_FIELD_TYPES: Dict[str, Any] = {
    "weight_kg": float,
    "volume_m3": float,
    "calories_per_serving": int,
    "is_sterilized": bool,
    "requires_power": bool,
    "frequency_range": float,
    "power": int,
}


@dataclass
class Product:
    """A mission supply record: base fields plus one variant."""

    id: str
    name: str
    weight_kg: float
    volume_m3: float
    details: ProductDetails

    @property
    def category(self) -> ProductCategory:
        return self.details.category

    @property
    def category_label(self) -> str:
        return CATEGORY_LABELS[self.category]

    def density(self) -> float:
        if self.volume_m3 == 0:
            return 0.0
        return self.weight_kg / self.volume_m3

    def is_lightweight(self) -> bool:
        return self.weight_kg < 1.0

    def is_compact(self) -> bool:
        return self.volume_m3 < 0.1

    def is_valid(self) -> bool:
        """Check the base fields: non-empty id and name, non-negative sizes."""
        return (
            bool(self.id)
            and bool(self.name)
            and self.weight_kg >= 0
            and self.volume_m3 >= 0
        )

    def summary(self) -> str:
        return f"{self.id} - {self.name} ({self.weight_kg:.2f} kg, {self.volume_m3:.2f} m³)"

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a JSON-friendly dict tagged with the category."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "weight_kg": self.weight_kg,
            "volume_m3": self.volume_m3,
            "category": self.category.value,
        }
        data.update(asdict(self.details))
        return data


def product_from_dict(data: Dict[str, Any]) -> Product:
    """
    Rebuild a Product from the flat dict produced by ``Product.to_dict``.

    Args:
        data: Flat record with base fields, ``category`` and variant fields.

    Returns:
        The decoded Product.

    Raises:
        ProductDecodeError: If the category is unknown or a field is missing
            or has the wrong shape.
    """
    if not isinstance(data, dict):
        raise ProductDecodeError(f"Expected an object, got {type(data).__name__}")

    try:
        category = ProductCategory(data["category"])
    except KeyError as e:
        raise ProductDecodeError("Record has no category") from e
    except ValueError as e:
        raise ProductDecodeError(f"Unknown category: {data['category']!r}") from e

    details_cls = DETAILS_BY_CATEGORY[category]
    detail_names = [f.name for f in fields(details_cls)]

    try:
        base = {name: _coerce(name, data[name]) for name in BASE_FIELDS}
        details = details_cls(**{name: _coerce(name, data[name]) for name in detail_names})
    except KeyError as e:
        raise ProductDecodeError(f"Record is missing field {e.args[0]!r}") from e

    return Product(details=details, **base)


def _coerce(name: str, value: Any) -> Any:
    expected = _FIELD_TYPES.get(name, str)
    if expected is bool:
        if not isinstance(value, bool):
            raise ProductDecodeError(f"Field {name!r} must be a boolean, got {value!r}")
        return value
    if expected in (int, float):
        # bool is an int subclass; reject it for numeric fields
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ProductDecodeError(f"Field {name!r} must be numeric, got {value!r}")
        return expected(value)
    if not isinstance(value, str):
        raise ProductDecodeError(f"Field {name!r} must be a string, got {value!r}")
    return value
