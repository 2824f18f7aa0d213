"""Tests for building products from form submissions."""

import pytest

from src.supplies.models import (
    CommunicationEquipmentDetails,
    FoodDetails,
    MedicalEquipmentDetails,
    ProductCategory,
    ProductForm,
    ToolDetails,
)
from src.supplies.services import ProductValidationError, build_product

BASE = {"id": "S-1", "name": "Supply", "weight_kg": "1.25", "volume_m3": "0.01"}


class TestBuildProduct:
    """Test the happy path for every category."""

    def test_food(self):
        form = ProductForm(
            category=ProductCategory.FOOD,
            expiration_date="2027-02-02",
            food_type="Dessert",
            calories_per_serving="320",
            **BASE,
        )

        product = build_product(form)

        assert product.id == "S-1"
        assert product.weight_kg == 1.25
        assert product.volume_m3 == 0.01
        assert product.details == FoodDetails("2027-02-02", "Dessert", 320)

    def test_medical_equipment(self):
        form = ProductForm(
            category=ProductCategory.MEDICAL_EQUIPMENT,
            specific_use="Airway",
            is_sterilized=True,
            sterilization_date="2026-08-08",
            udt="UDT-2",
            **BASE,
        )

        assert build_product(form).details == MedicalEquipmentDetails("Airway", True, "2026-08-08", "UDT-2")

    def test_tool(self):
        form = ProductForm(
            category=ProductCategory.TOOL,
            function="Repair",
            material="Titanium",
            requires_power=True,
            **BASE,
        )

        assert build_product(form).details == ToolDetails("Repair", "Titanium", True)

    def test_communication_equipment(self):
        form = ProductForm(
            category=ProductCategory.COMMUNICATION_EQUIPMENT,
            comm_type="Radio",
            frequency_range="2250.5",
            power=" 40 ",
            **BASE,
        )

        assert build_product(form).details == CommunicationEquipmentDetails("Radio", 2250.5, 40)

    def test_product_id_override(self):
        """Test that an explicit id replaces the form's id."""
        form = ProductForm(category=ProductCategory.TOOL, function="Repair", material="Steel", **BASE)

        assert build_product(form, product_id="KEEP").id == "KEEP"

    def test_other_category_fields_are_ignored(self):
        """Test that only the selected category's fields are used."""
        form = ProductForm(
            category=ProductCategory.TOOL,
            function="Repair",
            material="Steel",
            calories_per_serving="not a number",
            **BASE,
        )

        assert isinstance(build_product(form).details, ToolDetails)


class TestValidation:
    """Test the messages reported for bad form values."""

    @pytest.mark.parametrize("missing", ["id", "name", "weight_kg", "volume_m3"])
    def test_missing_basic_field(self, missing):
        values = dict(BASE, **{missing: "  "})
        form = ProductForm(category=ProductCategory.TOOL, function="Repair", material="Steel", **values)

        with pytest.raises(ProductValidationError, match=r"Complete all basic fields \(ID, Name, Weight, Volume\)"):
            build_product(form)

    @pytest.mark.parametrize(
        "category, label",
        [
            (ProductCategory.FOOD, "Food"),
            (ProductCategory.MEDICAL_EQUIPMENT, "Medical Equipment"),
            (ProductCategory.TOOL, "Tool"),
            (ProductCategory.COMMUNICATION_EQUIPMENT, "Communication Equipment"),
        ],
    )
    def test_missing_variant_fields(self, category, label):
        form = ProductForm(category=category, **BASE)

        with pytest.raises(ProductValidationError, match=f"Complete all {label} fields"):
            build_product(form)

    def test_non_numeric_weight(self):
        form = ProductForm(category=ProductCategory.TOOL, function="Repair", material="Steel",
                           **dict(BASE, weight_kg="heavy"))

        with pytest.raises(ProductValidationError, match="Invalid numeric format in field 'weight_kg'"):
            build_product(form)

    def test_fractional_calories(self):
        form = ProductForm(
            category=ProductCategory.FOOD,
            expiration_date="2027-02-02",
            food_type="Dessert",
            calories_per_serving="320.5",
            **BASE,
        )

        with pytest.raises(ProductValidationError, match="calories_per_serving"):
            build_product(form)

    def test_negative_power(self):
        form = ProductForm(
            category=ProductCategory.COMMUNICATION_EQUIPMENT,
            comm_type="Radio",
            frequency_range="100",
            power="-5",
            **BASE,
        )

        with pytest.raises(ProductValidationError, match="Field 'power' must not be negative"):
            build_product(form)

    def test_negative_volume(self):
        form = ProductForm(category=ProductCategory.TOOL, function="Repair", material="Steel",
                           **dict(BASE, volume_m3="-0.1"))

        with pytest.raises(ProductValidationError, match="volume_m3"):
            build_product(form)

    @pytest.mark.parametrize("raw", ["nan", "NaN", "inf", "-inf", "Infinity", "1_000"])
    def test_non_finite_or_underscored_weight(self, raw):
        """Test that only plain decimal notation is accepted."""
        form = ProductForm(category=ProductCategory.TOOL, function="Repair", material="Steel",
                           **dict(BASE, weight_kg=raw))

        with pytest.raises(ProductValidationError, match="Invalid numeric format in field 'weight_kg'"):
            build_product(form)

    def test_underscored_power(self):
        form = ProductForm(
            category=ProductCategory.COMMUNICATION_EQUIPMENT,
            comm_type="Radio",
            frequency_range="100",
            power="1_0",
            **BASE,
        )

        with pytest.raises(ProductValidationError, match="Invalid numeric format in field 'power'"):
            build_product(form)

    @pytest.mark.parametrize("field_name", ["name", "material"])
    def test_unencodable_text(self, field_name):
        """Test that text which cannot be saved as UTF-8 is rejected up front."""
        values = dict(BASE, category=ProductCategory.TOOL, function="Repair", material="Steel")
        values[field_name] = "x\ud800"
        # Skip schema validation so the raw text reaches the builder
        form = ProductForm.model_construct(**values)

        with pytest.raises(ProductValidationError, match=f"Invalid characters in field '{field_name}'"):
            build_product(form)


class TestErrors:
    """Test the service exception family."""

    def test_errors_share_a_base(self):
        from src.supplies.services.errors import (
            DuplicateProductError,
            InventoryError,
            ProductValidationError as ValidationError,
        )

        assert ValidationError is ProductValidationError
        assert issubclass(ValidationError, InventoryError)
        assert issubclass(DuplicateProductError, InventoryError)
