import logging

from src.supplies.config import get_config
from src.supplies.models import ProductCategory, ProductForm
from src.supplies.services import InventoryError, InventoryService


def main():
    """Walk through a short session: add supplies, edit one, remove one, save."""
    logging.basicConfig(level=get_config().logging.level)
    service = InventoryService()

    forms = [
        ProductForm(category=ProductCategory.FOOD, id="F-001", name="Freeze-dried lasagna",
                    weight_kg="0.35", volume_m3="0.002", expiration_date="2027-03-01",
                    food_type="Entree", calories_per_serving="540"),
        ProductForm(category=ProductCategory.MEDICAL_EQUIPMENT, id="M-001", name="Suture kit",
                    weight_kg="0.4", volume_m3="0.001", specific_use="Wound closure",
                    is_sterilized=True, sterilization_date="2026-09-30", udt="UDT-7781"),
        ProductForm(category=ProductCategory.TOOL, id="T-001", name="Multi-wrench",
                    weight_kg="1.2", volume_m3="0.003", function="Repair of panel fasteners",
                    material="Titanium alloy", requires_power=False),
        ProductForm(category=ProductCategory.COMMUNICATION_EQUIPMENT, id="C-001", name="S-band radio",
                    weight_kg="6.5", volume_m3="0.02", comm_type="Radio",
                    frequency_range="2200", power="120"),
    ]

    for form in forms:
        try:
            print(service.create(form))
        except InventoryError as e:
            print(f"Skipped {form.id}: {e}")

    print(service.update("F-001", forms[0].model_copy(update={"calories_per_serving": "560"})))
    removed = service.delete("C-001")
    print(f"Removed: {removed.summary() if removed else 'nothing'}")

    for product in service.read_all():
        print(f"  [{product.category_label}] {product.summary()}")
    print(service.statistics())
    print(service.save())


if __name__ == "__main__":
    main()
