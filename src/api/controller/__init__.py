"""HTTP controllers."""

from src.api.controller.product_controller import get_inventory_service
from src.api.controller.product_controller import router as product_router

__all__ = ["get_inventory_service", "product_router"]
