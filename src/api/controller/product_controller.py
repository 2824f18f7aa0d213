"""HTTP controller exposing the inventory service."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.supplies.models import ProductForm
from src.supplies.services import (
    DuplicateProductError,
    InventoryService,
    ProductValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

_service: Optional[InventoryService] = None


async def get_inventory_service() -> InventoryService:
    """Return the application-wide inventory service, creating it on first use."""
    global _service
    if _service is None:
        _service = InventoryService()
    return _service


class MessageResponse(BaseModel):
    """Status message returned by mutating operations."""

    message: str


class ProductCreatedResponse(BaseModel):
    message: str
    product: Dict[str, Any]


class SlotsResponse(BaseModel):
    """Every slot of the store; empty slots are null."""

    slots: List[Optional[Dict[str, Any]]]
    statistics: str


# Routes are async so that every call reaches the service on the event loop thread.


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductCreatedResponse)
async def create_product(
    form: ProductForm,
    service: InventoryService = Depends(get_inventory_service),
) -> ProductCreatedResponse:
    try:
        message = service.create(form)
    except ProductValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateProductError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    product = service.read_by_id(form.id)
    return ProductCreatedResponse(message=message, product=product.to_dict())


@router.get("", response_model=SlotsResponse)
async def read_products(service: InventoryService = Depends(get_inventory_service)) -> SlotsResponse:
    slots = [product.to_dict() if product is not None else None for product in service.read()]
    return SlotsResponse(slots=slots, statistics=service.statistics())


@router.post("/save", response_model=MessageResponse)
async def save_products(service: InventoryService = Depends(get_inventory_service)) -> MessageResponse:
    return MessageResponse(message=service.save())


@router.post("/load", response_model=MessageResponse)
async def load_products(service: InventoryService = Depends(get_inventory_service)) -> MessageResponse:
    return MessageResponse(message=service.load())


@router.get("/{product_id}")
async def read_product(
    product_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> Dict[str, Any]:
    product = service.read_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product with ID {product_id} not found.")
    return product.to_dict()


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: str,
    form: ProductForm,
    service: InventoryService = Depends(get_inventory_service),
) -> MessageResponse:
    if not service.store.exists(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product with ID {product_id} not found.")

    try:
        message = service.update(product_id, form)
    except ProductValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message=message)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> Dict[str, Any]:
    removed = service.delete(product_id)
    if removed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Product with ID {product_id} not found.")

    logger.info(f"Product {product_id} removed via API")
    return removed.to_dict()
