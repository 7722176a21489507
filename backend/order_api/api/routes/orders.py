"""Order Routes — HTTP surface for order and item CRUD under /order.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler (400 otherwise)
    - Non-numeric or out-of-range productId rejected by path typing (400)
    - Status codes: 201 create, 204 delete, 200 everything else;
      error codes come from the typed errors via the global handlers

Design Decisions:
    - GET /list declared before /{order_id}: path order decides the match
    - OrderService built per request from the process-wide session manager
"""

import logging

from fastapi import APIRouter, Depends, Path, Response, status

from order_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from order_api.schemas.order import (
    INT32_MAX, INT32_MIN, ItemUpdate, OrderCreate, OrderHeaderUpdate,
)
from order_api.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/order", tags=["orders"])


def get_order_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> OrderService:
    return OrderService(db_manager)


@router.get("/list")
async def list_orders(service: OrderService = Depends(get_order_service)):
    """List order headers, newest first."""
    return await service.list_all_orders()


@router.post("/", status_code=status.HTTP_201_CREATED)
@router.post("", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_order(
    body: OrderCreate, service: OrderService = Depends(get_order_service),
):
    """Create an order and all its items in one transaction."""
    result = await service.create_order(body)
    return {
        "message": "Order created successfully.",
        "orderId": result["orderId"],
        "data": result["data"],
    }


@router.get("/{order_id}")
async def get_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    """Order header with its items."""
    return await service.get_order_details(order_id)


@router.put("/{order_id}")
async def update_order(
    order_id: str,
    body: OrderHeaderUpdate,
    service: OrderService = Depends(get_order_service),
):
    """Update value and creation date of an order header."""
    await service.update_order(order_id, body)
    return {"message": f"Order {order_id} header updated successfully."}


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    """Delete an order; its items are removed by cascade."""
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{order_id}/item/{product_id}")
async def update_order_item(
    order_id: str,
    body: ItemUpdate,
    product_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    service: OrderService = Depends(get_order_service),
):
    """Update quantity and price of one item of an order."""
    await service.update_item_order(order_id, product_id, body.normalized())
    return {
        "message": f"Item {product_id} of order {order_id} updated successfully.",
    }
