"""
Order endpoints:
  POST /orders          – Place an order
  GET  /orders          – List all orders (Admin, 204 when empty)
  GET  /orders/{uid}    – Get the details of an order
"""
from uuid import UUID
import logging

from fastapi import APIRouter, Depends, Response, status

from storefront.core.dependencies import get_order_service, require_admin
from storefront.models.user import User
from storefront.schemas.order import OrderDetailsResponse, OrderRequest
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=OrderDetailsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
)
def place_order(data: OrderRequest, service: OrderService = Depends(get_order_service)):
    """The order UUID and order date are assigned by the server."""
    logger.info("Placing order for %s", data.customer_email)
    return service.place_order(data)


@router.get(
    "",
    response_model=list[OrderDetailsResponse],
    responses={204: {"description": "No orders placed yet"}},
    summary="List all orders (Admin)",
)
def get_orders(
    service: OrderService = Depends(get_order_service),
    _: User = Depends(require_admin),
):
    orders = service.get_orders()
    if not orders:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return orders


@router.get(
    "/{order_uid}",
    response_model=OrderDetailsResponse,
    summary="Get the details of an order",
)
def get_order(order_uid: UUID, service: OrderService = Depends(get_order_service)):
    logger.info("Fetching order uid=%s", order_uid)
    return service.get_order_by_uuid(order_uid)
