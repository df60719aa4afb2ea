"""
Order service: placing orders and looking them up by UUID.
"""
from uuid import UUID
import logging

from storefront.core.exceptions import OrderNotFoundError
from storefront.mappers.order_mapper import OrderMapper
from storefront.repositories.order_repository import OrderRepository
from storefront.schemas.order import OrderDetailsResponse, OrderRequest

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, order_repository: OrderRepository, order_mapper: OrderMapper) -> None:
        logger.trace("Initializing OrderService")
        self._repo = order_repository
        self._mapper = order_mapper

    def place_order(self, request: OrderRequest) -> OrderDetailsResponse:
        logger.info("Placing order for %s", request.customer_email)
        order = self._repo.create(self._mapper.map_order_request_to_order(request))
        logger.info("Order placed uid=%s", order.uid)
        return self._mapper.map_order_to_order_details_response(order)

    def get_order_by_uuid(self, order_uid: UUID) -> OrderDetailsResponse:
        logger.info("Fetching order uid=%s", order_uid)
        order = self._repo.get_by_uid(order_uid)
        if order is None:
            logger.warning("Order uid=%s not found", order_uid)
            raise OrderNotFoundError.for_uid(order_uid)
        return self._mapper.map_order_to_order_details_response(order)

    def get_orders(self) -> list[OrderDetailsResponse]:
        logger.info("Listing orders")
        return [
            self._mapper.map_order_to_order_details_response(o)
            for o in self._repo.list_all()
        ]
