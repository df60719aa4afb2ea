"""
Translation between Order entities and their transfer objects.
"""
from typing import Optional
import uuid

from storefront.models.order import Address, Order
from storefront.schemas.order import AddressResponse, OrderDetailsResponse, OrderRequest


class OrderMapper:
    """Stateless Order <-> DTO mapper."""

    def map_order_to_order_details_response(
        self, order: Optional[Order]
    ) -> Optional[OrderDetailsResponse]:
        if order is None:
            return None
        address = order.delivery_address
        return OrderDetailsResponse(
            order_uid=order.uid,
            delivery_method=order.delivery_method,
            customer_email=order.customer_email,
            delivery_address=AddressResponse(
                street=address.street,
                city=address.city,
                postal_code=address.postal_code,
                country=address.country,
            ) if address is not None else None,
            payment_method=order.payment_method,
            order_date=order.order_date,
            customer_phone=order.customer_phone,
        )

    def map_order_request_to_order(self, request: Optional[OrderRequest]) -> Optional[Order]:
        """Build a new, unsaved Order; the order date is stamped on insert."""
        if request is None:
            return None
        address = request.delivery_address
        return Order(
            uid=uuid.uuid4(),
            delivery_method=request.delivery_method,
            customer_email=request.customer_email,
            customer_phone=request.customer_phone,
            delivery_address=Address(
                street=address.street,
                city=address.city,
                postal_code=address.postal_code,
                country=address.country,
            ) if address is not None else None,
            payment_method=request.payment_method,
        )
