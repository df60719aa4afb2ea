import uuid
from datetime import datetime, timezone

from storefront.mappers.category_mapper import CategoryMapper
from storefront.mappers.order_mapper import OrderMapper
from storefront.mappers.product_mapper import ProductMapper
from storefront.models.category import Category
from storefront.models.order import Address, Order
from storefront.models.product import Product
from storefront.schemas.category import CategoryRequest
from storefront.schemas.order import AddressRequest, OrderRequest
from storefront.schemas.product import ProductRequest


class TestProductMapper:
    mapper = ProductMapper()

    def test_none_in_none_out(self):
        assert self.mapper.map_product_to_product_response(None) is None
        assert self.mapper.map_product_request_to_product(None) is None

    def test_maps_every_outward_field(self):
        category = Category(id=7, uid=uuid.uuid4(), name="Shoes")
        product = Product(
            id=3,
            uid=uuid.uuid4(),
            name="Sneaker",
            sku="SNK-1",
            regular_price=99.99,
            discount_price=79.99,
            discount_price_end_date=datetime(2026, 12, 31, tzinfo=timezone.utc),
            lowest_price=74.5,
            description="Long",
            short_description="Short",
            note="n",
            published=True,
            quantity=12,
            categories=[category],
        )

        response = self.mapper.map_product_to_product_response(product)

        assert response.uid == product.uid
        assert response.name == "Sneaker"
        assert response.sku == "SNK-1"
        assert response.regular_price == 99.99
        assert response.discount_price == 79.99
        assert response.discount_price_end_date == product.discount_price_end_date
        assert response.lowest_price == 74.5
        assert response.published is True
        assert response.quantity == 12
        assert [c.uid for c in response.categories] == [category.uid]
        assert "id" not in response.model_dump()

    def test_partial_request_leaves_other_fields_empty(self):
        product = self.mapper.map_product_request_to_product(ProductRequest(name="Bare"))

        assert product.name == "Bare"
        assert isinstance(product.uid, uuid.UUID)
        assert product.id is None
        assert product.sku is None
        assert product.regular_price is None
        assert product.quantity is None
        assert product.categories == []

    def test_partial_product_maps_without_raising(self):
        response = self.mapper.map_product_to_product_response(
            Product(name="Bare", categories=[Category(name="Loose")])
        )

        assert response.uid is None
        assert response.name == "Bare"
        assert response.categories[0].uid is None
        assert response.categories[0].name == "Loose"


class TestCategoryMapper:
    mapper = CategoryMapper()

    def test_none_in_none_out(self):
        assert self.mapper.map_category_to_category_response(None) is None
        assert self.mapper.map_category_request_to_category(None) is None

    def test_maps_parent_uid_not_parent_id(self):
        parent_uid = uuid.uuid4()
        category = Category(
            id=2, uid=uuid.uuid4(), parent_id=1, parent_uid=parent_uid,
            name="Boots", icon="boot", image_path="/img/boots.png",
        )

        response = self.mapper.map_category_to_category_response(category)

        assert response.parent_category_uid == parent_uid
        assert response.image_path == "/img/boots.png"
        dumped = response.model_dump(by_alias=True)
        assert "parentCategoryUid" in dumped
        assert "parentId" not in dumped and "id" not in dumped

    def test_request_carries_parent_uid(self):
        parent_uid = uuid.uuid4()
        category = self.mapper.map_category_request_to_category(
            CategoryRequest(name="Boots", parent_category_uid=parent_uid)
        )

        assert category.parent_uid == parent_uid
        assert category.parent_id is None
        assert category.description is None

    def test_partial_category_maps_without_raising(self):
        response = self.mapper.map_category_to_category_response(Category(name="Boots"))

        assert response.uid is None
        assert response.parent_category_uid is None
        assert response.name == "Boots"


class TestOrderMapper:
    mapper = OrderMapper()

    def test_none_in_none_out(self):
        assert self.mapper.map_order_to_order_details_response(None) is None
        assert self.mapper.map_order_request_to_order(None) is None

    def test_round_trips_address_fields(self):
        request = OrderRequest(
            delivery_method="COURIER",
            customer_email="buyer@example.com",
            customer_phone="+48123456789",
            delivery_address=AddressRequest(
                street="Main 1", city="Krakow", postal_code="30-001", country="PL"
            ),
            payment_method="CARD",
        )

        order = self.mapper.map_order_request_to_order(request)
        order.order_date = datetime(2026, 1, 1, tzinfo=timezone.utc)
        response = self.mapper.map_order_to_order_details_response(order)

        assert response.order_uid == order.uid
        assert response.delivery_address.city == "Krakow"
        assert response.delivery_address.postal_code == "30-001"
        assert response.customer_phone == "+48123456789"

    def test_order_without_address(self):
        order = Order(uid=uuid.uuid4(), delivery_method="PICKUP", delivery_address=None)

        response = self.mapper.map_order_to_order_details_response(order)

        assert response.delivery_address is None
        assert response.customer_email is None

    def test_partial_order_maps_without_raising(self):
        response = self.mapper.map_order_to_order_details_response(
            Order(delivery_method="PICKUP")
        )

        assert response.order_uid is None
        assert response.delivery_method == "PICKUP"
        assert response.order_date is None

    def test_address_model_defaults(self):
        assert Address() == Address(street=None, city=None, postal_code=None, country=None)
