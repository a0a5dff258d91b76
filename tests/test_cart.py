"""
Cart API tests: stock-aware quantity merge, clearing and the cart-items cache.
"""
from decimal import Decimal

import pytest
from django.core.cache import cache

from cart.models import Cart, CartItem
from cart.services import CartService, cart_total

pytestmark = pytest.mark.django_db


def put_cart(client, product, quantity, path="/api/cart"):
    return client.put(path, {"product_id": product.id, "quantity": quantity}, format="json")


def line_quantity(user, product):
    item = CartItem.objects.filter(cart__user=user, product=product).first()
    return item.quantity if item else None


class TestNewLine:
    def test_adds_a_product_to_cart(self, auth_client, user, make_product):
        product = make_product(stock=10)

        response = put_cart(auth_client, product, 2)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Cart updated successfully"
        assert len(body["data"]) == 1
        assert body["data"][0]["product_id"] == product.id
        assert body["data"][0]["quantity"] == 2
        assert body["totalPrice"] == 50.0
        assert line_quantity(user, product) == 2

    def test_prevents_adding_more_than_stock(self, auth_client, user, make_product):
        product = make_product(stock=5)

        response = put_cart(auth_client, product, 10)

        assert response.status_code == 400
        assert response.json()["message"] == "Stock limit exceeded"
        assert line_quantity(user, product) is None

    def test_new_line_may_take_the_whole_stock(self, auth_client, user, make_product):
        product = make_product(stock=5)

        response = put_cart(auth_client, product, 5)

        assert response.status_code == 200
        assert line_quantity(user, product) == 5

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_new_line_needs_positive_quantity(self, auth_client, user, make_product, quantity):
        product = make_product(stock=5)

        response = put_cart(auth_client, product, quantity)

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Product never added before, quantity must be greater than zero!"
        )
        assert line_quantity(user, product) is None

    def test_update_alias_path(self, auth_client, user, make_product):
        product = make_product(stock=10)

        response = put_cart(auth_client, product, 1, path="/api/cart/update")

        assert response.status_code == 200
        assert line_quantity(user, product) == 1


class TestExistingLine:
    def test_increases_quantity_if_product_already_in_cart(self, auth_client, user, make_product):
        product = make_product(stock=10)
        cart = Cart.objects.create(user=user)
        CartItem.objects.create(cart=cart, product=product, quantity=2)

        response = put_cart(auth_client, product, 3)

        assert response.status_code == 200
        assert line_quantity(user, product) == 5

    def test_add_sequence_until_stock_limit(self, auth_client, user, make_product):
        product = make_product(stock=10)

        assert put_cart(auth_client, product, 2).status_code == 200
        assert line_quantity(user, product) == 2

        assert put_cart(auth_client, product, 3).status_code == 200
        assert line_quantity(user, product) == 5

        response = put_cart(auth_client, product, 10)
        assert response.status_code == 400
        assert response.json()["message"] == "Stock limit exceeded"
        assert line_quantity(user, product) == 5

    def test_existing_line_cannot_reach_stock_exactly(self, auth_client, user, make_product):
        # strict bound here, unlike the new-line branch
        product = make_product(stock=10)
        put_cart(auth_client, product, 5)

        response = put_cart(auth_client, product, 5)

        assert response.status_code == 400
        assert response.json()["message"] == "Stock limit exceeded"
        assert line_quantity(user, product) == 5

    def test_existing_line_may_stop_one_below_stock(self, auth_client, user, make_product):
        product = make_product(stock=10)
        put_cart(auth_client, product, 5)

        response = put_cart(auth_client, product, 4)

        assert response.status_code == 200
        assert line_quantity(user, product) == 9

    def test_reduces_quantity(self, auth_client, user, make_product):
        product = make_product(stock=10)
        put_cart(auth_client, product, 5)

        response = put_cart(auth_client, product, -2)

        assert response.status_code == 200
        assert line_quantity(user, product) == 3

    def test_reducing_to_zero_deletes_the_line(self, auth_client, user, make_product):
        product = make_product(stock=10)
        put_cart(auth_client, product, 3)

        response = put_cart(auth_client, product, -3)

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["totalPrice"] == 0
        assert not CartItem.objects.filter(product=product).exists()

    def test_cannot_reduce_below_zero(self, auth_client, user, make_product):
        product = make_product(stock=10)
        put_cart(auth_client, product, 2)

        response = put_cart(auth_client, product, -3)

        assert response.status_code == 400
        assert response.json()["message"] == "You cannot reduce more than the quantity in your cart!"
        assert line_quantity(user, product) == 2


class TestValidation:
    def test_missing_product_id(self, auth_client):
        response = auth_client.put("/api/cart", {"quantity": 1}, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "This field is required."

    def test_unknown_product(self, auth_client):
        response = auth_client.put("/api/cart", {"product_id": 999, "quantity": 1}, format="json")

        assert response.status_code == 400
        assert response.json()["message"] == "The selected product id is invalid."

    def test_quantity_must_be_integer(self, auth_client, make_product):
        product = make_product()

        response = auth_client.put(
            "/api/cart", {"product_id": product.id, "quantity": "many"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["message"] == "A valid integer is required."

    def test_requires_authentication(self, api_client, make_product):
        response = put_cart(api_client, make_product(), 1)

        assert response.status_code == 401


class TestCartSummaryAndClear:
    def test_active_cart_is_created_once(self, auth_client, user):
        first = auth_client.get("/api/cart")
        second = auth_client.get("/api/cart")

        assert first.status_code == 200
        assert first.json()["data"]["status"] == "active"
        assert first.json()["data"]["user_id"] == user.id
        assert first.json()["data"]["id"] == second.json()["data"]["id"]
        assert Cart.objects.filter(user=user, status="active").count() == 1

    def test_clear_is_idempotent(self, auth_client, user, make_product):
        put_cart(auth_client, make_product(), 2)

        first = auth_client.delete("/api/cart")
        second = auth_client.delete("/api/cart")

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["message"] == "Cart items have been cleared"
        assert auth_client.get("/api/cart/items").json()["data"] == []
        assert not CartItem.objects.filter(cart__user=user).exists()

    def test_carts_are_per_user(self, auth_client, other_client, make_product):
        put_cart(auth_client, make_product(), 2)

        response = other_client.get("/api/cart/items")

        assert response.json()["data"] == []


class TestCartItemsCache:
    def test_items_listing_reports_total(self, auth_client, make_product):
        put_cart(auth_client, make_product(price=Decimal("12.50"), stock=10), 2)
        put_cart(auth_client, make_product(title="Chair", price=Decimal("40.00"), stock=3), 1)

        response = auth_client.get("/api/cart/items")

        assert response.status_code == 200
        assert len(response.json()["data"]) == 2
        assert response.json()["totalPrice"] == 65.0

    def test_listing_populates_cache(self, auth_client, user, make_product):
        put_cart(auth_client, make_product(), 1)

        auth_client.get("/api/cart/items")

        cached = cache.get(f"cart_items_user_:{user.id}")
        assert cached is not None
        assert cached[0]["quantity"] == 1

    def test_mutation_invalidates_cached_items(self, auth_client, make_product):
        product = make_product(stock=10)
        put_cart(auth_client, product, 1)
        assert auth_client.get("/api/cart/items").json()["data"][0]["quantity"] == 1

        put_cart(auth_client, product, 2)

        assert auth_client.get("/api/cart/items").json()["data"][0]["quantity"] == 3

    def test_clear_invalidates_cached_items(self, auth_client, make_product):
        put_cart(auth_client, make_product(), 1)
        auth_client.get("/api/cart/items")

        auth_client.delete("/api/cart")

        assert auth_client.get("/api/cart/items").json()["data"] == []

    def test_product_changes_do_not_refresh_cached_items(self, auth_client, make_product):
        product = make_product(price=Decimal("10.00"))
        put_cart(auth_client, product, 1)
        auth_client.get("/api/cart/items")

        product.price = Decimal("99.00")
        product.save()

        response = auth_client.get("/api/cart/items")
        assert response.json()["data"][0]["product"]["price"] == "10.00"
        assert response.json()["totalPrice"] == 10.0


class TestCartService:
    def test_cart_total(self):
        items = [
            {"quantity": 2, "product": {"price": "19.99"}},
            {"quantity": 1, "product": {"price": "0.02"}},
        ]

        assert cart_total(items) == Decimal("40.00")

    def test_cart_total_of_nothing(self):
        assert cart_total([]) == Decimal("0.00")

    def test_update_returns_items_and_total(self, user, make_product):
        product = make_product(price=Decimal("3.00"), stock=10)

        items, total = CartService(user).update(product.id, 3)

        assert [i["quantity"] for i in items] == [3]
        assert total == Decimal("9.00")

    def test_get_active_cart_reuses_existing(self, user):
        service = CartService(user)

        assert service.get_active_cart() == service.get_active_cart()
