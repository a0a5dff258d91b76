# order/services.py
import logging
from decimal import Decimal

from django.db import transaction

from cart.services import CartService, cart_total
from product.models import Product
from .models import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order use cases for one authenticated user.
    """

    def __init__(self, user):
        self.user = user
        self.cart_service = CartService(user)

    def list_orders(self):
        qs = Order.objects.prefetch_related("items__product").order_by("-created_at", "-id")
        if not self.user.is_admin:
            qs = qs.filter(user=self.user)
        return qs

    def create_order_from_cart(self):
        """
        Snapshot the current cart items into a new order.

        Returns None when the cart is empty. The cart itself stays active,
        so calling this twice without touching the cart creates two
        identical orders.
        """
        items = self.cart_service.get_cart_items()
        if not items:
            return None

        # cached lines may point at products deleted since
        known_products = set(
            Product.objects.filter(pk__in=[i["product_id"] for i in items]).values_list("pk", flat=True)
        )

        with transaction.atomic():
            order = Order.objects.create(
                user=self.user,
                cart_id=items[0]["cart_id"],
                total=cart_total(items),
            )
            OrderItem.objects.bulk_create([
                OrderItem(
                    order=order,
                    product_id=item["product_id"] if item["product_id"] in known_products else None,
                    product_title=item["product"]["title"],
                    quantity=item["quantity"],
                    unit_price=Decimal(str(item["product"]["price"])),
                )
                for item in items
            ])

        logger.info(
            "Order %s created from cart %s for user %s, total %s",
            order.pk, order.cart_id, self.user.pk, order.total,
        )
        return order

    @staticmethod
    def set_status(order, new_status):
        old_status = order.status
        order.status = new_status
        order.save(update_fields=["status", "updated_at"])
        logger.info("Order %s status %s -> %s", order.pk, old_status, new_status)
        return order

    def cancel(self, order):
        # no check on the prior status: completed orders can be cancelled too
        return self.set_status(order, Order.Status.CANCELLED)
