# cart/services.py
import logging
from decimal import Decimal

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from rest_framework.exceptions import NotFound

from product.models import Product
from .exceptions import StockLimitExceeded, ReductionExceedsQuantity, QuantityMustBePositive
from .models import Cart, CartItem
from .serializers import CartItemSerializer

logger = logging.getLogger(__name__)

CACHE_KEY_TEMPLATE = "cart_items_user_:{user_id}"


def cart_total(items):
    """
    Sum ``price * quantity`` over serialized cart items.
    """
    total = Decimal("0.00")
    for item in items:
        total += Decimal(str(item["product"]["price"])) * int(item["quantity"])
    return total.quantize(Decimal("0.01"))


class CartService:
    """
    Use cases of the per-user cart.

    queries: get_active_cart, get_cart_items (memoized in the cache)
    commands: update, clear (both invalidate the memoized items)
    """

    def __init__(self, user):
        self.user = user
        self.cache_key = CACHE_KEY_TEMPLATE.format(user_id=user.pk)

    # queries
    def get_active_cart(self):
        # the partial unique constraint makes this a real get-or-create
        cart, created = Cart.objects.get_or_create(user=self.user, status=Cart.Status.ACTIVE)
        if created:
            logger.info("Created active cart %s for user %s", cart.pk, self.user.pk)
        return cart

    def get_cart_items(self):
        items = cache.get(self.cache_key)
        if items is None:
            items = self._load_items(self.get_active_cart())
            cache.set(self.cache_key, items, settings.CART_ITEMS_CACHE_TIMEOUT)
        return items

    # commands
    def update(self, product_id, quantity):
        """
        Add ``quantity`` (may be negative) of a product to the active cart.

        An existing line may grow only while it stays strictly below stock
        and may shrink at most to zero, which removes it. A new line needs a
        positive quantity no larger than stock.
        """
        cart = self.get_active_cart()

        with transaction.atomic():
            try:
                product = Product.objects.select_for_update().get(pk=product_id)
            except Product.DoesNotExist:
                raise NotFound("Product not found")

            item = (
                CartItem.objects.select_for_update()
                .filter(cart=cart, product=product)
                .first()
            )

            if item:
                new_quantity = item.quantity + quantity

                if not product.stock > new_quantity:
                    raise StockLimitExceeded()
                if quantity < 0 and -quantity > item.quantity:
                    raise ReductionExceedsQuantity()

                if new_quantity == 0:
                    item.delete()
                    logger.info("Removed product %s from cart %s", product.pk, cart.pk)
                else:
                    item.quantity = new_quantity
                    item.save(update_fields=["quantity", "updated_at"])
                    logger.info(
                        "Cart %s product %s quantity %s -> %s",
                        cart.pk, product.pk, new_quantity - quantity, new_quantity,
                    )
            else:
                if quantity <= 0:
                    raise QuantityMustBePositive()
                if product.stock < quantity:
                    raise StockLimitExceeded()

                CartItem.objects.create(cart=cart, product=product, quantity=quantity)
                logger.info("Added product %s x%s to cart %s", product.pk, quantity, cart.pk)

        self.forget_items()
        items = self.get_cart_items()
        return items, cart_total(items)

    def clear(self):
        cart = self.get_active_cart()
        deleted, _ = CartItem.objects.filter(cart=cart).delete()
        self.forget_items()
        logger.info("Cleared cart %s (%s rows)", cart.pk, deleted)

    def forget_items(self):
        cache.delete(self.cache_key)

    def _load_items(self, cart):
        qs = CartItem.objects.filter(cart=cart).select_related("product")
        return [dict(row) for row in CartItemSerializer(qs, many=True).data]
