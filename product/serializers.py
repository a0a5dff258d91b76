from decimal import Decimal

from rest_framework import serializers
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    title = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.00"))
    stock = serializers.IntegerField(min_value=0, required=False)
    description = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = Product
        fields = (
            "id", "title", "slug", "description", "price", "stock",
            "in_stock", "created_at", "updated_at",
        )
        read_only_fields = ("slug", "in_stock", "created_at", "updated_at")


class ProductMiniSerializer(serializers.ModelSerializer):
    # minimal product shape for cart items and order lines
    class Meta:
        model = Product
        fields = ("id", "title", "slug", "price", "stock")
