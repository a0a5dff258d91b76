from rest_framework import serializers
from .models import Cart, CartItem
from product.models import Product
from product.serializers import ProductMiniSerializer


class CartSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Cart
        fields = ("id", "user_id", "status", "created_at", "updated_at")
        read_only_fields = fields


class CartItemSerializer(serializers.ModelSerializer):
    cart_id = serializers.IntegerField(read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    product = ProductMiniSerializer(read_only=True)

    class Meta:
        model = CartItem
        fields = ("id", "cart_id", "product_id", "quantity", "product", "created_at", "updated_at")
        read_only_fields = fields


class CartUpdateSerializer(serializers.Serializer):
    # negative quantities reduce an existing line
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField()

    def validate_product_id(self, value):
        if not Product.objects.filter(pk=value).exists():
            raise serializers.ValidationError("The selected product id is invalid.")
        return value
