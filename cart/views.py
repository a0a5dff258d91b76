from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status, permissions

from shop_api.exceptions import first_error
from .serializers import CartSerializer, CartUpdateSerializer
from .services import CartService, cart_total


class CartView(APIView):
    """
    GET: active cart summary
    PUT: add / adjust / remove a line, payload { "product_id": <id>, "quantity": <int> }
    DELETE: remove every line of the active cart
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, format=None):
        cart = CartService(request.user).get_active_cart()
        return Response({"data": CartSerializer(cart).data}, status=status.HTTP_200_OK)

    def put(self, request, format=None):
        serializer = CartUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"message": first_error(serializer.errors)},
                            status=status.HTTP_400_BAD_REQUEST)

        items, total = CartService(request.user).update(
            product_id=serializer.validated_data["product_id"],
            quantity=serializer.validated_data["quantity"],
        )

        return Response(
            {
                "message": "Cart updated successfully",
                "data": items,
                "totalPrice": total,
            },
            status=status.HTTP_200_OK,
        )

    def delete(self, request, format=None):
        CartService(request.user).clear()
        return Response({"message": "Cart items have been cleared"}, status=status.HTTP_200_OK)


class CartItemsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, format=None):
        items = CartService(request.user).get_cart_items()
        return Response({"data": items, "totalPrice": cart_total(items)}, status=status.HTTP_200_OK)


class CartUpdateView(CartView):
    """ PUT /cart/update, same contract as PUT /cart. """
    http_method_names = ["put", "options"]
