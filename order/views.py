# order/views.py
from rest_framework import status, permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from shop_api.exceptions import first_error
from user.permissions import IsAdminRole
from .models import Order
from .serializers import OrderSerializer, OrderStatusSerializer
from .services import OrderService


def get_order(pk):
    try:
        return Order.objects.prefetch_related("items__product").get(pk=pk)
    except Order.DoesNotExist:
        return None


def order_not_found():
    return Response({"message": "Order not found"}, status=status.HTTP_404_NOT_FOUND)


class OrderListCreateView(APIView):
    """
    GET /api/order   -> own orders, or every order for admins (newest first)
    POST /api/order  -> order from the current cart items
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        orders = OrderService(request.user).list_orders()
        data = OrderSerializer(orders, many=True).data
        return Response({
            "data": data,
            "message": "Orders retrieved successfully." if data else "No orders have been placed yet.",
        })

    def post(self, request):
        order = OrderService(request.user).create_order_from_cart()
        if order is None:
            return Response({"message": "No cart items have been placed yet.", "data": None})

        order = get_order(order.pk)
        return Response({"message": "Order created successfully.", "data": OrderSerializer(order).data})


class OrderDetailView(APIView):
    """
    GET: any authenticated caller may fetch an order by id.
    PATCH: admin only, body { "status": "processing" }.
    """

    def get_permissions(self):
        if self.request.method == "PATCH":
            return [IsAdminRole()]
        return [permissions.IsAuthenticated()]

    def get(self, request, pk):
        order = get_order(pk)
        if not order:
            return order_not_found()
        return Response({"data": OrderSerializer(order).data})

    def patch(self, request, pk):
        order = get_order(pk)
        if not order:
            return order_not_found()

        serializer = OrderStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"message": first_error(serializer.errors)}, status=status.HTTP_400_BAD_REQUEST)

        OrderService.set_status(order, serializer.validated_data["status"])
        return Response({"message": "Order updated successfully."}, status=status.HTTP_200_OK)


class OrderCancelView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def patch(self, request, pk):
        order = get_order(pk)
        if not order:
            return order_not_found()

        OrderService(request.user).cancel(order)
        return Response({"message": "Order cancelled successfully."}, status=status.HTTP_200_OK)
