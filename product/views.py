import logging

from rest_framework import viewsets, permissions, status
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter, SearchFilter

from user.permissions import IsAdminRole
from .filters import ProductFilter
from .models import Product
from .serializers import ProductSerializer

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ModelViewSet):
    """
    Catalog. Anyone may read; writes need the admin role.
    """
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    http_method_names = ["get", "post", "put", "delete", "head", "options"]
    filter_backends = [DjangoFilterBackend, OrderingFilter, SearchFilter]
    filterset_class = ProductFilter
    ordering_fields = ["created_at", "price", "title", "stock"]
    search_fields = ["title", "description"]

    def get_authenticators(self):
        # reads are public, so a stale bearer token must not turn them into 401s
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return [permissions.AllowAny()]
        return [IsAdminRole()]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        logger.info("Product %s created by user %s", product.pk, request.user.pk)
        return Response(
            {"message": "Product created successfully.", "data": serializer.data},
            status=status.HTTP_200_OK,
        )

    def update(self, request, *args, **kwargs):
        product = self.get_object()
        serializer = self.get_serializer(product, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Product %s updated by user %s", product.pk, request.user.pk)
        return Response({"message": "Product updated successfully.", "data": serializer.data})

    def destroy(self, request, *args, **kwargs):
        product = self.get_object()
        product_id = product.pk
        product.delete()
        logger.info("Product %s deleted by user %s", product_id, request.user.pk)
        return Response({"message": "Product deleted successfully."}, status=status.HTTP_200_OK)
