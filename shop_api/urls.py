"""
URL configuration for shop_api project.

Every API route lives under /api; the OpenAPI schema and its two
renderings sit next to them under /api/schema.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("user.urls")),
    path("api/", include("product.urls")),
    path("api/", include("cart.urls")),
    path("api/", include("order.urls")),
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),  # OpenAPI JSON/YAML
    path("api/schema/swagger-ui", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/schema/redoc", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
