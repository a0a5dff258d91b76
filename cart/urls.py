from django.urls import path
from .views import CartView, CartItemsView, CartUpdateView

urlpatterns = [
    path("cart", CartView.as_view(), name="cart"),
    path("cart/items", CartItemsView.as_view(), name="cart-items"),
    path("cart/update", CartUpdateView.as_view(), name="cart-update"),
]
