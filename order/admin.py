from django.contrib import admin
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ("product", "product_title", "quantity", "unit_price")


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "cart", "total", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("user__email", "user__name")
    inlines = [OrderItemInline]
