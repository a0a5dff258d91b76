# product/admin.py
from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "price", "stock", "created_at")
    search_fields = ("title", "description")
    prepopulated_fields = {"slug": ("title",)}
