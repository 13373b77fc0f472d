from django.contrib import admin
from django.db.models import Count
from .models import Category, Product, ProductColor, ProductImage


class ProductImageInline(admin.TabularInline):
    """Images edited directly on the product form."""
    model = ProductImage
    extra = 0
    fields = ("url",)


class ProductColorInline(admin.TabularInline):
    """Colors edited directly on the product form."""
    model = ProductColor
    extra = 0
    fields = ("color_name_ar",)


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name_ar", "slug", "product_count", "created_at")
    search_fields = ("name_ar", "slug")
    ordering = ("-created_at", "-id")

    def get_queryset(self, request):
        # Count in the list query instead of once per row
        return super().get_queryset(request).annotate(_product_count=Count("products"))

    def product_count(self, obj):
        return getattr(obj, "_product_count", 0)
    product_count.short_description = "products"
    product_count.admin_order_field = "_product_count"


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    Product management:
    - images and colors inline
    - filter by material, category, featured/custom price
    - price column shows "quote" for custom priced products
    """
    inlines = [ProductImageInline, ProductColorInline]

    list_display = (
        "id",
        "title_ar",
        "category",
        "material_type",
        "price_display",
        "is_featured",
        "created_at",
    )
    list_select_related = ("category",)
    list_filter = ("material_type", "category", "is_featured", "is_custom_price")
    search_fields = ("title_ar", "description_ar")
    date_hierarchy = "created_at"
    ordering = ("-created_at", "-id")
    readonly_fields = ("created_at",)

    def price_display(self, obj):
        if obj.is_custom_price or obj.price_per_meter is None:
            return "quote"
        return f"{obj.price_per_meter:.2f}"
    price_display.short_description = "price / m"
    price_display.admin_order_field = "price_per_meter"
