from django.contrib import admin
from django.utils.html import format_html
from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    """Item snapshots, shown read-only under the order."""
    model = OrderItem
    extra = 0
    can_delete = False
    fields = (
        "title_snapshot_ar",
        "material_snapshot",
        "meters",
        "price_per_meter",
        "line_total",
        "product",
    )
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Order management:
    - list: id, customer, phone, city, status badge, subtotal, created
    - filter: status, city, created (date hierarchy)
    - search: name, phone, city, district
    - read-only: customer fields and item snapshots; status is editable
    """
    inlines = [OrderItemInline]
    list_display = (
        "id",
        "full_name",
        "phone",
        "city",
        "status_badge",
        "subtotal_amount",
        "created_at",
    )
    list_filter = ("status", "city", "created_at")
    date_hierarchy = "created_at"
    ordering = ("-created_at", "-id")
    search_fields = ("full_name", "phone", "city", "district")

    # Only status may change in the admin; everything else is a snapshot
    readonly_fields = (
        "full_name",
        "phone",
        "city",
        "district",
        "address",
        "notes",
        "subtotal_amount",
        "created_at",
        "updated_at",
    )
    fields = ("status",) + readonly_fields

    def status_badge(self, obj):
        color = {
            "new": "#0ea5e9",
            "processing": "#f59e0b",
            "delivered": "#22c55e",
            "cancelled": "#ef4444",
        }.get(obj.status, "#9ca3af")
        return format_html(
            '<span style="display:inline-block;padding:2px 8px;border-radius:999px;'
            'font-size:12px;font-weight:600;color:#fff;background:{};">{}</span>',
            color,
            obj.status,
        )
    status_badge.short_description = "status"
    status_badge.admin_order_field = "status"
