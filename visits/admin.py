from django.contrib import admin
from django.utils.html import format_html
from .models import VisitRequest


@admin.register(VisitRequest)
class VisitRequestAdmin(admin.ModelAdmin):
    """
    Visit request management: status editable, request details read-only.
    """
    list_display = (
        "id",
        "full_name",
        "phone",
        "city",
        "material_type",
        "approx_meters",
        "preferred_datetime",
        "status_badge",
        "created_at",
    )
    list_filter = ("status", "material_type", "city", "created_at")
    date_hierarchy = "created_at"
    ordering = ("-created_at", "-id")
    search_fields = ("full_name", "phone", "city", "district")

    readonly_fields = (
        "full_name",
        "phone",
        "city",
        "district",
        "address",
        "material_type",
        "approx_meters",
        "preferred_datetime",
        "notes",
        "created_at",
        "updated_at",
    )
    fields = ("status",) + readonly_fields

    def status_badge(self, obj):
        color = {
            "new": "#0ea5e9",
            "contacted": "#8b5cf6",
            "scheduled": "#f59e0b",
            "done": "#22c55e",
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
