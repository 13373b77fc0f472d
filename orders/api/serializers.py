"""Orders API serializers.

Input serializers for creating an order from a cart snapshot, output
serializers for returning orders with their items, and a patch serializer for
the admin status update. Customer fields come from the shared
``common.validation.CustomerSerializer`` so the storefront checks exactly
the same rules before submitting.
"""

import logging
from decimal import Decimal

from django.db import transaction
from rest_framework import serializers

from catalog.models import Product
from common.validation import CustomerSerializer
from orders.models import Order, OrderItem

logger = logging.getLogger(__name__)

EMPTY_CART_MESSAGE = "السلة فارغة"
INVALID_METERS_MESSAGE = "الكمية يجب أن تكون 0.5 متر على الأقل"


class OrderItemInputSerializer(serializers.Serializer):
    """One cart line as sent by the storefront at checkout."""

    product_id = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        source="product",
        allow_null=True,
        required=False,
        error_messages={"does_not_exist": "المنتج غير موجود"},
    )
    meters = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.5"),
        error_messages={"min_value": INVALID_METERS_MESSAGE, "invalid": INVALID_METERS_MESSAGE},
    )
    price_per_meter = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, allow_null=True
    )
    line_total = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, allow_null=True
    )
    title_snapshot_ar = serializers.CharField(max_length=255)
    material_snapshot = serializers.CharField(max_length=50)


class OrderCreateSerializer(CustomerSerializer):
    """Validate customer fields plus the cart snapshot and store both.

    The snapshot is stored as sent: prices and totals are what the customer
    saw when submitting, not what the catalog says now.
    """

    items = OrderItemInputSerializer(
        many=True,
        allow_empty=False,
        error_messages={"required": EMPTY_CART_MESSAGE, "empty": EMPTY_CART_MESSAGE},
    )
    subtotal_amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False, allow_null=True
    )

    @transaction.atomic
    def create(self, validated_data):
        """Create the order and its item snapshots in a single transaction."""
        items = validated_data.pop("items")
        order = Order.objects.create(status=Order.Status.NEW, **validated_data)
        OrderItem.objects.bulk_create([OrderItem(order=order, **item) for item in items])
        logger.info(
            "Order %s created for %s (%d items, subtotal=%s)",
            order.id,
            order.phone,
            len(items),
            order.subtotal_amount,
        )
        return order


class OrderItemOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItem
        fields = [
            "id",
            "product_id",
            "meters",
            "price_per_meter",
            "line_total",
            "title_snapshot_ar",
            "material_snapshot",
            "created_at",
        ]


class OrderOutputSerializer(serializers.ModelSerializer):
    """Read serializer for returning a complete order representation."""

    items = OrderItemOutputSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "full_name",
            "phone",
            "city",
            "district",
            "address",
            "notes",
            "subtotal_amount",
            "status",
            "created_at",
            "updated_at",
            "items",
        ]


class OrderStatusPatchSerializer(serializers.ModelSerializer):
    """Patch serializer used to update only the order status.

    Any value of the status set is accepted whatever the current status is.
    """

    status = serializers.ChoiceField(
        choices=Order.Status.choices,
        error_messages={"invalid_choice": "حالة الطلب غير صالحة"},
    )

    class Meta:
        model = Order
        fields = ["status"]
