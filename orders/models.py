"""Orders app models.

Defines the Order and OrderItem models. An Order is created from the customer's
cart; each OrderItem snapshots the title, material and price of the cart line
so historical orders stay accurate even if the catalog changes later.
"""

from django.core.validators import MinValueValidator
from django.db import models

from catalog.models import Product


class Order(models.Model):
    """A submitted checkout. Only `status` changes after creation."""

    class Status(models.TextChoices):
        NEW = "new", "new"
        PROCESSING = "processing", "processing"
        DELIVERED = "delivered", "delivered"
        CANCELLED = "cancelled", "cancelled"

    full_name = models.CharField(max_length=200)
    phone = models.CharField(max_length=20)
    city = models.CharField(max_length=100)
    district = models.CharField(max_length=100)
    address = models.TextField()
    notes = models.TextField(blank=True, default="")

    subtotal_amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.NEW
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        """Readable representation for admin and debugging."""
        return f"Order<{self.id} {self.full_name} {self.status}>"


class OrderItem(models.Model):
    """Frozen copy of one cart line at submission time."""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    # Reference only; the snapshot fields below are what the order shows.
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        related_name="order_items",
        null=True,
        blank=True,
    )
    meters = models.DecimalField(max_digits=10, decimal_places=2)
    price_per_meter = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    line_total = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    title_snapshot_ar = models.CharField(max_length=255)
    material_snapshot = models.CharField(max_length=50)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "order_items"
        ordering = ("id",)

    def __str__(self) -> str:
        return f"OrderItem<{self.id} order={self.order_id} {self.title_snapshot_ar} x {self.meters}>"
