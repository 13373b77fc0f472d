"""Visits app models.

A VisitRequest asks for a measuring visit or a manual price quote. It carries
the same customer and location fields as an order plus what the kitchen
should be made of.
"""

from django.db import models

from catalog.models import MaterialType


class VisitRequest(models.Model):
    """A booked measuring visit / quote request. Only `status` changes later."""

    class Status(models.TextChoices):
        NEW = "new", "new"
        CONTACTED = "contacted", "contacted"
        SCHEDULED = "scheduled", "scheduled"
        DONE = "done", "done"
        CANCELLED = "cancelled", "cancelled"

    full_name = models.CharField(max_length=200)
    phone = models.CharField(max_length=20)
    city = models.CharField(max_length=100)
    district = models.CharField(max_length=100)
    address = models.TextField()
    material_type = models.CharField(max_length=20, choices=MaterialType.choices)
    approx_meters = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    # Free text from the form, e.g. "2024-05-01T10:30"; not a scheduled slot.
    preferred_datetime = models.CharField(max_length=50, null=True, blank=True)
    notes = models.TextField(blank=True, default="")

    status = models.CharField(max_length=20, choices=Status.choices, default=Status.NEW)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "visit_requests"
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        """Readable representation for admin and debugging."""
        return f"VisitRequest<{self.id} {self.full_name} {self.status}>"
