"""Orders API views.

Public order creation from a cart snapshot; admin listing, retrieval and
status updates behind the bearer token.
"""

import logging

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from admin_auth_app.api.permissions import IsAdminStaff
from common.api.mixins import LocalizedNotFoundMixin, validate_patch_only_status
from orders.models import Order
from .serializers import (
    OrderCreateSerializer,
    OrderOutputSerializer,
    OrderStatusPatchSerializer,
)

logger = logging.getLogger(__name__)


def _orders_queryset():
    return Order.objects.prefetch_related("items").order_by("-created_at", "-id")


def _filter_by_status(qs, params):
    """Optional ?status= filter; rejects values outside the status set."""
    value = params.get("status")
    if not value:
        return qs
    if value not in Order.Status.values:
        raise ValidationError({"status": "حالة الطلب غير صالحة"})
    return qs.filter(status=value)


class OrderCreateAPIView(generics.CreateAPIView):
    """POST /api/orders/ -> create an order from customer fields and a cart snapshot."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = OrderCreateSerializer

    def create(self, request, *args, **kwargs):
        """Validate and create a new order, returning the full order payload."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = serializer.save()
        order = _orders_queryset().get(pk=order.pk)
        return Response(OrderOutputSerializer(order).data, status=status.HTTP_201_CREATED)


class AdminOrderListAPIView(generics.ListAPIView):
    """GET /api/admin/orders/ -> all orders with items, newest first."""

    permission_classes = [IsAdminStaff]
    serializer_class = OrderOutputSerializer

    def get_queryset(self):
        return _filter_by_status(_orders_queryset(), self.request.query_params)


class AdminOrderDetailAPIView(LocalizedNotFoundMixin, generics.RetrieveUpdateAPIView):
    """GET: retrieve one order. PATCH: set its status (no transition rules)."""

    http_method_names = ["get", "patch", "head", "options"]
    permission_classes = [IsAdminStaff]
    not_found_message = "الطلب غير موجود"

    def get_queryset(self):
        return _orders_queryset()

    def get_serializer_class(self):
        """Use status patch serializer for PATCH; output serializer otherwise."""
        return OrderStatusPatchSerializer if self.request.method == "PATCH" else OrderOutputSerializer

    def partial_update(self, request, *args, **kwargs):
        """Allow updating only 'status'; return full order after update."""
        validate_patch_only_status(request.data)
        instance = self.get_object()
        previous = instance.status
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        logger.info("Order %s status %s -> %s", instance.id, previous, instance.status)
        return Response(OrderOutputSerializer(instance).data, status=status.HTTP_200_OK)
