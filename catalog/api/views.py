"""Catalog API views.

Public endpoints list categories, list products with filters and ordering,
and retrieve a single product. Admin endpoints (bearer token) create, patch
and delete categories and products.
"""

from decimal import Decimal

from django.db.models import DecimalField, F, Value
from django.db.models.functions import Coalesce
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from admin_auth_app.api.permissions import IsAdminStaff
from catalog.models import Category, Product
from common.api.mixins import LocalizedNotFoundMixin
from .serializers import CategorySerializer, ProductSerializer, ProductWriteSerializer

PRODUCT_NOT_FOUND = "المنتج غير موجود"
CATEGORY_NOT_FOUND = "التصنيف غير موجود"

ORDERING_NEWEST = "newest"
ORDERING_PRICE_LOW = "price_low"
ORDERING_PRICE_HIGH = "price_high"


def _product_queryset():
    return Product.objects.select_related("category").prefetch_related("images", "colors")


# ----------------------------- helpers (module-level) -----------------------------

def _apply_filters(qs, params):
    """Filter by category id, material, title search and featured flag."""
    category = params.get("category")
    if category:
        if not category.isdigit():
            raise ValidationError({"category": "يجب أن يكون رقم التصنيف عدداً صحيحاً"})
        qs = qs.filter(category_id=int(category))

    material_type = params.get("material_type")
    if material_type:
        qs = qs.filter(material_type=material_type)

    search = params.get("search")
    if search:
        qs = qs.filter(title_ar__icontains=search)

    if params.get("featured") == "true":
        qs = qs.filter(is_featured=True)

    return qs


def _apply_ordering(qs, ordering):
    """Newest first by default; price orderings keep newest-first among ties.

    A missing price counts as infinitely expensive when sorting up and as zero
    when sorting down, so unpriced products end up last either way.
    """
    if not ordering or ordering == ORDERING_NEWEST:
        return qs.order_by("-created_at", "-id")

    if ordering == ORDERING_PRICE_LOW:
        return qs.order_by(F("price_per_meter").asc(nulls_last=True), "-created_at", "-id")

    if ordering == ORDERING_PRICE_HIGH:
        return qs.annotate(
            _sort_price=Coalesce(
                "price_per_meter",
                Value(Decimal("0")),
                output_field=DecimalField(max_digits=10, decimal_places=2),
            )
        ).order_by("-_sort_price", "-created_at", "-id")

    raise ValidationError(
        {"ordering": "القيم المسموحة: newest, price_low, price_high"}
    )


# --------------------------------------- public ---------------------------------------

class CategoryListAPIView(generics.ListAPIView):
    """GET /api/categories/ -> all categories, newest first."""

    authentication_classes = []
    permission_classes = [AllowAny]
    queryset = Category.objects.all().order_by("-created_at", "-id")
    serializer_class = CategorySerializer


class ProductListAPIView(generics.ListAPIView):
    """GET /api/products/ with optional category, material_type, search,
    featured and ordering query parameters."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = ProductSerializer

    def get_queryset(self):
        params = self.request.query_params
        qs = _apply_filters(_product_queryset(), params)
        return _apply_ordering(qs, params.get("ordering"))


class ProductRetrieveAPIView(LocalizedNotFoundMixin, generics.RetrieveAPIView):
    """GET /api/products/{id}/ -> a single product or 404."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = ProductSerializer
    not_found_message = PRODUCT_NOT_FOUND

    def get_queryset(self):
        return _product_queryset()


# --------------------------------------- admin ---------------------------------------

class AdminCategoryCreateAPIView(generics.CreateAPIView):
    """POST /api/admin/categories/"""

    permission_classes = [IsAdminStaff]
    queryset = Category.objects.all()
    serializer_class = CategorySerializer


class AdminCategoryUpdateDestroyAPIView(LocalizedNotFoundMixin, generics.RetrieveUpdateDestroyAPIView):
    """PATCH/DELETE /api/admin/categories/{id}/

    Deleting a category keeps its products; they become uncategorised.
    """

    http_method_names = ["get", "patch", "delete", "head", "options"]
    permission_classes = [IsAdminStaff]
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    not_found_message = CATEGORY_NOT_FOUND


class AdminProductCreateAPIView(generics.CreateAPIView):
    """POST /api/admin/products/ -> create a product with images and colors."""

    permission_classes = [IsAdminStaff]
    queryset = Product.objects.all()
    serializer_class = ProductWriteSerializer

    def create(self, request, *args, **kwargs):
        """Validate and create, returning the full product representation."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        product = _product_queryset().get(pk=product.pk)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class AdminProductUpdateDestroyAPIView(LocalizedNotFoundMixin, generics.RetrieveUpdateDestroyAPIView):
    """GET/PATCH/DELETE /api/admin/products/{id}/"""

    http_method_names = ["get", "patch", "delete", "head", "options"]
    permission_classes = [IsAdminStaff]
    not_found_message = PRODUCT_NOT_FOUND

    def get_queryset(self):
        return _product_queryset()

    def get_serializer_class(self):
        """Use the write serializer for PATCH and the full serializer otherwise."""
        return ProductWriteSerializer if self.request.method == "PATCH" else ProductSerializer

    def partial_update(self, request, *args, **kwargs):
        """Apply a partial update and return the full product payload."""
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        instance = _product_queryset().get(pk=instance.pk)
        return Response(ProductSerializer(instance).data, status=status.HTTP_200_OK)
