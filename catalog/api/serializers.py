"""Catalog API serializers.

Read serializers expose products together with their images, colors and
category. The admin write serializer accepts plain lists of image URLs and
color names and replaces the stored rows whenever a list is provided.
"""

from django.db import transaction
from rest_framework import serializers

from catalog.models import Category, Product, ProductColor, ProductImage


class CategorySerializer(serializers.ModelSerializer):
    """Category representation, also used for admin create/patch."""

    class Meta:
        model = Category
        fields = ["id", "name_ar", "slug", "created_at"]
        read_only_fields = ["id", "created_at"]


class ProductImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductImage
        fields = ["id", "url"]


class ProductColorSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductColor
        fields = ["id", "color_name_ar"]


class ProductSerializer(serializers.ModelSerializer):
    """Full product representation used by the catalog and product pages."""

    category = CategorySerializer(read_only=True)
    images = ProductImageSerializer(many=True, read_only=True)
    colors = ProductColorSerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "title_ar",
            "description_ar",
            "category_id",
            "category",
            "material_type",
            "price_per_meter",
            "is_custom_price",
            "is_featured",
            "created_at",
            "images",
            "colors",
        ]


class ProductWriteSerializer(serializers.ModelSerializer):
    """Admin create/update serializer for products.

    - `images`: list of URLs; replaces all product images when given.
    - `colors`: list of color names; replaces all product colors when given.
    """

    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(), allow_null=True, required=False
    )
    images = serializers.ListField(child=serializers.URLField(max_length=500), required=False)
    colors = serializers.ListField(child=serializers.CharField(max_length=100), required=False)

    class Meta:
        model = Product
        fields = [
            "title_ar",
            "description_ar",
            "category",
            "material_type",
            "price_per_meter",
            "is_custom_price",
            "is_featured",
            "images",
            "colors",
        ]

    # ------------------------- private helpers (write) -------------------------

    def _replace_images(self, product: Product, urls) -> None:
        if urls is None:
            return
        product.images.all().delete()
        ProductImage.objects.bulk_create([ProductImage(product=product, url=u) for u in urls])

    def _replace_colors(self, product: Product, names) -> None:
        if names is None:
            return
        product.colors.all().delete()
        ProductColor.objects.bulk_create(
            [ProductColor(product=product, color_name_ar=n) for n in names]
        )

    # ---------------------------------- write ----------------------------------

    @transaction.atomic
    def create(self, validated_data):
        images = validated_data.pop("images", None)
        colors = validated_data.pop("colors", None)
        product = Product.objects.create(**validated_data)
        self._replace_images(product, images)
        self._replace_colors(product, colors)
        return product

    @transaction.atomic
    def update(self, instance: Product, validated_data):
        images = validated_data.pop("images", None)
        colors = validated_data.pop("colors", None)
        instance = super().update(instance, validated_data)
        self._replace_images(instance, images)
        self._replace_colors(instance, colors)
        return instance
