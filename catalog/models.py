"""Catalog app models.

Defines categories and the kitchen products sold by the linear meter. A
product without a price per meter, or flagged as custom priced, is quoted
manually instead of being priced in the cart.
"""

from django.core.validators import MinValueValidator
from django.db import models


class MaterialType(models.TextChoices):
    """The fixed set of materials a kitchen can be built from."""

    ALUMINIUM = "ألمنيوم", "ألمنيوم"
    WOOD = "خشب", "خشب"
    SHEET_METAL = "صاج", "صاج"
    FORMICA = "فورميكا", "فورميكا"


class Category(models.Model):
    """A group of products shown as a filter in the catalog."""

    name_ar = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "categories"
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "categories"

    def __str__(self):
        return f"{self.name_ar} ({self.slug})"


class Product(models.Model):
    """A kitchen model priced per linear meter."""

    title_ar = models.CharField(max_length=255)
    description_ar = models.TextField()
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        related_name="products",
        null=True,
        blank=True,
    )
    material_type = models.CharField(max_length=20, choices=MaterialType.choices)
    price_per_meter = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
    )
    is_custom_price = models.BooleanField(default=False)
    is_featured = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.title_ar} (#{self.pk})"


class ProductImage(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="images")
    url = models.URLField(max_length=500)

    class Meta:
        db_table = "product_images"
        ordering = ["id"]

    def __str__(self):
        return self.url


class ProductColor(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="colors")
    color_name_ar = models.CharField(max_length=100)

    class Meta:
        db_table = "product_colors"
        ordering = ["id"]

    def __str__(self):
        return self.color_name_ar
