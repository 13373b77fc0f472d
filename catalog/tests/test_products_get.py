from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from catalog.models import Category, MaterialType, Product, ProductColor, ProductImage


def add_product(title, price="150.00", category=None, material=MaterialType.WOOD, **extra):
    return Product.objects.create(
        title_ar=title,
        description_ar="وصف المنتج",
        category=category,
        material_type=material,
        price_per_meter=None if price is None else Decimal(price),
        **extra,
    )


class ProductListTests(APITestCase):
    def setUp(self):
        self.url = reverse("product-list")
        self.modern = Category.objects.create(name_ar="مطابخ عصرية", slug="modern-kitchens")
        self.classic = Category.objects.create(name_ar="مطابخ كلاسيكية", slug="classic-kitchens")

        self.cheap = add_product("مطبخ فورميكا اقتصادي", "800.00", self.modern, MaterialType.FORMICA)
        self.mid = add_product("مطبخ ألمنيوم عصري", "1500.00", self.modern, MaterialType.ALUMINIUM, is_featured=True)
        self.custom = add_product("مطبخ خشب زان طبيعي", None, self.classic, is_custom_price=True, is_featured=True)
        self.expensive = add_product("مطبخ خشب أمريكي", "3200.00", self.classic)

        ProductImage.objects.create(product=self.mid, url="https://example.com/mid.jpg")
        ProductColor.objects.create(product=self.mid, color_name_ar="فضي")

    def ids(self, res):
        return [p["id"] for p in res.data]

    def test_list_products_200_no_auth_required(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 4)

    def test_default_ordering_is_newest_first(self):
        res = self.client.get(self.url)
        self.assertEqual(self.ids(res), [self.expensive.id, self.custom.id, self.mid.id, self.cheap.id])

    def test_product_includes_category_images_and_colors(self):
        res = self.client.get(self.url)
        item = next(p for p in res.data if p["id"] == self.mid.id)
        self.assertEqual(item["price_per_meter"], "1500.00")
        self.assertEqual(item["category"]["slug"], "modern-kitchens")
        self.assertEqual(item["images"][0]["url"], "https://example.com/mid.jpg")
        self.assertEqual(item["colors"][0]["color_name_ar"], "فضي")
        self.assertFalse(item["is_custom_price"])

    def test_filter_by_category(self):
        res = self.client.get(self.url, {"category": self.classic.id})
        self.assertEqual(set(self.ids(res)), {self.custom.id, self.expensive.id})

    def test_non_integer_category_returns_400(self):
        res = self.client.get(self.url, {"category": "abc"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", res.data)

    def test_filter_by_material_type(self):
        res = self.client.get(self.url, {"material_type": MaterialType.WOOD})
        self.assertEqual(set(self.ids(res)), {self.custom.id, self.expensive.id})

    def test_search_matches_title(self):
        res = self.client.get(self.url, {"search": "ألمنيوم"})
        self.assertEqual(self.ids(res), [self.mid.id])

    def test_featured_only(self):
        res = self.client.get(self.url, {"featured": "true"})
        self.assertEqual(set(self.ids(res)), {self.mid.id, self.custom.id})

    def test_price_low_puts_missing_price_last(self):
        res = self.client.get(self.url, {"ordering": "price_low"})
        self.assertEqual(self.ids(res), [self.cheap.id, self.mid.id, self.expensive.id, self.custom.id])

    def test_price_high_puts_missing_price_last(self):
        res = self.client.get(self.url, {"ordering": "price_high"})
        self.assertEqual(self.ids(res), [self.expensive.id, self.mid.id, self.cheap.id, self.custom.id])

    def test_unknown_ordering_returns_400(self):
        res = self.client.get(self.url, {"ordering": "popular"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_filters_combine(self):
        res = self.client.get(
            self.url, {"category": self.modern.id, "featured": "true", "ordering": "price_high"}
        )
        self.assertEqual(self.ids(res), [self.mid.id])


class ProductDetailTests(APITestCase):
    def setUp(self):
        self.product = add_product("مطبخ صاج مودرن", "1800.00", material=MaterialType.SHEET_METAL)

    def test_get_product_200(self):
        res = self.client.get(reverse("product-detail", kwargs={"pk": self.product.id}))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["title_ar"], "مطبخ صاج مودرن")
        self.assertEqual(res.data["material_type"], "صاج")
        self.assertIsNone(res.data["category"])
        self.assertEqual(res.data["images"], [])

    def test_missing_product_returns_localized_404(self):
        res = self.client.get(reverse("product-detail", kwargs={"pk": 999999}))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data, {"detail": "المنتج غير موجود"})
