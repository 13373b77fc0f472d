from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase

from catalog.models import Category, Product, ProductColor, ProductImage


class SeedStorefrontTests(TestCase):
    def seed(self):
        call_command("seed_storefront", stdout=StringIO())

    def test_creates_admin_and_catalog(self):
        self.seed()
        admin = get_user_model().objects.get(email="admin@qimma.sa")
        self.assertTrue(admin.is_staff)
        self.assertTrue(admin.check_password("admin123"))

        self.assertEqual(Category.objects.count(), 4)
        self.assertEqual(Product.objects.count(), 10)
        self.assertEqual(ProductImage.objects.count(), 20)
        self.assertTrue(ProductColor.objects.exists())

        custom = Product.objects.get(is_custom_price=True)
        self.assertIsNone(custom.price_per_meter)

    def test_running_twice_changes_nothing(self):
        self.seed()
        self.seed()
        self.assertEqual(get_user_model().objects.filter(email="admin@qimma.sa").count(), 1)
        self.assertEqual(Category.objects.count(), 4)
        self.assertEqual(Product.objects.count(), 10)
