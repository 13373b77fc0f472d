from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from catalog.models import Category


class CategoryListTests(APITestCase):
    def setUp(self):
        self.url = reverse("category-list")
        self.first = Category.objects.create(name_ar="مطابخ عصرية", slug="modern-kitchens")
        self.second = Category.objects.create(name_ar="مطابخ فاخرة", slug="luxury-kitchens")

    def test_list_categories_newest_first(self):
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([c["id"] for c in res.data], [self.second.id, self.first.id])
        self.assertEqual(set(res.data[0].keys()), {"id", "name_ar", "slug", "created_at"})

    def test_empty_list(self):
        Category.objects.all().delete()
        res = self.client.get(self.url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, [])
