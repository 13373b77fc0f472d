from django.urls import path
from .views import (
    AdminCategoryCreateAPIView,
    AdminCategoryUpdateDestroyAPIView,
    AdminProductCreateAPIView,
    AdminProductUpdateDestroyAPIView,
    CategoryListAPIView,
    ProductListAPIView,
    ProductRetrieveAPIView,
)

urlpatterns = [
    path("categories/", CategoryListAPIView.as_view(), name="category-list"),
    path("products/", ProductListAPIView.as_view(), name="product-list"),
    path("products/<int:pk>/", ProductRetrieveAPIView.as_view(), name="product-detail"),
    path("admin/categories/", AdminCategoryCreateAPIView.as_view(), name="admin-category-create"),
    path("admin/categories/<int:pk>/", AdminCategoryUpdateDestroyAPIView.as_view(), name="admin-category-detail"),
    path("admin/products/", AdminProductCreateAPIView.as_view(), name="admin-product-create"),
    path("admin/products/<int:pk>/", AdminProductUpdateDestroyAPIView.as_view(), name="admin-product-detail"),
]
