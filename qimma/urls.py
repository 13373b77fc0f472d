"""URL configuration for the Qimma Kitchens storefront."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("catalog.api.urls")),
    path("api/", include("orders.api.urls")),
    path("api/", include("visits.api.urls")),
    path("api/", include("admin_auth_app.api.urls")),
    path("api/", include("common.api.urls")),
]
