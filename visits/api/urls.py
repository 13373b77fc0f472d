from django.urls import path
from .views import (
    AdminVisitRequestDetailAPIView,
    AdminVisitRequestListAPIView,
    VisitRequestCreateAPIView,
)

urlpatterns = [
    path("visit-requests/", VisitRequestCreateAPIView.as_view(), name="visit-request-create"),
    path("admin/visit-requests/", AdminVisitRequestListAPIView.as_view(), name="admin-visit-request-list"),
    path(
        "admin/visit-requests/<int:pk>/",
        AdminVisitRequestDetailAPIView.as_view(),
        name="admin-visit-request-detail",
    ),
]
