from django.urls import path
from .views import AdminOrderDetailAPIView, AdminOrderListAPIView, OrderCreateAPIView

urlpatterns = [
    path("orders/", OrderCreateAPIView.as_view(), name="order-create"),
    path("admin/orders/", AdminOrderListAPIView.as_view(), name="admin-order-list"),
    path("admin/orders/<int:pk>/", AdminOrderDetailAPIView.as_view(), name="admin-order-detail"),
]
