from datetime import timedelta

from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from admin_auth_app.api.permissions import IsAdminStaff
from catalog.models import Product
from orders.models import Order
from visits.models import VisitRequest


class AdminStatsAPIView(APIView):
    """
    GET /api/admin/stats/

    Returns the counters shown on the admin dashboard:
    - total_products: number of products in the catalog
    - total_orders: number of orders ever placed
    - total_visit_requests: number of visit requests ever placed
    - new_requests_this_week: visit requests created in the last 7 days

    Authentication: admin bearer token
    """

    permission_classes = [IsAdminStaff]

    def get(self, request):
        week_ago = timezone.now() - timedelta(days=7)
        data = {
            "total_products": Product.objects.count(),
            "total_orders": Order.objects.count(),
            "total_visit_requests": VisitRequest.objects.count(),
            "new_requests_this_week": VisitRequest.objects.filter(created_at__gte=week_ago).count(),
        }
        return Response(data, status=status.HTTP_200_OK)
