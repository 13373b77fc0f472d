from decimal import Decimal

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from admin_auth_app.api.tokens import issue_token
from orders.models import Order, OrderItem

User = get_user_model()


def add_order(name="محمد أحمد", order_status=Order.Status.NEW):
    order = Order.objects.create(
        full_name=name,
        phone="0512345678",
        city="جدة",
        district="الروضة",
        address="شارع التحلية 5",
        subtotal_amount=Decimal("300.00"),
        status=order_status,
    )
    OrderItem.objects.create(
        order=order,
        meters=Decimal("2"),
        price_per_meter=Decimal("150.00"),
        line_total=Decimal("300.00"),
        title_snapshot_ar="مطبخ خشب",
        material_snapshot="خشب",
    )
    return order


class AdminOrderTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user("admin@qimma.sa", "admin@qimma.sa", "admin123", is_staff=True)
        self.first = add_order("عميل أول")
        self.second = add_order("عميل ثاني", Order.Status.PROCESSING)
        self.list_url = reverse("admin-order-list")

    def auth(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.admin)}")

    def detail_url(self, order):
        return reverse("admin-order-detail", kwargs={"pk": order.id})

    def test_list_requires_token_401(self):
        res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(res.data, {"detail": "غير مصرح"})

    def test_invalid_token_401(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
        res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_newest_first_with_items(self):
        self.auth()
        res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([o["id"] for o in res.data], [self.second.id, self.first.id])
        self.assertEqual(res.data[0]["items"][0]["title_snapshot_ar"], "مطبخ خشب")

    def test_list_filter_by_status(self):
        self.auth()
        res = self.client.get(self.list_url, {"status": "processing"})
        self.assertEqual([o["id"] for o in res.data], [self.second.id])

    def test_list_unknown_status_400(self):
        self.auth()
        res = self.client.get(self.list_url, {"status": "lost"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_get_detail(self):
        self.auth()
        res = self.client.get(self.detail_url(self.first))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["full_name"], "عميل أول")

    def test_get_missing_order_404(self):
        self.auth()
        res = self.client.get(reverse("admin-order-detail", kwargs={"pk": 999999}))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["detail"], "الطلب غير موجود")

    def test_patch_status(self):
        self.auth()
        res = self.client.patch(self.detail_url(self.first), {"status": "delivered"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "delivered")
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, Order.Status.DELIVERED)

    def test_any_status_may_follow_any_other(self):
        self.auth()
        for value in ["cancelled", "new", "delivered", "processing"]:
            res = self.client.patch(self.detail_url(self.first), {"status": value}, format="json")
            self.assertEqual(res.status_code, status.HTTP_200_OK)
            self.assertEqual(res.data["status"], value)

    def test_patch_other_fields_rejected(self):
        self.auth()
        res = self.client.patch(
            self.detail_url(self.first), {"status": "delivered", "full_name": "x"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, Order.Status.NEW)

    def test_patch_missing_status_400(self):
        self.auth()
        res = self.client.patch(self.detail_url(self.first), {}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "الحالة مطلوبة")

    def test_patch_invalid_status_400(self):
        self.auth()
        res = self.client.patch(self.detail_url(self.first), {"status": "lost"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "حالة الطلب غير صالحة")

    def test_patch_without_token_401(self):
        res = self.client.patch(self.detail_url(self.first), {"status": "delivered"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, Order.Status.NEW)

    def test_delete_not_allowed(self):
        self.auth()
        res = self.client.delete(self.detail_url(self.first))
        self.assertEqual(res.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
