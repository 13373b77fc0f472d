from datetime import timedelta

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from admin_auth_app.api.tokens import issue_token
from visits.models import VisitRequest

User = get_user_model()


def add_visit(name="سارة محمد", visit_status=VisitRequest.Status.NEW):
    return VisitRequest.objects.create(
        full_name=name,
        phone="0598765432",
        city="مكة",
        district="العزيزية",
        address="شارع العزيزية العام",
        material_type="خشب",
        status=visit_status,
    )


class AdminVisitRequestTests(APITestCase):
    def setUp(self):
        self.admin = User.objects.create_user("admin@qimma.sa", "admin@qimma.sa", "admin123", is_staff=True)
        self.visit = add_visit()
        self.scheduled = add_visit("خالد", VisitRequest.Status.SCHEDULED)
        self.list_url = reverse("admin-visit-request-list")

    def auth(self):
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(self.admin)}")

    def detail_url(self, visit):
        return reverse("admin-visit-request-detail", kwargs={"pk": visit.id})

    def test_list_requires_token_401(self):
        res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_list_newest_first(self):
        self.auth()
        res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([v["id"] for v in res.data], [self.scheduled.id, self.visit.id])

    def test_list_filter_by_status(self):
        self.auth()
        res = self.client.get(self.list_url, {"status": "scheduled"})
        self.assertEqual([v["id"] for v in res.data], [self.scheduled.id])

    def test_patch_status_any_direction(self):
        self.auth()
        for value in ["done", "new", "contacted", "cancelled", "scheduled"]:
            res = self.client.patch(self.detail_url(self.visit), {"status": value}, format="json")
            self.assertEqual(res.status_code, status.HTTP_200_OK)
            self.assertEqual(res.data["status"], value)

    def test_patch_only_status(self):
        self.auth()
        res = self.client.patch(self.detail_url(self.visit), {"status": "done", "notes": "x"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_patch_missing_visit_404(self):
        self.auth()
        res = self.client.patch(
            reverse("admin-visit-request-detail", kwargs={"pk": 999999}), {"status": "done"}, format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_patch_without_token_401(self):
        res = self.client.patch(self.detail_url(self.visit), {"status": "done"}, format="json")
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.visit.refresh_from_db()
        self.assertEqual(self.visit.status, VisitRequest.Status.NEW)

    def test_expired_token_401(self):
        with self.settings(ADMIN_TOKEN_MAX_AGE=timedelta(seconds=-1)):
            self.auth()
            res = self.client.get(self.list_url)
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
