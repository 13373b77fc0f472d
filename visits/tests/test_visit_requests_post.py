from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from visits.models import VisitRequest


def visit_payload(**overrides):
    data = {
        "full_name": "سارة محمد",
        "phone": "512345678",
        "city": "الدمام",
        "district": "الشاطئ",
        "address": "طريق الخليج، فيلا 7",
        "material_type": "ألمنيوم",
        "approx_meters": "12.5",
        "preferred_datetime": "2026-11-02T16:30",
        "notes": "الاتصال بعد العصر",
    }
    data.update(overrides)
    return data


class VisitRequestCreateTests(APITestCase):
    def setUp(self):
        self.url = reverse("visit-request-create")

    def test_create_visit_request_201(self):
        res = self.client.post(self.url, visit_payload(), format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["status"], "new")
        self.assertEqual(res.data["material_type"], "ألمنيوم")
        self.assertEqual(res.data["preferred_datetime"], "2026-11-02T16:30")

        visit = VisitRequest.objects.get(pk=res.data["id"])
        self.assertEqual(visit.approx_meters, Decimal("12.5"))
        self.assertEqual(visit.phone, "512345678")

    def test_optional_fields_may_be_blank(self):
        res = self.client.post(
            self.url, visit_payload(approx_meters="", preferred_datetime="", notes=""), format="json"
        )
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(res.data["approx_meters"])
        self.assertIsNone(res.data["preferred_datetime"])
        self.assertEqual(res.data["notes"], "")

    def test_optional_fields_may_be_missing(self):
        payload = visit_payload()
        for key in ("approx_meters", "preferred_datetime", "notes"):
            payload.pop(key)
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_missing_material_returns_400(self):
        payload = visit_payload()
        payload.pop("material_type")
        res = self.client.post(self.url, payload, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data, {"detail": "يرجى اختيار نوع الخامة"})

    def test_unknown_material_returns_400(self):
        res = self.client.post(self.url, visit_payload(material_type="زجاج"), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_non_numeric_meters_returns_400(self):
        res = self.client.post(self.url, visit_payload(approx_meters="كثير"), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "المساحة التقريبية يجب أن تكون رقماً")

    def test_bad_datetime_returns_400(self):
        res = self.client.post(self.url, visit_payload(preferred_datetime="غداً مساءً"), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "صيغة الموعد المفضل غير صحيحة")

    def test_short_address_returns_400(self):
        res = self.client.post(self.url, visit_payload(address="شارع"), format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(res.data["detail"], "يرجى إدخال العنوان التفصيلي")
        self.assertFalse(VisitRequest.objects.exists())
