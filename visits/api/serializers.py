"""Visit request API serializers."""

import logging

from rest_framework import serializers

from common.validation import VisitRequestFormSerializer
from visits.models import VisitRequest

logger = logging.getLogger(__name__)


class VisitRequestCreateSerializer(VisitRequestFormSerializer):
    """Store a visit request validated with the shared form rules."""

    def create(self, validated_data):
        visit = VisitRequest.objects.create(status=VisitRequest.Status.NEW, **validated_data)
        logger.info("Visit request %s created for %s (%s)", visit.id, visit.full_name, visit.phone)
        return visit


class VisitRequestOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = VisitRequest
        fields = [
            "id",
            "full_name",
            "phone",
            "city",
            "district",
            "address",
            "material_type",
            "approx_meters",
            "preferred_datetime",
            "notes",
            "status",
            "created_at",
            "updated_at",
        ]


class VisitRequestStatusPatchSerializer(serializers.ModelSerializer):
    """Status-only update; any status may follow any other."""

    status = serializers.ChoiceField(
        choices=VisitRequest.Status.choices,
        error_messages={"invalid_choice": "حالة الطلب غير صالحة"},
    )

    class Meta:
        model = VisitRequest
        fields = ["status"]
