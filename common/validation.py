"""Validation rules shared by the storefront client and the API.

Each entity has exactly one serializer here. The API views use them as the
authoritative gate; the storefront workflows run the same classes as a
pre-check before anything is sent, so the two sides cannot drift apart.
"""

import re

from django.core.validators import RegexValidator
from rest_framework import serializers

from catalog.models import MaterialType

SAUDI_PHONE_PATTERN = r"^(05|5)\d{8}$"
LOCAL_DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2})?$")

saudi_phone_validator = RegexValidator(
    SAUDI_PHONE_PATTERN,
    message="رقم الجوال يجب أن يبدأ بـ 05 ويتكون من 10 أرقام",
)


def _min_length(length: int, message: str):
    """CharField that reports both 'required' and 'too short' with one message."""
    return serializers.CharField(
        min_length=length,
        error_messages={
            "required": message,
            "blank": message,
            "null": message,
            "min_length": message,
        },
    )


class CustomerSerializer(serializers.Serializer):
    """Customer and delivery location fields used by checkout and visit requests."""

    full_name = _min_length(3, "الاسم يجب أن يكون 3 أحرف على الأقل")
    phone = serializers.CharField(
        validators=[saudi_phone_validator],
        error_messages={
            "required": saudi_phone_validator.message,
            "blank": saudi_phone_validator.message,
            "null": saudi_phone_validator.message,
        },
    )
    city = _min_length(2, "يرجى إدخال المدينة")
    district = _min_length(2, "يرجى إدخال الحي")
    address = _min_length(5, "يرجى إدخال العنوان التفصيلي")
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")

    def validate_notes(self, value):
        return value or ""


class VisitRequestFormSerializer(CustomerSerializer):
    """Customer fields plus what the visit is about.

    `approx_meters` and `preferred_datetime` are free-form on the form; they are
    only checked for shape when present and normalised to None when blank.
    """

    material_type = serializers.ChoiceField(
        choices=MaterialType.choices,
        error_messages={
            "required": "يرجى اختيار نوع الخامة",
            "blank": "يرجى اختيار نوع الخامة",
            "null": "يرجى اختيار نوع الخامة",
            "invalid_choice": "يرجى اختيار نوع الخامة",
        },
    )
    approx_meters = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    preferred_datetime = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=None
    )

    def validate_approx_meters(self, value):
        if value in (None, ""):
            return None
        field = serializers.DecimalField(
            max_digits=10,
            decimal_places=2,
            min_value=0,
            error_messages={
                "invalid": "المساحة التقريبية يجب أن تكون رقماً",
                "min_value": "المساحة التقريبية يجب أن تكون رقماً موجباً",
                "max_digits": "المساحة التقريبية غير صالحة",
                "max_decimal_places": "المساحة التقريبية غير صالحة",
                "max_whole_digits": "المساحة التقريبية غير صالحة",
            },
        )
        return field.run_validation(value)

    def validate_preferred_datetime(self, value):
        if value in (None, ""):
            return None
        if not LOCAL_DATETIME_PATTERN.match(value):
            raise serializers.ValidationError("صيغة الموعد المفضل غير صحيحة")
        return value


def first_error_message(errors) -> str:
    """Return the first message found in a DRF error structure."""
    if isinstance(errors, dict):
        for value in errors.values():
            message = first_error_message(value)
            if message:
                return message
        return ""
    if isinstance(errors, (list, tuple)):
        for value in errors:
            message = first_error_message(value)
            if message:
                return message
        return ""
    return str(errors)


def field_errors(errors: dict) -> dict:
    """Flatten serializer errors to one message per field."""
    return {field: first_error_message(messages) for field, messages in errors.items()}
