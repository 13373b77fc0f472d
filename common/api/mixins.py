"""Small view helpers shared by the API apps."""

from django.http import Http404
from rest_framework.exceptions import NotFound, ValidationError


class LocalizedNotFoundMixin:
    """Replace DRF's generic 404 text with a message naming the missing resource."""

    not_found_message = "العنصر غير موجود"

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)


def validate_patch_only_status(data) -> None:
    """Reject PATCH bodies that touch anything besides 'status'."""
    if "status" not in data:
        raise ValidationError({"status": "الحالة مطلوبة"})
    extra = set(data.keys()) - {"status"}
    if extra:
        raise ValidationError(
            {"status": f"يمكن تعديل الحالة فقط. حقول غير مسموحة: {', '.join(sorted(extra))}"}
        )
