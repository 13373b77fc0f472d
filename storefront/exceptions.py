"""Errors raised by the storefront client.

Every API failure is mapped onto one of these so the UI layer only has to
know a handful of categories. ``user_message`` is what gets shown.
"""

GENERIC_ERROR_MESSAGE = "حدث خطأ ما، يرجى المحاولة مرة أخرى"


class StorefrontError(Exception):
    """Base class for all storefront client errors."""

    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        return self.message


class ValidationFailed(StorefrontError):
    """The API rejected the payload (400); message is its first error."""

    default_message = "البيانات المدخلة غير صحيحة"


class NotFound(StorefrontError):
    default_message = "العنصر غير موجود"


class Unauthorized(StorefrontError):
    """Missing, invalid or expired admin token; the user has to log in again."""

    default_message = "غير مصرح، يرجى تسجيل الدخول"


class RateLimited(StorefrontError):
    default_message = "عدد المحاولات كثير، يرجى المحاولة لاحقاً"


class ServerError(StorefrontError):
    """Any other non-success response."""


class ServiceUnavailable(StorefrontError):
    """The API could not be reached at all."""

    default_message = "تعذر الاتصال بالخادم، يرجى المحاولة مرة أخرى"


class EmptyCartError(StorefrontError):
    """Checkout was started with nothing in the cart."""

    default_message = "السلة فارغة"


class SubmissionInProgress(StorefrontError):
    """A second submit while the first one is still waiting for the API."""

    default_message = "جاري إرسال الطلب"
