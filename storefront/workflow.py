"""Checkout and visit-request submission.

Both flows run the shared serializers from ``common.validation`` before
anything is sent, keep one submission in flight at a time, and turn every
failure into a message on ``error`` with the form left as it was, ready for
another attempt.

    workflow = CheckoutWorkflow(cart, client)
    workflow.set_field("full_name", "محمد أحمد")
    ...
    if workflow.submit():
        show_confirmation(workflow.order_number)
"""

import enum
import logging
from decimal import Decimal

from common.validation import CustomerSerializer, VisitRequestFormSerializer, field_errors
from . import pricing
from .cart import Cart
from .exceptions import (
    EmptyCartError,
    NotFound,
    RateLimited,
    StorefrontError,
    SubmissionInProgress,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

CUSTOMER_FIELDS = ("full_name", "phone", "city", "district", "address", "notes")
VISIT_FIELDS = CUSTOMER_FIELDS + ("material_type", "approx_meters", "preferred_datetime")

ORDER_ERROR_MESSAGE = "حدث خطأ أثناء إرسال الطلب. يرجى المحاولة مرة أخرى."
VISIT_ERROR_MESSAGE = "حدث خطأ أثناء إرسال طلب الزيارة. يرجى المحاولة مرة أخرى."

# Server messages that make sense to the customer as they are
_SURFACED_ERRORS = (ValidationFailed, NotFound, RateLimited)


class SubmissionState(enum.Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# ---- helpers ----

def _jsonable(data: dict) -> dict:
    return {key: str(value) if isinstance(value, Decimal) else value for key, value in data.items()}


def _money(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


# ---- workflows ----

class SubmissionWorkflow:
    """
    Form state machine: EDITING -> SUBMITTING -> SUCCEEDED | FAILED.

    Subclasses name their fields and schema, and implement ``_send`` (the
    API call) and ``_on_success``.
    """

    fields: tuple = ()
    schema_class = None
    error_message = ""

    def __init__(self, client):
        self.client = client
        self.form = self.empty_form()
        self.field_errors: dict[str, str] = {}
        self.error: str | None = None
        self.state = SubmissionState.EDITING

    def empty_form(self) -> dict:
        return {name: "" for name in self.fields}

    @property
    def can_submit(self) -> bool:
        return self.state is not SubmissionState.SUBMITTING

    def set_field(self, name: str, value) -> None:
        """Update one form field; clears that field's error and any failure."""
        if name not in self.fields:
            raise KeyError(name)
        if self.state is SubmissionState.SUBMITTING:
            raise SubmissionInProgress()
        self.form[name] = value
        self.field_errors.pop(name, None)
        self.error = None
        self.state = SubmissionState.EDITING

    def validate(self) -> dict | None:
        """Run the shared schema. Returns cleaned data, or None with ``field_errors`` set."""
        serializer = self.schema_class(data=self.form)
        if serializer.is_valid():
            self.field_errors = {}
            return dict(serializer.validated_data)
        self.field_errors = field_errors(serializer.errors)
        return None

    def _check_can_start(self) -> None:
        if self.state is SubmissionState.SUBMITTING:
            raise SubmissionInProgress()

    def submit(self) -> bool:
        """
        Validate and send the form. Returns True on success.
        On any failure ``error`` or ``field_errors`` explain why and the form
        is left as entered.
        """
        self._check_can_start()
        data = self.validate()
        if data is None:
            self.state = SubmissionState.EDITING
            return False

        self.error = None
        self.state = SubmissionState.SUBMITTING
        try:
            result = self._send(data)
        except _SURFACED_ERRORS as e:
            logger.warning("%s rejected: %s", type(self).__name__, e.user_message)
            return self._fail(e.user_message)
        except StorefrontError as e:
            logger.warning("%s failed: %r", type(self).__name__, e)
            return self._fail(self.error_message)
        except Exception:
            logger.exception("%s failed unexpectedly", type(self).__name__)
            return self._fail(self.error_message)

        # the server write stands even if local cleanup fails
        self.state = SubmissionState.SUCCEEDED
        try:
            self._on_success(result)
        except Exception:
            logger.exception("%s succeeded but local cleanup failed", type(self).__name__)
        return True

    def _fail(self, message: str) -> bool:
        self.error = message
        self.state = SubmissionState.FAILED
        return False

    def _send(self, data: dict) -> dict:
        raise NotImplementedError

    def _on_success(self, result: dict) -> None:
        raise NotImplementedError


class CheckoutWorkflow(SubmissionWorkflow):
    """Turn the cart plus customer details into an order."""

    fields = CUSTOMER_FIELDS
    schema_class = CustomerSerializer
    error_message = ORDER_ERROR_MESSAGE

    def __init__(self, cart: Cart, client):
        super().__init__(client)
        self.cart = cart
        self.order_number: int | None = None

    @property
    def view(self) -> str:
        """Which screen to show: 'confirmation', 'empty' or 'form'."""
        if self.order_number is not None or self.state is SubmissionState.SUCCEEDED:
            return "confirmation"
        if self.cart.item_count == 0:
            return "empty"
        return "form"

    def _check_can_start(self) -> None:
        super()._check_can_start()
        if self.cart.item_count == 0:
            raise EmptyCartError()

    def build_payload(self, customer: dict) -> dict:
        """Order request body: customer fields, one item per cart line, subtotal."""
        items = []
        for line in self.cart.lines:
            item = {
                "product_id": line.product_id,
                "meters": str(line.meters),
                "price_per_meter": _money(line.price_per_meter),
                "title_snapshot_ar": line.title_ar,
                "material_snapshot": line.material_type,
            }
            total = pricing.line_total(line)
            if total is not None:
                item["line_total"] = str(total)
            items.append(item)
        payload = _jsonable(customer)
        payload["items"] = items
        payload["subtotal_amount"] = str(pricing.cart_total(self.cart.lines))
        return payload

    def _send(self, data):
        return self.client.create_order(self.build_payload(data))

    def _on_success(self, result):
        self.order_number = result.get("id")
        self.cart.clear_cart()
        logger.info("Order %s confirmed", self.order_number)


class VisitRequestWorkflow(SubmissionWorkflow):
    """Book a measuring visit; the cart is not involved."""

    fields = VISIT_FIELDS
    schema_class = VisitRequestFormSerializer
    error_message = VISIT_ERROR_MESSAGE

    def __init__(self, client):
        super().__init__(client)
        self.request_id: int | None = None

    @property
    def view(self) -> str:
        return "success" if self.state is SubmissionState.SUCCEEDED else "form"

    def _send(self, data):
        return self.client.create_visit_request(_jsonable(data))

    def _on_success(self, result):
        self.request_id = result.get("id")
        self.form = self.empty_form()
        logger.info("Visit request %s confirmed", self.request_id)
