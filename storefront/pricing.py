"""Cart pricing and meter arithmetic.

All values derive from cart lines and never modify them. Money is Decimal
rounded to halalas (two places), meters are rounded to one decimal place.
Lines are duck-typed: anything with ``meters``, ``price_per_meter`` and
``is_custom_price`` works.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.conf import settings

MIN_METERS = Decimal("0.5")
METERS_STEP = Decimal("0.5")

CENTS = Decimal("0.01")
TENTHS = Decimal("0.1")

NEXT_STEP_CHECKOUT = "checkout"
NEXT_STEP_QUOTE = "quote"

# Arabic-Indic digits; "," and "." become the Arabic thousands and decimal separators
_ARABIC_DIGITS = str.maketrans("0123456789,.", "٠١٢٣٤٥٦٧٨٩٬٫")


def to_decimal(value) -> Decimal | None:
    """Decimal from API/JSON values; floats go through str to avoid binary noise."""
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def is_priced(line) -> bool:
    return not line.is_custom_price and line.price_per_meter is not None


def line_total(line) -> Decimal | None:
    """price_per_meter x meters, or None for lines that need a quote."""
    if not is_priced(line):
        return None
    return (line.price_per_meter * line.meters).quantize(CENTS, rounding=ROUND_HALF_UP)


def cart_total(lines) -> Decimal:
    """Sum of every priced line; custom-priced lines contribute nothing."""
    total = Decimal("0")
    for line in lines:
        amount = line_total(line)
        if amount is not None:
            total += amount
    return total.quantize(CENTS)


def has_custom_price_items(lines) -> bool:
    return any(line.is_custom_price for line in lines)


def requires_quote(lines) -> bool:
    return has_custom_price_items(lines)


def next_step(lines) -> str:
    """Where the cart leads: a visit/quote request, or straight to checkout."""
    return NEXT_STEP_QUOTE if requires_quote(lines) else NEXT_STEP_CHECKOUT


def round_meters(value) -> Decimal:
    return to_decimal(value).quantize(TENTHS, rounding=ROUND_HALF_UP)


def increment_meters(value, step: Decimal = METERS_STEP) -> Decimal:
    return round_meters(to_decimal(value) + step)


def decrement_meters(value, step: Decimal = METERS_STEP, minimum: Decimal = MIN_METERS) -> Decimal:
    """Step down, never below ``minimum``."""
    return round_meters(max(minimum, to_decimal(value) - step))


def parse_meters(raw, minimum: Decimal = MIN_METERS) -> Decimal | None:
    """
    Parse free-form meter input.
    Returns None when the input is not a number or is below ``minimum``;
    callers ignore such input and keep the previous value.
    """
    if raw is None:
        return None
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        return None
    if not value.is_finite() or value < minimum:
        return None
    return round_meters(value)


def format_price(amount, suffix: str | None = None) -> str:
    """
    Render an amount for display, e.g. Decimal("1250.5") -> "١٬٢٥٠٫٥ ر.س".
    A zero fraction is dropped ("150.00" -> "١٥٠").
    """
    if suffix is None:
        suffix = settings.STOREFRONT_CURRENCY_SUFFIX
    value = to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    text = text.translate(_ARABIC_DIGITS)
    return f"{text} {suffix}" if suffix else text
