"""The visitor's cart.

A cart is an ordered list of ``CartLine`` snapshots, at most one per
product. Every mutation is written straight to the configured
``CartStorage`` as a JSON list, and a cart that cannot be read back
(missing, malformed, wrong shape) starts out empty.
"""

import json
import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

from django.conf import settings

from . import pricing
from .storage import CartStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartLine:
    """Product snapshot taken when it was added, plus the chosen meters."""

    product_id: int
    title_ar: str
    material_type: str
    price_per_meter: Decimal | None
    is_custom_price: bool
    meters: Decimal
    image_url: str | None = None

    @classmethod
    def from_product(cls, product: dict, meters) -> "CartLine":
        """Build a line from a product as returned by the catalog API."""
        images = product.get("images") or []
        return cls(
            product_id=int(product["id"]),
            title_ar=product["title_ar"],
            material_type=product["material_type"],
            price_per_meter=pricing.to_decimal(product.get("price_per_meter")),
            is_custom_price=bool(product.get("is_custom_price")),
            meters=pricing.round_meters(meters),
            image_url=images[0]["url"] if images else None,
        )

    @property
    def line_total(self) -> Decimal | None:
        return pricing.line_total(self)

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "title_ar": self.title_ar,
            "material_type": self.material_type,
            "price_per_meter": None if self.price_per_meter is None else str(self.price_per_meter),
            "is_custom_price": self.is_custom_price,
            "meters": str(self.meters),
            "image_url": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        return cls(
            product_id=int(data["product_id"]),
            title_ar=str(data["title_ar"]),
            material_type=str(data["material_type"]),
            price_per_meter=pricing.to_decimal(data.get("price_per_meter")),
            is_custom_price=bool(data.get("is_custom_price", False)),
            meters=pricing.to_decimal(data["meters"]),
            image_url=data.get("image_url"),
        )


# ---- helpers ----

def _decode(raw: str) -> list[CartLine]:
    """Parse stored lines; duplicate products or out-of-range meters count as corrupt."""
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("cart payload is not a list")
    lines = [CartLine.from_dict(item) for item in data]
    seen = set()
    for line in lines:
        if line.product_id in seen:
            raise ValueError(f"product {line.product_id} stored twice")
        if pricing.parse_meters(line.meters) is None:
            raise ValueError(f"invalid meters for product {line.product_id}")
        seen.add(line.product_id)
    return lines


# ---- cart ----

class Cart:
    """
    Persistent cart bound to one storage key.

    Lines keep insertion order; adding a product that is already in the cart
    adds to its meters instead of creating a second line.
    """

    def __init__(self, storage: CartStorage, key: str | None = None):
        self.storage = storage
        self.key = key or settings.STOREFRONT_CART_STORAGE_KEY
        self._lines: list[CartLine] = self._load()

    def _load(self) -> list[CartLine]:
        try:
            raw = self.storage.read(self.key)
        except OSError:
            logger.warning("Could not read cart stored under %r", self.key, exc_info=True)
            return []
        if raw is None:
            return []
        try:
            return _decode(raw)
        except (ValueError, TypeError, KeyError, AttributeError, InvalidOperation):
            logger.warning("Discarding unreadable cart stored under %r", self.key)
            try:
                self.storage.clear(self.key)
            except OSError:
                logger.warning("Could not clear cart stored under %r", self.key, exc_info=True)
            return []

    def _save(self) -> None:
        payload = json.dumps([line.to_dict() for line in self._lines], ensure_ascii=False)
        self.storage.write(self.key, payload)

    def _index(self, product_id: int) -> int | None:
        for index, line in enumerate(self._lines):
            if line.product_id == product_id:
                return index
        return None

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def item_count(self) -> int:
        """Number of distinct products, not total meters."""
        return len(self._lines)

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    def add_item(self, line: CartLine) -> CartLine | None:
        """
        Add a line. When the product is already in the cart its meters grow by
        the new line's meters and the original snapshot is kept.

        Returns the stored line, or None when the resulting meters would be
        below the minimum (the cart is left unchanged).
        """
        index = self._index(line.product_id)
        if index is None:
            meters = pricing.parse_meters(line.meters)
            if meters is None:
                return None
            line = replace(line, meters=meters)
            self._lines.append(line)
        else:
            current = self._lines[index]
            meters = pricing.parse_meters(current.meters + line.meters)
            if meters is None:
                return None
            line = replace(current, meters=meters)
            self._lines[index] = line
        self._save()
        return line

    def remove_item(self, product_id: int) -> None:
        """Drop the line for ``product_id``; unknown ids are a no-op."""
        index = self._index(product_id)
        if index is None:
            return
        del self._lines[index]
        self._save()

    def update_meters(self, product_id: int, meters) -> bool:
        """
        Set a line's meters. Non-numeric values and values below the minimum
        are ignored and the line keeps its previous meters. Returns whether
        anything changed.
        """
        meters = pricing.parse_meters(meters)
        if meters is None:
            return False
        index = self._index(product_id)
        if index is None:
            return False
        self._lines[index] = replace(self._lines[index], meters=meters)
        self._save()
        return True

    def clear_cart(self) -> None:
        self._lines = []
        self._save()

    def get_total(self) -> Decimal:
        return pricing.cart_total(self._lines)

    def has_custom_price_items(self) -> bool:
        return pricing.has_custom_price_items(self._lines)

    def next_step(self) -> str:
        return pricing.next_step(self._lines)
