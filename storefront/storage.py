"""Key-value storage backends for the cart.

The cart only needs to read, write and clear one string under a fixed key,
so any backend implementing ``CartStorage`` can hold it: process memory, a
JSON file on disk, or the Django session of the browsing visitor.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path

from django.conf import settings


class CartStorage(ABC):
    """Storage port used by ``storefront.cart.Cart``."""

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the stored value or None when nothing is stored."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store ``value``, replacing what was there."""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Forget ``key``; no error if it is absent."""


class MemoryStorage(CartStorage):
    """Process-local storage, for tests and short-lived clients."""

    def __init__(self, initial: dict | None = None):
        self._data = dict(initial or {})

    def read(self, key):
        return self._data.get(key)

    def write(self, key, value):
        self._data[key] = value

    def clear(self, key):
        self._data.pop(key, None)


class FileStorage(CartStorage):
    """One ``<key>.json`` file per key inside ``directory``.

    Writes go to a temporary file first and are moved into place, so a crash
    mid-write leaves the previous cart intact.
    """

    def __init__(self, directory: str | os.PathLike | None = None):
        self.directory = Path(directory or settings.STOREFRONT_CART_DIR)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key):
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, key, value):
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)

    def clear(self, key):
        self._path(key).unlink(missing_ok=True)


class SessionStorage(CartStorage):
    """Keeps the cart in a Django session (``request.session``)."""

    def __init__(self, session):
        self.session = session

    def read(self, key):
        value = self.session.get(key)
        return value if isinstance(value, str) else None

    def write(self, key, value):
        self.session[key] = value

    def clear(self, key):
        self.session.pop(key, None)
