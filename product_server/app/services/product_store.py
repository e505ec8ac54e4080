"""
In-memory store for product records.

``ProductStore`` keeps an ordered list of ``Product`` objects for the
lifetime of the process.  The application owns exactly one instance
(see ``create_app``), but nothing here is global: tests build a fresh
store per test.

Records never leave the store by reference.  Every read returns a deep
copy and every write stores a copy of its argument, so a handler that
mutates a returned record cannot change what other requests see.
All operations take an internal lock, which keeps read-modify-write
sequences such as ``update`` consistent if the server is ever run with
more than one worker thread.

Identifiers are not checked for uniqueness on ``add``.  When several
records share an id, lookups, updates and removals act on the first
one in insertion order.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, List, Optional, Tuple

from product_server.app.schemas.product import Product, ProductUpdate


logger = logging.getLogger(__name__)


SEED_PRODUCTS: Tuple[Dict[str, Any], ...] = (
    {"id": 1001, "title": "T-Shirt", "sku": "ABC-1001", "price": 49900},
    {"id": 1002, "title": "Cap", "sku": "ABC-1002", "price": 19900},
    {"id": 1003, "title": "Jeans", "sku": "ABC-1003", "price": 99900},
)


class ProductStore:
    """Ordered, lock-protected collection of products."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._lock = threading.Lock()
        self._products: List[Product] = [p.model_copy(deep=True) for p in products or ()]

    @classmethod
    def seeded(cls) -> "ProductStore":
        """Return a store holding the three demo products."""
        return cls(Product.model_validate(data) for data in SEED_PRODUCTS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def all(self) -> List[Product]:
        """Return copies of every product in insertion order."""
        with self._lock:
            return [p.model_copy(deep=True) for p in self._products]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return a copy of the first product with ``product_id`` or ``None``."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products[index].model_copy(deep=True)

    def add(self, product: Product) -> None:
        """Append ``product`` to the end of the store.

        No validation is done beyond what ``Product`` enforces and no
        id collision check is made.
        """
        with self._lock:
            self._products.append(product.model_copy(deep=True))
            total = len(self._products)
        logger.info("Added product %s (%d in store)", product.id, total)

    def remove(self, product_id: int) -> bool:
        """Remove the first product with ``product_id``.

        Returns ``True`` if a product was removed.
        """
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return False
            del self._products[index]
        logger.info("Removed product %s", product_id)
        return True

    def update(self, product_id: int, partial: ProductUpdate) -> bool:
        """Apply the supplied fields of ``partial`` to a stored product.

        Only ``title``, ``sku`` and ``price`` are touched, and only when
        they are present and not null in ``partial``.  Returns ``True``
        if a product with ``product_id`` exists, even when nothing
        changed.
        """
        changes = partial.changes()
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return False
            product = self._products[index]
            for name, value in changes.items():
                setattr(product, name, value)
        logger.info("Updated product %s fields=%s", product_id, sorted(changes))
        return True

    def _index_of(self, product_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
