"""Abstract repository for the product collection.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, queued writer,
in-memory fake) live elsewhere.

The collection is always read and written as a whole: there are no
partial updates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def load_all(self) -> list[Product]:
        """Return every stored product, or an empty list.

        Must not raise: storage problems degrade to an empty collection.
        """

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Replace the stored collection with ``products``.

        Must not raise: storage problems are logged and the write dropped.
        """

    def flush(self) -> None:
        """Block until earlier save_all() calls have reached storage."""

    def close(self) -> None:
        """Flush and release whatever the repository holds open."""
        self.flush()
