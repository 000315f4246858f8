"""Product entity and the ordering every product listing follows.

Products are the only thing the tracker stores. Each one has an id that
never changes, and a name and stock count that the user edits freely.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from pyuca import Collator

from stockroom.domain.model.value_objects import ProductName, Quantity


@dataclass
class Product:
    """A tracked product.

    Kept as a mutable dataclass because renaming and adjusting stock are
    legitimate in-place mutations. ``quantity`` is never negative.
    """

    id: str
    name: str
    quantity: int

    @staticmethod
    def create(name: ProductName, quantity: Quantity) -> Product:
        """Build a new product with a freshly generated id."""
        return Product(id=new_product_id(), name=name.value, quantity=quantity.value)

    def update(self, name: ProductName, quantity: Quantity) -> None:
        """Replace name and quantity; the id is left untouched."""
        self.name = name.value
        self.quantity = quantity.value

    def increase(self) -> None:
        self.quantity += 1

    def decrease(self) -> bool:
        """Take one unit out of stock.

        Clamped at zero: returns False (and changes nothing) when the
        product is already out of stock.
        """
        if self.quantity <= 0:
            return False
        self.quantity -= 1
        return True


def new_product_id() -> str:
    return uuid.uuid4().hex


_COLLATOR = Collator()


def name_sort_key(product: Product) -> tuple[int, ...]:
    """Unicode collation key (accents and case sort after the base letter).

    Independent of the process locale.
    """
    return _COLLATOR.sort_key(product.name)


def sort_products(products: Iterable[Product]) -> list[Product]:
    """Return products ascending by name.

    ``sorted`` is stable, so products with identical names keep their
    relative order.
    """
    return sorted(products, key=name_sort_key)
