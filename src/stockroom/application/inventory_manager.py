"""Application service: the inventory manager.

Owns the live product collection and the optional "product under edit"
marker. Every mutating operation updates memory, re-sorts, hands the
whole collection to the repository and returns the sorted list the
caller should render. Writing is the repository's business; with the
queued repository the caller never waits for it.
"""

from __future__ import annotations

import logging

from stockroom.application.dto import EditFormDTO, ProductDTO, RemovalRequestDTO
from stockroom.domain.exceptions import NoEditInProgressError, NotFoundError
from stockroom.domain.model.product import Product, sort_products
from stockroom.domain.model.value_objects import ProductName, Quantity
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryManager:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._products: list[Product] = []
        self._editing_id: str | None = None

    @property
    def editing_id(self) -> str | None:
        """Id of the product currently being edited, if any."""
        return self._editing_id

    # --- Queries --------------------------------------------------------------

    def load(self) -> list[ProductDTO]:
        """Replace the in-memory collection with what storage holds."""
        self._products = sort_products(self._product_repo.load_all())
        self._editing_id = None
        logger.info("Loaded %d product(s)", len(self._products))
        return self.list_products()

    def list_products(self) -> list[ProductDTO]:
        return [self._to_dto(p) for p in self._products]

    # --- Commands -------------------------------------------------------------

    def add(self, name: str, quantity_text: str) -> list[ProductDTO]:
        """Add a new product.

        Raises ValidationError (leaving the collection untouched) if the
        name is blank or the quantity is missing or not an integer.
        """
        product = Product.create(ProductName(name), Quantity.of(quantity_text))
        self._products.append(product)
        self._editing_id = None
        logger.info("Added product %s '%s' x%d", product.id, product.name, product.quantity)
        return self._commit()

    def begin_edit(self, product_id: str) -> EditFormDTO:
        product = self._get(product_id)
        self._editing_id = product.id
        return EditFormDTO(
            product_id=product.id,
            name=product.name,
            quantity_text=str(product.quantity),
        )

    def commit_edit(self, name: str, quantity_text: str) -> list[ProductDTO]:
        """Apply new values to the product marked by begin_edit()."""
        if self._editing_id is None:
            raise NoEditInProgressError("No product is being edited")

        new_name = ProductName(name)
        new_quantity = Quantity.of(quantity_text)

        editing_id, self._editing_id = self._editing_id, None
        product = self._get(editing_id)
        product.update(new_name, new_quantity)
        logger.info("Edited product %s -> '%s' x%d", product.id, product.name, product.quantity)
        return self._commit()

    def cancel_edit(self) -> None:
        self._editing_id = None

    def request_removal(self, product_id: str) -> RemovalRequestDTO:
        """First phase of removal: describe the product to be confirmed."""
        product = self._get(product_id)
        return RemovalRequestDTO(
            product_id=product.id,
            name=product.name,
            quantity=product.quantity,
        )

    def confirm_removal(self, product_id: str, confirmed: bool = True) -> list[ProductDTO]:
        """Second phase of removal.

        Declining (``confirmed=False``) changes nothing and writes nothing.
        """
        if not confirmed:
            logger.debug("Removal of %s declined", product_id)
            return self.list_products()

        product = self._get(product_id)
        self._products = [p for p in self._products if p.id != product.id]
        if self._editing_id == product.id:
            self._editing_id = None
        logger.info("Removed product %s '%s'", product.id, product.name)
        return self._commit()

    def increase_quantity(self, product_id: str) -> list[ProductDTO]:
        product = self._get(product_id)
        product.increase()
        logger.info("Increased %s to %d", product.id, product.quantity)
        return self._commit()

    def decrease_quantity(self, product_id: str) -> list[ProductDTO]:
        """Take one unit out of stock; a product at zero stays at zero."""
        product = self._get(product_id)
        if not product.decrease():
            logger.debug("Product %s already at zero, nothing to write", product.id)
            return self.list_products()
        logger.info("Decreased %s to %d", product.id, product.quantity)
        return self._commit()

    def flush(self) -> None:
        """Wait for pending writes to reach storage."""
        self._product_repo.flush()

    def close(self) -> None:
        """Flush pending writes and shut the repository down."""
        self._product_repo.close()

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: str) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        raise NotFoundError(f"Product with ID '{product_id}' not found")

    def _commit(self) -> list[ProductDTO]:
        self._products = sort_products(self._products)
        self._product_repo.save_all(list(self._products))
        return self.list_products()

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(id=product.id, name=product.name, quantity=product.quantity)
