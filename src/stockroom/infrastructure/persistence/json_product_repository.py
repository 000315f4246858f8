"""JSON-file-backed implementation of ProductRepository.

The whole collection lives in one named slot, ``<data_dir>/<slot>.json``,
as an array of ``{"id", "name", "quantity"}`` records. Every save
replaces the file; nothing is ever patched in place.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from stockroom.domain.exceptions import PersistenceError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_SLOT = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, data_dir: Path, slot: str = DEFAULT_SLOT) -> None:
        self._file_path = Path(data_dir) / f"{slot}.json"

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def load_all(self) -> list[Product]:
        if not self._file_path.exists():
            return []
        try:
            return [self._to_domain(raw) for raw in self._load_raw()]
        except PersistenceError as exc:
            logger.error("Could not load products from %s: %s", self._file_path, exc)
            return []

    def save_all(self, products: list[Product]) -> None:
        try:
            self._persist_raw([self._to_raw(p) for p in products])
        except PersistenceError as exc:
            logger.error("Could not save products to %s: %s", self._file_path, exc)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        if not isinstance(raw, dict):
            raise PersistenceError(f"Malformed product record: {raw!r}")
        product_id = raw.get("id")
        name = raw.get("name")
        quantity = raw.get("quantity")

        if not isinstance(product_id, str) or not product_id:
            raise PersistenceError(f"Missing or invalid id in record: {raw!r}")
        if not isinstance(name, str) or not name.strip():
            raise PersistenceError(f"Missing or blank name in record: {raw!r}")
        # bool is an int subclass; 5.9 or "5" are not counts either
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise PersistenceError(f"Non-integer quantity in record: {raw!r}")
        if quantity < 0:
            raise PersistenceError(f"Negative quantity in record: {raw!r}")
        return Product(id=product_id, name=name, quantity=quantity)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(str(exc)) from exc
        if not isinstance(records, list):
            raise PersistenceError(
                f"Expected a JSON array, got {type(records).__name__}"
            )
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            payload = (json.dumps(records, ensure_ascii=False, indent=2) + "\n").encode("utf-8")
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            # Temp file + rename: the slot is only ever replaced whole.
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=f".{self._file_path.name}."
            )
            try:
                with os.fdopen(fd, "wb") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, ValueError) as exc:
            # UnicodeEncodeError (lone surrogates) is a ValueError
            raise PersistenceError(str(exc)) from exc
