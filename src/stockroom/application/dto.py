"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the mutable Product entities to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: one row of the sorted product list."""

    id: str
    name: str
    quantity: int


@dataclass(frozen=True)
class EditFormDTO:
    """Output of begin_edit: the values to prefill the input fields with."""

    product_id: str
    name: str
    quantity_text: str


@dataclass(frozen=True)
class RemovalRequestDTO:
    """Output of request_removal: what the user is asked to confirm."""

    product_id: str
    name: str
    quantity: int

    @property
    def prompt(self) -> str:
        return f"Remove '{self.name}' ({self.quantity} in stock)?"
