"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from stockroom.domain.exceptions import ValidationError

# Plain ASCII digits; a sign is accepted so "-3" reports as negative
_INTEGER_TEXT = re.compile(r"-?\d+", re.ASCII)


@dataclass(frozen=True)
class ProductName:
    """A non-empty product name, stripped of surrounding whitespace."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Product name must be a string, got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise ValidationError("Product name is required")
        try:
            self.value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValidationError(f"Product name is not valid text: {self.value!r}") from exc
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer stock count."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful count
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(text: str | None) -> Quantity:
        """Parse free-text input (e.g. ``" 12 "``) into a Quantity."""
        if text is None or not str(text).strip():
            raise ValidationError("Quantity is required")
        digits = str(text).strip()
        if not _INTEGER_TEXT.fullmatch(digits):
            raise ValidationError(f"Invalid quantity: {text!r}")
        return Quantity(int(digits))
