"""Unit tests for Value Objects: ProductName and Quantity."""

import pytest

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.value_objects import ProductName, Quantity


class TestProductName:

    def test_strips_whitespace(self):
        assert ProductName("  Apple ").value == "Apple"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            ProductName("")

    def test_blank_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            ProductName("   ")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            ProductName(None)  # type: ignore[arg-type]

    def test_unencodable_text_rejected(self):
        # e.g. undecodable argv bytes smuggled in as lone surrogates
        with pytest.raises(ValidationError, match="not valid text"):
            ProductName("Caf\udce9")

    def test_accented_name_kept(self):
        assert ProductName("Açúcar").value == "Açúcar"

    def test_str(self):
        assert str(ProductName("Apple")) == "Apple"


class TestQuantity:

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)  # type: ignore[arg-type]

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_of_parses_text(self):
        assert Quantity.of("12") == Quantity(12)

    def test_of_tolerates_surrounding_whitespace(self):
        assert Quantity.of(" 7 ") == Quantity(7)

    def test_of_empty_rejected(self):
        with pytest.raises(ValidationError, match="Quantity is required"):
            Quantity.of("")

    def test_of_none_rejected(self):
        with pytest.raises(ValidationError, match="Quantity is required"):
            Quantity.of(None)

    def test_of_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity.of("five")

    def test_of_trailing_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity.of("5abc")

    @pytest.mark.parametrize("text", ["1_000", "+5", "\u0663", "5.0", "1e3"])
    def test_of_only_plain_ascii_digits(self, text):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity.of(text)

    def test_of_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity.of("-3")
