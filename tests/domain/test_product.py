"""Unit tests for the Product entity and name ordering."""

import locale

from stockroom.domain.model.product import Product, sort_products
from stockroom.domain.model.value_objects import ProductName, Quantity


def _names(products):
    return [p.name for p in products]


class TestProductCreate:

    def test_create_assigns_id(self):
        product = Product.create(ProductName("Apple"), Quantity(5))
        assert product.id
        assert product.name == "Apple"
        assert product.quantity == 5

    def test_ids_unique_under_rapid_creation(self):
        ids = {Product.create(ProductName("X"), Quantity(1)).id for _ in range(1000)}
        assert len(ids) == 1000


class TestProductMutation:

    def test_update_keeps_id(self):
        product = Product(id="a1", name="Apple", quantity=5)
        product.update(ProductName("Green Apple"), Quantity(10))
        assert product == Product(id="a1", name="Green Apple", quantity=10)

    def test_increase(self):
        product = Product(id="a1", name="Apple", quantity=5)
        product.increase()
        assert product.quantity == 6

    def test_decrease(self):
        product = Product(id="a1", name="Apple", quantity=5)
        assert product.decrease() is True
        assert product.quantity == 4

    def test_decrease_at_zero_is_clamped(self):
        product = Product(id="a1", name="Apple", quantity=0)
        assert product.decrease() is False
        assert product.quantity == 0

    def test_increase_then_decrease_round_trip(self):
        product = Product(id="a1", name="Apple", quantity=3)
        product.increase()
        product.decrease()
        assert product.quantity == 3


class TestSortProducts:

    def test_sorted_ascending_by_name(self):
        products = [
            Product(id="1", name="Cherry", quantity=1),
            Product(id="2", name="Apple", quantity=1),
            Product(id="3", name="Banana", quantity=1),
        ]
        assert _names(sort_products(products)) == ["Apple", "Banana", "Cherry"]

    def test_case_does_not_split_alphabet(self):
        products = [
            Product(id="1", name="banana", quantity=1),
            Product(id="2", name="Cherry", quantity=1),
            Product(id="3", name="apple", quantity=1),
        ]
        assert _names(sort_products(products)) == ["apple", "banana", "Cherry"]

    def test_equal_names_keep_relative_order(self):
        products = [
            Product(id="first", name="Apple", quantity=1),
            Product(id="other", name="Banana", quantity=1),
            Product(id="second", name="Apple", quantity=2),
        ]
        result = sort_products(products)
        assert [p.id for p in result] == ["first", "second", "other"]

    def test_accented_names_sort_in_alphabetical_position(self):
        products = [
            Product(id="1", name="Zebra", quantity=1),
            Product(id="2", name="Éclair", quantity=1),
            Product(id="3", name="apple", quantity=1),
        ]
        assert _names(sort_products(products)) == ["apple", "Éclair", "Zebra"]

    def test_portuguese_names(self):
        products = [
            Product(id="1", name="Azeite", quantity=1),
            Product(id="2", name="Açúcar", quantity=1),
            Product(id="3", name="Abacate", quantity=1),
            Product(id="4", name="Gestão", quantity=1),
            Product(id="5", name="Feijão", quantity=1),
        ]
        assert _names(sort_products(products)) == [
            "Abacate", "Açúcar", "Azeite", "Feijão", "Gestão",
        ]

    def test_ignores_process_locale(self):
        locale.setlocale(locale.LC_COLLATE, "C")
        products = [
            Product(id="1", name="Zebra", quantity=1),
            Product(id="2", name="Éclair", quantity=1),
        ]
        assert _names(sort_products(products)) == ["Éclair", "Zebra"]

    def test_empty(self):
        assert sort_products([]) == []
