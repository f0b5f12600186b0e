"""Tests for cart and stock reconciliation."""

import dataclasses

import pytest

from bakery.cart import Cart
from bakery.catalog import Catalog, UnknownItemError
from bakery.data import image_uri_for_name
from bakery.models import CatalogItem


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        [
            CatalogItem("1", "Chocolate Cake", 2, "• 200g flour"),
            CatalogItem("2", "Lemon Tart", 3, "• 2 lemons"),
            CatalogItem("3", "Strawberry Pie", 0, "• Pie crust"),
        ]
    )


@pytest.fixture
def cart(catalog: Catalog) -> Cart:
    return Cart(catalog)


class TestAdd:
    def test_worked_example(self, catalog: Catalog, cart: Cart) -> None:
        cake = catalog.get("1")

        assert cart.add(cake) is True
        assert cake.stock == 1
        assert [(line.item_id, line.qty) for line in cart.lines] == [("1", 1)]

        assert cart.add(cake) is True
        assert cake.stock == 0
        assert [(line.item_id, line.qty) for line in cart.lines] == [("1", 2)]

        assert cart.add(cake) is False
        assert cake.stock == 0
        assert [(line.item_id, line.qty) for line in cart.lines] == [("1", 2)]

        cart.adjust_quantity("1", -1)
        assert [(line.item_id, line.qty) for line in cart.lines] == [("1", 1)]

        cart.adjust_quantity("1", -1)
        assert cart.lines == []

    def test_sold_out_item_changes_nothing(self, catalog: Catalog, cart: Cart) -> None:
        pie = catalog.get("3")
        assert cart.add(pie) is False
        assert pie.stock == 0
        assert cart.is_empty

    def test_each_add_moves_one_unit(self, catalog: Catalog, cart: Cart) -> None:
        tart = catalog.get("2")
        for expected_qty in (1, 2, 3):
            cart.add(tart)
            assert tart.stock == 3 - expected_qty
            assert cart.line_for("2").qty == expected_qty

    def test_new_lines_append_in_add_order(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("2"))
        cart.add(catalog.get("1"))
        cart.add(catalog.get("2"))
        assert [(line.item_id, line.qty) for line in cart.lines] == [("2", 2), ("1", 1)]

    def test_line_snapshots_name_and_image(self, catalog: Catalog, cart: Cart) -> None:
        cake = catalog.get("1")
        cart.add(cake)
        cake.name = "Renamed Cake"
        cart.add(cake)

        line = cart.line_for("1")
        assert line.name == "Chocolate Cake"
        assert line.image_uri == image_uri_for_name("Chocolate Cake")

    def test_stale_item_copy_with_stock_is_a_no_op(self, catalog: Catalog, cart: Cart) -> None:
        cake = catalog.get("1")
        stale = dataclasses.replace(cake)
        cart.add(cake)
        cart.add(cake)
        assert stale.stock == 2

        assert cart.add(stale) is False
        assert cake.stock == 0
        assert cart.line_for("1").qty == 2

    def test_snapshot_comes_from_catalog_item(self, catalog: Catalog, cart: Cart) -> None:
        stale = dataclasses.replace(catalog.get("2"), name="Old Tart")
        assert cart.add(stale) is True
        assert cart.line_for("2").name == "Lemon Tart"
        assert catalog.get("2").stock == 2

    def test_item_missing_from_catalog_leaves_cart_untouched(self, cart: Cart) -> None:
        stray = CatalogItem("99", "Stray Bun", 4)
        with pytest.raises(UnknownItemError):
            cart.add(stray)
        assert cart.is_empty
        assert stray.stock == 4


class TestAdjustQuantity:
    def test_increase_does_not_touch_stock(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("2"))
        cart.adjust_quantity("2", 1)
        assert cart.line_for("2").qty == 2
        assert catalog.get("2").stock == 2

    def test_decrease_does_not_restock_by_default(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("2"))
        cart.add(catalog.get("2"))
        cart.adjust_quantity("2", -1)
        assert cart.line_for("2").qty == 1
        assert catalog.get("2").stock == 1

    def test_removing_full_quantity_drops_line(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.add(catalog.get("1"))
        cart.add(catalog.get("2"))
        cart.adjust_quantity("1", -cart.line_for("1").qty)
        assert cart.line_for("1") is None
        assert [line.item_id for line in cart.lines] == ["2"]

    def test_overshooting_below_zero_drops_line(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.adjust_quantity("1", -5)
        assert cart.is_empty

    def test_unknown_line_is_ignored(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.adjust_quantity("2", -1)
        cart.adjust_quantity("missing", 1)
        assert [(line.item_id, line.qty) for line in cart.lines] == [("1", 1)]

    def test_restock_on_decrease_returns_units(self, catalog: Catalog) -> None:
        cart = Cart(catalog, restock_on_decrease=True)
        tart = catalog.get("2")
        cart.add(tart)
        cart.add(tart)
        assert tart.stock == 1

        cart.adjust_quantity("2", -1)
        assert tart.stock == 2

        cart.adjust_quantity("2", -4)
        assert tart.stock == 3
        assert cart.is_empty

    def test_restock_never_exceeds_units_taken(self, catalog: Catalog) -> None:
        cart = Cart(catalog, restock_on_decrease=True)
        tart = catalog.get("2")
        cart.add(tart)
        cart.adjust_quantity("2", 1)
        assert tart.stock == 2

        cart.adjust_quantity("2", -1)
        assert tart.stock == 2
        assert cart.line_for("2").qty == 1

        cart.adjust_quantity("2", 1)
        cart.adjust_quantity("2", -2)
        assert tart.stock == 3
        assert cart.is_empty

    def test_restock_ignores_increases(self, catalog: Catalog) -> None:
        cart = Cart(catalog, restock_on_decrease=True)
        cart.add(catalog.get("2"))
        cart.adjust_quantity("2", 2)
        assert catalog.get("2").stock == 2


class TestTotalUnits:
    def test_empty_cart(self, cart: Cart) -> None:
        assert cart.total_units() == 0

    def test_sums_line_quantities(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.add(catalog.get("2"))
        cart.add(catalog.get("2"))
        cart.adjust_quantity("1", 3)
        assert cart.total_units() == sum(line.qty for line in cart.lines) == 6

    def test_tracks_adds_minus_removals(self, catalog: Catalog, cart: Cart) -> None:
        successful_adds = sum(cart.add(catalog.get(item_id)) for item_id in ("1", "1", "1", "2", "3"))
        cart.adjust_quantity("1", -1)
        assert successful_adds == 3
        assert cart.total_units() == successful_adds - 1


class TestCheckout:
    def test_produces_summary_and_clears_state(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.add(catalog.get("2"))
        cart.add(catalog.get("2"))
        cart.set_customer_name("  Ada  ")

        confirmation = cart.checkout()

        assert confirmation is not None
        assert confirmation.customer_name == "Ada"
        assert confirmation.lines == ((1, "Chocolate Cake"), (2, "Lemon Tart"))
        assert confirmation.title == "Reservation Confirmed"
        assert confirmation.message == "Thank you, Ada!\nYou reserved 1× Chocolate Cake, 2× Lemon Tart."
        assert cart.is_empty
        assert cart.customer_name == ""

    def test_explicit_name_overrides_stored(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.set_customer_name("Stored")
        confirmation = cart.checkout("Given")
        assert confirmation.customer_name == "Given"
        assert cart.customer_name == ""

    def test_does_not_restock(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        cart.add(catalog.get("1"))
        cart.checkout("Ada")
        assert catalog.get("1").stock == 0

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_is_a_no_op(self, catalog: Catalog, cart: Cart, name: str) -> None:
        cart.add(catalog.get("1"))
        cart.set_customer_name(name)
        assert cart.can_checkout() is False
        assert cart.checkout() is None
        assert [(line.item_id, line.qty) for line in cart.lines] == [("1", 1)]
        assert cart.customer_name == name

    def test_empty_cart_is_a_no_op(self, cart: Cart) -> None:
        cart.set_customer_name("Ada")
        assert cart.can_checkout() is False
        assert cart.checkout() is None
        assert cart.customer_name == "Ada"

    def test_can_checkout(self, catalog: Catalog, cart: Cart) -> None:
        cart.add(catalog.get("1"))
        assert cart.can_checkout("Ada") is True
        assert cart.can_checkout() is False
        cart.set_customer_name("Ada")
        assert cart.can_checkout() is True
