"""
Unit tests for the cart view state machine and render model.
"""

from decimal import Decimal

import pytest

from preview_cart.store import CartView, CartViewState, cart_preview, snapshot


@pytest.fixture
def view():
    return CartView()


class TestCartViewTransitions:

    def test_init_when_created_then_hidden(self, view):
        assert view.state is CartViewState.HIDDEN

    def test_on_selection_count_when_first_item_then_collapsed(self, view):
        view.on_selection_count(1)
        assert view.state is CartViewState.COLLAPSED_BADGE

    def test_open_when_hidden_then_stays_hidden(self, view):
        assert view.open() is False
        assert view.state is CartViewState.HIDDEN

    def test_open_when_collapsed_then_expanded(self, view):
        view.on_selection_count(2)
        assert view.open() is True
        assert view.state is CartViewState.EXPANDED

    def test_close_when_expanded_then_collapsed(self, view):
        view.on_selection_count(2)
        view.open()
        assert view.close() is True
        assert view.state is CartViewState.COLLAPSED_BADGE

    def test_close_when_not_expanded_then_no_op(self, view):
        view.on_selection_count(2)
        assert view.close() is False
        assert view.state is CartViewState.COLLAPSED_BADGE

    def test_on_selection_count_when_expanded_and_more_items_then_stays_expanded(self, view):
        view.on_selection_count(1)
        view.open()
        view.on_selection_count(5)
        assert view.state is CartViewState.EXPANDED

    @pytest.mark.parametrize("expand", [False, True])
    def test_on_selection_count_when_zero_then_hidden(self, view, expand):
        view.on_selection_count(3)
        if expand:
            view.open()
        view.on_selection_count(0)
        assert view.state is CartViewState.HIDDEN


class TestCartViewRender:

    def _render(self, view, catalog, ids):
        ids = frozenset(ids)
        return view.render(snapshot(catalog, ids), cart_preview(catalog, ids), catalog)

    def test_render_when_collapsed_then_no_warning_shown(self, view, shipped_catalog):
        ids = shipped_catalog.ids_in("scissors")[:5]
        view.on_selection_count(5)
        display = self._render(view, shipped_catalog, ids)
        assert display.visible
        assert display.below_minimum
        assert display.show_warning is False
        assert display.checkout_enabled is False
        assert display.aria_label == "Shopping cart, 5 items, $1.30"

    def test_render_when_expanded_below_minimum_then_warning(self, view, shipped_catalog):
        ids = shipped_catalog.ids_in("scissors")[:5]
        view.on_selection_count(5)
        view.open()
        display = self._render(view, shipped_catalog, ids)
        assert display.show_warning
        assert display.warning_message == "Add $5.69 more to checkout"
        assert display.checkout_enabled is False
        assert display.subtotal_label == "Subtotal (5 items)"

    def test_render_when_expanded_above_minimum_then_checkout_enabled(self, view, shipped_catalog):
        ids = shipped_catalog.ids_in("writing")
        view.on_selection_count(len(ids))
        view.open()
        display = self._render(view, shipped_catalog, ids)
        assert display.checkout_enabled
        assert display.warning_message == ""
        assert display.price_label == "$8.32"
        assert display.overflow_label == "+12 more items"

    def test_render_when_everything_selected_then_bundle_offer_hidden(self, view, shipped_catalog):
        ids = shipped_catalog.ids
        view.on_selection_count(len(ids))
        display = self._render(view, shipped_catalog, ids)
        assert display.show_bundle_offer is False

    def test_render_when_partial_then_bundle_offer_label(self, view, shipped_catalog):
        view.on_selection_count(1)
        display = self._render(view, shipped_catalog, {"paper-001"})
        assert display.show_bundle_offer
        assert display.bundle_offer_label == "Get all 150 for $39.00 (save $0.00)"
        assert shipped_catalog.bundle_savings == Decimal("0")
