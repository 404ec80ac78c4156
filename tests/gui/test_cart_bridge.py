"""Unit tests for the Qt cart bridge."""

import pytest
import shiboken6
from PySide6.QtCore import QObject

from preview_cart.gui import CartBridge
from preview_cart.store import CartViewState, Storefront


@pytest.fixture
def bridge(qtbot, shipped_catalog):
    return CartBridge(Storefront(shipped_catalog))


class TestCartBridgeSignals:

    def test_toggle_asset_emits_selection_changed(self, qtbot, bridge):
        with qtbot.waitSignal(bridge.selectionChanged, timeout=1000) as blocker:
            bridge.toggle_asset("scissors-001")
        assert blocker.args == [1]

    def test_toggle_asset_emits_snapshot_after_commit(self, qtbot, bridge):
        with qtbot.waitSignal(bridge.snapshotChanged, timeout=1000) as blocker:
            bridge.toggle_pack("scissors")
        snap = blocker.args[0]
        assert snap["selected_count"] == 18
        assert snap["total_price"] == "4.68"

    def test_first_item_emits_collapsed_state(self, qtbot, bridge):
        with qtbot.waitSignal(bridge.cartStateChanged, timeout=1000) as blocker:
            bridge.toggle_asset("paper-001")
        assert blocker.args == [CartViewState.COLLAPSED_BADGE.value]

    def test_open_and_clear_emit_state_sequence(self, qtbot, bridge):
        states = []
        bridge.cartStateChanged.connect(states.append)
        bridge.toggle_asset("paper-001")
        bridge.open_cart()
        bridge.clear_cart()
        assert states == ["collapsed_badge", "expanded", "hidden"]
        assert bridge.cart_state is CartViewState.HIDDEN

    def test_open_when_empty_then_no_state_signal(self, qtbot, bridge):
        with qtbot.assertNotEmitted(bridge.cartStateChanged):
            bridge.open_cart()

    def test_redundant_clear_emits_nothing(self, qtbot, bridge):
        with qtbot.assertNotEmitted(bridge.selectionChanged):
            bridge.clear_cart()


class TestCartBridgeBrowsing:

    def test_select_category_emits_category_and_visible_count(self, qtbot, bridge):
        visible = []
        bridge.visibleAssetsChanged.connect(visible.append)
        with qtbot.waitSignal(bridge.categoryChanged, timeout=1000) as blocker:
            bridge.select_category("scenes")
        assert blocker.args == ["scenes"]
        assert visible == [6]

    def test_load_more_when_exhausted_then_no_signal(self, qtbot, bridge):
        bridge.select_category("scenes")
        with qtbot.assertNotEmitted(bridge.visibleAssetsChanged):
            bridge.load_more()

    def test_load_more_emits_new_count(self, qtbot, bridge):
        with qtbot.waitSignal(bridge.visibleAssetsChanged, timeout=1000) as blocker:
            bridge.load_more()
        assert blocker.args == [36]

    def test_toggle_pack_without_category_uses_active(self, qtbot, bridge):
        bridge.select_category("storage")
        bridge.toggle_pack("")
        assert bridge.storefront.is_pack_fully_selected("storage")

    def test_detach_stops_signals(self, qtbot, bridge):
        bridge.detach()
        with qtbot.assertNotEmitted(bridge.selectionChanged):
            bridge.toggle_asset("paper-001")
        assert bridge.display().badge_count == 1


class TestCartBridgeLifecycle:

    def test_deleted_bridge_when_storefront_alive_then_actions_still_work(self, qtbot, shipped_catalog):
        shop = Storefront(shipped_catalog)
        parent = QObject()
        CartBridge(shop, parent)
        shiboken6.delete(parent)

        assert shop.toggle_asset("paper-001") is True
        assert shop.toggle_pack("scenes").value == "full"
        assert shop.clear_cart() == 7

    def test_deleted_bridge_when_later_listener_then_still_notified(self, qtbot, shipped_catalog):
        shop = Storefront(shipped_catalog)
        bridge = CartBridge(shop)
        seen = []
        shop.subscribe(seen.append)
        shiboken6.delete(bridge)

        shop.toggle_asset("paper-001")
        assert seen == [frozenset({"paper-001"})]
