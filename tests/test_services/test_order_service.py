"""
Unit tests for OrderService and SalesDashboard

Author: TM3
Date: 2026-10-16
"""
import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from cakeshop.core.exceptions import InvalidArgumentError, NotFoundError, StorageError
from cakeshop.domain.catalog import CakeType, CakeSize, DecorationKind
from cakeshop.domain.order import CakeOrder
from cakeshop.repositories.order_repository import OrderRepository
from cakeshop.services.composition import describe, total_cost
from cakeshop.services.dashboard_service import SalesDashboard
from cakeshop.services.order_service import OrderService


class TestOrderService:
    """Test order placement flow"""

    def test_place_order_creates_decorates_and_saves(self, order_service, repository):
        """Test the full placement flow"""
        order = order_service.place_order(
            CakeType.CHOCOLATE,
            CakeSize.LARGE,
            [DecorationKind.CREAM, DecorationKind.SKITTLES, DecorationKind.CHOCOLATE_CHIPS]
        )

        assert order.order_id == "CHO-L-001"
        assert describe(order).endswith("with Cream, Skittles, and Chocolate Chips")
        assert total_cost(order) == Decimal("21.00")
        assert repository.find_by_id("CHO-L-001") is order

    def test_place_order_notifies_listeners(self, order_service):
        """Test subscribed listeners receive the completed order"""
        # Arrange
        listener = MagicMock()
        order_service.subscribe(listener)

        # Act
        order = order_service.place_order(CakeType.APPLE, CakeSize.SMALL)

        # Assert
        listener.on_order_completed.assert_called_once_with(order)

    def test_unsubscribed_listener_not_notified(self, order_service):
        listener = MagicMock()
        order_service.subscribe(listener)
        order_service.subscribe(listener)
        order_service.unsubscribe(listener)

        order_service.place_order(CakeType.APPLE, CakeSize.SMALL)

        listener.on_order_completed.assert_not_called()

    def test_listener_failure_propagates(self, order_service, repository):
        """Test listener errors are not swallowed (the order is already saved)"""
        listener = MagicMock()
        listener.on_order_completed.side_effect = RuntimeError("dashboard down")
        order_service.subscribe(listener)

        with pytest.raises(RuntimeError, match="dashboard down"):
            order_service.place_order(CakeType.APPLE, CakeSize.SMALL)

        assert repository.count() == 1

    def test_unknown_decoration_does_not_use_an_id(self, order_service, id_generator, repository):
        """Test decorations are resolved before the counter moves"""
        with pytest.raises(NotFoundError):
            order_service.place_order(CakeType.CHEESE, CakeSize.SMALL, ["SPRINKLES"])

        assert id_generator.peek_count(CakeType.CHEESE) == 1
        assert repository.count() == 0

    def test_invalid_cake_type_rejected(self, order_service):
        with pytest.raises(InvalidArgumentError):
            order_service.place_order(None, CakeSize.SMALL)

    def test_add_decoration_to_stored_order(self, order_service):
        """Test decorating an existing order appends one snapshot"""
        order = order_service.place_order(CakeType.CHEESE, CakeSize.MEDIUM, [DecorationKind.CREAM])

        updated = order_service.add_decoration(order.order_id, DecorationKind.SKITTLES)

        assert updated.decoration_names == ["Cream", "Skittles"]
        assert order_service.get_order(order.order_id).decoration_count == 2

    def test_add_decoration_unknown_order(self, order_service):
        with pytest.raises(NotFoundError):
            order_service.add_decoration("CHE-M-999", DecorationKind.CREAM)

    def test_add_decoration_notifies_listeners(self, order_service):
        """Test listeners receive the updated order and the new snapshot"""
        # Arrange
        listener = MagicMock()
        order = order_service.place_order(CakeType.APPLE, CakeSize.MEDIUM)
        order_service.subscribe(listener)

        # Act
        updated = order_service.add_decoration(order.order_id, DecorationKind.SKITTLES)

        # Assert
        listener.on_order_updated.assert_called_once_with(updated, updated.decorations[-1])
        listener.on_order_completed.assert_not_called()

    def test_listener_without_update_handler_is_skipped(self, order_service):
        """Test listeners that only handle completed orders still work"""
        class CompletedOnly:
            def __init__(self):
                self.seen = []

            def on_order_completed(self, order):
                self.seen.append(order.order_id)

        listener = CompletedOnly()
        order_service.subscribe(listener)

        order = order_service.place_order(CakeType.APPLE, CakeSize.SMALL)
        order_service.add_decoration(order.order_id, DecorationKind.CREAM)

        assert listener.seen == [order.order_id]

    def test_place_order_unwritable_storage(self, tmp_path, factory, chain):
        """Test a failed write raises StorageError and nothing is stored or announced"""
        # Arrange: the parent "directory" is a regular file
        blocker = tmp_path / "afile"
        blocker.write_text("")
        repository = OrderRepository(storage_path=blocker / "orders.json")
        service = OrderService(factory=factory, chain=chain, repository=repository)
        listener = MagicMock()
        service.subscribe(listener)

        # Act / Assert
        with pytest.raises(StorageError, match="orders.json"):
            service.place_order(CakeType.APPLE, CakeSize.SMALL)

        assert repository.count() == 0
        listener.on_order_completed.assert_not_called()

    def test_add_decoration_failed_save_keeps_stored_order(self, tmp_path, factory, chain):
        """Test the stored order is unchanged when the decorated copy cannot be written"""
        # Arrange
        repository = OrderRepository(storage_path=tmp_path / "orders.json")
        service = OrderService(factory=factory, chain=chain, repository=repository)
        order = service.place_order(CakeType.CHEESE, CakeSize.SMALL, [DecorationKind.CREAM])

        blocker = tmp_path / "afile"
        blocker.write_text("")
        repository.storage_path = blocker / "orders.json"

        # Act
        with pytest.raises(StorageError):
            service.add_decoration(order.order_id, DecorationKind.SKITTLES)

        # Assert
        stored = service.get_order(order.order_id)
        assert stored.decoration_names == ["Cream"]
        assert order.decoration_names == ["Cream"]

    def test_list_orders_filters_by_type(self, order_service):
        order_service.place_order(CakeType.APPLE, CakeSize.SMALL)
        order_service.place_order(CakeType.CHEESE, CakeSize.SMALL)
        order_service.place_order(CakeType.APPLE, CakeSize.LARGE)

        orders, total = order_service.list_orders(cake_type=CakeType.APPLE)

        assert total == 2
        assert [o.order_id for o in orders] == ["APP-S-001", "APP-L-002"]

    def test_existing_orders_reserve_their_ids(self, factory, chain, id_generator):
        """Test orders already in the repository are never given out again"""
        # Arrange: repository already holds CHO-L-004
        repository = OrderRepository()
        repository.save(CakeOrder(
            order_id="CHO-L-004",
            cake_type=CakeType.CHOCOLATE,
            size=CakeSize.LARGE,
            base_price=Decimal("15.00"),
        ))

        # Act
        service = OrderService(factory=factory, chain=chain, repository=repository)
        order = service.place_order(CakeType.CHOCOLATE, CakeSize.SMALL)

        # Assert
        assert order.order_id == "CHO-S-005"


class TestSalesDashboard:
    """Test dashboard aggregation"""

    def test_summary_counts_and_revenue(self, order_service, id_generator):
        """Test dashboard tracks completed orders per type"""
        dashboard = SalesDashboard(id_generator)
        order_service.subscribe(dashboard)

        order_service.place_order(CakeType.APPLE, CakeSize.SMALL, [DecorationKind.CREAM])
        order_service.place_order(CakeType.APPLE, CakeSize.LARGE)
        last = order_service.place_order(CakeType.CHEESE, CakeSize.MEDIUM)

        summary = dashboard.summary()

        assert summary["by_type"]["APPLE"]["orders_completed"] == 2
        assert summary["by_type"]["APPLE"]["revenue"] == 22.0
        assert summary["by_type"]["CHEESE"]["revenue"] == 12.5
        assert summary["by_type"]["CHOCOLATE"]["orders_completed"] == 0
        assert summary["total_completed"] == 3
        assert summary["total_revenue"] == 34.5
        assert summary["last_order"] == describe(last)
        assert dashboard.total_revenue == Decimal("34.50")

    def test_added_decoration_updates_revenue_and_last_order(self, order_service, id_generator):
        """Test decorating a completed order adds its cost without counting a new order"""
        dashboard = SalesDashboard(id_generator)
        order_service.subscribe(dashboard)

        order = order_service.place_order(CakeType.CHOCOLATE, CakeSize.LARGE)
        order_service.add_decoration(order.order_id, DecorationKind.CREAM)

        summary = dashboard.summary()

        assert summary["by_type"]["CHOCOLATE"]["revenue"] == 17.0
        assert summary["by_type"]["CHOCOLATE"]["orders_completed"] == 1
        assert summary["total_revenue"] == 17.0
        assert summary["last_order"].endswith("with Cream")

    def test_orders_created_uses_peek_count_minus_one(self, factory, id_generator):
        """Test orders_created covers orders made before subscribing"""
        factory.create_order(CakeType.CHOCOLATE, CakeSize.SMALL)
        factory.create_order(CakeType.CHOCOLATE, CakeSize.SMALL)

        dashboard = SalesDashboard(id_generator)
        summary = dashboard.summary()

        assert id_generator.peek_count(CakeType.CHOCOLATE) == 3
        assert summary["by_type"]["CHOCOLATE"]["orders_created"] == 2
        assert summary["by_type"]["CHOCOLATE"]["orders_completed"] == 0
        assert summary["last_order"] is None
