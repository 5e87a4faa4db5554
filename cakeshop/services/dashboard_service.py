"""
Sales Dashboard
Aggregates completed orders for the manager view

Subscribed to OrderService; receives every completed order and every
decoration added to a stored order afterwards.

Author: TM3
Date: 2026-10-16
"""
import logging
import threading
from decimal import Decimal
from typing import Dict, Optional

from cakeshop.domain.catalog import CakeType
from cakeshop.domain.order import CakeOrder, DecorationSnapshot
from cakeshop.services.composition import describe, total_cost
from cakeshop.services.identity_generator import IdentityGenerator

logger = logging.getLogger(__name__)


class SalesDashboard:
    """
    Order listener with per-type counts and revenue

    Counts here cover orders seen since the dashboard subscribed.
    `orders_created` in the summary comes from the id generator instead
    (peek_count - 1), so it also covers orders created before subscribing.
    """

    def __init__(self, id_generator: IdentityGenerator):
        self.id_generator = id_generator
        self._lock = threading.Lock()
        self._completed: Dict[CakeType, int] = {cake_type: 0 for cake_type in CakeType}
        self._revenue: Dict[CakeType, Decimal] = {cake_type: Decimal("0") for cake_type in CakeType}
        self._last_order: Optional[str] = None

    def on_order_completed(self, order: CakeOrder) -> None:
        amount = total_cost(order)
        with self._lock:
            self._completed[order.cake_type] += 1
            self._revenue[order.cake_type] += amount
            self._last_order = describe(order)
        logger.debug(f"Dashboard recorded {order.order_id} ({amount})")

    def on_order_updated(self, order: CakeOrder, snapshot: DecorationSnapshot) -> None:
        """Count a decoration added after completion (the order is not counted again)"""
        with self._lock:
            self._revenue[order.cake_type] += snapshot.cost
            self._last_order = describe(order)
        logger.debug(f"Dashboard added {snapshot.cost} for {order.order_id}")

    @property
    def total_revenue(self) -> Decimal:
        with self._lock:
            return sum(self._revenue.values(), Decimal("0"))

    def summary(self) -> dict:
        """
        Dashboard summary

        Returns:
            {
                "by_type": {"APPLE": {"orders_created", "orders_completed", "revenue"}, ...},
                "total_completed": int,
                "total_revenue": float,
                "last_order": str | None
            }
        """
        with self._lock:
            by_type = {
                cake_type.value: {
                    'display_name': cake_type.display_name,
                    # peek_count is the NEXT counter value
                    'orders_created': self.id_generator.peek_count(cake_type) - 1,
                    'orders_completed': self._completed[cake_type],
                    'revenue': float(self._revenue[cake_type]),
                }
                for cake_type in CakeType
            }
            total_completed = sum(self._completed.values())
            total_revenue = sum(self._revenue.values(), Decimal("0"))
            last_order = self._last_order

        return {
            'by_type': by_type,
            'total_completed': total_completed,
            'total_revenue': float(total_revenue),
            'last_order': last_order,
        }
