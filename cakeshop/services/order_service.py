"""
Order Service
Routes an order through creation, decoration, storage and notification

Listeners are plain objects with an `on_order_completed(order)` method and,
optionally, an `on_order_updated(order, snapshot)` method (see SalesDashboard).

Author: TM3
Date: 2026-10-16
"""
import logging
import threading
from typing import Iterable, List, Tuple

from cakeshop.core.exceptions import NotFoundError
from cakeshop.domain.order import CakeOrder, DecorationSnapshot
from cakeshop.repositories.order_repository import OrderRepository
from cakeshop.services.decoration_chain import DecorationChain
from cakeshop.services.order_factory import OrderFactory

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for placing and updating cake orders

    Handles:
    - Order creation (OrderFactory)
    - Decorations (DecorationChain)
    - Storage (OrderRepository)
    - Notifying listeners of completed and updated orders
    """

    def __init__(
        self,
        factory: OrderFactory,
        chain: DecorationChain,
        repository: OrderRepository,
    ):
        self.factory = factory
        self.chain = chain
        self.repository = repository
        self._listeners: List = []
        self._update_lock = threading.Lock()

        # Orders loaded from storage keep their ids reserved
        orders, _ = repository.find_all(limit=repository.count())
        for order in orders:
            factory.id_generator.register_existing(order.order_id)

    def subscribe(self, listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str, order: CakeOrder, *args) -> None:
        for listener in list(self._listeners):
            handler = getattr(listener, event, None)
            if handler is None:
                continue
            try:
                handler(order, *args)
            except Exception as e:
                logger.error(f"Listener {type(listener).__name__} failed for order {order.order_id}: {e}")
                raise

    def place_order(self, cake_type, size, decorations: Iterable = ()) -> CakeOrder:
        """
        Create, decorate, save and announce a new order

        Steps:
        1. Resolve decoration snapshots (unknown kinds fail before any id is used)
        2. Create the base order
        3. Append the snapshots in the given order
        4. Save to the repository
        5. Notify listeners

        Returns:
            The completed CakeOrder

        Raises:
            StorageError: if the orders file cannot be written (the id stays used)
        """
        snapshots = self.chain.snapshot_all(decorations)

        order = self.factory.create_order(cake_type, size)
        order.decorations.extend(snapshots)

        self.repository.save(order)
        logger.info(f"Order {order.order_id} placed with {order.decoration_count} decoration(s)")

        self._notify("on_order_completed", order)
        return order

    def add_decoration(self, order_id: str, kind) -> CakeOrder:
        """
        Append a decoration to a stored order

        The stored order is replaced by a decorated copy only once the copy
        is saved, so a failed save leaves the stored order as it was.

        Raises:
            NotFoundError: if the order or the decoration kind is unknown
            StorageError: if the orders file cannot be written
        """
        with self._update_lock:
            updated = self.get_order(order_id).model_copy(deep=True)
            self.chain.append(updated, kind)
            self.repository.save(updated)

        snapshot: DecorationSnapshot = updated.decorations[-1]
        logger.info(f"Order {order_id} decorated with {snapshot.name}")

        self._notify("on_order_updated", updated, snapshot)
        return updated

    def get_order(self, order_id: str) -> CakeOrder:
        order = self.repository.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def list_orders(
        self,
        cake_type=None,
        limit: int = 100,
        offset: int = 0
    ) -> Tuple[List[CakeOrder], int]:
        return self.repository.find_all(cake_type=cake_type, limit=limit, offset=offset)
