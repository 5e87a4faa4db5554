"""
Order Repository - Data Access Layer for Cake Orders

Keeps orders in memory, in insertion order. When a storage path is given the
orders are also written to a JSON file (a list of `CakeOrder.to_record()`
structures) after every save, and read back on startup.

Author: TM3
Date: 2026-10-16
"""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from cakeshop.core.exceptions import InvalidArgumentError, StorageError
from cakeshop.domain.catalog import CakeType, parse_member
from cakeshop.domain.order import CakeOrder

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    Repository for CakeOrder storage

    Returns CakeOrder domain models, not raw dictionaries.
    """

    def __init__(self, storage_path: Optional[Union[str, Path]] = None):
        self._lock = threading.RLock()
        self._orders: Dict[str, CakeOrder] = {}
        self.storage_path = Path(storage_path) if storage_path else None

        if self.storage_path and self.storage_path.exists():
            for order in self.load_file(self.storage_path):
                self._orders[order.order_id] = order
            logger.info(f"Loaded {len(self._orders)} orders from {self.storage_path}")

    # ------------------------------------------------------------------
    # JSON files
    # ------------------------------------------------------------------

    @staticmethod
    def load_file(path: Union[str, Path]) -> List[CakeOrder]:
        """
        Read orders from a JSON file

        Raises:
            InvalidArgumentError: if the file is not a JSON list of order records
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            try:
                records = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidArgumentError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(records, list):
            raise InvalidArgumentError(f"Expected a list of orders in {path}")

        orders = []
        for index, record in enumerate(records):
            try:
                orders.append(CakeOrder.from_record(record))
            except InvalidArgumentError as e:
                raise InvalidArgumentError(f"{path} entry {index}: {e}") from e
        return orders

    @staticmethod
    def dump_file(path: Union[str, Path], orders: List[CakeOrder]) -> None:
        """
        Write orders to a JSON file (replaces the file)

        Raises:
            StorageError: if the directory or file cannot be written
        """
        path = Path(path)
        tmp_path = path.with_suffix(path.suffix + '.tmp')

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump([order.to_record() for order in orders], f, indent=2)
            tmp_path.replace(path)
        except OSError as e:
            logger.error(f"Failed to write orders to {path}: {e}")
            raise StorageError(f"Could not write orders to {path}: {e}") from e

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def save(self, order: CakeOrder) -> CakeOrder:
        """
        Insert or replace an order (keeps its original position on replace)

        With a storage path the file is written first; the in-memory store
        only changes once the write succeeded.

        Raises:
            StorageError: if the orders file cannot be written
        """
        with self._lock:
            updated = {**self._orders, order.order_id: order}
            if self.storage_path:
                self.dump_file(self.storage_path, list(updated.values()))
            self._orders = updated
        return order

    def find_by_id(self, order_id: str) -> Optional[CakeOrder]:
        """
        Find order by id

        Returns:
            CakeOrder or None if not found
        """
        with self._lock:
            return self._orders.get(order_id)

    def find_all(
        self,
        cake_type=None,
        limit: int = 100,
        offset: int = 0
    ) -> Tuple[List[CakeOrder], int]:
        """
        Find orders with filters

        Args:
            cake_type: Filter by cake type
            limit: Maximum results to return
            offset: Number of results to skip

        Returns:
            Tuple of (list of orders, total count)
        """
        with self._lock:
            orders = list(self._orders.values())

        if cake_type is not None:
            member = parse_member(CakeType, cake_type)
            orders = [order for order in orders if order.cake_type == member]

        total = len(orders)
        return orders[offset:offset + limit], total

    def count(self) -> int:
        with self._lock:
            return len(self._orders)
