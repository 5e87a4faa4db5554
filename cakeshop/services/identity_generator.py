"""
Identity Generator
Per-cake-type sequential order ids

Format: [3 letters for cake type]-[1 letter for size]-[counter, 3+ digits]
Examples: APP-L-001, CHE-M-002, CHO-S-003

Each cake type has its own counter starting at 1. The size only appears in
the formatted id, it does not have a counter of its own: the second apple
cake is APP-?-002 whatever its size.

Author: TM3
Date: 2026-10-16
"""
import logging
import threading
from typing import Dict

from cakeshop.domain.catalog import CakeType, CakeSize, parse_order_id, require_member

logger = logging.getLogger(__name__)


class IdentityGenerator:
    """
    Per-type counters for order ids

    Counters only move forward. Each cake type has its own lock so
    concurrent creations of the same type never share a counter value.
    """

    def __init__(self):
        self._counters: Dict[CakeType, int] = {cake_type: 1 for cake_type in CakeType}
        self._locks: Dict[CakeType, threading.Lock] = {cake_type: threading.Lock() for cake_type in CakeType}

    @staticmethod
    def format_order_id(cake_type: CakeType, size: CakeSize, order_number: int) -> str:
        return f"{cake_type.code}-{size.code}-{order_number:03d}"

    def next_id(self, cake_type, size) -> str:
        """
        Consume the next counter value for a cake type and return the id

        Raises:
            InvalidArgumentError: if cake_type or size is missing or unknown
                (the counter is left untouched)
        """
        cake_type = require_member(CakeType, cake_type, "Cake type")
        size = require_member(CakeSize, size, "Cake size")

        with self._locks[cake_type]:
            current = self._counters[cake_type]
            self._counters[cake_type] = current + 1

        return self.format_order_id(cake_type, size, current)

    def peek_count(self, cake_type) -> int:
        """
        Counter value the NEXT order of this type will use.

        Note: this is one more than the number of orders created so far.
        Subtract 1 to get the created count.
        """
        cake_type = require_member(CakeType, cake_type, "Cake type")
        return self._counters[cake_type]

    def register_existing(self, order_id: str) -> None:
        """
        Make sure an id loaded from storage is never issued again.

        Moves the type's counter past the stored number; never moves it back.

        Raises:
            InvalidArgumentError: if the id is malformed or uses an unknown
                type or size code
        """
        cake_type, _, number = parse_order_id(order_id)

        with self._locks[cake_type]:
            if number >= self._counters[cake_type]:
                self._counters[cake_type] = number + 1
                logger.debug(f"Counter for {cake_type.value} advanced to {number + 1}")
