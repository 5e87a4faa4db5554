"""
Pricing Catalog Service
Mutable table of base cake prices and decoration defaults

Purpose:
- Base price lookup per (cake type, size)
- Current cost and display name per decoration kind
- Runtime price updates, with reset to the built-in defaults

Orders never hold references into this table: OrderFactory copies the base
price and DecorationChain copies the decoration values, so a price change only
affects orders created afterwards.

Author: TM3
Date: 2026-10-16
"""
import logging
import threading
from decimal import Decimal
from typing import Dict, List, Tuple

from cakeshop.core.exceptions import InvalidArgumentError, NotFoundError
from cakeshop.domain.catalog import (
    CakeType,
    CakeSize,
    DecorationKind,
    DecorationDefault,
    DEFAULT_BASE_PRICES,
    DEFAULT_DECORATIONS,
    parse_member,
    require_member,
    to_price,
)

logger = logging.getLogger(__name__)


class PricingCatalog:
    """
    Service for base prices and decoration defaults

    One instance is shared by the factory and the decoration chain.
    Mutations are serialized with a lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._base_prices: Dict[Tuple[CakeType, CakeSize], Decimal] = dict(DEFAULT_BASE_PRICES)
        self._decorations: Dict[DecorationKind, DecorationDefault] = dict(DEFAULT_DECORATIONS)

    # ------------------------------------------------------------------
    # Base prices
    # ------------------------------------------------------------------

    def get_base_price(self, cake_type, size) -> Decimal:
        """
        Get the base price for a cake type and size combination

        Raises:
            InvalidArgumentError: if cake_type or size is None
            NotFoundError: if the pair has no entry
        """
        if cake_type is None:
            raise InvalidArgumentError("Cake type cannot be null")
        if size is None:
            raise InvalidArgumentError("Cake size cannot be null")

        key = (parse_member(CakeType, cake_type), parse_member(CakeSize, size))
        with self._lock:
            price = self._base_prices.get(key)

        if price is None:
            raise NotFoundError(f"No base price for cake type {cake_type} and size {size}")
        return price

    def set_base_price(self, cake_type, size, price) -> None:
        """
        Set the base price for a cake type and size combination

        Validation happens before the table is touched, so a rejected
        price leaves the previous one in place.
        """
        cake_type = require_member(CakeType, cake_type, "Cake type")
        size = require_member(CakeSize, size, "Cake size")
        amount = to_price(price)

        with self._lock:
            previous = self._base_prices.get((cake_type, size))
            self._base_prices[(cake_type, size)] = amount

        logger.info(f"Base price for {cake_type.value}/{size.value} changed: {previous} -> {amount}")

    def reset_to_defaults(self) -> None:
        """Restore default base prices. Decoration defaults are not touched."""
        with self._lock:
            self._base_prices = dict(DEFAULT_BASE_PRICES)
        logger.info("Base prices reset to defaults")

    def list_base_prices(self) -> List[dict]:
        """All base prices as rows, ordered by cake type then size"""
        with self._lock:
            snapshot = dict(self._base_prices)

        return [
            {
                'cake_type': cake_type.value,
                'size': size.value,
                'price': float(snapshot[(cake_type, size)]),
            }
            for cake_type in CakeType
            for size in CakeSize
            if (cake_type, size) in snapshot
        ]

    # ------------------------------------------------------------------
    # Decorations
    # ------------------------------------------------------------------

    def get_decoration_default(self, kind) -> DecorationDefault:
        """
        Get current cost and display name for a decoration kind

        Raises:
            InvalidArgumentError: if kind is None
            NotFoundError: if kind is not a recognized decoration
        """
        if kind is None:
            raise InvalidArgumentError("Decoration kind cannot be null")

        member = parse_member(DecorationKind, kind)
        with self._lock:
            default = self._decorations.get(member)

        if default is None:
            raise NotFoundError(f"Unknown decoration kind: {kind}")
        return default

    def set_decoration_cost(self, kind, cost) -> None:
        """Change the cost applied to decorations added from now on"""
        kind = require_member(DecorationKind, kind, "Decoration kind")
        amount = to_price(cost, label="Decoration cost")

        with self._lock:
            current = self._decorations[kind]
            self._decorations[kind] = DecorationDefault(cost=amount, name=current.name)

        logger.info(f"Decoration cost for {kind.value} changed: {current.cost} -> {amount}")

    def set_decoration_name(self, kind, name: str) -> None:
        """Change the display name applied to decorations added from now on"""
        kind = require_member(DecorationKind, kind, "Decoration kind")
        if name is None or not str(name).strip():
            raise InvalidArgumentError("Decoration name cannot be empty")

        with self._lock:
            current = self._decorations[kind]
            self._decorations[kind] = DecorationDefault(cost=current.cost, name=name)

        logger.info(f"Decoration name for {kind.value} changed: {current.name!r} -> {name!r}")

    def reset_decorations_to_defaults(self) -> None:
        """Restore default decoration costs and names"""
        with self._lock:
            self._decorations = dict(DEFAULT_DECORATIONS)
        logger.info("Decoration defaults reset")

    def list_decorations(self) -> List[dict]:
        """All decoration defaults as rows"""
        with self._lock:
            snapshot = dict(self._decorations)

        rows = []
        for kind in DecorationKind:
            if kind in snapshot:
                row = snapshot[kind].to_dict()
                row['kind'] = kind.value
                rows.append(row)
        return rows
