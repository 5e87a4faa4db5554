"""
Decoration Chain
Applies decorations to an order as frozen snapshots

Author: TM3
Date: 2026-10-16
"""
from typing import Iterable, List

from cakeshop.domain.catalog import DecorationKind, parse_member
from cakeshop.domain.order import CakeOrder, DecorationSnapshot
from cakeshop.services.pricing_catalog import PricingCatalog


class DecorationChain:
    """
    Appends decoration snapshots to orders

    The catalog is read once per decoration, at append time. The snapshot
    keeps that cost and name for the lifetime of the order. There is no
    remove or reorder operation.
    """

    def __init__(self, catalog: PricingCatalog):
        self.catalog = catalog

    def snapshot(self, kind) -> DecorationSnapshot:
        """Freeze the current catalog values for a decoration kind"""
        default = self.catalog.get_decoration_default(kind)
        return DecorationSnapshot(
            kind=parse_member(DecorationKind, kind),
            name=default.name,
            cost=default.cost,
        )

    def append(self, order: CakeOrder, kind) -> CakeOrder:
        """
        Add one decoration to the end of the order's chain

        Mutates the order in place and returns it.

        Raises:
            NotFoundError: if kind is not a recognized decoration
        """
        order.decorations.append(self.snapshot(kind))
        return order

    def snapshot_all(self, kinds: Iterable) -> List[DecorationSnapshot]:
        """
        Snapshots for several decorations, in the given order

        Every kind is resolved before anything is returned, so one unknown
        kind fails the whole batch.

        Raises:
            NotFoundError: if any kind is not a recognized decoration
        """
        return [self.snapshot(kind) for kind in kinds]
