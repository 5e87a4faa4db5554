"""
Order Factory
Creates base cake orders with a generated id and a catalog base price

Author: TM3
Date: 2026-10-16
"""
import logging

from cakeshop.domain.catalog import CakeType, CakeSize, require_member
from cakeshop.domain.order import CakeOrder
from cakeshop.services.identity_generator import IdentityGenerator
from cakeshop.services.pricing_catalog import PricingCatalog

logger = logging.getLogger(__name__)


class OrderFactory:
    """
    Factory for new cake orders

    Steps, in this order:
    1. Validate cake type and size
    2. Look up the base price
    3. Consume the next id for the cake type

    Everything that can fail runs before the counter moves, so each
    successful call advances the type's counter by exactly one.
    """

    def __init__(self, catalog: PricingCatalog, id_generator: IdentityGenerator):
        self.catalog = catalog
        self.id_generator = id_generator

    def create_order(self, cake_type, size) -> CakeOrder:
        """
        Create a new undecorated order

        Args:
            cake_type: CakeType (or its name)
            size: CakeSize (or its name)

        Returns:
            CakeOrder with an empty decoration chain

        Raises:
            InvalidArgumentError: if cake_type or size is missing or unknown
        """
        cake_type = require_member(CakeType, cake_type, "Cake type")
        size = require_member(CakeSize, size, "Cake size")

        base_price = self.catalog.get_base_price(cake_type, size)
        order_id = self.id_generator.next_id(cake_type, size)

        logger.info(f"Created order {order_id} ({cake_type.value}/{size.value}) at {base_price}")
        return CakeOrder(
            order_id=order_id,
            cake_type=cake_type,
            size=size,
            base_price=base_price,
        )
