"""
Composition Resolver
Total cost and description of a cake order

Pure functions of the order: same order in, same values out.
Grammar comes from the length of the decoration list, never from a
previously rendered description.

Author: TM3
Date: 2026-10-16
"""
from decimal import Decimal
from typing import Sequence

from cakeshop.domain.order import CakeOrder


def join_names(names: Sequence[str]) -> str:
    """
    Join names as an English list

    Examples:
        ["Cream"]                          -> "Cream"
        ["Cream", "Skittles"]              -> "Cream and Skittles"
        ["Cream", "Skittles", "Sprinkles"] -> "Cream, Skittles, and Sprinkles"
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join(names[:-1]) + f", and {names[-1]}"


def base_description(order: CakeOrder) -> str:
    return f"Order #{order.order_id}: {order.cake_type.display_name} ({order.size.display_name})"


def describe(order: CakeOrder) -> str:
    """Human-readable description, e.g. 'Order #CHO-L-001: Chocolate Cake (Large) with Cream'"""
    description = base_description(order)
    names = order.decoration_names
    if names:
        description += " with " + join_names(names)
    return description


def total_cost(order: CakeOrder) -> Decimal:
    """Base price plus the snapshot cost of every decoration (no rounding)"""
    return order.base_price + sum((snapshot.cost for snapshot in order.decorations), Decimal("0"))


def order_view(order: CakeOrder) -> dict:
    """API view: order dict plus computed description and total"""
    data = order.to_dict()
    data['description'] = describe(order)
    data['total_cost'] = float(total_cost(order))
    return data
