"""
Cake Shop Catalog Constants
Closed enumerations for cake types, sizes and decorations, plus default prices

These are the reference values the pricing catalog starts from (and resets to).

Author: TM3
Date: 2026-10-16
"""
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Optional, Tuple, Type, TypeVar

from cakeshop.core.exceptions import InvalidArgumentError


class CakeType(str, Enum):
    """Base cake categories"""
    APPLE = "APPLE"
    CHEESE = "CHEESE"
    CHOCOLATE = "CHOCOLATE"

    @property
    def display_name(self) -> str:
        return _CAKE_TYPE_INFO[self][1]

    @property
    def code(self) -> str:
        """3-letter code used in order ids (APP, CHE, CHO)"""
        return _CAKE_TYPE_INFO[self][0]


class CakeSize(str, Enum):
    """Cake size tiers"""
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"

    @property
    def display_name(self) -> str:
        return _CAKE_SIZE_INFO[self][1]

    @property
    def code(self) -> str:
        """1-letter code used in order ids (S, M, L)"""
        return _CAKE_SIZE_INFO[self][0]


class DecorationKind(str, Enum):
    """Optional add-ons that can be applied to a cake"""
    CHOCOLATE_CHIPS = "CHOCOLATE_CHIPS"
    CREAM = "CREAM"
    SKITTLES = "SKITTLES"


_CAKE_TYPE_INFO: Dict[CakeType, Tuple[str, str]] = {
    CakeType.APPLE: ("APP", "Apple Cake"),
    CakeType.CHEESE: ("CHE", "Cheese Cake"),
    CakeType.CHOCOLATE: ("CHO", "Chocolate Cake"),
}

_CAKE_SIZE_INFO: Dict[CakeSize, Tuple[str, str]] = {
    CakeSize.SMALL: ("S", "Small"),
    CakeSize.MEDIUM: ("M", "Medium"),
    CakeSize.LARGE: ("L", "Large"),
}


@dataclass(frozen=True)
class DecorationDefault:
    """Current catalog cost and display name for a decoration kind"""
    cost: Decimal
    name: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {'cost': float(self.cost), 'name': self.name}


# ================================================================================
# DEFAULT PRICING
# ================================================================================
# Apple Cake:     Small $8.00,  Medium $10.00, Large $12.00
# Cheese Cake:    Small $10.50, Medium $12.50, Large $15.00
# Chocolate Cake: Small $10.50, Medium $12.50, Large $15.00
# ================================================================================

DEFAULT_BASE_PRICES: Dict[Tuple[CakeType, CakeSize], Decimal] = {
    (CakeType.APPLE, CakeSize.SMALL): Decimal("8.00"),
    (CakeType.APPLE, CakeSize.MEDIUM): Decimal("10.00"),
    (CakeType.APPLE, CakeSize.LARGE): Decimal("12.00"),

    (CakeType.CHEESE, CakeSize.SMALL): Decimal("10.50"),
    (CakeType.CHEESE, CakeSize.MEDIUM): Decimal("12.50"),
    (CakeType.CHEESE, CakeSize.LARGE): Decimal("15.00"),

    (CakeType.CHOCOLATE, CakeSize.SMALL): Decimal("10.50"),
    (CakeType.CHOCOLATE, CakeSize.MEDIUM): Decimal("12.50"),
    (CakeType.CHOCOLATE, CakeSize.LARGE): Decimal("15.00"),
}

DEFAULT_DECORATIONS: Dict[DecorationKind, DecorationDefault] = {
    DecorationKind.CHOCOLATE_CHIPS: DecorationDefault(cost=Decimal("2.50"), name="Chocolate Chips"),
    DecorationKind.CREAM: DecorationDefault(cost=Decimal("2.00"), name="Cream"),
    DecorationKind.SKITTLES: DecorationDefault(cost=Decimal("1.50"), name="Skittles"),
}


E = TypeVar("E", bound=Enum)


def parse_member(enum_cls: Type[E], value) -> Optional[E]:
    """
    Resolve an enum member from a member or a case-insensitive member name.

    Returns None when the value is not recognized.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            return None
    return None


def require_member(enum_cls: Type[E], value, label: str) -> E:
    """
    Resolve an enum member or raise InvalidArgumentError.

    Args:
        enum_cls: CakeType, CakeSize or DecorationKind
        value: Member or member name
        label: Human name used in the error message ("Cake type", ...)
    """
    if value is None:
        raise InvalidArgumentError(f"{label} cannot be null")

    member = parse_member(enum_cls, value)
    if member is None:
        raise InvalidArgumentError(f"Unknown {label.lower()}: {value}")
    return member


def to_price(value, label: str = "Price") -> Decimal:
    """
    Convert an int/float/str/Decimal amount into a non-negative Decimal.

    Floats go through str() so 2.5 becomes Decimal('2.5'), not its binary
    expansion.
    """
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"{label} cannot be null")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidArgumentError(f"{label} is not a number: {value!r}")

    if not amount.is_finite():
        raise InvalidArgumentError(f"{label} must be finite: {value}")
    if amount < 0:
        raise InvalidArgumentError(f"{label} cannot be negative: {value}")
    return amount


# [3 letters for cake type]-[1 letter for size]-[counter, 3+ digits]
ORDER_ID_PATTERN = re.compile(r"^([A-Z]{3})-([A-Z])-(\d{3,})$")


def parse_order_id(order_id: str) -> Tuple[CakeType, CakeSize, int]:
    """
    Split an order id such as CHO-L-007 into (cake type, size, number).

    Raises:
        InvalidArgumentError: if the id does not match the format or uses a
            type/size code that does not exist
    """
    match = ORDER_ID_PATTERN.match(order_id or "")
    if not match:
        raise InvalidArgumentError(f"Malformed order id: {order_id!r}")

    type_code, size_code, number = match.groups()
    cake_type = next((t for t in CakeType if t.code == type_code), None)
    size = next((s for s in CakeSize if s.code == size_code), None)
    if cake_type is None or size is None:
        raise InvalidArgumentError(f"Malformed order id: {order_id!r}")

    return cake_type, size, int(number)
