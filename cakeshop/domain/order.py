"""
Order Domain Models

A cake order is a base cake (type + size + base price) plus an ordered list of
decoration snapshots. Snapshots freeze the decoration's name and cost at the
moment it was applied, so later catalog changes never touch existing orders.

Author: TM3
Date: 2026-10-16
"""
from pydantic import BaseModel, Field, ConfigDict, ValidationError, field_validator, model_validator
from typing import Optional, List
from decimal import Decimal

from cakeshop.core.exceptions import InvalidArgumentError
from cakeshop.domain.catalog import CakeType, CakeSize, DecorationKind, parse_order_id


class DecorationSnapshot(BaseModel):
    """
    Decoration as it was priced when it was added to an order

    Fields:
        kind: Decoration kind (None for records saved without one)
        name: Display name at application time
        cost: Cost at application time
    """

    kind: Optional[DecorationKind] = Field(None, description="Decoration kind")
    name: str = Field(..., description="Display name at order time", min_length=1)
    cost: Decimal = Field(..., description="Cost at order time", ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name cannot be blank")
        return value


class CakeOrder(BaseModel):
    """
    Cake order domain model - the composed entity

    Identity fields are set by OrderFactory and frozen afterwards.
    The only mutation allowed is appending to `decorations`
    (see DecorationChain).

    Fields:
        order_id: Formatted id, e.g. CHO-L-001
        cake_type: Base cake category
        size: Size tier
        base_price: Price of the undecorated cake
        decorations: Ordered snapshots (insertion order = display order)
    """

    order_id: str = Field(..., description="Order id", min_length=1, frozen=True)
    cake_type: CakeType = Field(..., description="Cake type", frozen=True)
    size: CakeSize = Field(..., description="Cake size", frozen=True)
    base_price: Decimal = Field(..., description="Base price", ge=0, frozen=True)
    decorations: List[DecorationSnapshot] = Field(default_factory=list, description="Decoration snapshots")

    @model_validator(mode="after")
    def order_id_matches_cake(self) -> "CakeOrder":
        """The type and size codes in order_id must agree with cake_type and size"""
        try:
            id_type, id_size, _ = parse_order_id(self.order_id)
        except InvalidArgumentError as e:
            raise ValueError(str(e)) from e

        if (id_type, id_size) != (self.cake_type, self.size):
            raise ValueError(
                f"order_id {self.order_id} does not match {self.cake_type.value}/{self.size.value}"
            )
        return self

    # Computed properties
    @property
    def decoration_count(self) -> int:
        """Number of decorations applied"""
        return len(self.decorations)

    @property
    def decoration_names(self) -> List[str]:
        """Decoration names in display order"""
        return [snapshot.name for snapshot in self.decorations]

    def to_record(self) -> dict:
        """
        Plain structural representation used for persistence.

        Decimals are kept as strings so the round-trip is exact.
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_record(cls, record: dict) -> "CakeOrder":
        """
        Rebuild an order from `to_record()` output.

        Does not consult the IdentityGenerator; the stored id is trusted.
        """
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid order record: {e}") from e

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()

        data['cake_type'] = self.cake_type.value
        data['size'] = self.size.value
        data['base_price'] = float(self.base_price)
        data['decorations'] = [
            {
                'kind': snapshot.kind.value if snapshot.kind else None,
                'name': snapshot.name,
                'cost': float(snapshot.cost),
            }
            for snapshot in self.decorations
        ]
        data['decoration_count'] = self.decoration_count

        return data
