"""
Catalog API Endpoints
Base prices and decoration defaults

Changes only apply to orders (and decorations) created afterwards.

Author: TM3
Date: 2026-10-16
"""
from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from pydantic import BaseModel

from cakeshop.core.dependencies import Shop, get_shop
from cakeshop.core.exceptions import InvalidArgumentError, NotFoundError
from cakeshop.domain.catalog import CakeType, CakeSize, DecorationKind, to_price

router = APIRouter()


# Request models
class BasePriceUpdate(BaseModel):
    cake_type: CakeType
    size: CakeSize
    price: Decimal


class DecorationUpdate(BaseModel):
    cost: Optional[Decimal] = None
    name: Optional[str] = None


@router.get("/prices")
async def get_base_prices(shop: Shop = Depends(get_shop)):
    """Get base prices for every cake type and size"""
    return {
        "status": "success",
        "data": shop.catalog.list_base_prices()
    }


@router.put("/prices")
async def update_base_price(update: BasePriceUpdate, shop: Shop = Depends(get_shop)):
    """Set the base price for one cake type and size"""
    try:
        shop.catalog.set_base_price(update.cake_type, update.size, update.price)
        return {
            "status": "success",
            "data": {
                "cake_type": update.cake_type.value,
                "size": update.size.value,
                "price": float(shop.catalog.get_base_price(update.cake_type, update.size))
            }
        }

    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/prices/reset")
async def reset_base_prices(shop: Shop = Depends(get_shop)):
    """Restore default base prices"""
    shop.catalog.reset_to_defaults()
    return {
        "status": "success",
        "data": shop.catalog.list_base_prices()
    }


@router.get("/decorations")
async def get_decorations(shop: Shop = Depends(get_shop)):
    """Get current cost and name for every decoration"""
    return {
        "status": "success",
        "data": shop.catalog.list_decorations()
    }


@router.patch("/decorations/{kind}")
async def update_decoration(kind: DecorationKind, update: DecorationUpdate, shop: Shop = Depends(get_shop)):
    """
    Update a decoration's cost and/or name

    Both values are validated before either is written.
    """
    try:
        if update.cost is not None:
            to_price(update.cost, label="Decoration cost")
        if update.name is not None and not update.name.strip():
            raise InvalidArgumentError("Decoration name cannot be empty")

        if update.cost is not None:
            shop.catalog.set_decoration_cost(kind, update.cost)
        if update.name is not None:
            shop.catalog.set_decoration_name(kind, update.name)

        row = shop.catalog.get_decoration_default(kind).to_dict()
        row['kind'] = kind.value
        return {
            "status": "success",
            "data": row
        }

    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
