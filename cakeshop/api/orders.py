"""
Orders API Endpoints
Place cake orders, add decorations and query orders

Author: TM3
Date: 2026-10-16
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from pydantic import BaseModel, Field

from cakeshop.core.dependencies import Shop, get_shop
from cakeshop.core.exceptions import InvalidArgumentError, NotFoundError
from cakeshop.domain.catalog import CakeType, CakeSize, DecorationKind
from cakeshop.services.composition import order_view

router = APIRouter()


# Request models
class OrderCreateRequest(BaseModel):
    cake_type: CakeType
    size: CakeSize
    decorations: List[DecorationKind] = Field(default_factory=list)


class DecorationRequest(BaseModel):
    kind: DecorationKind


@router.post("/", status_code=201)
async def create_order(request: OrderCreateRequest, shop: Shop = Depends(get_shop)):
    """
    Place a new order

    Decorations are applied in the order given and priced at today's
    catalog values.
    """
    try:
        order = shop.orders.place_order(request.cake_type, request.size, request.decorations)
        return {
            "status": "success",
            "data": order_view(order)
        }

    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error creating order: {str(e)}")


@router.get("/")
async def get_orders(
    cake_type: Optional[CakeType] = Query(None, description="Filter by cake type"),
    limit: int = Query(50, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    shop: Shop = Depends(get_shop)
):
    """Get all orders with optional cake type filter"""
    try:
        orders, total = shop.orders.list_orders(cake_type=cake_type, limit=limit, offset=offset)

        return {
            "status": "success",
            "total": total,
            "limit": limit,
            "offset": offset,
            "count": len(orders),
            "data": [order_view(order) for order in orders]
        }

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching orders: {str(e)}")


@router.get("/{order_id}")
async def get_order(order_id: str, shop: Shop = Depends(get_shop)):
    """Get a single order with its description and total"""
    try:
        order = shop.orders.get_order(order_id)
        return {
            "status": "success",
            "data": order_view(order)
        }

    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")


@router.post("/{order_id}/decorations")
async def add_decoration(order_id: str, request: DecorationRequest, shop: Shop = Depends(get_shop)):
    """Append a decoration to an existing order"""
    try:
        order = shop.orders.add_decoration(order_id, request.kind)
        return {
            "status": "success",
            "data": order_view(order)
        }

    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error adding decoration: {str(e)}")
