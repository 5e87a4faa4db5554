"""
Dashboard API Endpoints

Author: TM3
Date: 2026-10-16
"""
from fastapi import APIRouter, Depends

from cakeshop.core.dependencies import Shop, get_shop

router = APIRouter()


@router.get("/summary")
async def get_dashboard_summary(shop: Shop = Depends(get_shop)):
    """
    Order counts and revenue per cake type

    Returns:
    - orders_created per type (from the id counters)
    - orders_completed and revenue per type
    - Description of the last completed order
    """
    return {
        "status": "success",
        "data": shop.dashboard.summary()
    }
