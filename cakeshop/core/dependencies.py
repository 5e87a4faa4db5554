"""
Shared service instances for the API

The catalog, id generator and repository hold process-wide state, so the
API builds them once and hands the same instances to every request.

Usage:
    @router.get("/items")
    def read_items(shop: Shop = Depends(get_shop)):
        ...

Author: TM3
Date: 2026-10-16
"""
from dataclasses import dataclass
from typing import Optional

from cakeshop.core.config import settings
from cakeshop.repositories.order_repository import OrderRepository
from cakeshop.services.dashboard_service import SalesDashboard
from cakeshop.services.decoration_chain import DecorationChain
from cakeshop.services.identity_generator import IdentityGenerator
from cakeshop.services.order_factory import OrderFactory
from cakeshop.services.order_service import OrderService
from cakeshop.services.pricing_catalog import PricingCatalog


@dataclass
class Shop:
    catalog: PricingCatalog
    id_generator: IdentityGenerator
    orders: OrderService
    dashboard: SalesDashboard


def build_shop(orders_file: Optional[str] = None) -> Shop:
    """Wire catalog → factory/chain → order service → dashboard"""
    catalog = PricingCatalog()
    id_generator = IdentityGenerator()
    service = OrderService(
        factory=OrderFactory(catalog, id_generator),
        chain=DecorationChain(catalog),
        repository=OrderRepository(storage_path=orders_file),
    )
    dashboard = SalesDashboard(id_generator)
    service.subscribe(dashboard)

    return Shop(catalog=catalog, id_generator=id_generator, orders=service, dashboard=dashboard)


_shop: Optional[Shop] = None


def get_shop() -> Shop:
    """FastAPI dependency returning the process-wide Shop"""
    global _shop
    if _shop is None:
        _shop = build_shop(settings.ORDERS_FILE)
    return _shop


def reset_shop(shop: Optional[Shop] = None) -> None:
    """Replace (or drop) the process-wide Shop; used by tests"""
    global _shop
    _shop = shop
