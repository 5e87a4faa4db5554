"""
Service Layer - Business Logic

Author: TM3
Date: 2026-10-16
"""
from cakeshop.services.pricing_catalog import PricingCatalog
from cakeshop.services.identity_generator import IdentityGenerator
from cakeshop.services.order_factory import OrderFactory
from cakeshop.services.decoration_chain import DecorationChain
from cakeshop.services.order_service import OrderService
from cakeshop.services.dashboard_service import SalesDashboard

__all__ = [
    'PricingCatalog',
    'IdentityGenerator',
    'OrderFactory',
    'DecorationChain',
    'OrderService',
    'SalesDashboard'
]
