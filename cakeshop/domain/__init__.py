"""
Domain Layer - Business Entities

Pydantic models and closed enumerations for cake orders.

Author: TM3
Date: 2026-10-16
"""
from cakeshop.domain.catalog import CakeType, CakeSize, DecorationKind, DecorationDefault
from cakeshop.domain.order import CakeOrder, DecorationSnapshot

__all__ = ['CakeType', 'CakeSize', 'DecorationKind', 'DecorationDefault', 'CakeOrder', 'DecorationSnapshot']
