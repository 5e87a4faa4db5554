"""
Repository Layer - Data Access

Repositories store and return domain models.

Author: TM3
Date: 2026-10-16
"""
from cakeshop.repositories.order_repository import OrderRepository

__all__ = ['OrderRepository']
