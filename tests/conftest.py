"""
Pytest fixtures and configuration for Cake Shop tests

This file provides shared fixtures that can be used across all test modules.
Every fixture builds fresh instances, so counters and prices never leak
between tests.

Author: TM3
Date: 2026-10-16
"""
import pytest

from cakeshop.core.dependencies import build_shop
from cakeshop.repositories.order_repository import OrderRepository
from cakeshop.services.decoration_chain import DecorationChain
from cakeshop.services.identity_generator import IdentityGenerator
from cakeshop.services.order_factory import OrderFactory
from cakeshop.services.order_service import OrderService
from cakeshop.services.pricing_catalog import PricingCatalog


@pytest.fixture
def catalog():
    """Pricing catalog with default prices"""
    return PricingCatalog()


@pytest.fixture
def id_generator():
    """Identity generator with all counters at 1"""
    return IdentityGenerator()


@pytest.fixture
def factory(catalog, id_generator):
    return OrderFactory(catalog, id_generator)


@pytest.fixture
def chain(catalog):
    return DecorationChain(catalog)


@pytest.fixture
def repository():
    """In-memory order repository"""
    return OrderRepository()


@pytest.fixture
def order_service(factory, chain, repository):
    return OrderService(factory=factory, chain=chain, repository=repository)


@pytest.fixture
def shop():
    """
    Fully wired Shop (catalog, generator, order service, dashboard)

    In memory only.
    """
    return build_shop()


@pytest.fixture
def sample_order_record():
    """
    Provides a plain order structure as stored in the orders file
    """
    return {
        "order_id": "CHO-L-001",
        "cake_type": "CHOCOLATE",
        "size": "LARGE",
        "base_price": "15.00",
        "decorations": [
            {"kind": "CREAM", "name": "Cream", "cost": "2.00"},
            {"kind": "SKITTLES", "name": "Skittles", "cost": "1.50"}
        ]
    }
