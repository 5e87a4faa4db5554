"""
Domain exceptions for the Cake Shop core

All errors propagate to the caller. The API layer maps them to
HTTP status codes (400 / 404 / 500).

Author: TM3
Date: 2026-10-16
"""


class CakeShopError(Exception):
    """Base class for all Cake Shop errors"""


class InvalidArgumentError(CakeShopError, ValueError):
    """Missing or unknown enumerant, negative price, empty name, malformed id"""


class NotFoundError(CakeShopError, LookupError):
    """Catalog entry or order does not exist"""


class StorageError(CakeShopError):
    """Orders file could not be written"""
