"""Domain layer module.

Contains value objects, entity base classes and the error taxonomy
shared by the catalog and API layers.
"""

from storefront.domain.base import Entity, ValueObject
from storefront.domain.exceptions import (
    DomainError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from storefront.domain.value_objects import Address, AddressType, format_address

__all__ = [
    # Base
    "Entity",
    "ValueObject",
    # Value objects
    "Address",
    "AddressType",
    "format_address",
    # Exceptions
    "DomainError",
    "NotFoundError",
    "StoreUnavailableError",
    "ValidationError",
]
