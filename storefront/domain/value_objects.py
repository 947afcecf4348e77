"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Self

from storefront.domain.base import ValueObject
from storefront.domain.exceptions import ValidationError


# ============================================================================
# Address Value Object
# ============================================================================


class AddressType(str, Enum):
    """What an address is used for."""

    SHIPPING = "shipping"
    BILLING = "billing"
    BOTH = "both"


DEFAULT_COUNTRY = "USA"

# Stored document keys, in the order the parent record embeds them.
_DOCUMENT_KEYS = {
    "full_name": "fullName",
    "phone": "phone",
    "address_line1": "addressLine1",
    "address_line2": "addressLine2",
    "city": "city",
    "state": "state",
    "zip_code": "zipCode",
    "country": "country",
    "is_default": "isDefault",
    "type": "type",
}

_REQUIRED = ("full_name", "address_line1", "city", "state", "zip_code", "country")


@dataclass(frozen=True)
class Address(ValueObject):
    """Shipping or billing address embedded in a user or order record.

    Addresses have no identity of their own. They are owned by the
    record that embeds them and serialized inline with it.

    Attributes:
        full_name: Recipient name.
        address_line1: Primary address line.
        city: City name.
        state: State/province/region.
        zip_code: Postal/ZIP code.
        country: Country name, defaults to USA.
        phone: Contact phone (optional).
        address_line2: Secondary address line (optional).
        is_default: Whether this is the owner's default address.
        type: Shipping, billing or both.
    """

    full_name: str
    address_line1: str
    city: str
    state: str
    zip_code: str
    country: str = DEFAULT_COUNTRY
    phone: str | None = None
    address_line2: str | None = None
    is_default: bool = False
    type: AddressType = AddressType.BOTH

    def __post_init__(self) -> None:
        """Trim text fields and validate required ones."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str) and f.name != "type":
                object.__setattr__(self, f.name, value.strip())

        for name in _REQUIRED:
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValidationError(name, "is required")

        # Optional fields collapse to None when blank
        for name in ("phone", "address_line2"):
            if not getattr(self, name):
                object.__setattr__(self, name, None)

        try:
            object.__setattr__(self, "type", AddressType(self.type))
        except ValueError:
            raise ValidationError(
                "type",
                f"must be one of {[t.value for t in AddressType]}",
                self.type,
            ) from None

    @property
    def formatted(self) -> str:
        """Multi-line display form of the address."""
        return format_address(self)

    def to_document(self) -> dict[str, Any]:
        """Serialize for inline storage in the parent record.

        Returns:
            Dictionary keyed the way stored documents are.
        """
        document: dict[str, Any] = {}
        for attr, key in _DOCUMENT_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            document[key] = value.value if isinstance(value, AddressType) else value
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Self:
        """Rebuild an address from its stored form.

        Unknown keys (including any stray identifier) are ignored.

        Args:
            document: Stored address dictionary.

        Returns:
            Address instance.

        Raises:
            ValidationError: If a required field is missing.
        """
        kwargs = {
            attr: document[key]
            for attr, key in _DOCUMENT_KEYS.items()
            if document.get(key) is not None
        }
        for name in _REQUIRED:
            if name == "country":
                continue
            kwargs.setdefault(name, "")
        return cls(**kwargs)


def format_address(address: Address) -> str:
    """Format an address for display, one part per line.

    Args:
        address: Address to format.

    Returns:
        Name, street lines, "City, State Zip" and country joined by newlines,
        with empty parts left out.
    """
    locality = f"{address.city}, {address.state} {address.zip_code}"
    parts = [
        address.full_name,
        address.address_line1,
        address.address_line2,
        locality,
        address.country,
    ]
    return "\n".join(part for part in parts if part)
