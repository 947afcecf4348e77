"""Tests for domain value objects."""

import pytest

from storefront.domain import Address, AddressType, ValidationError, format_address


def make_address(**overrides) -> Address:
    data = {
        "full_name": "Ada Lovelace",
        "address_line1": "12 Analytical Way",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
    }
    data.update(overrides)
    return Address(**data)


class TestAddress:
    """Tests for Address value object."""

    def test_defaults(self) -> None:
        """Country, type and default flag have defaults."""
        address = make_address()
        assert address.country == "USA"
        assert address.type == AddressType.BOTH
        assert address.is_default is False
        assert address.phone is None
        assert address.address_line2 is None

    def test_fields_are_trimmed(self) -> None:
        """Text fields are trimmed."""
        address = make_address(city="  Springfield ", phone=" 555-0100 ")
        assert address.city == "Springfield"
        assert address.phone == "555-0100"

    def test_blank_optional_fields_become_none(self) -> None:
        """Blank optional fields are treated as absent."""
        address = make_address(address_line2="   ", phone="")
        assert address.address_line2 is None
        assert address.phone is None

    @pytest.mark.parametrize(
        "field", ["full_name", "address_line1", "city", "state", "zip_code"]
    )
    def test_missing_required_field_fails(self, field: str) -> None:
        """A blank required field fails construction, naming the field."""
        with pytest.raises(ValidationError) as exc_info:
            make_address(**{field: "  "})
        assert exc_info.value.field == field

    def test_type_accepts_string(self) -> None:
        """Type can be given as its string value."""
        assert make_address(type="shipping").type == AddressType.SHIPPING

    def test_unknown_type_fails(self) -> None:
        """Only shipping, billing and both are accepted."""
        with pytest.raises(ValidationError) as exc_info:
            make_address(type="home")
        assert exc_info.value.field == "type"

    def test_equality_by_value(self) -> None:
        """Addresses with the same fields are equal."""
        assert make_address() == make_address()
        assert make_address() != make_address(zip_code="62702")


class TestFormatAddress:
    """Tests for the formatted address view."""

    def test_full_address(self) -> None:
        """All parts appear one per line, country last."""
        address = make_address(address_line2="Suite 4")
        assert address.formatted == (
            "Ada Lovelace\n"
            "12 Analytical Way\n"
            "Suite 4\n"
            "Springfield, IL 62701\n"
            "USA"
        )

    def test_no_blank_line_without_line2(self) -> None:
        """A missing second line leaves no blank line behind."""
        formatted = format_address(make_address())
        assert "\n\n" not in formatted
        assert formatted.splitlines() == [
            "Ada Lovelace",
            "12 Analytical Way",
            "Springfield, IL 62701",
            "USA",
        ]

    def test_phone_is_not_part_of_display(self) -> None:
        """Phone is stored but not displayed."""
        assert "555" not in make_address(phone="555-0100").formatted


class TestAddressDocument:
    """Tests for inline document serialization."""

    def test_to_document_has_no_identity(self) -> None:
        """Serialized form uses stored keys and carries no id."""
        document = make_address(type="billing", is_default=True).to_document()
        assert document == {
            "fullName": "Ada Lovelace",
            "addressLine1": "12 Analytical Way",
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62701",
            "country": "USA",
            "isDefault": True,
            "type": "billing",
        }
        assert "_id" not in document
        assert "id" not in document

    def test_from_document_ignores_stray_keys(self) -> None:
        """Stored documents rebuild the same address."""
        address = make_address(address_line2="Apt 2", phone="555-0100")
        document = {**address.to_document(), "_id": "abc"}
        assert Address.from_document(document) == address

    def test_from_document_defaults_country(self) -> None:
        """Missing country falls back to the default."""
        document = make_address().to_document()
        del document["country"]
        assert Address.from_document(document).country == "USA"

    def test_from_document_missing_city_fails(self) -> None:
        """A stored address without a city cannot be rebuilt."""
        document = make_address().to_document()
        del document["city"]
        with pytest.raises(ValidationError) as exc_info:
            Address.from_document(document)
        assert exc_info.value.field == "city"
