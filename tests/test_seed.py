"""Tests for the YAML seed loader."""

import pytest

from rolodex.domain import Contact, InvalidField
from rolodex.infrastructure import load_seed, parse_seed

SEED = """
contacts:
  - id: "1"
    first_name: John
    last_name: Doe
    phone: "1234567890"
    address: 123 Main St
  - id: 2
    first_name: Jane
    last_name: Roe
    phone: 2025551234
    address: 9 Oak
"""


def test_load_seed(tmp_path) -> None:
    (tmp_path / "seed.yaml").write_text(SEED)
    contacts = load_seed(tmp_path / "seed.yaml")
    assert contacts == [
        Contact("1", "John", "Doe", "1234567890", "123 Main St"),
        Contact("2", "Jane", "Roe", "2025551234", "9 Oak"),
    ]


def test_empty_document_returns_empty_list() -> None:
    assert parse_seed("") == []
    assert parse_seed("contacts: []") == []


def test_not_a_dict_raises() -> None:
    with pytest.raises(ValueError, match="must be a dict"):
        parse_seed("- a\n- b\n")


def test_contacts_not_a_list_raises() -> None:
    with pytest.raises(ValueError, match="must be a list"):
        parse_seed("contacts: nope")


def test_missing_field_raises() -> None:
    raw = """
contacts:
  - id: "1"
    first_name: John
"""
    with pytest.raises(ValueError, match="missing last_name, phone, address"):
        parse_seed(raw)


def test_invalid_value_raises_invalid_field() -> None:
    raw = """
contacts:
  - id: "1"
    first_name: John
    last_name: Doe
    phone: "12345"
    address: 123 Main St
"""
    with pytest.raises(InvalidField) as exc_info:
        parse_seed(raw)
    assert exc_info.value.field == "phone"


def test_unquoted_digits_keep_exact_text() -> None:
    raw = """
contacts:
  - id: 010
    first_name: John
    last_name: Doe
    phone: 0555123456
    address: 1.50 Main St
  - id: 1.50
    first_name: Jane
    last_name: Roe
    phone: "1234567890"
    address: 9 Oak
"""
    contacts = parse_seed(raw)
    assert contacts[0].contact_id == "010"
    assert contacts[0].phone == "0555123456"
    assert contacts[1].contact_id == "1.50"


def test_nested_value_raises() -> None:
    raw = """
contacts:
  - id: [1, 2]
    first_name: John
    last_name: Doe
    phone: "1234567890"
    address: 123 Main St
"""
    with pytest.raises(ValueError, match="id must be text"):
        parse_seed(raw)
