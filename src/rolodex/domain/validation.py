"""Field validators for Contact. Each returns the value unchanged or raises InvalidField."""

import re

from rolodex.domain.errors import InvalidField

# Max lengths for contact fields.
CONTACT_ID_MAX_LENGTH = 10
NAME_MAX_LENGTH = 10
ADDRESS_MAX_LENGTH = 30
PHONE_LENGTH = 10

_DIGITS = re.compile(r"[0-9]+")


def _check_max_length(field: str, value: str | None, max_length: int) -> str:
    if not isinstance(value, str) or len(value) > max_length:
        raise InvalidField(field, value)
    return value


def validate_contact_id(contact_id: str | None) -> str:
    return _check_max_length("contact_id", contact_id, CONTACT_ID_MAX_LENGTH)


def validate_first_name(name: str | None) -> str:
    return _check_max_length("first_name", name, NAME_MAX_LENGTH)


def validate_last_name(name: str | None) -> str:
    return _check_max_length("last_name", name, NAME_MAX_LENGTH)


def validate_phone(phone: str | None) -> str:
    """Phone must be exactly ten ASCII digits."""
    if (
        not isinstance(phone, str)
        or len(phone) != PHONE_LENGTH
        or not _DIGITS.fullmatch(phone)
    ):
        raise InvalidField("phone", phone)
    return phone


def validate_address(address: str | None) -> str:
    return _check_max_length("address", address, ADDRESS_MAX_LENGTH)
