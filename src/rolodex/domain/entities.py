"""Domain entity: Contact."""

from rolodex.domain.validation import (
    validate_address,
    validate_contact_id,
    validate_first_name,
    validate_last_name,
    validate_phone,
)


class Contact:
    """
    A person in the directory, identified by contact_id.
    contact_id is fixed at construction; every other field is validated on each assignment,
    so a Contact never holds an invalid value.
    """

    def __init__(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> None:
        # Validation order decides which error surfaces first.
        self._contact_id = validate_contact_id(contact_id)
        self._first_name = validate_first_name(first_name)
        self._last_name = validate_last_name(last_name)
        self._phone = validate_phone(phone)
        self._address = validate_address(address)

    @property
    def contact_id(self) -> str:
        return self._contact_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = validate_first_name(value)

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = validate_last_name(value)

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = validate_phone(value)

    @property
    def address(self) -> str:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        self._address = validate_address(value)

    def _fields(self) -> tuple[str, str, str, str, str]:
        return (
            self._contact_id,
            self._first_name,
            self._last_name,
            self._phone,
            self._address,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contact):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self) -> str:
        return (
            f"Contact(contact_id={self._contact_id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r}, phone={self._phone!r}, "
            f"address={self._address!r})"
        )
