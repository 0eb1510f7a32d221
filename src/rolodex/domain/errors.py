"""Errors raised by the contact domain and the contact service."""


class ContactError(Exception):
    """Base class for every error raised by rolodex."""


class InvalidField(ContactError, ValueError):
    """A contact field failed validation (construction or setter)."""

    def __init__(self, field: str, value: object, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field.replace('_', ' ')}: {value!r}")


class InvalidArgument(ContactError, ValueError):
    """A required argument was missing or of the wrong kind (e.g. None instead of a Contact)."""


class DuplicateId(ContactError):
    """A contact with this id is already stored."""

    def __init__(self, contact_id: str, message: str | None = None) -> None:
        self.contact_id = contact_id
        super().__init__(message or f"Contact ID already exists: {contact_id}")


class NotFound(ContactError, LookupError):
    """No contact is stored under the given id."""

    def __init__(self, contact_id: str) -> None:
        self.contact_id = contact_id
        super().__init__(f"Contact not found: {contact_id}")
