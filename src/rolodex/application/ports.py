"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from rolodex.domain import Contact


class ContactRepository(Protocol):
    """Keyed collection of contacts: contact_id -> Contact."""

    def save(self, contact: Contact) -> None:
        """Store a contact under its id, replacing any contact already stored there."""
        ...

    def get_by_id(self, contact_id: str) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def remove(self, contact_id: str) -> bool:
        """Remove a contact. Returns True if removed, False if not found."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in any stable order."""
        ...

    def count(self) -> int:
        """Return the number of stored contacts."""
        ...
