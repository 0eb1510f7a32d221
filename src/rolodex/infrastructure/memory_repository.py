"""In-memory implementation of ContactRepository (no DB)."""

from rolodex.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in a dict keyed by contact_id. Order preserved by first insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, Contact] = {}

    def save(self, contact: Contact) -> None:
        self._by_id[contact.contact_id] = contact

    def get_by_id(self, contact_id: str) -> Contact | None:
        return self._by_id.get(contact_id)

    def remove(self, contact_id: str) -> bool:
        if contact_id not in self._by_id:
            return False
        del self._by_id[contact_id]
        return True

    def list_all(self) -> list[Contact]:
        return list(self._by_id.values())

    def count(self) -> int:
        return len(self._by_id)
