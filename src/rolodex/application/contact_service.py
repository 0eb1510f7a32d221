"""Contact directory use cases: add, batch add, delete, update, get, search, sort."""

import logging
import threading
from collections.abc import Callable, Iterable

from rolodex.application.dto import ContactSummary
from rolodex.application.ports import ContactRepository
from rolodex.domain import Contact, DuplicateId, InvalidArgument, NotFound

logger = logging.getLogger(__name__)


class ContactService:
    """Owns the contact_id -> Contact collection. Each public operation runs under one lock."""

    def __init__(
        self,
        repository: ContactRepository,
        *,
        format_phone: Callable[[str], str] | None = None,
    ) -> None:
        self._repo = repository
        self._format_phone = format_phone
        self._lock = threading.RLock()

    def add_contact(self, contact: Contact) -> None:
        """Store a new contact. Raises InvalidArgument for None, DuplicateId if the id is taken."""
        if contact is None:
            raise InvalidArgument("Contact cannot be None.")
        if not isinstance(contact, Contact):
            raise InvalidArgument(f"Expected a Contact, got {type(contact).__name__}.")
        with self._lock:
            if self._repo.get_by_id(contact.contact_id) is not None:
                logger.warning("Rejected duplicate contact id %s", contact.contact_id)
                raise DuplicateId(contact.contact_id)
            self._repo.save(contact)
        logger.info("Added contact %s", contact.contact_id)

    def add_contacts_batch(self, contacts: Iterable[Contact]) -> None:
        """Insert every contact, or none of them.

        Ids are only checked against contacts already stored. Two contacts sharing an id
        inside the same batch are both accepted and the later one wins.
        """
        if contacts is None:
            raise InvalidArgument("Contacts cannot be None.")
        batch = list(contacts)
        for contact in batch:
            if not isinstance(contact, Contact):
                raise InvalidArgument(
                    f"Expected a Contact in batch, got {type(contact).__name__}."
                )
        with self._lock:
            for contact in batch:
                if self._repo.get_by_id(contact.contact_id) is not None:
                    logger.warning(
                        "Rejected batch of %d: duplicate contact id %s",
                        len(batch),
                        contact.contact_id,
                    )
                    raise DuplicateId(
                        contact.contact_id,
                        f"Duplicate in batch: {contact.contact_id}",
                    )
            for contact in batch:
                self._repo.save(contact)
        logger.info("Added batch of %d contacts", len(batch))

    def delete_contact(self, contact_id: str) -> None:
        """Remove a contact. Raises NotFound if the id is not stored."""
        with self._lock:
            if not self._repo.remove(contact_id):
                logger.warning("Delete of unknown contact id %s", contact_id)
                raise NotFound(contact_id)
        logger.info("Deleted contact %s", contact_id)

    def update_contact(
        self,
        contact_id: str,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Set each field that is not None, in order first_name, last_name, phone, address.

        Stops at the first invalid value (InvalidField); fields set before it keep their
        new value. Raises NotFound if the id is not stored.
        """
        with self._lock:
            contact = self._repo.get_by_id(contact_id)
            if contact is None:
                logger.warning("Update of unknown contact id %s", contact_id)
                raise NotFound(contact_id)
            if first_name is not None:
                contact.first_name = first_name
            if last_name is not None:
                contact.last_name = last_name
            if phone is not None:
                contact.phone = phone
            if address is not None:
                contact.address = address
        logger.info("Updated contact %s", contact_id)

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return the contact stored under contact_id, or None."""
        with self._lock:
            return self._repo.get_by_id(contact_id)

    def get_contact_summary(self, contact_id: str) -> ContactSummary | None:
        """Return a display summary of a contact (phone formatted), or None if not found."""
        with self._lock:
            contact = self._repo.get_by_id(contact_id)
            if contact is None:
                return None
            phone = contact.phone
            if self._format_phone is not None:
                phone = self._format_phone(phone)
            return ContactSummary(
                contact_id=contact.contact_id,
                first_name=contact.first_name,
                last_name=contact.last_name,
                phone=phone,
                address=contact.address,
            )

    def list_contacts(self) -> list[Contact]:
        """Return all contacts in repository order."""
        with self._lock:
            return self._repo.list_all()

    def find_by_last_name(self, last_name: str) -> list[Contact]:
        """Return contacts whose last name equals last_name, ignoring case. Empty list if none."""
        if last_name is None:
            return []
        needle = last_name.lower()
        with self._lock:
            out = [c for c in self._repo.list_all() if c.last_name.lower() == needle]
        logger.debug("find_by_last_name(%r): %d match(es)", last_name, len(out))
        return out

    def get_contacts_sorted_by_name(self) -> list[Contact]:
        """Return all contacts sorted by last name, then first name (case-sensitive)."""
        with self._lock:
            return sorted(
                self._repo.list_all(), key=lambda c: (c.last_name, c.first_name)
            )

    def size(self) -> int:
        with self._lock:
            return self._repo.count()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, contact_id: object) -> bool:
        with self._lock:
            return (
                isinstance(contact_id, str)
                and self._repo.get_by_id(contact_id) is not None
            )
