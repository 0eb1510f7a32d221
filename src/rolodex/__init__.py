"""
Rolodex core: in-memory contact directory, clean-architecture layout.

- domain: Contact entity, field validators, errors. No outer dependencies.
- application: use cases (ContactService), ports (ContactRepository), DTOs.
- infrastructure: adapters (InMemoryContactRepository, phone formatting, seed loader).
"""

from rolodex.application import ContactRepository, ContactService, ContactSummary
from rolodex.bootstrap import build_service
from rolodex.domain import (
    Contact,
    ContactError,
    DuplicateId,
    InvalidArgument,
    InvalidField,
    NotFound,
)
from rolodex.infrastructure import InMemoryContactRepository

__all__ = [
    "Contact",
    "ContactError",
    "ContactRepository",
    "ContactService",
    "ContactSummary",
    "DuplicateId",
    "InMemoryContactRepository",
    "InvalidArgument",
    "InvalidField",
    "NotFound",
    "build_service",
]
