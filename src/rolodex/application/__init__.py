"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from rolodex.application.contact_service import ContactService
from rolodex.application.dto import ContactSummary
from rolodex.application.ports import ContactRepository

__all__ = [
    "ContactRepository",
    "ContactService",
    "ContactSummary",
]
