"""Domain layer: Contact entity, field validators, errors. No dependencies on outer layers."""

from rolodex.domain.entities import Contact
from rolodex.domain.errors import (
    ContactError,
    DuplicateId,
    InvalidArgument,
    InvalidField,
    NotFound,
)

__all__ = [
    "Contact",
    "ContactError",
    "DuplicateId",
    "InvalidArgument",
    "InvalidField",
    "NotFound",
]
