"""Result types returned to outer layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactSummary:
    """One contact as shown to a user. phone is formatted for display."""

    contact_id: str
    first_name: str
    last_name: str
    phone: str
    address: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
