"""Infrastructure layer: concrete implementations of application ports."""

from rolodex.infrastructure.memory_repository import InMemoryContactRepository
from rolodex.infrastructure.phone import format_phone
from rolodex.infrastructure.seed import load_seed, parse_seed

__all__ = [
    "InMemoryContactRepository",
    "format_phone",
    "load_seed",
    "parse_seed",
]
