"""Wire a ready-to-use ContactService: settings, logging, repository, optional seed data."""

import functools
import logging

from rolodex.application import ContactService
from rolodex.config import Settings, configure_logging, load_settings
from rolodex.infrastructure import InMemoryContactRepository, format_phone, load_seed

logger = logging.getLogger(__name__)


def build_service(settings: Settings | None = None) -> ContactService:
    """Create a ContactService over an in-memory repository.

    When settings.seed_path is set, its contacts are batch-inserted before returning.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings)
    service = ContactService(
        InMemoryContactRepository(),
        format_phone=functools.partial(format_phone, region=settings.phone_region),
    )
    if settings.seed_path is not None:
        contacts = load_seed(settings.seed_path)
        service.add_contacts_batch(contacts)
        logger.info("Seeded %d contacts from %s", len(contacts), settings.seed_path)
    return service
