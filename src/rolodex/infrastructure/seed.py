"""Load seed contacts from a YAML file. Used by bootstrap to pre-fill the directory."""

from pathlib import Path

import yaml

from rolodex.domain import Contact

_FIELDS = ("id", "first_name", "last_name", "phone", "address")


def parse_seed(raw: str) -> list[Contact]:
    """Parse a YAML document with a top-level 'contacts' list into Contact entities.

    Scalars are read as plain text (BaseLoader), so unquoted values such as
    010 or 0555123456 keep their exact digits.
    """
    doc = yaml.load(raw, Loader=yaml.BaseLoader)
    if doc is None:
        return []
    if not isinstance(doc, dict):
        raise ValueError("Seed YAML must be a dict")
    # "contacts:" with no value loads as "".
    entries = doc.get("contacts") or []
    if not isinstance(entries, list):
        raise ValueError("Seed 'contacts' must be a list")
    contacts = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Seed contact #{i} must be a dict")
        missing = [f for f in _FIELDS if f not in entry]
        if missing:
            raise ValueError(f"Seed contact #{i} is missing {', '.join(missing)}")
        nested = [f for f in _FIELDS if not isinstance(entry[f], str)]
        if nested:
            raise ValueError(f"Seed contact #{i}: {', '.join(nested)} must be text")
        contacts.append(
            Contact(
                contact_id=entry["id"],
                first_name=entry["first_name"],
                last_name=entry["last_name"],
                phone=entry["phone"],
                address=entry["address"],
            )
        )
    return contacts


def load_seed(path: Path) -> list[Contact]:
    """Read and parse a seed file."""
    return parse_seed(Path(path).read_text(encoding="utf-8"))
