"""Phone number formatting for display."""

import phonenumbers


def format_phone(raw: str, region: str = "US") -> str:
    """Return the number in national format for region, e.g. "(202) 555-1234".

    Numbers that do not parse or are not valid for the region are returned unchanged.
    """
    if not raw or not str(raw).strip():
        return raw
    try:
        parsed = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException:
        return raw
    if not phonenumbers.is_valid_number(parsed):
        return raw
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.NATIONAL)
