from typing import Mapping, Optional

from .exceptions import MissingFilterValueError

ALLOWED_FILTERS = ("route", "locality", "administrative_area", "postal_code", "country")


def encode_components(components: Optional[Mapping[str, Optional[str]]]) -> Optional[str]:
    """
    Serialize a components filter as ``filter1:value1|filter2:value2``.

    Filters are emitted in sorted order. Names outside ``ALLOWED_FILTERS`` are
    skipped, but an allowed name without a value is an error.

    Args:
        components: Mapping of filter name to value, or None

    Returns:
        The encoded filter, or None when nothing is left to send

    Raises:
        MissingFilterValueError: An allowed filter maps to None
    """
    if not components:
        return None

    encoded = []
    for name in sorted(components):
        if name not in ALLOWED_FILTERS:
            continue
        value = components[name]
        if value is None:
            raise MissingFilterValueError(name)
        encoded.append(f"{name}:{value}")

    if not encoded:
        return None
    return "|".join(encoded)
