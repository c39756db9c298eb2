"""Rule-based destination classification.

A destination string such as ``"Goa, India"`` or ``"Paris, France"`` is
split on commas and classified as domestic or international by keyword
substring matching over the whole string.

Example
-------
    >>> classify_destination("Goa, India").type
    <DestinationType.DOMESTIC: 'domestic'>
    >>> classify_destination("Paris, France").region
    'Europe'
    >>> classify_destination("").type
    <DestinationType.UNKNOWN: 'unknown'>

Matching is plain substring search, so a keyword embedded in an unrelated
word (``"leh"`` in ``"Lehigh Valley, USA"``) classifies the destination as
domestic. This precision limitation is kept as is.
"""

from typing import Any, List, Optional

from ..domain.models import DestinationIdentity, DestinationType
from ..domain.vocabulary import DEFAULT_VOCABULARY, DestinationVocabulary
from .slug import slugify


def split_destination(raw: str) -> List[str]:
    """Split on commas, trimming segments and dropping empty ones."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def match_domestic_keyword(
    raw: str, vocabulary: DestinationVocabulary = DEFAULT_VOCABULARY
) -> Optional[str]:
    """Return the first domestic keyword found in ``raw``, if any."""
    normalized = raw.lower()
    for keyword in vocabulary.domestic_keywords:
        if keyword in normalized:
            return keyword
    return None


def is_domestic(raw: str, vocabulary: DestinationVocabulary = DEFAULT_VOCABULARY) -> bool:
    return match_domestic_keyword(raw, vocabulary) is not None


def classify_destination(
    value: Any = "", vocabulary: DestinationVocabulary = DEFAULT_VOCABULARY
) -> DestinationIdentity:
    """Normalize a free-text destination into a DestinationIdentity.

    Parameters
    ----------
    value : Any
        Raw destination text. ``None`` and blank strings give an
        ``UNKNOWN`` identity with empty fields.
    vocabulary : DestinationVocabulary
        Keyword and region tables.

    Returns
    -------
    DestinationIdentity
        Identity whose ``key`` is non-empty whenever the trimmed input is.
    """
    raw = "" if value is None else str(value).strip()
    if not raw:
        return DestinationIdentity(
            raw=raw,
            type=DestinationType.UNKNOWN,
            region=vocabulary.fallback_region,
        )

    parts = split_destination(raw)
    name = parts[0] if parts else raw
    last_segment = parts[-1] if len(parts) > 1 else ""

    if is_domestic(raw, vocabulary):
        dest_type = DestinationType.DOMESTIC
        country = vocabulary.home_country
        region = vocabulary.home_country
    else:
        dest_type = DestinationType.INTERNATIONAL
        country = last_segment or raw
        region = vocabulary.region_for(country)

    name_slug = slugify(name)
    country_slug = slugify(country)
    if dest_type is DestinationType.DOMESTIC:
        slug = name_slug
    else:
        slug = country_slug or name_slug

    return DestinationIdentity(
        raw=raw,
        name=name,
        country=country,
        type=dest_type,
        region=region,
        name_slug=name_slug,
        country_slug=country_slug,
        slug=slug,
        key=slug or slugify(raw),
    )
