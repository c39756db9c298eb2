"""Classification vocabularies.

The lookup tables used by the destination classifier and the activity
tag extractor are immutable values. Alternate vocabularies can be built
with ``dataclasses.replace`` or the ``with_*`` helpers and injected into
the classifier / tagger without touching the algorithms.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Pattern

HOME_COUNTRY = "India"
FALLBACK_REGION = "Global"

# Order matters: the first keyword found in the raw string wins.
DOMESTIC_KEYWORDS: tuple[str, ...] = (
    "india",
    "andaman",
    "andaman & nicobar",
    "goa",
    "kerala",
    "kashmir",
    "himachal",
    "himachal pradesh",
    "rajasthan",
    "northeast",
    "northeast india",
    "delhi",
    "mumbai",
    "jaipur",
    "udaipur",
    "varanasi",
    "sikkim",
    "uttarakhand",
    "ladakh",
    "leh",
    "shimla",
    "manali",
    "pondicherry",
    "lakshadweep",
    "agra",
    "darjeeling",
    "coorg",
    "amritsar",
    "gujarat",
    "bhopal",
    "kolkata",
    "bangalore",
)

COUNTRY_REGIONS: Mapping[str, str] = MappingProxyType(
    {
        "indonesia": "Asia",
        "maldives": "Asia",
        "thailand": "Asia",
        "uae": "Middle East",
        "united arab emirates": "Middle East",
        "dubai": "Middle East",
        "abu dhabi": "Middle East",
        "malaysia": "Asia",
        "singapore": "Asia",
        "kazakhstan": "Asia",
        "mauritius": "Africa",
        "seychelles": "Africa",
        "vietnam": "Asia",
        "sri lanka": "Asia",
        "nepal": "Asia",
        "bhutan": "Asia",
        "japan": "Asia",
        "south korea": "Asia",
        "china": "Asia",
        "hong kong": "Asia",
        "indian ocean": "Asia",
        "bali": "Asia",
        "switzerland": "Europe",
        "france": "Europe",
        "italy": "Europe",
        "spain": "Europe",
        "greece": "Europe",
        "turkey": "Europe",
        "austria": "Europe",
        "germany": "Europe",
        "netherlands": "Europe",
        "united kingdom": "Europe",
        "england": "Europe",
        "scotland": "Europe",
        "ireland": "Europe",
        "portugal": "Europe",
        "croatia": "Europe",
        "sweden": "Europe",
        "norway": "Europe",
        "finland": "Europe",
        "denmark": "Europe",
        "czech republic": "Europe",
        "hungary": "Europe",
        "egypt": "Africa",
        "kenya": "Africa",
        "south africa": "Africa",
        "tanzania": "Africa",
        "morocco": "Africa",
        "canada": "Americas",
        "united states": "Americas",
        "usa": "Americas",
        "mexico": "Americas",
        "brazil": "Americas",
        "argentina": "Americas",
        "peru": "Americas",
        "chile": "Americas",
        "australia": "Oceania",
        "new zealand": "Oceania",
        "fiji": "Oceania",
        "oman": "Middle East",
        "qatar": "Middle East",
        "saudi arabia": "Middle East",
        "jordan": "Middle East",
    }
)


@dataclass(frozen=True, slots=True)
class DestinationVocabulary:
    """Keyword and lookup tables for destination classification.

    Attributes:
        domestic_keywords: Lowercase substrings that mark a domestic destination
        home_country: Country (and region) label assigned to domestic matches
        fallback_region: Region used when a country is not in ``country_regions``
        country_regions: Lowercase country name -> region
    """

    domestic_keywords: tuple[str, ...] = DOMESTIC_KEYWORDS
    home_country: str = HOME_COUNTRY
    fallback_region: str = FALLBACK_REGION
    country_regions: Mapping[str, str] = field(default_factory=lambda: COUNTRY_REGIONS)

    def __post_init__(self) -> None:
        # Normalize so lookups can assume lowercase keys.
        object.__setattr__(
            self,
            "domestic_keywords",
            tuple(k.strip().lower() for k in self.domestic_keywords if k and k.strip()),
        )
        object.__setattr__(
            self,
            "country_regions",
            MappingProxyType(
                {k.strip().lower(): v for k, v in self.country_regions.items()}
            ),
        )

    def with_domestic_keywords(self, extra: Iterable[str]) -> DestinationVocabulary:
        """Return a copy with ``extra`` keywords appended after the defaults."""
        keywords = list(self.domestic_keywords)
        for keyword in extra:
            normalized = keyword.strip().lower()
            if normalized and normalized not in keywords:
                keywords.append(normalized)
        return DestinationVocabulary(
            domestic_keywords=tuple(keywords),
            home_country=self.home_country,
            fallback_region=self.fallback_region,
            country_regions=self.country_regions,
        )

    def region_for(self, country: str) -> str:
        """Case-insensitive exact lookup of a country's region."""
        return self.country_regions.get(country.strip().lower(), self.fallback_region)


@dataclass(frozen=True, slots=True)
class ActivityRule:
    """A tag and the case-insensitive pattern that assigns it."""

    label: str
    pattern: Pattern[str] = field(compare=False)

    @classmethod
    def from_keywords(cls, label: str, keywords: Iterable[str]) -> ActivityRule:
        """Build a rule matching any of ``keywords`` as a substring."""
        alternation = "|".join(re.escape(k) for k in keywords if k)
        return cls(label=label, pattern=re.compile(f"({alternation})", re.IGNORECASE))

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _rule(label: str, pattern: str) -> ActivityRule:
    return ActivityRule(label=label, pattern=re.compile(pattern, re.IGNORECASE))


DEFAULT_ACTIVITY_RULES: tuple[ActivityRule, ...] = (
    _rule("Beach", r"(beach|island|sea|snorkel|water|cruise|coast)"),
    _rule("Mountains", r"(mountain|hill|trek|hike|peak|snow|valley)"),
    _rule(
        "Culture",
        r"(culture|temple|heritage|palace|museum|historic|tradition|cultural)",
    ),
    _rule(
        "Adventure",
        r"(adventure|safari|dive|rafting|skydiv|zipline|paragliding|trek)",
    ),
    _rule("Luxury", r"(luxury|villa|spa|5-star|resort|premium|exclusive)"),
    _rule("Food", r"(food|cuisine|dining|restaurant|wine|culinary|cook)"),
    _rule("Shopping", r"(shopping|market|mall|souvenir|bazaar)"),
    _rule(
        "Nature",
        r"(nature|wildlife|forest|park|garden|backwater|scenic|waterfall)",
    ),
    _rule("Romance", r"(honeymoon|romance|romantic|couple|love)"),
    _rule("Family", r"(family|kids|children|child|friendly)"),
)

DEFAULT_VOCABULARY = DestinationVocabulary()
