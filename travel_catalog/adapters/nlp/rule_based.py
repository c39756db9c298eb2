"""Rule-based classification adapters.

These adapters wrap the keyword logic from nlp/destination.py and
nlp/activities.py with the classification port interfaces, building
their vocabularies from configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import ClassificationConfig, get_config
from ...domain.models import DestinationIdentity
from ...domain.vocabulary import (
    DEFAULT_ACTIVITY_RULES,
    DEFAULT_VOCABULARY,
    ActivityRule,
    DestinationVocabulary,
)
from ...nlp.activities import extract_activities
from ...nlp.destination import classify_destination


def vocabulary_from_config(config: ClassificationConfig) -> DestinationVocabulary:
    """Build a destination vocabulary from classification settings."""
    vocabulary = DestinationVocabulary(
        domestic_keywords=DEFAULT_VOCABULARY.domestic_keywords,
        home_country=config.home_country,
        fallback_region=config.fallback_region,
        country_regions=DEFAULT_VOCABULARY.country_regions,
    )
    if config.extra_domestic_keywords:
        vocabulary = vocabulary.with_domestic_keywords(config.extra_domestic_keywords)
    return vocabulary


@dataclass
class RuleBasedDestinationClassifier:
    """Keyword-based destination classifier.

    Implements DestinationClassifierPort.

    Attributes:
        config: Classification configuration (home country, fallback region)
        vocabulary: Explicit vocabulary; built from ``config`` when omitted
    """

    config: ClassificationConfig = field(
        default_factory=lambda: get_config().classification
    )
    vocabulary: Optional[DestinationVocabulary] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.vocabulary is None:
            self.vocabulary = vocabulary_from_config(self.config)

    def classify(self, destination: str) -> DestinationIdentity:
        """Classify a raw destination string.

        Args:
            destination: Free-text destination, e.g. "Goa, India".

        Returns:
            DestinationIdentity with type, region, slugs and grouping key.
        """
        assert self.vocabulary is not None
        identity = classify_destination(destination, self.vocabulary)

        self._logger.debug(
            "Destination classified",
            extra={
                "raw": identity.raw,
                "type": identity.type.value,
                "region": identity.region,
                "key": identity.key,
            },
        )

        return identity


@dataclass
class RuleBasedActivityTagger:
    """Regex-rule activity tagger.

    Implements ActivityTaggerPort.

    Attributes:
        rules: Ordered activity rules, evaluated independently
    """

    rules: Sequence[ActivityRule] = DEFAULT_ACTIVITY_RULES
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def tag(
        self,
        highlights: Sequence[str],
        inclusions: Sequence[str],
        description: str,
    ) -> frozenset[str]:
        activities = extract_activities(highlights, inclusions, description, self.rules)
        self._logger.debug(
            "Activities tagged",
            extra={"activities": sorted(activities)},
        )
        return activities
