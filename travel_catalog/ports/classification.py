"""Classification ports - Abstractions for destination and activity tagging.

These protocols let the package normalizer work with any classifier,
such as the rule-based adapters or a test double with a custom vocabulary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import DestinationIdentity


class DestinationClassifierPort(Protocol):
    """Port for destination classification.

    Implementation: adapters/nlp/rule_based.py (RuleBasedDestinationClassifier)
    """

    def classify(self, destination: str) -> DestinationIdentity:
        """Classify a raw destination string.

        Args:
            destination: Free-text destination, e.g. "Goa, India".

        Returns:
            DestinationIdentity with type, region, slugs and grouping key.
        """
        ...


class ActivityTaggerPort(Protocol):
    """Port for activity tag extraction.

    Implementation: adapters/nlp/rule_based.py (RuleBasedActivityTagger)
    """

    def tag(
        self,
        highlights: Sequence[str],
        inclusions: Sequence[str],
        description: str,
    ) -> frozenset[str]:
        """Infer activity tags from package text.

        Args:
            highlights: Package highlight strings.
            inclusions: Package inclusion strings.
            description: Free-text package description.

        Returns:
            Set of activity labels (possibly empty).
        """
        ...
