"""Classification adapters - Implementations of the classification ports.

Available implementations:
- RuleBasedDestinationClassifier: Keyword substring classification
- RuleBasedActivityTagger: Regex rule activity tagging
"""

from .rule_based import (
    RuleBasedActivityTagger,
    RuleBasedDestinationClassifier,
    vocabulary_from_config,
)

__all__ = [
    "RuleBasedDestinationClassifier",
    "RuleBasedActivityTagger",
    "vocabulary_from_config",
]
