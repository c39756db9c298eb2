"""Rule-based activity tagging for package text.

Every rule is evaluated independently, so a package can receive any
number of tags. Fields are joined with a visible delimiter before
matching so that a pattern never runs from the end of one field into
the start of the next.
"""

from typing import Any, Iterable, Sequence

from ..domain.vocabulary import DEFAULT_ACTIVITY_RULES, ActivityRule

FIELD_DELIMITER = " | "


def _texts(values: Any) -> list[str]:
    if isinstance(values, str):
        return [values]
    if not isinstance(values, (list, tuple)):
        return []
    return [v for v in values if isinstance(v, str)]


def build_activity_text(
    highlights: Iterable[str] = (),
    inclusions: Iterable[str] = (),
    description: str = "",
) -> str:
    """Join highlights, inclusions and description into one text blob."""
    parts = [*_texts(highlights), *_texts(inclusions)]
    parts.append(description if isinstance(description, str) else "")
    return FIELD_DELIMITER.join(parts)


def extract_activities(
    highlights: Iterable[str] = (),
    inclusions: Iterable[str] = (),
    description: str = "",
    rules: Sequence[ActivityRule] = DEFAULT_ACTIVITY_RULES,
) -> frozenset[str]:
    """Return the set of activity tags whose pattern matches the package text."""
    text = build_activity_text(highlights, inclusions, description)
    return frozenset(rule.label for rule in rules if rule.matches(text))
