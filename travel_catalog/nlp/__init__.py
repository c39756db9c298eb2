"""Rule-based text processing: slugs, destination classification, activity tags."""

from .activities import build_activity_text, extract_activities
from .destination import classify_destination, is_domestic, split_destination
from .slug import slugify

__all__ = [
    "slugify",
    "classify_destination",
    "is_domestic",
    "split_destination",
    "extract_activities",
    "build_activity_text",
]
