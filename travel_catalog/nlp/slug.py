"""Slug normalization.

Example
-------
    >>> slugify("  Bali, Indonesia ")
    'bali-indonesia'
    >>> slugify("Kerala_Backwaters   Tour")
    'kerala-backwaters-tour'
    >>> slugify("!!!")
    ''
"""

import re
from typing import Any

_SEPARATORS = re.compile(r"[\s_]+")
_DISALLOWED = re.compile(r"[^a-z0-9-]+")
_REPEATED_HYPHENS = re.compile(r"-{2,}")


def slugify(value: Any = "") -> str:
    """Convert arbitrary text into a lowercase, URL-safe token.

    Parameters
    ----------
    value : Any
        Text to convert. ``None`` yields an empty slug; other non-string
        values are converted with ``str()``.

    Returns
    -------
    str
        Token made of ``[a-z0-9-]`` with no leading, trailing or repeated
        hyphens. ``slugify(slugify(x)) == slugify(x)`` for any ``x``.
    """
    if value is None:
        return ""

    text = str(value).lower().strip()
    text = _SEPARATORS.sub("-", text)
    text = _DISALLOWED.sub("", text)
    text = _REPEATED_HYPHENS.sub("-", text)
    return text.strip("-")
