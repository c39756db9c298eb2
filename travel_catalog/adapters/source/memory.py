"""In-memory package source.

Serves records from a list held in memory, applying the same
``status``/``limit``/``page`` contract as the backend listing.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ...domain.models import PackagePage


def paginate(
    records: Sequence[Mapping[str, Any]],
    limit: int,
    status: Optional[str] = None,
    page: int = 1,
) -> PackagePage:
    """Filter ``records`` by status and slice one page out of them.

    Records without a ``status`` key are treated as matching any status.
    """
    if status:
        records = [r for r in records if r.get("status", status) == status]

    limit = max(int(limit), 1)
    page = max(int(page), 1)
    total = len(records)
    start = (page - 1) * limit
    selected = tuple(records[start : start + limit])

    pagination = {
        "page": page,
        "limit": limit,
        "total": total,
        "pages": math.ceil(total / limit) if total else 0,
    }
    return PackagePage(records=selected, pagination=pagination)


@dataclass
class InMemoryPackageSource:
    """Package source over a list of raw records.

    Implements PackageSourcePort. Useful for tests and for callers that
    already hold a fetched payload.

    Attributes:
        records: Raw backend records, in source order
    """

    records: Sequence[Mapping[str, Any]] = field(default_factory=list)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def fetch(
        self,
        limit: int,
        status: Optional[str] = None,
        **params: Any,
    ) -> PackagePage:
        page = paginate(
            [r for r in self.records if isinstance(r, Mapping)],
            limit,
            status,
            page=params.get("page", 1),
        )
        self._logger.debug(
            "Records served from memory",
            extra={"count": len(page.records), "status": status},
        )
        return page
