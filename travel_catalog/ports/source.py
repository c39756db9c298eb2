"""Package source port - Where raw package records come from.

The engine never fetches anything itself. A source hands over one page
of raw records for a ``limit``/``status`` request, mirroring the
backend's paginated "list packages" call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import PackagePage


class PackageSourcePort(Protocol):
    """Port for listing raw package records.

    Implementations:
    - adapters/source/memory.py (InMemoryPackageSource)
    - adapters/source/json_file.py (JsonFilePackageSource)
    """

    def fetch(
        self,
        limit: int,
        status: Optional[str] = None,
        **params: Any,
    ) -> PackagePage:
        """Fetch one page of raw package records.

        Args:
            limit: Maximum number of records to return.
            status: Publication status filter (e.g. "published").
            **params: Extra request parameters (e.g. page).

        Returns:
            PackagePage with the raw records and pagination metadata.

        Raises:
            PackageSourceError: If the source cannot deliver records.
        """
        ...
