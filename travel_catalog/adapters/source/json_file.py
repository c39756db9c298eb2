"""JSON file package source.

Reads an exported "list packages" payload from disk. The payload is
either a bare list of records or the backend envelope::

    {"data": [...], "pagination": {...}}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

from ...config import CatalogConfig, get_config
from ...domain.errors import ConfigurationError, PackageSourceError
from ...domain.models import PackagePage
from .memory import paginate


@dataclass
class JsonFilePackageSource:
    """Package source backed by a JSON export.

    Implements PackageSourcePort. The file is read once and cached.

    Attributes:
        path: JSON file to read; defaults to ``config.data_file``
        config: Catalog configuration
    """

    path: Optional[Path] = None
    config: CatalogConfig = field(default_factory=lambda: get_config().catalog)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _records: Optional[List[Mapping[str, Any]]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is None:
            self.path = self.config.data_file
        if self.path is None:
            raise ConfigurationError(
                "No package data file configured",
                setting_name="TC_CATALOG_DATA_FILE",
                expected_type="path",
            )
        self.path = Path(self.path)

    def fetch(
        self,
        limit: int,
        status: Optional[str] = None,
        **params: Any,
    ) -> PackagePage:
        """Fetch one page of records from the JSON file.

        Raises:
            PackageSourceError: If the file cannot be read or decoded.
        """
        records = self._load_records()
        return paginate(records, limit, status, page=params.get("page", 1))

    def _load_records(self) -> List[Mapping[str, Any]]:
        if self._records is not None:
            return self._records

        assert self.path is not None
        self._logger.debug("Loading packages", extra={"path": str(self.path)})

        try:
            with self.path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise PackageSourceError(
                f"Failed to load packages from {self.path}",
                source=str(self.path),
                cause=e,
            )

        if isinstance(payload, Mapping):
            payload = payload.get("data")
        if not isinstance(payload, list):
            raise PackageSourceError(
                "Package payload must be a list or a {'data': [...]} envelope",
                source=str(self.path),
            )

        records = [r for r in payload if isinstance(r, Mapping)]
        skipped = len(payload) - len(records)
        if skipped:
            self._logger.warning(
                "Skipped non-object package records",
                extra={"skipped": skipped, "path": str(self.path)},
            )

        self._records = records
        self._logger.info(
            "Packages loaded",
            extra={"count": len(records), "path": str(self.path)},
        )
        return records

    def clear_cache(self) -> None:
        """Forget the cached file contents."""
        self._records = None
