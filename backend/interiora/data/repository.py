"""Catalog repository for looking up catalog items."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from interiora.exceptions import CatalogError
from interiora.models.catalog import CATALOG_ADAPTER

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from interiora.models.catalog import CatalogItem

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Repository over an immutable catalog snapshot.

    Wraps in-memory catalog items and indexes them by id. The first item
    wins when the snapshot repeats an id.
    """

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items: list[CatalogItem] = []
        self._by_id: dict[str, CatalogItem] = {}
        for item in items:
            if item.id in self._by_id:
                logger.warning("Duplicate catalog id '%s' ignored", item.id)
                continue
            self._by_id[item.id] = item
            self._items.append(item)

    @classmethod
    def from_cms_records(cls, records: Any) -> CatalogRepository:
        """Build a repository from raw CMS item records.

        Raises:
            CatalogError: If ``records`` is not a list of records.
        """
        from interiora.data.cms import catalog_from_cms_records

        return cls(catalog_from_cms_records(records))

    @classmethod
    def from_json_file(cls, path: Path) -> CatalogRepository:
        """Build a repository from a JSON catalog file.

        Accepts a typed snapshot written by ``to_json`` (records carry a
        ``kind``), or raw CMS item records, either as a bare list or in the
        CMS response envelope ``{"success": true, "data": [...]}``.

        Raises:
            CatalogError: If the file cannot be read or parsed.
        """
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            msg = f"Could not read catalog file '{path}': {exc}"
            raise CatalogError(msg) from exc

        if isinstance(payload, dict) and "data" in payload:
            payload = payload["data"]
        if _is_typed_snapshot(payload):
            try:
                return cls(CATALOG_ADAPTER.validate_python(payload))
            except ValidationError as exc:
                msg = f"Invalid catalog snapshot '{path}': {exc}"
                raise CatalogError(msg) from exc
        return cls.from_cms_records(payload)

    def to_json(self) -> str:
        """Serialize the snapshot in the typed form ``from_json_file`` reads."""
        return CATALOG_ADAPTER.dump_json(self._items, indent=2).decode("utf-8")

    @property
    def items(self) -> list[CatalogItem]:
        return list(self._items)

    def get(self, item_id: str) -> CatalogItem | None:
        """Look up an item by id. Returns None if it is not in the snapshot."""
        return self._by_id.get(item_id)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id


def _is_typed_snapshot(payload: Any) -> bool:
    return (
        isinstance(payload, list)
        and bool(payload)
        and all(isinstance(record, dict) and "kind" in record for record in payload)
    )
