"""Tests for the catalog data layer: seed catalog, repository, CMS ingestion."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import pytest

from interiora.data.cms import catalog_from_cms_records, cms_record_to_item
from interiora.data.repository import CatalogRepository
from interiora.data.seed import SEED_CATALOG
from interiora.exceptions import CatalogError
from interiora.models.catalog import (
    AddOnItem,
    ServiceItem,
    SingleLineItem,
    WoodworkItem,
)
from interiora.models.enums import HomeSizeClass, ItemKind, QualityTier

if TYPE_CHECKING:
    from pathlib import Path

# ---------------------------------------------------------------------------
# Seed data integrity
# ---------------------------------------------------------------------------


class TestSeedCatalog:
    def test_ids_unique(self) -> None:
        ids = [item.id for item in SEED_CATALOG]
        assert len(ids) == len(set(ids)), "Duplicate seed ids found"

    def test_covers_every_kind(self) -> None:
        kinds = {item.kind for item in SEED_CATALOG}
        assert kinds == set(ItemKind)

    def test_woodwork_has_category_and_rate(self) -> None:
        for item in SEED_CATALOG:
            if isinstance(item, WoodworkItem):
                assert item.category
                assert item.price_per_sqft.premium > 0

    def test_add_ons_have_pricing_rows(self) -> None:
        for item in SEED_CATALOG:
            if isinstance(item, AddOnItem):
                assert item.addon_pricing


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class TestCatalogRepository:
    def test_get_by_id(self) -> None:
        repo = CatalogRepository(SEED_CATALOG)
        item = repo.get("wardrobe")
        assert item is not None
        assert item.name == "Wardrobe"

    def test_get_missing_returns_none(self) -> None:
        assert CatalogRepository(SEED_CATALOG).get("nope") is None

    def test_len_and_contains(self) -> None:
        repo = CatalogRepository(SEED_CATALOG)
        assert len(repo) == len(SEED_CATALOG)
        assert "electrical" in repo
        assert "nope" not in repo

    def test_duplicate_id_first_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        first = WoodworkItem(id="dup", name="First")
        second = WoodworkItem(id="dup", name="Second")
        with caplog.at_level(logging.WARNING):
            repo = CatalogRepository([first, second])
        assert len(repo) == 1
        assert repo.get("dup") == first
        assert "Duplicate catalog id 'dup'" in caplog.text

    def test_items_is_a_copy(self) -> None:
        repo = CatalogRepository(SEED_CATALOG)
        repo.items.clear()
        assert len(repo.items) == len(SEED_CATALOG)

    def test_from_json_file_bare_list(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_woodwork_record()]), encoding="utf-8")
        repo = CatalogRepository.from_json_file(path)
        assert "tv-unit" in repo

    def test_from_json_file_envelope(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps({"success": True, "data": [_woodwork_record()]}), encoding="utf-8"
        )
        assert len(CatalogRepository.from_json_file(path)) == 1

    def test_from_json_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Could not read catalog file"):
            CatalogRepository.from_json_file(tmp_path / "missing.json")

    def test_from_json_file_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            CatalogRepository.from_json_file(path)

    def test_typed_snapshot_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "snapshot.json"
        path.write_text(CatalogRepository(SEED_CATALOG).to_json(), encoding="utf-8")
        repo = CatalogRepository.from_json_file(path)
        assert repo.items == SEED_CATALOG

    def test_typed_snapshot_in_envelope(self, tmp_path: Path) -> None:
        path = tmp_path / "snapshot.json"
        records = [{"kind": "Services", "id": "electrical", "name": "Electrical"}]
        path.write_text(json.dumps({"data": records}), encoding="utf-8")
        repo = CatalogRepository.from_json_file(path)
        assert isinstance(repo.get("electrical"), ServiceItem)

    def test_invalid_typed_snapshot(self, tmp_path: Path) -> None:
        path = tmp_path / "snapshot.json"
        records = [{"kind": "Plumbing", "id": "p", "name": "P"}]
        path.write_text(json.dumps(records), encoding="utf-8")
        with pytest.raises(CatalogError, match="Invalid catalog snapshot"):
            CatalogRepository.from_json_file(path)


# ---------------------------------------------------------------------------
# CMS records
# ---------------------------------------------------------------------------


def _woodwork_record() -> dict[str, Any]:
    return {
        "id": "tv-unit",
        "name": "Grand TV Unit",
        "category": {"name": "Living Room", "type": {"name": "Woodwork"}},
        "premiumPricePerSqFt": 1500,
        "luxuryPricePerSqFt": 2200,
    }


class TestCmsRecordToItem:
    def test_woodwork_from_category_type(self) -> None:
        item = cms_record_to_item(_woodwork_record())
        assert isinstance(item, WoodworkItem)
        assert item.category == "Living Room"
        assert item.price_per_sqft.rate_for(QualityTier.PREMIUM) == 1500.0
        assert item.price_per_sqft.rate_for(QualityTier.LUXURY) == 2200.0

    def test_single_line_from_top_level_type(self) -> None:
        item = cms_record_to_item(
            {
                "_id": "65f0c1",
                "name": "False Ceiling",
                "type": {"name": "Single Line Items"},
                "premiumPricePerSqFt": "150",
            }
        )
        assert isinstance(item, SingleLineItem)
        assert item.id == "65f0c1"
        assert item.category == "Single Line Items"
        assert item.price_per_sqft.premium == 150.0

    def test_add_on_rows(self) -> None:
        item = cms_record_to_item(
            {
                "id": "lock",
                "name": "Smart Lock",
                "type": {"name": "Add Ons"},
                "addonPricing": [
                    {"roomType": "BHK_2", "premiumPrice": 5000, "luxuryPrice": 8000},
                    {"roomType": "BHK_3", "premiumPrice": 6000, "luxuryPrice": 9000},
                ],
            }
        )
        assert isinstance(item, AddOnItem)
        assert [row.home_size_class for row in item.addon_pricing] == [
            HomeSizeClass.TWO_BHK,
            HomeSizeClass.THREE_BHK,
        ]

    def test_addon_pricing_wins_over_type(self) -> None:
        item = cms_record_to_item(
            {
                "id": "x",
                "name": "X",
                "type": {"name": "Woodwork"},
                "addonPricing": [{"roomType": "BHK_2", "premiumPrice": 1, "luxuryPrice": 2}],
            }
        )
        assert isinstance(item, AddOnItem)

    def test_service_with_base_price(self) -> None:
        item = cms_record_to_item(
            {
                "id": "sofa",
                "name": "Sofa Set",
                "type": {"name": "Services"},
                "basePrice": 85000,
                "description": "Premium sofa set",
            }
        )
        assert isinstance(item, ServiceItem)
        assert item.base_price == 85_000.0
        assert item.description == "Premium sofa set"

    def test_service_pricing_matrix(self) -> None:
        item = cms_record_to_item(
            {
                "id": "paint",
                "name": "Painting",
                "type": {"name": "Service"},
                "pricingMatrix": [
                    {"roomType": "BHK_2", "qualityTier": "luxury", "price": 140000},
                ],
            }
        )
        assert isinstance(item, ServiceItem)
        assert item.matrix_price(HomeSizeClass.TWO_BHK, QualityTier.LUXURY) == 140_000.0

    def test_unknown_type_prices_as_woodwork(self) -> None:
        item = cms_record_to_item({"id": "m", "name": "Misc"})
        assert isinstance(item, WoodworkItem)
        assert item.category == "Miscellaneous"

    def test_missing_id_rejected(self) -> None:
        assert cms_record_to_item({"name": "No Id"}) is None

    def test_missing_name_rejected(self) -> None:
        assert cms_record_to_item({"id": "x"}) is None

    def test_non_dict_rejected(self) -> None:
        assert cms_record_to_item("not a record") is None

    def test_bad_addon_row_skipped_item_kept(self, caplog: pytest.LogCaptureFixture) -> None:
        record = {
            "id": "smart-lock",
            "name": "Smart Door Lock",
            "addonPricing": [
                {"roomType": "BHK_2", "premiumPrice": 5000, "luxuryPrice": 8000},
                {"roomType": "BHK_5", "premiumPrice": 9000, "luxuryPrice": 12000},
            ],
        }
        with caplog.at_level(logging.WARNING):
            item = cms_record_to_item(record)
        assert isinstance(item, AddOnItem)
        assert [row.home_size_class for row in item.addon_pricing] == [HomeSizeClass.TWO_BHK]
        assert "Skipping pricing row 1 of CMS record 'smart-lock'" in caplog.text

    def test_non_dict_addon_row_skipped(self) -> None:
        record = {
            "id": "x",
            "name": "X",
            "addonPricing": ["garbage", {"roomType": "BHK_3", "premiumPrice": 1}],
        }
        item = cms_record_to_item(record)
        assert isinstance(item, AddOnItem)
        assert len(item.addon_pricing) == 1

    def test_bad_matrix_row_skipped_item_kept(self, caplog: pytest.LogCaptureFixture) -> None:
        record = {
            "id": "paint",
            "name": "Painting",
            "type": {"name": "Services"},
            "premiumPricePerSqFt": 45,
            "pricingMatrix": [
                {"roomType": "BHK_2", "qualityTier": "Luxury", "price": 140000},
                {"roomType": "BHK_3", "qualityTier": "Royal", "price": 999999},
            ],
        }
        with caplog.at_level(logging.WARNING):
            item = cms_record_to_item(record)
        assert isinstance(item, ServiceItem)
        assert len(item.pricing_matrix) == 1
        assert item.matrix_price(HomeSizeClass.TWO_BHK, QualityTier.LUXURY) == 140_000.0
        assert "Skipping pricing row 1 of CMS record 'paint'" in caplog.text

    def test_missing_prices_become_zero(self) -> None:
        item = cms_record_to_item(
            {"id": "w", "name": "W", "type": {"name": "Woodwork"}, "premiumPricePerSqFt": None}
        )
        assert isinstance(item, WoodworkItem)
        assert item.price_per_sqft.premium == 0.0


class TestCatalogFromCmsRecords:
    def test_skips_bad_records(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            items = catalog_from_cms_records([_woodwork_record(), {"name": "No Id"}])
        assert [item.id for item in items] == ["tv-unit"]
        assert "Skipping CMS record 1" in caplog.text

    def test_non_list_payload_raises(self) -> None:
        with pytest.raises(CatalogError, match="must be a list"):
            catalog_from_cms_records({"data": []})

    def test_empty_list(self) -> None:
        assert catalog_from_cms_records([]) == []
