"""Tests for catalog, store, inventory and build ordering semantics."""

from __future__ import annotations

import pytest

from playfab_models.admin.catalog import (
    CatalogItem,
    GetCatalogItemsResult,
    GetStoreItemsResult,
    StoreItem,
)
from playfab_models.admin.economy import GetUserInventoryResult, ItemInstance
from playfab_models.admin.geo import Region
from playfab_models.admin.servers import GetServerBuildInfoResult, ListBuildsResult
from playfab_models.wire import MissingRequiredField, decode, encode


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _item(item_id: str, **extra) -> dict:
    return {"ItemId": item_id, **extra}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class TestCatalog:
    def test_catalog_order_not_significant(self):
        items = [_item("sword"), _item("shield"), _item("potion", IsStackable=True)]
        a = decode(GetCatalogItemsResult, {"Catalog": items})
        b = decode(GetCatalogItemsResult, {"Catalog": items[::-1]})
        assert a == b
        assert [i["ItemId"] for i in encode(b)["Catalog"]] == ["potion", "shield", "sword"]

    def test_catalog_contents_still_compared(self):
        a = decode(GetCatalogItemsResult, {"Catalog": [_item("sword", DisplayName="Sword")]})
        b = decode(GetCatalogItemsResult, {"Catalog": [_item("sword", DisplayName="Blade")]})
        assert a != b

    def test_duplicates_counted(self):
        a = decode(GetCatalogItemsResult, {"Catalog": [_item("a"), _item("a"), _item("b")]})
        b = decode(GetCatalogItemsResult, {"Catalog": [_item("a"), _item("b"), _item("b")]})
        assert a != b

    def test_tags_unordered(self):
        a = decode(CatalogItem, _item("sword", Tags=["melee", "rare"]))
        b = decode(CatalogItem, _item("sword", Tags=["rare", "melee"]))
        assert a == b

    def test_items_sort_by_id(self):
        items = [CatalogItem(item_id="sword"), CatalogItem(item_id="axe"), CatalogItem(item_id="bow")]
        assert [i.item_id for i in sorted(items)] == ["axe", "bow", "sword"]

    def test_decoded_catalog_sorts_by_id(self):
        result = decode(GetCatalogItemsResult, {"Catalog": [_item("b"), _item("a")]})
        assert [i.item_id for i in sorted(result.catalog)] == ["a", "b"]

    def test_item_id_required(self):
        with pytest.raises(MissingRequiredField) as exc_info:
            decode(GetCatalogItemsResult, {"Catalog": [_item("a"), {"DisplayName": "x"}]})
        assert exc_info.value.path == "GetCatalogItemsResult.Catalog[1].ItemId"


class TestStore:
    def test_store_order_not_significant(self):
        a = decode(GetStoreItemsResult, {"Store": [_item("a"), _item("b")], "StoreId": "s"})
        b = decode(GetStoreItemsResult, {"Store": [_item("b"), _item("a")], "StoreId": "s"})
        assert a == b

    def test_custom_data_is_raw(self):
        item = decode(StoreItem, _item("a", CustomData={"badge": [1, 2]}))
        assert item.custom_data == {"badge": [1, 2]}
        assert encode(item) == _item("a", CustomData={"badge": [1, 2]})


# ---------------------------------------------------------------------------
# Inventory & builds
# ---------------------------------------------------------------------------

class TestInventory:
    def test_missing_instance_id_sorts_first(self):
        items = [ItemInstance(item_instance_id="b"), ItemInstance(), ItemInstance(item_instance_id="a")]
        assert [i.item_instance_id for i in sorted(items)] == [None, "a", "b"]

    def test_inventory_order_not_significant(self):
        inventory = [{"ItemInstanceId": "i1", "ItemId": "sword"}, {"ItemInstanceId": "i2", "ItemId": "sword"}]
        a = decode(GetUserInventoryResult, {"Inventory": inventory, "PlayFabId": "P1"})
        b = decode(GetUserInventoryResult, {"Inventory": inventory[::-1], "PlayFabId": "P1"})
        assert a == b

    def test_virtual_currency_balances(self):
        result = decode(GetUserInventoryResult, {"VirtualCurrency": {"GD": 150}})
        assert result.virtual_currency == {"GD": 150}


class TestServerBuilds:
    def test_builds_sort_with_missing_id_first(self):
        builds = [GetServerBuildInfoResult(build_id="b2"), GetServerBuildInfoResult()]
        assert [b.build_id for b in sorted(builds)] == [None, "b2"]

    def test_builds_unordered(self):
        a = decode(ListBuildsResult, {"Builds": [{"BuildId": "1"}, {"BuildId": "2"}]})
        b = decode(ListBuildsResult, {"Builds": [{"BuildId": "2"}, {"BuildId": "1"}]})
        assert a == b

    def test_active_regions(self):
        a = decode(GetServerBuildInfoResult, {"BuildId": "1", "ActiveRegions": ["USEast", "Japan"]})
        b = decode(GetServerBuildInfoResult, {"BuildId": "1", "ActiveRegions": ["Japan", "USEast"]})
        assert a == b
        assert Region.US_EAST in a.active_regions
