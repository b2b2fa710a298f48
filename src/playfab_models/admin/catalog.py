"""Catalog, stores and random result tables."""

from __future__ import annotations

from typing import Annotated, ClassVar

from playfab_models.wire import (
    Boolean,
    Integer,
    String,
    Unordered,
    WireEnum,
    WireModel,
    WireValue,
)


class SourceType(WireEnum):
    ADMIN = "Admin"
    BACK_END = "BackEnd"
    GAME_CLIENT = "GameClient"
    GAME_SERVER = "GameServer"
    PARTNER = "Partner"


class ResultTableNodeType(WireEnum):
    ITEM_ID = "ItemId"
    TABLE_ID = "TableId"


# ---------------------------------------------------------------------------
# Catalog items
# ---------------------------------------------------------------------------


class CatalogItemBundleInfo(WireModel):
    bundled_items: Annotated[list[String], Unordered()] | None = None
    bundled_result_tables: Annotated[list[String], Unordered()] | None = None
    bundled_virtual_currencies: dict[str, Integer] | None = None


class CatalogItemConsumableInfo(WireModel):
    usage_count: Integer | None = None
    """Uses before the item instance is removed from the inventory."""

    usage_period: Integer | None = None
    """Seconds the item lasts after being granted."""

    usage_period_group: String | None = None


class CatalogItemContainerInfo(WireModel):
    item_contents: Annotated[list[String], Unordered()] | None = None
    key_item_id: String | None = None
    """Item needed to unlock the container; absent means no key is needed."""

    result_table_contents: Annotated[list[String], Unordered()] | None = None
    virtual_currency_contents: dict[str, Integer] | None = None


class CatalogItem(WireModel):
    """A purchasable item definition.  Sorts by ``item_id``."""

    sort_field: ClassVar[str | None] = "item_id"

    bundle: CatalogItemBundleInfo | None = None
    can_become_character: Boolean | None = None
    catalog_version: String | None = None
    consumable: CatalogItemConsumableInfo | None = None
    container: CatalogItemContainerInfo | None = None
    custom_data: String | None = None
    description: String | None = None
    display_name: String | None = None
    initial_limited_edition_count: Integer | None = None
    is_limited_edition: Boolean | None = None
    is_stackable: Boolean | None = None
    is_tradable: Boolean | None = None
    item_class: String | None = None
    item_id: String
    item_image_url: String | None = None
    real_currency_prices: dict[str, Integer] | None = None
    tags: Annotated[list[String], Unordered()] | None = None
    virtual_currency_prices: dict[str, Integer] | None = None


class GetCatalogItemsRequest(WireModel):
    catalog_version: String | None = None
    """Absent to use the default catalog."""


class GetCatalogItemsResult(WireModel):
    catalog: Annotated[list[CatalogItem], Unordered(key="item_id")] | None = None


class UpdateCatalogItemsRequest(WireModel):
    catalog: list[CatalogItem] | None = None
    catalog_version: String | None = None
    set_as_default_catalog: Boolean | None = None


class UpdateCatalogItemsResult(WireModel):
    pass


class CheckLimitedEditionItemAvailabilityRequest(WireModel):
    catalog_version: String | None = None
    item_id: String


class CheckLimitedEditionItemAvailabilityResult(WireModel):
    amount: Integer | None = None


class IncrementLimitedEditionItemAvailabilityRequest(WireModel):
    amount: Integer
    catalog_version: String | None = None
    item_id: String


class IncrementLimitedEditionItemAvailabilityResult(WireModel):
    pass


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


class StoreItem(WireModel):
    """An item offered by a store, with store-specific prices."""

    sort_field: ClassVar[str | None] = "item_id"

    custom_data: WireValue = None
    display_position: Integer | None = None
    item_id: String
    real_currency_prices: dict[str, Integer] | None = None
    virtual_currency_prices: dict[str, Integer] | None = None


class StoreMarketingModel(WireModel):
    description: String | None = None
    display_name: String | None = None
    metadata: WireValue = None


class GetStoreItemsRequest(WireModel):
    catalog_version: String | None = None
    store_id: String


class GetStoreItemsResult(WireModel):
    catalog_version: String | None = None
    marketing_data: StoreMarketingModel | None = None
    source: SourceType | None = None
    store: Annotated[list[StoreItem], Unordered(key="item_id")] | None = None
    store_id: String | None = None


class UpdateStoreItemsRequest(WireModel):
    catalog_version: String | None = None
    marketing_data: StoreMarketingModel | None = None
    store: list[StoreItem] | None = None
    store_id: String


class UpdateStoreItemsResult(WireModel):
    pass


class DeleteStoreRequest(WireModel):
    catalog_version: String | None = None
    store_id: String


class DeleteStoreResult(WireModel):
    pass


# ---------------------------------------------------------------------------
# Random result tables
# ---------------------------------------------------------------------------


class ResultTableNode(WireModel):
    result_item: String
    """An item id or a table id, depending on ``result_item_type``."""

    result_item_type: ResultTableNodeType
    weight: Integer


class RandomResultTable(WireModel):
    nodes: list[ResultTableNode]
    table_id: String


class RandomResultTableListing(WireModel):
    catalog_version: String | None = None
    nodes: list[ResultTableNode]
    table_id: String


class GetRandomResultTablesRequest(WireModel):
    catalog_version: String | None = None


class GetRandomResultTablesResult(WireModel):
    tables: dict[str, RandomResultTableListing] | None = None


class UpdateRandomResultTablesRequest(WireModel):
    catalog_version: String | None = None
    tables: list[RandomResultTable] | None = None


class UpdateRandomResultTablesResult(WireModel):
    pass
