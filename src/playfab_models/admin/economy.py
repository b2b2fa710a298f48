"""Virtual currencies, player inventories, grants, revocations and
purchase disputes."""

from __future__ import annotations

from typing import Annotated, ClassVar

from playfab_models.admin.error_codes import GenericErrorCodes
from playfab_models.wire import (
    Boolean,
    Integer,
    String,
    Timestamp,
    Unordered,
    WireEnum,
    WireModel,
)


class ResolutionOutcome(WireEnum):
    REVOKE = "Revoke"
    REINSTATE = "Reinstate"
    MANUAL = "Manual"


# ---------------------------------------------------------------------------
# Virtual currency
# ---------------------------------------------------------------------------


class VirtualCurrencyData(WireModel):
    currency_code: String
    """Two-letter code, unique within the title."""

    display_name: String | None = None
    initial_deposit: Integer | None = None
    recharge_max: Integer | None = None
    recharge_rate: Integer | None = None
    """Units regained per day, up to ``recharge_max``."""


class VirtualCurrencyRechargeTime(WireModel):
    recharge_max: Integer | None = None
    recharge_time: Timestamp | None = None
    seconds_to_recharge: Integer | None = None


class AddVirtualCurrencyTypesRequest(WireModel):
    virtual_currencies: list[VirtualCurrencyData]


class RemoveVirtualCurrencyTypesRequest(WireModel):
    virtual_currencies: list[VirtualCurrencyData]


class ListVirtualCurrencyTypesRequest(WireModel):
    pass


class ListVirtualCurrencyTypesResult(WireModel):
    virtual_currencies: Annotated[list[VirtualCurrencyData], Unordered()] | None = None


class AddUserVirtualCurrencyRequest(WireModel):
    amount: Integer
    play_fab_id: String
    virtual_currency: String


class SubtractUserVirtualCurrencyRequest(WireModel):
    amount: Integer
    play_fab_id: String
    virtual_currency: String


class ModifyUserVirtualCurrencyResult(WireModel):
    balance: Integer | None = None
    balance_change: Integer | None = None
    play_fab_id: String | None = None
    virtual_currency: String | None = None


# ---------------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------------


class ItemInstance(WireModel):
    """One item in a player's inventory.  Sorts by ``item_instance_id``."""

    sort_field: ClassVar[str | None] = "item_instance_id"

    annotation: String | None = None
    bundle_contents: list[String] | None = None
    bundle_parent: String | None = None
    catalog_version: String | None = None
    custom_data: dict[str, String] | None = None
    display_name: String | None = None
    expiration: Timestamp | None = None
    item_class: String | None = None
    item_id: String | None = None
    item_instance_id: String | None = None
    purchase_date: Timestamp | None = None
    remaining_uses: Integer | None = None
    unit_currency: String | None = None
    unit_price: Integer | None = None
    uses_incremented_by: Integer | None = None


class GetUserInventoryRequest(WireModel):
    play_fab_id: String


class GetUserInventoryResult(WireModel):
    inventory: Annotated[list[ItemInstance], Unordered(key="item_instance_id")] | None = None
    play_fab_id: String | None = None
    virtual_currency: dict[str, Integer] | None = None
    virtual_currency_recharge_times: dict[str, VirtualCurrencyRechargeTime] | None = None


class ItemGrant(WireModel):
    annotation: String | None = None
    character_id: String | None = None
    data: dict[str, String | None] | None = None
    item_id: String
    keys_to_remove: list[String] | None = None
    play_fab_id: String


class GrantedItemInstance(WireModel):
    """Result of one grant.  Sorts by ``item_instance_id``."""

    sort_field: ClassVar[str | None] = "item_instance_id"

    annotation: String | None = None
    bundle_contents: list[String] | None = None
    bundle_parent: String | None = None
    catalog_version: String | None = None
    character_id: String | None = None
    custom_data: dict[str, String] | None = None
    display_name: String | None = None
    expiration: Timestamp | None = None
    item_class: String | None = None
    item_id: String | None = None
    item_instance_id: String | None = None
    play_fab_id: String | None = None
    purchase_date: Timestamp | None = None
    remaining_uses: Integer | None = None
    result: Boolean | None = None
    """Whether this grant succeeded."""

    unit_currency: String | None = None
    unit_price: Integer | None = None
    uses_incremented_by: Integer | None = None


class GrantItemsToUsersRequest(WireModel):
    catalog_version: String | None = None
    item_grants: Annotated[list[ItemGrant], Unordered()]


class GrantItemsToUsersResult(WireModel):
    item_grant_results: list[GrantedItemInstance] | None = None


class RevokeInventoryItem(WireModel):
    character_id: String | None = None
    item_instance_id: String
    play_fab_id: String


class RevokeInventoryItemRequest(WireModel):
    character_id: String | None = None
    item_instance_id: String
    play_fab_id: String


class RevokeInventoryResult(WireModel):
    pass


class RevokeInventoryItemsRequest(WireModel):
    items: list[RevokeInventoryItem]


class RevokeItemError(WireModel):
    error: GenericErrorCodes | None = None
    item: RevokeInventoryItem | None = None


class RevokeInventoryItemsResult(WireModel):
    errors: list[RevokeItemError] | None = None
    """One entry per item that could not be revoked."""


# ---------------------------------------------------------------------------
# Purchases
# ---------------------------------------------------------------------------


class RefundPurchaseRequest(WireModel):
    order_id: String
    play_fab_id: String
    reason: String | None = None


class RefundPurchaseResponse(WireModel):
    purchase_status: String | None = None


class ResolvePurchaseDisputeRequest(WireModel):
    order_id: String
    outcome: ResolutionOutcome
    play_fab_id: String
    reason: String | None = None


class ResolvePurchaseDisputeResponse(WireModel):
    purchase_status: String | None = None
