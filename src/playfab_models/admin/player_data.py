"""Per-player custom and internal key/value data."""

from __future__ import annotations

from playfab_models.wire import Integer, String, Timestamp, WireEnum, WireModel


class UserDataPermission(WireEnum):
    PRIVATE = "Private"
    PUBLIC = "Public"


class UserDataRecord(WireModel):
    last_updated: Timestamp | None = None
    permission: UserDataPermission | None = None
    """Public data is visible to other players; private data only to the
    owner and the server."""

    value: String | None = None


class GetUserDataRequest(WireModel):
    if_changed_from_data_version: Integer | None = None
    """Return nothing if the data version has not changed since this one."""

    keys: list[String] | None = None
    play_fab_id: String


class GetUserDataResult(WireModel):
    data: dict[str, UserDataRecord] | None = None
    data_version: Integer | None = None
    play_fab_id: String | None = None


class UpdateUserDataRequest(WireModel):
    data: dict[str, String | None] | None = None
    """A key mapped to ``None`` removes that key."""

    keys_to_remove: list[String] | None = None
    """Keys to remove, for callers that cannot send null map values."""

    permission: UserDataPermission | None = None
    play_fab_id: String


class UpdateUserDataResult(WireModel):
    data_version: Integer | None = None


class UpdateUserInternalDataRequest(WireModel):
    data: dict[str, String | None] | None = None
    keys_to_remove: list[String] | None = None
    play_fab_id: String
