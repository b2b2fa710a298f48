"""Player bans."""

from __future__ import annotations

from pydantic import Field

from playfab_models.wire import Boolean, Integer, String, Timestamp, WireModel


class BanInfo(WireModel):
    active: Boolean | None = None
    ban_id: String | None = None
    created: Timestamp | None = None
    expires: Timestamp | None = None
    """Absent for a permanent ban."""

    ip_address: String | None = Field(default=None, alias="IPAddress")
    mac_address: String | None = Field(default=None, alias="MACAddress")
    play_fab_id: String | None = None
    reason: String | None = None


class BanRequest(WireModel):
    duration_in_hours: Integer | None = None
    """Absent for a permanent ban."""

    ip_address: String | None = Field(default=None, alias="IPAddress")
    mac_address: String | None = Field(default=None, alias="MACAddress")
    play_fab_id: String
    reason: String | None = None


class BanUsersRequest(WireModel):
    bans: list[BanRequest]


class BanUsersResult(WireModel):
    ban_data: list[BanInfo] | None = None


class GetUserBansRequest(WireModel):
    play_fab_id: String


class GetUserBansResult(WireModel):
    ban_data: list[BanInfo] | None = None


class RevokeAllBansForUserRequest(WireModel):
    play_fab_id: String


class RevokeAllBansForUserResult(WireModel):
    ban_data: list[BanInfo] | None = None


class RevokeBansRequest(WireModel):
    ban_ids: list[String]


class RevokeBansResult(WireModel):
    ban_data: list[BanInfo] | None = None


class UpdateBanRequest(WireModel):
    """Changes one ban; every field but ``ban_id`` is left as is if absent."""

    active: Boolean | None = None
    ban_id: String
    expires: Timestamp | None = None
    ip_address: String | None = Field(default=None, alias="IPAddress")
    mac_address: String | None = Field(default=None, alias="MACAddress")
    permanent: Boolean | None = None
    reason: String | None = None


class UpdateBansRequest(WireModel):
    bans: list[UpdateBanRequest]


class UpdateBansResult(WireModel):
    ban_data: list[BanInfo] | None = None
