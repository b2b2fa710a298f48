"""Custom game server builds and the matchmaker."""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from playfab_models.admin.geo import Region
from playfab_models.wire import (
    Boolean,
    Integer,
    String,
    Timestamp,
    Unordered,
    WireEnum,
    WireModel,
)


class GameBuildStatus(WireEnum):
    AVAILABLE = "Available"
    VALIDATING = "Validating"
    INVALID_BUILD_PACKAGE = "InvalidBuildPackage"
    PROCESSING = "Processing"
    FAILED_TO_PROCESS = "FailedToProcess"


# ---------------------------------------------------------------------------
# Builds
# ---------------------------------------------------------------------------


class AddServerBuildRequest(WireModel):
    active_regions: list[Region] | None = None
    build_id: String
    command_line_template: String | None = None
    """Appended to the executable path when a game server starts."""

    comment: String | None = None
    executable_path: String | None = None
    max_games_per_host: Integer | None = None
    min_free_game_slots: Integer | None = None


class AddServerBuildResult(WireModel):
    active_regions: list[Region] | None = None
    build_id: String | None = None
    command_line_template: String | None = None
    comment: String | None = None
    executable_path: String | None = None
    max_games_per_host: Integer | None = None
    min_free_game_slots: Integer | None = None
    status: GameBuildStatus | None = None
    timestamp: Timestamp | None = None
    title_id: String | None = None


class GetServerBuildInfoRequest(WireModel):
    build_id: String


class GetServerBuildInfoResult(WireModel):
    """A server build.  Sorts by ``build_id``."""

    sort_field: ClassVar[str | None] = "build_id"

    active_regions: Annotated[list[Region], Unordered()] | None = None
    build_id: String | None = None
    comment: String | None = None
    error_message: String | None = None
    max_games_per_host: Integer | None = None
    min_free_game_slots: Integer | None = None
    status: GameBuildStatus | None = None
    timestamp: Timestamp | None = None
    title_id: String | None = None


class GetServerBuildUploadURLRequest(WireModel):
    build_id: String


class GetServerBuildUploadURLResult(WireModel):
    url: String | None = Field(default=None, alias="URL")


class ListBuildsRequest(WireModel):
    pass


class ListBuildsResult(WireModel):
    builds: Annotated[list[GetServerBuildInfoResult], Unordered(key="build_id")] | None = None


class ModifyServerBuildRequest(WireModel):
    active_regions: list[Region] | None = None
    build_id: String
    command_line_template: String | None = None
    comment: String | None = None
    executable_path: String | None = None
    max_games_per_host: Integer | None = None
    min_free_game_slots: Integer | None = None
    timestamp: Timestamp | None = None
    """New creation time for the build."""


class ModifyServerBuildResult(WireModel):
    active_regions: list[Region] | None = None
    build_id: String | None = None
    command_line_template: String | None = None
    comment: String | None = None
    executable_path: String | None = None
    max_games_per_host: Integer | None = None
    min_free_game_slots: Integer | None = None
    status: GameBuildStatus | None = None
    timestamp: Timestamp | None = None
    title_id: String | None = None


class RemoveServerBuildRequest(WireModel):
    build_id: String


class RemoveServerBuildResult(WireModel):
    pass


# ---------------------------------------------------------------------------
# Matchmaker
# ---------------------------------------------------------------------------


class GameModeInfo(WireModel):
    gamemode: String
    max_player_count: Integer
    min_player_count: Integer
    start_open: Boolean | None = None
    """Whether players may join after the game has started."""


class GetMatchmakerGameInfoRequest(WireModel):
    lobby_id: String


class GetMatchmakerGameInfoResult(WireModel):
    build_version: String | None = None
    end_time: Timestamp | None = None
    lobby_id: String | None = None
    mode: String | None = None
    players: Annotated[list[String], Unordered()] | None = None
    region: Region | None = None
    server_address: String | None = None
    server_port: Integer | None = None
    start_time: Timestamp | None = None
    title_id: String | None = None


class GetMatchmakerGameModesRequest(WireModel):
    build_version: String


class GetMatchmakerGameModesResult(WireModel):
    game_modes: list[GameModeInfo] | None = None


class ModifyMatchmakerGameModesRequest(WireModel):
    build_version: String
    game_modes: list[GameModeInfo]


class ModifyMatchmakerGameModesResult(WireModel):
    pass
