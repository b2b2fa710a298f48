"""Player statistic definitions and their versions."""

from __future__ import annotations

from playfab_models.wire import Integer, String, Timestamp, WireEnum, WireModel


class StatisticAggregationMethod(WireEnum):
    LAST = "Last"
    MIN = "Min"
    MAX = "Max"
    SUM = "Sum"


class StatisticResetIntervalOption(WireEnum):
    NEVER = "Never"
    HOUR = "Hour"
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"


class StatisticVersionStatus(WireEnum):
    ACTIVE = "Active"
    SNAPSHOT_PENDING = "SnapshotPending"
    SNAPSHOT = "Snapshot"
    ARCHIVAL_PENDING = "ArchivalPending"
    ARCHIVED = "Archived"


class StatisticVersionArchivalStatus(WireEnum):
    NOT_SCHEDULED = "NotScheduled"
    SCHEDULED = "Scheduled"
    QUEUED = "Queued"
    IN_PROGRESS = "InProgress"
    COMPLETE = "Complete"


class PlayerStatisticDefinition(WireModel):
    aggregation_method: StatisticAggregationMethod | None = None
    current_version: Integer | None = None
    statistic_name: String | None = None
    version_change_interval: StatisticResetIntervalOption | None = None
    """How often the statistic resets to a new version."""


class PlayerStatisticVersion(WireModel):
    activation_time: Timestamp | None = None
    archive_download_url: String | None = None
    deactivation_time: Timestamp | None = None
    scheduled_activation_time: Timestamp | None = None
    scheduled_deactivation_time: Timestamp | None = None
    statistic_name: String | None = None
    status: StatisticVersionStatus | None = None
    version: Integer | None = None


class CreatePlayerStatisticDefinitionRequest(WireModel):
    aggregation_method: StatisticAggregationMethod | None = None
    statistic_name: String
    version_change_interval: StatisticResetIntervalOption | None = None


class CreatePlayerStatisticDefinitionResult(WireModel):
    statistic: PlayerStatisticDefinition | None = None


class UpdatePlayerStatisticDefinitionRequest(WireModel):
    aggregation_method: StatisticAggregationMethod | None = None
    statistic_name: String
    version_change_interval: StatisticResetIntervalOption | None = None


class UpdatePlayerStatisticDefinitionResult(WireModel):
    statistic: PlayerStatisticDefinition | None = None


class GetPlayerStatisticDefinitionsRequest(WireModel):
    pass


class GetPlayerStatisticDefinitionsResult(WireModel):
    statistics: list[PlayerStatisticDefinition] | None = None


class GetPlayerStatisticVersionsRequest(WireModel):
    statistic_name: String | None = None


class GetPlayerStatisticVersionsResult(WireModel):
    statistic_versions: list[PlayerStatisticVersion] | None = None


class IncrementPlayerStatisticVersionRequest(WireModel):
    statistic_name: String | None = None


class IncrementPlayerStatisticVersionResult(WireModel):
    statistic_version: PlayerStatisticVersion | None = None


class ResetCharacterStatisticsRequest(WireModel):
    character_id: String
    play_fab_id: String


class ResetCharacterStatisticsResult(WireModel):
    pass


class ResetUserStatisticsRequest(WireModel):
    play_fab_id: String


class ResetUserStatisticsResult(WireModel):
    pass
