"""Scheduled tasks -- definitions, instances and their variant parameters.

A task's ``Parameter`` is shaped by its ``Type``: a Cloud Script task
carries a :class:`CloudScriptTaskParameter`, a segment task an
:class:`ActionsOnPlayersInSegmentTaskParameter`.  The routing table is
:data:`TASK_PARAMETERS`; a task whose type this package does not know keeps
its parameter as an :class:`~playfab_models.wire.OpaquePayload`.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel

from playfab_models.admin.cloudscript import ExecuteCloudScriptResult
from playfab_models.admin.common import NameIdentifier
from playfab_models.wire import (
    Boolean,
    Double,
    Integer,
    OpaquePayload,
    String,
    Timestamp,
    VariantShapes,
    WireEnum,
    WireModel,
    WireValue,
    variant_field,
)


class ScheduledTaskType(WireEnum):
    CLOUD_SCRIPT = "CloudScript"
    ACTIONS_ON_PLAYER_SEGMENT = "ActionsOnPlayerSegment"


class TaskInstanceStatus(WireEnum):
    SUCCEEDED = "Succeeded"
    STARTING = "Starting"
    IN_PROGRESS = "InProgress"
    FAILED = "Failed"
    ABORTED = "Aborted"
    PENDING = "Pending"


# =====================================================================
# Parameters (the variant payloads)
# =====================================================================


class CloudScriptTaskParameter(WireModel):
    argument: WireValue = None
    """Argument passed to the Cloud Script function."""

    function_name: String | None = None


class ActionsOnPlayersInSegmentTaskParameter(WireModel):
    action_id: String
    segment_id: String


TASK_PARAMETERS: VariantShapes[ScheduledTaskType] = VariantShapes(
    ScheduledTaskType,
    {
        ScheduledTaskType.CLOUD_SCRIPT: CloudScriptTaskParameter,
        ScheduledTaskType.ACTIONS_ON_PLAYER_SEGMENT: ActionsOnPlayersInSegmentTaskParameter,
    },
    name="ScheduledTaskType",
)

TaskParameter = Union[
    CloudScriptTaskParameter,
    ActionsOnPlayersInSegmentTaskParameter,
    OpaquePayload,
]


class _RoutedTask(WireModel):
    """Shared accessor for models carrying a ``type`` / ``parameter`` pair."""

    def typed_parameter(self) -> BaseModel | None:
        """Return the parameter as the model its type routes to.

        Raises ``UnknownDiscriminator`` if the type is missing or unknown.
        """
        return TASK_PARAMETERS.resolve(self.type, self.parameter)  # type: ignore[attr-defined]


# =====================================================================
# Task definitions
# =====================================================================


class ScheduledTask(_RoutedTask):
    description: String | None = None
    is_active: Boolean | None = None
    last_run_time: Timestamp | None = None
    """UTC time of last run."""

    name: String | None = None
    next_run_time: Timestamp | None = None
    """UTC time of next run."""

    schedule: String | None = None
    """Cron expression for the run schedule (UTC)."""

    task_id: String | None = None
    type: ScheduledTaskType | None = None
    parameter: TaskParameter | None = None
    """Shaped by ``type``; see :data:`TASK_PARAMETERS`."""

    route_parameter = variant_field("parameter", "type", TASK_PARAMETERS)


class UpdateTaskRequest(_RoutedTask):
    description: String | None = None
    identifier: NameIdentifier | None = None
    """Name or id of the task to update."""

    is_active: Boolean
    name: String
    schedule: String | None = None
    type: ScheduledTaskType
    parameter: TaskParameter | None = None

    route_parameter = variant_field("parameter", "type", TASK_PARAMETERS)


class CreateActionsOnPlayerSegmentTaskRequest(WireModel):
    description: String | None = None
    is_active: Boolean
    name: String
    parameter: ActionsOnPlayersInSegmentTaskParameter
    schedule: String | None = None


class CreateCloudScriptTaskRequest(WireModel):
    description: String | None = None
    is_active: Boolean
    name: String
    parameter: CloudScriptTaskParameter
    schedule: String | None = None


class CreateTaskResult(WireModel):
    task_id: String | None = None


class DeleteTaskRequest(WireModel):
    identifier: NameIdentifier | None = None


class GetTasksRequest(WireModel):
    identifier: NameIdentifier | None = None
    """Absent to list every defined task."""


class GetTasksResult(WireModel):
    tasks: list[ScheduledTask] | None = None


class RunTaskRequest(WireModel):
    identifier: NameIdentifier | None = None


class RunTaskResult(WireModel):
    task_instance_id: String | None = None


# =====================================================================
# Task instances
# =====================================================================


class TaskInstanceBasicSummary(WireModel):
    completed_at: Timestamp | None = None
    estimated_seconds_remaining: Double | None = None
    percent_complete: Double | None = None
    scheduled_by_user_id: String | None = None
    started_at: Timestamp | None = None
    status: TaskInstanceStatus | None = None
    task_identifier: NameIdentifier | None = None
    task_instance_id: String | None = None
    type: ScheduledTaskType | None = None


class ActionsOnPlayersInSegmentTaskSummary(WireModel):
    completed_at: Timestamp | None = None
    error_message: String | None = None
    error_was_fatal: Boolean | None = None
    estimated_seconds_remaining: Double | None = None
    percent_complete: Double | None = None
    scheduled_by_user_id: String | None = None
    started_at: Timestamp | None = None
    status: TaskInstanceStatus | None = None
    task_identifier: NameIdentifier | None = None
    task_instance_id: String | None = None
    total_players_in_segment: Integer | None = None
    total_players_processed: Integer | None = None


class CloudScriptTaskSummary(WireModel):
    completed_at: Timestamp | None = None
    estimated_seconds_remaining: Double | None = None
    percent_complete: Double | None = None
    result: ExecuteCloudScriptResult | None = None
    scheduled_by_user_id: String | None = None
    started_at: Timestamp | None = None
    status: TaskInstanceStatus | None = None
    task_identifier: NameIdentifier | None = None
    task_instance_id: String | None = None


class AbortTaskInstanceRequest(WireModel):
    task_instance_id: String


class GetTaskInstanceRequest(WireModel):
    task_instance_id: String


class GetActionsOnPlayersInSegmentTaskInstanceResult(WireModel):
    parameter: ActionsOnPlayersInSegmentTaskParameter | None = None
    summary: ActionsOnPlayersInSegmentTaskSummary | None = None


class GetCloudScriptTaskInstanceResult(WireModel):
    parameter: CloudScriptTaskParameter | None = None
    summary: CloudScriptTaskSummary | None = None


class GetTaskInstancesRequest(WireModel):
    started_at_range_from: Timestamp | None = None
    started_at_range_to: Timestamp | None = None
    status_filter: TaskInstanceStatus | None = None
    task_identifier: NameIdentifier | None = None
    """Absent to return instances of every task."""


class GetTaskInstancesResult(WireModel):
    summaries: list[TaskInstanceBasicSummary] | None = None
