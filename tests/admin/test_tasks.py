"""Tests for scheduled tasks and their type-routed parameters."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from playfab_models.admin.common import NameIdentifier
from playfab_models.admin.tasks import (
    TASK_PARAMETERS,
    ActionsOnPlayersInSegmentTaskParameter,
    CloudScriptTaskParameter,
    GetTaskInstancesResult,
    GetTasksResult,
    ScheduledTask,
    ScheduledTaskType,
    TaskInstanceBasicSummary,
    TaskInstanceStatus,
    UpdateTaskRequest,
)
from playfab_models.wire import (
    DecodeError,
    MalformedEnumValue,
    OpaquePayload,
    TypeMismatch,
    UnknownDiscriminator,
    decode,
    encode,
    try_decode,
)


# =====================================================================
# Helpers
# =====================================================================

def _cloud_script_task() -> dict:
    return {
        "TaskId": "T1",
        "Name": "nightly-grant",
        "IsActive": True,
        "Schedule": "0 3 * * *",
        "NextRunTime": "2024-06-02T03:00:00.000Z",
        "Type": "CloudScript",
        "Parameter": {"FunctionName": "grantAll", "Argument": {"amount": 5, "items": ["a"]}},
    }


def _segment_task() -> dict:
    return {
        "TaskId": "T2",
        "Name": "ban-cheaters",
        "Type": "ActionsOnPlayerSegment",
        "Parameter": {"ActionId": "A1", "SegmentId": "S1"},
    }


def _future_task() -> dict:
    return {
        "TaskId": "T3",
        "Name": "webhook",
        "Type": "InsightsScheduledScaling",
        "Parameter": {"Url": "https://example.invalid/hook", "Retries": 3},
    }


# =====================================================================
# Known task types
# =====================================================================

class TestKnownTaskTypes:
    def test_cloud_script_parameter(self):
        task = decode(ScheduledTask, _cloud_script_task())
        assert task.type is ScheduledTaskType.CLOUD_SCRIPT
        assert isinstance(task.parameter, CloudScriptTaskParameter)
        assert task.parameter.function_name == "grantAll"
        assert task.parameter.argument == {"amount": 5, "items": ["a"]}

    def test_segment_parameter(self):
        task = decode(ScheduledTask, _segment_task())
        assert task.parameter == ActionsOnPlayersInSegmentTaskParameter(
            action_id="A1", segment_id="S1"
        )

    @pytest.mark.parametrize("factory", [_cloud_script_task, _segment_task])
    def test_round_trip(self, factory):
        wire = factory()
        assert encode(decode(ScheduledTask, wire)) == wire

    def test_typed_parameter(self):
        task = decode(ScheduledTask, _segment_task())
        assert task.typed_parameter() is task.parameter

    def test_segment_parameter_shape_checked(self):
        wire = _segment_task()
        del wire["Parameter"]["SegmentId"]
        with pytest.raises(DecodeError) as exc_info:
            decode(ScheduledTask, wire)
        assert exc_info.value.path.startswith("ScheduledTask.Parameter")

    def test_list_of_tasks(self):
        result = decode(GetTasksResult, {"Tasks": [_cloud_script_task(), _segment_task()]})
        assert [type(t.parameter) for t in result.tasks] == [
            CloudScriptTaskParameter,
            ActionsOnPlayersInSegmentTaskParameter,
        ]


# =====================================================================
# Unknown task types
# =====================================================================

class TestUnknownTaskType:
    def test_decode_succeeds_with_opaque_parameter(self):
        task = decode(ScheduledTask, _future_task())
        assert task.type.is_unknown
        assert isinstance(task.parameter, OpaquePayload)

    def test_reencodes_exactly(self):
        wire = _future_task()
        assert encode(decode(ScheduledTask, wire)) == wire

    def test_typed_access_raises(self):
        task = decode(ScheduledTask, _future_task())
        with pytest.raises(UnknownDiscriminator):
            task.typed_parameter()

    def test_strict_decode_fails(self):
        with pytest.raises(UnknownDiscriminator) as exc_info:
            decode(ScheduledTask, _future_task(), strict_variants=True)
        assert exc_info.value.path == "ScheduledTask.Type"

    def test_known_types_pass_strict_decode(self):
        task = decode(ScheduledTask, _cloud_script_task(), strict_variants=True)
        assert isinstance(task.parameter, CloudScriptTaskParameter)

    def test_malformed_type(self):
        wire = _segment_task()
        wire["Type"] = ["ActionsOnPlayerSegment"]
        with pytest.raises(MalformedEnumValue) as exc_info:
            decode(ScheduledTask, wire)
        assert exc_info.value.path == "ScheduledTask.Type"
        assert exc_info.value.actual == "array"


# =====================================================================
# Update requests & summaries
# =====================================================================

class TestUpdateTaskRequest:
    def test_encode(self):
        request = UpdateTaskRequest(
            identifier=NameIdentifier(name="nightly-grant"),
            is_active=False,
            name="nightly-grant",
            type=ScheduledTaskType.CLOUD_SCRIPT,
            parameter=CloudScriptTaskParameter(function_name="grantSome"),
        )
        assert encode(request) == {
            "Identifier": {"Name": "nightly-grant"},
            "IsActive": False,
            "Name": "nightly-grant",
            "Type": "CloudScript",
            "Parameter": {"FunctionName": "grantSome"},
        }

    def test_parameter_must_match_type(self):
        with pytest.raises(ValidationError):
            UpdateTaskRequest(
                is_active=True,
                name="n",
                type=ScheduledTaskType.CLOUD_SCRIPT,
                parameter=ActionsOnPlayersInSegmentTaskParameter(action_id="A", segment_id="S"),
            )

    def test_type_required(self):
        with pytest.raises(DecodeError):
            decode(UpdateTaskRequest, {"IsActive": True, "Name": "n"})


class TestTaskInstanceSummary:
    def test_unknown_status_kept(self):
        wire = {"TaskInstanceId": "I1", "Status": "Throttled", "Type": "CloudScript"}
        summary = decode(TaskInstanceBasicSummary, wire)
        assert summary.status.is_unknown
        assert summary.type is ScheduledTaskType.CLOUD_SCRIPT
        assert encode(summary) == wire

    def test_known_status(self):
        summary = decode(TaskInstanceBasicSummary, {"Status": "InProgress"})
        assert summary.status is TaskInstanceStatus.IN_PROGRESS

    def test_future_type_passes_strict_decode(self):
        # A summary carries no parameter, so its Type routes nothing.
        result = try_decode(
            GetTaskInstancesResult,
            {"Summaries": [{"Type": "FutureType"}]},
            strict_variants=True,
        )
        assert result.ok
        assert result.value.summaries[0].type.is_unknown

    def test_non_string_type_is_type_mismatch(self):
        with pytest.raises(TypeMismatch) as exc_info:
            decode(TaskInstanceBasicSummary, {"Type": 5})
        err = exc_info.value
        assert not isinstance(err, MalformedEnumValue)
        assert err.path == "TaskInstanceBasicSummary.Type"
        assert err.expected == "ScheduledTaskType"


class TestTaskParameterTable:
    def test_every_task_type_has_a_shape(self):
        assert set(TASK_PARAMETERS.symbols()) == set(ScheduledTaskType)

    def test_shapes(self):
        assert TASK_PARAMETERS.shape_for("CloudScript") is CloudScriptTaskParameter
        assert (
            TASK_PARAMETERS.shape_for(ScheduledTaskType.ACTIONS_ON_PLAYER_SEGMENT)
            is ActionsOnPlayersInSegmentTaskParameter
        )
