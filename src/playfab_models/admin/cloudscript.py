"""Cloud Script -- uploaded script revisions and execution results."""

from __future__ import annotations

from pydantic import Field

from playfab_models.wire import (
    Boolean,
    Double,
    Integer,
    String,
    Timestamp,
    WireModel,
    WireValue,
)


class CloudScriptFile(WireModel):
    file_contents: String
    filename: String


class CloudScriptVersionStatus(WireModel):
    latest_revision: Integer | None = None
    published_revision: Integer | None = None
    version: Integer | None = None


class LogStatement(WireModel):
    data: WireValue = None
    """Optional object accompanying the message as contextual information."""

    level: String | None = None
    message: String | None = None


class ScriptExecutionError(WireModel):
    error: String | None = None
    """Error code, such as CloudScriptNotFound, JavascriptException ..."""

    message: String | None = None
    stack_trace: String | None = None


class ExecuteCloudScriptResult(WireModel):
    api_requests_issued: Integer | None = Field(default=None, alias="APIRequestsIssued")
    error: ScriptExecutionError | None = None
    execution_time_seconds: Double | None = None
    function_name: String | None = None
    function_result: WireValue = None
    function_result_too_large: Boolean | None = None
    http_requests_issued: Integer | None = None
    logs: list[LogStatement] | None = None
    logs_too_large: Boolean | None = None
    memory_consumed_bytes: Integer | None = None
    processor_time_seconds: Double | None = None
    revision: Integer | None = None


# ---------------------------------------------------------------------------
# Requests & results
# ---------------------------------------------------------------------------


class GetCloudScriptRevisionRequest(WireModel):
    """Both fields absent means the latest revision of the latest version."""

    revision: Integer | None = None
    version: Integer | None = None


class GetCloudScriptRevisionResult(WireModel):
    created_at: Timestamp | None = None
    files: list[CloudScriptFile] | None = None
    is_published: Boolean | None = None
    revision: Integer | None = None
    version: Integer | None = None


class GetCloudScriptVersionsRequest(WireModel):
    pass


class GetCloudScriptVersionsResult(WireModel):
    versions: list[CloudScriptVersionStatus] | None = None


class SetPublishedRevisionRequest(WireModel):
    revision: Integer
    version: Integer


class SetPublishedRevisionResult(WireModel):
    pass


class UpdateCloudScriptRequest(WireModel):
    developer_play_fab_id: String | None = None
    files: list[CloudScriptFile]
    publish: Boolean | None = None


class UpdateCloudScriptResult(WireModel):
    revision: Integer | None = None
    version: Integer | None = None
