"""Title and publisher key/value data, news, and content files."""

from __future__ import annotations

from pydantic import Field

from playfab_models.wire import (
    Clearable,
    Integer,
    String,
    Timestamp,
    WireModel,
)

# ---------------------------------------------------------------------------
# Key/value data
# ---------------------------------------------------------------------------


class GetTitleDataRequest(WireModel):
    keys: list[String] | None = None
    """Absent to fetch every key."""


class GetTitleDataResult(WireModel):
    data: dict[str, String] | None = None


class SetTitleDataRequest(WireModel):
    """Writes one title data key.

    ``value`` is three-state: leaving it out and setting it to ``None`` are
    different requests.  ``None`` is sent as ``null``, which removes the
    key::

        SetTitleDataRequest(key="motd", value=None).to_wire()
        # {"Key": "motd", "Value": None}
    """

    key: String
    value: Clearable[String] = None


class SetTitleDataResult(WireModel):
    pass


class GetPublisherDataRequest(WireModel):
    keys: list[String]


class GetPublisherDataResult(WireModel):
    data: dict[str, String] | None = None


class SetPublisherDataRequest(WireModel):
    """Writes one publisher data key; ``value=None`` removes it."""

    key: String
    value: Clearable[String] = None


class SetPublisherDataResult(WireModel):
    pass


# ---------------------------------------------------------------------------
# News
# ---------------------------------------------------------------------------


class AddNewsRequest(WireModel):
    body: String
    timestamp: Timestamp | None = None
    """Publication time; the service uses the current time if absent."""

    title: String


class AddNewsResult(WireModel):
    news_id: String | None = None


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class ContentInfo(WireModel):
    key: String | None = None
    last_modified: Timestamp | None = None
    size: Integer | None = None


class DeleteContentRequest(WireModel):
    key: String


class GetContentListRequest(WireModel):
    prefix: String | None = None


class GetContentListResult(WireModel):
    contents: list[ContentInfo] | None = None
    item_count: Integer | None = None
    total_size: Integer | None = None


class GetContentUploadUrlRequest(WireModel):
    content_type: String | None = None
    """MIME type of the upload; ``binary/octet-stream`` if absent."""

    key: String


class GetContentUploadUrlResult(WireModel):
    url: String | None = Field(default=None, alias="URL")


class GetDataReportRequest(WireModel):
    day: Integer
    month: Integer
    report_name: String
    year: Integer


class GetDataReportResult(WireModel):
    download_url: String | None = None
