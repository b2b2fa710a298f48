"""Semantic field types shared by every model.

Scalars are strict: a JSON string is never coerced into a number or a
boolean.  Timestamps, unordered collections and clearable fields carry
wire behaviour of their own and are defined here as ``Annotated`` types.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Optional, TypeVar

from pydantic import (
    AfterValidator,
    BeforeValidator,
    GetCoreSchemaHandler,
    PlainSerializer,
    Strict,
)
from pydantic_core import PydanticCustomError, core_schema

T = TypeVar("T")

String = Annotated[str, Strict()]
Integer = Annotated[int, Strict()]
Double = Annotated[float, Strict()]
"""Accepts JSON integers too; always decodes to ``float``."""
Boolean = Annotated[bool, Strict()]

WireValue = Any
"""An untyped JSON value (the service's ``Object`` fields)."""


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_timestamp(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    value = normalize_timestamp(value)
    millis = value.microsecond // 1000
    return f"{value.strftime(TIMESTAMP_FORMAT)}.{millis:03d}Z"


def normalize_timestamp(value: datetime) -> datetime:
    """Convert to aware UTC and drop sub-millisecond precision.

    Naive datetimes are taken to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _require_timestamp_shape(value: Any) -> Any:
    if isinstance(value, (str, datetime)):
        return value
    raise PydanticCustomError(
        "timestamp_type",
        "Input should be an ISO-8601 timestamp string",
        {"expected": "timestamp"},
    )


Timestamp = Annotated[
    datetime,
    BeforeValidator(_require_timestamp_shape),
    AfterValidator(normalize_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


# ---------------------------------------------------------------------------
# Unordered collections
# ---------------------------------------------------------------------------


class UnorderedList(list):
    """A list whose element order carries no meaning.

    Equality is multiset equality: two lists are equal when every element
    of one can be paired with an equal element of the other.  If *key*
    names an identifying attribute, candidates are matched on that key
    first.

    Like ``list`` it is not hashable, so neither is a model holding one.
    """

    def __init__(self, items: Any = (), key: str | None = None) -> None:
        super().__init__(items)
        self.key = key

    def _key_of(self, item: Any) -> Any:
        if self.key is None:
            return None
        return getattr(item, self.key, None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, list):
            return NotImplemented
        if len(self) != len(other):
            return False
        remaining = list(other)
        for item in self:
            item_key = self._key_of(item)
            for index, candidate in enumerate(remaining):
                if self._key_of(candidate) == item_key and candidate == item:
                    del remaining[index]
                    break
            else:
                return False
        return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UnorderedList({list.__repr__(self)})"


def none_first(value: Any) -> tuple[bool, Any]:
    return (value is not None, "" if value is None else value)


class Unordered:
    """``Annotated`` marker turning a ``list[X]`` field into an
    :class:`UnorderedList`.

    ``key`` is the *python* attribute name of the identifying sub-field::

        members: Annotated[list[EntityMemberRole], Unordered(key="role_id")] | None
    """

    def __init__(self, key: str | None = None) -> None:
        self.key = key

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            self._wrap, handler(source_type)
        )

    def _wrap(self, items: list[Any]) -> UnorderedList:
        return UnorderedList(items, key=self.key)

    def __repr__(self) -> str:
        return f"Unordered(key={self.key!r})"


# ---------------------------------------------------------------------------
# Clearable (three-state) fields
# ---------------------------------------------------------------------------


class _ClearsOnNull:
    """Marks a field whose explicit ``null`` means "remove the value"."""

    def __repr__(self) -> str:
        return "CLEARS_ON_NULL"


CLEARS_ON_NULL = _ClearsOnNull()

Clearable = Annotated[Optional[T], CLEARS_ON_NULL]
"""A field with three states: absent, explicit ``None`` (clear), or a value.

Absence is tracked through the model's ``model_fields_set``; see
:meth:`WireModel.field_state`.
"""


def has_marker(metadata: list[Any], marker: object) -> bool:
    return any(item is marker for item in metadata)


