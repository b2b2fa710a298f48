"""The base class of every request, response and value type."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_pascal

from .codec import decode, encode
from .types import CLEARS_ON_NULL, has_marker, none_first


class FieldState(str, Enum):
    """Observable state of a model field."""

    ABSENT = "ABSENT"
    NULL = "NULL"
    VALUE = "VALUE"


class WireModel(BaseModel):
    """An immutable record mirroring one JSON object shape of the service.

    Python attribute names are snake_case; the wire names are generated in
    PascalCase (``custom_tags`` <-> ``CustomTags``).  Fields whose wire name
    does not follow that rule declare an explicit ``Field(alias=...)``.

    Encoding omits every field that is ``None``, except a ``Clearable``
    field that was explicitly set to ``None`` -- that one is emitted as
    ``null`` because the service reads it as "remove the value".

    Unknown keys in a decoded document are dropped.  Python names are
    accepted by the constructor only; :func:`decode` matches wire names.

    Instances are hashable only while every field value is: a model that
    holds a list or a dict (unordered or not) raises ``TypeError`` from
    ``hash()``.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    sort_field: ClassVar[str | None] = None
    """Attribute giving the natural ordering of instances, if they have one."""

    # -- three-state fields ---------------------------------------------

    @classmethod
    def clearable_fields(cls) -> frozenset[str]:
        """Names of the fields documented as "set to null to remove"."""
        return frozenset(
            name
            for name, field in cls.model_fields.items()
            if has_marker(field.metadata, CLEARS_ON_NULL)
        )

    def field_state(self, name: str) -> FieldState:
        """Return whether *name* is absent, explicitly null, or has a value."""
        if name not in type(self).model_fields:
            raise AttributeError(f"{type(self).__name__} has no field {name!r}")
        value = getattr(self, name)
        if value is not None:
            return FieldState.VALUE
        if name in self.model_fields_set:
            return FieldState.NULL
        return FieldState.ABSENT

    def _explicit_nulls(self) -> frozenset[str]:
        return frozenset(
            name
            for name in self.clearable_fields()
            if name in self.model_fields_set and getattr(self, name) is None
        )

    @model_serializer(mode="wrap")
    def _omit_absent(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        fields = type(self).model_fields
        keep_null = {
            (fields[name].alias or name) if info.by_alias else name
            for name in self._explicit_nulls()
        }
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in keep_null
        }

    # -- equality & ordering --------------------------------------------

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True:
            return result
        return self._explicit_nulls() == other._explicit_nulls()  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        field = type(self).sort_field
        if field is None or not isinstance(other, type(self)):
            return NotImplemented
        return none_first(getattr(self, field)) < none_first(getattr(other, field))

    # -- wire conversion ------------------------------------------------

    def to_wire(self) -> dict[str, Any]:
        """Encode into a JSON-ready ``dict`` keyed by wire names."""
        return encode(self)

    @classmethod
    def from_wire(cls, wire: Any, *, strict_variants: bool = False) -> Any:
        """Decode a parsed JSON value; raises ``DecodeError`` on failure."""
        return decode(cls, wire, strict_variants=strict_variants)

