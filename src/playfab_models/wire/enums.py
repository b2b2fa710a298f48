"""Enumeration bases for closed symbol sets received over the wire.

The service adds symbols over time, so a symbol this package does not know
must not break decoding.  :class:`WireEnum` maps such a symbol onto a
pseudo-member named ``UNRECOGNIZED`` that still carries the original wire
string, so it re-encodes unchanged.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler, ValidationInfo
from pydantic_core import PydanticCustomError, core_schema

logger = logging.getLogger(__name__)

UNRECOGNIZED = "UNRECOGNIZED"


def _symbol(member: WireEnum) -> str:
    return member._value_


class WireEnum(str, Enum):
    """A ``str`` enum whose wire form is the symbol string itself.

    Subclasses only declare members::

        class Region(WireEnum):
            US_CENTRAL = "USCentral"
            US_EAST = "USEast"

    ``Region("Mars")`` does not raise: it returns a pseudo-member with
    ``name == "UNRECOGNIZED"``, ``value == "Mars"`` and ``is_unknown``
    set.  Two unknown members compare equal when their strings do.
    """

    @classmethod
    def _missing_(cls, value: object) -> WireEnum | None:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNRECOGNIZED
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        """True for a symbol outside the declared member set."""
        return self._value_ not in type(self)._value2member_map_

    def __str__(self) -> str:
        return self._value_

    # -- pydantic integration -------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.with_info_plain_validator_function(
            cls._from_wire,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _symbol, when_used="json"
            ),
        )

    @classmethod
    def _from_wire(cls, value: Any, info: ValidationInfo) -> WireEnum:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise cls._shape_error()
        member = cls(value)
        if member.is_unknown:
            logger.debug("Unrecognized %s symbol %r", cls.__name__, value)
        return member

    @classmethod
    def _shape_error(cls) -> PydanticCustomError:
        return PydanticCustomError(
            "enum_type",
            "Input should be a {expected} symbol string",
            {"expected": cls.__name__},
        )

