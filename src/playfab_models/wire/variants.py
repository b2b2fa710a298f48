"""Variant payloads -- fields whose shape depends on a sibling discriminator.

A :class:`VariantShapes` table maps each discriminator symbol onto the
model its payload decodes as.  The payload field is resolved *after* the
discriminator (it is declared later in the model), so the routing sees
the decoded discriminator.  A payload whose discriminator is missing or
unrecognized is kept as an :class:`OpaquePayload`, which re-encodes
exactly as it was received.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Mapping, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_serializer,
)
from pydantic_core import PydanticCustomError

from .enums import WireEnum
from .errors import (
    MALFORMED_ENUM,
    UNKNOWN_DISCRIMINATOR,
    UnknownDiscriminator,
    from_validation_error,
)
from .options import decoding_wire, strict_variants

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=WireEnum)


class OpaquePayload(BaseModel):
    """An untyped wire value kept because its shape could not be routed."""

    model_config = ConfigDict(frozen=True)

    raw: Any = None
    """The payload exactly as it appeared on the wire."""

    @model_serializer
    def _as_wire(self) -> Any:
        return self.raw


class VariantShapes(Generic[E]):
    """Lookup from discriminator symbol to payload model type.

    Usage::

        TASK_PARAMETERS = VariantShapes(
            ScheduledTaskType,
            {
                ScheduledTaskType.CLOUD_SCRIPT: CloudScriptTaskParameter,
                ScheduledTaskType.ACTIONS_ON_PLAYER_SEGMENT: ActionsOnPlayersInSegmentTaskParameter,
            },
        )
    """

    def __init__(
        self,
        discriminator: type[E],
        shapes: Mapping[E, type[BaseModel]],
        name: str | None = None,
    ) -> None:
        self.discriminator = discriminator
        self.name = name or discriminator.__name__
        self._shapes: dict[E, type[BaseModel]] = dict(shapes)

    def shape_for(self, kind: E | str | None) -> type[BaseModel] | None:
        """Return the payload type for *kind*, or ``None`` if unknown."""
        if not isinstance(kind, str):
            return None
        if not isinstance(kind, self.discriminator):
            kind = self.discriminator(kind)
        return self._shapes.get(kind)

    def symbols(self) -> list[E]:
        return list(self._shapes)

    def resolve(self, kind: E | str | None, payload: Any) -> BaseModel | None:
        """Return *payload* as the model *kind* routes to.

        Raises
        ------
        UnknownDiscriminator
            If *kind* is missing or not a known symbol.
        """
        if payload is None:
            return None
        shape = self.shape_for(kind)
        if shape is None:
            raise UnknownDiscriminator(
                self.name,
                f"one of {', '.join(s.value for s in self._shapes)}",
                repr(str(kind) if kind is not None else None),
            )
        if isinstance(payload, shape):
            return payload
        if isinstance(payload, OpaquePayload):
            payload = payload.raw
        try:
            return shape.model_validate(payload, by_alias=True, by_name=False)
        except ValidationError as exc:
            raise from_validation_error(shape, exc) from exc

    # -- validation -----------------------------------------------------

    def route(self, kind: E | None, payload: Any, info: ValidationInfo) -> Any:
        """Decode *payload* according to an already-decoded *kind*."""
        if payload is None:
            return None
        shape = self.shape_for(kind)
        if shape is None:
            if isinstance(payload, BaseModel) and not isinstance(payload, OpaquePayload):
                return payload
            if kind is not None and strict_variants(info):
                raise PydanticCustomError(
                    UNKNOWN_DISCRIMINATOR,
                    "No payload shape for {expected} '{symbol}'",
                    {"expected": self.name, "symbol": str(kind)},
                )
            raw = payload.raw if isinstance(payload, OpaquePayload) else payload
            logger.warning(
                "Keeping %s payload opaque (discriminator %r)", self.name, kind
            )
            return OpaquePayload(raw=raw)
        if isinstance(payload, shape):
            return payload
        if isinstance(payload, BaseModel) and not isinstance(payload, OpaquePayload):
            raise PydanticCustomError(
                "variant_mismatch",
                "{expected} payload required for this discriminator",
                {"expected": shape.__name__},
            )
        if isinstance(payload, OpaquePayload):
            payload = payload.raw
        if decoding_wire(info):
            return shape.model_validate(
                payload, context=info.context, by_alias=True, by_name=False
            )
        return shape.model_validate(payload)

    def check_discriminator(self, value: Any, info: ValidationInfo) -> Any:
        """Validate the raw discriminator before its enum decodes it.

        A non-string is a ``MalformedEnumValue``; under ``strict_variants``
        a symbol with no payload shape is an ``UnknownDiscriminator``.
        """
        if value is None or isinstance(value, self.discriminator):
            return value
        expected = self.discriminator.__name__
        if not isinstance(value, str):
            raise PydanticCustomError(
                MALFORMED_ENUM,
                "{expected} discriminator must be a symbol string",
                {"expected": expected},
            )
        if strict_variants(info) and self.shape_for(value) is None:
            raise PydanticCustomError(
                UNKNOWN_DISCRIMINATOR,
                "Unrecognized {expected} discriminator '{symbol}'",
                {"expected": expected, "symbol": value},
            )
        return value

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k.value}={v.__name__}" for k, v in self._shapes.items())
        return f"VariantShapes({self.name}: {pairs})"


def variant_field(payload: str, discriminator: str, shapes: VariantShapes[Any]) -> Any:
    """Build the field validator that routes *payload* by *discriminator*.

    The discriminator field must be declared before the payload field so
    that its decoded value is available.  Assign the result in the model
    body::

        route_parameter = variant_field("parameter", "type", TASK_PARAMETERS)

    The name must not start with an underscore, which would make Pydantic
    treat it as a private attribute.

    The discriminator field becomes load-bearing: a non-string value is
    a ``MalformedEnumValue``, and with ``strict_variants`` an unknown
    symbol fails the decode.  The same enum used by a field that routes
    nothing keeps plain enum behaviour.
    """

    def _route(cls: Any, value: Any, info: ValidationInfo) -> Any:
        if info.field_name == discriminator:
            return shapes.check_discriminator(value, info)
        return shapes.route(info.data.get(discriminator), value, info)

    _route.__name__ = f"_route_{payload}"
    _route.variant_shapes = shapes  # type: ignore[attr-defined]
    _route.payload = payload  # type: ignore[attr-defined]
    _route.discriminator = discriminator  # type: ignore[attr-defined]
    return field_validator(discriminator, payload, mode="before")(_route)


def routed_fields(model_type: type[BaseModel]) -> dict[str, VariantShapes[Any]]:
    """Return ``{payload field: shapes}`` for every variant field of a model."""
    found: dict[str, VariantShapes[Any]] = {}
    decorators = model_type.__pydantic_decorators__.field_validators
    for decorator in decorators.values():
        shapes = getattr(decorator.func, "variant_shapes", None)
        if isinstance(shapes, VariantShapes):
            found[decorator.func.payload] = shapes
    return found
