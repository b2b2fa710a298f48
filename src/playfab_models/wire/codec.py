"""Encode / decode between models and parsed JSON values.

``decode`` follows an abort-the-whole-decode policy: a document with any
shape mismatch produces no instance.  The first issue is raised (or
returned by :func:`try_decode`) and carries every issue in ``issues``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import DecodeError, from_validation_error
from .options import DecodeOptions

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class DecodeResult(Generic[M]):
    """Outcome of :func:`try_decode`: exactly one of the two is set."""

    value: M | None
    error: DecodeError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> M:
        """Return the value, or raise the error."""
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def encode(value: BaseModel) -> dict[str, Any]:
    """Return the wire form of *value*: a JSON-ready ``dict``."""
    return value.model_dump(mode="json", by_alias=True)


def to_json(value: BaseModel) -> str:
    """Return the compact JSON text of ``encode(value)``."""
    return value.model_dump_json(by_alias=True)


def decode(
    model_type: type[M],
    wire: Any,
    *,
    strict_variants: bool = False,
) -> M:
    """Decode a parsed JSON value into *model_type*.

    Keys are matched against the wire names only; the python attribute
    names the constructor accepts are not wire names.

    Raises
    ------
    DecodeError
        ``MissingRequiredField``, ``TypeMismatch``, ``UnknownDiscriminator``
        or ``MalformedEnumValue`` for the first issue found.
    """
    options = DecodeOptions(strict_variants=strict_variants)
    try:
        return model_type.model_validate(
            wire, context=options.as_context(), by_alias=True, by_name=False
        )
    except ValidationError as exc:
        raise from_validation_error(model_type, exc) from exc


def try_decode(
    model_type: type[M],
    wire: Any,
    *,
    strict_variants: bool = False,
) -> DecodeResult[M]:
    """Like :func:`decode` but returns the error instead of raising it."""
    try:
        return DecodeResult(decode(model_type, wire, strict_variants=strict_variants), None)
    except DecodeError as exc:
        return DecodeResult(None, exc)


def from_json(
    model_type: type[M],
    text: str | bytes,
    *,
    strict_variants: bool = False,
) -> M:
    """Parse JSON text and decode it.  Invalid JSON raises ``ValueError``."""
    return decode(model_type, json.loads(text), strict_variants=strict_variants)
