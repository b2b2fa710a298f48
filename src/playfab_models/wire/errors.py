"""Decode errors -- the typed failure channel of the wire codec.

Every shape mismatch found while decoding is reported as a
:class:`DecodeError` subclass that names the offending field path and the
expected vs. observed wire shape.  Pydantic's ``ValidationError`` never
leaves this package; :func:`from_validation_error` translates it.
"""

from __future__ import annotations

from datetime import datetime
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

# Error types raised by our own validators (see variants.py).
MISSING = "missing"
UNKNOWN_DISCRIMINATOR = "unknown_discriminator"
MALFORMED_ENUM = "malformed_enum"

# Pydantic error type -> semantic type the field expected.
_EXPECTED_BY_ERROR: dict[str, str] = {
    "string_type": "string",
    "int_type": "integer",
    "int_from_float": "integer",
    "float_type": "number",
    "bool_type": "boolean",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "list_type": "array",
    "datetime_type": "timestamp",
    "datetime_parsing": "timestamp",
    "datetime_from_date_parsing": "timestamp",
}


def wire_type_name(value: Any) -> str:
    """Return the JSON type name of an (already parsed) wire value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def format_path(root: str, loc: tuple[int | str, ...]) -> str:
    """Render a pydantic location tuple as ``Root.Field[2].Sub``."""
    path = root
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


class DecodeError(ValueError):
    """A wire value could not be decoded into the requested type.

    Attributes
    ----------
    path:
        Dotted field path from the root type, e.g. ``"Group.Members[2].Id"``.
    expected:
        Semantic type the field expected (``"string"``, ``"EntityKey"`` ...).
    actual:
        JSON type actually observed (``"number"``, ``"null"`` ...).
    issues:
        Every issue found in the document, this one first.
    """

    def __init__(
        self,
        path: str,
        expected: str,
        actual: str,
        message: str | None = None,
    ) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        self.issues: tuple[DecodeError, ...] = (self,)
        super().__init__(
            message or f"{path}: expected {expected}, got {actual}"
        )


class MissingRequiredField(DecodeError):
    """A field documented as always-present was absent."""

    def __init__(self, path: str, expected: str) -> None:
        super().__init__(
            path, expected, "absent", f"{path}: required field is missing"
        )


class TypeMismatch(DecodeError):
    """The wire value's shape does not match the field's semantic type."""


class UnknownDiscriminator(DecodeError):
    """A variant discriminator names no known payload shape."""


class MalformedEnumValue(DecodeError):
    """A discriminator field holds something other than a symbol."""


# ---------------------------------------------------------------------------
# Semantic names of declared fields
# ---------------------------------------------------------------------------

_SCALAR_NAMES: dict[Any, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    datetime: "timestamp",
}


def _strip(annotation: Any) -> Any:
    """Peel ``Annotated`` and ``Optional`` wrappers off an annotation.

    Of a union of several types, the first model type is kept.
    """
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin is Union or origin is UnionType:
            args = [a for a in get_args(annotation) if a is not type(None)]
            models = [
                a for a in args if isinstance(a, type) and issubclass(a, BaseModel)
            ]
            annotation = (models or args)[0]
        else:
            return annotation


def semantic_name(annotation: Any) -> str:
    """Return the name a field's declared type goes by in decode errors."""
    annotation = _strip(annotation)
    origin = get_origin(annotation)
    if origin in (list, tuple, set) or annotation in (list, tuple, set):
        return "array"
    if origin is dict or annotation is dict:
        return "object"
    if annotation in _SCALAR_NAMES:
        return _SCALAR_NAMES[annotation]
    if isinstance(annotation, type):
        return annotation.__name__
    return "value"


def _field_by_wire_name(model_type: type[BaseModel], wire_name: str) -> Any:
    for name, field in model_type.model_fields.items():
        if (field.alias or name) == wire_name:
            return field
    return None


def declared_type(model_type: type[BaseModel], loc: tuple[int | str, ...]) -> Any:
    """Return the annotation declared at *loc* below *model_type*, or None."""
    annotation: Any = model_type
    for part in loc:
        annotation = _strip(annotation)
        origin = get_origin(annotation)
        if isinstance(part, int):
            if origin not in (list, tuple, set):
                return None
            annotation = get_args(annotation)[0]
        elif isinstance(annotation, type) and issubclass(annotation, BaseModel):
            field = _field_by_wire_name(annotation, part)
            if field is None:
                return None
            annotation = field.annotation
        elif origin is dict:
            annotation = get_args(annotation)[1]
        else:
            return None
    return annotation


# ---------------------------------------------------------------------------
# ValidationError translation
# ---------------------------------------------------------------------------

def _issue_from_line(model_type: type[BaseModel], line: dict[str, Any]) -> DecodeError:
    loc = tuple(line["loc"])
    path = format_path(model_type.__name__, loc)
    kind = line["type"]
    ctx = line.get("ctx") or {}
    actual = wire_type_name(line.get("input"))

    if kind == MISSING:
        declared = declared_type(model_type, loc)
        expected = "value" if declared is None else semantic_name(declared)
        return MissingRequiredField(path, expected)
    if kind == UNKNOWN_DISCRIMINATOR:
        return UnknownDiscriminator(
            path,
            ctx.get("expected", "known discriminator"),
            repr(line.get("input")),
            f"{path}: {line['msg']}",
        )
    if kind == MALFORMED_ENUM:
        return MalformedEnumValue(
            path, ctx.get("expected", "enum"), actual, f"{path}: {line['msg']}"
        )
    expected = (
        ctx.get("expected")
        or ctx.get("class_name")
        or _EXPECTED_BY_ERROR.get(kind, kind)
    )
    return TypeMismatch(path, str(expected), actual)


def from_validation_error(
    model_type: type[BaseModel], exc: ValidationError
) -> DecodeError:
    """Translate a pydantic ``ValidationError`` raised while validating
    *model_type* into a :class:`DecodeError`.

    The first issue is returned; all of them are attached to ``issues``.
    """
    issues = [
        _issue_from_line(model_type, line)
        for line in exc.errors(include_url=False)
    ]
    if not issues:
        root = model_type.__name__
        return TypeMismatch(root, root, "invalid", str(exc))
    first = issues[0]
    first.issues = tuple(issues)
    return first
