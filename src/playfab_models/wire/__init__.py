"""The serialization contract shared by every model in the package.

Models are frozen Pydantic models (:class:`WireModel`) whose fields use the
semantic types defined here: strict scalars, UTC timestamps, unordered
collections, clearable (three-state) fields, open enums and variant
payloads.  :func:`encode` / :func:`decode` convert between models and
parsed JSON values.
"""

from .base import FieldState, WireModel
from .codec import DecodeResult, decode, encode, from_json, to_json, try_decode
from .enums import UNRECOGNIZED, WireEnum
from .errors import (
    DecodeError,
    MalformedEnumValue,
    MissingRequiredField,
    TypeMismatch,
    UnknownDiscriminator,
)
from .options import DecodeOptions
from .types import (
    Boolean,
    Clearable,
    Double,
    Integer,
    String,
    Timestamp,
    Unordered,
    UnorderedList,
    WireValue,
    format_timestamp,
)
from .variants import OpaquePayload, VariantShapes, routed_fields, variant_field

__all__ = [
    # base
    "FieldState",
    "WireModel",
    # codec
    "DecodeResult",
    "decode",
    "encode",
    "from_json",
    "to_json",
    "try_decode",
    # enums
    "UNRECOGNIZED",
    "WireEnum",
    # errors
    "DecodeError",
    "MalformedEnumValue",
    "MissingRequiredField",
    "TypeMismatch",
    "UnknownDiscriminator",
    # options
    "DecodeOptions",
    # types
    "Boolean",
    "Clearable",
    "Double",
    "Integer",
    "String",
    "Timestamp",
    "Unordered",
    "UnorderedList",
    "WireValue",
    "format_timestamp",
    # variants
    "OpaquePayload",
    "VariantShapes",
    "routed_fields",
    "variant_field",
]
