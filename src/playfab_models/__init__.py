"""playfab-models -- typed request/response models for the PlayFab web API.

Models are immutable Pydantic records keyed by the service's PascalCase
wire names.  :mod:`playfab_models.wire` holds the serialization contract;
:mod:`playfab_models.groups` and :mod:`playfab_models.admin` declare the
models; :mod:`playfab_models.registry` looks them up by name.
"""

from playfab_models.registry import ModelRegistry, default_registry
from playfab_models.wire import (
    DecodeError,
    DecodeResult,
    MalformedEnumValue,
    MissingRequiredField,
    TypeMismatch,
    UnknownDiscriminator,
    decode,
    encode,
    from_json,
    to_json,
    try_decode,
)

__all__ = [
    "DecodeError",
    "DecodeResult",
    "MalformedEnumValue",
    "MissingRequiredField",
    "ModelRegistry",
    "TypeMismatch",
    "UnknownDiscriminator",
    "decode",
    "default_registry",
    "encode",
    "from_json",
    "to_json",
    "try_decode",
]
