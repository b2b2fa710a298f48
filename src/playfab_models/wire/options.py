"""Per-call decode options, carried through pydantic's validation context."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from pydantic import ValidationInfo


@dataclass(frozen=True)
class DecodeOptions:
    """Knobs accepted by :func:`playfab_models.wire.codec.decode`."""

    strict_variants: bool = False
    """If True, an unrecognized discriminator fails the decode with
    ``UnknownDiscriminator`` instead of keeping the payload opaque."""

    def as_context(self) -> dict[str, Any]:
        return asdict(self)


def decoding_wire(info: ValidationInfo | None) -> bool:
    """Return True inside :func:`decode`, False inside a constructor."""
    return info is not None and info.context is not None


def strict_variants(info: ValidationInfo | None) -> bool:
    """Return True if the running validation asked for strict routing."""
    if info is None or not info.context:
        return False
    return bool(info.context.get("strict_variants", False))
