"""Model registry -- looks model types up by API namespace and wire name.

Each API namespace (``groups``, ``admin``) is populated from the modules
that declare its models.  The registry also knows every enumeration and
every variant-shape table, and can encode or decode by type name, which is
what a transport layer needs when it only has the name of the operation it
is calling.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import ModuleType
from typing import Any

from playfab_models import admin
from playfab_models.groups import models as groups_models
from playfab_models.wire import (
    DecodeResult,
    VariantShapes,
    WireEnum,
    WireModel,
    decode,
    encode,
    routed_fields,
    try_decode,
)

logger = logging.getLogger(__name__)


def _declared_in(module: ModuleType, obj: Any) -> bool:
    return getattr(obj, "__module__", None) == module.__name__


class ModelRegistry:
    """Catalog of the model types, enums and variant tables of each API.

    Usage::

        registry = ModelRegistry()
        registry.register_module("groups", playfab_models.groups.models)

        request_type = registry.get("groups", "CreateGroupRequest")
        request = registry.decode("CreateGroupRequest", {"GroupName": "Raiders"})
    """

    def __init__(self) -> None:
        self.models: dict[str, dict[str, type[WireModel]]] = {}
        self.enum_types: dict[str, dict[str, type[WireEnum]]] = {}
        self.shapes: dict[str, VariantShapes[Any]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_module(self, namespace: str, module: ModuleType) -> int:
        """Register every public model, enum and variant table declared in
        *module* under *namespace*.

        Only objects defined in the module itself are taken; names imported
        from elsewhere and names starting with ``_`` are skipped.  A type
        registered twice in one namespace is replaced.

        Returns
        -------
        int
            Number of model and enum types registered.
        """
        models = self.models.setdefault(namespace, {})
        enums = self.enum_types.setdefault(namespace, {})
        count = 0

        for name, obj in vars(module).items():
            if name.startswith("_"):
                continue
            if isinstance(obj, VariantShapes):
                self.shapes[obj.name] = obj
                continue
            if not isinstance(obj, type) or not _declared_in(module, obj):
                continue
            if issubclass(obj, WireModel):
                models[name] = obj
                count += 1
            elif issubclass(obj, WireEnum):
                enums[name] = obj
                count += 1

        logger.debug(
            "Registered %d types from %s under %r", count, module.__name__, namespace
        )
        return count

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, namespace: str, name: str) -> type[WireModel]:
        """Return the model type *name* of *namespace*.

        Raises
        ------
        KeyError
            If the namespace or the type is not registered.
        """
        if namespace not in self.models:
            raise KeyError(
                f"Unknown namespace: {namespace!r}. "
                f"Known namespaces: {', '.join(self.namespaces())}"
            )
        try:
            return self.models[namespace][name]
        except KeyError:
            raise KeyError(f"No model {name!r} in namespace {namespace!r}") from None

    def find(self, name: str, namespace: str | None = None) -> type[WireModel] | None:
        """Return the model type called *name*, or ``None``.

        Without a *namespace*, namespaces are searched in registration
        order, so a name declared by several APIs (``EntityKey``) resolves
        to the first one registered.
        """
        if namespace is not None:
            return self.models.get(namespace, {}).get(name)
        for models in self.models.values():
            if name in models:
                return models[name]
        return None

    def names(self, namespace: str) -> list[str]:
        """Return the sorted model names of *namespace*."""
        return sorted(self.models.get(namespace, {}))

    def namespaces(self) -> list[str]:
        return list(self.models)

    def enums(self, namespace: str) -> dict[str, type[WireEnum]]:
        """Return the enumerations of *namespace*, keyed by name."""
        return dict(self.enum_types.get(namespace, {}))

    def variant_shapes(self, name: str) -> VariantShapes[Any]:
        """Return the variant table named after its discriminator enum.

        Raises
        ------
        KeyError
            If no such table is registered.
        """
        try:
            return self.shapes[name]
        except KeyError:
            raise KeyError(
                f"No variant shapes {name!r}. Known: {', '.join(sorted(self.shapes))}"
            ) from None

    @staticmethod
    def shapes_for(model_type: type[WireModel]) -> dict[str, VariantShapes[Any]]:
        """Return the variant tables routing fields of *model_type*."""
        return routed_fields(model_type)

    # ------------------------------------------------------------------
    # Codec by name
    # ------------------------------------------------------------------

    def _resolve(self, name: str, namespace: str | None) -> type[WireModel]:
        if namespace is not None:
            return self.get(namespace, name)
        model_type = self.find(name)
        if model_type is None:
            raise KeyError(
                f"Unknown model: {name!r}. "
                f"Known namespaces: {', '.join(self.namespaces())}"
            )
        return model_type

    @staticmethod
    def encode(value: WireModel) -> dict[str, Any]:
        return encode(value)

    def decode(
        self,
        name: str,
        wire: Any,
        *,
        namespace: str | None = None,
        strict_variants: bool = False,
    ) -> WireModel:
        """Decode *wire* as the model called *name*.

        Raises
        ------
        KeyError
            If the model is not registered.
        DecodeError
            If *wire* does not have the model's shape.
        """
        model_type = self._resolve(name, namespace)
        return decode(model_type, wire, strict_variants=strict_variants)

    def try_decode(
        self,
        name: str,
        wire: Any,
        *,
        namespace: str | None = None,
        strict_variants: bool = False,
    ) -> DecodeResult[WireModel]:
        """Like :meth:`decode`, but decode failures are returned, not raised.

        An unregistered *name* still raises ``KeyError``.
        """
        model_type = self._resolve(name, namespace)
        return try_decode(model_type, wire, strict_variants=strict_variants)

    # ------------------------------------------------------------------
    # Representation
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(models) for models in self.models.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __repr__(self) -> str:
        parts = [f"{namespace}={len(models)}" for namespace, models in self.models.items()]
        parts.append(f"variant_shapes={len(self.shapes)}")
        return f"ModelRegistry({', '.join(parts)})"


@lru_cache(maxsize=None)
def default_registry() -> ModelRegistry:
    """Return the shared registry holding the Groups and Admin models."""
    registry = ModelRegistry()
    registry.register_module("groups", groups_models)
    for area in admin.AREAS:
        registry.register_module("admin", area)
    return registry
