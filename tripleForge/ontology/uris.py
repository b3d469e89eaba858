from __future__ import annotations

"""Identifier resolution shared by the lowering functions."""

from typing import Any

from tripleForge.errors import LoweringError
from tripleForge.kg.iri import from_qname, resolve
from tripleForge.kg.namespaces import KNOWN_NAMESPACES


def expand(identifier: Any, base_uri: str | None) -> str:
    """Expand a known ``prefix:local`` name, then resolve against ``base_uri``."""

    return resolve(from_qname(str(identifier), KNOWN_NAMESPACES), base_uri)


def entity_uri(entity: Any, base_uri: str | None) -> str:
    """URI of a named definition: its explicit ``uri``, else its resolved ``name``."""

    identifier = getattr(entity, "uri", None) or getattr(entity, "name", None)
    if not identifier:
        raise LoweringError(f"{type(entity).__name__} has neither a uri nor a name")
    return expand(identifier, base_uri)


def reference_uri(reference: Any, base_uri: str | None) -> str:
    """Resolve a reference record or a bare identifier string."""

    identifier = reference if isinstance(reference, str) else reference.uri
    return expand(identifier, base_uri)


__all__ = ["expand", "entity_uri", "reference_uri"]
