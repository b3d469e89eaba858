from __future__ import annotations

"""Identifier helpers: absolute-URI detection, base resolution and qnames.

Resolution is a deliberately simplified join, not RFC 3986 reference
resolution: one trailing ``/`` is stripped from the base, one leading ``/``
from the identifier, and the two are joined with a single ``/``. Bases ending
in ``#`` are therefore joined as ``...#/name``; callers that want fragment
identifiers should pass absolute URIs.
"""

import re
from typing import Mapping

_ABSOLUTE_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_LABEL_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_\-]")

BLANK_PREFIX = "_:"


def is_absolute(identifier: object) -> bool:
    """Return ``True`` when ``identifier`` looks like ``scheme://...``."""

    return isinstance(identifier, str) and bool(_ABSOLUTE_RE.match(identifier))


def is_blank(identifier: object) -> bool:
    """Return ``True`` for graph-local blank-node labels (``_:name``)."""

    return isinstance(identifier, str) and identifier.startswith(BLANK_PREFIX)


def is_resource(identifier: object) -> bool:
    return is_absolute(identifier) or is_blank(identifier)


def resolve(identifier: str | None, base_uri: str | None) -> str | None:
    """Resolve ``identifier`` against ``base_uri``.

    Absolute identifiers, blank-node labels and calls without a base are
    returned unchanged.
    """

    if identifier is None:
        return None
    identifier = str(identifier)
    if base_uri is None or is_absolute(identifier) or is_blank(identifier):
        return identifier
    base = base_uri[:-1] if base_uri.endswith("/") else base_uri
    rel = identifier[1:] if identifier.startswith("/") else identifier
    return f"{base}/{rel}"


def local_name(uri: str) -> str:
    """Return the last path segment of ``uri``, after its final ``#`` if any."""

    segment = uri.rsplit("/", 1)[-1]
    return segment.rsplit("#", 1)[-1]


def to_qname(uri: str, namespaces: Mapping[str, str]) -> str:
    """Compact ``uri`` into ``prefix:local``; unknown namespaces leave it unchanged.

    The longest matching namespace wins so nested namespaces compact
    predictably.
    """

    best: tuple[str, str] | None = None
    for prefix, namespace in namespaces.items():
        if namespace and uri.startswith(namespace):
            if best is None or len(namespace) > len(best[1]):
                best = (prefix, namespace)
    if best is None:
        return uri
    prefix, namespace = best
    return f"{prefix}:{uri[len(namespace):]}"


def from_qname(qname: str, namespaces: Mapping[str, str]) -> str:
    """Expand ``prefix:local``; unknown prefixes leave the value unchanged."""

    if ":" not in qname or is_absolute(qname) or is_blank(qname):
        return qname
    prefix, local = qname.split(":", 1)
    namespace = namespaces.get(prefix)
    if namespace is None:
        return qname
    return namespace + local


def blank_node(*parts: object) -> str:
    """Build a deterministic blank-node label from ``parts``.

    Characters outside ``[A-Za-z0-9_-]`` are replaced with ``_`` so labels are
    safe in every supported format; the same parts always yield the same label.
    """

    cleaned = [_LABEL_UNSAFE_RE.sub("_", str(part)) for part in parts if part is not None]
    return BLANK_PREFIX + "_".join(cleaned)


__all__ = [
    "BLANK_PREFIX",
    "is_absolute",
    "is_blank",
    "is_resource",
    "resolve",
    "local_name",
    "to_qname",
    "from_qname",
    "blank_node",
]
