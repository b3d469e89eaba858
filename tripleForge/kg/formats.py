from __future__ import annotations

"""Format registry: encode and decode graphs by format name."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping

from tripleForge.errors import UnsupportedFormatError

from .graph import Graph
from .parsers import decode_jsonld, decode_turtle, parse_ntriples
from .serializers import to_jsonld, to_ntriples, to_turtle
from .statement import Statement


@dataclass(frozen=True)
class GraphFormat:
    name: str
    media_type: str
    suffix: str
    encode: Callable[[Graph], str]
    decode: Callable[..., tuple[list[Statement], Mapping[str, str]]]


def _decode_ntriples(text: str, *, strict: bool = False) -> tuple[list[Statement], Mapping[str, str]]:
    return parse_ntriples(text, strict=strict), {}


FORMATS: dict[str, GraphFormat] = {
    "turtle": GraphFormat(
        name="turtle",
        media_type="text/turtle",
        suffix=".ttl",
        encode=lambda graph: to_turtle(graph.statements, graph.namespaces),
        decode=decode_turtle,
    ),
    "ntriples": GraphFormat(
        name="ntriples",
        media_type="application/n-triples",
        suffix=".nt",
        encode=lambda graph: to_ntriples(graph.statements),
        decode=_decode_ntriples,
    ),
    "jsonld": GraphFormat(
        name="jsonld",
        media_type="application/ld+json",
        suffix=".jsonld",
        encode=lambda graph: to_jsonld(graph.statements, graph.namespaces),
        decode=decode_jsonld,
    ),
}

ALIASES = {
    "ttl": "turtle",
    "nt": "ntriples",
    "n-triples": "ntriples",
    "json-ld": "jsonld",
    "json": "jsonld",
}

_SUFFIXES = {
    ".ttl": "turtle",
    ".nt": "ntriples",
    ".jsonld": "jsonld",
    ".json": "jsonld",
}


def get_format(name: str) -> GraphFormat:
    """Return the registered format for ``name`` or one of its aliases."""

    key = (name or "").strip().lower()
    key = ALIASES.get(key, key)
    try:
        return FORMATS[key]
    except KeyError:
        known = ", ".join(sorted(set(FORMATS) | set(ALIASES)))
        raise UnsupportedFormatError(f"Unsupported format '{name}' (expected one of: {known})") from None


def format_names() -> list[str]:
    return sorted(FORMATS)


def guess_format(path: str | Path, default: str | None = None) -> str:
    """Map a file suffix to a format name; fall back to ``default`` when given."""

    suffix = Path(path).suffix.lower()
    if suffix in _SUFFIXES:
        return _SUFFIXES[suffix]
    if default is not None:
        return get_format(default).name
    raise UnsupportedFormatError(f"Cannot infer a graph format from '{path}'")


def serialize(graph: Graph, fmt: str = "turtle") -> str:
    return get_format(fmt).encode(graph)


def parse(text: str, fmt: str = "turtle", *, strict: bool = False, name: str | None = None) -> Graph:
    """Decode ``text`` into a new graph; decoded prefixes are bound on it."""

    statements, namespaces = get_format(fmt).decode(text, strict=strict)
    return Graph.new(namespaces, name=name, statements=statements)


__all__ = [
    "GraphFormat",
    "FORMATS",
    "ALIASES",
    "get_format",
    "format_names",
    "guess_format",
    "serialize",
    "parse",
]
