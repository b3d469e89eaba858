from __future__ import annotations

"""Conversion between :class:`~tripleForge.kg.graph.Graph` and ``rdflib.Graph``.

rdflib is the conformant parser for documents outside the restricted subset
the built-in decoders read.
"""

from typing import Any

import rdflib
from rdflib.term import BNode, Literal, Node, URIRef

from tripleForge.errors import DecodeError

from .formats import get_format
from .graph import Graph
from .iri import BLANK_PREFIX, is_blank
from .statement import Statement, literal_to_python

_RDFLIB_FORMATS = {
    "turtle": "turtle",
    "ntriples": "nt",
    "jsonld": "json-ld",
}


def _node(identifier: str) -> Node:
    if is_blank(identifier):
        return BNode(identifier[len(BLANK_PREFIX):])
    return URIRef(identifier)


def _object_node(statement: Statement) -> Node:
    if not statement.object_is_literal:
        return _node(statement.object)
    if statement.language:
        return Literal(statement.object, lang=statement.language)
    if statement.datatype:
        return Literal(statement.object, datatype=URIRef(statement.datatype))
    # Python scalars map to their natural XSD type.
    return Literal(statement.object)


def to_rdflib(graph: Graph) -> rdflib.Graph:
    """Build an ``rdflib.Graph`` holding ``graph``'s statements and prefixes."""

    rdf_graph = rdflib.Graph(bind_namespaces="core")
    for prefix, uri in graph.namespaces.items():
        rdf_graph.bind(prefix, uri, override=True)
    for statement in graph.statements:
        rdf_graph.add((_node(statement.subject), URIRef(statement.predicate), _object_node(statement)))
    return rdf_graph


def _identifier(node: Any) -> str:
    if isinstance(node, BNode):
        return f"{BLANK_PREFIX}{node}"
    return str(node)


def _statement(subject: Any, predicate: Any, obj: Any) -> Statement:
    if isinstance(obj, Literal):
        datatype = str(obj.datatype) if obj.datatype is not None else None
        return Statement(
            _identifier(subject),
            str(predicate),
            literal_to_python(str(obj), datatype),
            datatype=datatype,
            language=obj.language,
        )
    return Statement(_identifier(subject), str(predicate), _identifier(obj))


def from_rdflib(rdf_graph: rdflib.Graph, *, name: str | None = None) -> Graph:
    """Convert an ``rdflib.Graph``; literals keep their lexical form."""

    namespaces = {prefix: str(uri) for prefix, uri in rdf_graph.namespaces() if prefix}
    statements = [_statement(s, p, o) for s, p, o in rdf_graph]
    return Graph.new(namespaces, name=name, statements=statements)


def parse_with_rdflib(text: str, fmt: str = "turtle", *, name: str | None = None) -> Graph:
    """Parse any conformant document with rdflib and convert the result."""

    rdf_format = _RDFLIB_FORMATS[get_format(fmt).name]
    rdf_graph = rdflib.Graph(bind_namespaces="core")
    try:
        rdf_graph.parse(data=text, format=rdf_format)
    except Exception as exc:
        raise DecodeError(f"rdflib could not parse {fmt} input: {exc}") from exc
    return from_rdflib(rdf_graph, name=name)


__all__ = ["to_rdflib", "from_rdflib", "parse_with_rdflib"]
