from __future__ import annotations

"""SPARQL query text builders plus a registry of canned queries.

Builders are pure string functions. ``None`` components of a pattern become the
variables ``?s``, ``?p`` and ``?o``; everything else is formatted with the same
literal rules the encoders use.
"""

from collections.abc import Iterable
from typing import Any, Mapping

from .iri import is_blank, is_resource
from .serializers import format_literal
from .statement import Statement

_VARIABLES = ("s", "p", "o")


def prefix_block(namespaces: Mapping[str, str] | None) -> str:
    if not namespaces:
        return ""
    return "\n".join(f"PREFIX {prefix}: <{uri}>" for prefix, uri in sorted(namespaces.items()))


def format_term(
    value: Any,
    *,
    datatype: str | None = None,
    language: str | None = None,
    variable: str | None = None,
) -> str:
    """Format one pattern component; ``None`` yields ``?variable``."""

    if value is None:
        if variable is None:
            raise ValueError("A wildcard term needs a variable name")
        return f"?{variable}"
    if datatype is None and language is None and isinstance(value, str) and is_resource(value):
        return value if is_blank(value) else f"<{value}>"
    return format_literal(value, datatype, language)


def triple_pattern(subject: str | None = None, predicate: str | None = None, obj: Any = None) -> str:
    parts = [
        format_term(value, variable=name)
        for value, name in zip((subject, predicate, obj), _VARIABLES)
    ]
    return " ".join(parts) + " ."


def _wildcards(subject: Any, predicate: Any, obj: Any) -> list[str]:
    return [f"?{name}" for value, name in zip((subject, predicate, obj), _VARIABLES) if value is None]


def _with_prefixes(body: str, namespaces: Mapping[str, str] | None) -> str:
    block = prefix_block(namespaces)
    return f"{block}\n{body}" if block else body


def select_query(
    subject: str | None = None,
    predicate: str | None = None,
    obj: Any = None,
    *,
    namespaces: Mapping[str, str] | None = None,
    distinct: bool = False,
    limit: int | None = None,
    offset: int | None = None,
) -> str:
    """Build a ``SELECT`` over a single triple pattern."""

    projection = " ".join(_wildcards(subject, predicate, obj)) or "*"
    keyword = "SELECT DISTINCT" if distinct else "SELECT"
    lines = [f"{keyword} {projection} WHERE {{", f"  {triple_pattern(subject, predicate, obj)}", "}"]
    if limit is not None:
        lines.append(f"LIMIT {int(limit)}")
    if offset is not None:
        lines.append(f"OFFSET {int(offset)}")
    return _with_prefixes("\n".join(lines), namespaces)


def construct_query(
    subject: str | None = None,
    predicate: str | None = None,
    obj: Any = None,
    *,
    namespaces: Mapping[str, str] | None = None,
    limit: int | None = None,
) -> str:
    pattern = triple_pattern(subject, predicate, obj)
    lines = [f"CONSTRUCT {{ {pattern} }}", f"WHERE {{ {pattern} }}"]
    if limit is not None:
        lines.append(f"LIMIT {int(limit)}")
    return _with_prefixes("\n".join(lines), namespaces)


def ask_query(
    subject: str | None = None,
    predicate: str | None = None,
    obj: Any = None,
    *,
    namespaces: Mapping[str, str] | None = None,
) -> str:
    return _with_prefixes(f"ASK {{ {triple_pattern(subject, predicate, obj)} }}", namespaces)


def _statement_line(statement: Statement) -> str:
    subject = format_term(statement.subject)
    predicate = format_term(statement.predicate)
    if statement.object_is_literal:
        obj = format_literal(statement.object, statement.datatype, statement.language)
    else:
        obj = format_term(statement.object)
    return f"{subject} {predicate} {obj} ."


def _data_block(keyword: str, statements: Iterable[Statement], graph_name: str | None) -> str:
    """Group statements by graph; ``graph_name`` overrides each statement's own."""

    groups: dict[str | None, list[str]] = {}
    for statement in statements:
        target = graph_name if graph_name is not None else statement.graph
        groups.setdefault(target, []).append(_statement_line(statement))
    lines = [f"{keyword} {{"]
    for target, triples in groups.items():
        if target is None:
            lines.extend(f"  {line}" for line in triples)
        else:
            lines.append(f"  GRAPH <{target}> {{")
            lines.extend(f"    {line}" for line in triples)
            lines.append("  }")
    lines.append("}")
    return "\n".join(lines)


def insert_data(statements: Iterable[Statement], graph_name: str | None = None) -> str:
    return _data_block("INSERT DATA", statements, graph_name)


def delete_data(statements: Iterable[Statement], graph_name: str | None = None) -> str:
    return _data_block("DELETE DATA", statements, graph_name)


QUERIES: dict[str, str] = {
    "class_hierarchy": """
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
SELECT ?child ?parent WHERE {
  ?child rdfs:subClassOf ?parent .
}
ORDER BY ?child ?parent
""".strip(),
    "property_signatures": """
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
SELECT ?property ?domain ?range WHERE {
  ?property rdfs:domain|rdfs:range ?any .
  OPTIONAL { ?property rdfs:domain ?domain }
  OPTIONAL { ?property rdfs:range ?range }
}
ORDER BY ?property
""".strip(),
    "individual_types": """
PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PREFIX owl: <http://www.w3.org/2002/07/owl#>
SELECT ?individual ?type WHERE {
  ?individual a owl:NamedIndividual ;
              rdf:type ?type .
  FILTER(?type != owl:NamedIndividual)
}
ORDER BY ?individual ?type
""".strip(),
    "predicate_counts": """
SELECT ?predicate (COUNT(*) AS ?count) WHERE {
  ?s ?predicate ?o .
}
GROUP BY ?predicate
ORDER BY DESC(?count)
""".strip(),
}


def iter_queries() -> Iterable[tuple[str, str]]:
    """Yield ``(name, query)`` pairs in a deterministic order."""

    for name in sorted(QUERIES):
        yield name, QUERIES[name]


__all__ = [
    "prefix_block",
    "format_term",
    "triple_pattern",
    "select_query",
    "construct_query",
    "ask_query",
    "insert_data",
    "delete_data",
    "QUERIES",
    "iter_queries",
]
