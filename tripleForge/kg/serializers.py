from __future__ import annotations

"""Encoders from statements and a namespace table to text.

Three formats are produced: the compact Turtle-style format, the flat
N-Triples-style line format and a JSON-LD style graph document. All encoders
are pure functions and preserve statement order within each subject.
"""

import json
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping

from tripleForge.errors import SerializationError

from .iri import is_blank, to_qname
from .statement import Statement, lexical_form

_QNAME_LOCAL_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_ESCAPE_RE = re.compile(r'[\\"\n\r\t]')


def escape_string(value: str) -> str:
    """Escape backslash, double quote, newline, carriage return and tab."""

    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], value)


def format_literal(value: Any, datatype: str | None = None, language: str | None = None) -> str:
    """Format a literal; a language tag takes precedence over a datatype."""

    text = f'"{escape_string(lexical_form(value))}"'
    if language:
        return f"{text}@{language}"
    if datatype:
        return f"{text}^^<{datatype}>"
    return text


def _format_iri(identifier: str) -> str:
    if is_blank(identifier):
        return identifier
    return f"<{identifier}>"


def _format_compact(identifier: str, namespaces: Mapping[str, str]) -> str:
    if is_blank(identifier):
        return identifier
    qname = to_qname(identifier, namespaces)
    if qname != identifier:
        _, local = qname.split(":", 1)
        if _QNAME_LOCAL_RE.match(local):
            return qname
    return f"<{identifier}>"


def _format_object(statement: Statement, namespaces: Mapping[str, str] | None) -> str:
    if statement.object_is_literal:
        return format_literal(statement.object, statement.datatype, statement.language)
    if namespaces is None:
        return _format_iri(statement.object)
    return _format_compact(statement.object, namespaces)


def _group(statements: Iterable[Statement]) -> dict[str, dict[str, list[Statement]]]:
    grouped: dict[str, dict[str, list[Statement]]] = {}
    for statement in statements:
        by_predicate = grouped.setdefault(statement.subject, {})
        by_predicate.setdefault(statement.predicate, []).append(statement)
    return grouped


def to_turtle(statements: Iterable[Statement], namespaces: Mapping[str, str] | None = None) -> str:
    """Encode statements in the compact format.

    Prefix declarations come first (sorted by prefix), then one block per
    subject. Objects sharing a predicate are joined with ``, `` and predicates
    sharing a subject with `` ;``; each block ends with `` .``.
    """

    namespaces = dict(namespaces or {})
    prefix_lines = [f"@prefix {prefix}: <{uri}> ." for prefix, uri in sorted(namespaces.items())]
    blocks: list[str] = []
    for subject, by_predicate in _group(statements).items():
        predicate_parts = []
        for predicate, grouped in by_predicate.items():
            objects = ", ".join(_format_object(s, namespaces) for s in grouped)
            predicate_parts.append(f"{_format_compact(predicate, namespaces)} {objects}")
        blocks.append(f"{_format_compact(subject, namespaces)} " + " ;\n    ".join(predicate_parts) + " .")
    return "\n".join(prefix_lines) + "\n\n" + "\n\n".join(blocks) + "\n"


def to_ntriples(statements: Iterable[Statement]) -> str:
    """Encode one fully-qualified ``subject predicate object .`` line per statement."""

    lines = [
        f"{_format_iri(s.subject)} {_format_iri(s.predicate)} {_format_object(s, None)} ."
        for s in statements
    ]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _json_value(value: Any) -> Any:
    if isinstance(value, (bool, int, float, str)) or value is None:
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def _node_value(statement: Statement) -> dict[str, Any]:
    if not statement.object_is_literal:
        return {"@id": statement.object}
    value: dict[str, Any] = {"@value": _json_value(statement.object)}
    if statement.language:
        value["@language"] = statement.language
    if statement.datatype:
        value["@type"] = statement.datatype
    return value


def to_jsonld_document(
    statements: Iterable[Statement], context: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Build the JSON graph document as a plain ``dict``."""

    nodes: dict[str, dict[str, Any]] = {}
    for statement in statements:
        node = nodes.setdefault(statement.subject, {"@id": statement.subject})
        value = _node_value(statement)
        existing = node.get(statement.predicate)
        if existing is None:
            node[statement.predicate] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            node[statement.predicate] = [existing, value]
    return {"@context": dict(context or {}), "@graph": list(nodes.values())}


def to_jsonld(statements: Iterable[Statement], context: Mapping[str, str] | None = None) -> str:
    """Encode statements as a JSON graph document.

    Raises :class:`~tripleForge.errors.SerializationError` when a value cannot
    be represented in JSON.
    """

    document = to_jsonld_document(statements, context)
    try:
        return json.dumps(document, ensure_ascii=False, indent=2, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode graph as JSON: {exc}") from exc


__all__ = [
    "escape_string",
    "format_literal",
    "to_turtle",
    "to_ntriples",
    "to_jsonld_document",
    "to_jsonld",
]
