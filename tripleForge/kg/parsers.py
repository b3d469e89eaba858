from __future__ import annotations

"""Restricted decoders for the compact, flat-line and JSON graph formats.

These are not grammar-conformant parsers. They read the shapes produced by
:mod:`tripleForge.kg.serializers` (plus flat hand-written statements) and skip
anything else. Pass ``strict=True`` to raise :class:`DecodeError` instead of
skipping. Use :func:`tripleForge.kg.rdflib_bridge.parse_with_rdflib` for
arbitrary documents.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from tripleForge.errors import DecodeError

from .iri import from_qname, is_blank
from .namespaces import RDF
from .statement import Statement, literal_to_python

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"^[ \t]*@prefix\s+([A-Za-z_][\w\-]*|):\s*<([^>]*)>\s*\.[ \t]*(?:#[^\n]*)?$", re.MULTILINE)
_TOKEN_RE = re.compile(
    r"""
    (?P<iri><[^<>\s]*>)
    | (?P<literal>"(?P<text>(?:[^"\\\n]|\\.)*)"
        (?:@(?P<lang>[A-Za-z]+(?:-[A-Za-z0-9]+)*)
          |\^\^(?P<dt><[^<>\s]*>|[A-Za-z_][\w\-]*:[\w\-.]*|:[\w\-.]*))?)
    | (?P<punct>[;,])
    | (?P<term>[^\s;,<>"]+)
    """,
    re.VERBOSE,
)
_UNESCAPE_RE = re.compile(r"\\(u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


@dataclass(frozen=True)
class _Token:
    kind: str
    raw: str
    text: str | None = None
    lang: str | None = None
    datatype: str | None = None


def unescape_string(value: str) -> str:
    """Reverse the encoder escapes, including ``\\uXXXX`` sequences."""

    def _sub(match: re.Match[str]) -> str:
        code = match.group(1)
        if code[0] in "uU" and len(code) > 1:
            return chr(int(code[1:], 16))
        return _SIMPLE_ESCAPES.get(code, code)

    return _UNESCAPE_RE.sub(_sub, value)


def _tokenize(text: str) -> list[_Token] | None:
    tokens: list[_Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos].isspace():
            pos += 1
            continue
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            return None
        kind = match.lastgroup if match.lastgroup in ("iri", "punct", "term") else "literal"
        tokens.append(
            _Token(
                kind=kind,
                raw=match.group(0),
                text=match.group("text"),
                lang=match.group("lang"),
                datatype=match.group("dt"),
            )
        )
        pos = match.end()
    return tokens


def _expand(raw: str, prefixes: Mapping[str, str]) -> str:
    if raw.startswith("<") and raw.endswith(">"):
        return raw[1:-1]
    if is_blank(raw):
        return raw
    if ":" in raw:
        return from_qname(raw, prefixes)
    return raw


def _resource(token: _Token, prefixes: Mapping[str, str]) -> str | None:
    if token.kind == "iri":
        return token.raw[1:-1]
    if token.kind == "term":
        return _expand(token.raw, prefixes)
    return None


def _predicate(token: _Token, prefixes: Mapping[str, str]) -> str | None:
    if token.kind == "term" and token.raw == "a":
        return RDF.type
    return _resource(token, prefixes)


def _object(token: _Token, prefixes: Mapping[str, str]) -> tuple[Any, str | None, str | None] | None:
    if token.kind == "literal":
        value = unescape_string(token.text or "")
        datatype = _expand(token.datatype, prefixes) if token.datatype else None
        return literal_to_python(value, datatype), datatype, token.lang
    resource = _resource(token, prefixes)
    if resource is None:
        return None
    return resource, None, None


def _strip_comments(text: str) -> str:
    """Drop ``#`` comments that start outside IRIs and quoted text."""

    lines = []
    for line in text.splitlines():
        in_iri = in_string = False
        index = 0
        cut = len(line)
        while index < len(line):
            char = line[index]
            if in_string:
                if char == "\\":
                    index += 2
                    continue
                if char == '"':
                    in_string = False
            elif in_iri:
                if char == ">":
                    in_iri = False
            elif char == '"':
                in_string = True
            elif char == "<":
                in_iri = True
            elif char == "#" and (index == 0 or line[index - 1].isspace()):
                cut = index
                break
            index += 1
        lines.append(line[:cut])
    return "\n".join(lines)


def _split_statements(body: str) -> list[str]:
    """Split on ``.`` terminators outside IRIs and quoted text."""

    chunks: list[str] = []
    start = 0
    in_iri = in_string = False
    index = 0
    length = len(body)
    while index < length:
        char = body[index]
        if in_string:
            if char == "\\":
                index += 2
                continue
            if char == '"':
                in_string = False
        elif in_iri:
            if char == ">":
                in_iri = False
        elif char == '"':
            in_string = True
        elif char == "<":
            in_iri = True
        elif char == "." and (index + 1 == length or body[index + 1].isspace()):
            chunks.append(body[start:index])
            start = index + 1
        index += 1
    tail = body[start:]
    if tail.strip():
        chunks.append(tail)
    return chunks


def _parse_compact_chunk(tokens: list[_Token], prefixes: Mapping[str, str]) -> list[Statement] | None:
    if len(tokens) < 3:
        return None
    subject = _resource(tokens[0], prefixes)
    if subject is None:
        return None
    statements: list[Statement] = []
    index = 1
    count = len(tokens)
    while index < count:
        predicate = _predicate(tokens[index], prefixes)
        if predicate is None:
            return None
        index += 1
        while True:
            if index >= count:
                return None
            parsed = _object(tokens[index], prefixes)
            if parsed is None:
                return None
            value, datatype, language = parsed
            statements.append(Statement(subject, predicate, value, datatype=datatype, language=language))
            index += 1
            if index < count and tokens[index].raw == ",":
                index += 1
                continue
            break
        if index < count:
            if tokens[index].raw != ";":
                return None
            index += 1
    return statements


def turtle_prefixes(text: str) -> dict[str, str]:
    """Return the ``@prefix`` declarations found in ``text``."""

    return {prefix: uri for prefix, uri in _PREFIX_RE.findall(text)}


def decode_turtle(text: str, *, strict: bool = False) -> tuple[list[Statement], dict[str, str]]:
    """Decode the compact format into statements plus its prefix table."""

    prefixes = turtle_prefixes(text)
    body = _strip_comments(_PREFIX_RE.sub("", text))
    statements: list[Statement] = []
    for number, chunk in enumerate(_split_statements(body), start=1):
        if not chunk.strip():
            continue
        tokens = _tokenize(chunk)
        parsed = _parse_compact_chunk(tokens, prefixes) if tokens is not None else None
        if parsed is None:
            if strict:
                raise DecodeError(f"Malformed statement #{number}", text=chunk.strip())
            logger.debug("Skipping malformed statement #%d: %r", number, chunk.strip()[:200])
            continue
        statements.extend(parsed)
    return statements, prefixes


def parse_turtle(text: str, *, strict: bool = False) -> list[Statement]:
    return decode_turtle(text, strict=strict)[0]


def _parse_flat_line(line: str) -> Statement | None:
    if not line.endswith("."):
        return None
    tokens = _tokenize(line[:-1])
    if tokens is None or len(tokens) != 3:
        return None
    subject_token, predicate_token, object_token = tokens
    if subject_token.kind == "iri":
        subject = subject_token.raw[1:-1]
    elif subject_token.kind == "term" and is_blank(subject_token.raw):
        subject = subject_token.raw
    else:
        return None
    if predicate_token.kind != "iri":
        return None
    predicate = predicate_token.raw[1:-1]
    if object_token.kind == "term" and not is_blank(object_token.raw):
        return None
    parsed = _object(object_token, {})
    if parsed is None:
        return None
    value, datatype, language = parsed
    return Statement(subject, predicate, value, datatype=datatype, language=language)


def parse_ntriples(text: str, *, strict: bool = False) -> list[Statement]:
    """Decode the flat line format; comment and blank lines are ignored."""

    statements: list[Statement] = []
    for number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        statement = _parse_flat_line(line)
        if statement is None:
            if strict:
                raise DecodeError("Malformed N-Triples line", line=number, text=raw_line)
            logger.debug("Skipping malformed line %d: %r", number, line[:200])
            continue
        statements.append(statement)
    return statements


def _node_statements(node: Any, context: Mapping[str, str]) -> list[Statement] | None:
    if not isinstance(node, dict) or not isinstance(node.get("@id"), str):
        return None
    subject = from_qname(node["@id"], context)
    statements: list[Statement] = []
    for key, raw in node.items():
        if key == "@type":
            types = raw if isinstance(raw, list) else [raw]
            if not all(isinstance(t, str) for t in types):
                return None
            statements.extend(Statement(subject, RDF.type, from_qname(t, context)) for t in types)
            continue
        if key.startswith("@"):
            continue
        predicate = from_qname(key, context)
        for value in raw if isinstance(raw, list) else [raw]:
            statement = _value_statement(subject, predicate, value, context)
            if statement is None:
                return None
            statements.append(statement)
    return statements


def _value_statement(subject: str, predicate: str, value: Any, context: Mapping[str, str]) -> Statement | None:
    if isinstance(value, dict):
        if isinstance(value.get("@id"), str):
            return Statement(subject, predicate, from_qname(value["@id"], context))
        if "@value" in value:
            datatype = value.get("@type")
            language = value.get("@language")
            if datatype is not None and language is not None:
                return None
            datatype = from_qname(datatype, context) if isinstance(datatype, str) else None
            return Statement(
                subject,
                predicate,
                literal_to_python(value["@value"], datatype),
                datatype=datatype,
                language=language if isinstance(language, str) else None,
            )
        return None
    if isinstance(value, (str, int, float, bool)):
        return Statement(subject, predicate, value)
    return None


def decode_jsonld(text: str, *, strict: bool = False) -> tuple[list[Statement], dict[str, str]]:
    """Decode the JSON graph format into statements plus its ``@context``."""

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        if strict:
            raise DecodeError(f"Invalid JSON: {exc.msg}", line=exc.lineno) from exc
        logger.debug("Skipping undecodable JSON document: %s", exc)
        return [], {}

    context: dict[str, str] = {}
    nodes: Iterable[Any]
    if isinstance(document, list):
        nodes = document
    elif isinstance(document, dict):
        raw_context = document.get("@context")
        if isinstance(raw_context, dict):
            context = {k: v for k, v in raw_context.items() if isinstance(v, str)}
        if "@graph" in document:
            nodes = document["@graph"] if isinstance(document["@graph"], list) else []
        else:
            nodes = [document] if "@id" in document else []
    else:
        nodes = []

    statements: list[Statement] = []
    for number, node in enumerate(nodes, start=1):
        parsed = _node_statements(node, context)
        if parsed is None:
            if strict:
                raise DecodeError(f"Malformed graph node #{number}", text=json.dumps(node, default=str)[:200])
            logger.debug("Skipping malformed graph node #%d", number)
            continue
        statements.extend(parsed)
    return statements, context


def parse_jsonld(text: str, *, strict: bool = False) -> list[Statement]:
    return decode_jsonld(text, strict=strict)[0]


__all__ = [
    "unescape_string",
    "turtle_prefixes",
    "decode_turtle",
    "parse_turtle",
    "parse_ntriples",
    "decode_jsonld",
    "parse_jsonld",
]
