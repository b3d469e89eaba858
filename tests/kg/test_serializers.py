from __future__ import annotations

import json
import math

import pytest

from tripleForge.errors import SerializationError
from tripleForge.kg.namespaces import DEFAULT_NAMESPACES, RDF, RDFS, XSD
from tripleForge.kg.serializers import (
    escape_string,
    format_literal,
    to_jsonld,
    to_jsonld_document,
    to_ntriples,
    to_turtle,
)
from tripleForge.kg.statement import Statement

EX = "http://example.org/"


def _statements() -> list[Statement]:
    return [
        Statement(EX + "alice", RDF.type, EX + "Person"),
        Statement(EX + "alice", RDFS.label, "Alice", language="en"),
        Statement(EX + "alice", EX + "age", 30, datatype=XSD.integer),
        Statement(EX + "alice", RDF.type, EX + "Agent"),
        Statement(EX + "bob", EX + "knows", "_:friend"),
    ]


def test_escape_string():
    assert escape_string('a "b"\n\tc\\') == 'a \\"b\\"\\n\\tc\\\\'


def test_format_literal_prefers_language():
    assert format_literal("chat", XSD.string, "fr") == '"chat"@fr'
    assert format_literal(5, XSD.integer) == f'"5"^^<{XSD.integer}>'
    assert format_literal(True) == '"true"'


def test_turtle_groups_by_subject_and_predicate():
    namespaces = {**DEFAULT_NAMESPACES, "ex": EX}
    text = to_turtle(_statements(), namespaces)
    assert text.startswith("@prefix ex: <http://example.org/> .\n@prefix owl:")
    assert "ex:alice rdf:type ex:Person, ex:Agent ;" in text
    assert '    rdfs:label "Alice"@en ;' in text
    assert f'    ex:age "30"^^<{XSD.integer}> .' in text
    assert "ex:bob ex:knows _:friend ." in text
    assert text.endswith(" .\n")


def test_turtle_keeps_unsafe_locals_as_full_iris():
    text = to_turtle([Statement(EX + "a/b", EX + "p", EX + "c")], {"ex": EX})
    assert "<http://example.org/a/b> ex:p ex:c ." in text


def test_ntriples_one_line_per_statement():
    text = to_ntriples(_statements())
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[0] == f"<{EX}alice> <{RDF.type}> <{EX}Person> ."
    assert lines[1] == f'<{EX}alice> <{RDFS.label}> "Alice"@en .'
    assert lines[4] == f"<{EX}bob> <{EX}knows> _:friend ."
    assert to_ntriples([]) == ""


def test_jsonld_document_shape():
    document = to_jsonld_document(_statements(), {"ex": EX})
    assert document["@context"] == {"ex": EX}
    alice, bob = document["@graph"]
    assert alice["@id"] == EX + "alice"
    assert alice[RDF.type] == [{"@id": EX + "Person"}, {"@id": EX + "Agent"}]
    assert alice[RDFS.label] == {"@value": "Alice", "@language": "en"}
    assert alice[EX + "age"] == {"@value": 30, "@type": XSD.integer}
    assert bob[EX + "knows"] == {"@id": "_:friend"}


def test_jsonld_text_is_valid_json():
    parsed = json.loads(to_jsonld(_statements()))
    assert len(parsed["@graph"]) == 2


def test_jsonld_rejects_unencodable_values():
    with pytest.raises(SerializationError):
        to_jsonld([Statement(EX + "a", EX + "p", math.nan)])
    with pytest.raises(SerializationError):
        to_jsonld([Statement(EX + "a", EX + "p", object())])
