from __future__ import annotations

import pytest

from tripleForge.kg.graph import Graph
from tripleForge.kg.namespaces import DEFAULT_NAMESPACES, RDF, RDFS, XSD
from tripleForge.kg.statement import Statement

EX = "http://example.org/"


@pytest.fixture()
def graph() -> Graph:
    return (
        Graph.new({"ex": EX}, name="people")
        .add_triple(EX + "alice", RDF.type, EX + "Person")
        .add_triple(EX + "alice", RDFS.label, "Alice", language="en")
        .add_triple(EX + "bob", RDF.type, EX + "Person")
    )


def test_new_graph_has_default_namespaces():
    graph = Graph.new()
    assert dict(graph.namespaces) == dict(DEFAULT_NAMESPACES)
    assert len(graph) == 0
    assert graph.name is None


def test_add_returns_new_graph_and_keeps_order(graph):
    extra = Statement(EX + "carol", RDF.type, EX + "Person")
    grown = graph.add(extra)
    assert len(graph) == 3
    assert len(grown) == 4
    assert grown.statements[-1] == extra
    assert grown.name == "people"


def test_find_with_wildcards(graph):
    assert len(graph.find(predicate=RDF.type)) == 2
    assert [s.subject for s in graph.find(obj=EX + "Person")] == [EX + "alice", EX + "bob"]
    assert graph.find(subject=EX + "nobody") == []
    assert len(graph.find()) == 3


def test_find_one(graph):
    found = graph.find_one(subject=EX + "alice", predicate=RDFS.label)
    assert found is not None and found.language == "en"
    assert graph.find_one(subject=EX + "zed") is None


def test_remove_ignores_annotations_by_default(graph):
    target = Statement(EX + "alice", RDFS.label, "Alice")
    assert len(graph.remove(target)) == 2
    assert len(graph.remove(target, strict=True)) == 3
    assert len(graph.remove(Statement(EX + "alice", RDFS.label, "Alice", language="en"), strict=True)) == 2


def test_remove_drops_every_duplicate():
    statement = Statement(EX + "a", EX + "p", 1, datatype=XSD.integer)
    graph = Graph.new().add(statement).add(statement)
    assert len(graph.remove(statement)) == 0


def test_merge_prefers_own_namespace_binding():
    left = Graph.new({"ex": EX}, name="left").add_triple(EX + "a", EX + "p", EX + "b")
    right = Graph.new({"ex": "http://other.org/", "o": "http://other.org/"}).add_triple(
        EX + "c", EX + "p", EX + "d"
    )
    merged = left.merge(right)
    assert merged.namespaces["ex"] == EX
    assert merged.namespaces["o"] == "http://other.org/"
    assert [s.subject for s in merged] == [EX + "a", EX + "c"]
    assert merged.name == "left"


def test_add_namespace_and_resolve():
    graph = Graph.new().add_triple("alice", "knows", "bob").add_namespace("ex", EX)
    assert graph.namespaces["ex"] == EX
    resolved = graph.resolve(EX)
    assert resolved.statements[0].subject == EX + "alice"
    assert resolved.statements[0].object == "bob"
    assert graph.resolve(EX, objects=True).statements[0].object == EX + "bob"


def test_subjects_and_membership(graph):
    assert graph.subjects() == [EX + "alice", EX + "bob"]
    assert Statement(EX + "bob", RDF.type, EX + "Person") in graph
    assert "not a statement" not in graph
