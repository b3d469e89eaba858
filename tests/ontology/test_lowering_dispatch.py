from __future__ import annotations

import pytest

from tripleForge.kg.namespaces import DC_NS, RDF, RDFS
from tripleForge.kg.statement import Statement
from tripleForge.ontology import lower, lower_all, lower_to_graph
from tripleForge.ontology.entities import (
    ClassDefinition,
    Individual,
    Ontology,
    PropertyAssertion,
    RdfsClass,
    Restriction,
)

BASE = "http://example.org/people"


def _definitions():
    return [
        Ontology(name="ontology", label="People"),
        RdfsClass(name="Person", label="Person"),
        ClassDefinition(name="Parent", intersection_of=("Person", "HasChild")),
        ClassDefinition(name="Relative", union_of=("Parent", "Child"), complement_of=("Stranger",)),
        Individual(
            name="john",
            types=("Person",),
            property_assertions=(
                PropertyAssertion("knows", BASE + "/mary"),
                PropertyAssertion("hasAge", "30", datatype="xsd:integer", negative=True),
            ),
        ),
        Restriction(name="min_children", on_property="hasChild", min_cardinality=1),
    ]


def test_rdfs_class_scenario():
    statements = lower(RdfsClass(name="Person", label="Person"), BASE)
    assert statements == [
        Statement(BASE + "/Person", RDF.type, RDFS.Class),
        Statement(BASE + "/Person", RDFS.label, "Person"),
    ]


def test_unknown_record_type_is_rejected():
    with pytest.raises(TypeError):
        lower(object(), BASE)


def test_lowering_is_deterministic():
    first = lower_all(_definitions(), BASE)
    assert first == lower_all(_definitions(), BASE)
    blank = [s.subject for s in first if s.subject.startswith("_:")]
    assert blank == [s.subject for s in lower_all(_definitions(), BASE) if s.subject.startswith("_:")]
    assert {
        "_:intersection_Parent",
        "_:union_Relative",
        "_:union_Relative_list_0",
        "_:complement_Relative_0",
        "_:neg_john_hasAge",
        "_:restriction_min_children",
    } <= set(blank)


def test_lower_all_concatenates_in_input_order():
    statements = lower_all(_definitions(), BASE)
    assert statements[0].subject == BASE + "/ontology"
    assert statements[-1].subject == "_:restriction_min_children"


def test_lower_to_graph_binds_prefixes():
    graph = lower_to_graph(_definitions(), BASE, prefix="people", name="people")
    assert graph.name == "people"
    assert graph.namespaces["people"] == BASE
    assert graph.namespaces["dc"] == DC_NS
    assert len(graph) == len(lower_all(_definitions(), BASE))

    bare = lower_to_graph([RdfsClass(name="Person")], BASE)
    assert "dc" not in bare.namespaces
    assert "people" not in bare.namespaces
