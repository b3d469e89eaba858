from __future__ import annotations

import pytest

from tripleForge.errors import LoweringError
from tripleForge.kg.namespaces import OWL, RDF, RDFS, XSD
from tripleForge.kg.statement import Statement
from tripleForge.ontology.entities import DifferentFrom, Individual, PropertyAssertion, SameAs, Type
from tripleForge.ontology.individuals import assertion_value, lower_individual

BASE = "http://example.org/people/"
ALICE = BASE + "alice"


def test_named_individual_with_links():
    entity = Individual(
        name="alice",
        types=(Type("Person"),),
        label="Alice",
        same_as=(SameAs("http://dbpedia.org/resource/Alice"),),
        different_from=(DifferentFrom("bob"),),
    )
    assert lower_individual(entity, BASE) == [
        Statement(ALICE, RDF.type, OWL.NamedIndividual),
        Statement(ALICE, RDF.type, BASE + "Person"),
        Statement(ALICE, RDFS.label, "Alice"),
        Statement(ALICE, OWL.sameAs, "http://dbpedia.org/resource/Alice"),
        Statement(ALICE, OWL.differentFrom, BASE + "bob"),
    ]


def test_assertion_value_priority():
    assert assertion_value(PropertyAssertion("age", "30", datatype="xsd:integer", language="en")) == (
        "30",
        XSD.integer,
        None,
    )
    assert assertion_value(PropertyAssertion("name", "Alice", language="en")) == ("Alice", None, "en")
    assert assertion_value(PropertyAssertion("knows", BASE + "bob")) == (BASE + "bob", None, None)


def test_positive_assertions():
    entity = Individual(
        name="alice",
        property_assertions=(
            PropertyAssertion("knows", BASE + "bob"),
            PropertyAssertion("name", "Alice", language="en"),
            PropertyAssertion("age", 30, datatype="xsd:integer"),
        ),
    )
    statements = lower_individual(entity, BASE)[1:]
    assert statements == [
        Statement(ALICE, BASE + "knows", BASE + "bob"),
        Statement(ALICE, BASE + "name", "Alice", language="en"),
        Statement(ALICE, BASE + "age", 30, datatype=XSD.integer),
    ]
    assert not statements[0].object_is_literal


def test_negative_assertion_with_individual_target():
    entity = Individual(name="alice", property_assertions=(PropertyAssertion("knows", BASE + "carol", negative=True),))
    node = "_:neg_alice_knows"
    assert lower_individual(entity, BASE)[1:] == [
        Statement(node, RDF.type, OWL.NegativePropertyAssertion),
        Statement(node, OWL.sourceIndividual, ALICE),
        Statement(node, OWL.assertionProperty, BASE + "knows"),
        Statement(node, OWL.targetIndividual, BASE + "carol"),
    ]


def test_negative_assertion_with_literal_target():
    entity = Individual(
        name="alice",
        property_assertions=(PropertyAssertion("age", "40", datatype=XSD.integer, negative=True),),
    )
    last = lower_individual(entity, BASE)[-1]
    assert last == Statement("_:neg_alice_age", OWL.targetValue, "40", datatype=XSD.integer)


def test_repeated_negative_assertion_is_rejected():
    entity = Individual(
        name="john",
        property_assertions=(
            PropertyAssertion("hasAge", "30", datatype=XSD.integer, negative=True),
            PropertyAssertion("hasAge", "31", datatype=XSD.integer, negative=True),
            PropertyAssertion("hasAge", "32", datatype=XSD.integer),
        ),
    )
    with pytest.raises(LoweringError, match="hasAge"):
        lower_individual(entity, BASE)


def test_negative_assertions_on_distinct_properties():
    entity = Individual(
        name="john",
        property_assertions=(
            PropertyAssertion("hasAge", "30", datatype=XSD.integer, negative=True),
            PropertyAssertion("knows", BASE + "mary", negative=True),
        ),
    )
    nodes = {s.subject for s in lower_individual(entity, BASE) if s.subject.startswith("_:")}
    assert nodes == {"_:neg_john_hasAge", "_:neg_john_knows"}
