from __future__ import annotations

import pytest

from tripleForge.errors import LoweringError
from tripleForge.kg.namespaces import OWL, RDF, RDFS, XSD
from tripleForge.kg.statement import Statement
from tripleForge.ontology.entities import InverseProperty, PropertyDefinition, PropertyKind
from tripleForge.ontology.options import LoweringOptions
from tripleForge.ontology.owl import lower_owl_property

BASE = "http://example.org/people/"


def _types(statements):
    return [s.object for s in statements if s.predicate == RDF.type]


def test_object_property_with_characteristics():
    entity = PropertyDefinition(
        name="hasChild",
        domain="Person",
        range="Person",
        label="has child",
        inverse_of=(InverseProperty("hasParent"),),
        irreflexive=True,
        asymmetric=True,
    )
    statements = lower_owl_property(entity, BASE)
    subject = BASE + "hasChild"
    assert statements == [
        Statement(subject, RDF.type, OWL.ObjectProperty),
        Statement(subject, RDFS.domain, BASE + "Person"),
        Statement(subject, RDFS.range, BASE + "Person"),
        Statement(subject, RDFS.label, "has child"),
        Statement(subject, OWL.inverseOf, BASE + "hasParent"),
        Statement(subject, RDF.type, OWL.AsymmetricProperty),
        Statement(subject, RDF.type, OWL.IrreflexiveProperty),
    ]


def test_kind_selects_property_type():
    datatype = PropertyDefinition(name="age", kind="datatype_property", range="xsd:integer")
    annotation = PropertyDefinition(name="note", kind=PropertyKind.ANNOTATION)
    assert _types(lower_owl_property(datatype, BASE)) == [OWL.DatatypeProperty]
    assert lower_owl_property(datatype, BASE)[1] == Statement(BASE + "age", RDFS.range, XSD.integer)
    assert _types(lower_owl_property(annotation, BASE)) == [OWL.AnnotationProperty]


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        PropertyDefinition(name="x", kind="relation")


def test_functional_applies_to_datatype_properties():
    entity = PropertyDefinition(name="age", kind=PropertyKind.DATATYPE, functional=True)
    assert _types(lower_owl_property(entity, BASE)) == [OWL.DatatypeProperty, OWL.FunctionalProperty]


def test_object_only_characteristics_are_dropped_on_datatype_properties():
    entity = PropertyDefinition(name="age", kind=PropertyKind.DATATYPE, transitive=True, symmetric=True)
    assert _types(lower_owl_property(entity, BASE)) == [OWL.DatatypeProperty]


def test_strict_characteristics_raise():
    entity = PropertyDefinition(name="age", kind=PropertyKind.DATATYPE, transitive=True)
    with pytest.raises(LoweringError):
        lower_owl_property(entity, BASE, LoweringOptions(strict_characteristics=True))


def test_characteristics_follow_canonical_order():
    entity = PropertyDefinition(
        name="p",
        irreflexive=True,
        functional=True,
        transitive=True,
        reflexive=True,
        symmetric=True,
        inverse_functional=True,
        asymmetric=True,
        deprecated=True,
    )
    statements = lower_owl_property(entity, BASE)
    assert _types(statements) == [
        OWL.ObjectProperty,
        OWL.FunctionalProperty,
        OWL.InverseFunctionalProperty,
        OWL.TransitiveProperty,
        OWL.SymmetricProperty,
        OWL.AsymmetricProperty,
        OWL.ReflexiveProperty,
        OWL.IrreflexiveProperty,
    ]
    assert statements[-1] == Statement(BASE + "p", OWL.deprecated, True, datatype=XSD.boolean)
