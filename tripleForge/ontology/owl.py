from __future__ import annotations

"""Lowering for OWL ontology headers, classes and properties."""

import logging

from tripleForge.errors import LoweringError
from tripleForge.kg.iri import blank_node
from tripleForge.kg.namespaces import DC, OWL, RDF, RDFS, XSD
from tripleForge.kg.statement import Statement

from .entities import ClassDefinition, Ontology, PropertyDefinition, PropertyKind
from .lists import build_rdf_list
from .options import DEFAULT_OPTIONS, LoweringOptions
from .uris import entity_uri, expand, reference_uri

logger = logging.getLogger(__name__)

_PROPERTY_TYPES = {
    PropertyKind.OBJECT: OWL.ObjectProperty,
    PropertyKind.DATATYPE: OWL.DatatypeProperty,
    PropertyKind.ANNOTATION: OWL.AnnotationProperty,
}

# Flag name -> characteristic class, in emission order.
_CHARACTERISTIC_TYPES = {
    "functional": OWL.FunctionalProperty,
    "inverse_functional": OWL.InverseFunctionalProperty,
    "transitive": OWL.TransitiveProperty,
    "symmetric": OWL.SymmetricProperty,
    "asymmetric": OWL.AsymmetricProperty,
    "reflexive": OWL.ReflexiveProperty,
    "irreflexive": OWL.IrreflexiveProperty,
}

OBJECT_ONLY_CHARACTERISTICS = frozenset(_CHARACTERISTIC_TYPES) - {"functional"}


def _deprecated(uri: str) -> Statement:
    return Statement(uri, OWL.deprecated, True, datatype=XSD.boolean)


def lower_ontology(entity: Ontology, base_uri: str | None = None, options=None) -> list[Statement]:
    uri = entity_uri(entity, base_uri)
    statements = [Statement(uri, RDF.type, OWL.Ontology)]
    if entity.version:
        statements.append(Statement(uri, OWL.versionInfo, entity.version))
    if entity.label:
        statements.append(Statement(uri, DC["title"], entity.label))
    if entity.comment:
        statements.append(Statement(uri, DC["description"], entity.comment))
    statements.extend(Statement(uri, OWL.imports, reference_uri(item, base_uri)) for item in entity.imports)
    for predicate, value in (
        (OWL.priorVersion, entity.prior_version),
        (OWL.backwardCompatibleWith, entity.backward_compatible_with),
        (OWL.incompatibleWith, entity.incompatible_with),
    ):
        if value:
            statements.append(Statement(uri, predicate, expand(value, base_uri)))
    return statements


def _set_expression(
    class_uri: str, node: str, operator: str, members: list[str]
) -> list[Statement]:
    head, cells = build_rdf_list(members, node)
    return [
        Statement(node, RDF.type, OWL.Class),
        Statement(class_uri, OWL.equivalentClass, node),
        Statement(node, operator, head),
        *cells,
    ]


def lower_owl_class(entity: ClassDefinition, base_uri: str | None = None, options=None) -> list[Statement]:
    """Lower an OWL class.

    Intersection and union members become an anonymous class linked through
    ``owl:equivalentClass`` whose members are an RDF list. Each complement
    member gets its own anonymous class carrying ``owl:complementOf``.
    """

    uri = entity_uri(entity, base_uri)
    statements = [Statement(uri, RDF.type, OWL.Class)]
    if entity.label:
        statements.append(Statement(uri, RDFS.label, entity.label))
    if entity.comment:
        statements.append(Statement(uri, RDFS.comment, entity.comment))
    statements.extend(
        Statement(uri, OWL.equivalentClass, reference_uri(ref, base_uri)) for ref in entity.equivalent_to
    )
    statements.extend(
        Statement(uri, OWL.disjointWith, reference_uri(ref, base_uri)) for ref in entity.disjoint_with
    )
    if entity.intersection_of:
        members = [reference_uri(ref, base_uri) for ref in entity.intersection_of]
        statements.extend(
            _set_expression(uri, blank_node("intersection", entity.name), OWL.intersectionOf, members)
        )
    if entity.union_of:
        members = [reference_uri(ref, base_uri) for ref in entity.union_of]
        statements.extend(_set_expression(uri, blank_node("union", entity.name), OWL.unionOf, members))
    for index, ref in enumerate(entity.complement_of):
        node = blank_node("complement", entity.name, index)
        statements.extend(
            [
                Statement(node, RDF.type, OWL.Class),
                Statement(uri, OWL.equivalentClass, node),
                Statement(node, OWL.complementOf, reference_uri(ref, base_uri)),
            ]
        )
    if entity.deprecated:
        statements.append(_deprecated(uri))
    return statements


def lower_owl_property(
    entity: PropertyDefinition,
    base_uri: str | None = None,
    options: LoweringOptions | None = None,
) -> list[Statement]:
    """Lower an OWL property.

    Object-only characteristics set on a datatype or annotation property are
    dropped, or rejected when ``options.strict_characteristics`` is set.
    """

    options = options or DEFAULT_OPTIONS
    uri = entity_uri(entity, base_uri)
    statements = [Statement(uri, RDF.type, _PROPERTY_TYPES[entity.kind])]
    if entity.domain:
        statements.append(Statement(uri, RDFS.domain, expand(entity.domain, base_uri)))
    if entity.range:
        statements.append(Statement(uri, RDFS.range, expand(entity.range, base_uri)))
    if entity.label:
        statements.append(Statement(uri, RDFS.label, entity.label))
    if entity.comment:
        statements.append(Statement(uri, RDFS.comment, entity.comment))
    statements.extend(
        Statement(uri, OWL.equivalentProperty, reference_uri(ref, base_uri)) for ref in entity.equivalent_to
    )
    statements.extend(Statement(uri, OWL.inverseOf, reference_uri(ref, base_uri)) for ref in entity.inverse_of)

    for flag in entity.characteristics:
        if flag in OBJECT_ONLY_CHARACTERISTICS and entity.kind is not PropertyKind.OBJECT:
            if options.strict_characteristics:
                raise LoweringError(
                    f"Characteristic '{flag}' only applies to object properties, "
                    f"but {entity.name} is a {entity.kind.value}"
                )
            logger.info("Dropping characteristic %s on %s property %s", flag, entity.kind.value, uri)
            continue
        statements.append(Statement(uri, RDF.type, _CHARACTERISTIC_TYPES[flag]))

    if entity.deprecated:
        statements.append(_deprecated(uri))
    return statements


__all__ = [
    "OBJECT_ONLY_CHARACTERISTICS",
    "lower_ontology",
    "lower_owl_class",
    "lower_owl_property",
]
