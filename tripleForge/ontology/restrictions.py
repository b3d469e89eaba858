from __future__ import annotations

"""Lowering for OWL property restrictions.

A restriction is an anonymous class node ``_:restriction_<name>``. When more
than one cardinality is set only one is emitted (min, then max, then exact);
the same priority applies to the qualified cardinalities. At most one value
constraint is emitted, in the order someValuesFrom, allValuesFrom, hasValue,
hasSelf.
"""

from tripleForge.kg.iri import blank_node, is_absolute
from tripleForge.kg.namespaces import OWL, RDF, XSD
from tripleForge.kg.statement import Statement, typed_literal

from .entities import Restriction
from .uris import expand


def restriction_node(entity: Restriction) -> str:
    return blank_node("restriction", entity.name)


def _count(node: str, predicate: str, value: int) -> Statement:
    return Statement(node, predicate, int(value), datatype=XSD.nonNegativeInteger)


def _first_set(node: str, candidates: tuple[tuple[str, int | None], ...]) -> list[Statement]:
    for predicate, value in candidates:
        if value is not None:
            return [_count(node, predicate, value)]
    return []


def _value_constraint(node: str, entity: Restriction, base_uri: str | None) -> list[Statement]:
    if entity.some_values_from is not None:
        return [Statement(node, OWL.someValuesFrom, expand(entity.some_values_from, base_uri))]
    if entity.all_values_from is not None:
        return [Statement(node, OWL.allValuesFrom, expand(entity.all_values_from, base_uri))]
    if entity.has_value is not None:
        if is_absolute(entity.has_value):
            return [Statement(node, OWL.hasValue, entity.has_value)]
        value, datatype = typed_literal(entity.has_value)
        return [Statement(node, OWL.hasValue, value, datatype=datatype)]
    if entity.has_self:
        return [Statement(node, OWL.hasSelf, True, datatype=XSD.boolean)]
    return []


def lower_restriction(entity: Restriction, base_uri: str | None = None, options=None) -> list[Statement]:
    node = restriction_node(entity)
    statements = [
        Statement(node, RDF.type, OWL.Class),
        Statement(node, RDF.type, OWL.Restriction),
        Statement(node, OWL.onProperty, expand(entity.on_property, base_uri)),
    ]
    statements.extend(
        _first_set(
            node,
            (
                (OWL.minCardinality, entity.min_cardinality),
                (OWL.maxCardinality, entity.max_cardinality),
                (OWL.cardinality, entity.exact_cardinality),
            ),
        )
    )
    if entity.qualified_on_class is not None:
        statements.append(Statement(node, OWL.onClass, expand(entity.qualified_on_class, base_uri)))
        statements.extend(
            _first_set(
                node,
                (
                    (OWL.minQualifiedCardinality, entity.min_qualified_cardinality),
                    (OWL.maxQualifiedCardinality, entity.max_qualified_cardinality),
                    (OWL.qualifiedCardinality, entity.exact_qualified_cardinality),
                ),
            )
        )
    statements.extend(_value_constraint(node, entity, base_uri))
    return statements


__all__ = ["restriction_node", "lower_restriction"]
