from __future__ import annotations

"""Lowering for RDFS classes and properties."""

from tripleForge.kg.namespaces import RDF, RDFS
from tripleForge.kg.statement import Statement

from .entities import RdfsClass, RdfsProperty
from .uris import entity_uri, expand, reference_uri


def lower_rdfs_class(entity: RdfsClass, base_uri: str | None = None, options=None) -> list[Statement]:
    uri = entity_uri(entity, base_uri)
    statements = [Statement(uri, RDF.type, RDFS.Class)]
    if entity.label:
        statements.append(Statement(uri, RDFS.label, entity.label))
    if entity.comment:
        statements.append(Statement(uri, RDFS.comment, entity.comment))
    if entity.see_also:
        statements.append(Statement(uri, RDFS.seeAlso, expand(entity.see_also, base_uri)))
    statements.extend(
        Statement(uri, RDFS.subClassOf, reference_uri(parent, base_uri)) for parent in entity.subclass_of
    )
    return statements


def lower_rdfs_property(entity: RdfsProperty, base_uri: str | None = None, options=None) -> list[Statement]:
    uri = entity_uri(entity, base_uri)
    statements = [Statement(uri, RDF.type, RDF.Property)]
    if entity.domain:
        statements.append(Statement(uri, RDFS.domain, expand(entity.domain, base_uri)))
    if entity.range:
        statements.append(Statement(uri, RDFS.range, expand(entity.range, base_uri)))
    if entity.label:
        statements.append(Statement(uri, RDFS.label, entity.label))
    if entity.comment:
        statements.append(Statement(uri, RDFS.comment, entity.comment))
    statements.extend(
        Statement(uri, RDFS.subPropertyOf, reference_uri(parent, base_uri)) for parent in entity.subproperty_of
    )
    return statements


__all__ = ["lower_rdfs_class", "lower_rdfs_property"]
