from __future__ import annotations

"""Dispatch from definition records to their lowering functions."""

import logging
from typing import Callable, Iterable

from tripleForge.kg.graph import Graph
from tripleForge.kg.namespaces import DC_NS
from tripleForge.kg.statement import Statement

from .entities import (
    ClassDefinition,
    Individual,
    Ontology,
    OntologyDocument,
    PropertyDefinition,
    RdfsClass,
    RdfsProperty,
    Restriction,
)
from .individuals import lower_individual
from .options import DEFAULT_OPTIONS, LoweringOptions
from .owl import lower_ontology, lower_owl_class, lower_owl_property
from .rdfs import lower_rdfs_class, lower_rdfs_property
from .restrictions import lower_restriction

logger = logging.getLogger(__name__)

Lowerer = Callable[..., list[Statement]]

LOWERERS: dict[type, Lowerer] = {
    Ontology: lower_ontology,
    RdfsClass: lower_rdfs_class,
    RdfsProperty: lower_rdfs_property,
    ClassDefinition: lower_owl_class,
    PropertyDefinition: lower_owl_property,
    Individual: lower_individual,
    Restriction: lower_restriction,
}


def lower(entity: object, base_uri: str | None = None, options: LoweringOptions | None = None) -> list[Statement]:
    """Lower one definition record into statements."""

    try:
        lowerer = LOWERERS[type(entity)]
    except KeyError:
        raise TypeError(f"No lowering registered for {type(entity).__name__}") from None
    return lowerer(entity, base_uri, options or DEFAULT_OPTIONS)


def lower_all(
    entities: Iterable[object],
    base_uri: str | None = None,
    options: LoweringOptions | None = None,
) -> list[Statement]:
    statements: list[Statement] = []
    for entity in entities:
        statements.extend(lower(entity, base_uri, options))
    return statements


def lower_to_graph(
    entities: Iterable[object],
    base_uri: str | None = None,
    options: LoweringOptions | None = None,
    *,
    prefix: str | None = None,
    name: str | None = None,
) -> Graph:
    """Lower ``entities`` into a new graph.

    ``prefix`` is bound to ``base_uri`` when both are given, and ``dc`` is bound
    when an ontology header is present.
    """

    entities = list(entities)
    namespaces: dict[str, str] = {}
    if prefix and base_uri:
        namespaces[prefix] = base_uri
    if any(isinstance(entity, Ontology) for entity in entities):
        namespaces.setdefault("dc", DC_NS)
    statements = lower_all(entities, base_uri, options)
    logger.debug("Lowered %d definitions into %d statements", len(entities), len(statements))
    return Graph.new(namespaces, name=name, statements=statements)


def lower_document(document: OntologyDocument, options: LoweringOptions | None = None, *, name: str | None = None) -> Graph:
    return lower_to_graph(
        document.definitions,
        document.base_uri,
        options,
        prefix=document.prefix,
        name=name,
    )


__all__ = ["LOWERERS", "lower", "lower_all", "lower_to_graph", "lower_document"]
