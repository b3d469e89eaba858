from __future__ import annotations

"""Lowering for named individuals and their property assertions."""

from typing import Any

from tripleForge.errors import LoweringError
from tripleForge.kg.iri import blank_node, is_absolute
from tripleForge.kg.namespaces import OWL, RDF, RDFS
from tripleForge.kg.statement import Statement

from .entities import Individual, PropertyAssertion
from .uris import entity_uri, expand, reference_uri


def assertion_value(assertion: PropertyAssertion, base_uri: str | None = None) -> tuple[Any, str | None, str | None]:
    """Return ``(value, datatype, language)`` for an assertion.

    An explicit datatype wins over a language tag; without either, the value
    is a resource when it is an absolute URI and a plain literal otherwise.
    """

    if assertion.datatype:
        return assertion.value, expand(assertion.datatype, base_uri), None
    if assertion.language:
        return assertion.value, None, assertion.language
    return assertion.value, None, None


def _negative_assertion(
    individual: Individual, individual_uri: str, assertion: PropertyAssertion, base_uri: str | None
) -> list[Statement]:
    node = blank_node("neg", individual.name, assertion.property)
    value, datatype, language = assertion_value(assertion, base_uri)
    statements = [
        Statement(node, RDF.type, OWL.NegativePropertyAssertion),
        Statement(node, OWL.sourceIndividual, individual_uri),
        Statement(node, OWL.assertionProperty, expand(assertion.property, base_uri)),
    ]
    if datatype is None and language is None and is_absolute(value):
        statements.append(Statement(node, OWL.targetIndividual, value))
    else:
        statements.append(Statement(node, OWL.targetValue, value, datatype=datatype, language=language))
    return statements


def lower_individual(entity: Individual, base_uri: str | None = None, options=None) -> list[Statement]:
    """Lower a named individual and its property assertions.

    A negative assertion is reified on ``_:neg_<individual>_<property>``, so an
    individual may carry at most one negative assertion per property; a second
    one raises :class:`~tripleForge.errors.LoweringError`.
    """

    negated = [assertion.property for assertion in entity.property_assertions if assertion.negative]
    repeated = sorted({prop for prop in negated if negated.count(prop) > 1})
    if repeated:
        raise LoweringError(
            f"Individual '{entity.name}' has several negative assertions for: {', '.join(repeated)}"
        )
    uri = entity_uri(entity, base_uri)
    statements = [Statement(uri, RDF.type, OWL.NamedIndividual)]
    statements.extend(Statement(uri, RDF.type, reference_uri(ref, base_uri)) for ref in entity.types)
    if entity.label:
        statements.append(Statement(uri, RDFS.label, entity.label))
    if entity.comment:
        statements.append(Statement(uri, RDFS.comment, entity.comment))
    statements.extend(Statement(uri, OWL.sameAs, reference_uri(ref, base_uri)) for ref in entity.same_as)
    statements.extend(
        Statement(uri, OWL.differentFrom, reference_uri(ref, base_uri)) for ref in entity.different_from
    )
    for assertion in entity.property_assertions:
        if assertion.negative:
            statements.extend(_negative_assertion(entity, uri, assertion, base_uri))
            continue
        value, datatype, language = assertion_value(assertion, base_uri)
        statements.append(
            Statement(uri, expand(assertion.property, base_uri), value, datatype=datatype, language=language)
        )
    return statements


__all__ = ["assertion_value", "lower_individual"]
