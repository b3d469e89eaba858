from __future__ import annotations

"""Forward-chaining RDFS entailment.

Four rules are applied once per round in a fixed order until a round adds no
statements. Rules only ever add statements, so the result does not depend on
rule order, only the number of rounds needed to get there.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from tripleForge.errors import InferenceLimitError

from .graph import Graph
from .namespaces import RDF, RDFS
from .statement import Statement

logger = logging.getLogger(__name__)

Rule = Callable[[Graph], Graph]


def _add_new(graph: Graph, candidates: Iterable[Statement]) -> Graph:
    seen = {s.key() for s in graph.statements}
    fresh: list[Statement] = []
    for candidate in candidates:
        key = candidate.key()
        if key in seen:
            continue
        seen.add(key)
        fresh.append(candidate)
    if not fresh:
        return graph
    return graph.extend(fresh)


def _schema_pairs(graph: Graph, predicate: str) -> list[tuple[str, str]]:
    return [
        (s.subject, s.object)
        for s in graph.find(predicate=predicate)
        if not s.object_is_literal
    ]


def apply_subclass_rule(graph: Graph) -> Graph:
    """``(A subClassOf B)`` and ``(X type A)`` entail ``(X type B)``."""

    candidates = [
        Statement(instance.subject, RDF.type, parent)
        for child, parent in _schema_pairs(graph, RDFS.subClassOf)
        for instance in graph.find(predicate=RDF.type, obj=child)
    ]
    return _add_new(graph, candidates)


def apply_subproperty_rule(graph: Graph) -> Graph:
    """``(P subPropertyOf Q)`` and ``(X P Y)`` entail ``(X Q Y)``.

    The literal annotations and graph name of ``(X P Y)`` are carried over.
    """

    candidates = [
        Statement(
            s.subject,
            parent,
            s.object,
            datatype=s.datatype,
            language=s.language,
            graph=s.graph,
        )
        for child, parent in _schema_pairs(graph, RDFS.subPropertyOf)
        for s in graph.find(predicate=child)
    ]
    return _add_new(graph, candidates)


def apply_domain_rule(graph: Graph) -> Graph:
    """``(P domain C)`` and ``(X P Y)`` entail ``(X type C)``."""

    candidates = [
        Statement(s.subject, RDF.type, cls)
        for prop, cls in _schema_pairs(graph, RDFS.domain)
        for s in graph.find(predicate=prop)
    ]
    return _add_new(graph, candidates)


def apply_range_rule(graph: Graph) -> Graph:
    """``(P range C)`` and ``(X P Y)`` entail ``(Y type C)`` unless ``Y`` is a literal."""

    candidates = [
        Statement(s.object, RDF.type, cls)
        for prop, cls in _schema_pairs(graph, RDFS.range)
        for s in graph.find(predicate=prop)
        if not s.object_is_literal
    ]
    return _add_new(graph, candidates)


DEFAULT_RULES: tuple[Rule, ...] = (
    apply_subclass_rule,
    apply_subproperty_rule,
    apply_domain_rule,
    apply_range_rule,
)


@dataclass(frozen=True)
class InferenceResult:
    graph: Graph
    rounds: int
    added: int


def run_inference(
    graph: Graph,
    *,
    rules: Sequence[Rule] = DEFAULT_RULES,
    max_rounds: int | None = None,
) -> InferenceResult:
    """Apply ``rules`` round by round until the statement count stops growing.

    ``max_rounds`` caps the number of rounds; reaching it while the last round
    still added statements raises :class:`InferenceLimitError` carrying the
    partial graph.
    """

    if max_rounds is not None and max_rounds < 1:
        raise ValueError("max_rounds must be at least 1")
    start = len(graph)
    current = graph
    rounds = 0
    while True:
        before = len(current)
        for rule in rules:
            current = rule(current)
        rounds += 1
        added = len(current) - before
        logger.debug("Inference round %d added %d statements", rounds, added)
        if added == 0:
            break
        if max_rounds is not None and rounds >= max_rounds:
            raise InferenceLimitError(current, rounds)
    logger.info(
        "Inference reached fixpoint after %d rounds (%d statements added)",
        rounds,
        len(current) - start,
    )
    return InferenceResult(graph=current, rounds=rounds, added=len(current) - start)


def infer(
    graph: Graph,
    *,
    rules: Sequence[Rule] = DEFAULT_RULES,
    max_rounds: int | None = None,
) -> Graph:
    """Return the entailment closure of ``graph``."""

    return run_inference(graph, rules=rules, max_rounds=max_rounds).graph


__all__ = [
    "Rule",
    "DEFAULT_RULES",
    "InferenceResult",
    "apply_subclass_rule",
    "apply_subproperty_rule",
    "apply_domain_rule",
    "apply_range_rule",
    "run_inference",
    "infer",
]
