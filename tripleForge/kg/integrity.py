from __future__ import annotations

"""Sanity checks over lowered ontology graphs, run locally through rdflib.

Each check is a ``SELECT (COUNT(...) AS ?count)`` query; a non-zero count is a
violation.
"""

from dataclasses import dataclass
from typing import Dict, List

import rdflib

from .graph import Graph
from .rdflib_bridge import to_rdflib


@dataclass
class IntegrityIssue:
    name: str
    count: int
    query: str

    @property
    def ok(self) -> bool:
        return self.count == 0


_PREFIXES = """
PREFIX rdf: <http://www.w3.org/1999/02/22-rdf-syntax-ns#>
PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>
PREFIX owl: <http://www.w3.org/2002/07/owl#>
""".strip()

QUERIES: Dict[str, str] = {
    "classes_without_labels": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?cls) AS ?count)
WHERE {
  { ?cls a owl:Class } UNION { ?cls a rdfs:Class }
  FILTER(isIRI(?cls))
  FILTER NOT EXISTS { ?cls rdfs:label ?label }
}
""",
    "properties_without_domain": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?prop) AS ?count)
WHERE {
  { ?prop a rdf:Property } UNION { ?prop a owl:ObjectProperty } UNION { ?prop a owl:DatatypeProperty }
  FILTER NOT EXISTS { ?prop rdfs:domain ?domain }
}
""",
    "individuals_without_class": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?ind) AS ?count)
WHERE {
  ?ind a owl:NamedIndividual .
  FILTER NOT EXISTS {
    ?ind a ?cls .
    FILTER(?cls != owl:NamedIndividual)
  }
}
""",
    "restrictions_without_property": _PREFIXES
    + """
SELECT (COUNT(DISTINCT ?restriction) AS ?count)
WHERE {
  ?restriction a owl:Restriction .
  FILTER NOT EXISTS { ?restriction owl:onProperty ?prop }
}
""",
}


def run_checks(graph: Graph | rdflib.Graph, queries: Dict[str, str] | None = None) -> List[IntegrityIssue]:
    """Run every check against ``graph`` in name order."""

    rdf_graph = to_rdflib(graph) if isinstance(graph, Graph) else graph
    checks = []
    for name, query in sorted((queries or QUERIES).items()):
        count = 0
        for row in rdf_graph.query(query):
            if row and len(row) > 0 and row[0] is not None:
                count = int(row[0])
        checks.append(IntegrityIssue(name=name, count=count, query=query))
    return checks


__all__ = ["IntegrityIssue", "QUERIES", "run_checks"]
