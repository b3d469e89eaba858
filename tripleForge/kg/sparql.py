from __future__ import annotations

"""Minimal SPARQL 1.1 protocol client over a pooled ``requests`` session."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from .graph import Graph
from .iri import BLANK_PREFIX
from .parsers import parse_ntriples
from .queries import insert_data
from .statement import literal_to_python

logger = logging.getLogger(__name__)


def _binding_value(term: Dict[str, Any]) -> Any:
    kind = term.get("type")
    value = term.get("value")
    if kind == "bnode":
        return f"{BLANK_PREFIX}{value}"
    if kind in ("literal", "typed-literal"):
        return literal_to_python(value, term.get("datatype"))
    return value


class SPARQLClient:
    """Tiny wrapper around ``requests`` for talking to a SPARQL endpoint."""

    def __init__(
        self,
        endpoint: str = "http://localhost:3030/ds/sparql",
        *,
        update_endpoint: Optional[str] = None,
        timeout: int = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.update_endpoint = update_endpoint or self._derive_update_endpoint(endpoint)
        self.session = session or requests.Session()
        self.timeout = timeout

    def __enter__(self) -> "SPARQLClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get(self, query: str, accept: str) -> requests.Response:
        logger.debug("SPARQL GET %s (%d chars)", self.endpoint, len(query))
        return self.session.get(
            self.endpoint,
            params={"query": query},
            headers={"Accept": accept},
            timeout=self.timeout,
        )

    def select(self, query: str) -> Dict[str, Any]:
        """Execute a ``SELECT`` query and return parsed JSON."""

        resp = self._get(query, "application/sparql-results+json")
        if resp.status_code != 200:
            raise RuntimeError(f"SPARQL SELECT failed: {resp.status_code}")
        try:
            return resp.json()
        except ValueError as exc:
            raise RuntimeError("Invalid JSON from SPARQL endpoint") from exc

    def bindings(self, query: str) -> List[Dict[str, Any]]:
        """Execute a ``SELECT`` and return one ``{variable: value}`` dict per row.

        Literals are converted to Python values for the common XSD datatypes;
        blank nodes come back as ``_:`` labels.
        """

        data = self.select(query)
        rows = data.get("results", {}).get("bindings", [])
        return [{name: _binding_value(term) for name, term in row.items()} for row in rows]

    def ask(self, query: str) -> bool:
        """Execute an ``ASK`` query and return the boolean result."""

        data = self.select(query)
        try:
            return bool(data["boolean"])
        except KeyError as exc:
            raise RuntimeError("Missing boolean result") from exc

    def construct(self, query: str) -> str:
        """Execute a ``CONSTRUCT`` query returning N-Triples."""

        resp = self._get(query, "application/n-triples")
        if resp.status_code != 200:
            raise RuntimeError(f"SPARQL CONSTRUCT failed: {resp.status_code}")
        return resp.text

    def construct_graph(self, query: str, *, name: str | None = None, strict: bool = False) -> Graph:
        """Execute a ``CONSTRUCT`` query and decode the result into a graph."""

        return Graph.new(name=name, statements=parse_ntriples(self.construct(query), strict=strict))

    def update(self, query: str) -> None:
        """Execute a SPARQL ``UPDATE`` statement via POST."""

        if not self.update_endpoint:
            raise RuntimeError("No update endpoint configured for SPARQL client")
        resp = self.session.post(
            self.update_endpoint,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data=urlencode({"update": query}),
            timeout=self.timeout,
        )
        if resp.status_code not in (200, 204):
            raise RuntimeError(f"SPARQL UPDATE failed: {resp.status_code}")

    def insert_graph(self, graph: Graph, graph_name: str | None = None) -> int:
        """Send ``graph`` as an ``INSERT DATA`` update; returns the statement count."""

        if not len(graph):
            return 0
        self.update(insert_data(graph.statements, graph_name))
        logger.info("Inserted %d statements into %s", len(graph), self.update_endpoint)
        return len(graph)

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _derive_update_endpoint(endpoint: str) -> str:
        if endpoint.endswith("/sparql"):
            return endpoint[: -len("/sparql")] + "/update"
        return endpoint + "/update"


__all__ = ["SPARQLClient"]
