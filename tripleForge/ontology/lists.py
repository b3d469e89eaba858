from __future__ import annotations

"""RDF collection (``rdf:first``/``rdf:rest``) construction."""

from typing import Sequence

from tripleForge.kg.namespaces import RDF
from tripleForge.kg.statement import Statement


def list_cell(base_id: str, index: int) -> str:
    return f"{base_id}_list_{index}"


def build_rdf_list(members: Sequence[str], base_id: str) -> tuple[str, list[Statement]]:
    """Encode ``members`` as a chain of cells named ``<base_id>_list_<i>``.

    Returns the head identifier and the cell statements. An empty member list
    is ``rdf:nil`` with no statements.
    """

    if not members:
        return RDF.nil, []
    statements: list[Statement] = []
    for index, member in enumerate(members):
        cell = list_cell(base_id, index)
        following = list_cell(base_id, index + 1) if index + 1 < len(members) else RDF.nil
        statements.append(Statement(cell, RDF.first, member))
        statements.append(Statement(cell, RDF.rest, following))
    return list_cell(base_id, 0), statements


__all__ = ["list_cell", "build_rdf_list"]
