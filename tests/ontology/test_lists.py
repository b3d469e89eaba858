from __future__ import annotations

from tripleForge.kg.namespaces import RDF
from tripleForge.kg.statement import Statement
from tripleForge.ontology.lists import build_rdf_list, list_cell


def test_empty_list_is_nil():
    assert build_rdf_list([], "_:u") == (RDF.nil, [])


def test_cells_chain_to_nil():
    head, statements = build_rdf_list(["http://ex.org/A", "http://ex.org/B"], "_:u")
    assert head == "_:u_list_0" == list_cell("_:u", 0)
    assert statements == [
        Statement("_:u_list_0", RDF.first, "http://ex.org/A"),
        Statement("_:u_list_0", RDF.rest, "_:u_list_1"),
        Statement("_:u_list_1", RDF.first, "http://ex.org/B"),
        Statement("_:u_list_1", RDF.rest, RDF.nil),
    ]
