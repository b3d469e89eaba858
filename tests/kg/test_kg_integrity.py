from __future__ import annotations

import rdflib

from tripleForge.kg.graph import Graph
from tripleForge.kg.integrity import QUERIES, run_checks
from tripleForge.kg.namespaces import OWL, RDF, RDFS

EX = "http://example.org/"


def test_clean_graph_passes_every_check():
    graph = (
        Graph.new()
        .add_triple(EX + "Person", RDF.type, OWL.Class)
        .add_triple(EX + "Person", RDFS.label, "Person")
        .add_triple(EX + "knows", RDF.type, OWL.ObjectProperty)
        .add_triple(EX + "knows", RDFS.domain, EX + "Person")
        .add_triple(EX + "alice", RDF.type, OWL.NamedIndividual)
        .add_triple(EX + "alice", RDF.type, EX + "Person")
    )
    issues = run_checks(graph)
    assert [issue.name for issue in issues] == sorted(QUERIES)
    assert all(issue.ok for issue in issues)


def test_violations_are_counted():
    graph = (
        Graph.new()
        .add_triple(EX + "Person", RDF.type, RDFS.Class)
        .add_triple(EX + "Agent", RDF.type, OWL.Class)
        .add_triple(EX + "name", RDF.type, RDF.Property)
        .add_triple(EX + "ghost", RDF.type, OWL.NamedIndividual)
        .add_triple("_:r", RDF.type, OWL.Restriction)
    )
    issues = {issue.name: issue.count for issue in run_checks(graph)}
    assert issues["classes_without_labels"] == 2
    assert issues["properties_without_domain"] == 1
    assert issues["individuals_without_class"] == 1
    assert issues["restrictions_without_property"] == 1


def test_accepts_rdflib_graph():
    rdf_graph = rdflib.Graph()
    rdf_graph.add((rdflib.URIRef(EX + "C"), rdflib.RDF.type, rdflib.OWL.Class))
    issues = {issue.name: issue.count for issue in run_checks(rdf_graph)}
    assert issues["classes_without_labels"] == 1
