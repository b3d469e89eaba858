from __future__ import annotations

import json

from click.testing import CliRunner

from tripleForge.cli import cli

ENDPOINT = "http://localhost:3030/ds/sparql"


def test_query_requires_exactly_one_source() -> None:
    result = CliRunner().invoke(cli, ["query", "--endpoint", ENDPOINT])
    assert result.exit_code == 2
    assert "exactly one" in result.output


def test_query_select_json(requests_mock) -> None:
    requests_mock.get(
        ENDPOINT,
        json={
            "head": {"vars": ["s"]},
            "results": {"bindings": [{"s": {"type": "uri", "value": "http://example.org/a"}}]},
        },
    )
    result = CliRunner().invoke(
        cli, ["query", "--endpoint", ENDPOINT, "--sparql", "SELECT ?s WHERE { ?s ?p ?o }", "--json"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [{"s": "http://example.org/a"}]


def test_query_select_table(requests_mock) -> None:
    requests_mock.get(
        ENDPOINT,
        json={
            "head": {"vars": ["child", "parent"]},
            "results": {
                "bindings": [
                    {
                        "child": {"type": "uri", "value": "http://example.org/Student"},
                        "parent": {"type": "uri", "value": "http://example.org/Person"},
                    }
                ]
            },
        },
    )
    result = CliRunner().invoke(cli, ["query", "--endpoint", ENDPOINT, "--named", "class_hierarchy"])
    assert result.exit_code == 0, result.output
    assert "child" in result.output
    assert "http://example.org/Student" in result.output


def test_query_ask(requests_mock) -> None:
    requests_mock.get(ENDPOINT, json={"boolean": False})
    result = CliRunner().invoke(cli, ["query", "--endpoint", ENDPOINT, "--sparql", "ASK {}", "--form", "ask"])
    assert result.exit_code == 0
    assert result.output == "false\n"


def test_query_construct(requests_mock, tmp_path) -> None:
    requests_mock.get(ENDPOINT, text="<http://example.org/a> <http://example.org/p> <http://example.org/b> .\n")
    out = tmp_path / "result.ttl"
    result = CliRunner().invoke(
        cli,
        ["query", "--endpoint", ENDPOINT, "--sparql", "CONSTRUCT WHERE { ?s ?p ?o }", "--form", "construct", "-o", str(out)],
    )
    assert result.exit_code == 0, result.output
    assert "<http://example.org/a> <http://example.org/p> <http://example.org/b> ." in out.read_text(encoding="utf-8")


def test_query_endpoint_error(requests_mock) -> None:
    requests_mock.get(ENDPOINT, status_code=503)
    result = CliRunner().invoke(cli, ["query", "--endpoint", ENDPOINT, "--sparql", "SELECT * {}"])
    assert result.exit_code == 1
    assert "SPARQL SELECT failed: 503" in result.output
