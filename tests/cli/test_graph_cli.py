from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from tripleForge import __version__
from tripleForge.cli import cli
from tripleForge.kg.formats import parse
from tripleForge.kg.namespaces import RDF, RDFS


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_lower_writes_turtle(people_definitions: Path, tmp_path: Path) -> None:
    out = tmp_path / "people.ttl"
    result = CliRunner().invoke(cli, ["lower", str(people_definitions), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Wrote" in result.output
    text = out.read_text(encoding="utf-8")
    assert "@prefix people: <http://example.org/people> ." in text
    graph = parse(text, "turtle")
    assert graph.find_one("http://example.org/people/Person", RDF.type).object == RDFS.Class


def test_lower_with_inference(people_definitions: Path, tmp_path: Path) -> None:
    out = tmp_path / "people.nt"
    result = CliRunner().invoke(cli, ["lower", str(people_definitions), "--infer", "-f", "nt", "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Inferred" in result.output
    graph = parse(out.read_text(encoding="utf-8"), "ntriples")
    alice = "http://example.org/people/alice"
    assert graph.find_one(alice, RDF.type, "http://example.org/people/Agent") is not None


def test_lower_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["lower", str(tmp_path / "missing.yml")])
    assert result.exit_code != 0
    assert "not found" in result.output


def test_lower_strict_characteristics(tmp_path: Path) -> None:
    definitions = tmp_path / "bad.yml"
    definitions.write_text(
        "owl:\n  properties:\n    - name: age\n      kind: datatype\n      transitive: true\n",
        encoding="utf-8",
    )
    loose = CliRunner().invoke(cli, ["lower", str(definitions), "--base-uri", "http://ex.org/"])
    assert loose.exit_code == 0, loose.output
    assert "TransitiveProperty" not in loose.output
    strict = CliRunner().invoke(
        cli, ["lower", str(definitions), "--base-uri", "http://ex.org/", "--strict-characteristics"]
    )
    assert strict.exit_code != 0
    assert "only applies to object properties" in strict.output


def test_convert_turtle_to_jsonld(fixtures_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "sample.jsonld"
    result = CliRunner().invoke(cli, ["convert", str(fixtures_dir / "sample.ttl"), "--to", "jsonld", "-o", str(out)])
    assert result.exit_code == 0, result.output
    document = json.loads(out.read_text(encoding="utf-8"))
    assert document["@context"]["ex"] == "http://example.org/"
    assert {node["@id"] for node in document["@graph"]} == {
        "http://example.org/Student",
        "http://example.org/Person",
        "http://example.org/alice",
    }


def test_convert_with_rdflib(fixtures_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "sample.nt"
    result = CliRunner().invoke(
        cli, ["convert", str(fixtures_dir / "sample.ttl"), "--to", "nt", "--rdflib", "-o", str(out)]
    )
    assert result.exit_code == 0, result.output
    assert len(out.read_text(encoding="utf-8").splitlines()) == 4


def test_convert_strict_rejects_malformed(tmp_path: Path) -> None:
    source = tmp_path / "bad.nt"
    source.write_text("<http://ex.org/a> <http://ex.org/p> .\n", encoding="utf-8")
    lenient = CliRunner().invoke(cli, ["convert", str(source), "--to", "ttl"])
    assert lenient.exit_code == 0
    strict = CliRunner().invoke(cli, ["convert", str(source), "--to", "ttl", "--strict"])
    assert strict.exit_code != 0
    assert "Malformed" in strict.output


def test_convert_unknown_suffix(tmp_path: Path) -> None:
    source = tmp_path / "graph.txt"
    source.write_text("", encoding="utf-8")
    result = CliRunner().invoke(cli, ["convert", str(source), "--to", "ttl"])
    assert result.exit_code != 0
    assert "Cannot infer a graph format" in result.output


def test_infer_keeps_input_format(fixtures_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "closed.ttl"
    result = CliRunner().invoke(cli, ["infer", str(fixtures_dir / "sample.ttl"), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Inferred 2 statements in 3 rounds" in result.output
    graph = parse(out.read_text(encoding="utf-8"), "turtle")
    assert graph.find_one("http://example.org/alice", RDF.type, "http://example.org/Agent") is not None


def test_infer_round_cap(fixtures_dir: Path) -> None:
    result = CliRunner().invoke(cli, ["infer", str(fixtures_dir / "sample.ttl"), "--max-rounds", "1"])
    assert result.exit_code != 0
    assert "did not reach a fixpoint" in result.output


def test_stats(fixtures_dir: Path) -> None:
    result = CliRunner().invoke(cli, ["stats", str(fixtures_dir / "sample.nt")])
    assert result.exit_code == 0, result.output
    assert "rdf:type" in result.output
    assert "statements: 2, subjects: 1" in result.output


def test_check_reports_violations(people_definitions: Path, tmp_path: Path) -> None:
    unlabeled = tmp_path / "unlabeled.nt"
    unlabeled.write_text(
        "<http://example.org/Thing> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> "
        "<http://www.w3.org/2002/07/owl#Class> .\n",
        encoding="utf-8",
    )
    failing = CliRunner().invoke(cli, ["check", str(unlabeled)])
    assert failing.exit_code != 0
    assert "classes_without_labels: 1" in failing.output
    assert "Integrity violations detected" in failing.output

    lowered = tmp_path / "people.ttl"
    CliRunner().invoke(cli, ["lower", str(people_definitions), "-o", str(lowered)])
    passing = CliRunner().invoke(cli, ["check", str(lowered)])
    assert passing.exit_code == 0, passing.output
    assert "classes_without_labels: 0" in passing.output
    assert "Integrity checks passed" in passing.output


def test_config_file_sets_defaults(fixtures_dir: Path, tmp_path: Path) -> None:
    config = tmp_path / "settings.yml"
    config.write_text("default_format: ntriples\nmax_inference_rounds: 1\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(config), "infer", str(fixtures_dir / "sample.ttl")])
    assert result.exit_code != 0
    assert "did not reach a fixpoint within 1 rounds" in result.output
