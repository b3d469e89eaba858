from __future__ import annotations

"""``query`` command: run SPARQL against a remote endpoint."""

import json
from pathlib import Path

import click
import requests
from tabulate import tabulate

from tripleForge.cli.io import FORMAT_CHOICE, write_output
from tripleForge.config import EngineConfig, load_config
from tripleForge.errors import TripleForgeError
from tripleForge.kg.formats import serialize
from tripleForge.kg.queries import QUERIES
from tripleForge.kg.sparql import SPARQLClient


def _query_text(sparql: str | None, query_file: Path | None, named: str | None) -> str:
    given = [value for value in (sparql, query_file, named) if value]
    if len(given) != 1:
        raise click.UsageError("Pass exactly one of --sparql, --file or --named.")
    if named:
        return QUERIES[named]
    if query_file:
        if not query_file.exists():
            raise click.ClickException(f"Query file not found: {query_file}")
        return query_file.read_text(encoding="utf-8")
    return sparql or ""


@click.command()
@click.option("--endpoint", default=None, help="SPARQL endpoint (defaults to the configured one).")
@click.option("--sparql", default=None, help="Query text.")
@click.option("--file", "query_file", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.option("--named", type=click.Choice(sorted(QUERIES)), default=None, help="Run a canned query.")
@click.option(
    "--form",
    type=click.Choice(["select", "ask", "construct"]),
    default="select",
    show_default=True,
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print SELECT bindings as JSON.")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default="turtle", show_default=True, help="CONSTRUCT output format.")
@click.option("--out", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_context
def query(
    ctx: click.Context,
    endpoint: str | None,
    sparql: str | None,
    query_file: Path | None,
    named: str | None,
    form: str,
    as_json: bool,
    fmt: str,
    out: Path | None,
) -> None:
    """Run a SPARQL query against an endpoint."""

    config = ctx.obj if isinstance(ctx.obj, EngineConfig) else load_config()
    text = _query_text(sparql, query_file, named)
    with SPARQLClient(endpoint or config.sparql_endpoint, timeout=config.sparql_timeout) as client:
        try:
            if form == "ask":
                output = ("true" if client.ask(text) else "false") + "\n"
            elif form == "construct":
                graph = client.construct_graph(text, strict=config.strict_decoding)
                write_output(serialize(graph, fmt), out, count=len(graph))
                return
            else:
                rows = client.bindings(text)
                if as_json:
                    output = json.dumps(rows, indent=2, default=str) + "\n"
                else:
                    headers = sorted({name for row in rows for name in row})
                    table = [[row.get(name, "") for name in headers] for row in rows]
                    output = tabulate(table, headers=headers) + "\n"
        except (RuntimeError, requests.RequestException, TripleForgeError) as exc:
            raise click.ClickException(str(exc)) from exc
    write_output(output, out)


__all__ = ["query"]
