from __future__ import annotations

"""Shared input/output helpers for CLI commands."""

from pathlib import Path

import click

from tripleForge.errors import TripleForgeError
from tripleForge.kg.formats import guess_format, parse
from tripleForge.kg.graph import Graph
from tripleForge.kg.rdflib_bridge import parse_with_rdflib

FORMAT_CHOICE = click.Choice(["turtle", "ttl", "ntriples", "nt", "jsonld", "json-ld", "json"], case_sensitive=False)


def read_graph(path: Path, fmt: str | None, *, strict: bool = False, use_rdflib: bool = False) -> Graph:
    """Decode ``path``; the format is guessed from its suffix when not given."""

    if not path.exists():
        raise click.ClickException(f"Input file not found: {path}")
    try:
        fmt = fmt or guess_format(path)
        text = path.read_text(encoding="utf-8")
        if use_rdflib:
            return parse_with_rdflib(text, fmt, name=path.stem)
        return parse(text, fmt, strict=strict, name=path.stem)
    except TripleForgeError as exc:
        raise click.ClickException(str(exc)) from exc


def write_output(text: str, out: Path | None, *, count: int | None = None) -> None:
    if out is None:
        click.echo(text, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    summary = f"{count} statements" if count is not None else f"{len(text)} characters"
    click.echo(f"Wrote {summary} to {out}", err=True)


__all__ = ["FORMAT_CHOICE", "read_graph", "write_output"]
