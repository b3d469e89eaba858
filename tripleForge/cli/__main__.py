from __future__ import annotations

"""Top-level CLI: lower definitions, convert, close and inspect graphs."""

from collections import Counter
from dataclasses import replace
from pathlib import Path

import click
from tabulate import tabulate

from tripleForge import __version__
from tripleForge.cli.io import FORMAT_CHOICE, read_graph, write_output
from tripleForge.cli.query import query
from tripleForge.config import EngineConfig, load_config
from tripleForge.errors import InferenceLimitError, TripleForgeError
from tripleForge.kg.formats import get_format, guess_format, serialize
from tripleForge.kg.inference import run_inference
from tripleForge.kg.integrity import run_checks
from tripleForge.kg.iri import to_qname
from tripleForge.ontology import LoweringOptions, load_definitions, lower_document
from tripleForge.utils.log_json import JsonLogger

_logger = JsonLogger("cli")


@click.group()
@click.version_option(__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML settings file (defaults to $TRIPLEFORGE_CONFIG).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """tripleForge command line."""

    ctx.obj = load_config(config_path)


def _config(ctx: click.Context) -> EngineConfig:
    return ctx.obj if isinstance(ctx.obj, EngineConfig) else load_config()


def _close(graph, max_rounds: int | None):
    try:
        result = run_inference(graph, max_rounds=max_rounds)
    except InferenceLimitError as exc:
        _logger.warning("inference_limit", details={"rounds": exc.rounds, "statements": len(exc.graph)})
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Inferred {result.added} statements in {result.rounds} rounds", err=True)
    return result


@cli.command()
@click.argument("definitions", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--base-uri", default=None, help="Override the document base URI.")
@click.option("--prefix", default=None, help="Prefix to bind to the base URI.")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Output format.")
@click.option("--infer/--no-infer", default=False, help="Add the entailment closure.")
@click.option("--max-rounds", type=click.IntRange(min=1), default=None, help="Cap on inference rounds.")
@click.option("--strict-characteristics", is_flag=True, default=False, help="Reject object-only flags on other properties.")
@click.option("--out", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_context
def lower(
    ctx: click.Context,
    definitions: Path,
    base_uri: str | None,
    prefix: str | None,
    fmt: str | None,
    infer: bool,
    max_rounds: int | None,
    strict_characteristics: bool,
    out: Path | None,
) -> None:
    """Lower a YAML definition file into a graph."""

    config = _config(ctx)
    if not definitions.exists():
        raise click.ClickException(f"Definition file not found: {definitions}")
    options = LoweringOptions(strict_characteristics=strict_characteristics or config.strict_characteristics)
    try:
        document = load_definitions(definitions)
        document = replace(
            document,
            base_uri=base_uri or document.base_uri or config.base_uri,
            prefix=prefix or document.prefix or config.prefix,
        )
        graph = lower_document(document, options, name=definitions.stem)
        if infer:
            graph = _close(graph, max_rounds or config.max_inference_rounds).graph
        text = serialize(graph, fmt or config.default_format)
    except TripleForgeError as exc:
        _logger.error("lower_failed", details={"file": definitions.name, "error": str(exc)})
        raise click.ClickException(str(exc)) from exc
    _logger.info("lower", details={"definitions": len(document.definitions), "statements": len(graph)})
    write_output(text, out, count=len(graph))


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--to", "to_fmt", type=FORMAT_CHOICE, required=True, help="Output format.")
@click.option("--from", "from_fmt", type=FORMAT_CHOICE, default=None, help="Input format (guessed from suffix).")
@click.option("--strict", is_flag=True, default=False, help="Fail on malformed input instead of skipping it.")
@click.option("--rdflib", "use_rdflib", is_flag=True, default=False, help="Parse the input with rdflib.")
@click.option("--out", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_context
def convert(
    ctx: click.Context,
    input_path: Path,
    to_fmt: str,
    from_fmt: str | None,
    strict: bool,
    use_rdflib: bool,
    out: Path | None,
) -> None:
    """Re-encode a graph file in another format."""

    config = _config(ctx)
    graph = read_graph(input_path, from_fmt, strict=strict or config.strict_decoding, use_rdflib=use_rdflib)
    try:
        text = serialize(graph, to_fmt)
    except TripleForgeError as exc:
        raise click.ClickException(str(exc)) from exc
    _logger.info("convert", format=get_format(to_fmt).name, details={"statements": len(graph)})
    write_output(text, out, count=len(graph))


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Input format (guessed from suffix).")
@click.option("--to", "to_fmt", type=FORMAT_CHOICE, default=None, help="Output format (defaults to the input format).")
@click.option("--max-rounds", type=click.IntRange(min=1), default=None, help="Cap on inference rounds.")
@click.option("--out", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_context
def infer(
    ctx: click.Context,
    input_path: Path,
    fmt: str | None,
    to_fmt: str | None,
    max_rounds: int | None,
    out: Path | None,
) -> None:
    """Add the RDFS entailment closure to a graph file."""

    config = _config(ctx)
    graph = read_graph(input_path, fmt, strict=config.strict_decoding)
    result = _close(graph, max_rounds or config.max_inference_rounds)
    _logger.info("infer", details={"added": result.added, "rounds": result.rounds})
    output_fmt = to_fmt or fmt or guess_format(input_path, default=config.default_format)
    write_output(serialize(result.graph, output_fmt), out, count=len(result.graph))


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Input format (guessed from suffix).")
@click.pass_context
def stats(ctx: click.Context, input_path: Path, fmt: str | None) -> None:
    """Print statement counts per predicate."""

    graph = read_graph(input_path, fmt, strict=_config(ctx).strict_decoding)
    counts = Counter(s.predicate for s in graph)
    rows = [(to_qname(predicate, graph.namespaces), count) for predicate, count in counts.most_common()]
    click.echo(tabulate(rows, headers=["Predicate", "Count"]))
    click.echo(f"statements: {len(graph)}, subjects: {len(graph.subjects())}")


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, default=None, help="Input format (guessed from suffix).")
@click.pass_context
def check(ctx: click.Context, input_path: Path, fmt: str | None) -> None:
    """Run ontology integrity checks; exits non-zero on violations."""

    graph = read_graph(input_path, fmt, strict=_config(ctx).strict_decoding)
    issues = run_checks(graph)
    failed = [issue for issue in issues if issue.count > 0]
    for issue in issues:
        click.echo(f"{issue.name}: {issue.count}")
    if failed:
        _logger.warning("integrity_failed", details={"checks": [issue.name for issue in failed]})
        raise click.ClickException("Integrity violations detected")
    click.echo("Integrity checks passed")


cli.add_command(query)


def main() -> None:  # pragma: no cover - CLI entrypoint
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
