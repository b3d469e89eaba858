from __future__ import annotations

"""Console entry point for the ``tripleForge`` command."""

from typing import Any, Sequence

__all__ = ["cli", "main"]


def __getattr__(name: str) -> Any:
    # Importing the command tree pulls in rdflib; defer it until asked for.
    if name != "cli":
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from .__main__ import cli

    return cli


def main(argv: Sequence[str] | None = None) -> None:  # pragma: no cover - console_scripts hook
    from .__main__ import cli

    cli.main(args=list(argv) if argv is not None else None, prog_name="tripleForge")
