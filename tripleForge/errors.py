from __future__ import annotations

"""Exception types shared by the graph engine, codecs and lowering layer."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imported for type checkers only
    from tripleForge.kg.graph import Graph


class TripleForgeError(Exception):
    """Base class for all library errors."""


class DecodeError(TripleForgeError):
    """Raised by a decoder running in strict mode on malformed input."""

    def __init__(self, message: str, *, line: int | None = None, text: str | None = None) -> None:
        self.line = line
        self.text = text
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class SerializationError(TripleForgeError):
    """Raised when a graph cannot be encoded into the requested format."""


class UnsupportedFormatError(TripleForgeError, ValueError):
    """Raised for a serialization format name that is not registered."""


class LoweringError(TripleForgeError):
    """Raised when an ontology definition cannot be lowered into statements."""


class DefinitionError(TripleForgeError, ValueError):
    """Raised when definition input does not have the expected shape."""


class InferenceLimitError(TripleForgeError):
    """Raised when entailment stops at a round cap before reaching the fixpoint."""

    def __init__(self, graph: "Graph", rounds: int) -> None:
        self.graph = graph
        self.rounds = rounds
        super().__init__(
            f"Entailment did not reach a fixpoint within {rounds} rounds "
            f"({len(graph)} statements so far)"
        )


__all__ = [
    "TripleForgeError",
    "DecodeError",
    "SerializationError",
    "UnsupportedFormatError",
    "LoweringError",
    "DefinitionError",
    "InferenceLimitError",
]
