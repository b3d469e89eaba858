"""Graph model, codecs, entailment and SPARQL helpers."""

__all__ = [
    "Statement",
    "Graph",
    "serialize",
    "parse",
    "guess_format",
    "infer",
    "run_inference",
    "SPARQLClient",
]

from .statement import Statement
from .graph import Graph
from .formats import serialize, parse, guess_format
from .inference import infer, run_inference
from .sparql import SPARQLClient
