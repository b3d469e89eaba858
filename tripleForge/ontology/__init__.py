"""Ontology-definition records and their lowering into statements."""

__all__ = [
    "LoweringOptions",
    "lower",
    "lower_all",
    "lower_to_graph",
    "lower_document",
    "definitions_from_mapping",
    "load_definitions",
]

from .options import LoweringOptions
from .lowering import lower, lower_all, lower_to_graph, lower_document
from .loader import definitions_from_mapping, load_definitions
