from __future__ import annotations

"""Standard vocabulary namespaces.

This module is the single source of truth for namespace strings used by graph
construction, the codecs and ontology lowering.
"""

from types import MappingProxyType
from typing import Mapping

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
OWL_NS = "http://www.w3.org/2002/07/owl#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"

# Dublin Core elements, used for ontology titles and descriptions.
DC_NS = "http://purl.org/dc/elements/1.1/"


class Vocabulary(str):
    """Namespace string whose attributes and items expand to plain ``str`` terms.

    Use item access (``DC["title"]``) for local names that collide with ``str``
    methods.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> str:
        if name.startswith("__"):
            raise AttributeError(name)
        return str(self) + name

    def __getitem__(self, key):  # type: ignore[override]
        if isinstance(key, str):
            return str(self) + key
        return str.__getitem__(self, key)


RDF = Vocabulary(RDF_NS)
RDFS = Vocabulary(RDFS_NS)
OWL = Vocabulary(OWL_NS)
XSD = Vocabulary(XSD_NS)
DC = Vocabulary(DC_NS)

# Bindings every graph starts with. Read-only; graphs copy it on construction.
DEFAULT_NAMESPACES: Mapping[str, str] = MappingProxyType(
    {
        "rdf": RDF_NS,
        "rdfs": RDFS_NS,
        "owl": OWL_NS,
        "xsd": XSD_NS,
    }
)

# Prefixes the lowering layer can expand in ``prefix:local`` identifiers.
KNOWN_NAMESPACES: Mapping[str, str] = MappingProxyType({**DEFAULT_NAMESPACES, "dc": DC_NS})

__all__ = [
    "RDF_NS",
    "RDFS_NS",
    "OWL_NS",
    "XSD_NS",
    "DC_NS",
    "Vocabulary",
    "RDF",
    "RDFS",
    "OWL",
    "XSD",
    "DC",
    "DEFAULT_NAMESPACES",
    "KNOWN_NAMESPACES",
]
