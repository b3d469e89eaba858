from __future__ import annotations

"""Build definition records from YAML (or any plain mapping).

Document shape::

    base_uri: http://example.org/people/
    prefix: people
    ontology: {uri: ..., version: ..., imports: [...]}
    rdfs:
      classes: [...]
      properties: [...]
    owl:
      classes: [...]
      properties: [...]
      individuals: [...]
      restrictions: [...]

Reference lists accept bare identifier strings or mappings holding the
reference field (``class_uri``, ``property_uri``, ``individual_uri``) or
``uri``.
"""

from dataclasses import fields
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

import yaml

from tripleForge.errors import DefinitionError

from .entities import (
    CHARACTERISTICS,
    ClassDefinition,
    ClassMember,
    DifferentFrom,
    DisjointClass,
    EquivalentClass,
    EquivalentProperty,
    Import,
    Individual,
    InverseProperty,
    Ontology,
    OntologyDocument,
    PropertyAssertion,
    PropertyDefinition,
    RdfsClass,
    RdfsProperty,
    Restriction,
    SameAs,
    SubclassOf,
    SubpropertyOf,
    Type,
)

Converter = Callable[[Any, str], Any]

_KIND_ALIASES = {
    "object": "object_property",
    "datatype": "datatype_property",
    "annotation": "annotation_property",
}


def _as_list(value: Any, where: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (str, Mapping)):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise DefinitionError(f"{where}: expected a list, got {type(value).__name__}")


def _references(ref_cls: type) -> Converter:
    field_name = fields(ref_cls)[0].name

    def convert(value: Any, where: str) -> tuple:
        refs = []
        for index, item in enumerate(_as_list(value, where)):
            if isinstance(item, Mapping):
                item = item.get(field_name) or item.get("uri")
            if not isinstance(item, str) or not item:
                raise DefinitionError(f"{where}[{index}]: expected an identifier")
            refs.append(ref_cls(item))
        return tuple(refs)

    return convert


def _record(cls: type, raw: Any, where: str, converters: Mapping[str, Converter] | None = None) -> Any:
    if not isinstance(raw, Mapping):
        raise DefinitionError(f"{where}: expected a mapping, got {type(raw).__name__}")
    converters = converters or {}
    allowed = {f.name for f in fields(cls)}
    unknown = sorted(str(key) for key in raw if key not in allowed)
    if unknown:
        raise DefinitionError(f"{where}: unknown field(s) {', '.join(unknown)}")
    values = {}
    for key, value in raw.items():
        converter = converters.get(key)
        values[key] = converter(value, f"{where}.{key}") if converter else value
    try:
        return cls(**values)
    except (TypeError, ValueError) as exc:
        raise DefinitionError(f"{where}: {exc}") from exc


def _assertions(value: Any, where: str) -> tuple:
    return tuple(
        _record(PropertyAssertion, item, f"{where}[{index}]")
        for index, item in enumerate(_as_list(value, where))
    )


def _ontology(raw: Any) -> Ontology:
    return _record(Ontology, raw, "ontology", {"imports": _references(Import)})


def _property_definition(raw: Any, where: str) -> PropertyDefinition:
    if isinstance(raw, Mapping):
        raw = dict(raw)
        if "type" in raw and "kind" not in raw:
            raw["kind"] = raw.pop("type")
        if isinstance(raw.get("kind"), str):
            raw["kind"] = _KIND_ALIASES.get(raw["kind"], raw["kind"])
        for flag in _as_list(raw.pop("characteristics", None), f"{where}.characteristics"):
            if flag not in CHARACTERISTICS:
                raise DefinitionError(f"{where}: unknown characteristic '{flag}'")
            raw[flag] = True
    return _record(
        PropertyDefinition,
        raw,
        where,
        {"equivalent_to": _references(EquivalentProperty), "inverse_of": _references(InverseProperty)},
    )


def _individual(raw: Any, where: str) -> Individual:
    if isinstance(raw, Mapping) and "assertions" in raw:
        raw = dict(raw)
        raw["property_assertions"] = raw.pop("assertions")
    return _record(
        Individual,
        raw,
        where,
        {
            "types": _references(Type),
            "same_as": _references(SameAs),
            "different_from": _references(DifferentFrom),
            "property_assertions": _assertions,
        },
    )


def _section(data: Mapping[str, Any], name: str, keys: Iterable[str]) -> Mapping[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise DefinitionError(f"{name}: expected a mapping, got {type(section).__name__}")
    unknown = sorted(str(key) for key in section if key not in keys)
    if unknown:
        raise DefinitionError(f"{name}: unknown section(s) {', '.join(unknown)}")
    return section


def definitions_from_mapping(data: Mapping[str, Any]) -> OntologyDocument:
    """Convert a parsed definition document into an :class:`OntologyDocument`."""

    if not isinstance(data, Mapping):
        raise DefinitionError(f"Definition document must be a mapping, got {type(data).__name__}")
    unknown = sorted(str(key) for key in data if key not in {"base_uri", "prefix", "ontology", "rdfs", "owl"})
    if unknown:
        raise DefinitionError(f"Unknown top-level key(s): {', '.join(unknown)}")

    rdfs = _section(data, "rdfs", ("classes", "properties"))
    owl = _section(data, "owl", ("classes", "properties", "individuals", "restrictions"))

    def each(section: Mapping[str, Any], key: str, build: Callable[[Any, str], Any]) -> list[Any]:
        return [build(item, f"{key}[{index}]") for index, item in enumerate(_as_list(section.get(key), key))]

    definitions: list[Any] = []
    if data.get("ontology") is not None:
        definitions.append(_ontology(data["ontology"]))
    definitions += each(
        rdfs, "classes", lambda raw, where: _record(RdfsClass, raw, f"rdfs.{where}", {"subclass_of": _references(SubclassOf)})
    )
    definitions += each(
        rdfs,
        "properties",
        lambda raw, where: _record(RdfsProperty, raw, f"rdfs.{where}", {"subproperty_of": _references(SubpropertyOf)}),
    )
    definitions += each(
        owl,
        "classes",
        lambda raw, where: _record(
            ClassDefinition,
            raw,
            f"owl.{where}",
            {
                "equivalent_to": _references(EquivalentClass),
                "disjoint_with": _references(DisjointClass),
                "intersection_of": _references(ClassMember),
                "union_of": _references(ClassMember),
                "complement_of": _references(ClassMember),
            },
        ),
    )
    definitions += each(owl, "properties", lambda raw, where: _property_definition(raw, f"owl.{where}"))
    definitions += each(owl, "individuals", lambda raw, where: _individual(raw, f"owl.{where}"))
    definitions += each(owl, "restrictions", lambda raw, where: _record(Restriction, raw, f"owl.{where}"))

    base_uri = data.get("base_uri")
    prefix = data.get("prefix")
    for key, value in (("base_uri", base_uri), ("prefix", prefix)):
        if value is not None and not isinstance(value, str):
            raise DefinitionError(f"{key}: expected a string, got {type(value).__name__}")
    return OntologyDocument(base_uri=base_uri, prefix=prefix, definitions=tuple(definitions))


def load_definitions(path: str | Path) -> OntologyDocument:
    """Read a YAML (or JSON) definition file."""

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DefinitionError(f"Invalid definition file {path}: {exc}") from exc
    return definitions_from_mapping(data or {})


__all__ = ["definitions_from_mapping", "load_definitions"]
