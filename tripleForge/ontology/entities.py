from __future__ import annotations

"""Read-only ontology-definition records consumed by the lowering layer.

Records are frozen dataclasses; list-valued fields are tuples. Reference
fields accept either the matching reference record or a plain identifier
string. Every named entity carries an optional explicit ``uri``; without one,
its ``name`` is resolved against the enclosing base URI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class ClassReference:
    class_uri: str

    @property
    def uri(self) -> str:
        return self.class_uri


class SubclassOf(ClassReference):
    pass


class EquivalentClass(ClassReference):
    pass


class DisjointClass(ClassReference):
    pass


class ClassMember(ClassReference):
    """Member of an intersection, union or complement expression."""


class Type(ClassReference):
    """Class membership of an individual."""


@dataclass(frozen=True)
class PropertyReference:
    property_uri: str

    @property
    def uri(self) -> str:
        return self.property_uri


class SubpropertyOf(PropertyReference):
    pass


class EquivalentProperty(PropertyReference):
    pass


class InverseProperty(PropertyReference):
    pass


@dataclass(frozen=True)
class IndividualReference:
    individual_uri: str

    @property
    def uri(self) -> str:
        return self.individual_uri


class SameAs(IndividualReference):
    pass


class DifferentFrom(IndividualReference):
    pass


@dataclass(frozen=True)
class Import:
    uri: str


Reference = Union[ClassReference, PropertyReference, IndividualReference, Import, str]


@dataclass(frozen=True)
class Ontology:
    uri: str | None = None
    name: str | None = None
    version: str | None = None
    label: str | None = None
    comment: str | None = None
    imports: Tuple[Import | str, ...] = ()
    prior_version: str | None = None
    backward_compatible_with: str | None = None
    incompatible_with: str | None = None


@dataclass(frozen=True)
class RdfsClass:
    name: str
    uri: str | None = None
    label: str | None = None
    comment: str | None = None
    see_also: str | None = None
    subclass_of: Tuple[SubclassOf | str, ...] = ()


@dataclass(frozen=True)
class RdfsProperty:
    name: str
    uri: str | None = None
    domain: str | None = None
    range: str | None = None
    label: str | None = None
    comment: str | None = None
    subproperty_of: Tuple[SubpropertyOf | str, ...] = ()


@dataclass(frozen=True)
class ClassDefinition:
    """An OWL class, optionally defined by set expressions over other classes."""

    name: str
    uri: str | None = None
    label: str | None = None
    comment: str | None = None
    deprecated: bool = False
    equivalent_to: Tuple[EquivalentClass | str, ...] = ()
    disjoint_with: Tuple[DisjointClass | str, ...] = ()
    intersection_of: Tuple[ClassMember | str, ...] = ()
    union_of: Tuple[ClassMember | str, ...] = ()
    complement_of: Tuple[ClassMember | str, ...] = ()


class PropertyKind(str, Enum):
    OBJECT = "object_property"
    DATATYPE = "datatype_property"
    ANNOTATION = "annotation_property"


CHARACTERISTICS = (
    "functional",
    "inverse_functional",
    "transitive",
    "symmetric",
    "asymmetric",
    "reflexive",
    "irreflexive",
)


@dataclass(frozen=True)
class PropertyDefinition:
    """An OWL object, datatype or annotation property.

    ``functional`` applies to every kind; the other six characteristics only
    apply to object properties.
    """

    name: str
    uri: str | None = None
    kind: PropertyKind = PropertyKind.OBJECT
    domain: str | None = None
    range: str | None = None
    label: str | None = None
    comment: str | None = None
    deprecated: bool = False
    equivalent_to: Tuple[EquivalentProperty | str, ...] = ()
    inverse_of: Tuple[InverseProperty | str, ...] = ()
    functional: bool = False
    inverse_functional: bool = False
    transitive: bool = False
    symmetric: bool = False
    asymmetric: bool = False
    reflexive: bool = False
    irreflexive: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PropertyKind):
            object.__setattr__(self, "kind", PropertyKind(self.kind))

    @property
    def characteristics(self) -> tuple[str, ...]:
        """Names of the characteristic flags that are set, in canonical order."""

        return tuple(flag for flag in CHARACTERISTICS if getattr(self, flag))


@dataclass(frozen=True)
class PropertyAssertion:
    property: str
    value: Any
    datatype: str | None = None
    language: str | None = None
    negative: bool = False


@dataclass(frozen=True)
class Individual:
    name: str
    uri: str | None = None
    types: Tuple[Type | str, ...] = ()
    label: str | None = None
    comment: str | None = None
    same_as: Tuple[SameAs | str, ...] = ()
    different_from: Tuple[DifferentFrom | str, ...] = ()
    property_assertions: Tuple[PropertyAssertion, ...] = ()


@dataclass(frozen=True)
class Restriction:
    """Anonymous class constraining the values or count of ``on_property``."""

    name: str
    on_property: str
    min_cardinality: int | None = None
    max_cardinality: int | None = None
    exact_cardinality: int | None = None
    qualified_on_class: str | None = None
    min_qualified_cardinality: int | None = None
    max_qualified_cardinality: int | None = None
    exact_qualified_cardinality: int | None = None
    some_values_from: str | None = None
    all_values_from: str | None = None
    has_value: Any = None
    has_self: bool = False


Definition = Union[Ontology, RdfsClass, RdfsProperty, ClassDefinition, PropertyDefinition, Individual, Restriction]


@dataclass(frozen=True)
class OntologyDocument:
    """A set of definitions sharing one base URI and optional prefix."""

    base_uri: str | None = None
    prefix: str | None = None
    definitions: Tuple[Definition, ...] = ()


__all__ = [
    "ClassReference",
    "SubclassOf",
    "EquivalentClass",
    "DisjointClass",
    "ClassMember",
    "Type",
    "PropertyReference",
    "SubpropertyOf",
    "EquivalentProperty",
    "InverseProperty",
    "IndividualReference",
    "SameAs",
    "DifferentFrom",
    "Import",
    "Reference",
    "Ontology",
    "RdfsClass",
    "RdfsProperty",
    "ClassDefinition",
    "PropertyKind",
    "CHARACTERISTICS",
    "PropertyDefinition",
    "PropertyAssertion",
    "Individual",
    "Restriction",
    "Definition",
    "OntologyDocument",
]
