from __future__ import annotations

"""Immutable RDF statement value type and literal helpers."""

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from .iri import is_resource, resolve
from .namespaces import XSD


@dataclass(frozen=True)
class Statement:
    """A single subject-predicate-object fact.

    ``object`` holds either an identifier (absolute URI or blank-node label) or
    a literal scalar. A literal carries at most one of ``datatype`` and
    ``language``; neither means a plain text literal. ``graph`` optionally names
    the graph the statement belongs to.

    Dataclass equality compares every field. Use :meth:`matches` for the
    subject/predicate/object comparison used when removing statements.
    """

    subject: str
    predicate: str
    object: Any
    datatype: str | None = None
    language: str | None = None
    graph: str | None = None

    def __post_init__(self) -> None:
        if self.datatype is not None and self.language is not None:
            raise ValueError("A literal may carry a datatype or a language tag, not both")

    @property
    def object_is_literal(self) -> bool:
        if self.datatype is not None or self.language is not None:
            return True
        if not isinstance(self.object, str):
            return True
        return not is_resource(self.object)

    def key(self) -> tuple[str, str, Any]:
        return (self.subject, self.predicate, self.object)

    def matches(self, other: "Statement", *, strict: bool = False) -> bool:
        """Compare by subject/predicate/object, plus datatype/language when ``strict``."""

        if self.key() != other.key():
            return False
        if strict:
            return self.datatype == other.datatype and self.language == other.language
        return True

    def resolve(self, base_uri: str | None, *, objects: bool = False) -> "Statement":
        """Resolve relative identifiers against ``base_uri``.

        Subject, predicate, datatype and graph name are always resolved. A
        relative object is indistinguishable from plain text, so it is only
        resolved when ``objects`` is set and it carries no datatype or language.
        """

        if base_uri is None:
            return self
        obj = self.object
        if objects and isinstance(obj, str) and self.datatype is None and self.language is None:
            obj = resolve(obj, base_uri)
        return replace(
            self,
            subject=resolve(self.subject, base_uri),
            predicate=resolve(self.predicate, base_uri),
            object=obj,
            datatype=resolve(self.datatype, base_uri),
            graph=resolve(self.graph, base_uri),
        )

    def __str__(self) -> str:
        if self.object_is_literal:
            obj = f'"{lexical_form(self.object)}"'
            if self.language:
                obj += f"@{self.language}"
            elif self.datatype:
                obj += f"^^{self.datatype}"
        else:
            obj = self.object
        suffix = f" (graph: {self.graph})" if self.graph else ""
        return f"{self.subject} {self.predicate} {obj}{suffix} ."


def lexical_form(value: Any) -> str:
    """Return the canonical lexical form used when a literal is written out."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def typed_literal(value: Any, datatype: str | None = None) -> tuple[Any, str | None]:
    """Return ``(value, datatype)`` with an XSD datatype inferred for scalars.

    An explicit ``datatype`` always wins. Strings stay plain literals.
    """

    if datatype is not None:
        return value, datatype
    if isinstance(value, bool):
        return value, XSD.boolean
    if isinstance(value, int):
        return value, XSD.integer
    if isinstance(value, Decimal):
        return value, XSD.decimal
    if isinstance(value, float):
        return value, XSD.double
    if isinstance(value, datetime):
        return value, XSD.dateTime
    if isinstance(value, date):
        return value, XSD.date
    return value, None


_INTEGER_TYPES = {
    XSD.integer,
    XSD.int,
    XSD.long,
    XSD.short,
    XSD.byte,
    XSD.nonNegativeInteger,
    XSD.positiveInteger,
    XSD.negativeInteger,
    XSD.nonPositiveInteger,
    XSD.unsignedInt,
    XSD.unsignedLong,
    XSD.unsignedShort,
    XSD.unsignedByte,
}


def literal_to_python(lexical: Any, datatype: str | None) -> Any:
    """Convert a lexical form into a Python value for the common XSD types.

    Values that do not parse, and unknown datatypes, are returned unchanged.
    """

    if datatype is None or not isinstance(lexical, str):
        return lexical
    try:
        if datatype in _INTEGER_TYPES:
            return int(lexical)
        if datatype == XSD.boolean:
            if lexical in ("true", "1"):
                return True
            if lexical in ("false", "0"):
                return False
            return lexical
        if datatype == XSD.decimal:
            return Decimal(lexical)
        if datatype in (XSD.double, XSD.float):
            return float(lexical)
        if datatype == XSD.dateTime:
            return datetime.fromisoformat(lexical.replace("Z", "+00:00"))
        if datatype == XSD.date:
            return date.fromisoformat(lexical)
    except (ValueError, InvalidOperation):
        return lexical
    return lexical


__all__ = ["Statement", "lexical_form", "typed_literal", "literal_to_python"]
