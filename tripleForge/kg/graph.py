from __future__ import annotations

"""Graph value type: an ordered statement collection plus a namespace table.

Every operation returns a new :class:`Graph`; nothing mutates in place.
Pattern queries are linear scans, which is adequate for the graph sizes this
engine targets (a resource's own schema and instance data).
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from .namespaces import DEFAULT_NAMESPACES
from .statement import Statement


def _namespace_table(overrides: Mapping[str, str] | None = None) -> Mapping[str, str]:
    merged = dict(DEFAULT_NAMESPACES)
    if overrides:
        merged.update(overrides)
    return MappingProxyType(merged)


def _matches(statement: Statement, subject: str | None, predicate: str | None, obj: Any) -> bool:
    return (
        (subject is None or statement.subject == subject)
        and (predicate is None or statement.predicate == predicate)
        and (obj is None or statement.object == obj)
    )


@dataclass(frozen=True)
class Graph:
    """A named or unnamed collection of statements plus prefix bindings."""

    name: str | None = None
    statements: tuple[Statement, ...] = ()
    namespaces: Mapping[str, str] = field(default_factory=_namespace_table)

    @classmethod
    def new(
        cls,
        namespaces: Mapping[str, str] | None = None,
        *,
        name: str | None = None,
        statements: Iterable[Statement] = (),
    ) -> "Graph":
        """Create a graph seeded with the default namespaces merged with ``namespaces``."""

        return cls(name=name, statements=tuple(statements), namespaces=_namespace_table(namespaces))

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __contains__(self, statement: object) -> bool:
        if not isinstance(statement, Statement):
            return False
        return any(existing.matches(statement) for existing in self.statements)

    def add(self, statement: Statement) -> "Graph":
        return replace(self, statements=self.statements + (statement,))

    def add_triple(self, subject: str, predicate: str, obj: Any, **literal: Any) -> "Graph":
        """Append a statement built from its parts; ``literal`` holds datatype/language/graph."""

        return self.add(Statement(subject, predicate, obj, **literal))

    def extend(self, statements: Iterable[Statement]) -> "Graph":
        return replace(self, statements=self.statements + tuple(statements))

    def remove(self, statement: Statement, *, strict: bool = False) -> "Graph":
        """Drop every statement equal to ``statement``.

        By default equality is subject/predicate/object only, so a literal with
        a different datatype or language tag but the same value is removed too.
        Pass ``strict=True`` to also require matching datatype and language.
        """

        kept = tuple(s for s in self.statements if not s.matches(statement, strict=strict))
        return replace(self, statements=kept)

    def find(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: Any = None,
    ) -> list[Statement]:
        """Return statements matching the pattern; ``None`` components are wildcards."""

        return [s for s in self.statements if _matches(s, subject, predicate, obj)]

    def find_one(
        self,
        subject: str | None = None,
        predicate: str | None = None,
        obj: Any = None,
    ) -> Statement | None:
        for statement in self.statements:
            if _matches(statement, subject, predicate, obj):
                return statement
        return None

    def merge(self, other: "Graph") -> "Graph":
        """Concatenate statements; on a prefix conflict this graph's binding wins."""

        namespaces = dict(other.namespaces)
        namespaces.update(self.namespaces)
        return Graph(
            name=self.name,
            statements=self.statements + other.statements,
            namespaces=MappingProxyType(namespaces),
        )

    def add_namespace(self, prefix: str, uri: str) -> "Graph":
        namespaces = dict(self.namespaces)
        namespaces[prefix] = uri
        return replace(self, namespaces=MappingProxyType(namespaces))

    def resolve(self, base_uri: str | None, *, objects: bool = False) -> "Graph":
        """Resolve relative identifiers in every statement against ``base_uri``."""

        resolved = tuple(s.resolve(base_uri, objects=objects) for s in self.statements)
        return replace(self, statements=resolved)

    def subjects(self) -> list[str]:
        """Distinct subjects in first-seen order."""

        return list(dict.fromkeys(s.subject for s in self.statements))


__all__ = ["Graph"]
