"""Define classes representing a type hierarchy definition and its type declarations.

A hierarchy definition maps each type name to a declaration such as:

    typeA:
      fulfills: ["typeB[A]"]
      params:
        - {name: A, variance: co}
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Variance(StrEnum):
    """Enumeration of the variances a generic type parameter can declare."""

    CO = "co"
    CONTRA = "contra"
    INV = "inv"


VARIANCE_VALUES = frozenset(v.value for v in Variance)


@dataclass(frozen=True)
class ParamDecl:
    """A generic type parameter declared on a type."""

    name: str
    variance: Variance | str
    """Declared variance; unrecognized values are kept as given rather than rejected."""

    @classmethod
    def from_definition(cls, raw: Any) -> ParamDecl | None:
        """Construct a parameter declaration from its raw definition (or None if unusable)."""
        if isinstance(raw, ParamDecl):
            return raw
        if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
            return None

        variance = raw.get("variance")
        if isinstance(variance, str) and variance in VARIANCE_VALUES:
            return ParamDecl(raw["name"], Variance(variance))
        return ParamDecl(raw["name"], "" if variance is None else str(variance))


def _as_sequence(value: Any) -> Sequence[Any]:
    """Treat lists and tuples as sequences and anything else as an empty sequence."""
    return value if isinstance(value, (list, tuple)) else ()


@dataclass(frozen=True)
class TypeDecl:
    """The declaration of a single type within a type hierarchy."""

    fulfills: tuple[str, ...] = ()
    """Type expressions for the supertypes that this type claims to fulfill."""

    params: tuple[ParamDecl, ...] = ()
    """Generic type parameters declared on this type."""

    @classmethod
    def from_definition(cls, raw: Any) -> TypeDecl:
        """Construct a type declaration from its raw definition.

        Malformed content never raises: a missing or non-mapping declaration is treated as
        empty, non-list `fulfills`/`params` are ignored, and non-string `fulfills` entries
        and unusable parameter declarations are skipped.
        """
        if isinstance(raw, TypeDecl):
            return raw
        if not isinstance(raw, Mapping):
            return TypeDecl()

        fulfills = tuple(f for f in _as_sequence(raw.get("fulfills")) if isinstance(f, str))
        params = (ParamDecl.from_definition(p) for p in _as_sequence(raw.get("params")))
        return TypeDecl(fulfills, tuple(p for p in params if p is not None))

    def to_definition(self) -> dict[str, Any]:
        """Convert the declaration back into its raw (YAML/JSON-compatible) form."""
        definition: dict[str, Any] = {}
        if self.fulfills:
            definition["fulfills"] = list(self.fulfills)
        if self.params:
            definition["params"] = [
                {"name": p.name, "variance": str(p.variance)} for p in self.params
            ]
        return definition


class HierarchyDefinition(Mapping[str, TypeDecl]):
    """A read-only, ordered hierarchy of type declarations keyed by type name.

    Type names are unique by exact string equality, but references between types are
    resolved case-insensitively; when several names differ only by case, the name declared
    first is the one that references resolve to.
    """

    def __init__(
        self,
        decls: Mapping[str, TypeDecl],
        duplicate_keys: Mapping[str, list[Any]] | None = None,
    ) -> None:
        """Initialize the hierarchy from an ordered map of type names to declarations.

        :param decls: Map from each type name to its declaration, in declaration order
        :param duplicate_keys: Raw keys skipped because they named an already declared type
        """
        self._decls: dict[str, TypeDecl] = dict(decls)
        """A map from each declared type name to its declaration (in declaration order)."""

        self.duplicate_keys: dict[str, list[Any]] = dict(duplicate_keys or {})
        """A map from type names to the later raw keys (e.g., `1` after `"1"`) with that name."""

        self._to_canonical: dict[str, str] = {}
        """A map from each lowercased type name to the first declared name with that form."""

        for name in self._decls:
            self._to_canonical.setdefault(name.lower(), name)

    @classmethod
    def from_mapping(cls, raw: Mapping[Any, Any]) -> HierarchyDefinition:
        """Construct a hierarchy from a raw mapping without modifying that mapping.

        Keys are converted to strings, since YAML loads names such as `123` as integers. When
        distinct keys convert to the same name, the first is kept and the rest are recorded in
        `duplicate_keys`.
        """
        if isinstance(raw, HierarchyDefinition):
            return raw

        decls: dict[str, TypeDecl] = {}
        duplicate_keys: dict[str, list[Any]] = {}
        for key, decl in raw.items():
            name = str(key)
            if name in decls:
                duplicate_keys.setdefault(name, []).append(key)
            else:
                decls[name] = TypeDecl.from_definition(decl)

        return cls(decls, duplicate_keys)

    def __getitem__(self, name: str) -> TypeDecl:
        return self._decls[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._decls)

    def __len__(self) -> int:
        return len(self._decls)

    def __repr__(self) -> str:
        return f"HierarchyDefinition({self._decls!r})"

    def resolve(self, name: str) -> str | None:
        """Find the declared type name matching the given name, ignoring case.

        :param name: Type name as written in a reference (e.g., in a `fulfills` entry)
        :return: First declared type name equal to `name` ignoring case, else None
        """
        return self._to_canonical.get(name.lower())

    def case_groups(self) -> list[list[str]]:
        """Group the declared names that differ only by case.

        :return: Groups of two or more names, each in declaration order, ordered by the
            declaration of their first member
        """
        groups: dict[str, list[str]] = {}
        for name in self._decls:
            groups.setdefault(name.lower(), []).append(name)
        return [group for group in groups.values() if len(group) > 1]

    def to_definition(self) -> dict[str, dict[str, Any]]:
        """Convert the hierarchy back into its raw (YAML/JSON-compatible) form."""
        return {name: decl.to_definition() for name, decl in self._decls.items()}
