"""Define a dataclass representing a parsed type expression (e.g., `typeB[typeC, typeD[E]]`)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


def is_generic_name(name: str) -> bool:
    """Check whether the given type name would be treated as a generic type parameter.

    Any single character (letter, digit, or symbol such as `*`) acts like a generic.
    """
    return len(name) == 1


@dataclass(frozen=True)
class TypeStructure:
    """A nominal type with an ordered list of (possibly nested) type parameters."""

    name: str
    """Base type name, or the name of a generic parameter."""

    params: tuple[TypeStructure, ...] = ()
    """Type expressions bound to the type's parameters (empty if none were given)."""

    def __str__(self) -> str:
        """Render the type expression in its canonical textual form."""
        rendered: list[str] = []
        for node in self.postorder():
            if node.params:
                params = _pop_last(rendered, len(node.params))
                rendered.append(f"{node.name}[{', '.join(params)}]")
            else:
                rendered.append(node.name)
        return rendered[0]

    @property
    def is_generic(self) -> bool:
        """Check whether the base name of this type expression acts like a generic."""
        return is_generic_name(self.name)

    def postorder(self) -> Iterator[TypeStructure]:
        """Yield every type expression in this structure, each after all of its parameters."""
        stack: list[tuple[TypeStructure, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
            else:
                stack.append((node, True))
                stack.extend((p, False) for p in reversed(node.params))

    def lowered(self) -> TypeStructure:
        """Create a copy of this type expression with every name converted to lowercase."""
        built: list[TypeStructure] = []
        for node in self.postorder():
            params = _pop_last(built, len(node.params))
            built.append(TypeStructure(node.name.lower(), tuple(params)))
        return built[0]


def _pop_last(values: list[Any], count: int) -> list[Any]:
    """Remove and return the last `count` values of the given list, in their original order."""
    if count == 0:
        return []
    popped = values[-count:]
    del values[-count:]
    return popped
