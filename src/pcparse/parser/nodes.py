"""Line-level AST nodes produced by the grammar and consumed by the resolver."""

from __future__ import annotations

from dataclasses import dataclass

from pcparse.models import Dependency


@dataclass(frozen=True)
class Comment:
    """A ``#`` line. Carried through the AST but never resolved."""

    text: str


@dataclass(frozen=True)
class Variable:
    """``key = value``"""

    key: str
    value: str


@dataclass(frozen=True)
class Property:
    """``key: value``"""

    key: str
    value: str


@dataclass(frozen=True)
class DependencyList:
    """``Requires: ...`` and friends."""

    key: str
    dependencies: tuple[Dependency, ...]


Node = Comment | Variable | Property | DependencyList
