"""Data models for parsed pkg-config files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class VersionCompare(str, Enum):
    """Comparator between a required version and the installed one."""

    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    EQUAL = "="
    GREATER_THAN_OR_EQUAL = ">="
    GREATER_THAN = ">"


@dataclass(frozen=True)
class Dependency:
    """A single entry of a Requires/Provides list.

    Attributes:
        identifier: Package name being depended on.
        version_compare: Comparator, only set when one was written.
        version: Version operand, empty for a bare dependency.
    """

    identifier: str
    version_compare: VersionCompare | None = None
    version: str = ""

    @property
    def is_constrained(self) -> bool:
        """Whether the dependency carries a version constraint."""
        return self.version_compare is not None

    def __str__(self) -> str:
        if self.version_compare is None:
            return self.identifier
        return f"{self.identifier} {self.version_compare.value} {self.version}"


def _empty_vars() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Package:
    """The relevant information from a pkg-config file.

    Attributes:
        name: Human readable package name (``Name:``).
        description: One line description (``Description:``).
        version: Package version (``Version:``).
        url: Project URL (``URL:``).
        cflags: Compiler flags (``Cflags:``).
        cflags_private: Compiler flags for static linking (``Cflags.private:``).
        libs: Linker flags (``Libs:``).
        libs_private: Linker flags for static linking (``Libs.private:``).
        vars: Variables defined in the file, after substitution.
        requires: Public dependencies (``Requires:``).
        requires_private: Private dependencies (``Requires.private:``).
        requires_internal: Internal dependencies (``Requires.internal:``).
        provides: Virtual packages provided (``Provides:``).
    """

    name: str = ""
    description: str = ""
    version: str = ""
    url: str = ""
    cflags: str = ""
    cflags_private: str = ""
    libs: str = ""
    libs_private: str = ""
    vars: Mapping[str, str] = field(default_factory=_empty_vars, hash=False)
    requires: tuple[Dependency, ...] = ()
    requires_private: tuple[Dependency, ...] = ()
    requires_internal: tuple[Dependency, ...] = ()
    provides: tuple[Dependency, ...] = ()

    def __post_init__(self) -> None:
        # Copy containers into read-only forms.
        object.__setattr__(self, "vars", MappingProxyType(dict(self.vars)))
        for name in ("requires", "requires_private", "requires_internal", "provides"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def get_variable(self, name: str) -> str | None:
        """Get a variable's resolved value.

        Args:
            name: Variable name as written in the file.

        Returns:
            The value or None if the variable is not defined.
        """
        return self.vars.get(name)
