"""Fold parsed line nodes into a Package.

Variables are substituted eagerly, in document order: a value can only
refer to variables defined on earlier lines.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from pcparse.logging import get_logger
from pcparse.models import Dependency, Package
from pcparse.parser.nodes import Comment, DependencyList, Node, Property, Variable

logger = get_logger("resolver")

VARIABLE_PATTERN = re.compile(r"\$\{([A-Za-z0-9_.]+)\}")

# Upper-cased .pc key -> Package field
PROPERTY_FIELDS = {
    "NAME": "name",
    "VERSION": "version",
    "DESCRIPTION": "description",
    "URL": "url",
    "CFLAGS": "cflags",
    "CFLAGS.PRIVATE": "cflags_private",
    "LIBS": "libs",
    "LIBS.PRIVATE": "libs_private",
}

DEPENDENCY_FIELDS = {
    "REQUIRES": "requires",
    "REQUIRES.PRIVATE": "requires_private",
    "REQUIRES.INTERNAL": "requires_internal",
    "PROVIDES": "provides",
}


def substitute(value: str, variables: Mapping[str, str]) -> str:
    """Expand ``${name}`` placeholders in a single pass.

    Text inserted by a replacement is not scanned again, and placeholders
    naming unbound variables are left as written.

    Args:
        value: Raw value from the file.
        variables: Variables bound so far.

    Returns:
        The expanded value.
    """

    def replace(match: re.Match[str]) -> str:
        return variables.get(match.group(1), match.group(0))

    return VARIABLE_PATTERN.sub(replace, value)


class PackageResolver:
    """Builds a Package from an ordered sequence of AST nodes.

    Each resolve() call starts from an empty variable table, so one resolver
    can be shared between parses.
    """

    def resolve(self, nodes: Iterable[Node]) -> Package:
        """Fold nodes into a Package in one forward pass.

        Args:
            nodes: Nodes in document order.

        Returns:
            The resolved package.
        """
        variables: dict[str, str] = {}
        properties: dict[str, str] = {}
        dependencies: dict[str, tuple[Dependency, ...]] = {}

        for node in nodes:
            if isinstance(node, Comment):
                continue

            if isinstance(node, Variable):
                variables[node.key] = substitute(node.value, variables)

            elif isinstance(node, Property):
                field_name = PROPERTY_FIELDS.get(node.key.upper())
                if field_name is None:
                    logger.debug("Ignoring unknown property %r", node.key)
                    continue
                properties[field_name] = substitute(node.value, variables)

            elif isinstance(node, DependencyList):
                field_name = DEPENDENCY_FIELDS.get(node.key.upper())
                if field_name is None:
                    logger.debug("Ignoring unknown dependency list %r", node.key)
                    continue
                if field_name in dependencies:
                    logger.debug("%s given more than once, keeping the last", node.key)
                dependencies[field_name] = tuple(node.dependencies)

        return Package(vars=variables, **properties, **dependencies)
