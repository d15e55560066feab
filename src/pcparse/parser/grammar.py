"""Recursive-descent grammar for pkg-config files.

A document is a sequence of lines. Each line is tried against these forms,
in order:

1. an empty line
2. a comment: ``# ...``
3. a variable: ``key = value``
4. a dependency list: ``Requires.private | Requires.internal | Requires | Provides``
   followed by ``:`` and a list of dependencies
5. a property: ``key: value``

Once a key and its separator have been consumed the line is committed: it
must end at a newline or the end of input, and a failure is reported at that
position instead of backtracking into another line form.
"""

from __future__ import annotations

import string

from pcparse.exceptions import ParseError
from pcparse.logging import get_logger, truncate_output
from pcparse.models import Dependency, VersionCompare
from pcparse.parser.nodes import Comment, DependencyList, Node, Property, Variable
from pcparse.parser.tokenizer import Scanner

logger = get_logger("parser.grammar")

_ALNUM = string.ascii_letters + string.digits

KEY_CHARS = frozenset(_ALNUM + "_.")
IDENTIFIER_CHARS = frozenset(_ALNUM + "-_.")
VERSION_CHARS = frozenset(_ALNUM + "-.")

COMMENT_MARKER = "#"
VARIABLE_SEPARATOR = "="
PROPERTY_SEPARATOR = ":"
DEPENDENCY_SEPARATOR = ","

# Longer keywords first so "Requires" does not shadow "Requires.private".
DEPENDENCY_KEYWORDS = ("Requires.private", "Requires.internal", "Requires", "Provides")

# Longest match first: "<=" before "<", ">=" before ">".
OPERATORS: tuple[tuple[str, VersionCompare], ...] = (
    ("<=", VersionCompare.LESS_THAN_OR_EQUAL),
    ("<", VersionCompare.LESS_THAN),
    ("=", VersionCompare.EQUAL),
    (">=", VersionCompare.GREATER_THAN_OR_EQUAL),
    (">", VersionCompare.GREATER_THAN),
)


def parse_document(text: str) -> list[Node]:
    """Parse a whole .pc document into line nodes.

    Args:
        text: Document contents.

    Returns:
        Nodes in document order. Empty lines produce no node.

    Raises:
        ParseError: If any input is left that no line form matches, or a
            committed line does not end where it should.
    """
    scanner = Scanner(text)
    nodes: list[Node] = []

    while True:
        line = _parse_line(scanner)
        if line is None:
            break
        nodes.extend(line)

    scanner.skip_whitespace()
    if not scanner.at_end():
        raise _error(scanner, f"unexpected input {_excerpt(scanner)}")

    logger.debug("Parsed %d nodes from %d characters", len(nodes), len(text))
    return nodes


def _parse_line(scanner: Scanner) -> list[Node] | None:
    """Try every line form in order.

    Returns:
        A list holding the line's node (empty for a blank line), or None if
        no line form matched and the cursor is unchanged.
    """
    if scanner.match_newline():
        return []

    for rule in (_comment, _variable_assignment, _dependency_list_assignment, _property_assignment):
        node = rule(scanner)
        if node is not None:
            return [node]
    return None


def _comment(scanner: Scanner) -> Comment | None:
    if not scanner.match_literal(COMMENT_MARKER):
        return None
    text = scanner.match_rest_of_line()
    scanner.match_newline()
    return Comment(text=text)


def _variable_assignment(scanner: Scanner) -> Variable | None:
    start = scanner.mark()
    key = scanner.match_chars(KEY_CHARS)
    if key is None or not scanner.match_literal(VARIABLE_SEPARATOR):
        scanner.reset(start)
        return None

    value = scanner.match_rest_of_line()
    _end_line(scanner, committed=key + VARIABLE_SEPARATOR)
    return Variable(key=key, value=value)


def _dependency_list_assignment(scanner: Scanner) -> DependencyList | None:
    start = scanner.mark()
    for keyword in DEPENDENCY_KEYWORDS:
        if scanner.match_literal(keyword) and scanner.match_literal(PROPERTY_SEPARATOR):
            dependencies = parse_dependency_list(scanner)
            _end_line(scanner, committed=keyword + PROPERTY_SEPARATOR)
            return DependencyList(key=keyword, dependencies=tuple(dependencies))
        scanner.reset(start)
    return None


def _property_assignment(scanner: Scanner) -> Property | None:
    start = scanner.mark()
    key = scanner.match_chars(KEY_CHARS)
    if key is None or not scanner.match_literal(PROPERTY_SEPARATOR):
        scanner.reset(start)
        return None

    value = scanner.match_rest_of_line()
    _end_line(scanner, committed=key + PROPERTY_SEPARATOR)
    return Property(key=key, value=value)


def parse_dependency_list(scanner: Scanner) -> list[Dependency]:
    """Parse dependencies separated by optional commas.

    Stops at the first position where no dependency starts. A trailing
    comma is consumed.

    Args:
        scanner: Scanner positioned after the list's ``:``.

    Returns:
        Dependencies in source order.
    """
    dependencies = []
    while True:
        dependency = parse_dependency(scanner)
        if dependency is None:
            break
        dependencies.append(dependency)
        scanner.match_literal(DEPENDENCY_SEPARATOR)
    return dependencies


def parse_dependency(scanner: Scanner) -> Dependency | None:
    """Parse ``identifier operator version`` or a bare ``identifier``.

    The constrained form is tried first. If the operator or version does not
    match, the cursor is rewound to just after the identifier.

    Args:
        scanner: Scanner positioned at the dependency.

    Returns:
        The dependency, or None if no identifier starts here.
    """
    identifier = scanner.match_chars(IDENTIFIER_CHARS)
    if identifier is None:
        return None

    after_identifier = scanner.mark()
    version_compare = parse_operator(scanner)
    if version_compare is not None:
        version = scanner.match_chars(VERSION_CHARS)
        if version is not None:
            return Dependency(identifier=identifier, version_compare=version_compare, version=version)

    scanner.reset(after_identifier)
    return Dependency(identifier=identifier)


def parse_operator(scanner: Scanner) -> VersionCompare | None:
    """Match a version comparison operator, longest literal first."""
    for literal, version_compare in OPERATORS:
        if scanner.match_literal(literal):
            return version_compare
    return None


def _end_line(scanner: Scanner, committed: str) -> None:
    """Require a committed line to finish at a newline or end of input."""
    if scanner.match_newline():
        return
    scanner.skip_whitespace()
    if scanner.at_end():
        return
    raise _error(scanner, f"expected end of line, found {_excerpt(scanner)}", committed=committed)


def _excerpt(scanner: Scanner) -> str:
    rest = scanner.text[scanner.pos:].split("\n", 1)[0]
    return repr(truncate_output(rest, max_length=40))


def _error(scanner: Scanner, reason: str, committed: str | None = None) -> ParseError:
    line, column = scanner.location()
    return ParseError(reason, offset=scanner.pos, line=line, column=column, committed=committed)
