"""Public entry points: parse text, load files, look packages up by name."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pcparse.exceptions import PackageNotFoundError, ParseError
from pcparse.logging import get_logger
from pcparse.models import Package
from pcparse.parser.grammar import parse_document
from pcparse.resolver import PackageResolver

logger = get_logger("loader")

PC_SUFFIX = ".pc"

_resolver = PackageResolver()


def parse(data: bytes | str) -> Package:
    """Parse pkg-config data into a Package.

    Args:
        data: File contents. Bytes are decoded as UTF-8.

    Returns:
        The resolved package.

    Raises:
        ParseError: If the data is not valid UTF-8 or does not match the grammar.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            line = data.count(b"\n", 0, e.start) + 1
            column = e.start - (data.rfind(b"\n", 0, e.start) + 1) + 1
            raise ParseError(
                "invalid UTF-8 byte", offset=e.start, line=line, column=column
            ) from e
    else:
        text = data

    nodes = parse_document(text)
    return _resolver.resolve(nodes)


def load(path: str | Path) -> Package:
    """Load a pkg-config file from disk.

    Args:
        path: Path to the .pc file.

    Returns:
        The resolved package.

    Raises:
        OSError: If the file cannot be read. Propagated unchanged.
        ParseError: If the contents cannot be parsed.
    """
    path = Path(path)
    data = path.read_bytes()
    logger.debug("Loaded %s (%d bytes)", path, len(data))
    return parse(data)


def find_package(name: str, search_paths: Iterable[str | Path]) -> Path:
    """Find <name>.pc in the first search path that has it.

    Args:
        name: Package name, without the .pc suffix.
        search_paths: Directories to search, in priority order.

    Returns:
        Path to the .pc file.

    Raises:
        PackageNotFoundError: If no search path contains the file.
    """
    paths = [Path(p) for p in search_paths]
    for directory in paths:
        candidate = directory / f"{name}{PC_SUFFIX}"
        if candidate.is_file():
            logger.debug("Found %s at %s", name, candidate)
            return candidate
    raise PackageNotFoundError(name, paths)


def load_package(name_or_path: str | Path, search_paths: Iterable[str | Path] = ()) -> Package:
    """Load a package given either a file path or a package name.

    Args:
        name_or_path: A path to a .pc file, or a name to look up.
        search_paths: Directories searched when a name is given.

    Returns:
        The resolved package.

    Raises:
        PackageNotFoundError: If a name is given and not found.
        OSError: If the file cannot be read.
        ParseError: If the contents cannot be parsed.
    """
    path = Path(name_or_path)
    if path.suffix == PC_SUFFIX or path.is_file():
        return load(path)
    return load(find_package(str(name_or_path), search_paths))
