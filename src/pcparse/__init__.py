"""pcparse - parse pkg-config (.pc) files into Package records."""

from pcparse.exceptions import ConfigError, PackageNotFoundError, ParseError, PcParseError
from pcparse.loader import find_package, load, load_package, parse
from pcparse.models import Dependency, Package, VersionCompare

__all__ = [
    "ConfigError",
    "Dependency",
    "Package",
    "PackageNotFoundError",
    "ParseError",
    "PcParseError",
    "VersionCompare",
    "find_package",
    "load",
    "load_package",
    "parse",
]
