"""Pydantic models for JSON/YAML output."""

from pydantic import BaseModel, ConfigDict, Field

from pcparse.models import Package, VersionCompare


class DependencyResponse(BaseModel):
    """Serialized form of a Dependency."""

    model_config = ConfigDict(from_attributes=True)

    identifier: str
    version_compare: VersionCompare | None = None
    version: str = ""


class PackageResponse(BaseModel):
    """Serialized form of a Package."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str
    version: str
    url: str
    cflags: str
    cflags_private: str
    libs: str
    libs_private: str
    vars: dict[str, str] = Field(default_factory=dict)
    requires: list[DependencyResponse] = Field(default_factory=list)
    requires_private: list[DependencyResponse] = Field(default_factory=list)
    requires_internal: list[DependencyResponse] = Field(default_factory=list)
    provides: list[DependencyResponse] = Field(default_factory=list)


def package_to_response(package: Package) -> PackageResponse:
    """Convert a Package to PackageResponse."""
    return PackageResponse.model_validate(package)
