"""
Exceptions raised while building the instance type table.
"""
from dataclasses import dataclass
from typing import Optional


class InstanceCatalogError(Exception):
    """Base class for all errors raised by the generator."""


@dataclass(eq=False)
class CatalogFetchError(InstanceCatalogError):
    """A region's offer file could not be fetched or decoded. The region is skipped."""
    region: str
    url: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} ({self.url})"


@dataclass(eq=False)
class CatalogParseError(InstanceCatalogError):
    """A field of a successfully decoded offer file has an unexpected format."""
    field: str
    value: str
    instance_type: Optional[str] = None

    def __str__(self) -> str:
        target = f" for {self.instance_type}" if self.instance_type else ""
        return f"Cannot parse {self.field} value {self.value!r}{target}"


@dataclass(eq=False)
class RegionEnumerationError(InstanceCatalogError):
    """The directory of known regions could not be loaded."""
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class TableEmitError(InstanceCatalogError):
    """The generated source file could not be rendered or written."""
    path: str
    message: str

    def __str__(self) -> str:
        return f"Failed to write {self.path}: {self.message}"


@dataclass(eq=False)
class NoCatalogDataError(InstanceCatalogError):
    """No region produced a usable offer file."""
    regions_attempted: int

    def __str__(self) -> str:
        return f"None of the {self.regions_attempted} regions returned a usable pricing catalog"
