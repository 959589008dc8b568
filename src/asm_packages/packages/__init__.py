"""ASM package catalogue and manifest editing."""

from .catalog import CATALOG, PackageDescriptor, PackageKind, classify, find_package
from .manifest import ManifestEditor

__all__ = [
    "CATALOG",
    "ManifestEditor",
    "PackageDescriptor",
    "PackageKind",
    "classify",
    "find_package",
]
