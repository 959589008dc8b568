"""Exception hierarchy for asm-packages."""


class AsmPackagesError(Exception):
    """Base class for all errors raised by asm-packages."""


class ConfigError(AsmPackagesError):
    """Raised when configuration loading or validation fails."""


class ManifestError(AsmPackagesError):
    """Raised when the package manifest cannot be read, parsed or written."""


class VersionError(AsmPackagesError):
    """Raised when the version file or a version string is unusable."""


class CatalogError(AsmPackagesError):
    """Raised when a package id is not part of the catalogue."""
