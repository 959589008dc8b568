"""Static catalogue of ASM plugins, samples and dependencies."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from asm_packages.errors import CatalogError

PLUGIN_PREFIX = "plugin."
EXAMPLE_PREFIX = "example."

INSTALL_LABEL = "Import into project"
REMOVE_LABEL = "Remove from project"
VIEW_LABEL = "View on github"


class PackageKind(str, Enum):
    DEPENDENCY = "dependency"
    PLUGIN = "plugin"
    EXAMPLE = "example"


class PackageDescriptor(BaseModel):
    """One catalogue entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    source: str = Field(
        default="",
        description="Version or URL for dependencies; empty for plugins and examples",
    )

    @property
    def kind(self) -> PackageKind:
        return classify(self.id)

    @property
    def is_dependency(self) -> bool:
        return self.kind is PackageKind.DEPENDENCY

    @property
    def is_plugin(self) -> bool:
        return self.kind is PackageKind.PLUGIN

    @property
    def is_example(self) -> bool:
        return self.kind is PackageKind.EXAMPLE

    def button_text(self, installed: bool = False) -> str:
        """Label for the row's action button."""
        if self.is_example:
            return VIEW_LABEL
        return REMOVE_LABEL if installed else INSTALL_LABEL

    def resolve_uri(self, version: str, github_org: str = "Lazy-Solutions") -> str:
        """Resolve the manifest source or browser URL for this entry.

        Args:
            version: Running ASM version, used to pin plugin tags.
            github_org: GitHub organisation hosting plugins and examples.
        """
        if self.is_example:
            return f"https://github.com/{github_org}/{self.id}.git"
        if self.is_plugin:
            return f"https://github.com/{github_org}/{self.id}.git#asm-{version}"
        return self.source


def classify(package_id: str) -> PackageKind:
    """Classify a package id by its prefix."""
    if package_id.startswith(PLUGIN_PREFIX):
        return PackageKind.PLUGIN
    if package_id.startswith(EXAMPLE_PREFIX):
        return PackageKind.EXAMPLE
    return PackageKind.DEPENDENCY


CATALOG: tuple[PackageDescriptor, ...] = (
    # Plugins
    PackageDescriptor(id="plugin.asm.addressables", display_name="Addressables"),
    PackageDescriptor(id="plugin.asm.locking", display_name="Lock collections and scenes"),
    # Examples
    PackageDescriptor(id="example.asm.level-select", display_name="Level select"),
    PackageDescriptor(id="example.asm.preloading", display_name="Preloading"),
    PackageDescriptor(id="example.asm.streaming", display_name="Streaming"),
    # Dependencies
    PackageDescriptor(
        id="com.unity.editorcoroutines",
        display_name="Editor Coroutines",
        source="1.0.0",
    ),
    PackageDescriptor(
        id="utility.lazy.coroutines",
        display_name="Lazy.CoroutineUtility",
        source="https://github.com/Lazy-Solutions/Unity.CoroutineUtility.git#asm",
    ),
)


def packages_of(kind: PackageKind, catalog: tuple[PackageDescriptor, ...] = CATALOG) -> list[PackageDescriptor]:
    """Catalogue entries of one kind, in catalogue order."""
    return [p for p in catalog if p.kind is kind]


def find_package(
    package_id: str, catalog: tuple[PackageDescriptor, ...] = CATALOG
) -> PackageDescriptor:
    """Look up a catalogue entry by id.

    Raises:
        CatalogError: If the id is not in the catalogue.
    """
    found: Optional[PackageDescriptor] = next((p for p in catalog if p.id == package_id), None)
    if found is None:
        known = ", ".join(p.id for p in catalog)
        raise CatalogError(f"Unknown package: {package_id}. Known packages: {known}")
    return found
