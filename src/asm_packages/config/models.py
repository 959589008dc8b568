"""Pydantic models for asm-packages configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

# Literal shipped with the extension; only used when the version resource is missing
DEFAULT_FALLBACK_VERSION = "1.3.2"


class AsmSettings(BaseModel):
    """Settings for a single Unity project.

    Relative paths are resolved against ``project_root``.
    """

    project_root: Path = Path(".")
    manifest_path: Path = Path("Packages/manifest.json")
    version_file: Path = Path("Packages/plugin.asm.package-manager/package.json")
    version_resource: Path = Path(
        "Assets/AdvancedSceneManager/Resources/AdvancedSceneManager/version.txt"
    )
    fallback_version: str = DEFAULT_FALLBACK_VERSION
    github_org: str = "Lazy-Solutions"
    documentation_url: str = "https://github.com/Lazy-Solutions/advanced-scene-manager/wiki"
    changelog_url: str = (
        "https://assetstore.unity.com/packages/tools/utilities/"
        "advanced-scene-manager-174152#releases"
    )
    product_packages: list[str] = Field(
        default_factory=lambda: [
            "plugin.asm",
            "plugin.asm.package-manager",
            "plugin.asm.addressables",
            "plugin.asm.locking",
        ],
        description="Package names the panel is shown for when selected in the host",
    )
    auto_stamp: bool = True

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the project root."""
        if path.is_absolute():
            return path
        return self.project_root / path

    @property
    def manifest_file(self) -> Path:
        return self.resolve(self.manifest_path)

    @property
    def version_file_path(self) -> Path:
        return self.resolve(self.version_file)

    @property
    def version_resource_path(self) -> Path:
        return self.resolve(self.version_resource)
