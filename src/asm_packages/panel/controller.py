"""Package panel controller.

Receives the host's lifecycle notifications, keeps the panel view current and
performs row actions against the manifest and the browser.
"""

import logging
from typing import Any, Callable, Optional

from asm_packages.config.models import AsmSettings
from asm_packages.packages.catalog import CATALOG, PackageDescriptor, PackageKind, find_package, packages_of
from asm_packages.packages.manifest import ManifestEditor
from asm_packages.utils.links import open_url
from asm_packages.utils.versioning import resolve_version

from .builder import PanelBuilder, RichPanelBuilder
from .models import LinkItem, PanelSection, PanelView, RowAction, build_row

logger = logging.getLogger(__name__)

SECTIONS = (
    ("Dependencies", PackageKind.DEPENDENCY),
    ("Plugins", PackageKind.PLUGIN),
    ("Samples", PackageKind.EXAMPLE),
)


class PackagePanel:
    """Catalogue panel for the ASM package."""

    def __init__(
        self,
        settings: AsmSettings,
        builder: Optional[PanelBuilder] = None,
        manifest: Optional[ManifestEditor] = None,
        opener: Callable[[str], bool] = open_url,
        catalog: tuple[PackageDescriptor, ...] = CATALOG,
    ) -> None:
        self.settings = settings
        self.builder = builder or RichPanelBuilder()
        self.manifest = manifest or ManifestEditor(settings.manifest_file)
        self.opener = opener
        self.catalog = catalog
        self.visible = True
        self.host_links_visible = True
        self.view: Optional[PanelView] = None
        self.node: Any = None
        self._version: Optional[str] = None

    @property
    def version(self) -> str:
        """Running ASM version, resolved once per panel."""
        if self._version is None:
            self._version = resolve_version(
                self.settings.version_resource_path, self.settings.fallback_version
            )
        return self._version

    def resolve_uri(self, descriptor: PackageDescriptor) -> str:
        return descriptor.resolve_uri(self.version, self.settings.github_org)

    def build_view(self) -> PanelView:
        installed = self.manifest.dependencies()
        sections = []
        for header, kind in SECTIONS:
            rows = [
                build_row(p, p.id in installed, self.resolve_uri(p))
                for p in packages_of(kind, self.catalog)
            ]
            sections.append(PanelSection(header, rows))

        return PanelView(
            links=[
                LinkItem("View documentation", self.settings.documentation_url),
                LinkItem("View changelog", self.settings.changelog_url),
            ],
            sections=sections,
            visible=self.visible,
            host_links_visible=self.host_links_visible,
        )

    def create_extension_ui(self) -> Any:
        return self.refresh()

    def refresh(self) -> Any:
        self.view = self.build_view()
        self.node = self.builder.build(self.view)
        return self.node

    def on_package_added_or_updated(self, package_name: Optional[str] = None) -> Any:
        return self.refresh()

    def on_package_removed(self, package_name: Optional[str] = None) -> Any:
        return self.refresh()

    def on_package_selection_change(self, package_name: Optional[str]) -> bool:
        """Show the panel only for packages in the ASM namespace.

        Returns:
            Whether the panel is now visible.
        """
        is_ours = package_name in self.settings.product_packages
        self.visible = is_ours
        self.host_links_visible = not is_ours
        if self.view is not None:
            self.view.visible = self.visible
            self.view.host_links_visible = self.host_links_visible
            self.node = self.builder.build(self.view)
        logger.debug(f"Selection changed to {package_name!r}, panel visible: {is_ours}")
        return is_ours

    def activate(self, package_id: str) -> RowAction:
        """Perform the action behind a row's button.

        Dependencies are only ever added, plugins toggle, examples open
        their repository in the browser.

        Returns:
            The action that was performed.
        """
        descriptor = find_package(package_id, self.catalog)
        uri = self.resolve_uri(descriptor)

        if descriptor.is_example:
            self.opener(uri)
            return RowAction.OPEN_LINK

        if descriptor.is_dependency:
            if self.manifest.is_installed(descriptor.id):
                return RowAction.NONE
            self.manifest.set_dependency(descriptor.id, uri)
            action = RowAction.INSTALL
        else:
            enabled = self.manifest.toggle(descriptor.id, uri)
            action = RowAction.INSTALL if enabled else RowAction.REMOVE

        self.refresh()
        return action
