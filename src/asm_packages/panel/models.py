"""View-models for the package panel."""

from dataclasses import dataclass, field
from enum import Enum

from asm_packages.packages.catalog import PackageDescriptor, PackageKind

CHECKMARK = "✓"


class RowAction(str, Enum):
    INSTALL = "install"
    REMOVE = "remove"
    OPEN_LINK = "open_link"
    NONE = "none"


@dataclass(frozen=True)
class PackageRow:
    """One catalogue entry as shown in the panel."""

    descriptor: PackageDescriptor
    installed: bool
    action: RowAction
    label: str
    uri: str

    @property
    def kind(self) -> PackageKind:
        return self.descriptor.kind

    @property
    def tooltip(self) -> str:
        return f"{self.descriptor.display_name}\n{self.descriptor.id}"


@dataclass(frozen=True)
class LinkItem:
    text: str
    url: str


@dataclass
class PanelSection:
    header: str
    rows: list[PackageRow] = field(default_factory=list)


@dataclass
class PanelView:
    """Everything a builder needs to render the panel."""

    links: list[LinkItem] = field(default_factory=list)
    sections: list[PanelSection] = field(default_factory=list)
    visible: bool = True
    # The host's own link section is hidden while this panel is shown
    host_links_visible: bool = True

    def rows(self) -> list[PackageRow]:
        return [row for section in self.sections for row in section.rows]


def build_row(descriptor: PackageDescriptor, installed: bool, uri: str) -> PackageRow:
    """Work out the action and label for a catalogue entry."""
    if descriptor.is_example:
        action = RowAction.OPEN_LINK
    elif descriptor.is_dependency and installed:
        return PackageRow(descriptor, installed, RowAction.NONE, CHECKMARK, uri)
    elif installed:
        action = RowAction.REMOVE
    else:
        action = RowAction.INSTALL
    return PackageRow(descriptor, installed, action, descriptor.button_text(installed), uri)
