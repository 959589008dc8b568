"""Panel builders turn a PanelView into renderable nodes."""

from abc import ABC, abstractmethod
from typing import Any

from rich.console import Group
from rich.table import Table
from rich.text import Text

from .models import PackageRow, PanelView, RowAction


class PanelBuilder(ABC):
    """Renders panel view-models for a particular UI host."""

    @abstractmethod
    def build(self, view: PanelView) -> Any:
        """Return the host's UI node for ``view``."""


class RichPanelBuilder(PanelBuilder):
    """Builds the panel as a rich renderable for terminal output."""

    def __init__(self, show_ids: bool = True) -> None:
        self.show_ids = show_ids

    def build(self, view: PanelView) -> Group:
        if not view.visible:
            return Group()

        parts: list[Any] = []
        if view.links:
            links = Text()
            for i, link in enumerate(view.links):
                if i:
                    links.append("  |  ", style="dim")
                links.append(link.text, style=f"link {link.url} underline")
            parts.append(links)

        for section in view.sections:
            table = Table(title=section.header, title_justify="left", show_header=False)
            table.add_column("Package", min_width=30)
            table.add_column("Action")

            for row in section.rows:
                if row.action is RowAction.NONE:
                    action = Text(row.label, style="green")
                else:
                    action = Text(f"[{row.label}]", style="cyan")
                table.add_row(self._package_cell(row), action)
            parts.append(table)

        return Group(*parts)

    def _package_cell(self, row: PackageRow) -> Text:
        """Display name, with the tooltip's id line beneath it when ids are shown."""
        name = row.descriptor.display_name
        if not self.show_ids:
            return Text(name, style="bold")
        cell = Text(row.tooltip)
        cell.stylize("bold", 0, len(name))
        cell.stylize("dim", len(name) + 1)
        return cell
