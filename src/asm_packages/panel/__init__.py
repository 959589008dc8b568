"""Package panel: view-models, builders and the host-facing controller."""

from .builder import PanelBuilder, RichPanelBuilder
from .controller import PackagePanel
from .models import PackageRow, PanelSection, PanelView, RowAction

__all__ = [
    "PackagePanel",
    "PackageRow",
    "PanelBuilder",
    "PanelSection",
    "PanelView",
    "RichPanelBuilder",
    "RowAction",
]
