"""Sidebar listing the services."""

from __future__ import annotations

from dataclasses import dataclass, field

from tgcp.styles import (
    COLOR_BRAND_ACCENT,
    COLOR_TEXT_MUTED,
    HEADER_STYLE,
    SELECTED_ITEM_STYLE,
    SIDEBAR_STYLE,
    UNSELECTED_ITEM_STYLE,
)
from tgcp.ui.messages import KeyMsg


@dataclass(frozen=True)
class ServiceItem:
    name: str = ""
    short_name: str = ""
    icon: str = ""
    active: bool = False
    is_coming: bool = False


# Indices after which a blank line separates service categories.
_GROUP_BREAKS = frozenset({0, 3, 5, 10, 14})


def _default_items() -> list[ServiceItem]:
    return [
        ServiceItem("Overview", "overview", "◉", active=True),
        ServiceItem("Compute Engine", "gce", "⚙"),
        ServiceItem("Kubernetes", "gke", "☸"),
        ServiceItem("Cloud Run", "run", "▷"),
        ServiceItem("Cloud Storage", "gcs", "▤"),
        ServiceItem("Disks", "disks", "◔"),
        ServiceItem("Cloud SQL", "sql", "⛁"),
        ServiceItem("Spanner", "spanner", "⬡"),
        ServiceItem("Bigtable", "bigtable", "▦"),
        ServiceItem("Memorystore", "redis", "◇"),
        ServiceItem("Firestore", "firestore", "◲"),
        ServiceItem("BigQuery", "bq", "⊞"),
        ServiceItem("Dataflow", "dataflow", "⇢"),
        ServiceItem("Dataproc", "dataproc", "⎈"),
        ServiceItem("Pub/Sub", "pubsub", "⇌"),
        ServiceItem("IAM", "iam", "⚿"),
        ServiceItem("Networking", "net", "⇄"),
    ]


@dataclass
class Sidebar:
    items: list[ServiceItem] = field(default_factory=_default_items)
    cursor: int = 0
    active: bool = True
    visible: bool = True
    width: int = 25
    height: int = 0

    def update(self, msg) -> None:
        """Move the cursor on up/down keys while the sidebar has focus."""
        if not self.active or not isinstance(msg, KeyMsg):
            return None
        if msg.key in ("up", "k") and self.cursor > 0:
            self.cursor -= 1
        elif msg.key in ("down", "j") and self.cursor < len(self.items) - 1:
            self.cursor += 1
        return None

    def _render_item(self, index: int, item: ServiceItem) -> str:
        text = f"{item.icon} {item.name}" + (" *" if item.is_coming else "")
        if index == self.cursor:
            if self.active:
                return SELECTED_ITEM_STYLE.render(text)
            return UNSELECTED_ITEM_STYLE.evolve(foreground=COLOR_BRAND_ACCENT).render(text)
        style = UNSELECTED_ITEM_STYLE
        if item.is_coming:
            style = style.evolve(foreground=COLOR_TEXT_MUTED)
        return style.render(text)

    def view(self) -> str:
        if not self.visible:
            return ""
        doc = HEADER_STYLE.render("SERVICES") + "\n\n"
        for index, item in enumerate(self.items):
            doc += self._render_item(index, item) + "\n"
            if index in _GROUP_BREAKS:
                doc += "\n"
        lines = doc.count("\n")
        if self.height > lines:
            doc += "\n" * (self.height - lines)
        return SIDEBAR_STYLE.evolve(width=self.width, height=self.height).render(doc)

    def selected_service(self) -> ServiceItem:
        """The item under the cursor, or an empty item when there are none."""
        if not self.items:
            return ServiceItem()
        return self.items[self.cursor]