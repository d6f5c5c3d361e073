"""Home screen menu of services grouped into collapsible categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from tgcp.styles import (
    BOX_STYLE,
    COLOR_BRAND_ACCENT,
    COLOR_TEXT_MUTED,
    HEADER_STYLE,
    LEFT,
    SELECTED_ITEM_STYLE,
    UNSELECTED_ITEM_STYLE,
    Style,
    join_vertical,
)
from tgcp.ui.components.sidebar import ServiceItem
from tgcp.ui.messages import KeyMsg


@dataclass
class Category:
    name: str
    expanded: bool = True
    services: list[ServiceItem] = field(default_factory=list)


class _Entry(NamedTuple):
    kind: str  # "top", "category" or "service"
    category: int = -1
    service: int = -1


def _default_categories() -> list[Category]:
    return [
        Category("Compute", True, [
            ServiceItem("Compute Engine (GCE)", "gce"),
            ServiceItem("Kubernetes Engine (GKE)", "gke"),
            ServiceItem("Cloud Run", "run"),
        ]),
        Category("Storage", True, [
            ServiceItem("Cloud Storage (GCS)", "gcs"),
            ServiceItem("Disks (Block Storage)", "disks"),
        ]),
        Category("Databases", True, [
            ServiceItem("Cloud SQL", "sql"),
            ServiceItem("Spanner", "spanner"),
            ServiceItem("Bigtable", "bigtable"),
            ServiceItem("Memorystore (Redis)", "redis"),
            ServiceItem("Firestore / Datastore", "firestore"),
        ]),
        Category("Data & Analytics", True, [
            ServiceItem("BigQuery", "bq"),
            ServiceItem("Dataflow", "dataflow"),
            ServiceItem("Dataproc", "dataproc"),
            ServiceItem("Pub/Sub", "pubsub"),
        ]),
        Category("Security & Networking", True, [
            ServiceItem("IAM & Admin", "iam"),
            ServiceItem("VPC Network", "net"),
        ]),
    ]


_UNSET_LEFT = SELECTED_ITEM_STYLE.evolve(border_sides=(False, False, False, False))
_CATEGORY_STYLE = Style(foreground=COLOR_BRAND_ACCENT, bold=True, padding=(0, 0, 0, 1))


@dataclass
class HomeMenu:
    top_item: ServiceItem | None = field(
        default_factory=lambda: ServiceItem("Overview (Command Center)", "overview", active=True)
    )
    categories: list[Category] = field(default_factory=_default_categories)
    cursor: int = 0
    is_focused: bool = True

    def _entries(self) -> Iterator[_Entry]:
        if self.top_item is not None:
            yield _Entry("top")
        for cat_index, cat in enumerate(self.categories):
            yield _Entry("category", cat_index)
            if cat.expanded:
                for svc_index in range(len(cat.services)):
                    yield _Entry("service", cat_index, svc_index)

    def _current(self) -> _Entry | None:
        entries = list(self._entries())
        return entries[self.cursor] if 0 <= self.cursor < len(entries) else None

    def update(self, msg) -> None:
        """Move with up/down and toggle a category with space."""
        if not isinstance(msg, KeyMsg):
            return None
        count = sum(1 for _ in self._entries())
        if msg.key in ("up", "k"):
            if self.cursor > 0:
                self.cursor -= 1
        elif msg.key in ("down", "j"):
            if self.cursor < count - 1:
                self.cursor += 1
        elif msg.key == " ":
            self.toggle_current_category()
        return None

    def _render_entry(self, index: int, entry: _Entry) -> list[str]:
        selected = index == self.cursor
        if entry.kind == "top":
            name = self.top_item.name
            if selected:
                rendered = _UNSET_LEFT.render("▸ " + name)
            else:
                rendered = UNSELECTED_ITEM_STYLE.evolve(padding=(0, 0, 0, 2)).render(name)
            return [rendered, ""]
        cat = self.categories[entry.category]
        if entry.kind == "category":
            arrow = "▼" if cat.expanded else "▶"
            label = cat.name if cat.expanded else f"{cat.name} ({len(cat.services)})"
            style = SELECTED_ITEM_STYLE.evolve(bold=True) if selected else _CATEGORY_STYLE
            return [style.render(f"{arrow} {label}")]
        svc = cat.services[entry.service]
        name = svc.name + (" [Coming Soon]" if svc.is_coming else "")
        if selected:
            return [_UNSET_LEFT.render("  ▸ " + name)]
        style = UNSELECTED_ITEM_STYLE.evolve(padding=(0, 0, 0, 4))
        if svc.is_coming:
            style = style.evolve(foreground=COLOR_TEXT_MUTED)
        return [style.render(name)]

    def view(self) -> str:
        lines = [
            line
            for index, entry in enumerate(self._entries())
            for line in self._render_entry(index, entry)
        ]
        content = join_vertical(
            LEFT, HEADER_STYLE.render("Services"), "", join_vertical(LEFT, *lines)
        )
        return BOX_STYLE.evolve(border_foreground=COLOR_TEXT_MUTED, padding=(1, 2)).render(content)

    def selected_item(self) -> ServiceItem:
        """The service under the cursor; an empty item on a category header."""
        entry = self._current()
        if entry is None or entry.kind == "category":
            return ServiceItem()
        if entry.kind == "top":
            return self.top_item
        return self.categories[entry.category].services[entry.service]

    def is_on_category(self) -> bool:
        entry = self._current()
        return entry is not None and entry.kind == "category"

    def toggle_current_category(self) -> None:
        """Expand or collapse the category under the cursor, if any."""
        entry = self._current()
        if entry is not None and entry.kind == "category":
            cat = self.categories[entry.category]
            cat.expanded = not cat.expanded