# tgcp

Building blocks for a terminal interface to Google Cloud resources:
ANSI styling and layout helpers, reusable widgets (tables, filter bar,
toasts, status bar, sidebar, home menu, detail cards, error and
confirmation dialogs, help overlay, banner) and plain data models for
Pub/Sub topics and subscriptions, Memorystore (Redis) instances and
Spanner instances.

Everything renders to plain strings with ANSI escape codes, so the
pieces can be printed, compared in tests or fed to any terminal loop.

## Styling and layout

`tgcp.styles` holds the colour palette, the shared `Style` objects and
helpers for measuring and arranging rendered text. A `Style` is
immutable; `evolve()` derives a variant.

```python
from tgcp.styles import BOX_STYLE, LEFT, join_vertical, strip_ansi, text_width

block = join_vertical(LEFT, "first line", "second")
print(strip_ansi(block))
print(text_width(block))          # 10

boxed = BOX_STYLE.evolve(width=30).render("hello")
print(boxed)
```

`join_horizontal`, `place` and `place_horizontal` position blocks side
by side or inside a given area; `TOP`, `LEFT`, `CENTER`, `BOTTOM` and
`RIGHT` are the alignment values.

## Messages

`tgcp.ui.messages` defines the messages widgets react to (`KeyMsg`,
`WindowSizeMsg`, `SpinnerTickMsg`, `LastUpdatedMsg`, `BatchMsg`) and
two command helpers: `batch(*commands)` combines commands, dropping
`None`, and `tick(interval, factory)` returns a command that sleeps and
then builds a message.

## Components

Status badges map resource states onto four categories:

```python
from tgcp.ui.components.status import StatusCategory, categorize_status, render_status

assert categorize_status("running") is StatusCategory.RUNNING
print(render_status("TERMINATED"))  # badge reading "✗ STOPPED"
```

Breadcrumbs skip empty segments and highlight the last one:

```python
from tgcp.ui.components.breadcrumb import breadcrumb

print(breadcrumb("Project demo", "Pub/Sub", "", "Topics"))
```

Filtering is case-insensitive substring matching over chosen fields:

```python
from tgcp.ui.components.filter import contains_match, filter_items

names = ["alpha", "Beta", "gamma"]
matched = filter_items(names, "BET", lambda item, q: contains_match(item)(q))
assert matched == ["Beta"]
```

`Filter` is the filter bar with its own `TextInput`; `FilterSession`
ties it to a list of items and a table-updating callback, and
`handle_filter_update` runs a key through it.

Tables keep a cursor that follows navigation keys while focused:

```python
from tgcp.ui.components.table import Column, Table
from tgcp.ui.messages import KeyMsg

table = Table([Column("Name", 20), Column("State", 10)])
table.set_rows([("alpha", "READY"), ("beta", "CREATING")])
table.update(KeyMsg("down"))
assert table.cursor == 1
print(table.view())
```

The other widgets:

- `tgcp.ui.components.detail`: `KeyValue`, `detail_card`,
  `detail_section` and `render_footer_hint` (turns `"s Start | q Back"`
  into `[s] Start  [q] Back`).
- `tgcp.ui.components.toast`: `Toast`, `ToastType`, `ToastMsg`,
  `ToastDismissMsg`.
- `tgcp.ui.components.statusbar`: `StatusBar` and `StatusMsg`.
- `tgcp.ui.components.sidebar`: `Sidebar` and `ServiceItem`.
- `tgcp.ui.components.home_menu`: `HomeMenu` with collapsible
  `Category` groups.
- `tgcp.ui.components.error`: `ErrorView`, `render_error` and
  `generate_suggestions`, which picks advice from the error text.
- `tgcp.ui.components.confirmation`: `Confirmation` and
  `render_confirmation`.
- `tgcp.ui.banner.get_banner()` and `tgcp.ui.help.help_view(width, height)`.

## Resource models

`tgcp.services.pubsub_models`, `tgcp.services.redis_models` and
`tgcp.services.spanner_models` turn API resources (as dictionaries in
the JSON shape the APIs return) into frozen dataclasses with short
names:

```python
from tgcp.services.pubsub_models import topic_from_resource
from tgcp.services.redis_models import instance_from_resource

topic = topic_from_resource({"name": "projects/demo/topics/orders"}, "demo")
assert topic.name == "orders"

cache = instance_from_resource(
    {"name": "projects/demo/locations/us-central1/instances/cache", "memorySizeGb": 4},
    "demo",
)
assert (cache.name, cache.location, cache.memory_size_gb) == ("cache", "us-central1", 4)
```

## What the package does not do

- It has no command and no application loop: nothing reads the
  keyboard or draws to the terminal on its own.
- It does not talk to Google Cloud. There are no API clients, no
  credential handling and no authentication-error screen; the model
  functions only convert resources you already hold.
- It has no service screens for Pub/Sub, Redis or Spanner (lists,
  caching, refresh, detail views); only the models and the widgets
  such screens would be built from.
- It has no animated loading spinner widget and writes no log files.