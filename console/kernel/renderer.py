"""
Console Kernel: Text Renderer

Pure function: manager snapshot -> plain text.
No IO, deterministic. Uses mustache templates (chevron) so a host can
swap in its own layout per screen.

Row markers:
  [x] / [ ]   selection
  *           record being edited (draft values are shown)
  >           focused record
  ^           record picked up for reordering
"""

from __future__ import annotations

from typing import Any

import chevron

DEFAULT_TEMPLATE = """\
== {{{title}}} ({{count}} of {{total}}) ==
{{#search}}
search: {{{search}}}
{{/search}}
{{#records}}
{{{marks}}} {{{line}}}
{{/records}}
{{^records}}
(no {{{plural}}})
{{/records}}
{{#pending}}
! confirm delete of {{count}}: {{{ids}}}
{{/pending}}
"""


def render_text(snapshot: dict[str, Any], template: str | None = None) -> str:
    """Render a CollectionManager.snapshot() as text."""
    return chevron.render(template or DEFAULT_TEMPLATE, _build_context(snapshot))


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:.2f}"
    text = str(value)
    # One line per record
    return text.replace("\n", " ")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _build_context(snapshot: dict[str, Any]) -> dict[str, Any]:
    selected = set(snapshot.get("selected", []))
    editing = snapshot.get("editing") or {}
    fields: list[str] = snapshot.get("fields", [])

    rows: list[dict[str, Any]] = []
    for record in snapshot.get("records", []):
        rid = record["id"]
        values = record
        if editing.get("id") == rid:
            values = {"id": rid, **editing.get("draft", {})}
        marks = "[x]" if rid in selected else "[ ]"
        marks += "*" if editing.get("id") == rid else " "
        marks += ">" if snapshot.get("focused") == rid else " "
        marks += "^" if snapshot.get("picked_up") == rid else " "
        line = " | ".join(format_value(values.get(f)) for f in fields)
        rows.append({"id": rid, "marks": marks, "line": line})

    pending = snapshot.get("pending_delete")
    return {
        "title": snapshot.get("plural", "").capitalize(),
        "plural": snapshot.get("plural", ""),
        "count": len(rows),
        "total": snapshot.get("total", len(rows)),
        "search": snapshot.get("search") or None,
        "records": rows,
        "pending": {"count": len(pending), "ids": ", ".join(pending)} if pending else None,
    }
