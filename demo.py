"""Demonstration module for mdlayout."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from rich.console import Console

from mdlayout import Element, LayoutOptions, StyleSheet, Text, build_layout
from mdlayout.layout import render_tree_to_json
from mdlayout.layout.outline import render_tree_outline

# A parsed document: heading, paragraph with a bare URL, task list, two tabbed code blocks and a table
document = [
    Element("h1", [Text("Release notes")]),
    Element("p", [Text("Details at https://example.com/notes and a screenshot: /upload/shot.png")]),
    Element(
        "ul",
        [
            Element("li", [Element("input", None, {"type": "checkbox", "checked": "true"}), Text(" Faster builds")]),
            Element("li", [Element("input", None, {"type": "checkbox", "checked": "false"}), Text(" Docs")]),
        ],
    ),
    Element("pre", [Text("npm install mdlayout\n")], label="shell"),
    Element("pre", [Text("pip install mdlayout\n")], label="python"),
    Element(
        "table",
        [
            Element("tr", [Element("th", [Text("Version")]), Element("th", [Text("Date")])]),
            Element("tr", [Element("td", [Text("0.1.0")]), Element("td", [Text("2025-01-01")])]),
        ],
    ),
]

options = LayoutOptions(selectable=True, code_theme="monokai")
style_sheet = StyleSheet(h1_align="center", block_spacing=12.0)
layout = build_layout(document, options=options, style_sheet=style_sheet)

# Show the structure, then save the full layout tree
Console().print(render_tree_outline(layout, title="release notes"))
with open("layout.json", "w", encoding="utf-8") as f:
    f.write(render_tree_to_json(layout, indent=2))

print(f"Layout complete: {len(layout)} top-level nodes")
