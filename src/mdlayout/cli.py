#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/cli.py
"""Command-line interface for mdlayout.

Reads a JSON document tree, builds its layout and prints the render tree
either as JSON or as an outline rendered with Rich::

    mdlayout document.json --format tree
    cat document.json | mdlayout - --config .mdlayout.toml --out layout.json

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Optional

from rich.console import Console

from mdlayout.api import build_layout_from_json
from mdlayout.config import (
    CONFIG_ENV_VAR,
    STYLE_SECTION,
    load_config_file,
    load_config_with_priority,
    merge_configs,
    options_from_config,
    style_sheet_from_config,
)
from mdlayout.exceptions import MdLayoutError, ValidationError
from mdlayout.highlight import validate_style_name
from mdlayout.layout.nodes import RenderNode
from mdlayout.layout.outline import render_tree_outline
from mdlayout.layout.serialization import render_tree_to_json
from mdlayout.logging_utils import configure_logging
from mdlayout.options import LayoutOptions
from mdlayout.styles.style_sheet import StyleSheet

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1

# Option fields that can be set from the command line
_OPTION_FLAGS = (
    "fit_content",
    "preserve_soft_line_breaks",
    "selectable",
    "list_item_alignment",
    "max_width",
    "image_directory",
    "code_theme",
)


def validate_code_theme(theme_name: str) -> str:
    """Validate that a Pygments style name is installed.

    Raises
    ------
    argparse.ArgumentTypeError
        If the style is unknown

    """
    try:
        return validate_style_name(theme_name)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(f"{e} See https://pygments.org/styles/ for full list.") from e


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected a number, got {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive number, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdlayout",
        description="Build a renderable layout tree from a parsed markdown document tree.",
    )
    parser.add_argument("input", help="JSON document tree to lay out ('-' reads standard input)")
    parser.add_argument(
        "--config",
        help=f"Configuration file (JSON, TOML, YAML or pyproject.toml); also read from ${CONFIG_ENV_VAR}",
    )
    parser.add_argument("--style", help="File holding style sheet values, applied over the config's style table")

    layout = parser.add_argument_group("layout options")
    layout.add_argument(
        "--fit-content",
        action="store_true",
        default=None,
        help="Shrink block stacks to their content instead of stretching them",
    )
    layout.add_argument(
        "--preserve-soft-line-breaks",
        action="store_true",
        default=None,
        help="Keep soft line breaks instead of folding them into a single space",
    )
    layout.add_argument("--selectable", action="store_true", default=None, help="Emit selectable text runs")
    layout.add_argument(
        "--list-item-alignment",
        choices=["baseline", "start"],
        help="Bullet alignment next to list item content (default: baseline)",
    )
    layout.add_argument(
        "--max-width",
        type=_positive_float,
        help="Available width used to size narrow table columns (default: 800)",
    )
    layout.add_argument("--image-directory", help="Base directory for relative image paths")
    layout.add_argument(
        "--code-theme",
        type=validate_code_theme,
        help="Pygments style used to highlight code blocks. Full list: https://pygments.org/styles/",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--format",
        choices=["json", "tree"],
        default="json",
        help="Print the layout as JSON or as an outline tree (default: json)",
    )
    output.add_argument("--out", help="Write output to this file instead of standard output")
    output.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    output.add_argument("--log-file", help="Also write log records to this file")
    return parser


def resolve_settings(parsed_args: argparse.Namespace) -> tuple[LayoutOptions, StyleSheet]:
    """Combine configuration files and command-line flags.

    Flags override values from the configuration file, and ``--style``
    overrides the configuration file's ``style`` table.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file or value is invalid

    """
    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    if parsed_args.style:
        config = merge_configs(config, {STYLE_SECTION: load_config_file(parsed_args.style)})
    options = options_from_config(config)
    style_sheet = style_sheet_from_config(config)

    overrides: dict[str, Any] = {
        name: getattr(parsed_args, name) for name in _OPTION_FLAGS if getattr(parsed_args, name) is not None
    }
    if overrides:
        options = options_from_config(overrides, base=options)

    return options, style_sheet


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_output(layout: list[RenderNode], output_format: str, out_path: Optional[str]) -> None:
    """Write a layout as JSON or as a Rich outline."""
    if output_format == "json":
        text = render_tree_to_json(layout, indent=2)
        if out_path:
            with open(out_path, "w", encoding="utf-8") as f:
                f.write(text + "\n")
        else:
            print(text)
        return

    outline = render_tree_outline(layout)
    if out_path:
        with open(out_path, "w", encoding="utf-8") as f:
            Console(file=f, no_color=True, width=120).print(outline)
    else:
        Console().print(outline)


def main(args: list[str] | None = None) -> int:
    """Run the mdlayout command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file)

    try:
        options, style_sheet = resolve_settings(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        document = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        layout = build_layout_from_json(document, options=options, style_sheet=style_sheet)
    except MdLayoutError as e:
        logger.debug("Layout build failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        write_output(layout, parsed_args.format, parsed_args.out)
    except OSError as e:
        print(f"Error: cannot write output: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.info(f"Built layout with {len(layout)} top-level nodes")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
