#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/builder/hooks.py
"""Extension points of the layout builder.

Callers customize the produced render tree through:

    - :class:`BuilderDelegate`: creates tap handlers for links and formats
      code block text
    - :class:`ElementBuilder`: per-tag custom element hook
    - image, checkbox and bullet builder callables replacing the default
      nodes for those elements

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

from mdlayout.ast.nodes import Element, Text
from mdlayout.highlight import SyntaxHighlighter
from mdlayout.layout.nodes import LinkCallback, RenderNode, TapHandler, TextSpan
from mdlayout.styles.style_sheet import StyleSheet
from mdlayout.styles.text_style import TextStyle

logger = logging.getLogger(__name__)


class BulletStyle(str, Enum):
    """Kind of list a bullet belongs to."""

    ORDERED = "ordered"
    UNORDERED = "unordered"


ImageBuilder = Callable[[str, Optional[str], Optional[str]], RenderNode]
"""``(uri, title, alt) -> node`` replacing the default image node."""

CheckboxBuilder = Callable[[bool], RenderNode]
"""``(checked) -> node`` replacing the default task list checkbox."""

BulletBuilder = Callable[[int, BulletStyle], RenderNode]
"""``(index, style) -> node`` replacing the default bullet; ``index`` is zero-based."""


class BuilderDelegate(ABC):
    """Collaborator supplying link handlers and code formatting."""

    @abstractmethod
    def create_link(self, text: str, href: Optional[str], title: str) -> TapHandler:
        """Return the tap handler attached to the runs of a link.

        Parameters
        ----------
        text : str
            Visible link text
        href : str or None
            Link destination
        title : str
            Link title, empty when absent

        """
        pass

    @abstractmethod
    def format_text(self, style_sheet: StyleSheet, code: str, language: Optional[str] = None) -> TextSpan:
        """Return the styled span shown for the text of a code block.

        Parameters
        ----------
        style_sheet : StyleSheet
            Active style sheet
        code : str
            Raw code text
        language : str or None
            Fence label of the code block, if any

        """
        pass


class DefaultBuilderDelegate(BuilderDelegate):
    """Delegate used when the caller supplies none.

    Parameters
    ----------
    on_tap_link : callable or None, default None
        Called with ``(text, href, title)`` when a link is tapped
    highlighter : SyntaxHighlighter or None, default None
        Highlighter for code blocks; without one code is shown in the
        style sheet's ``code`` style

    """

    def __init__(
        self,
        on_tap_link: Optional[LinkCallback] = None,
        highlighter: Optional[SyntaxHighlighter] = None,
    ):
        self.on_tap_link = on_tap_link
        self.highlighter = highlighter

    def create_link(self, text: str, href: Optional[str], title: str) -> TapHandler:
        return TapHandler(text=text, href=href, title=title, on_tap=self.on_tap_link)

    def format_text(self, style_sheet: StyleSheet, code: str, language: Optional[str] = None) -> TextSpan:
        """Strip one trailing newline from ``code`` and style or highlight it."""
        if code.endswith("\n"):
            code = code[:-1]
        if self.highlighter is not None:
            return self.highlighter.format(code, language, base_style=style_sheet.code)
        return TextSpan(text=code, style=style_sheet.code)


class ElementBuilder(ABC):
    """Custom rendering hook registered for one tag.

    The builder still applies its built-in rules to the tag; the hook can
    observe the element on entry, render the text of a custom block, and
    replace the node produced for the element on exit.

    Examples
    --------
        >>> class Badge(ElementBuilder):
        ...     def visit_element_after(self, element, preferred_style):
        ...         return RichText(TextSpan(text=f"[{element.text_content}]", style=preferred_style))

    """

    def visit_element_before(self, element: Element) -> None:
        """Observe an element of the registered tag before its children are visited."""
        pass

    def visit_text(self, text: Text, preferred_style: Optional[TextStyle]) -> Optional[RenderNode]:
        """Render text found directly inside a block of the registered tag.

        Returns
        -------
        RenderNode or None
            The run to add, or None to add nothing

        """
        return None

    @abstractmethod
    def visit_element_after(self, element: Element, preferred_style: Optional[TextStyle]) -> Optional[RenderNode]:
        """Produce the node for a finished element.

        Parameters
        ----------
        element : Element
            The element being left
        preferred_style : TextStyle or None
            Style sheet entry for the tag

        Returns
        -------
        RenderNode or None
            Replacement node, or None to keep what the built-in rules produced

        """
        pass


__all__ = [
    "BulletStyle",
    "ImageBuilder",
    "CheckboxBuilder",
    "BulletBuilder",
    "BuilderDelegate",
    "DefaultBuilderDelegate",
    "ElementBuilder",
]
