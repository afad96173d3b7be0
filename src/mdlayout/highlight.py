#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/highlight.py
"""Syntax highlighting of code block text.

Code blocks are laid out as a single text run. A highlighter turns the raw
code into a parent :class:`TextSpan` whose children carry per-token styles,
so the rendering surface can color it without knowing anything about
languages.

:class:`PygmentsHighlighter` lexes with Pygments and maps each token type
onto a :class:`TextStyle` taken from a Pygments style (``monokai``,
``friendly``, ...).

"""

from __future__ import annotations

import difflib
import logging
from abc import ABC, abstractmethod
from typing import Optional

from pygments import lex
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound

from mdlayout.exceptions import ValidationError
from mdlayout.layout.nodes import TextSpan
from mdlayout.layout.spans import merge_spans
from mdlayout.styles.text_style import TextStyle

logger = logging.getLogger(__name__)


class SyntaxHighlighter(ABC):
    """Turns code into styled spans."""

    @abstractmethod
    def format(self, code: str, language: Optional[str] = None, base_style: Optional[TextStyle] = None) -> TextSpan:
        """Highlight ``code``.

        Parameters
        ----------
        code : str
            Raw code text
        language : str or None
            Language named by the code fence label, if any
        base_style : TextStyle or None
            Style of the returned parent span, inherited by every token

        Returns
        -------
        TextSpan
            Parent span whose children hold the highlighted tokens

        """
        pass


def validate_style_name(style_name: str) -> str:
    """Check that ``style_name`` names an installed Pygments style.

    Raises
    ------
    ValidationError
        If the style is unknown; the message lists close matches

    """
    available = list(get_all_styles())
    if style_name not in available:
        suggestions = sorted(difflib.get_close_matches(style_name, available))
        hint = f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""
        raise ValidationError(
            f"Unknown Pygments style '{style_name}'.{hint}",
            parameter_name="code_theme",
            parameter_value=style_name,
        )
    return style_name


class PygmentsHighlighter(SyntaxHighlighter):
    """Highlighter backed by Pygments.

    Parameters
    ----------
    style_name : str, default "default"
        Name of a Pygments style
    default_language : str or None, default None
        Lexer used when a code block carries no label. Without one the code
        is emitted as a single plain token.

    Raises
    ------
    ValidationError
        If ``style_name`` is not an installed Pygments style

    """

    def __init__(self, style_name: str = "default", default_language: Optional[str] = None):
        """Resolve the Pygments style once."""
        self.style_name = validate_style_name(style_name)
        self.default_language = default_language
        self._style = get_style_by_name(style_name)
        self._token_styles: dict[object, Optional[TextStyle]] = {}

    def _lexer_for(self, language: Optional[str]):
        name = language or self.default_language
        if not name:
            return TextLexer(stripnl=False, ensurenl=False)
        try:
            return get_lexer_by_name(name, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug(f"No Pygments lexer for '{name}', emitting plain text")
            return TextLexer(stripnl=False, ensurenl=False)

    def _style_for_token(self, token_type: object) -> Optional[TextStyle]:
        if token_type not in self._token_styles:
            info = self._style.style_for_token(token_type)
            style = TextStyle(
                color=f"#{info['color']}" if info.get("color") else None,
                background_color=f"#{info['bgcolor']}" if info.get("bgcolor") else None,
                font_weight="bold" if info.get("bold") else None,
                font_style="italic" if info.get("italic") else None,
                decoration="underline" if info.get("underline") else None,
            )
            self._token_styles[token_type] = None if style == TextStyle() else style
        return self._token_styles[token_type]

    def format(self, code: str, language: Optional[str] = None, base_style: Optional[TextStyle] = None) -> TextSpan:
        """Lex ``code`` and emit one child span per run of equally styled tokens."""
        tokens = [
            TextSpan(text=value, style=self._style_for_token(token_type))
            for token_type, value in lex(code, self._lexer_for(language))
            if value
        ]
        return TextSpan(style=base_style, children=merge_spans(tokens))


__all__ = ["SyntaxHighlighter", "PygmentsHighlighter", "validate_style_name"]
