"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing of the ECMAScript
family. tree-sitter recovers from syntax errors by inserting ERROR nodes,
so a malformed file still yields a tree with every well-formed statement.

Usage:
    parser = TreeSitterParser()
    tree = parser.parse(code_bytes, "typescript")
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript

logger = logging.getLogger(__name__)

# grammar name -> (module, factory attribute)
_GRAMMARS: dict[str, tuple[Any, str]] = {
    "javascript": (tree_sitter_javascript, "language"),
    "typescript": (tree_sitter_typescript, "language_typescript"),
    "tsx": (tree_sitter_typescript, "language_tsx"),
}


def _load_languages() -> dict[str, Any]:
    languages: dict[str, Any] = {}
    for name, (module, attr) in _GRAMMARS.items():
        raw_lang = getattr(module, attr)()
        # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
        languages[name] = tree_sitter.Language(raw_lang)
    return languages


_LANGUAGES = _load_languages()


def get_supported_grammars() -> list[str]:
    """Get list of grammars available for parsing."""
    return list(_LANGUAGES.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for ECMAScript-family parsing.

    ``tree_sitter.Parser`` objects are not safe to share between threads,
    so each thread lazily gets its own parser per grammar.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _parser_for(self, grammar: str) -> Any:
        parsers = getattr(self._local, "parsers", None)
        if parsers is None:
            parsers = {}
            self._local.parsers = parsers
        parser = parsers.get(grammar)
        if parser is None:
            parser = tree_sitter.Parser(_LANGUAGES[grammar])
            parsers[grammar] = parser
        return parser

    def parse(self, code: bytes, grammar: str) -> Any:
        """Parse code and return the syntax tree.

        Args:
            code: Source code as bytes
            grammar: Grammar name ("javascript", "typescript" or "tsx")

        Returns:
            tree_sitter.Tree

        Raises:
            KeyError: If the grammar is not supported
        """
        return self._parser_for(grammar).parse(code)

    def is_grammar_supported(self, grammar: str) -> bool:
        """Check if a grammar is supported."""
        return grammar in _LANGUAGES
