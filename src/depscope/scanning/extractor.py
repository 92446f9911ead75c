"""ImportExtractor: raw dependency specifiers for one source file.

ECMAScript-family files go through a tree-sitter AST walk (accurate, and
tolerant of syntax errors thanks to tree-sitter's error recovery). Every
other supported language uses the regex patterns in ``patterns.py``.

Usage:
    extractor = ImportExtractor()
    specifiers = extractor.extract(Path("src/a.ts"), text)
    # {"./b", "lodash"}

Failure behavior:
    A file that cannot be decoded or parsed yields an empty set and a
    warning; ``extract`` never raises.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import ParsingError
from ..logging_config import get_logger
from .languages import get_dialect
from .models import RawDependency, SourceFile
from .patterns import PATTERNS
from .treesitter_parser import TreeSitterParser

logger = get_logger(__name__)

# Statements whose ``source`` field names a module
_SOURCE_STATEMENTS = frozenset({"import_statement", "export_statement"})


class ImportExtractor:
    """Extracts raw dependency specifiers from file text."""

    def __init__(self, parser: Optional[TreeSitterParser] = None) -> None:
        self._parser = parser or TreeSitterParser()

    def extract(self, path: Union[str, Path], content: str) -> set[str]:
        """Return the set of raw specifiers referenced by ``content``.

        Args:
            path: File path (only its extension is used)
            content: Full file text

        Returns:
            Set of specifier strings; empty for unsupported or unparseable files
        """
        dialect = get_dialect(path)
        if dialect is None:
            return set()

        try:
            if dialect.grammar is not None:
                return self._extract_ast(path, content, dialect.name, dialect.grammar)
            return PATTERNS[dialect.name](content)
        except ParsingError as e:
            logger.warning(str(e))
            return set()

    def extract_dependencies(self, source: SourceFile) -> list[RawDependency]:
        """Raw dependencies of ``source`` (using its text), sorted by specifier."""
        return [
            RawDependency(specifier, source)
            for specifier in sorted(self.extract(source.abs_path, source.text))
        ]

    def _extract_ast(
        self, path: Union[str, Path], content: str, language: str, grammar: str
    ) -> set[str]:
        try:
            tree = self._parser.parse(content.encode("utf-8", errors="replace"), grammar)
        except (ValueError, RuntimeError) as e:
            raise ParsingError(Path(path), language, str(e))

        if tree.root_node.has_error:
            logger.debug(f"Recovered from syntax errors in {path}")

        deps: set[str] = set()
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type in _SOURCE_STATEMENTS:
                source = _statement_source(node)
                if source is not None:
                    deps.add(source)
            elif node.type == "call_expression":
                target = _call_target(node)
                if target is not None:
                    deps.add(target)
            stack.extend(node.children)
        return deps


def _statement_source(node: Any) -> Optional[str]:
    """Module named by an import/re-export statement, if any."""
    source = node.child_by_field_name("source")
    if source is None and node.type == "import_statement":
        # TypeScript: import x = require("y")
        for child in node.named_children:
            if child.type == "import_require_clause":
                source = child.child_by_field_name("source") or next(
                    (c for c in child.named_children if c.type == "string"), None
                )
                break
    return _string_value(source)


def _call_target(node: Any) -> Optional[str]:
    """String argument of ``require("x")`` or ``import("x")``, if literal."""
    callee = node.child_by_field_name("function")
    if callee is None:
        return None
    is_dynamic_import = callee.type == "import"
    is_require = callee.type == "identifier" and _text(callee) == "require"
    if not (is_dynamic_import or is_require):
        return None

    arguments = node.child_by_field_name("arguments")
    if arguments is None or not arguments.named_children:
        return None
    return _string_value(arguments.named_children[0])


def _string_value(node: Any) -> Optional[str]:
    if node is None or node.type != "string":
        return None
    raw = _text(node)
    if len(raw) < 2:
        return None
    return raw[1:-1]


def _text(node: Any) -> str:
    text = node.text
    if text is None:
        return ""
    return text.decode("utf-8", errors="replace")
