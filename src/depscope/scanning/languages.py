"""Language configurations: the single source of truth for extension mapping.

Each source dialect maps to:
  - a resolution ``Language`` (one of the seven ecosystem strategies), and
  - either a tree-sitter grammar (AST extraction) or a set of import
    patterns (regex extraction, see ``patterns.py``).

Adding a new dialect:
  1. Add a DialectConfig entry to DIALECTS below.
  2. If it is regex-extracted, add its patterns to ``patterns.PATTERNS``.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class Language(str, Enum):
    """Resolution ecosystem of a source file."""

    ECMASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"
    GO = "go"
    RUBY = "ruby"
    OTHER = "other"


@dataclass(frozen=True)
class DialectConfig:
    """Everything the extractor needs to know about one source dialect."""

    name: str
    extensions: tuple[str, ...]
    language: Language

    # tree-sitter grammar name; None means regex extraction
    grammar: Optional[str] = None


DIALECTS: dict[str, DialectConfig] = {
    "javascript": DialectConfig(
        name="javascript",
        extensions=(".js", ".jsx", ".mjs", ".cjs"),
        language=Language.ECMASCRIPT,
        grammar="javascript",
    ),
    "typescript": DialectConfig(
        name="typescript",
        extensions=(".ts",),
        language=Language.TYPESCRIPT,
        grammar="typescript",
    ),
    "tsx": DialectConfig(
        name="tsx",
        extensions=(".tsx",),
        language=Language.TYPESCRIPT,
        grammar="tsx",
    ),
    "python": DialectConfig(name="python", extensions=(".py",), language=Language.PYTHON),
    "java": DialectConfig(name="java", extensions=(".java",), language=Language.JAVA),
    "go": DialectConfig(name="go", extensions=(".go",), language=Language.GO),
    "ruby": DialectConfig(name="ruby", extensions=(".rb",), language=Language.RUBY),
    "csharp": DialectConfig(name="csharp", extensions=(".cs",), language=Language.OTHER),
    "rust": DialectConfig(name="rust", extensions=(".rs",), language=Language.OTHER),
    "c": DialectConfig(
        name="c",
        extensions=(".c", ".cpp", ".cc", ".h", ".hpp"),
        language=Language.OTHER,
    ),
    "php": DialectConfig(name="php", extensions=(".php",), language=Language.OTHER),
    "kotlin": DialectConfig(name="kotlin", extensions=(".kt",), language=Language.OTHER),
    "swift": DialectConfig(name="swift", extensions=(".swift",), language=Language.OTHER),
    "scala": DialectConfig(name="scala", extensions=(".scala",), language=Language.OTHER),
}

_EXTENSION_MAP: dict[str, DialectConfig] = {
    ext: cfg for cfg in DIALECTS.values() for ext in cfg.extensions
}

SOURCE_EXTENSIONS: frozenset[str] = frozenset(_EXTENSION_MAP)


def get_dialect(path: Union[str, Path]) -> Optional[DialectConfig]:
    """Dialect for a file path by extension, or None if unsupported."""
    return _EXTENSION_MAP.get(Path(path).suffix.lower())


def detect_language(path: Union[str, Path]) -> Language:
    """Resolution language for a file path. Unknown extensions map to OTHER."""
    dialect = get_dialect(path)
    if dialect is None:
        return Language.OTHER
    return dialect.language
