"""Source scanning: discovery, language detection, import extraction."""

from .discovery import discover_source_files, should_skip
from .extractor import ImportExtractor
from .languages import (
    DIALECTS,
    SOURCE_EXTENSIONS,
    DialectConfig,
    Language,
    detect_language,
    get_dialect,
)
from .models import RawDependency, SourceFile
from .treesitter_parser import TreeSitterParser, get_supported_grammars

__all__ = [
    "discover_source_files",
    "should_skip",
    "ImportExtractor",
    "TreeSitterParser",
    "get_supported_grammars",
    "Language",
    "DialectConfig",
    "DIALECTS",
    "SOURCE_EXTENSIONS",
    "detect_language",
    "get_dialect",
    "SourceFile",
    "RawDependency",
]
