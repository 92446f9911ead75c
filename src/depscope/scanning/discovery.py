"""Source file discovery: the candidate file list for an analysis run."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path

from ..config import AnalysisConfig
from ..exceptions import InvalidPathError
from ..logging_config import get_logger
from .languages import SOURCE_EXTENSIONS

logger = get_logger(__name__)


def should_skip(rel_path: str, exclude_patterns: list[str]) -> bool:
    """Check a repo-relative POSIX path against exclusion globs.

    ``*`` crosses directory separators, so ``node_modules/*`` excludes the
    whole top-level store and ``*/node_modules/*`` any nested one.
    """
    return any(fnmatch(rel_path, pattern) for pattern in exclude_patterns)


def discover_source_files(root: Path, config: AnalysisConfig) -> list[Path]:
    """Walk ``root`` and return absolute paths of analyzable source files.

    Args:
        root: Repository root directory
        config: Filtering options (excludes, size cap, hidden files, symlinks)

    Returns:
        Sorted list of absolute file paths

    Raises:
        InvalidPathError: If root is not a directory
    """
    root = Path(os.path.abspath(root))
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")

    found: list[Path] = []
    skipped = 0

    for dirpath, dirnames, filenames in os.walk(root, followlinks=config.follow_symlinks):
        current = Path(dirpath)
        rel_dir = current.relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"

        # Prune in place so os.walk never descends into excluded trees
        dirnames[:] = sorted(
            d
            for d in dirnames
            if (config.allow_hidden_files or not d.startswith("."))
            and not should_skip(prefix + d + "/", config.exclude_patterns)
        )

        for name in sorted(filenames):
            if not config.allow_hidden_files and name.startswith("."):
                continue
            if os.path.splitext(name)[1].lower() not in SOURCE_EXTENSIONS:
                continue
            rel_path = prefix + name
            if should_skip(rel_path, config.exclude_patterns):
                skipped += 1
                logger.debug(f"Skipped (pattern): {rel_path}")
                continue

            filepath = current / name
            try:
                size = filepath.stat().st_size
            except OSError as e:
                logger.warning(f"Cannot stat {filepath}: {e}")
                continue
            if size > config.max_file_size_bytes:
                skipped += 1
                logger.warning(f"Skipping large file ({size // 1024}KB): {rel_path}")
                continue

            found.append(filepath)
            if len(found) >= config.max_files:
                logger.warning(f"Reached max files limit ({config.max_files})")
                return sorted(found)

    logger.info(f"Found {len(found)} source files to analyze ({skipped} skipped)")
    return sorted(found)
