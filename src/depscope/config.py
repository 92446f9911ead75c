"""Configuration loading and management for depscope.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.depscope.toml)
    3. Project config (./depscope.toml)
    4. Explicit config file
    5. Environment variables (DEPSCOPE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, workers=4)
    >>> config.verbosity
    'verbose'
    >>> config.workers
    4
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Performance tuning:
            workers: Number of parallel workers for extraction/resolution
                (None = auto-detect, capped at 8)

        File filtering:
            exclude_patterns: Glob patterns (repo-relative, POSIX) to exclude
            max_file_size_mb: Larger files are skipped by discovery
            max_files: Maximum number of files to analyze
            allow_hidden_files: Include dot-files and dot-directories
            follow_symlinks: Follow symbolic links during discovery

        Resolution:
            resolve_bare_specifiers: Run ecosystem lookups (dependency stores,
                path mappings, source roots, module prefixes) for non-relative
                specifiers too, instead of classifying them as external
            include_best_effort_edges: Let unconfirmed (best-effort) targets
                become graph edges when they name an analyzed file

        Output control:
            verbosity: Logging verbosity level
    """

    # Performance tuning
    workers: Optional[int] = None

    # File filtering
    exclude_patterns: list[str] = field(
        default_factory=lambda: [
            "node_modules/*",
            "*/node_modules/*",
            "dist/*",
            "build/*",
            "coverage/*",
            ".git/*",
            ".idea/*",
            "__pycache__/*",
            "*/__pycache__/*",
            "venv/*",
            ".venv/*",
            "env/*",
            "bin/*",
            "obj/*",
            "target/*",
            "vendor/*",
            "*.test.*",
            "*.spec.*",
            "test/*",
            "tests/*",
            "*.min.js",
            "*.bundle.js",
            "*.d.ts",
        ]
    )
    max_file_size_mb: float = 1.0
    max_files: int = 10000
    allow_hidden_files: bool = False
    follow_symlinks: bool = False

    # Resolution
    resolve_bare_specifiers: bool = False
    include_best_effort_edges: bool = True

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.max_files < 1:
            raise InvalidConfigError("max_files", self.max_files, "must be at least 1")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def effective_workers(self) -> int:
        """Worker count with auto-detection applied."""
        if self.workers is not None:
            return self.workers
        return min(os.cpu_count() or 4, 8)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".depscope.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "depscope.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DEPSCOPE_* environment variables.

    Supported environment variables:
        DEPSCOPE_WORKERS: int
        DEPSCOPE_MAX_FILE_SIZE_MB: float
        DEPSCOPE_MAX_FILES: int
        DEPSCOPE_ALLOW_HIDDEN_FILES: bool (true/false/1/0)
        DEPSCOPE_FOLLOW_SYMLINKS: bool
        DEPSCOPE_RESOLVE_BARE_SPECIFIERS: bool
        DEPSCOPE_INCLUDE_BEST_EFFORT_EDGES: bool
        DEPSCOPE_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any DEPSCOPE_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"DEPSCOPE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that can't be expressed in an env var (lists).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
