"""Output formatters for analysis results."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str, **kwargs) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"
        **kwargs: Passed to the rich formatter (console, top)

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    if cls is RichFormatter:
        return cls(**kwargs)
    return cls()


__all__ = ["BaseFormatter", "JsonFormatter", "RichFormatter", "get_formatter"]
