"""Shared utilities and error handling for pdftool."""

from pdftool.lib.errors import ConfigError, PageRangeError, PdfToolError

__all__ = [
    "ConfigError",
    "PageRangeError",
    "PdfToolError",
]
