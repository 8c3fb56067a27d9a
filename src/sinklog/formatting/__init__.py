"""Formatting – console and file line renderers."""
from sinklog.formatting.console import ConsoleFormatter
from sinklog.formatting.file import FileFormatter

__all__ = ["ConsoleFormatter", "FileFormatter"]
