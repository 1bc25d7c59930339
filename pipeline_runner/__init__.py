"""Here-document input, chunked line reading, printf formatting and string, character, buffer and list helpers."""

__version__ = "0.1.0"