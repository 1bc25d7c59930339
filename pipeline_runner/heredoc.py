"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional, TextIO

from .linereader import LineReader
from .strings import strncmp

DEFAULT_PATH = "/tmp/hd"
PROMPT = "> "


def matches_limiter(line: str, limiter: str) -> bool:
    """Whether line ends the here-document.

    Only the first len(line) - 1 characters are compared with the limiter,
    so an empty line or a prefix of the limiter also ends the input.
    """
    if not line:
        return limiter == ""
    return strncmp(line, limiter, len(line) - 1) == 0


def read_heredoc(
    limiter: str,
    reader: Optional[LineReader] = None,
    prompt_stream: Optional[TextIO] = None,
) -> str:
    """Read lines, prompting before each, until the limiter or end of input."""
    source = LineReader(sys.stdin) if reader is None else reader
    prompt = sys.stdout if prompt_stream is None else prompt_stream
    lines = []
    while True:
        prompt.write(PROMPT)
        prompt.flush()
        line = source.read_line()
        if line is None or matches_limiter(line, limiter):
            break
        lines.append(line)
    return "".join(lines)


def write_heredoc(
    limiter: str,
    reader: Optional[LineReader] = None,
    prompt_stream: Optional[TextIO] = None,
    path: str = DEFAULT_PATH,
) -> BinaryIO:
    """Store the here-document in path and return it opened for reading."""
    content = read_heredoc(limiter, reader, prompt_stream)
    with open(path, "w", newline="") as handle:
        handle.write(content)
    return open(path, "rb")