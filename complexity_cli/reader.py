"""
Reading source lines from files and streams.
"""

from pathlib import Path
from typing import List, Optional, TextIO

from complexity_cli.analysis.normalizer import split_lines
from complexity_cli.core.constants import DEFAULT_SENTINEL
from complexity_cli.core.exceptions import InputError
from complexity_cli.core.logging import log_debug


def read_lines(stream: TextIO, sentinel: Optional[str] = DEFAULT_SENTINEL) -> List[str]:
    """
    Read lines from a text stream until the sentinel line or end-of-stream.

    Args:
        stream: Open text stream
        sentinel: Line that ends input; it is not included. None or "" disables it.
    Returns:
        Lines with their trailing newline removed
    """
    lines = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if sentinel and line == sentinel:
            log_debug(f"Sentinel '{sentinel}' reached after {len(lines)} lines")
            break
        lines.append(line)
    return lines


def read_source_file(path: str) -> List[str]:
    """
    Read all lines of a source file.

    Raises:
        InputError: If the file does not exist or cannot be read
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise InputError(f"Source file not found: {path}")
    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise InputError(f"Could not read {path}: {e}") from e
    log_debug(f"File read: {file_path}", source=str(file_path))
    return split_lines(text)
