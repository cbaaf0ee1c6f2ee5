from typing import List, Tuple

from complexity_cli.core.constants import DEFAULT_COMMENT_TOKEN


def normalize(raw: str, comment_token: str = DEFAULT_COMMENT_TOKEN) -> Tuple[str, bool]:
    """
    Trim a raw source line and report whether it carries no code.

    Returns:
        (trimmed text, True if the line is blank or a line comment)
    """
    text = raw.strip()
    return text, is_comment(text, comment_token)


def is_comment(text: str, comment_token: str = DEFAULT_COMMENT_TOKEN) -> bool:
    """Check if a trimmed line is blank or starts with the comment token."""
    return not text or text.startswith(comment_token)


def split_lines(text: str) -> List[str]:
    """
    Split source text on '\\n' only, dropping one trailing '\\r' per line.

    Unlike ``str.splitlines`` this keeps form feeds and Unicode line
    separators inside the line they appear on, so line numbers match what
    an editor shows.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
