"""Line filtering with trailing context, as ``grep -A N`` prints it."""

from __future__ import annotations

GROUP_SEPARATOR = "--"


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n`` the way grep reads its input.

    A trailing newline does not open an extra empty line, but a final
    unterminated line still counts.

    Examples:
        >>> split_lines("a\\nb\\n")
        ['a', 'b']
        >>> split_lines("a\\nb")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def grep_after(text: str, pattern: str, after: int = 2) -> list[str]:
    """Return lines containing *pattern* plus *after* lines following each.

    Matching is a plain substring test.  A match inside another match's
    trailing context restarts the context window.  Non-adjacent groups are
    separated by a ``--`` line.

    Examples:
        >>> grep_after("x\\n\\"confirmations\\": 0,\\na\\nb\\nc", 'confirmations": 0')
        ['"confirmations": 0,', 'a', 'b']
    """
    if after < 0:
        raise ValueError(f"after must be non-negative, got {after}")

    out: list[str] = []
    last_printed = -1
    remaining = 0
    for index, line in enumerate(split_lines(text)):
        if pattern in line:
            if out and last_printed != index - 1:
                out.append(GROUP_SEPARATOR)
            out.append(line)
            last_printed = index
            remaining = after
        elif remaining > 0:
            out.append(line)
            last_printed = index
            remaining -= 1
    return out
