"""Rules for turning captured client output into report values."""

from __future__ import annotations


def substitute(stdout: str) -> str:
    """Return *stdout* as shell command substitution would capture it.

    Every trailing newline is dropped; everything else is kept verbatim.

    Examples:
        >>> substitute("1.00000000\\n")
        '1.00000000'
        >>> substitute("a\\n\\n")
        'a'
    """
    return stdout.rstrip("\n")


def is_zero_literal(value: str, zero: str) -> bool:
    """Return True when *value* is textually identical to *zero*.

    No numeric parsing takes place: ``"0"`` is not ``"0.00000000"``.
    """
    return value == zero
