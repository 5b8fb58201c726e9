"""Row cursor arithmetic for a recent-files picker.

Rows are 1-based. Movement wraps around at both ends.
"""

from __future__ import annotations


def initial_row(total: int) -> int:
    """Start on the previously visited file when there is one."""
    return 2 if total > 1 else 1


def next_row(current: int, total: int) -> int:
    if total <= 0:
        return 1
    return 1 if current >= total else current + 1


def prev_row(current: int, total: int) -> int:
    if total <= 0:
        return 1
    return total if current <= 1 else current - 1
