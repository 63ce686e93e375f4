"""Linear search helpers."""

from __future__ import annotations

from numkit.search.linear import NOT_FOUND, find_first, find_nth

__all__ = ["NOT_FOUND", "find_first", "find_nth"]
