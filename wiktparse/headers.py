"""Helpers for wikitext section headers such as ``==Name==``."""

from __future__ import annotations


def count_level_left(line: str) -> int:
    """Number of ``=`` characters at the start of ``line``."""
    return len(line) - len(line.lstrip("="))


def count_level_right(line: str) -> int:
    """Number of ``=`` characters at the end of ``line``."""
    return len(line) - len(line.rstrip("="))


def trim_header(line: str) -> str:
    """Return ``line`` without its leading and trailing ``=`` runs."""
    left = count_level_left(line)
    right = count_level_right(line)
    return line[left:len(line) - right]