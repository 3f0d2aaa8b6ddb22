from typing import List

from .recipe_grammar import split_lines


def normalize_lines(block: str) -> List[str]:
    """Split a section into trimmed lines, dropping the blank ones."""
    return [line.strip() for line in split_lines(block) if line.strip()]


def number_lines(lines: List[str]) -> List[str]:
    return [f"{idx}. {line}" for idx, line in enumerate(lines, start=1)]
