"""
Text convention used by the recipe generator.

A response is expected to look like::

    Title: <name>
    Ingredients:
    <one ingredient per line>
    Cooking Instructions:
    <one step per line>

Markers are exact, case-sensitive and must start a line. Changing the
convention should only require edits in this module.
"""

import re
from typing import Dict, List, Optional

TITLE_MARKER = "Title:"
INGREDIENTS_MARKER = "Ingredients:"
INSTRUCTIONS_MARKER = "Cooking Instructions:"

# Order in which markers are expected to appear.
MARKERS = (TITLE_MARKER, INGREDIENTS_MARKER, INSTRUCTIONS_MARKER)

# "\n" is the only line break the patterns below know about.
LINE_BREAK = "\n"
_foreign_breaks = re.compile(r"\r\n?")


def unify_line_breaks(text: str) -> str:
    """Rewrite CRLF and bare CR endings as LINE_BREAK."""
    return _foreign_breaks.sub(LINE_BREAK, text)


def split_lines(text: str) -> List[str]:
    return unify_line_breaks(text).split(LINE_BREAK)


title_pattern = re.compile(rf"^{re.escape(TITLE_MARKER)}(.*)$", re.M)
ingredients_pattern = re.compile(
    rf"^{re.escape(INGREDIENTS_MARKER)}(.*?)(?=^{re.escape(INSTRUCTIONS_MARKER)}|\Z)",
    re.M | re.S,
)
instructions_pattern = re.compile(rf"^{re.escape(INSTRUCTIONS_MARKER)}(.*)", re.M | re.S)

_marker_patterns = {marker: re.compile(rf"^{re.escape(marker)}", re.M) for marker in MARKERS}


def locate_markers(text: str) -> Dict[str, Optional[int]]:
    """Return the offset of each marker's first line-start occurrence, or None."""
    offsets: Dict[str, Optional[int]] = {}
    for marker, pattern in _marker_patterns.items():
        match = pattern.search(text)
        offsets[marker] = match.start() if match else None
    return offsets


def markers_in_order(text: str) -> bool:
    """True when every marker present appears after the ones expected before it."""
    found = [offset for offset in locate_markers(text).values() if offset is not None]
    return found == sorted(found)
