"""
Split chat responses into prose and fenced code blocks.
"""

import logging
import re
from typing import Iterable, List

from ..models.segment import FENCE, Segment

log = logging.getLogger(__name__)


class CodeBlockSegmenter:
    # Non-greedy: the first fence after an opening one always closes it.
    fence_pattern = re.compile(rf"{FENCE}(.*?){FENCE}", re.S)

    @classmethod
    def segment(cls, text: str) -> List[Segment]:
        segments: List[Segment] = []
        last = 0
        for match in cls.fence_pattern.finditer(text):
            if match.start() > last:
                segments.append(Segment.text(text[last:match.start()]))
            segments.append(Segment.code(match.group(1)))
            last = match.end()

        if last < len(text):
            segments.append(Segment.text(text[last:]))

        if not segments:
            # Only reachable for the empty string
            segments.append(Segment.text(text))

        log.debug(f"Segmented {len(text)} chars into {len(segments)} segments")
        return segments


def join_segments(segments: Iterable[Segment]) -> str:
    """Rebuild the original response from its segments."""
    return "".join(segment.source() for segment in segments)
