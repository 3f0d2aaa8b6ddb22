from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

FENCE = "```"


class SegmentKind(str, Enum):
    TEXT = "text"
    CODE = "code"


class Segment(BaseModel):
    """One contiguous piece of a response, either prose or a fenced code block."""

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    content: str

    @classmethod
    def text(cls, content: str) -> Segment:
        return cls(kind=SegmentKind.TEXT, content=content)

    @classmethod
    def code(cls, content: str) -> Segment:
        return cls(kind=SegmentKind.CODE, content=content)

    def source(self) -> str:
        """Return the segment as it was written in the response."""
        if self.kind == SegmentKind.CODE:
            return f"{FENCE}{self.content}{FENCE}"
        return self.content
