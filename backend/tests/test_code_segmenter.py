import pytest
from pydantic import ValidationError

from backend.app.models.segment import Segment, SegmentKind
from backend.app.services.code_segmenter import CodeBlockSegmenter, join_segments


def test_text_code_text():
    segments = CodeBlockSegmenter.segment("a ```b``` c")
    assert segments == [Segment.text("a "), Segment.code("b"), Segment.text(" c")]


def test_adjacent_code_blocks():
    segments = CodeBlockSegmenter.segment("```x``` ```y```")
    assert segments == [Segment.code("x"), Segment.text(" "), Segment.code("y")]


def test_no_fences_is_single_text_segment():
    text = "Just a plain answer.\nWith two lines."
    assert CodeBlockSegmenter.segment(text) == [Segment.text(text)]


def test_empty_input_is_single_empty_text_segment():
    assert CodeBlockSegmenter.segment("") == [Segment.text("")]


def test_unterminated_fence_stays_text():
    assert CodeBlockSegmenter.segment("a ```b") == [Segment.text("a ```b")]


def test_dangling_fence_after_closed_block():
    segments = CodeBlockSegmenter.segment("a ```b``` c ```d")
    assert segments == [Segment.text("a "), Segment.code("b"), Segment.text(" c ```d")]


def test_empty_code_block_is_kept():
    assert CodeBlockSegmenter.segment("``````") == [Segment.code("")]


def test_first_closing_fence_wins():
    segments = CodeBlockSegmenter.segment("```a ``` b```")
    assert segments == [Segment.code("a "), Segment.text(" b```")]


def test_multiline_code_block():
    text = "Try this:\n```python\nprint('hi')\n```\nDone."

    segments = CodeBlockSegmenter.segment(text)

    assert [s.kind for s in segments] == [SegmentKind.TEXT, SegmentKind.CODE, SegmentKind.TEXT]
    assert segments[1].content == "python\nprint('hi')\n"
    assert segments[2].content == "\nDone."


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no code here",
        "a ```b``` c",
        "```x``` ```y```",
        "intro\n```js\nconsole.log(1)\n```\n",
        "a ```b",
    ],
)
def test_join_rebuilds_source(text):
    assert join_segments(CodeBlockSegmenter.segment(text)) == text


def test_segments_are_immutable():
    segment = Segment.code("x")
    with pytest.raises(ValidationError):
        segment.content = "y"
