from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List
import logging

from ..core.config import get_settings
from ..models.recipe import ParsedRecipe
from ..models.segment import Segment
from ..services.code_segmenter import CodeBlockSegmenter
from ..services.recipe_parser import RecipeParser

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


class TextIn(BaseModel):
    text: str


class SegmentsOut(BaseModel):
    segments: List[Segment]


def _check_size(text: str) -> None:
    limit = get_settings().max_input_chars
    if len(text) > limit:
        log.warning(f"Rejected {len(text)} chars of input (limit {limit})")
        raise HTTPException(status_code=413, detail=f"Text exceeds {limit} characters")


@router.post("/segments", response_model=SegmentsOut)
async def segment_response(body: TextIn) -> SegmentsOut:
    """Split a chat response into text and code segments"""
    _check_size(body.text)
    return SegmentsOut(segments=CodeBlockSegmenter.segment(body.text))


@router.post("/recipes/parse", response_model=ParsedRecipe)
async def parse_recipe(body: TextIn) -> ParsedRecipe:
    """Extract title, ingredients and numbered steps from a generated recipe"""
    _check_size(body.text)
    return RecipeParser.parse(body.text)
