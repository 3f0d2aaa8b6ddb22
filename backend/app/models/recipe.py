from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, computed_field

UNTITLED = "Untitled Recipe"


class ParseIssue(str, Enum):
    MISSING_TITLE = "missing_title"
    MISSING_INGREDIENTS = "missing_ingredients"
    MISSING_INSTRUCTIONS = "missing_instructions"
    MARKERS_OUT_OF_ORDER = "markers_out_of_order"


class ParsedRecipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = UNTITLED
    ingredient_lines: Tuple[str, ...] = ()
    instruction_step_texts: Tuple[str, ...] = ()
    issues: Tuple[ParseIssue, ...] = ()

    @computed_field
    @property
    def ok(self) -> bool:
        return not self.issues
