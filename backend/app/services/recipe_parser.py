"""
Regex extraction of the Title / Ingredients / Cooking Instructions sections.
"""

import logging
from typing import List

from ..core import recipe_grammar as grammar
from ..core.lines import normalize_lines, number_lines
from ..models.recipe import UNTITLED, ParsedRecipe, ParseIssue

log = logging.getLogger(__name__)


class RecipeParser:
    @staticmethod
    def _section(pattern, text: str) -> str:
        match = pattern.search(text)
        return match.group(1).strip() if match else ""

    @classmethod
    def parse(cls, raw: str) -> ParsedRecipe:
        text = grammar.unify_line_breaks(raw)
        issues: List[ParseIssue] = []

        title = cls._section(grammar.title_pattern, text)
        if not title:
            issues.append(ParseIssue.MISSING_TITLE)
            title = UNTITLED

        ingredients = normalize_lines(cls._section(grammar.ingredients_pattern, text))
        if not ingredients:
            issues.append(ParseIssue.MISSING_INGREDIENTS)

        steps = number_lines(normalize_lines(cls._section(grammar.instructions_pattern, text)))
        if not steps:
            issues.append(ParseIssue.MISSING_INSTRUCTIONS)

        # Extraction stays lenient; a reordered response is only reported
        if not grammar.markers_in_order(text):
            issues.append(ParseIssue.MARKERS_OUT_OF_ORDER)

        for issue in issues:
            log.debug(f"Recipe parse issue: {issue.value}")
        if issues:
            log.warning(f"Recipe text did not follow the expected layout: {[i.value for i in issues]}")

        return ParsedRecipe(
            title=title,
            ingredient_lines=ingredients,
            instruction_step_texts=steps,
            issues=issues,
        )
