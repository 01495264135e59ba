"""Game — the root aggregate: an ordered board of categories."""

import random
from typing import TypeAlias
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from jeopardy_tool.game.domain.category import DOUBLE_JEOPARDY_PICKS, Category
from jeopardy_tool.game.domain.errors import DoubleJeopardyError
from jeopardy_tool.game.domain.validation import ValidationReport

CATEGORIES_PER_GAME = 5

AnswerPosition: TypeAlias = tuple[int, int]


class Game(BaseModel):
    """A Jeopardy board. Constructed empty; valid once it holds a 5x5 grid."""

    model_config = ConfigDict(validate_assignment=True)

    categories: list[Category] = Field(default_factory=list)

    def is_valid(self) -> bool:
        """Check whether the game has 5 categories and every category has 5 answers."""
        return len(self.categories) == CATEGORIES_PER_GAME and all(
            category.is_valid() for category in self.categories
        )

    def validate_game(self, asset_root: Path | None = None) -> ValidationReport:
        """Return every structural error and content warning for this game."""
        report = ValidationReport()
        if len(self.categories) != CATEGORIES_PER_GAME:
            report.add(
                path="categories",
                message=f"expected {CATEGORIES_PER_GAME} categories, found {len(self.categories)}",
            )
        for index, category in enumerate(self.categories):
            category.collect_issues(
                path=f"categories[{index}]", report=report, asset_root=asset_root
            )
        return report

    def double_jeopardy(self, rng: random.Random | None = None) -> list[AnswerPosition]:
        """Randomly choose two categories and flag two answers in each.

        The same generator drives the category pick and every per-category
        pick, so a seeded *rng* reproduces the whole selection. Flags
        accumulate across calls; use `clear_double_jeopardy` to start over.

        Raises:
            DoubleJeopardyError: if the game, or a picked category, has fewer
                than two entries. Nothing is flagged in that case.
        """
        if len(self.categories) < DOUBLE_JEOPARDY_PICKS:
            raise DoubleJeopardyError(
                scope="game",
                available=len(self.categories),
                required=DOUBLE_JEOPARDY_PICKS,
            )
        if rng is None:
            rng = random.Random()
        indices = list(range(len(self.categories)))
        rng.shuffle(indices)
        picked_categories = indices[:DOUBLE_JEOPARDY_PICKS]

        for index in picked_categories:
            category = self.categories[index]
            if len(category.answers) < DOUBLE_JEOPARDY_PICKS:
                raise DoubleJeopardyError(
                    scope=f"category '{category.name}'",
                    available=len(category.answers),
                    required=DOUBLE_JEOPARDY_PICKS,
                )

        picked: list[AnswerPosition] = []
        for index in picked_categories:
            for answer_index in self.categories[index].double_jeopardy(rng):
                picked.append((index, answer_index))
        return picked

    def clear_double_jeopardy(self) -> None:
        for category in self.categories:
            category.clear_double_jeopardy()

    def double_jeopardy_answers(self) -> list[AnswerPosition]:
        """Return (category_index, answer_index) of every flagged answer, in board order."""
        return [
            (category_index, answer_index)
            for category_index, category in enumerate(self.categories)
            for answer_index in category.double_jeopardy_indices()
        ]
