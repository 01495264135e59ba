"""Category — a named group of answers within a game."""

import random
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from jeopardy_tool.game.domain.answer import Answer, check_answer, is_valid_answer
from jeopardy_tool.game.domain.errors import DoubleJeopardyError
from jeopardy_tool.game.domain.validation import ValidationReport

ANSWERS_PER_CATEGORY = 5
DOUBLE_JEOPARDY_PICKS = 2


class Category(BaseModel):
    """A category name plus its ordered answers."""

    model_config = ConfigDict(validate_assignment=True)

    name: str
    answers: list[Answer]

    def is_valid(self) -> bool:
        """Check whether the category has exactly 5 answers, each valid."""
        return len(self.answers) == ANSWERS_PER_CATEGORY and all(
            is_valid_answer(answer) for answer in self.answers
        )

    def validate_category(
        self, path: str = "category", asset_root: Path | None = None
    ) -> ValidationReport:
        """Return every structural error and content warning for this category."""
        report = ValidationReport()
        self.collect_issues(path=path, report=report, asset_root=asset_root)
        return report

    def collect_issues(
        self, path: str, report: ValidationReport, asset_root: Path | None = None
    ) -> None:
        if not self.name.strip():
            report.add(path=f"{path}.name", message="name is empty", severity="warning")
        if len(self.answers) != ANSWERS_PER_CATEGORY:
            report.add(
                path=f"{path}.answers",
                message=f"expected {ANSWERS_PER_CATEGORY} answers, found {len(self.answers)}",
            )
        for index, answer in enumerate(self.answers):
            answer_path = f"{path}.answers[{index}]"
            if not is_valid_answer(answer):
                report.add(path=answer_path, message="answer is invalid")
            check_answer(answer, answer_path, report, asset_root)

    def double_jeopardy(self, rng: random.Random | None = None) -> list[int]:
        """Randomly flag two answers as Double Jeopardy.

        Flags are only ever set, never cleared. Returns the indices that were
        picked.

        Raises:
            DoubleJeopardyError: if the category has fewer than two answers.
        """
        if len(self.answers) < DOUBLE_JEOPARDY_PICKS:
            raise DoubleJeopardyError(
                scope=f"category '{self.name}'",
                available=len(self.answers),
                required=DOUBLE_JEOPARDY_PICKS,
            )
        if rng is None:
            rng = random.Random()
        indices = list(range(len(self.answers)))
        rng.shuffle(indices)
        picked = indices[:DOUBLE_JEOPARDY_PICKS]
        for index in picked:
            self.answers[index].double_jeopardy = True
        return picked

    def clear_double_jeopardy(self) -> None:
        for answer in self.answers:
            answer.double_jeopardy = False

    def double_jeopardy_indices(self) -> list[int]:
        return [i for i, answer in enumerate(self.answers) if answer.double_jeopardy]
