"""LibraryEntry — one category file found in the category library."""

from pathlib import Path

from pydantic import BaseModel

from jeopardy_tool.game.domain.category import Category


class LibraryEntry(BaseModel):
    """A category together with the file it was read from."""

    path: Path
    category: Category

    @property
    def name(self) -> str:
        return self.category.name

    @property
    def is_valid(self) -> bool:
        return self.category.is_valid()
