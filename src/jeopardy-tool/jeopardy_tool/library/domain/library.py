"""CategoryLibrary Protocol — structural interface for a collection of categories."""

from typing import Protocol

from jeopardy_tool.game.domain.category import Category
from jeopardy_tool.library.domain.entry import LibraryEntry


class CategoryLibrary(Protocol):
    """Lists and looks up the categories available for building games."""

    def entries(self, prefix: str | None = None) -> list[LibraryEntry]: ...

    def get(self, name: str) -> Category: ...
