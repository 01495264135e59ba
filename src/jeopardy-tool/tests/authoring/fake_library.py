"""In-memory CategoryLibrary for builder tests."""

from pathlib import Path

from jeopardy_tool.game.domain.category import Category
from jeopardy_tool.library.domain.entry import LibraryEntry
from jeopardy_tool.library.infrastructure.errors import CategoryNotFoundError


class FakeCategoryLibrary:
    """Satisfies CategoryLibrary structurally over a fixed list of categories."""

    def __init__(self, categories: list[Category]) -> None:
        self._entries = [
            LibraryEntry(path=Path(f"{c.name.lower()}.yaml"), category=c)
            for c in categories
        ]

    def entries(self, prefix: str | None = None) -> list[LibraryEntry]:
        if not prefix:
            return list(self._entries)
        return [
            e for e in self._entries if e.name.casefold().startswith(prefix.casefold())
        ]

    def get(self, name: str) -> Category:
        for entry in self._entries:
            if entry.name.casefold() == name.casefold():
                return entry.category
        raise CategoryNotFoundError(name=name, root=Path("memory"))
