"""Observer port for the game store — defines events in domain language."""

from typing import Protocol


class GameObserver(Protocol):
    def game_loaded(self, path: str, total_categories: int) -> None: ...

    def game_saved(self, path: str, total_categories: int) -> None: ...

    def category_loaded(self, path: str, name: str, total_answers: int) -> None: ...

    def category_saved(self, path: str, name: str) -> None: ...

    def game_load_failed(self, path: str, reason: str) -> None: ...
