"""Structlog implementation of the GameObserver port."""

import structlog


class StructlogGameObserver:
    """Delegates game store events to structlog.

    Satisfies the GameObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def game_loaded(self, path: str, total_categories: int) -> None:
        self._log.info("game.loaded", path=path, total_categories=total_categories)

    def game_saved(self, path: str, total_categories: int) -> None:
        self._log.info("game.saved", path=path, total_categories=total_categories)

    def category_loaded(self, path: str, name: str, total_answers: int) -> None:
        self._log.debug(
            "game.category_loaded", path=path, name=name, total_answers=total_answers
        )

    def category_saved(self, path: str, name: str) -> None:
        self._log.info("game.category_saved", path=path, name=name)

    def game_load_failed(self, path: str, reason: str) -> None:
        self._log.error("game.load_failed", path=path, reason=reason)
