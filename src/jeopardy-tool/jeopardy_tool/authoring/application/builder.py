"""GameBuilder — assembles a new game from library categories."""

import random

from jeopardy_tool.authoring.application.errors import AuthoringError
from jeopardy_tool.authoring.domain.observer import AuthoringObserver
from jeopardy_tool.game.domain.category import Category
from jeopardy_tool.game.domain.game import CATEGORIES_PER_GAME, Game
from jeopardy_tool.game.infrastructure.errors import GameValidationError
from jeopardy_tool.library.domain.library import CategoryLibrary


class GameBuilder:
    """Builds a validated game with Double Jeopardy answers assigned.

    The builder only sees the CategoryLibrary protocol and a random
    generator, so tests can pass an in-memory library and a seeded rng.
    """

    def __init__(
        self,
        library: CategoryLibrary,
        observer: AuthoringObserver,
        rng: random.Random | None = None,
    ) -> None:
        self._library = library
        self._observer = observer
        self._rng = rng if rng is not None else random.Random()

    def build(self, category_names: list[str] | None = None) -> Game:
        """Build a game from the named categories, filling free slots at random.

        Named categories keep the order given; random picks follow them.

        Raises:
            AuthoringError: if too many or duplicate names are given, or the
                library has too few valid categories to fill the board.
            CategoryNotFoundError: if a named category is not in the library.
            GameValidationError: if the assembled game is structurally invalid.
        """
        requested = list(category_names or [])
        self._observer.authoring_started(requested=requested)
        _check_requested(requested)

        chosen: list[Category] = []
        for name in requested:
            chosen.append(self._library.get(name))
            self._observer.authoring_category_selected(name=name, explicit=True)

        for category in self._pick_random(chosen):
            chosen.append(category)
            self._observer.authoring_category_selected(name=category.name, explicit=False)

        game = Game(categories=[category.model_copy(deep=True) for category in chosen])
        game.clear_double_jeopardy()

        report = game.validate_game()
        if not report.is_valid:
            raise GameValidationError(subject="game", report=report)

        for category_index, answer_index in game.double_jeopardy(self._rng):
            self._observer.authoring_double_jeopardy_assigned(
                category=game.categories[category_index].name,
                answer_index=answer_index,
            )

        self._observer.authoring_game_built(
            category_names=[category.name for category in game.categories]
        )
        return game

    def _pick_random(self, chosen: list[Category]) -> list[Category]:
        missing = CATEGORIES_PER_GAME - len(chosen)
        if missing == 0:
            return []

        taken = {category.name.casefold() for category in chosen}
        candidates: list[Category] = []
        for entry in self._library.entries():
            key = entry.name.casefold()
            if entry.is_valid and key not in taken:
                candidates.append(entry.category)
                taken.add(key)

        if len(candidates) < missing:
            raise AuthoringError(
                f"need {missing} more valid categories but the library has"
                f" {len(candidates)} available"
            )
        return self._rng.sample(candidates, missing)


def _check_requested(requested: list[str]) -> None:
    if len(requested) > CATEGORIES_PER_GAME:
        raise AuthoringError(
            f"at most {CATEGORIES_PER_GAME} categories can be requested,"
            f" got {len(requested)}"
        )
    seen: set[str] = set()
    for name in requested:
        key = name.casefold()
        if key in seen:
            raise AuthoringError(f"category '{name}' requested more than once")
        seen.add(key)
