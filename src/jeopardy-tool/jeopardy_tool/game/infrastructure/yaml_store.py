"""YAML game store — reads and writes games and categories, emitting observer events."""

from pathlib import Path
from typing import Any, NoReturn

import yaml
from pydantic import ValidationError

from jeopardy_tool.game.domain.category import Category
from jeopardy_tool.game.domain.game import Game
from jeopardy_tool.game.domain.observer import GameObserver
from jeopardy_tool.game.infrastructure.errors import GameLoadError, GameSaveError


class YamlGameStore:
    """Loads and saves Game and Category models as YAML documents."""

    def __init__(self, observer: GameObserver) -> None:
        self._observer = observer

    def load_game(self, path: Path) -> Game:
        """
        Load a Game from a YAML file.

        Raises:
            GameLoadError: if the file is missing, is not valid YAML, or does not
                match the game schema.
        """
        raw = self._read_mapping(path=path)
        try:
            game = Game.model_validate(raw)
        except ValidationError as exc:
            self._fail(GameLoadError(path=path, reason=str(exc)))

        self._observer.game_loaded(path=str(path), total_categories=len(game.categories))
        return game

    def load_category(self, path: Path) -> Category:
        """
        Load a single Category from a YAML file.

        Raises:
            GameLoadError: if the file is missing, is not valid YAML, or does not
                match the category schema.
        """
        raw = self._read_mapping(path=path)
        try:
            category = Category.model_validate(raw)
        except ValidationError as exc:
            self._fail(GameLoadError(path=path, reason=str(exc)))

        self._observer.category_loaded(
            path=str(path), name=category.name, total_answers=len(category.answers)
        )
        return category

    def save_game(self, game: Game, path: Path, overwrite: bool = False) -> None:
        """
        Write *game* to *path* as YAML, creating parent directories.

        Raises:
            GameSaveError: if *path* exists and *overwrite* is False, or the write fails.
        """
        _write_yaml(path=path, data=game.model_dump(mode="json"), overwrite=overwrite)
        self._observer.game_saved(path=str(path), total_categories=len(game.categories))

    def save_category(self, category: Category, path: Path, overwrite: bool = False) -> None:
        """
        Write *category* to *path* as YAML, creating parent directories.

        Raises:
            GameSaveError: if *path* exists and *overwrite* is False, or the write fails.
        """
        _write_yaml(path=path, data=category.model_dump(mode="json"), overwrite=overwrite)
        self._observer.category_saved(path=str(path), name=category.name)

    def _read_mapping(self, path: Path) -> dict[str, Any]:
        try:
            raw = _parse_yaml(path=path)
        except GameLoadError as exc:
            self._fail(exc)
        if not isinstance(raw, dict):
            self._fail(GameLoadError(path=path, reason="expected a mapping at the top level"))
        return raw

    def _fail(self, error: GameLoadError) -> NoReturn:
        self._observer.game_load_failed(path=str(error.path), reason=error.reason)
        raise error


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise GameLoadError(path=path, reason="file not found") from exc
    except UnicodeDecodeError as exc:
        raise GameLoadError(path=path, reason=f"not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise GameLoadError(path=path, reason=exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise GameLoadError(path=path, reason=f"invalid YAML: {exc}") from exc


def _write_yaml(path: Path, data: dict[str, Any], overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise GameSaveError(path=path, reason="file already exists")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh, sort_keys=False, allow_unicode=True)
    except OSError as exc:
        raise GameSaveError(path=path, reason=str(exc)) from exc
