"""Directory category library — every YAML file in one directory is a category."""

from pathlib import Path

from jeopardy_tool.game.domain.category import Category
from jeopardy_tool.game.infrastructure.errors import GameLoadError
from jeopardy_tool.game.infrastructure.yaml_store import YamlGameStore
from jeopardy_tool.library.domain.entry import LibraryEntry
from jeopardy_tool.library.domain.observer import LibraryObserver
from jeopardy_tool.library.infrastructure.errors import (
    CategoryNotFoundError,
    LibraryLoadError,
)

_CATEGORY_SUFFIXES = (".yaml", ".yml")


class DirectoryCategoryLibrary:
    """Reads category files from a directory and satisfies CategoryLibrary structurally."""

    def __init__(self, root: Path, store: YamlGameStore, observer: LibraryObserver) -> None:
        self._root = root
        self._store = store
        self._observer = observer

    @property
    def root(self) -> Path:
        return self._root

    def entries(self, prefix: str | None = None) -> list[LibraryEntry]:
        """
        Return the categories whose name starts with *prefix*, ordered by file name.

        Prefix matching ignores case; a None or empty prefix keeps everything.
        Collects ALL unreadable files before raising a single LibraryLoadError.

        Raises:
            LibraryLoadError: if the root is not a directory or any category file
                cannot be loaded.
        """
        root_str = str(self._root)
        self._observer.library_scan_started(root=root_str, prefix=prefix)

        if not self._root.is_dir():
            reason = "directory not found"
            self._observer.library_scan_failed(root=root_str, reason=reason)
            raise LibraryLoadError(root=self._root, reason=reason)

        loaded, errors = self._load_all()
        if errors:
            reason = "; ".join(errors)
            self._observer.library_scan_failed(root=root_str, reason=reason)
            raise LibraryLoadError(root=self._root, reason=reason)

        matched = [entry for entry in loaded if _matches(entry.name, prefix)]
        self._observer.library_scan_completed(
            root=root_str, total_entries=len(loaded), matched_entries=len(matched)
        )
        return matched

    def get(self, name: str) -> Category:
        """
        Return the category named *name* (case-insensitive).

        Raises:
            CategoryNotFoundError: if no category has that name.
            LibraryLoadError: if the library cannot be read.
        """
        wanted = name.casefold()
        for entry in self.entries():
            if entry.name.casefold() == wanted:
                return entry.category
        raise CategoryNotFoundError(name=name, root=self._root)

    def _load_all(self) -> tuple[list[LibraryEntry], list[str]]:
        """Load each category file, collecting errors without aborting early."""
        entries: list[LibraryEntry] = []
        errors: list[str] = []

        for path in self._category_files():
            try:
                category = self._store.load_category(path=path)
            except GameLoadError as exc:
                errors.append(f"{path.name}: {exc.reason}")
                continue
            entry = LibraryEntry(path=path, category=category)
            entries.append(entry)
            self._observer.library_entry_loaded(
                path=str(path), name=entry.name, is_valid=entry.is_valid
            )

        return entries, errors

    def _category_files(self) -> list[Path]:
        return sorted(
            path
            for path in self._root.iterdir()
            if path.is_file() and path.suffix.lower() in _CATEGORY_SUFFIXES
        )


def _matches(name: str, prefix: str | None) -> bool:
    if not prefix:
        return True
    return name.casefold().startswith(prefix.casefold())
