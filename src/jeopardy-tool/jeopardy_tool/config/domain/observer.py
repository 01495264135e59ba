"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, path: str, library_dir: str, games_dir: str) -> None: ...

    def config_seed_warning(self, seed: int) -> None: ...
