"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, library_dir: str, games_dir: str) -> None:
        self._log.info(
            "config.loaded", path=path, library_dir=library_dir, games_dir=games_dir
        )

    def config_seed_warning(self, seed: int) -> None:
        self._log.warning(
            "config.seed_warning",
            seed=seed,
            message="A fixed seed makes every created game pick the same categories",
        )
