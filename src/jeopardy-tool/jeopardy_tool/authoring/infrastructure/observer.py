"""StructlogAuthoringObserver — production observer that delegates to structlog."""

import structlog


class StructlogAuthoringObserver:
    """Logs authoring events to structlog.

    Does NOT inherit from AuthoringObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def authoring_started(self, requested: list[str]) -> None:
        self._log.info("authoring.started", requested=requested)

    def authoring_category_selected(self, name: str, explicit: bool) -> None:
        self._log.debug("authoring.category_selected", name=name, explicit=explicit)

    def authoring_double_jeopardy_assigned(
        self, category: str, answer_index: int
    ) -> None:
        self._log.debug(
            "authoring.double_jeopardy_assigned",
            category=category,
            answer_index=answer_index,
        )

    def authoring_game_built(self, category_names: list[str]) -> None:
        self._log.info("authoring.game_built", category_names=category_names)
