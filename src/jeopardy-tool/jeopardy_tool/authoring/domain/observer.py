"""Observer port for game authoring — defines events in domain language."""

from typing import Protocol


class AuthoringObserver(Protocol):
    """Observer port emitting structured events while a game is assembled."""

    def authoring_started(self, requested: list[str]) -> None: ...

    def authoring_category_selected(self, name: str, explicit: bool) -> None: ...

    def authoring_double_jeopardy_assigned(
        self, category: str, answer_index: int
    ) -> None: ...

    def authoring_game_built(self, category_names: list[str]) -> None: ...
