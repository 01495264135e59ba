"""Observer port for legacy category conversion — defines events in domain language."""

from typing import Protocol


class LegacyObserver(Protocol):
    def legacy_conversion_started(self, path: str) -> None: ...

    def legacy_double_jeopardy_dropped(self, path: str, total_flags: int) -> None: ...

    def legacy_conversion_completed(
        self, path: str, name: str, total_answers: int
    ) -> None: ...

    def legacy_conversion_failed(self, path: str, reason: str) -> None: ...
