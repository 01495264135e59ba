"""Structlog implementation of the LegacyObserver port."""

import structlog


class StructlogLegacyObserver:
    """Delegates legacy conversion events to structlog.

    Satisfies the LegacyObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def legacy_conversion_started(self, path: str) -> None:
        self._log.info("legacy.conversion_started", path=path)

    def legacy_double_jeopardy_dropped(self, path: str, total_flags: int) -> None:
        self._log.warning(
            "legacy.double_jeopardy_dropped",
            path=path,
            total_flags=total_flags,
            message="Double Jeopardy flags are assigned per game and were reset",
        )

    def legacy_conversion_completed(
        self, path: str, name: str, total_answers: int
    ) -> None:
        self._log.info(
            "legacy.conversion_completed",
            path=path,
            name=name,
            total_answers=total_answers,
        )

    def legacy_conversion_failed(self, path: str, reason: str) -> None:
        self._log.error("legacy.conversion_failed", path=path, reason=reason)
