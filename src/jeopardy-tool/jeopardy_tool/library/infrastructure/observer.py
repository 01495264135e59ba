"""Structlog implementation of the LibraryObserver port."""

import structlog


class StructlogLibraryObserver:
    """Delegates category library events to structlog.

    Satisfies the LibraryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def library_scan_started(self, root: str, prefix: str | None) -> None:
        self._log.debug("library.scan_started", root=root, prefix=prefix)

    def library_entry_loaded(self, path: str, name: str, is_valid: bool) -> None:
        self._log.debug("library.entry_loaded", path=path, name=name, is_valid=is_valid)
        if not is_valid:
            self._log.warning(
                "library.entry_invalid",
                path=path,
                name=name,
                message="Category does not have exactly 5 answers",
            )

    def library_scan_completed(
        self, root: str, total_entries: int, matched_entries: int
    ) -> None:
        self._log.info(
            "library.scan_completed",
            root=root,
            total_entries=total_entries,
            matched_entries=matched_entries,
        )

    def library_scan_failed(self, root: str, reason: str) -> None:
        self._log.error("library.scan_failed", root=root, reason=reason)
