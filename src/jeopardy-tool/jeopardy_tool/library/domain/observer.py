"""Observer port for the category library — defines events in domain language."""

from typing import Protocol


class LibraryObserver(Protocol):
    def library_scan_started(self, root: str, prefix: str | None) -> None: ...

    def library_entry_loaded(self, path: str, name: str, is_valid: bool) -> None: ...

    def library_scan_completed(
        self, root: str, total_entries: int, matched_entries: int
    ) -> None: ...

    def library_scan_failed(self, root: str, reason: str) -> None: ...
