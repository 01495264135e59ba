"""Fake LibraryObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanCompletedEvent:
    root: str
    total_entries: int
    matched_entries: int


class FakeLibraryObserver:
    def __init__(self) -> None:
        self.scans_started: list[str | None] = []
        self.entries_loaded: list[tuple[str, bool]] = []
        self.scans_completed: list[ScanCompletedEvent] = []
        self.scans_failed: list[str] = []

    def library_scan_started(self, root: str, prefix: str | None) -> None:
        self.scans_started.append(prefix)

    def library_entry_loaded(self, path: str, name: str, is_valid: bool) -> None:
        self.entries_loaded.append((name, is_valid))

    def library_scan_completed(
        self, root: str, total_entries: int, matched_entries: int
    ) -> None:
        self.scans_completed.append(
            ScanCompletedEvent(
                root=root, total_entries=total_entries, matched_entries=matched_entries
            )
        )

    def library_scan_failed(self, root: str, reason: str) -> None:
        self.scans_failed.append(reason)
