"""Error types raised by category library infrastructure."""

from pathlib import Path

from jeopardy_tool.core.errors import JeopardyToolError


class LibraryLoadError(JeopardyToolError):
    """Raised when the library directory or any of its category files cannot be read."""

    def __init__(self, root: Path, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"Failed to load category library {root}: {reason}")


class CategoryNotFoundError(JeopardyToolError):
    """Raised when no category in the library has the requested name."""

    def __init__(self, name: str, root: Path) -> None:
        self.name = name
        self.root = root
        super().__init__(f"Failed to find category '{name}' in {root}")
