"""Error types raised by legacy conversion infrastructure."""

from pathlib import Path

from jeopardy_tool.core.errors import JeopardyToolError


class LegacyFormatError(JeopardyToolError):
    """Raised when a legacy category file cannot be read or is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to convert legacy category {path}: {reason}")
