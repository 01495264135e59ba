"""Error types raised by game infrastructure."""

from pathlib import Path

from jeopardy_tool.core.errors import JeopardyToolError
from jeopardy_tool.game.domain.validation import ValidationReport


class GameLoadError(JeopardyToolError):
    """Raised when a game or category file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class GameSaveError(JeopardyToolError):
    """Raised when a game or category file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save {path}: {reason}")


class GameValidationError(JeopardyToolError):
    """Raised when a game or category fails validation."""

    def __init__(self, subject: str, report: ValidationReport, strict: bool = False) -> None:
        self.subject = subject
        self.report = report
        issues = report.issues if strict else report.errors
        detail = "; ".join(str(issue) for issue in issues)
        super().__init__(f"Failed to validate {subject}: {detail}")
