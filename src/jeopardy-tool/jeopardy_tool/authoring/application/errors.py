"""Error types raised while authoring a game."""

from jeopardy_tool.core.errors import JeopardyToolError


class AuthoringError(JeopardyToolError):
    """Raised when a game cannot be assembled from the requested categories."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to create game: {reason}")
