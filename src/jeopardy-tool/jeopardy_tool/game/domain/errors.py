"""Error types raised by the game domain."""

from jeopardy_tool.core.errors import JeopardyToolError


class DoubleJeopardyError(JeopardyToolError):
    """Raised when there are too few entries to pick Double Jeopardy answers from."""

    def __init__(self, scope: str, available: int, required: int) -> None:
        self.scope = scope
        self.available = available
        self.required = required
        super().__init__(
            f"Failed to assign Double Jeopardy: {scope} has {available}"
            f" entries, at least {required} required"
        )
