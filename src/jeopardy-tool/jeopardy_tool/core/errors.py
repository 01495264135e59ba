"""Base exception class for all jeopardy-tool errors."""


class JeopardyToolError(Exception):
    """Base class for all jeopardy-tool errors.

    Every subclass formats a message starting with "Failed to " so the CLI
    can print it unchanged.
    """
