"""jeopardy-tool: author and validate Jeopardy-style question sets."""

__version__ = "0.2.0"
