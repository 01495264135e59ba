"""Top-level ToolConfig — the root configuration object."""

from pathlib import Path

from pydantic import BaseModel, Field


class ToolConfig(BaseModel, frozen=True, extra="forbid"):
    """Root configuration for jeopardy-tool. Every field has a default."""

    library_dir: Path = Path("./categories")
    games_dir: Path = Path("./games")
    asset_root: Path | None = None
    seed: int | None = Field(default=None, ge=0)
