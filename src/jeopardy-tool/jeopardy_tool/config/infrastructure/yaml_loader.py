"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from jeopardy_tool.config.domain.config import ToolConfig
from jeopardy_tool.config.domain.observer import ConfigObserver
from jeopardy_tool.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from jeopardy_tool.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

_PATH_FIELDS = ("library_dir", "games_dir", "asset_root")


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a ToolConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> ToolConfig:
        """
        Load, interpolate, validate, and return a ToolConfig from a YAML file.

        An empty file yields the defaults. Relative directories are resolved
        against the directory holding the config file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        resolved = _resolve_paths(interpolated=interpolated, base_dir=path.parent)
        cfg = _build_config(resolved=resolved)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path),
            library_dir=str(cfg.library_dir),
            games_dir=str(cfg.games_dir),
        )
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(path=path, reason=f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError("expected a mapping at the top level")
    return raw


def _check_missing_env_vars(raw: dict[str, Any]) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _resolve_paths(interpolated: Any, base_dir: Path) -> Any:
    """Anchor relative directory fields at *base_dir*, leaving absent or null fields alone."""
    resolved = dict(interpolated)
    for field in _PATH_FIELDS:
        value = resolved.get(field)
        if isinstance(value, str) and value:
            candidate = Path(value).expanduser()
            resolved[field] = candidate if candidate.is_absolute() else base_dir / candidate
    return resolved


def _build_config(resolved: Any) -> ToolConfig:
    try:
        return ToolConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: ToolConfig, observer: ConfigObserver) -> None:
    if cfg.seed is not None:
        observer.config_seed_warning(cfg.seed)
