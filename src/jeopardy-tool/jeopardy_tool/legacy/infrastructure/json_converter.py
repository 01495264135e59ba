"""Legacy category converter — reads the old externally tagged JSON layout.

The previous version of the tool wrote each answer as a single-key object
named after its kind::

    {"name": "Rivers", "answers": [
        {"Text": {"answer": "...", "question": "...", "double_jeopardy": false}},
        {"Image": {"question": "...", "image": "danube.png", "double_jeopardy": false}}
    ]}

The converter maps that onto the current `type`-tagged Category model.
"""

import json
from pathlib import Path
from typing import Any

from jeopardy_tool.game.domain.category import Category
from jeopardy_tool.legacy.domain.observer import LegacyObserver
from jeopardy_tool.legacy.infrastructure.errors import LegacyFormatError

# Legacy tag -> (current type, payload field).
_LEGACY_KINDS: dict[str, tuple[str, str]] = {
    "Text": ("text", "answer"),
    "Image": ("image", "image"),
    "Audio": ("audio", "audio"),
    "Video": ("video", "video"),
}


class LegacyJsonConverter:
    """Converts one legacy JSON category file into a Category."""

    def __init__(self, observer: LegacyObserver) -> None:
        self._observer = observer

    def convert(self, path: Path) -> Category:
        """
        Read *path* and return the equivalent current-format Category.

        Double Jeopardy flags are reset: they belong to a game, not a category.
        Collects ALL malformed answers before raising a single LegacyFormatError.

        Raises:
            LegacyFormatError: if the file is missing, is not valid JSON, or any
                answer does not match the legacy layout.
        """
        path_str = str(path)
        self._observer.legacy_conversion_started(path=path_str)

        try:
            raw = _read_json(path=path)
            name, answers, flagged = _convert_category(raw=raw)
            category = Category.model_validate({"name": name, "answers": answers})
        except ValueError as exc:
            reason = str(exc)
            self._observer.legacy_conversion_failed(path=path_str, reason=reason)
            raise LegacyFormatError(path=path, reason=reason) from exc

        if flagged:
            self._observer.legacy_double_jeopardy_dropped(path=path_str, total_flags=flagged)
        self._observer.legacy_conversion_completed(
            path=path_str, name=category.name, total_answers=len(category.answers)
        )
        return category


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:
        raise ValueError("file not found") from exc
    except UnicodeDecodeError as exc:
        raise ValueError(f"not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise ValueError(exc.strerror or str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc


def _convert_category(raw: Any) -> tuple[str, list[dict[str, Any]], int]:
    """Return (name, current-format answers, number of dropped flags).

    Raises:
        ValueError: describing every problem found.
    """
    if not isinstance(raw, dict):
        raise ValueError("expected a JSON object at the top level")

    name = raw.get("name")
    if not isinstance(name, str):
        raise ValueError("missing or non-text 'name'")

    raw_answers = raw.get("answers")
    if not isinstance(raw_answers, list):
        raise ValueError("missing or non-list 'answers'")

    answers: list[dict[str, Any]] = []
    errors: list[str] = []
    flagged = 0
    for index, raw_answer in enumerate(raw_answers):
        result = _convert_answer(raw_answer=raw_answer, index=index)
        if isinstance(result, str):
            errors.append(result)
            continue
        answer, was_flagged = result
        answers.append(answer)
        flagged += int(was_flagged)

    if errors:
        raise ValueError("; ".join(errors))
    return name, answers, flagged


def _convert_answer(raw_answer: Any, index: int) -> tuple[dict[str, Any], bool] | str:
    """
    Convert one externally tagged answer.

    Returns the current-format answer and whether it was flagged, or an error
    string describing the problem.
    """
    if not isinstance(raw_answer, dict) or len(raw_answer) != 1:
        return f"answers[{index}]: expected an object with exactly one kind tag"

    tag, body = next(iter(raw_answer.items()))
    if tag not in _LEGACY_KINDS:
        known = ", ".join(_LEGACY_KINDS)
        return f"answers[{index}]: unknown kind '{tag}' (expected one of: {known})"
    if not isinstance(body, dict):
        return f"answers[{index}]: '{tag}' must be an object"

    answer_type, payload_field = _LEGACY_KINDS[tag]
    missing = [key for key in ("question", payload_field) if key not in body]
    if missing:
        keys = ", ".join(f"'{key}'" for key in missing)
        return f"answers[{index}]: missing key(s) {keys}"

    answer = {
        "type": answer_type,
        "question": body["question"],
        payload_field: body[payload_field],
        "double_jeopardy": False,
    }
    return answer, bool(body.get("double_jeopardy", False))
