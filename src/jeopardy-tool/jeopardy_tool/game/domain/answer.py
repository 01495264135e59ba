"""Answer models — discriminated union on the `type` field."""

from pathlib import Path
from typing import Annotated, Literal, TypeAlias, assert_never

from pydantic import BaseModel, ConfigDict, Field

from jeopardy_tool.game.domain.validation import ValidationReport

# Extensions accepted for each media kind, lowercase without the dot.
IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp", "svg"})
AUDIO_EXTENSIONS = frozenset({"mp3", "wav", "ogg", "flac", "m4a"})
VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "mkv", "mov", "avi"})


class TextAnswer(BaseModel):
    """Answer shown as plain text."""

    model_config = ConfigDict(validate_assignment=True)

    type: Literal["text"] = "text"
    answer: str
    question: str
    double_jeopardy: bool = False


class ImageAnswer(BaseModel):
    """Answer shown as an image asset."""

    model_config = ConfigDict(validate_assignment=True)

    type: Literal["image"] = "image"
    question: str
    image: Path
    double_jeopardy: bool = False


class AudioAnswer(BaseModel):
    """Answer played as an audio asset."""

    model_config = ConfigDict(validate_assignment=True)

    type: Literal["audio"] = "audio"
    question: str
    audio: Path
    double_jeopardy: bool = False


class VideoAnswer(BaseModel):
    """Answer played as a video asset."""

    model_config = ConfigDict(validate_assignment=True)

    type: Literal["video"] = "video"
    question: str
    video: Path
    double_jeopardy: bool = False


# Pydantic selects the concrete model from the `type` field.
Answer: TypeAlias = Annotated[
    TextAnswer | ImageAnswer | AudioAnswer | VideoAnswer,
    Field(discriminator="type"),
]


def is_valid_answer(answer: Answer) -> bool:
    """Structural validity of a single answer.

    Every kind is structurally valid; content problems are reported as
    warnings by `check_answer` instead.
    """
    return isinstance(answer, (TextAnswer, ImageAnswer, AudioAnswer, VideoAnswer))


def answer_payload(answer: Answer) -> str:
    """Return the prompt payload shown to contestants, as display text."""
    if isinstance(answer, TextAnswer):
        return answer.answer
    if isinstance(answer, ImageAnswer):
        return str(answer.image)
    if isinstance(answer, AudioAnswer):
        return str(answer.audio)
    if isinstance(answer, VideoAnswer):
        return str(answer.video)
    assert_never(answer)


def check_answer(
    answer: Answer,
    path: str,
    report: ValidationReport,
    asset_root: Path | None = None,
) -> None:
    """Record content warnings for one answer into *report*.

    When *asset_root* is given, media paths are resolved against it and
    missing files are reported.
    """
    if not answer.question.strip():
        report.add(path=f"{path}.question", message="question is empty", severity="warning")

    if isinstance(answer, TextAnswer):
        if not answer.answer.strip():
            report.add(path=f"{path}.answer", message="answer is empty", severity="warning")
    elif isinstance(answer, ImageAnswer):
        _check_asset(answer.image, IMAGE_EXTENSIONS, f"{path}.image", report, asset_root)
    elif isinstance(answer, AudioAnswer):
        _check_asset(answer.audio, AUDIO_EXTENSIONS, f"{path}.audio", report, asset_root)
    elif isinstance(answer, VideoAnswer):
        _check_asset(answer.video, VIDEO_EXTENSIONS, f"{path}.video", report, asset_root)
    else:
        assert_never(answer)


def _check_asset(
    asset: Path,
    extensions: frozenset[str],
    path: str,
    report: ValidationReport,
    asset_root: Path | None,
) -> None:
    suffix = asset.suffix.lower().lstrip(".")
    if suffix not in extensions:
        allowed = ", ".join(sorted(extensions))
        report.add(
            path=path,
            message=(
                f"unrecognized extension '{asset.suffix}' for {asset}"
                f" (expected one of: {allowed})"
            ),
            severity="warning",
        )
    if asset_root is not None and not (asset_root / asset).is_file():
        report.add(path=path, message=f"asset not found: {asset}", severity="warning")
