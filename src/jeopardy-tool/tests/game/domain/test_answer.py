"""Tests for the Answer discriminated union and per-answer content checks."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import TypeAdapter, ValidationError

from jeopardy_tool.game.domain.answer import (
    Answer,
    AudioAnswer,
    ImageAnswer,
    TextAnswer,
    VideoAnswer,
    answer_payload,
    check_answer,
    is_valid_answer,
)
from jeopardy_tool.game.domain.validation import ValidationReport

_ADAPTER: TypeAdapter[Answer] = TypeAdapter(Answer)


@dataclass
class _HologramAnswer:
    """An answer kind the union does not know about."""

    question: str = "What is this?"
    double_jeopardy: bool = False


def _warnings(answer: Answer, asset_root: Path | None = None) -> list[str]:
    report = ValidationReport()
    check_answer(answer, "a", report, asset_root)
    assert report.errors == []
    return [issue.path for issue in report.warnings]


class TestAnswerDiscriminator:
    """The `type` field selects the concrete answer model."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"type": "text", "answer": "x", "question": "q"}, TextAnswer),
            ({"type": "image", "image": "x.png", "question": "q"}, ImageAnswer),
            ({"type": "audio", "audio": "x.mp3", "question": "q"}, AudioAnswer),
            ({"type": "video", "video": "x.mp4", "question": "q"}, VideoAnswer),
        ],
    )
    def test_type_selects_model(self, data: dict[str, str], expected: type) -> None:
        assert isinstance(_ADAPTER.validate_python(data), expected)

    def test_double_jeopardy_defaults_to_false(self) -> None:
        answer = _ADAPTER.validate_python({"type": "text", "answer": "x", "question": "q"})

        assert answer.double_jeopardy is False

    def test_unknown_type_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ADAPTER.validate_python({"type": "hologram", "question": "q"})

    def test_missing_payload_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ADAPTER.validate_python({"type": "image", "question": "q"})

    def test_media_payload_is_a_path(self) -> None:
        answer = _ADAPTER.validate_python(
            {"type": "video", "video": "clips/a.mp4", "question": "q"}
        )

        assert isinstance(answer, VideoAnswer)
        assert answer.video == Path("clips/a.mp4")


class TestAnswerValidity:
    """Every answer kind is structurally valid."""

    @pytest.mark.parametrize(
        "answer",
        [
            TextAnswer(answer="", question=""),
            ImageAnswer(question="", image=Path("")),
            AudioAnswer(question="q", audio=Path("no-extension")),
            VideoAnswer(question="q", video=Path("x.mp4"), double_jeopardy=True),
        ],
    )
    def test_is_valid_for_every_kind(self, answer: Answer) -> None:
        assert is_valid_answer(answer) is True


class TestAnswerPayload:
    """answer_payload returns the text or asset path shown to contestants."""

    def test_text_payload(self) -> None:
        assert answer_payload(TextAnswer(answer="Paris", question="q")) == "Paris"

    def test_image_payload(self) -> None:
        answer = ImageAnswer(question="q", image=Path("img/eiffel.jpg"))

        assert answer_payload(answer) == str(Path("img/eiffel.jpg"))

    def test_audio_payload(self) -> None:
        answer = AudioAnswer(question="q", audio=Path("anthem.ogg"))

        assert answer_payload(answer) == "anthem.ogg"


class TestAnswerContentWarnings:
    """check_answer reports content problems as warnings, never errors."""

    def test_complete_text_answer_has_no_warnings(self) -> None:
        assert _warnings(TextAnswer(answer="Paris", question="What is the capital?")) == []

    def test_empty_question_warns(self) -> None:
        assert _warnings(TextAnswer(answer="Paris", question="")) == ["a.question"]

    def test_blank_text_answer_warns(self) -> None:
        assert _warnings(TextAnswer(answer="   ", question="q")) == ["a.answer"]

    def test_recognized_extensions_do_not_warn(self) -> None:
        assert _warnings(ImageAnswer(question="q", image=Path("x.JPEG"))) == []
        assert _warnings(AudioAnswer(question="q", audio=Path("x.flac"))) == []
        assert _warnings(VideoAnswer(question="q", video=Path("x.webm"))) == []

    def test_wrong_extension_for_kind_warns(self) -> None:
        assert _warnings(AudioAnswer(question="q", audio=Path("x.png"))) == ["a.audio"]

    def test_missing_asset_warns_when_root_given(self, tmp_path: Path) -> None:
        answer = ImageAnswer(question="q", image=Path("missing.png"))

        assert _warnings(answer, asset_root=tmp_path) == ["a.image"]

    def test_present_asset_does_not_warn(self, tmp_path: Path) -> None:
        (tmp_path / "clips").mkdir()
        (tmp_path / "clips" / "intro.mp4").write_bytes(b"\x00")
        answer = VideoAnswer(question="q", video=Path("clips/intro.mp4"))

        assert _warnings(answer, asset_root=tmp_path) == []

    def test_assets_are_not_checked_without_root(self) -> None:
        answer = ImageAnswer(question="q", image=Path("missing.png"))

        assert _warnings(answer) == []


class TestUnknownAnswerKind:
    """Code that branches on answer kind rejects kinds outside the union."""

    def test_payload_rejects_unknown_kind(self) -> None:
        with pytest.raises(AssertionError):
            answer_payload(_HologramAnswer())  # type: ignore[arg-type]

    def test_content_check_rejects_unknown_kind(self) -> None:
        with pytest.raises(AssertionError):
            check_answer(_HologramAnswer(), "a", ValidationReport())  # type: ignore[arg-type]
