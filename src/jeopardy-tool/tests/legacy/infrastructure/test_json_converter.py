"""Tests for LegacyJsonConverter."""

import json
from pathlib import Path

import pytest

from jeopardy_tool.game.domain.answer import AudioAnswer, ImageAnswer, TextAnswer, VideoAnswer
from jeopardy_tool.legacy.infrastructure.errors import LegacyFormatError
from jeopardy_tool.legacy.infrastructure.json_converter import LegacyJsonConverter
from tests.legacy.fake_observer import FakeLegacyObserver

FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


@pytest.fixture
def observer() -> FakeLegacyObserver:
    return FakeLegacyObserver()


@pytest.fixture
def converter(observer: FakeLegacyObserver) -> LegacyJsonConverter:
    return LegacyJsonConverter(observer=observer)


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "legacy.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestConvert:
    """Legacy categories convert kind by kind."""

    def test_converts_every_kind(self, converter: LegacyJsonConverter) -> None:
        category = converter.convert(path=FIXTURES / "legacy_category.json")

        assert category.name == "Rivers"
        assert [type(a) for a in category.answers] == [
            TextAnswer,
            ImageAnswer,
            AudioAnswer,
            VideoAnswer,
            TextAnswer,
        ]
        assert category.is_valid()

    def test_payloads_are_carried_over(self, converter: LegacyJsonConverter) -> None:
        category = converter.convert(path=FIXTURES / "legacy_category.json")

        image = category.answers[1]
        assert isinstance(image, ImageAnswer)
        assert image.image == Path("assets/danube.png")
        assert image.question == "What is the Danube?"
        assert category.answers[0].question == "What is the Nile?"

    def test_double_jeopardy_flags_are_dropped(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver
    ) -> None:
        category = converter.convert(path=FIXTURES / "legacy_category.json")

        assert not any(answer.double_jeopardy for answer in category.answers)
        assert observer.dropped == [1]

    def test_unflagged_file_reports_no_drop(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver
    ) -> None:
        converter.convert(path=FIXTURES / "legacy_short.json")

        assert observer.dropped == []

    def test_short_category_converts_but_is_invalid(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver
    ) -> None:
        category = converter.convert(path=FIXTURES / "legacy_short.json")

        assert not category.is_valid()
        assert observer.completed == [("Lakes", 2)]

    def test_emits_started_and_completed(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver
    ) -> None:
        path = FIXTURES / "legacy_category.json"

        converter.convert(path=path)

        assert observer.started == [str(path)]
        assert observer.completed == [("Rivers", 5)]
        assert observer.failed == []


class TestConvertErrors:
    """Malformed legacy files raise LegacyFormatError."""

    def test_missing_file(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver, tmp_path: Path
    ) -> None:
        with pytest.raises(LegacyFormatError, match="file not found"):
            converter.convert(path=tmp_path / "absent.json")

        assert observer.failed == ["file not found"]

    def test_invalid_json(self, converter: LegacyJsonConverter) -> None:
        with pytest.raises(LegacyFormatError, match="invalid JSON"):
            converter.convert(path=FIXTURES / "legacy_invalid_json.json")

    def test_non_utf8_file(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver, tmp_path: Path
    ) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "caf\xe9", "answers": []}')

        with pytest.raises(LegacyFormatError, match="not valid UTF-8"):
            converter.convert(path=path)

        assert len(observer.failed) == 1

    def test_directory_path(self, converter: LegacyJsonConverter, tmp_path: Path) -> None:
        with pytest.raises(LegacyFormatError) as exc_info:
            converter.convert(path=tmp_path)

        assert exc_info.value.path == tmp_path

    def test_collects_every_malformed_answer(
        self, converter: LegacyJsonConverter, observer: FakeLegacyObserver
    ) -> None:
        with pytest.raises(LegacyFormatError) as exc_info:
            converter.convert(path=FIXTURES / "legacy_malformed.json")

        reason = exc_info.value.reason
        assert "answers[1]: unknown kind 'Hologram'" in reason
        assert "answers[2]: missing key(s) 'image'" in reason
        assert "answers[3]: expected an object with exactly one kind tag" in reason
        assert "answers[0]" not in reason
        assert observer.completed == []

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (["not", "an", "object"], "expected a JSON object"),
            ({"answers": []}, "non-text 'name'"),
            ({"name": "X"}, "non-list 'answers'"),
            ({"name": "X", "answers": [{"Text": "plain"}]}, "'Text' must be an object"),
        ],
    )
    def test_structural_problems(
        self, converter: LegacyJsonConverter, tmp_path: Path, data: object, expected: str
    ) -> None:
        with pytest.raises(LegacyFormatError, match=expected):
            converter.convert(path=_write(tmp_path, data))

    def test_wrongly_typed_payload_is_rejected(
        self, converter: LegacyJsonConverter, tmp_path: Path
    ) -> None:
        data = {"name": "X", "answers": [{"Text": {"answer": 5, "question": "q"}}]}

        with pytest.raises(LegacyFormatError) as exc_info:
            converter.convert(path=_write(tmp_path, data))

        assert str(exc_info.value).startswith("Failed to convert legacy category ")
