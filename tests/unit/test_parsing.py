"""
Unit tests for the free-text suggestion parser.
"""

import pytest

from plan_engine.application.exceptions import SuggestionParseError
from plan_engine.services.llm.parsing import (
    ParseSource,
    extract_uuids,
    first_json_array,
    parse_suggestion_text,
)

ID_A = "3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b01"
ID_B = "3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b02"
ID_C = "3f1c2a4e-0b7d-4e8a-9c11-2d3e4f5a6b03"


@pytest.mark.unit
class TestFirstJsonArray:
    def test_bare_array(self):
        assert first_json_array('["a", "b"]') == ["a", "b"]

    def test_array_in_code_fence(self):
        text = 'Here you go:\n```json\n["a", "b", "c"]\n```\nEnjoy!'
        assert first_json_array(text) == ["a", "b", "c"]

    def test_skips_brackets_that_are_not_json(self):
        assert first_json_array('[see below] then ["x", "y"]') == ["x", "y"]

    def test_no_array(self):
        assert first_json_array("no brackets here") is None


@pytest.mark.unit
class TestExtractUuids:
    def test_keeps_first_occurrence_order(self):
        text = f"{ID_B} first, then {ID_A}, and {ID_B} again"
        assert extract_uuids(text) == [ID_B, ID_A]

    def test_case_insensitive(self):
        assert extract_uuids(ID_A.upper()) == [ID_A.upper()]


@pytest.mark.unit
class TestParseSuggestionText:
    def test_json_array_pass(self):
        result = parse_suggestion_text(f'["{ID_A}", "{ID_B}", "{ID_C}"]')

        assert result.ok
        assert result.source == ParseSource.JSON_ARRAY
        assert result.ids == [ID_A, ID_B, ID_C]

    def test_non_string_elements_are_dropped(self):
        result = parse_suggestion_text('["a", 1, null, "b", {"id": "c"}]')
        assert result.ids == ["a", "b"]

    def test_non_uuid_ids_are_kept_from_array(self):
        result = parse_suggestion_text('Plan: ["sq-001", "pu-001"]')
        assert result.ids == ["sq-001", "pu-001"]

    def test_prose_with_ids_uses_pattern_pass(self):
        text = (
            f"I recommend starting with {ID_A} to warm up, then {ID_B} for strength, "
            f"and finishing with {ID_C}."
        )

        result = parse_suggestion_text(text)

        assert result.ok
        assert result.source == ParseSource.ID_PATTERN
        assert result.ids == [ID_A, ID_B, ID_C]

    def test_array_without_strings_falls_through_to_pattern(self):
        result = parse_suggestion_text(f"[1, 2, 3] and also {ID_A}")

        assert result.source == ParseSource.ID_PATTERN
        assert result.ids == [ID_A]

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_text_is_an_error(self, text):
        result = parse_suggestion_text(text)

        assert not result.ok
        assert isinstance(result.error, SuggestionParseError)

    def test_no_ids_is_an_error(self):
        result = parse_suggestion_text("Sorry, I can't help with that.")

        assert not result.ok
        with pytest.raises(SuggestionParseError):
            result.unwrap()

    def test_unwrap_returns_ids(self):
        assert parse_suggestion_text('["a"]').unwrap() == ["a"]
