"""
Unit tests for generator output normalization.

Tests cover:
- Code-fence stripping (tagged, untagged, with surrounding prose)
- Parse errors
- Top-level shape errors
- Entry and header extraction
"""

import json

import pytest

from services.response_normalizer import (
    NormalizationStatus,
    normalize_generation,
    strip_code_fences,
)


VALID_PLAN = {
    "workoutName": "Push Day",
    "description": "Chest and shoulders",
    "estimatedDuration": 40,
    "exercises": [
        {"name": "Dumbbell Bench Press", "sets": 3, "reps": "8-10", "restTime": 90},
    ],
}


# ---------------------------------------------------------------------------
# strip_code_fences
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestStripCodeFences:
    """Tests for strip_code_fences."""

    def test_plain_json_is_unchanged(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'

    def test_json_tagged_fence(self):
        raw = '```json\n{"a": 1}\n```'
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_untagged_fence(self):
        raw = '```\n{"a": 1}\n```'
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_fence_with_prose_before_and_after(self):
        raw = 'Here is your plan:\n```json\n{"a": 1}\n```\nEnjoy your workout!'
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_unclosed_fence_marker_removed(self):
        raw = '```json\n{"a": 1}'
        assert strip_code_fences(raw) == '{"a": 1}'

    @pytest.mark.parametrize("tag", ["javascript", "js", "jsonc", "json5", "JSON"])
    def test_other_language_tags_stripped(self, tag):
        raw = f"```{tag}\n{{\"a\": 1}}\n```"
        assert strip_code_fences(raw) == '{"a": 1}'

    def test_untagged_inline_fence_keeps_body(self):
        assert strip_code_fences('```{"a": 1}```') == '{"a": 1}'


# ---------------------------------------------------------------------------
# normalize_generation
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestNormalizeGeneration:
    """Tests for normalize_generation."""

    def test_valid_plan_is_ok(self):
        result = normalize_generation(json.dumps(VALID_PLAN))

        assert result.ok
        assert result.status == NormalizationStatus.OK
        assert result.data == VALID_PLAN
        assert len(result.entries) == 1
        assert result.entries[0].name == "Dumbbell Bench Press"
        assert result.entries[0].rest_time == 90
        assert result.header.name == "Push Day"
        assert result.header.estimated_duration == 40

    def test_fenced_json_with_trailing_prose(self):
        raw = f"```json\n{json.dumps(VALID_PLAN)}\n```\nLet me know if you want changes."

        result = normalize_generation(raw)

        assert result.ok
        assert result.entries[0].name == "Dumbbell Bench Press"

    def test_javascript_fenced_plan_is_ok(self):
        raw = f"```javascript\n{json.dumps(VALID_PLAN)}\n```"

        result = normalize_generation(raw)

        assert result.ok
        assert result.data == VALID_PLAN

    def test_raw_text_is_preserved(self):
        raw = f"```json\n{json.dumps(VALID_PLAN)}\n```"
        assert normalize_generation(raw).raw_text == raw

    def test_invalid_json_is_parse_error(self):
        result = normalize_generation("Sorry, I cannot help with that.")

        assert not result.ok
        assert result.status == NormalizationStatus.PARSE_ERROR
        assert result.data is None
        assert "Invalid JSON" in result.error

    def test_empty_text_is_parse_error(self):
        assert normalize_generation("").status == NormalizationStatus.PARSE_ERROR

    def test_top_level_array_is_schema_error(self):
        result = normalize_generation("[1, 2, 3]")

        assert result.status == NormalizationStatus.SCHEMA_ERROR
        assert "list" in result.error

    def test_missing_exercises_is_schema_error(self):
        result = normalize_generation('{"workoutName": "Push Day"}')

        assert result.status == NormalizationStatus.SCHEMA_ERROR
        assert result.data is None

    def test_exercises_not_a_list_is_schema_error(self):
        result = normalize_generation('{"exercises": "Push-Up"}')
        assert result.status == NormalizationStatus.SCHEMA_ERROR

    def test_empty_exercises_list_is_ok(self):
        result = normalize_generation('{"exercises": []}')

        assert result.ok
        assert result.entries == []

    def test_malformed_entries_become_empty_names(self):
        result = normalize_generation('{"exercises": ["Push-Up", {"sets": 3}, {"name": 7}]}')

        assert result.ok
        assert [entry.name for entry in result.entries] == ["", "", ""]

    def test_snake_case_rest_time_accepted(self):
        result = normalize_generation('{"exercises": [{"name": "Plank", "rest_time": 30}]}')
        assert result.entries[0].rest_time == 30

    def test_name_field_used_when_workout_name_missing(self):
        result = normalize_generation('{"name": "Legs", "exercises": []}')
        assert result.header.name == "Legs"
