"""
Unit tests for the WorkoutGenerator pipeline.

Uses fake repositories and generation clients so every stage runs without
network or database access.
"""

import json
import logging

import pytest

from application.exceptions import (
    CatalogEmpty,
    MalformedGeneration,
    NoCandidates,
    NoExercisesMatched,
    NotConfigured,
    UpstreamError,
)
from models.generation import GenerationRequest, MatchMethod
from services.llm.client import PlanGeneratorClient
from services.workout_generator import WorkoutGenerator
from tests.fakes import (
    FailingPlanGeneratorClient,
    FakeExerciseRepository,
    FakePlanGeneratorClient,
)
from tests.fakes.plan_client import plan_payload


@pytest.fixture
def generation_request(sample_generation_request):
    return GenerationRequest(**sample_generation_request)


def make_generator(repo, client):
    return WorkoutGenerator(exercise_repo=repo, plan_client=client, environment="test")


@pytest.mark.unit
class TestGenerateSuccess:
    """Tests for a successful generation."""

    @pytest.mark.asyncio
    async def test_generates_plan_from_candidates(
        self, fake_exercise_repo, fake_plan_client, generation_request
    ):
        plan = await make_generator(fake_exercise_repo, fake_plan_client).generate(
            generation_request, user_id="user-1"
        )

        assert plan.name == "Dumbbell Strength"
        assert plan.estimated_duration == 45
        assert [e.name for e in plan.exercises] == [
            "Dumbbell Row",
            "Push-Up",
            "Dumbbell Bench Press",
        ]
        assert all(e.match_method == MatchMethod.EXACT for e in plan.exercises)
        assert plan.exercises[0].exercise_id == "ex-dumbbell-row"
        assert plan.exercises[0].sets == 4
        assert plan.exercises[0].rest_time == 90

    @pytest.mark.asyncio
    async def test_prompt_lists_only_equipment_candidates(
        self, fake_exercise_repo, fake_plan_client, generation_request
    ):
        await make_generator(fake_exercise_repo, fake_plan_client).generate(generation_request)

        prompt = fake_plan_client.last_prompt
        assert "- Dumbbell Row (" in prompt
        assert "- Push-Up (" in prompt
        assert "Barbell" not in prompt
        assert "Cable Standing Fly" not in prompt

    @pytest.mark.asyncio
    async def test_request_uses_json_mode_and_context(
        self, fake_exercise_repo, fake_plan_client, generation_request
    ):
        await make_generator(fake_exercise_repo, fake_plan_client).generate(
            generation_request, user_id="user-1"
        )

        call = fake_plan_client.calls[0]
        assert fake_plan_client.call_count == 1
        assert call["json_mode"] is True
        assert call["system_prompt"]
        assert call["context"].user_id == "user-1"
        assert call["context"].feature_name == "workout_generation"
        assert call["context"].environment == "test"

    @pytest.mark.asyncio
    async def test_fenced_response_with_prose(self, fake_exercise_repo, generation_request):
        raw = (
            "Here is your workout:\n```json\n"
            + json.dumps(plan_payload(["Push-Up"]))
            + "\n```\nHave fun!"
        )
        client = FakePlanGeneratorClient(response=raw)

        plan = await make_generator(fake_exercise_repo, client).generate(generation_request)

        assert [e.name for e in plan.exercises] == ["Push-Up"]

    @pytest.mark.asyncio
    async def test_containment_match_uses_catalog_name(
        self, fake_exercise_repo, generation_request
    ):
        client = FakePlanGeneratorClient(response=plan_payload(["Seated Dumbbell Row"]))

        plan = await make_generator(fake_exercise_repo, client).generate(generation_request)

        assert plan.exercises[0].name == "Dumbbell Row"
        assert plan.exercises[0].match_method == MatchMethod.CONTAINMENT

    @pytest.mark.asyncio
    async def test_partial_match_drops_unknown_exercises(
        self, fake_exercise_repo, generation_request, caplog
    ):
        client = FakePlanGeneratorClient(
            response=plan_payload(["Push-Up", "Kettlebell Swing", "Dumbbell Row"])
        )

        with caplog.at_level(logging.WARNING, logger="services.workout_generator"):
            plan = await make_generator(fake_exercise_repo, client).generate(generation_request)

        assert [e.name for e in plan.exercises] == ["Push-Up", "Dumbbell Row"]
        assert "Kettlebell Swing" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_plan_fields_use_defaults(self, fake_exercise_repo, generation_request):
        client = FakePlanGeneratorClient(response={"exercises": [{"name": "Push-Up"}]})

        plan = await make_generator(fake_exercise_repo, client).generate(generation_request)

        assert plan.name == "AI Generated Workout"
        assert plan.description == "Personalized workout plan"
        assert plan.estimated_duration == 45
        assert plan.exercises[0].sets == 3
        assert plan.exercises[0].reps == "10-12"
        assert plan.exercises[0].rest_time == 60

    @pytest.mark.asyncio
    async def test_catalog_not_modified(
        self, fake_exercise_repo, fake_plan_client, generation_request
    ):
        before = fake_exercise_repo.get_all()

        await make_generator(fake_exercise_repo, fake_plan_client).generate(generation_request)

        assert fake_exercise_repo.get_all() == before


@pytest.mark.unit
class TestGenerateFailures:
    """Tests for each failure path."""

    @pytest.mark.asyncio
    async def test_empty_catalog(self, empty_exercise_repo, fake_plan_client, generation_request):
        with pytest.raises(CatalogEmpty):
            await make_generator(empty_exercise_repo, fake_plan_client).generate(
                generation_request
            )

        assert fake_plan_client.call_count == 0

    @pytest.mark.asyncio
    async def test_no_candidates(self, fake_exercise_repo, fake_plan_client):
        request = GenerationRequest(
            goal="Swing things",
            equipment=["kettlebell"],
            duration_minutes=20,
            focus_area="full-body",
        )

        with pytest.raises(NoCandidates):
            await make_generator(fake_exercise_repo, fake_plan_client).generate(request)

        assert fake_plan_client.call_count == 0

    @pytest.mark.asyncio
    async def test_not_configured_checked_before_catalog(self, generation_request):
        repo = FakeExerciseRepository()

        with pytest.raises(NotConfigured) as exc_info:
            await make_generator(repo, PlanGeneratorClient(api_key=None)).generate(
                generation_request
            )

        assert exc_info.value.setting == "openai_api_key"
        assert repo.count_calls == 0
        assert repo.find_calls == []

    @pytest.mark.asyncio
    async def test_not_configured_wins_over_unknown_equipment(self, fake_exercise_repo):
        request = GenerationRequest(
            goal="Swing things",
            equipment=["kettlebell"],
            duration_minutes=20,
            focus_area="full-body",
        )
        client = FakePlanGeneratorClient(configured=False)

        with pytest.raises(NotConfigured):
            await make_generator(fake_exercise_repo, client).generate(request)

        assert fake_exercise_repo.find_calls == []
        assert client.call_count == 0

    @pytest.mark.asyncio
    async def test_not_configured_propagates(self, fake_exercise_repo, generation_request):
        client = FailingPlanGeneratorClient(NotConfigured("no key", setting="openai_api_key"))

        with pytest.raises(NotConfigured):
            await make_generator(fake_exercise_repo, client).generate(generation_request)

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self, fake_exercise_repo, generation_request):
        client = FailingPlanGeneratorClient(UpstreamError("boom", upstream_status=500))

        with pytest.raises(UpstreamError) as exc_info:
            await make_generator(fake_exercise_repo, client).generate(generation_request)

        assert exc_info.value.upstream_status == 500

    @pytest.mark.asyncio
    async def test_unparseable_response(self, fake_exercise_repo, generation_request):
        client = FakePlanGeneratorClient(response="I'd suggest some push-ups!")

        with pytest.raises(MalformedGeneration) as exc_info:
            await make_generator(fake_exercise_repo, client).generate(generation_request)

        assert exc_info.value.raw_text == "I'd suggest some push-ups!"
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_missing_exercises_array(self, fake_exercise_repo, generation_request):
        client = FakePlanGeneratorClient(response={"workoutName": "Nothing"})

        with pytest.raises(MalformedGeneration):
            await make_generator(fake_exercise_repo, client).generate(generation_request)

    @pytest.mark.asyncio
    async def test_nothing_matched(self, fake_exercise_repo, generation_request):
        client = FakePlanGeneratorClient(response=plan_payload(["Box Jump", "Battle Ropes"]))

        with pytest.raises(NoExercisesMatched) as exc_info:
            await make_generator(fake_exercise_repo, client).generate(generation_request)

        diagnostics = exc_info.value.diagnostics
        assert diagnostics.suggested_names == ["Box Jump", "Battle Ropes"]
        assert diagnostics.unmatched_names == ["Box Jump", "Battle Ropes"]
        assert diagnostics.candidate_count == 5
