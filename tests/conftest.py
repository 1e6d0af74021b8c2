"""
Pytest fixtures for workout generation API tests.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from backend.main import create_app
from backend.settings import Settings
from api.deps import (
    get_current_user,
    get_exercise_repo,
    get_exercise_source,
    get_plan_client,
)
from tests.fakes import FakeExerciseRepository, FakeExerciseSource, FakePlanGeneratorClient


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        _env_file=None,
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        openai_api_key="sk-test",
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_current_user] = mock_get_current_user
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("ENVIRONMENT", "test")


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_generation_request() -> Dict[str, Any]:
    """Valid payload for workout generation."""
    return {
        "goal": "Build upper body strength",
        "equipment": ["dumbbell", "body weight"],
        "duration_minutes": 45,
        "focus_area": "upper-body",
    }


# ---------------------------------------------------------------------------
# Fake Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_exercise_repo() -> FakeExerciseRepository:
    """Fake exercise repository seeded with a small catalog."""
    repo = FakeExerciseRepository()
    repo.seed_default_exercises()
    return repo


@pytest.fixture
def empty_exercise_repo() -> FakeExerciseRepository:
    """Fake exercise repository with no exercises."""
    return FakeExerciseRepository()


@pytest.fixture
def fake_plan_client() -> FakePlanGeneratorClient:
    """Fake generation client returning a plan of catalog exercises."""
    from tests.fakes.plan_client import plan_payload

    return FakePlanGeneratorClient(
        response=plan_payload(["Dumbbell Row", "Push-Up", "Dumbbell Bench Press"])
    )


@pytest.fixture
def fake_exercise_source() -> FakeExerciseSource:
    """Fake ExerciseDB source with 250 exercises."""
    from tests.fakes.exercise_source import make_source_rows

    return FakeExerciseSource(rows=make_source_rows(250))


@pytest.fixture
def client_with_all_fakes(
    app,
    fake_exercise_repo,
    fake_plan_client,
    fake_exercise_source,
) -> Generator[TestClient, None, None]:
    """TestClient with all fake repositories and clients injected."""
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_exercise_repo] = lambda: fake_exercise_repo
    app.dependency_overrides[get_plan_client] = lambda: fake_plan_client
    app.dependency_overrides[get_exercise_source] = lambda: fake_exercise_source
    yield TestClient(app)
    app.dependency_overrides.clear()
