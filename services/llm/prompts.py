"""
LLM prompt templates for workout generation and form tips.

Prompts are built deterministically from the request and the candidate list,
so the same inputs always produce the same prompt text.
"""

from typing import List, Optional

from core.constants import MAX_PLAN_EXERCISES, MIN_PLAN_EXERCISES
from core.sanitization import sanitize_user_input
from models.exercise import ExerciseRecord
from models.generation import GenerationRequest

WORKOUT_GENERATION_SYSTEM_PROMPT = """You are an expert personal trainer who designs safe, balanced single-session workouts.

You only ever choose exercises from the list you are given and you always answer with a single JSON object."""

WORKOUT_GENERATION_USER_PROMPT = """Create a personalized workout plan based on the following:

**User Profile:**
- Goal: {goal}
- Available Equipment: {equipment}
- Workout Duration: {duration} minutes
- Focus Area: {focus_area}

**Available Exercises:**
{available_exercises_formatted}

**Instructions:**
1. Select {min_exercises}-{max_exercises} exercises from the available exercises list that match the user's goal and focus area
2. Create a balanced workout routine
3. Specify sets, reps, and rest time (in seconds) for each exercise
4. Add brief notes for each exercise if needed

**Output Format (JSON):**
{{
  "workoutName": "descriptive name",
  "description": "brief description",
  "estimatedDuration": {duration},
  "exercises": [
    {{
      "name": "exact name from the exercise list",
      "sets": 3,
      "reps": "10-12",
      "restTime": 60,
      "notes": "optional coaching tip"
    }}
  ]
}}

IMPORTANT:
- Use ONLY exercises from the provided list
- Copy exercise names EXACTLY as they appear in the list
- Ensure the workout fits within {duration} minutes
- Return ONLY valid JSON, no markdown or extra text"""

FORM_TIPS_PROMPT = """Provide 3-4 brief form tips for {exercise_name}{details}. Focus on proper technique and safety. Answer in plain text."""


def format_candidate(exercise: ExerciseRecord) -> str:
    """Format one catalog exercise as a prompt list line."""
    return (
        f"- {exercise.name} ({exercise.body_part}, targets: {exercise.target}, "
        f"equipment: {exercise.equipment})"
    )


def build_workout_prompt(
    request: GenerationRequest,
    candidates: List[ExerciseRecord],
) -> str:
    """
    Build the user prompt for workout generation.

    Every candidate is listed with its name, body part, target and equipment,
    in candidate order, so the generator has no reason to invent exercises.

    Args:
        request: Validated generation request
        candidates: Candidate exercises, in the order they will be matched

    Returns:
        Formatted user prompt string
    """
    exercises_formatted = "\n".join(format_candidate(ex) for ex in candidates)

    return WORKOUT_GENERATION_USER_PROMPT.format(
        goal=request.goal,
        equipment=", ".join(request.equipment),
        duration=request.duration_minutes,
        focus_area=request.focus_area.value,
        available_exercises_formatted=exercises_formatted,
        min_exercises=MIN_PLAN_EXERCISES,
        max_exercises=MAX_PLAN_EXERCISES,
    )


def build_form_tips_prompt(
    exercise_name: str,
    body_part: Optional[str] = None,
    target: Optional[str] = None,
    equipment: Optional[str] = None,
) -> str:
    """Build the prompt asking for form tips on a single exercise."""
    details = []
    if body_part:
        details.append(f"body part: {sanitize_user_input(body_part)}")
    if target:
        details.append(f"target: {sanitize_user_input(target)}")
    if equipment:
        details.append(f"equipment: {sanitize_user_input(equipment)}")

    return FORM_TIPS_PROMPT.format(
        exercise_name=sanitize_user_input(exercise_name),
        details=f" ({', '.join(details)})" if details else "",
    )
