"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Upper bound on the candidate set offered to the generator
DEFAULT_CANDIDATE_LIMIT = 200

# Maximum length of the free-text goal once sanitized for the prompt
MAX_GOAL_LENGTH = 200

# Maximum length of other short free-text fields (exercise names, muscles)
MAX_SHORT_TEXT_LENGTH = 100

# Maximum number of equipment entries accepted per request
MAX_EQUIPMENT_COUNT = 30

# Longest workout we accept, in minutes
MAX_DURATION_MINUTES = 240

# Number of exercises the generator is asked to pick
MIN_PLAN_EXERCISES = 5
MAX_PLAN_EXERCISES = 8

# Field defaults applied to every resolved exercise
DEFAULT_SETS = 3
DEFAULT_REPS = "10-12"
DEFAULT_REST_SECONDS = 60

# Plan-level fallbacks when the generator omits them
DEFAULT_PLAN_NAME = "AI Generated Workout"
DEFAULT_PLAN_DESCRIPTION = "Personalized workout plan"
