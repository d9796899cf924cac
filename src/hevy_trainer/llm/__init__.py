"""Prompt templates for LLM conversations about Hevy data."""

from .prompts import (
    ROUTINE_BUILDER_PROMPT,
    create_routine_builder_prompt,
    format_exercise_list,
    format_routine_list,
)

__all__ = [
    "ROUTINE_BUILDER_PROMPT",
    "create_routine_builder_prompt",
    "format_exercise_list",
    "format_routine_list",
]
