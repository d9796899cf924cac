"""Hevy API data models.

These mirror the snake_case JSON returned by the Hevy public API. They are
read-only snapshots: analytics never mutate them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Generic, List, Optional, Set, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


T = TypeVar("T")


class SetType(str, Enum):
    """Kinds of sets logged in Hevy."""
    NORMAL = "normal"
    WARMUP = "warmup"
    DROPSET = "dropset"
    FAILURE = "failure"


class SetEntry(BaseModel):
    """A single set within a workout exercise."""

    model_config = ConfigDict(frozen=True)

    index: int = 0
    type: SetType = SetType.NORMAL
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[float] = None
    rpe: Optional[float] = None
    custom_metric: Optional[Any] = None

    @property
    def is_warmup(self) -> bool:
        return self.type == SetType.WARMUP

    @property
    def volume(self) -> float:
        """weight x reps, 0 when either is missing."""
        if not self.weight_kg or not self.reps:
            return 0.0
        return self.weight_kg * self.reps


class ExerciseEntry(BaseModel):
    """An exercise as performed within one workout."""

    model_config = ConfigDict(frozen=True)

    index: int = 0
    title: str = ""
    notes: Optional[str] = None
    exercise_template_id: str
    superset_id: Optional[int] = None
    sets: List[SetEntry] = Field(default_factory=list)


class Workout(BaseModel):
    """A logged workout."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    description: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    exercises: List[ExerciseEntry] = Field(default_factory=list)

    @property
    def template_ids(self) -> Set[str]:
        """Distinct exercise template ids in this workout."""
        return {exercise.exercise_template_id for exercise in self.exercises}

    def entries_for(self, exercise_template_id: str) -> List[ExerciseEntry]:
        """All entries of one exercise template, in workout order."""
        return [
            exercise for exercise in self.exercises
            if exercise.exercise_template_id == exercise_template_id
        ]


class ExerciseTemplate(BaseModel):
    """Exercise definition (reference data)."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    type: Optional[str] = None  # weight_reps, reps_only, duration, ...
    primary_muscle_group: Optional[str] = None
    secondary_muscle_groups: List[str] = Field(default_factory=list)
    equipment: Optional[str] = None
    is_custom: bool = False


class Routine(BaseModel):
    """A saved routine. Passed through to callers without analysis."""

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    title: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("title", "name"),
    )
    folder_id: Optional[int] = None
    notes: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("notes", "description"),
    )
    exercises: List[Any] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
    )


class Page(BaseModel, Generic[T]):
    """One page of a paginated Hevy list endpoint."""

    items: List[T] = Field(default_factory=list)
    page: int = 1
    page_count: int = 1
