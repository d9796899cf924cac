"""Derived analytics models (progress, records, summaries, volume)."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .hevy import ExerciseTemplate, SetType


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class AnalyticsModel(BaseModel):
    """Base for derived models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SessionSet(AnalyticsModel):
    """One set as shown in a progress session."""

    index: int
    type: SetType
    weight_kg: Optional[float] = None
    reps: Optional[int] = None


class ProgressSession(AnalyticsModel):
    """One workout's occurrence of a tracked exercise."""

    workout_id: str
    date: datetime
    sets: List[SessionSet] = Field(default_factory=list)
    max_volume: float = Field(default=0.0, description="Heaviest weight x reps of any working set")
    max_weight: float = Field(default=0.0, description="Heaviest weight of any working set")
    max_reps: int = Field(default=0, description="Most reps of any working set")


class RepRecord(AnalyticsModel):
    """Heaviest weight ever lifted for an exact rep count."""

    reps: int
    weight_kg: float
    date: datetime


class LiftRecord(AnalyticsModel):
    """A weight and the date it was achieved (actual or estimated 1RM)."""

    weight_kg: float
    date: datetime


class ExerciseSummary(AnalyticsModel):
    """Usage and strength summary for one exercise template."""

    id: str
    name: str
    frequency: int = Field(default=0, description="Distinct workouts containing the exercise")
    actual_1rm: Optional[LiftRecord] = Field(default=None, alias="actual1RM")
    estimated_1rm: Optional[LiftRecord] = Field(default=None, alias="estimated1RM")
    records_by_reps: List[RepRecord] = Field(default_factory=list)

    # Template passthrough
    type: Optional[str] = None
    primary_muscle_group: Optional[str] = None
    secondary_muscle_groups: List[str] = Field(default_factory=list)
    equipment: Optional[str] = None
    is_custom: bool = False


class ExerciseInfo(AnalyticsModel):
    """Exercise template fields as shown alongside derived data."""

    id: str
    title: str
    type: Optional[str] = None
    primary_muscle_group: Optional[str] = None
    secondary_muscle_groups: List[str] = Field(default_factory=list)
    equipment: Optional[str] = None
    is_custom: bool = False

    @classmethod
    def from_template(cls, template: ExerciseTemplate) -> "ExerciseInfo":
        return cls.model_validate(template.model_dump())


class ExerciseProgress(AnalyticsModel):
    """Progress history and personal records for one exercise."""

    exercise: ExerciseInfo
    personal_records: List[RepRecord] = Field(default_factory=list)
    sessions: List[ProgressSession] = Field(default_factory=list)


class MuscleVolumeEntry(AnalyticsModel):
    """Total training volume and set count for one primary muscle group."""

    muscle_group: str
    volume: float = 0.0
    sets: int = 0


class MuscleGroupFrequencyEntry(AnalyticsModel):
    """How often a primary muscle group was trained and when last."""

    muscle_group: str
    frequency: int = 0
    last_worked_out: datetime


class WorkoutStats(AnalyticsModel):
    """Summary statistics for a single workout."""

    duration_minutes: int = 0
    exercise_count: int = 0
    total_sets: int = 0
    total_volume: float = 0.0


class VolumeAnalysis(AnalyticsModel):
    """Muscle group volume and frequency over a look-back window."""

    timeframe: str
    start_date: Optional[datetime] = None
    workout_count: int = 0
    volume_by_muscle_group: List[MuscleVolumeEntry] = Field(default_factory=list)
    muscle_group_frequency: List[MuscleGroupFrequencyEntry] = Field(default_factory=list)
