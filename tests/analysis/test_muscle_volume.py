"""Tests for muscle group volume and frequency."""

from datetime import datetime, timezone

from hevy_trainer.analysis.muscle_volume import (
    aggregate_muscle_volume,
    analyze_muscle_group_frequency,
)


UTC = timezone.utc


class TestAggregateMuscleVolume:
    """Tests for aggregate_muscle_volume."""

    def test_exact_sums(self, history, templates):
        entries = {e.muscle_group: e for e in aggregate_muscle_volume(history, templates)}

        # bench: 100x8 + 110x5 + 90x10 (warm-up excluded)
        assert entries["chest"].volume == 800 + 550 + 900
        assert entries["quadriceps"].volume == 140 * 5 * 2
        assert entries["upper_back"].volume == 80 * 8

    def test_sorted_by_volume(self, history, templates):
        entries = aggregate_muscle_volume(history, templates)

        assert [e.muscle_group for e in entries] == ["chest", "quadriceps", "upper_back"]
        volumes = [e.volume for e in entries]
        assert volumes == sorted(volumes, reverse=True)

    def test_set_count_includes_every_set(self, history, templates):
        entries = {e.muscle_group: e for e in aggregate_muscle_volume(history, templates)}

        # 3 bench sets in w1 (one warm-up) + 1 in w2
        assert entries["chest"].sets == 4

    def test_sets_without_weight_count_but_add_no_volume(self, make_workout, templates):
        workouts = [
            make_workout("w", "2024-01-01T10:00:00Z", [("row", [(None, 12), (60, None), (60, 10)])]),
        ]

        entry = aggregate_muscle_volume(workouts, templates)[0]

        assert entry.sets == 3
        assert entry.volume == 600

    def test_unknown_template_skipped(self, make_workout, templates):
        workouts = [
            make_workout("w", "2024-01-01T10:00:00Z", [("mystery", [(50, 10)]), ("row", [(60, 10)])]),
        ]

        entries = aggregate_muscle_volume(workouts, templates)

        assert [e.muscle_group for e in entries] == ["upper_back"]

    def test_secondary_groups_not_credited(self, history, templates):
        groups = {e.muscle_group for e in aggregate_muscle_volume(history, templates)}

        assert "triceps" not in groups

    def test_volume_not_rounded(self, make_workout, templates):
        workouts = [
            make_workout("w", "2024-01-01T10:00:00Z", [("row", [(22.5, 3)])]),
        ]

        assert aggregate_muscle_volume(workouts, templates)[0].volume == 67.5

    def test_no_workouts(self, templates):
        assert aggregate_muscle_volume([], templates) == []


class TestMuscleGroupFrequency:
    """Tests for analyze_muscle_group_frequency."""

    def test_counts_and_last_date(self, history, templates):
        entries = {e.muscle_group: e for e in analyze_muscle_group_frequency(history, templates)}

        assert entries["chest"].frequency == 2
        assert entries["chest"].last_worked_out == datetime(2024, 1, 8, 10, 0, tzinfo=UTC)
        assert entries["quadriceps"].frequency == 1
        assert entries["quadriceps"].last_worked_out == datetime(2024, 1, 1, 10, 0, tzinfo=UTC)

    def test_sorted_by_frequency(self, history, templates):
        entries = analyze_muscle_group_frequency(history, templates)

        assert entries[0].muscle_group == "chest"
