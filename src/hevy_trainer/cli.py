#!/usr/bin/env python3
"""
Hevy Trainer CLI.

Workout analytics on top of the Hevy API.

Usage:
    hevy-trainer workouts --limit 5
    hevy-trainer workout <workout-id>
    hevy-trainer exercises --search bench
    hevy-trainer progress <exercise-id> [<exercise-id> ...]
    hevy-trainer volume --timeframe month
    hevy-trainer routines
    hevy-trainer prompt          # Routine builder prompt
    hevy-trainer warm-cache      # Fetch everything once
"""

import argparse
import asyncio
import logging
import sys

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .analysis import calculate_workout_stats
from .config import get_settings
from .exceptions import HevyTrainerError
from .llm.prompts import create_routine_builder_prompt
from .services.base import ResultStatus
from .services.hevy_service import HevyService
from .utils.dates import Timeframe

console = Console()


def _format_kg(value) -> str:
    if value is None:
        return "-"
    return f"{value:g} kg"


def _print_no_data(message: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")
    console.print()


async def cmd_workouts(args, service: HevyService):
    """Show recent workouts."""
    result = await service.get_recent_workouts(args.limit, args.start, args.end)
    if result.status == ResultStatus.NO_DATA:
        _print_no_data(result.message)
        return

    workouts, total = result.data
    table = Table(title=f"Workouts ({len(workouts)} of {total})", box=box.ROUNDED)
    table.add_column("Date", style="cyan")
    table.add_column("Title")
    table.add_column("Duration", justify="right")
    table.add_column("Exercises", justify="right")
    table.add_column("Sets", justify="right")
    table.add_column("Volume", justify="right", style="green")
    table.add_column("ID", style="dim")

    for workout in workouts:
        stats = calculate_workout_stats(workout)
        table.add_row(
            workout.start_time.strftime("%Y-%m-%d"),
            workout.title,
            f"{stats.duration_minutes} min",
            str(stats.exercise_count),
            str(stats.total_sets),
            f"{stats.total_volume:,.0f} kg",
            workout.id,
        )

    console.print(table)
    console.print()


async def cmd_workout(args, service: HevyService):
    """Show one workout set by set."""
    result = await service.get_workout_details(args.workout_id)
    if result.status == ResultStatus.NO_DATA:
        _print_no_data(result.message)
        return

    workout = result.data
    stats = calculate_workout_stats(workout)
    console.print(Panel(
        f"[bold]{workout.title}[/bold]\n"
        f"{workout.start_time:%Y-%m-%d %H:%M}  |  {stats.duration_minutes} min  |  "
        f"{stats.total_sets} sets  |  {stats.total_volume:,.0f} kg"
    ))

    for exercise in workout.exercises:
        table = Table(title=exercise.title, box=box.SIMPLE)
        table.add_column("#", justify="right")
        table.add_column("Type")
        table.add_column("Weight", justify="right")
        table.add_column("Reps", justify="right")
        for set_entry in exercise.sets:
            table.add_row(
                str(set_entry.index + 1),
                set_entry.type.value,
                _format_kg(set_entry.weight_kg),
                str(set_entry.reps) if set_entry.reps is not None else "-",
            )
        console.print(table)
    console.print()


async def cmd_exercises(args, service: HevyService):
    """Show exercise summaries sorted by frequency."""
    result = await service.get_exercise_summaries(
        args.search, not args.include_unused, args.start, args.end
    )
    if result.status == ResultStatus.NO_DATA:
        _print_no_data(result.message)
        return

    table = Table(title="Exercises", box=box.ROUNDED)
    table.add_column("Exercise", style="cyan")
    table.add_column("Muscle group")
    table.add_column("Workouts", justify="right")
    table.add_column("Best lift", justify="right", style="green")
    table.add_column("Est. 1RM", justify="right", style="green")
    table.add_column("ID", style="dim")

    for summary in result.data:
        table.add_row(
            summary.name,
            summary.primary_muscle_group or "-",
            str(summary.frequency),
            _format_kg(summary.actual_1rm.weight_kg if summary.actual_1rm else None),
            f"{summary.estimated_1rm.weight_kg:.1f} kg" if summary.estimated_1rm else "-",
            summary.id,
        )

    console.print(table)
    console.print()


async def cmd_progress(args, service: HevyService):
    """Show personal records and recent sessions for exercises."""
    result = await service.get_exercise_progress(
        args.exercise_ids, args.limit, args.start, args.end
    )
    if result.status == ResultStatus.NO_DATA:
        _print_no_data(result.message)
        return

    for progress in result.data:
        console.print(Panel(f"[bold]{progress.exercise.title}[/bold]"))

        records = Table(title="Personal Records", box=box.ROUNDED)
        records.add_column("Reps", justify="right", style="cyan")
        records.add_column("Weight", justify="right", style="green")
        records.add_column("Date")
        for record in progress.personal_records:
            records.add_row(str(record.reps), _format_kg(record.weight_kg), f"{record.date:%Y-%m-%d}")
        console.print(records)

        if progress.sessions:
            sessions = Table(title="Recent Sessions", box=box.ROUNDED)
            sessions.add_column("Date", style="cyan")
            sessions.add_column("Max weight", justify="right")
            sessions.add_column("Max reps", justify="right")
            sessions.add_column("Max volume", justify="right", style="green")
            for session in progress.sessions:
                sessions.add_row(
                    f"{session.date:%Y-%m-%d}",
                    _format_kg(session.max_weight),
                    str(session.max_reps),
                    _format_kg(session.max_volume),
                )
            console.print(sessions)
        console.print()


async def cmd_volume(args, service: HevyService):
    """Show volume per muscle group."""
    result = await service.analyze_workout_volume(args.timeframe)
    if result.status == ResultStatus.NO_DATA:
        _print_no_data(result.message)
        return

    analysis = result.data
    frequency = {entry.muscle_group: entry for entry in analysis.muscle_group_frequency}

    table = Table(
        title=f"Volume by Muscle Group ({analysis.timeframe}, {analysis.workout_count} workouts)",
        box=box.ROUNDED,
    )
    table.add_column("Muscle group", style="cyan")
    table.add_column("Volume", justify="right", style="green")
    table.add_column("Sets", justify="right")
    table.add_column("Exercises", justify="right")
    table.add_column("Last trained")

    for entry in analysis.volume_by_muscle_group:
        seen = frequency.get(entry.muscle_group)
        table.add_row(
            entry.muscle_group,
            f"{entry.volume:,.0f} kg",
            str(entry.sets),
            str(seen.frequency) if seen else "-",
            f"{seen.last_worked_out:%Y-%m-%d}" if seen else "-",
        )

    console.print(table)
    console.print()


async def cmd_routines(args, service: HevyService):
    """List saved routines."""
    routines = await service.fetch_all_routines()
    if not routines:
        _print_no_data("No routines found")
        return

    table = Table(title="Routines", box=box.ROUNDED)
    table.add_column("Routine", style="cyan")
    table.add_column("Exercises", justify="right")
    table.add_column("ID", style="dim")
    for routine in routines:
        table.add_row(routine.title or "-", str(len(routine.exercises)), routine.id)

    console.print(table)
    console.print()


async def cmd_prompt(args, service: HevyService):
    """Print the routine builder prompt."""
    console.print(await create_routine_builder_prompt(service))
    console.print()


async def cmd_warm_cache(args, service: HevyService):
    """Fetch every resource once."""
    counts = await service.populate_cache()

    table = Table(title="Cached Resources", box=box.ROUNDED)
    table.add_column("Resource", style="cyan")
    table.add_column("Count", style="green", justify="right")
    for resource, count in counts.items():
        table.add_row(resource.replace("_", " "), str(count))

    console.print(table)
    console.print()


COMMANDS = {
    "workouts": cmd_workouts,
    "workout": cmd_workout,
    "exercises": cmd_exercises,
    "progress": cmd_progress,
    "volume": cmd_volume,
    "routines": cmd_routines,
    "prompt": cmd_prompt,
    "warm-cache": cmd_warm_cache,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hevy-trainer",
        description="Hevy Trainer - workout analytics for Hevy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hevy-trainer workouts --limit 5 --start 2024-01-01
  hevy-trainer exercises --search squat
  hevy-trainer progress 79D0BB3A
  hevy-trainer volume --timeframe quarter
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Workouts command
    workouts_p = subparsers.add_parser("workouts", help="Show recent workouts")
    workouts_p.add_argument("--limit", "-n", type=int, default=10, help="Workouts to show (1-10)")
    workouts_p.add_argument("--start", help="Start date (YYYY-MM-DD)")
    workouts_p.add_argument("--end", help="End date (YYYY-MM-DD)")

    # Workout command
    workout_p = subparsers.add_parser("workout", help="Show a single workout")
    workout_p.add_argument("workout_id", help="Workout ID")

    # Exercises command
    exercises_p = subparsers.add_parser("exercises", help="Show exercise summaries")
    exercises_p.add_argument("--search", "-s", help="Filter by exercise name")
    exercises_p.add_argument(
        "--include-unused", action="store_true", help="Include exercises never performed"
    )
    exercises_p.add_argument("--start", help="Start date (YYYY-MM-DD)")
    exercises_p.add_argument("--end", help="End date (YYYY-MM-DD)")

    # Progress command
    progress_p = subparsers.add_parser("progress", help="Show exercise progress and records")
    progress_p.add_argument("exercise_ids", nargs="+", help="Exercise template IDs")
    progress_p.add_argument("--limit", "-n", type=int, default=10, help="Sessions to show (0-10)")
    progress_p.add_argument("--start", help="Start date (YYYY-MM-DD)")
    progress_p.add_argument("--end", help="End date (YYYY-MM-DD)")

    # Volume command
    volume_p = subparsers.add_parser("volume", help="Show volume per muscle group")
    volume_p.add_argument(
        "--timeframe", "-t",
        choices=[t.value for t in Timeframe],
        default=Timeframe.WEEK.value,
        help="Look-back window",
    )

    subparsers.add_parser("routines", help="List saved routines")
    subparsers.add_parser("prompt", help="Print the routine builder prompt")
    subparsers.add_parser("warm-cache", help="Fetch all resources into the cache")

    return parser


async def _run(args) -> None:
    async with HevyService.from_settings() as service:
        await COMMANDS[args.command](args, service)


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command not in COMMANDS:
        parser.print_help()
        return

    if not settings.is_configured:
        console.print("[red]HEVY_API_KEY is not set.[/red]")
        console.print("Add it to your environment or .env file.")
        sys.exit(1)

    console.print()
    try:
        asyncio.run(_run(args))
    except HevyTrainerError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
