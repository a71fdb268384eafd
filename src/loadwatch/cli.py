#!/usr/bin/env python3
"""
loadwatch CLI.

Weekly training load, monotony/strain and wellness alerts per athlete.

Usage:
    loadwatch team                          # Team alert table for this week
    loadwatch week --athlete a1             # One athlete's week with day cards
    loadwatch week --athlete a1 --date 2025-03-12
    loadwatch thresholds                    # Show effective alert thresholds
    loadwatch team --snapshot export.json --json

Without --snapshot (or LOADWATCH_SNAPSHOT_PATH) the demo athletes are used.
"""

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .alerts import FLAG_ORDER, StrainZone
from .config import Settings, get_settings
from .demo import create_demo_snapshot
from .exceptions import AthleteNotFoundError, LoadwatchError
from .review import review_athlete_week, review_team
from .schemas import Snapshot, load_snapshot
from .weeks import to_date

logger = logging.getLogger(__name__)

console = Console()

DEMO_HISTORY_WEEKS = 4


def get_zone_color(zone: StrainZone) -> str:
    """Get rich color for a strain zone."""
    colors = {
        StrainZone.GREEN: "green",
        StrainZone.AMBER: "yellow",
        StrainZone.RED: "red",
    }
    return colors.get(zone, "white")


def format_zone_rich(zone: StrainZone) -> Text:
    return Text(zone.value.capitalize(), style=f"bold {get_zone_color(zone)}")


def format_baseline(value: Optional[float]) -> str:
    return "—" if value is None else f"{value:.2f}"


def resolve_snapshot(args, settings: Settings) -> Snapshot:
    """Load the snapshot named on the command line or in settings, else demo data."""
    path = args.snapshot or settings.snapshot_path
    if path:
        return load_snapshot(path)
    logger.info("No snapshot given, using demo athletes")
    snapshot = create_demo_snapshot(args.date, history_weeks=DEMO_HISTORY_WEEKS)
    snapshot.thresholds = settings.thresholds
    return snapshot


def cmd_team(args, snapshot: Snapshot):
    """Show the team alert table."""
    anchor = args.date or date.today()
    rows = review_team(snapshot.records, anchor, snapshot.thresholds, snapshot.names)

    if args.json:
        print(json.dumps([row.to_dict() for row in rows], indent=2, ensure_ascii=False))
        return

    thresholds = snapshot.thresholds
    table = Table(title=f"Team alerts — week of {rows[0].metrics.dates[0] if rows else anchor}", box=box.ROUNDED)
    table.add_column("Athlete", style="cyan")
    table.add_column("Load", justify="right")
    table.add_column("Monotony", justify="right")
    table.add_column("Strain", justify="right")
    table.add_column("Zone", justify="center")
    table.add_column("Health", justify="right")
    table.add_column("Alerts", justify="center")

    for row in rows:
        m = row.metrics
        monotony_style = "red" if m.monotony > thresholds.monotony_max else "white"
        health_style = "red" if m.mean_health < thresholds.low_health else "white"
        flags = " • ".join(f.label for f in row.report.ordered_flags) or "—"
        table.add_row(
            row.name,
            f"{m.total_load:.0f}",
            Text(f"{m.monotony:.2f}", style=monotony_style),
            f"{m.strain:.0f}",
            format_zone_rich(row.report.zone),
            Text(str(m.mean_health), style=health_style),
            flags,
        )

    console.print()
    console.print(table)
    console.print()


def cmd_week(args, snapshot: Snapshot):
    """Show one athlete's week: summary, baseline and day cards."""
    athlete_id = args.athlete or (snapshot.athlete_ids[0] if snapshot.athlete_ids else None)
    if athlete_id is None or athlete_id not in snapshot.records:
        raise AthleteNotFoundError(args.athlete or "")

    record = snapshot.records[athlete_id]
    review = review_athlete_week(record, args.date or date.today(), snapshot.thresholds)

    if args.json:
        print(json.dumps(review.to_dict(), indent=2, ensure_ascii=False))
        return

    m = review.metrics
    b = review.baseline
    summary = Text()
    summary.append(f"Load: {m.total_load:.0f}   Monotony: {m.monotony:.2f}   Strain: {m.strain:.0f} ")
    summary.append_text(format_zone_rich(review.report.zone))
    summary.append(f"\nSleep quality: {m.sleep_quality_mean:.2f} (baseline {format_baseline(b.sleep_base)})")
    summary.append(f"\nSleep hours:   {m.sleep_duration_mean:.2f} h (baseline {format_baseline(b.sleep_hours_base)})")
    summary.append(f"\nSymptoms:      {m.symptom_burden_mean:.2f} (baseline {format_baseline(b.symptom_base)})")
    if review.report.has_flags:
        summary.append("\nAlerts: ", style="bold")
        summary.append(" • ".join(f.label for f in review.report.ordered_flags), style="red")

    console.print()
    console.print(Panel(
        summary,
        title=f"[bold]{snapshot.name_of(athlete_id)} — week of {review.week_start}[/bold]",
    ))

    table = Table(box=box.SIMPLE)
    table.add_column("Day", style="cyan")
    table.add_column("Load", justify="right")
    table.add_column("Health", justify="right")
    table.add_column("Sleep", justify="right")
    table.add_column("Hours", justify="right")
    table.add_column("Symptoms", justify="right")
    table.add_column("Alerts")

    for i, day in enumerate(m.dates):
        flags = review.day_flags.get(day, frozenset())
        labels = [f.label for f in FLAG_ORDER if f in flags]
        table.add_row(
            day.strftime("%a %d/%m"),
            f"{m.daily_loads[i]:.0f}",
            str(m.daily_health[i]),
            f"{m.daily_sleep_quality[i]:g}",
            f"{m.daily_sleep_duration[i]:g}",
            f"{m.daily_symptom_burden[i]:g}",
            Text(" • ".join(labels), style="yellow") if labels else "",
        )

    console.print(table)


def cmd_thresholds(args, snapshot: Snapshot):
    """Show the effective alert thresholds."""
    if args.json:
        print(json.dumps(snapshot.thresholds.to_dict(), indent=2))
        return

    table = Table(title="Alert thresholds", box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    for name, value in snapshot.thresholds.to_dict().items():
        table.add_row(name, f"{value:g}")

    console.print()
    console.print(table)
    console.print("[dim]Strain zones use fixed cut-points: green < 6000 ≤ amber ≤ 8000 < red[/dim]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loadwatch",
        description="loadwatch - training load and wellness alerts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  loadwatch team
  loadwatch week --athlete a2 --date 2025-03-12
  loadwatch thresholds --snapshot export.json
        """,
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--snapshot", "-s", type=str, help="JSON snapshot {users, data, thresholds}")
    common.add_argument("--date", "-d", type=to_date, help="Any date of the week (YYYY-MM-DD)")
    common.add_argument("--json", action="store_true", help="Print JSON instead of tables")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("team", parents=[common], help="Show the team alert table")

    week_p = subparsers.add_parser("week", parents=[common], help="Show one athlete's week")
    week_p.add_argument("--athlete", "-a", type=str, help="Athlete ID (defaults to the first one)")

    subparsers.add_parser("thresholds", parents=[common], help="Show effective alert thresholds")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "team": cmd_team,
        "week": cmd_week,
        "thresholds": cmd_thresholds,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        snapshot = resolve_snapshot(args, settings)
        command(args, snapshot)
    except LoadwatchError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
