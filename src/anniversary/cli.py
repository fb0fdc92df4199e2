"""Anniversary Mate CLI."""

import json
import logging
from datetime import datetime
from pathlib import Path

import click

from .config import load_config
from .core.dates import format_date, format_dday, parse_date_input, start_of_today
from .core.events import Event
from .core.reminders import (
    UPCOMING_PREVIEW_COUNT,
    due_this_week,
    due_today,
    reminder_status,
    upcoming as upcoming_preview,
)
from .workflows import (
    compute_events,
    create_scheduler,
    export_calendar,
    get_notifier,
    get_settings_store,
    run_reminder_cycle,
    update_settings,
)


def _parse_reference_date(ctx, param, value: str | None) -> datetime:
    """Click callback: --date YYYY-MM-DD, defaulting to today."""
    if value is None:
        return start_of_today()
    parsed = parse_date_input(value)
    if parsed is None:
        raise click.BadParameter("expected YYYY-MM-DD")
    return parsed


def _parse_start_date(ctx, param, value: str | None) -> str | None:
    """Click callback: --start-date YYYY-MM-DD, or "" to clear."""
    if value is None or value == "":
        return value
    if parse_date_input(value) is None:
        raise click.BadParameter("expected YYYY-MM-DD")
    return value


date_option = click.option(
    "--date",
    "-d",
    "today",
    default=None,
    callback=_parse_reference_date,
    help="Reference date (YYYY-MM-DD), defaults to today",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


@click.group()
@click.version_option(package_name="anniversary-mate")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Anniversary Mate - anniversary and holiday reminders."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _serialize_event(e: Event, today: datetime) -> dict:
    return {
        "id": e.id,
        "title": e.title,
        "category": e.category.value,
        "date": e.date.date().isoformat(),
        "reminder_date": e.reminder_date.date().isoformat(),
        "dday": format_dday(e.date, today),
    }


def _show_events(events: list[Event], today: datetime, as_json: bool, empty_msg: str = "없음") -> None:
    """Shared event display logic."""
    if as_json:
        click.echo(json.dumps([_serialize_event(e, today) for e in events], indent=2, ensure_ascii=False))
        return

    if not events:
        click.echo(empty_msg)
        return

    for event in events:
        click.echo(event.title)
        click.echo(f"  {format_dday(event.date, today):8} 기념일: {format_date(event.date)}")
        click.echo(
            f"  {format_dday(event.reminder_date, today):8} 알림: {format_date(event.reminder_date)}"
            f" [{reminder_status(event, today)}]"
        )


@main.command("set")
@click.option(
    "--start-date",
    "start_date",
    default=None,
    callback=_parse_start_date,
    help='Start date (YYYY-MM-DD), "" to clear',
)
@click.option("--type", "label", default=None, help="Relationship label, e.g. 결혼")
def set_settings(start_date: str | None, label: str | None):
    """Update the start date and relationship label."""
    config = load_config()
    store = get_settings_store(config)
    settings = update_settings(store, start_date=start_date, label=label)
    click.echo(f"시작일: {settings.start_date or '(없음)'}")
    click.echo(f"유형: {settings.type}")


@main.command()
@date_option
@json_option
def today(today: datetime, as_json: bool):
    """Show reminders due today."""
    config = load_config()
    events = due_today(compute_events(config, today), today)
    _show_events(events, today, as_json)


@main.command()
@date_option
@json_option
def week(today: datetime, as_json: bool):
    """Show reminders arriving within the next 7 days."""
    config = load_config()
    events = due_this_week(compute_events(config, today), today)
    _show_events(events, today, as_json)


@main.command()
@date_option
@json_option
@click.option("--all", "show_all", is_flag=True, help="Show every upcoming event")
def upcoming(today: datetime, as_json: bool, show_all: bool):
    """Show upcoming anniversaries and holidays."""
    config = load_config()
    events = compute_events(config, today)
    visible, hidden = upcoming_preview(events, limit=None if show_all or as_json else UPCOMING_PREVIEW_COUNT)
    _show_events(visible, today, as_json)
    if hidden:
        click.echo(f"\n더 보기 ({hidden}개): anniv upcoming --all")


@main.command()
@date_option
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Output .ics file")
def export(today: datetime, output: str | None):
    """Export events as an iCalendar (.ics) file."""
    config = load_config()
    count, path = export_calendar(config, today, Path(output) if output else None)
    if not count:
        click.echo("No events to export.")
        return
    click.echo(f"✓ Exported {count} events to {path}")


@main.command()
@date_option
def notify(today: datetime):
    """Send notifications for reminders due today."""
    config = load_config()
    sent = run_reminder_cycle(config, get_notifier(config), set(), today=today)
    if not sent:
        click.echo("No reminders today.")


@main.command()
def watch():
    """Send reminders every day at NOTIFY_TIME."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    config = load_config()
    notifier = get_notifier(config)
    seen: set[str] = set()

    # Catch up on today before waiting for the first scheduled run
    run_reminder_cycle(config, notifier, seen)

    scheduler = create_scheduler(config, notifier, seen)
    click.echo(f"Watching for reminders daily at {config.notify_time}")
    click.echo("Press Ctrl+C to stop")
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        click.echo("\nStopped.")


@main.command()
@date_option
def status(today: datetime):
    """Quick status check (settings + event count + today's reminders)."""
    config = load_config()
    store = get_settings_store(config)
    stored = store.load()
    events = compute_events(config, today, store)
    reminders = due_today(events, today)

    if stored.start_date and parse_date_input(stored.start_date) is None:
        click.echo(f"Warning: ignoring invalid start date {stored.start_date!r}", err=True)

    click.echo(f"Status for {format_date(today)}\n")
    click.echo(f"시작일: {stored.start_date or '(없음)'}")
    click.echo(f"유형: {stored.type}")
    click.echo(f"Upcoming events: {len(events)}\n")
    click.echo("오늘:")
    if reminders:
        for event in reminders:
            click.echo(f"  {event.title} 알림 ({format_date(event.date)})")
    else:
        click.echo("  없음")


if __name__ == "__main__":
    main()
