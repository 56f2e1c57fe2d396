"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, List, NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..adapters.yaml_repository import YamlLecturerRepository
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import OfficeHoursError
from ..domain.models import Lecturer, LecturerView, ReferencePoint, ScheduleEntryView, format_time
from ..domain.parsing import parse_interval, parse_time_of_day, parse_weekday
from ..schemas import LecturerInput
from ..services.lecturer_service import LecturerAvailabilityService

app = typer.Typer(
    name="officehours",
    help="Track lecturers' weekly office hours and who is available when",
    add_completion=False
)

console = Console()

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
JsonOption = Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the explicit config file, or the default one if present.

    Without any config file the built-in defaults are used.
    """
    if config_file:
        return AppConfig.load_from_yaml(config_file)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True
    )


def _setup(config_file: Optional[Path], verbose: bool) -> tuple[AppConfig, LecturerAvailabilityService]:
    config = _load_config(config_file)
    _configure_logging(config.log_level, verbose)
    repository = YamlLecturerRepository(config.data_file)
    return config, LecturerAvailabilityService(repository=repository)


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(1)


def _describe_entry(entry: ScheduleEntryView) -> str:
    """Human readable status of one schedule entry."""
    availability = entry.availability
    if availability.is_available_now:
        return "[green]available now[/green]"
    if availability.minutes_until_next is not None:
        return (
            f"[yellow]opens in {availability.minutes_until_next} min "
            f"({format_time(availability.next_available_at)})[/yellow]"
        )
    return "[dim]-[/dim]"


def _print_json(data) -> None:
    typer.echo(json.dumps(data, indent=2))


def _print_lecturer(view: LecturerView, as_json: bool) -> None:
    if as_json:
        _print_json(view.to_dict())
        return

    office = " ".join(part for part in (view.office_building, view.office_number) if part)
    console.print(Panel.fit(
        f"[bold]Department:[/bold] {view.department or 'N/A'}\n"
        f"[bold]Office:[/bold] {office or 'N/A'}\n"
        f"[bold]E-Mail:[/bold] {view.email or 'N/A'}",
        title=view.name
    ))

    if not view.schedule:
        console.print("[yellow]No office hours scheduled.[/yellow]\n")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Day", style="bold yellow")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Status")

    for entry in view.schedule:
        table.add_row(
            entry.interval.day,
            format_time(entry.interval.start),
            format_time(entry.interval.end),
            _describe_entry(entry)
        )

    console.print(table)
    console.print()


def _print_lecturers(views: List[LecturerView], as_json: bool, title: str, empty_message: str) -> None:
    if as_json:
        _print_json([view.to_dict() for view in views])
        return

    if not views:
        console.print(f"[yellow]{empty_message}[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold yellow")
    table.add_column("Department")
    table.add_column("Office", style="dim")
    table.add_column("Office hours")

    for view in views:
        hours = "\n".join(
            f"{entry.interval} {_describe_entry(entry)}" for entry in view.schedule
        )
        office = " ".join(part for part in (view.office_building, view.office_number) if part)
        table.add_row(view.name, view.department, office, hours or "[dim]none[/dim]")

    console.print()
    console.print(table)
    console.print()


def _load_payload_file(path: Path):
    """Read a lecturer payload; JSON files parse as YAML too."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid payload file {path}: {e}") from e


def _parse_slot(raw: str):
    parts = raw.split()
    if len(parts) != 3:
        raise ValueError(f"Slot {raw!r} must look like 'MONDAY 09:00 11:00'")
    return parse_interval(*parts)


@app.command()
def create(
    name: Annotated[Optional[str], typer.Argument(help="Lecturer name. Omit when using --from-file.")] = None,
    department: Annotated[str, typer.Option("--department", "-d", help="Department")] = "",
    email: Annotated[str, typer.Option("--email", "-e", help="E-mail address")] = "",
    building: Annotated[str, typer.Option("--building", "-b", help="Office building")] = "",
    office: Annotated[str, typer.Option("--office", "-o", help="Office number")] = "",
    slot: Annotated[Optional[List[str]], typer.Option("--slot", "-s", help="Office hours as 'DAY START END', repeatable.")] = None,
    from_file: Annotated[Optional[Path], typer.Option("--from-file", "-f", help="YAML or JSON file with a lecturer payload.")] = None,
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """
    Create a lecturer with an initial schedule.

    Examples:

        officehours create "Ada Obi" -d "Computer Science" -s "MONDAY 09:00 11:00"

        officehours create --from-file ada.yaml
    """
    try:
        _, service = _setup(config_file, verbose)

        if from_file:
            payload = _load_payload_file(from_file)
            lecturer = LecturerInput.model_validate(payload).to_lecturer()
        elif name:
            lecturer = Lecturer(
                name=name.strip(),
                department=department,
                email=email,
                office_building=building,
                office_number=office,
                schedule=tuple(_parse_slot(raw) for raw in slot or [])
            )
        else:
            _fail("Provide a lecturer name or --from-file.")

        view = service.create_lecturer(lecturer)
    except (OfficeHoursError, OSError, ValueError) as e:
        _fail(str(e))

    if not as_json:
        console.print(f"[green]✓ Created lecturer {view.name}[/green]")
    _print_lecturer(view, as_json)


@app.command("add-slot")
def add_slot(
    name: Annotated[str, typer.Argument(help="Lecturer name (case-insensitive)")],
    day: Annotated[str, typer.Argument(help="Weekday, e.g. MONDAY")],
    start: Annotated[str, typer.Argument(help="Start time HH:MM[:SS]")],
    end: Annotated[str, typer.Argument(help="End time HH:MM[:SS]")],
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """
    Add office hours to a lecturer's schedule.
    """
    try:
        _, service = _setup(config_file, verbose)
        view = service.add_schedule(name, parse_interval(day, start, end))
    except (OfficeHoursError, OSError, ValueError) as e:
        _fail(str(e))

    if view is None:
        _fail(f"Lecturer not found: {name}")
    _print_lecturer(view, as_json)


@app.command("remove-slot")
def remove_slot(
    name: Annotated[str, typer.Argument(help="Lecturer name (case-insensitive)")],
    day: Annotated[str, typer.Argument(help="Weekday, e.g. MONDAY")],
    start: Annotated[str, typer.Argument(help="Start time HH:MM[:SS]")],
    end: Annotated[str, typer.Argument(help="End time HH:MM[:SS]")],
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """
    Remove office hours matching day, start and end exactly.
    """
    try:
        _, service = _setup(config_file, verbose)
        view = service.remove_schedule(name, parse_interval(day, start, end))
    except (OfficeHoursError, OSError, ValueError) as e:
        _fail(str(e))

    if view is None:
        _fail(f"Lecturer not found: {name}")
    _print_lecturer(view, as_json)


@app.command("list")
def list_lecturers(
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """
    List all lecturers with their availability right now.
    """
    try:
        config, service = _setup(config_file, verbose)
        reference = ReferencePoint.now(config.timezone)
        views = service.list_lecturers(reference)
    except (OfficeHoursError, OSError, ValueError) as e:
        _fail(str(e))

    _print_lecturers(
        views,
        as_json,
        title=f"Lecturers ({reference.day.capitalize()} {format_time(reference.time)}, {config.timezone})",
        empty_message="No lecturers stored yet."
    )


@app.command()
def show(
    name: Annotated[str, typer.Argument(help="Lecturer name (case-insensitive)")],
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """
    Show one lecturer's schedule and availability right now.
    """
    try:
        config, service = _setup(config_file, verbose)
        view = service.get_lecturer(name, ReferencePoint.now(config.timezone))
    except (OfficeHoursError, OSError, ValueError) as e:
        _fail(str(e))

    if view is None:
        _fail(f"Lecturer not found: {name}")
    _print_lecturer(view, as_json)


@app.command()
def available(
    day: Annotated[str, typer.Argument(help="Weekday, e.g. MONDAY")],
    at: Annotated[str, typer.Argument(metavar="TIME", help="Time of day HH:MM[:SS]")],
    config_file: ConfigOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
):
    """
    List lecturers holding office hours at the given day and time.

    Example:

        officehours available monday 10:30
    """
    try:
        _, service = _setup(config_file, verbose)
        reference = ReferencePoint(day=parse_weekday(day), time=parse_time_of_day(at))
        views = service.available_lecturers(reference)
    except (OfficeHoursError, OSError, ValueError) as e:
        _fail(str(e))

    _print_lecturers(
        views,
        as_json,
        title=f"Available on {reference.day.capitalize()} at {format_time(reference.time)}",
        empty_message="No lecturers available at that time."
    )


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]officehours[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
