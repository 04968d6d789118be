"""Crewday CLI - Astronaut Daily Schedule Organizer."""

import logging
from pathlib import Path

import click

from . import workflows
from .adapters.console_sink import ConsoleConflictSink
from .config import load_config
from .core.errors import ScheduleError, TaskConflict
from .core.schedule import TaskStore

logger = logging.getLogger(__name__)

MENU = """
=== Astronaut Daily Schedule Organizer ===
1) Add Task
2) Remove Task (by description)
3) View All Tasks
4) Edit Task (by description)
5) Mark Task Completed (by description)
6) View Tasks by Priority
0) Exit"""


def _configure_logging(log_file: str, level: str) -> None:
    """Append human-readable lines to the schedule log."""
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_file,
            filemode="a",
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=getattr(logging, level.upper(), logging.INFO),
        )
    except OSError:
        click.echo("Warning: Logging initialization failed.")


def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False)


def _add(store: TaskStore) -> str:
    description = _ask("Description")
    start = _ask("Start time (HH:mm)")
    end = _ask("End time (HH:mm)")
    priority = _ask("Priority (High/Medium/Low)")
    return workflows.add_task(store, description, start, end, priority)


def _edit(store: TaskStore) -> str:
    old_description = _ask("Description of task to edit")
    description = _ask("New description")
    start = _ask("New start time (HH:mm)")
    end = _ask("New end time (HH:mm)")
    priority = _ask("New priority (High/Medium/Low)")
    return workflows.edit_task(store, old_description, description, start, end, priority)


def _echoes_conflicts(store: TaskStore) -> bool:
    return any(isinstance(s, ConsoleConflictSink) for s in store.sinks)


def _dispatch(choice: str, store: TaskStore) -> str | None:
    """Run one menu choice. Returns the text to show, or None to exit."""
    match choice:
        case "1":
            return _add(store)
        case "2":
            return workflows.remove_task(store, _ask("Description of task to remove"))
        case "3":
            return workflows.list_tasks(store)
        case "4":
            return _edit(store)
        case "5":
            return workflows.complete_task(store, _ask("Description of task to mark completed"))
        case "6":
            return workflows.list_by_priority(store, _ask("Enter priority (High/Medium/Low)"))
        case "0":
            return None
        case _:
            return "Invalid choice."


def run_menu(store: TaskStore) -> None:
    """Interactive loop over a single store until the user exits."""
    while True:
        click.echo(MENU)
        try:
            choice = _ask("Choose an option").strip()
            output = _dispatch(choice, store)
        except ScheduleError as e:
            if not (isinstance(e, TaskConflict) and _echoes_conflicts(store)):
                click.echo(f"Error: {e}")
            continue
        except click.Abort:
            click.echo()
            output = None

        if output is None:
            click.echo("Exiting. Goodbye!")
            return
        click.echo(output)


@click.group(invoke_without_command=True)
@click.version_option(package_name="crewday")
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Schedule log file")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, log_file: str | None, debug: bool):
    """Crewday - Astronaut daily schedule organizer."""
    config = load_config()
    if log_file:
        config.log_file = log_file
    if debug:
        config.log_level = "DEBUG"
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@main.command()
@click.pass_obj
def menu(config):
    """Run the interactive schedule menu."""
    _configure_logging(config.log_file, config.log_level)
    store = workflows.build_store(config)
    logger.info("Schedule session started")
    run_menu(store)
    logger.info(f"Schedule session ended with {len(store)} task(s)")


if __name__ == "__main__":
    main()
