# boardlab_picker/adapters/cli/main.py

"""
Board Picker - CLI Main Module

Command-line interface for resolving board names against a catalog and for
listing detected ports and boards reconciled with pinned and recent history.
"""

# Standard library imports
from argparse import Namespace
from asyncio import run
from logging import getLogger

# Third party imports
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local imports
from boardlab_picker.adapters.cli.parser import create_argument_parser
from boardlab_picker.application.processing.constraints import PickConstraints
from boardlab_picker.application.processing.identity_keys import revive_board
from boardlab_picker.application.processing.identity_keys import revive_port
from boardlab_picker.application.processing.name_matcher import BoardNameMatcher
from boardlab_picker.application.processing.reconciler import BoardReconciler
from boardlab_picker.application.processing.reconciler import PortReconciler
from boardlab_picker.application.processing.reconciler import ReconciledItem
from boardlab_picker.application.services import PickerService
from boardlab_picker.core.domain.enums import ACTION_DESCRIPTIONS
from boardlab_picker.core.domain.errors import HistoryPersistenceError
from boardlab_picker.core.domain.identity import BoardPickCandidate
from boardlab_picker.core.domain.identity import PortPickCandidate
from boardlab_picker.core.domain.presentation import PlaceholderItem
from boardlab_picker.core.domain.presentation import describe_item
from boardlab_picker.core.domain.presentation import group_items
from boardlab_picker.infrastructure.catalog import StaticCatalog
from boardlab_picker.infrastructure.catalog import load_boards
from boardlab_picker.infrastructure.catalog import load_detected_ports
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.logging import setup_logging
from boardlab_picker.infrastructure.persistence import JsonFileMemento
from boardlab_picker.infrastructure.persistence import open_histories

logger = getLogger(__name__)


def render_items(console: Console, items: list[ReconciledItem], noun: str) -> None:
    """Print reconciled items, one table per section"""
    for section, section_items in group_items(items):
        if len(section_items) == 1 and isinstance(section_items[0], PlaceholderItem):
            console.print(escape(section_items[0].label), style="dim")
            continue

        table = Table(title=escape(f"{section} {noun}"), title_justify="left")
        table.add_column("Item")
        table.add_column("Key", style="cyan")
        table.add_column("Actions", style="dim")
        for item in section_items:
            if isinstance(item, PlaceholderItem):
                continue
            actions = ", ".join(ACTION_DESCRIPTIONS[action] for action in item.actions)
            text = describe_item(item)
            if item.detail:
                text = f"{text}\n{item.detail}"
            table.add_row(escape(text), escape(item.key), actions)
        console.print(table)


def _run_match(args: Namespace, config: ConfigLoader, console: Console) -> int:
    boards = load_boards(args.catalog)
    matcher = BoardNameMatcher(config)
    result = matcher.match(args.name, boards, platform_id=args.platform, min_score=args.min_score)
    if result is None:
        console.print(f"No board matches '{escape(args.name)}'")
        return 1

    console.print(
        f"{escape(result.board.display_label)} [cyan]{escape(result.board.fqbn or '')}[/cyan] "
        f"({result.kind.value}, score {result.score:.2f})"
    )
    return 0


def _run_ports(args: Namespace, config: ConfigLoader, console: Console) -> int:
    catalog = StaticCatalog(load_detected_ports(args.detected))
    pinned, recent = open_histories(JsonFileMemento(args.history_file), "ports", config)

    constraints = None
    if args.protocol:
        protocol = args.protocol

        def protocol_filter(candidate: PortPickCandidate) -> bool:
            return candidate.port.protocol == protocol

        constraints = PickConstraints.of(protocol_filter)

    service = PickerService(catalog, PortReconciler(config), pinned, recent, constraints)
    items = run(service.refresh()) or []
    render_items(console, items, "ports")
    return 0


def _run_boards(args: Namespace, config: ConfigLoader, console: Console) -> int:
    catalog = StaticCatalog(load_detected_ports(args.detected))
    boards = load_boards(args.catalog) if args.catalog else []
    pinned, recent = open_histories(JsonFileMemento(args.history_file), "boards", config)

    constraints = None
    if args.platform:
        platform_id = args.platform

        def platform_filter(candidate: BoardPickCandidate) -> bool:
            return candidate.board.platform_id == platform_id

        constraints = PickConstraints.of(platform_filter)

    service = PickerService(
        catalog, BoardReconciler(config), pinned, recent, constraints, boards=boards
    )
    items = run(service.refresh()) or []
    render_items(console, items, "boards")
    return 0


def _run_history_edit(args: Namespace, config: ConfigLoader, console: Console) -> int:
    if args.kind == "ports":
        revive, reconciler = revive_port, PortReconciler(config)
    else:
        revive, reconciler = revive_board, BoardReconciler(config)
    if revive(args.key) is None:
        console.print(f"[red]Not a valid {args.kind} key:[/red] {escape(args.key)}")
        return 2

    pinned, recent = open_histories(JsonFileMemento(args.history_file), args.kind, config)
    service = PickerService(StaticCatalog(), reconciler, pinned, recent)

    match args.command:
        case "pin":
            changed = run(service.pin(args.key))
        case "unpin":
            changed = run(service.unpin(args.key))
        case "forget":
            changed = run(service.forget(args.key))
        case _:
            changed = run(service.record_selection(args.key))

    status = "updated" if changed else "unchanged"
    console.print(f"{args.command} {escape(args.key)}: {status}")
    return 0


COMMANDS = {
    "match": _run_match,
    "ports": _run_ports,
    "boards": _run_boards,
    "pin": _run_history_edit,
    "unpin": _run_history_edit,
    "forget": _run_history_edit,
    "select": _run_history_edit,
}


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Main CLI entry point

    Args:
        argv: Arguments, defaults to the process arguments
        console: Output console, defaults to stdout

    Returns:
        Process exit status
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    # Configure logging
    setup_logging(log_file=args.log_file, log_level=args.log_level, silent=args.silent)

    config = ConfigLoader(args.config)
    if args.history_file is None:
        args.history_file = config.history.history_file
    logger.debug(f"Running '{args.command}' with history file {args.history_file}")

    try:
        return COMMANDS[args.command](args, config, console)
    except HistoryPersistenceError as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read input: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
