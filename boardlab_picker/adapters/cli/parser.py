# boardlab_picker/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from boardlab_picker.infrastructure.config import get_config

PICKER_KINDS = ("ports", "boards")


def _add_common_arguments(parser: ArgumentParser, history_file: str) -> None:
    """Options shared by every subcommand"""
    parser.add_argument("--config", help="Path to configuration JSON file")
    parser.add_argument(
        "--history-file",
        help=f"JSON file holding pinned and recent history (default: {history_file})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console logging level",
    )
    parser.add_argument("--log-file", help="Also log to this file, at DEBUG level")
    parser.add_argument("--silent", action="store_true", help="Suppress console logging")


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all subcommands"""
    # Load default configuration for help texts; option defaults are resolved
    # once --config is known
    config = get_config()
    matching_config = config.matching
    history_config = config.history

    parser = ArgumentParser(
        prog="boardlab-picker",
        description="Match board names and reconcile detected ports and boards with history",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Name matching
    match_parser = subparsers.add_parser("match", help="Resolve a board name against a catalog")
    match_parser.add_argument("name", help="Board name to resolve")
    match_parser.add_argument(
        "--catalog", required=True, help="JSON list of boards ({name, fqbn, platform})"
    )
    match_parser.add_argument("--platform", help="Only consider boards of this platform id")
    match_parser.add_argument(
        "--min-score",
        type=float,
        help=f"Minimum fuzzy similarity (default: {matching_config.min_fuzzy_score})",
    )
    _add_common_arguments(match_parser, history_config.history_file)

    # Reconciled lists
    ports_parser = subparsers.add_parser("ports", help="List detected ports with history")
    ports_parser.add_argument(
        "--detected", required=True, help="JSON list of detected ports ({port, boards})"
    )
    ports_parser.add_argument("--protocol", help="Only show ports of this protocol")
    _add_common_arguments(ports_parser, history_config.history_file)

    boards_parser = subparsers.add_parser("boards", help="List attached boards with history")
    boards_parser.add_argument(
        "--detected", required=True, help="JSON list of detected ports ({port, boards})"
    )
    boards_parser.add_argument("--catalog", help="JSON list of additional boards to offer")
    boards_parser.add_argument("--platform", help="Only show boards of this platform id")
    _add_common_arguments(boards_parser, history_config.history_file)

    # History edits
    for command, help_text in (
        ("pin", "Pin an identity key"),
        ("unpin", "Unpin an identity key"),
        ("forget", "Remove an identity key from the recent history"),
        ("select", "Record an identity key as the most recent selection"),
    ):
        history_parser = subparsers.add_parser(command, help=help_text)
        history_parser.add_argument("key", help="Identity key, e.g. arduino+serial:///dev/ttyACM0")
        history_parser.add_argument(
            "--kind", choices=PICKER_KINDS, default="ports", help="History to edit"
        )
        _add_common_arguments(history_parser, history_config.history_file)

    return parser
