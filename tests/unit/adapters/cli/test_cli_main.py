# tests/unit/adapters/cli/test_cli_main.py

"""Tests for the command-line interface"""

# Standard library imports
from io import StringIO
from json import dumps

# Third party imports
from pytest import fixture
from pytest import raises
from rich.console import Console

# Local imports
from boardlab_picker.adapters.cli.main import main
from boardlab_picker.adapters.cli.parser import create_argument_parser


@fixture
def workspace(tmp_path, monkeypatch):
    """Working directory with catalog files and no configuration file"""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ports.json").write_text(
        dumps(
            [
                {
                    "port": {"protocol": "serial", "address": "/dev/ttyACM0"},
                    "boards": [
                        {
                            "name": "Arduino Uno",
                            "fqbn": "arduino:avr:uno",
                            "platform": {"id": "arduino:avr", "name": "Arduino AVR Boards"},
                        }
                    ],
                },
                {"port": {"protocol": "network", "address": "192.168.1.20"}, "boards": []},
            ]
        ),
        encoding="utf-8",
    )
    (tmp_path / "boards.json").write_text(
        dumps(
            [
                {"name": "Arduino Uno", "fqbn": "arduino:avr:uno"},
                {"name": "Arduino Giga R1 WiFi", "fqbn": "arduino:mbed_giga:giga"},
            ]
        ),
        encoding="utf-8",
    )
    return tmp_path


def run_cli(*argv: str) -> tuple[int, str]:
    output = StringIO()
    status = main([*argv, "--silent"], console=Console(file=output, width=200))
    return status, output.getvalue()


class TestParser:
    """Test argument parsing"""

    def test_config_bound_options_unset(self, workspace):
        """Test that options backed by the configuration default to None"""
        args = create_argument_parser().parse_args(["match", "Uno", "--catalog", "boards.json"])

        assert args.min_score is None
        assert args.history_file is None

    def test_command_required(self, workspace):
        """Test that a subcommand is required"""
        with raises(SystemExit):
            create_argument_parser().parse_args([])


class TestConfigFile:
    """Test settings taken from a --config file"""

    @fixture
    def config_file(self, workspace):
        path = workspace / "custom.json"
        path.write_text(
            dumps(
                {
                    "matching": {"min_fuzzy_score": 1.0},
                    "history": {"history_file": "custom_history.json"},
                }
            ),
            encoding="utf-8",
        )
        return path

    def test_history_file_from_config(self, workspace, config_file):
        """Test that the configured history file is used"""
        status, _ = run_cli("pin", "serial:COM1", "--config", str(config_file))

        assert status == 0
        assert (workspace / "custom_history.json").exists()
        assert not (workspace / ".boardlab_history.json").exists()

    def test_min_score_from_config(self, workspace, config_file):
        """Test that the configured fuzzy floor applies"""
        default_status, _ = run_cli("match", "Giga", "--catalog", "boards.json")
        status, output = run_cli(
            "match", "Giga", "--catalog", "boards.json", "--config", str(config_file)
        )

        assert default_status == 0
        assert status == 1
        assert "No board matches" in output


class TestMatchCommand:
    """Test the match subcommand"""

    def test_exact_match(self, workspace):
        """Test that an exact match is reported"""
        status, output = run_cli("match", "arduino uno", "--catalog", "boards.json")

        assert status == 0
        assert "arduino:avr:uno" in output
        assert "exact" in output

    def test_no_match(self, workspace):
        """Test that a failed match exits with status 1"""
        status, output = run_cli("match", "zzzz", "--catalog", "boards.json")

        assert status == 1
        assert "No board matches" in output

    def test_missing_catalog(self, workspace):
        """Test that an unreadable catalog is reported"""
        status, output = run_cli("match", "Uno", "--catalog", "absent.json")

        assert status == 1
        assert "Error" in output


class TestListCommands:
    """Test the ports and boards subcommands"""

    def test_ports_grouped(self, workspace):
        """Test that detected ports are listed by protocol"""
        status, output = run_cli("ports", "--detected", "ports.json")

        assert status == 0
        assert "serial ports" in output
        assert "network ports" in output
        assert "Arduino Uno" in output

    def test_pinned_port_listed_first(self, workspace):
        """Test that pinning moves a port into the pinned section"""
        assert run_cli("pin", "arduino+network://192.168.1.20")[0] == 0

        status, output = run_cli("ports", "--detected", "ports.json")

        assert status == 0
        assert output.index("pinned ports") < output.index("serial ports")

    def test_protocol_filter(self, workspace):
        """Test that the protocol option filters ports"""
        status, output = run_cli("ports", "--detected", "ports.json", "--protocol", "usb")

        assert status == 0
        assert "No matching ports" in output

    def test_boards(self, workspace):
        """Test attached and catalog boards"""
        status, output = run_cli(
            "boards", "--detected", "ports.json", "--catalog", "boards.json"
        )

        assert status == 0
        assert "on /dev/ttyACM0" in output
        assert "Arduino Giga R1 WiFi" in output


class TestHistoryCommands:
    """Test history edits"""

    def test_pin_and_unpin(self, workspace):
        """Test that edits report whether the history changed"""
        assert "updated" in run_cli("pin", "serial:COM1")[1]
        assert "unchanged" in run_cli("pin", "serial:COM1")[1]
        assert "updated" in run_cli("unpin", "serial:COM1")[1]

    def test_board_history(self, workspace):
        """Test selection recording for boards"""
        status, output = run_cli("select", "fqbn:arduino:avr:uno", "--kind", "boards")

        assert status == 0
        assert (workspace / ".boardlab_history.json").exists()

    def test_invalid_key(self, workspace):
        """Test that keys that cannot be decoded are refused"""
        status, output = run_cli("pin", "not-a-key")

        assert status == 2
        assert "Not a valid ports key" in output

    def test_unwritable_history(self, workspace):
        """Test that persistence failures exit with status 1"""
        (workspace / "blocker").write_text("", encoding="utf-8")

        status, output = run_cli(
            "pin", "serial:COM1", "--history-file", str(workspace / "blocker" / "history.json")
        )

        assert status == 1
        assert "Failed to persist history" in output
