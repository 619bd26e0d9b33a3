"""Tests for the fleet server client and its shell."""

import pytest

from conftest import TEST_SERVER_URL, failing_http, scripted_input, unreachable_http
from fleet_client import main
from src.client.api import ApiError, FleetApi, NotAuthenticatedError
from src.client.session import ClientConfig
from src.client.shell import CommandShell, FleetShell


class TestClientConfig:
    """Test server URL configuration."""

    def test_env_override(self):
        config = ClientConfig.from_env({"WORLDC_SERVER_URL": "http://game.example:9000/"})
        assert config.server_url == "http://game.example:9000"

    def test_default_when_unset(self):
        assert ClientConfig.from_env({}).server_url == "http://localhost:3000"

    def test_default_when_empty(self):
        assert ClientConfig.from_env({"WORLDC_SERVER_URL": ""}).server_url == "http://localhost:3000"

    def test_empty_url_rejected(self):
        with pytest.raises(ValueError, match="server_url cannot be empty"):
            ClientConfig(" ")


class TestFleetApi:
    """Test FleetApi against the fake fleet server."""

    def test_status(self, fleet_api):
        status = fleet_api.status()
        assert status.status == "ok"
        assert status.tick == 42
        assert status.players == 0

    def test_register_starts_session(self, fleet_api):
        reply = fleet_api.register("Vega")

        assert reply.playerId == "p-1"
        assert reply.colonyId == "home-p-1"
        assert fleet_api.session.token == "tok-1"
        assert fleet_api.session.user_id == "p-1"

    def test_burn_sends_token(self, fleet_api):
        fleet_api.register("Vega")

        reply = fleet_api.burn(250)

        assert reply.burned == 250
        assert reply.balance == 750

    def test_burn_rejected_by_server(self, fleet_api):
        fleet_api.register("Vega")

        with pytest.raises(ApiError) as exc_info:
            fleet_api.burn(5000)

        assert exc_info.value.status_code == 400
        assert "Insufficient funds" in exc_info.value.message

    def test_launch_payload(self, fleet_api, fleet_server):
        fleet_api.register("Vega")

        reply = fleet_api.launch("home-p-1", "Explorer", 3, -4)

        assert reply.fleetId == "f-1"
        assert reply.eta == 7
        assert fleet_server.state.launches == [
            {"colonyId": "home-p-1", "shipClass": "Explorer", "target": {"x": 3, "y": -4}}
        ]

    def test_build(self, fleet_api):
        fleet_api.register("Vega")
        reply = fleet_api.build("home-p-1", "shipyard")
        assert reply.message == "Queued shipyard at home-p-1"

    def test_calls_before_register(self, fleet_api):
        with pytest.raises(NotAuthenticatedError):
            fleet_api.burn(10)

    def test_unexpected_reply_shape(self):
        api = FleetApi(ClientConfig(TEST_SERVER_URL), http=failing_http(200, '{"tick": 3}'))

        with pytest.raises(ApiError, match="Unexpected response from server"):
            api.status()


class TestFleetShell:
    """Test the fleet client's command loop."""

    def test_session(self, fleet_api, capsys):
        shell = FleetShell(
            fleet_api,
            input_fn=scripted_input(
                "status",
                "register Vega",
                "build home-p-1 shipyard",
                "burn 100",
                "launch home-p-1 Pioneer 2 5",
                "exit",
            ),
        )

        assert shell.run() == 0
        out = capsys.readouterr().out

        assert "Server: ok | Tick: 42 | Players: 0" in out
        assert "✓ Registered Vega (player p-1)" in out
        assert "Home colony: home-p-1" in out
        assert "✓ Queued shipyard at home-p-1" in out
        assert "✓ Burned 100 | Balance: 900" in out
        assert "✓ Fleet launched | Fleet: f-1 | ETA: 7" in out
        assert "Goodbye!" in out

    def test_requires_register_first(self, fleet_api, capsys):
        shell = FleetShell(fleet_api)

        shell.handle_line("burn 10")

        assert "❌ Not registered: use 'register <name>' first" in capsys.readouterr().out

    def test_usage_messages(self, fleet_api, capsys):
        shell = FleetShell(fleet_api)

        shell.handle_line("launch home-p-1 Pioneer")
        assert "Usage: launch <colony_id> <ship_class> <x> <y>" in capsys.readouterr().out

        shell.handle_line("burn plenty")
        assert "Usage: burn <amount>" in capsys.readouterr().out

        shell.handle_line("launch home-p-1 Pioneer north 5")
        assert "Usage: launch <colony_id> <ship_class> <x> <y>" in capsys.readouterr().out

    def test_burn_must_be_positive(self, fleet_api, capsys):
        fleet_api.register("Vega")
        shell = FleetShell(fleet_api)

        shell.handle_line("burn 0")

        assert "❌ Invalid burn amount: must be positive (got 0)" in capsys.readouterr().out

    def test_unknown_command(self, fleet_api, capsys):
        shell = FleetShell(fleet_api)

        assert shell.handle_line("warp 9") is True

        out = capsys.readouterr().out
        assert "❌ Unknown command: 'warp'" in out
        assert "Available commands: status, register, build, burn, launch, help, quit" in out

    def test_empty_name_is_rejected(self, fleet_api, capsys):
        """An empty quoted argument is reported and the shell keeps going."""
        shell = FleetShell(fleet_api)

        assert shell.handle_line('register ""') is True
        assert "❌ Invalid name: String should have at least 1 character" in capsys.readouterr().out
        assert not fleet_api.session.authenticated

        assert shell.handle_line("register Vega") is True
        assert "✓ Registered Vega (player p-1)" in capsys.readouterr().out

    def test_blank_line_ignored(self, fleet_api, capsys):
        assert FleetShell(fleet_api).handle_line("   ") is True
        assert capsys.readouterr().out == ""

    def test_server_error_is_reported(self, capsys):
        """Any non-2xx reply prints a failure and the shell continues."""
        shell = FleetShell(FleetApi(ClientConfig(TEST_SERVER_URL), http=failing_http(500, "boom")))

        for line in ("status", "register Vega"):
            assert shell.handle_line(line) is True
            assert "❌ Request failed: HTTP 500: boom" in capsys.readouterr().out

    def test_connection_failure_is_reported(self, capsys):
        shell = FleetShell(FleetApi(ClientConfig(TEST_SERVER_URL), http=unreachable_http()))

        assert shell.handle_line("status") is True
        assert "❌ Request failed: Connection refused" in capsys.readouterr().out


def test_main_uses_env_url(monkeypatch, capsys):
    """The entry point reads the server URL from the environment and exits on EOF."""
    monkeypatch.setenv("WORLDC_SERVER_URL", "http://fleet.example:7000")

    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)

    assert main([]) == 0
    assert "Server: http://fleet.example:7000" in capsys.readouterr().out


def test_base_shell_needs_command_table():
    with pytest.raises(TypeError):
        CommandShell()
