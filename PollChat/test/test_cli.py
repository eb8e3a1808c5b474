"""
Tests for the command-line entry point and the one-shot client.
"""

import pytest

from PollChat.__main__ import parse
from PollChat.config import ClientSettings, config
from PollChat.core.client import StandardCommandlineClient


class TestParse:
    """Tests for argument parsing."""

    def test_client_defaults(self):
        args = parse(["client"])

        assert args.command == "client"
        assert args.url == config.DEFAULT_SERVER_URL
        assert args.message is None
        assert args.get is False

    def test_client_one_shot_options(self):
        args = parse(["client", "--url", "http://example.test:1/", "-m", "hi", "-g"])

        assert args.url == "http://example.test:1/"
        assert args.message == "hi"
        assert args.get is True

    def test_server_options(self):
        args = parse(["server", "--host", "127.0.0.1", "--port", "4000", "--db", "x.db"])

        assert (args.host, args.port, args.db) == ("127.0.0.1", 4000, "x.db")

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            parse([])


class TestStandardCommandlineClient:
    """Tests for the one-shot client."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_send_and_print_history(self, stand_in_server, capsys):
        settings = ClientSettings(url=stand_in_server.url, request_timeout=2.0)

        status = await StandardCommandlineClient(settings, message="hello", get_history=True).async_run()

        out = capsys.readouterr().out
        assert status == 0
        assert "Sending message:\n\thello" in out
        assert "Message history:\nMessage 1: hello" in out

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_failure_returns_error_status(self, stand_in_server, capsys):
        stand_in_server.status = 503
        settings = ClientSettings(url=stand_in_server.url, request_timeout=2.0)

        status = await StandardCommandlineClient(settings, get_history=True).async_run()

        assert status == 1
        assert "Error:" in capsys.readouterr().err

    def test_run_is_synchronous(self, unused_tcp_port, capsys):
        settings = ClientSettings(url=f"http://127.0.0.1:{unused_tcp_port}/", request_timeout=2.0)

        status = StandardCommandlineClient(settings, get_history=True).run()

        assert status == 1
        assert "Error:" in capsys.readouterr().err
