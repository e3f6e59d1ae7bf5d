"""Unit tests for internal self:* commands."""

import json
import subprocess
import sys
from unittest.mock import patch

import click
import httpx
import pytest

from anything_cli import __version__
from anything_cli.cli.commands import INTERNAL_COMMANDS
from anything_cli.cli.commands.set_base_url import handle_set_base_url
from anything_cli.cli.commands.set_header import handle_set_header
from anything_cli.cli.commands.uninstall import handle_uninstall
from anything_cli.cli.commands.update import get_latest_version, handle_update
from anything_cli.core.exceptions import UpdateError, UsageError

EXE = "anything-cli"


def _read(config_path) -> dict:
    return json.loads(config_path.read_text(encoding="utf-8"))


class TestRegistry:
    """Tests for the internal command table."""

    def test_known_commands(self) -> None:
        assert set(INTERNAL_COMMANDS) == {
            "self:set-header",
            "self:set-base-url",
            "self:uninstall",
            "self:update",
        }


class TestSetBaseUrl:
    """Tests for self:set-base-url."""

    def test_requires_url(self) -> None:
        with pytest.raises(UsageError, match=r"Usage: anything-cli self:set-base-url <URL>"):
            handle_set_base_url(EXE, ["self:set-base-url"])

    def test_creates_config(self, config_path) -> None:
        assert handle_set_base_url(EXE, ["self:set-base-url", "https://api.test"]) == 0
        assert _read(config_path) == {"base_url": "https://api.test", "headers": None}

    def test_keeps_existing_headers(self, write_config, config_path) -> None:
        write_config(base_url="https://old.test", headers={"A": "1"})
        handle_set_base_url(EXE, ["self:set-base-url", "https://new.test"])
        assert _read(config_path) == {"base_url": "https://new.test", "headers": {"A": "1"}}

    def test_uses_executable_specific_config(self, home_dir) -> None:
        handle_set_base_url("acme", ["self:set-base-url", "https://acme.test"])
        assert (home_dir / ".acme" / "config.json").exists()


class TestSetHeader:
    """Tests for self:set-header."""

    def test_requires_key(self) -> None:
        with pytest.raises(UsageError, match=r"self:set-header <KEY> \[VALUE\]"):
            handle_set_header(EXE, ["self:set-header"])

    def test_creates_config_with_header(self, config_path) -> None:
        assert handle_set_header(EXE, ["self:set-header", "Authorization", "Bearer t"]) == 0
        assert _read(config_path) == {"base_url": "", "headers": {"Authorization": "Bearer t"}}

    def test_replaces_value(self, write_config, config_path) -> None:
        write_config(base_url="https://api.test", headers={"A": "1"})
        handle_set_header(EXE, ["self:set-header", "A", "2"])
        assert _read(config_path)["headers"] == {"A": "2"}

    def test_removes_without_value(self, write_config, config_path) -> None:
        write_config(base_url="https://api.test", headers={"A": "1", "B": "2"})
        handle_set_header(EXE, ["self:set-header", "A"])
        assert _read(config_path)["headers"] == {"B": "2"}

    def test_remove_when_headers_null(self, write_config, config_path) -> None:
        write_config(base_url="https://api.test", headers=None)
        handle_set_header(EXE, ["self:set-header", "A"])
        assert _read(config_path) == {"base_url": "https://api.test", "headers": {}}


class TestUninstall:
    """Tests for self:uninstall."""

    def test_declined_changes_nothing(self, write_config, config_path) -> None:
        write_config(base_url="https://api.test")
        with patch("anything_cli.cli.commands.uninstall.click.confirm", return_value=False), \
             patch("anything_cli.cli.commands.uninstall.subprocess.run") as mock_run:
            assert handle_uninstall(EXE, ["self:uninstall"]) == 0

        assert config_path.exists()
        mock_run.assert_not_called()

    def test_aborted_prompt_counts_as_no(self, write_config, config_path) -> None:
        write_config(base_url="https://api.test")
        with patch("anything_cli.cli.commands.uninstall.click.confirm", side_effect=click.Abort()), \
             patch("anything_cli.cli.commands.uninstall.subprocess.run") as mock_run:
            assert handle_uninstall(EXE, ["self:uninstall"]) == 0

        mock_run.assert_not_called()

    def test_confirmed_removes_config_and_package(self, write_config, config_path) -> None:
        write_config(base_url="https://api.test")
        done = subprocess.CompletedProcess(args=[], returncode=0)
        with patch("anything_cli.cli.commands.uninstall.click.confirm", return_value=True), \
             patch("anything_cli.cli.commands.uninstall.subprocess.run", return_value=done) as mock_run:
            assert handle_uninstall(EXE, ["self:uninstall"]) == 0

        assert not config_path.exists()
        mock_run.assert_called_once_with(
            [sys.executable, "-m", "pip", "uninstall", "-y", "anything-cli"],
        )

    def test_pip_failure_returns_one(self) -> None:
        failed = subprocess.CompletedProcess(args=[], returncode=1)
        with patch("anything_cli.cli.commands.uninstall.click.confirm", return_value=True), \
             patch("anything_cli.cli.commands.uninstall.subprocess.run", return_value=failed):
            assert handle_uninstall(EXE, ["self:uninstall"]) == 1


class TestGetLatestVersion:
    """Tests for the PyPI version lookup."""

    def _transport(self, response: httpx.Response) -> httpx.MockTransport:
        return httpx.MockTransport(lambda request: response)

    def test_reads_info_version(self) -> None:
        response = httpx.Response(200, json={"info": {"version": "1.2.3"}})
        assert get_latest_version(self._transport(response)) == "1.2.3"

    def test_strips_v_prefix(self) -> None:
        response = httpx.Response(200, json={"info": {"version": "v1.2.3"}})
        assert get_latest_version(self._transport(response)) == "1.2.3"

    def test_non_success_status(self) -> None:
        response = httpx.Response(404, json={"message": "Not Found"})
        with pytest.raises(UpdateError, match="PyPI returned status: 404"):
            get_latest_version(self._transport(response))

    @pytest.mark.parametrize(
        "payload",
        [{}, {"info": {}}, {"info": {"version": ""}}, {"info": {"version": 3}}, []],
    )
    def test_missing_version(self, payload) -> None:
        response = httpx.Response(200, json=payload)
        with pytest.raises(UpdateError, match="No version found"):
            get_latest_version(self._transport(response))

    def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        with pytest.raises(UpdateError, match="Failed to fetch release info"):
            get_latest_version(httpx.MockTransport(handler))


class TestHandleUpdate:
    """Tests for self:update."""

    def test_already_latest(self) -> None:
        with patch("anything_cli.cli.commands.update.get_latest_version", return_value=__version__), \
             patch("anything_cli.cli.commands.update.subprocess.run") as mock_run:
            assert handle_update(EXE, ["self:update"]) == 0
        mock_run.assert_not_called()

    def test_upgrades_when_newer(self) -> None:
        done = subprocess.CompletedProcess(args=[], returncode=0)
        with patch("anything_cli.cli.commands.update.get_latest_version", return_value="99.0.0"), \
             patch("anything_cli.cli.commands.update.subprocess.run", return_value=done) as mock_run:
            assert handle_update(EXE, ["self:update"]) == 0

        mock_run.assert_called_once_with(
            [sys.executable, "-m", "pip", "install", "--upgrade", "anything-cli==99.0.0"],
        )

    def test_pip_failure_raises(self) -> None:
        failed = subprocess.CompletedProcess(args=[], returncode=2)
        with patch("anything_cli.cli.commands.update.get_latest_version", return_value="99.0.0"), \
             patch("anything_cli.cli.commands.update.subprocess.run", return_value=failed):
            with pytest.raises(UpdateError, match="pip exited with status 2"):
                handle_update(EXE, ["self:update"])
