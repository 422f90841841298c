"""Unit tests for sshexec.command."""

import sys
import threading
from unittest.mock import MagicMock

import pytest

from sshexec.command import build_command, scp_command, ssh_command
from sshexec.errors import CommandNotFoundError, ResolutionError
from sshexec.models import Tool
from sshexec.resolver import Resolver

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")


def make_resolver(result="/usr/bin/ssh", override=None):
    discovery = MagicMock()
    discovery.find.return_value = result
    return Resolver(discovery, search_path_lookup=lambda: override)


class TestBuildCommand:
    def test_passes_arguments_through_unchanged(self):
        descriptor = build_command(Tool.SSH, None, "-p", "2222", "host", resolver=make_resolver())
        assert descriptor.executable == "/usr/bin/ssh"
        assert descriptor.args == ["-p", "2222", "host"]
        assert descriptor.argv == ["/usr/bin/ssh", "-p", "2222", "host"]

    def test_keeps_duplicates_and_order(self):
        args = ["-v", "-v", "host", "-v", ""]
        descriptor = build_command(Tool.SSH, None, *args, resolver=make_resolver())
        assert descriptor.args == args

    def test_no_args(self):
        descriptor = build_command(Tool.SCP, resolver=make_resolver("/usr/bin/scp"))
        assert descriptor.args == []

    def test_without_cancel_event(self):
        descriptor = build_command(Tool.SSH, None, "host", resolver=make_resolver())
        assert descriptor.cancel_event is None
        assert descriptor.cancellable is False

    def test_binds_cancel_event(self):
        event = threading.Event()
        descriptor = build_command(Tool.SSH, event, "host", resolver=make_resolver())
        assert descriptor.cancel_event is event
        assert descriptor.cancellable is True

    def test_propagates_resolution_error_with_context(self):
        discovery = MagicMock()
        discovery.find.side_effect = CommandNotFoundError("ssh")
        resolver = Resolver(discovery, search_path_lookup=lambda: None)
        with pytest.raises(ResolutionError, match="unable to identify 'ssh' command"):
            build_command(Tool.SSH, None, "host", resolver=resolver)


class TestToolWrappers:
    def test_ssh_command(self):
        discovery = MagicMock()
        discovery.find.return_value = "/usr/bin/ssh"
        resolver = Resolver(discovery, search_path_lookup=lambda: None)
        descriptor = ssh_command(None, "host", resolver=resolver)
        discovery.find.assert_called_once_with("ssh")
        assert descriptor.argv == ["/usr/bin/ssh", "host"]

    def test_scp_command(self):
        discovery = MagicMock()
        discovery.find.return_value = "/usr/bin/scp"
        resolver = Resolver(discovery, search_path_lookup=lambda: None)
        descriptor = scp_command(None, "a", "host:b", resolver=resolver)
        discovery.find.assert_called_once_with("scp")
        assert descriptor.args == ["a", "host:b"]

    @posix_only
    def test_override_directory_with_only_scp(self, tmp_path):
        scp = tmp_path / "scp"
        scp.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        scp.chmod(0o755)
        discovery = MagicMock()
        discovery.find.return_value = "/usr/bin/ssh"
        resolver = Resolver(discovery, search_path_lookup=lambda: str(tmp_path))

        with pytest.raises(ResolutionError):
            ssh_command(None, "host", resolver=resolver)

        descriptor = scp_command(None, "a", "host:b", resolver=resolver)
        assert descriptor.executable == str(scp)
        assert descriptor.executable.startswith(str(tmp_path))
        discovery.find.assert_not_called()
