"""
Tests for the command policy filter.

The filter is an advisory denylist: it must refuse the known destructive
commands and let everything else through untouched.
"""

import re

import pytest

from developer_mcp.errors import CommandRefusedError
from developer_mcp.security import DEFAULT_POLICY_RULES, CommandPolicy, CommandPolicyRule


class TestDefaultPolicy:
    """Tests for the built-in denylist."""

    @pytest.mark.parametrize(
        "command",
        [
            "rm -rf /",
            "rm -rf build && echo done",
            "/bin/rm important.txt",
            "rmdir old",
            "del C:\\temp\\file.txt",
            "format C:",
            "shutdown -h now",
            "sudo poweroff",
            "mkfs.ext4 /dev/sda1",
            "init 0",
            "kill -9 1234",
            ":(){ :|:& };:",
            "chown -R nobody / --no-preserve-root",
        ],
    )
    def test_destructive_commands_refused(self, command):
        """Known destructive commands are refused."""
        assert not CommandPolicy().is_allowed(command)

    @pytest.mark.parametrize(
        "command",
        [
            "ls -la",
            "echo hello",
            "git status",
            "npm test",
            "ls ./firmware",
            "cat format_utils.ts",
            "echo RM",
        ],
    )
    def test_ordinary_commands_allowed(self, command):
        """Commands without a denylisted word are allowed."""
        assert CommandPolicy().is_allowed(command)

    def test_matching_is_case_sensitive(self):
        """Upper-case variants do not match."""
        policy = CommandPolicy()

        assert policy.is_allowed("SHUTDOWN")
        assert not policy.is_allowed("shutdown")

    def test_quoting_bypasses_filter(self):
        """Known limitation: the filter only sees the raw text."""
        assert CommandPolicy().is_allowed("'r''m' -rf build")

    def test_init_subcommands_refused(self):
        """Known limitation: harmless uses of a denylisted word are refused too."""
        assert not CommandPolicy().is_allowed("git init")


class TestPolicyCheck:
    """Tests for CommandPolicy.check."""

    def test_check_raises_with_rationale(self):
        """check() raises CommandRefusedError naming the command."""
        with pytest.raises(CommandRefusedError) as exc_info:
            CommandPolicy().check("kill 1")

        assert exc_info.value.command == "kill 1"
        assert exc_info.value.rationale == "Process kill"
        assert "`kill 1`" in str(exc_info.value)

    def test_check_passes_allowed_command(self):
        """check() returns quietly for allowed commands."""
        CommandPolicy().check("echo fine")

    def test_first_matching_rule_reported(self):
        """Rules are evaluated in order."""
        rule = CommandPolicy().first_violation("rm -rf / --no-preserve-root")

        assert rule is DEFAULT_POLICY_RULES[0]

    def test_custom_rules(self):
        """A policy can be built from its own rules."""
        policy = CommandPolicy([CommandPolicyRule(re.compile(r"\bcurl\b"), "Network access")])

        assert not policy.is_allowed("curl http://example.com")
        assert policy.is_allowed("rm -rf build")
