"""Command policy filter for the run-command tools.

The filter is an advisory denylist of textual patterns matched against the raw
command string. It is not a sandbox: quoting (``'r''m'``), variable expansion
(``$RM``), aliases or command substitution all slip past it.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Tuple

from .errors import CommandRefusedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandPolicyRule:
    """A denylisted pattern and the reason it is refused."""
    pattern: Pattern[str]
    rationale: str

    def matches(self, command: str) -> bool:
        return self.pattern.search(command) is not None


def _rule(pattern: str, rationale: str) -> CommandPolicyRule:
    return CommandPolicyRule(pattern=re.compile(pattern), rationale=rationale)


# Evaluated in order, case-sensitive, against the whole command string
DEFAULT_POLICY_RULES: Tuple[CommandPolicyRule, ...] = (
    _rule(r"\brm\b", "Unix remove"),
    _rule(r"\brmdir\b", "Unix remove dir"),
    _rule(r"\bdel\b", "Windows delete"),
    _rule(r"\bformat\b", "Disk format"),
    _rule(r"\bshutdown\b", "System shutdown"),
    _rule(r"\bmkfs\b", "Make filesystem"),
    _rule(r"\bpoweroff\b", "System power-off"),
    _rule(r"\binit\b", "Init runlevel change"),
    _rule(r"\bkill\b", "Process kill"),
    _rule(r":\s*\(\s*\)\s*\{", "Fork bomb"),
    _rule(r"--no-preserve-root", "Root preservation bypass"),
)


class CommandPolicy:
    """Decides whether a shell command may be handed to the process runner."""

    def __init__(self, rules: Iterable[CommandPolicyRule] = DEFAULT_POLICY_RULES) -> None:
        self.rules: Tuple[CommandPolicyRule, ...] = tuple(rules)

    def first_violation(self, command: str) -> Optional[CommandPolicyRule]:
        for rule in self.rules:
            if rule.matches(command):
                return rule
        return None

    def is_allowed(self, command: str) -> bool:
        return self.first_violation(command) is None

    def check(self, command: str) -> None:
        """Raise CommandRefusedError if any denylisted pattern matches."""
        rule = self.first_violation(command)
        if rule is not None:
            logger.warning("Refused command %r (%s)", command, rule.rationale)
            raise CommandRefusedError(command, rule.rationale)
