"""
errors.py
Conditions that end a run early. Each one is raised at the step that detects
it and carries the exit code and console icon that cli.main reports.

None of these leave anything changed on the system: the only mutating step
is the final `zpool replace`, which is never reached once one is raised.
"""
from __future__ import annotations


class ReplaceHalt(Exception):
    """Base for every terminal outcome short of running `zpool replace`."""

    exit_code = 0
    icon = "ℹ️ "

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class Resilvering(ReplaceHalt):
    icon = "🔄"


class NoPoolsFound(ReplaceHalt):
    icon = "✅"


class AllPoolsHealthy(ReplaceHalt):
    icon = "✅"


class InvalidSelection(ReplaceHalt):
    exit_code = 1
    icon = "❌"


class NoMissingMember(ReplaceHalt):
    icon = "✅"


class NoCandidates(ReplaceHalt):
    exit_code = 1
    icon = "🚫"


class Cancelled(ReplaceHalt):
    icon = "✋"


class DescriptorUnavailable(Exception):
    """A disk attribute could not be read. Always downgraded to 'Unknown'."""
