"""
prompt.py
Operator prompts. Every function takes the input callable so the flow can
be driven without a terminal.
"""

from __future__ import annotations
import re
from typing import Callable, Sequence
from .errors import Cancelled, InvalidSelection

Ask = Callable[[str], str]

_INDEX = re.compile(r"^[0-9]+$")


def choose_index(lines: Sequence[str], question: str, ask: Ask = input) -> int:
    """
    Print one `[i] line` per option and read a zero-based index.
    Anything that is not a whole number below len(lines) raises InvalidSelection.
    """
    for i, line in enumerate(lines):
        print(f"[{i}] {line}")
    print()
    answer = ask(question).strip()
    if not _INDEX.match(answer) or int(answer) >= len(lines):
        raise InvalidSelection(f"Invalid selection {answer!r}. Exiting.")
    return int(answer)


def confirm(question: str, ask: Ask = input) -> bool:
    """[y/N] question; only an answer starting with y/Y counts as yes. Closed input is a no."""
    try:
        answer = ask(f"{question} [y/N] ")
    except EOFError:
        return False
    return answer.strip()[:1] in ("y", "Y")


def pause_before(command: str, ask: Ask = input) -> None:
    """Show the exact command and wait for Enter. Ctrl+C here aborts the run."""
    print()
    print("⚙️  OK, I'm about to execute this command:")
    print(command)
    try:
        ask("👉 Press Enter to continue or Ctrl+C to cancel...")
    except EOFError:
        raise Cancelled("Replacement cancelled.")
