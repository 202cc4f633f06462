"""
zpool.py
Everything that talks to zpool(8):
- query_status: one `zpool status` snapshot for all pools
- parse_status: split the text into PoolStatusReport / MemberLine entries
- is_resilvering: the resilver guard checked before any resolution
- replace: the single mutating call, `zpool replace <pool> <old> <new>`

Only leaf rows of each `config:` table become members. The pool's own row
and grouping rows (mirror-0, raidz2-1, logs, cache, spares, replacing-0)
have children underneath them and are skipped.
"""

from __future__ import annotations
import re
from typing import List, Tuple
from .errors import NoPoolsFound
from .types import Config, MemberLine, PoolStatusReport
from .util import run

_POOL = re.compile(r"^\s*pool:\s*(\S+)")
_STATE = re.compile(r"^\s*state:\s*(\S+)")
_SCAN = re.compile(r"^\s*scan:\s*(.*\S)")
_CONFIG = re.compile(r"^\s*config:\s*$")
_SECTION = re.compile(r"^\s*(errors|status|action|see|remove|checkpoint):")


def query_status(cfg: Config) -> str:
    """Return the raw `zpool status` text, or raise NoPoolsFound."""
    rc, out = run([cfg.zpool_bin, "status"], capture=True)
    if rc != 0:
        detail = out.strip() or f"rc={rc}"
        raise NoPoolsFound(f"Could not read pool status ({detail}). Nothing to repair.", exit_code=1)
    return out


def is_resilvering(status_text: str, markers: List[str]) -> bool:
    lowered = status_text.lower()
    return any(m.lower() in lowered for m in markers if m)


def _members_from_rows(rows: List[Tuple[int, List[str]]]) -> List[MemberLine]:
    """Keep leaf rows (no deeper row right after them), minus the pool row."""
    members = []
    for i, (indent, tokens) in enumerate(rows):
        if i == 0:
            continue
        nxt = rows[i + 1][0] if i + 1 < len(rows) else -1
        if nxt > indent:
            continue
        if len(tokens) < 2:
            continue
        note = " ".join(tokens[5:]) or None
        members.append(MemberLine(tokens[0], tokens[1], note))
    return members


def parse_status(text: str) -> List[PoolStatusReport]:
    reports: List[PoolStatusReport] = []
    tables: List[List[Tuple[int, List[str]]]] = []
    cur = None
    in_config = False

    for raw in text.splitlines():
        line = raw.expandtabs(8)
        m = _POOL.match(line)
        if m:
            cur = PoolStatusReport(name=m.group(1), state="UNKNOWN")
            reports.append(cur)
            tables.append([])
            in_config = False
            continue
        if cur is None:
            continue
        if in_config and not _SECTION.match(line):
            tokens = line.split()
            if tokens and tokens[0] != "NAME":
                indent = len(line) - len(line.lstrip())
                tables[-1].append((indent, tokens))
            continue
        in_config = False
        m = _STATE.match(line)
        if m:
            cur.state = m.group(1)
            continue
        m = _SCAN.match(line)
        if m:
            cur.scan = m.group(1)
            continue
        if _CONFIG.match(line):
            in_config = True

    for report, rows in zip(reports, tables):
        report.members = _members_from_rows(rows)
    return reports


def replace(cfg: Config, pool: str, old: str, new: str) -> int:
    """Run `zpool replace` once with the exact identifiers; output goes to the terminal."""
    rc, _ = run([cfg.zpool_bin, "replace", pool, old, new], dry=cfg.dry_run)
    return rc
