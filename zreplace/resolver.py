"""
resolver.py
Candidate resolution over one status snapshot:
- classify_pools: split reports into healthy and degraded
- select_pool: auto-pick a single degraded pool, ask when there are several
- find_missing_member: first member in a "not present" state
- build_claimed_set: whole-disk keys of every member of every pool
- resolve_candidates: catalog entries no pool has claimed

All of these are pure except select_pool, which may prompt.
"""

from __future__ import annotations
from typing import Iterable, List, Set, Tuple
from .errors import AllPoolsHealthy, NoCandidates, NoMissingMember, NoPoolsFound
from .prompt import Ask, choose_index
from .types import DeviceCatalogEntry, MemberLine, PoolStatusReport
from .util import normalize_identifier


def classify_pools(
    reports: List[PoolStatusReport], healthy_state: str = "ONLINE"
) -> Tuple[List[PoolStatusReport], List[PoolStatusReport]]:
    if not reports:
        raise NoPoolsFound("No pools available. Nothing to repair.")
    healthy = [r for r in reports if r.state == healthy_state]
    degraded = [r for r in reports if r.state != healthy_state]
    return healthy, degraded


def select_pool(degraded: List[PoolStatusReport], ask: Ask = input) -> PoolStatusReport:
    if not degraded:
        raise AllPoolsHealthy("All pools are healthy. No missing disk detected. Exiting.")
    if len(degraded) == 1:
        return degraded[0]
    print("⚠️  More than one pool is degraded:")
    idx = choose_index(
        [f"{r.name} ({r.state})" for r in degraded],
        "👉 Enter the number of the pool to repair: ",
        ask,
    )
    return degraded[idx]


def find_missing_member(report: PoolStatusReport, missing_states: Iterable[str]) -> MemberLine:
    wanted = {s.upper() for s in missing_states}
    for member in report.members:
        if member.state.upper() in wanted:
            return member
    raise NoMissingMember(
        f"Pool {report.name} is {report.state} but no member is missing "
        f"({', '.join(sorted(wanted))}). Nothing to replace."
    )


def build_claimed_set(reports: Iterable[PoolStatusReport]) -> Set[str]:
    claimed: Set[str] = set()
    for report in reports:
        for member in report.members:
            claimed.add(normalize_identifier(member.identifier))
    return claimed


def resolve_candidates(
    catalog: Iterable[DeviceCatalogEntry], claimed: Set[str]
) -> List[DeviceCatalogEntry]:
    """
    Unclaimed catalog entries in catalog order.

    An entry is claimed when its by-id key or the kernel name it resolves to
    is in `claimed`. A device is claimed as soon as any of its by-id links
    is, so ata-X and scsi-SATA_X go together; an unclaimed device reached
    through several links is listed once, under its first link.

    With an empty `claimed` the result is therefore the whole catalog only
    when every entry is a distinct device; aliases collapse to one entry.
    """
    entries = list(catalog)
    claimed_devices: Set[str] = set()
    for entry in entries:
        if normalize_identifier(entry.identifier) in claimed or (
            entry.device_path and normalize_identifier(entry.device_path) in claimed
        ):
            claimed_devices.add(entry.device_path or entry.identifier)

    out: List[DeviceCatalogEntry] = []
    seen: Set[str] = set()
    for entry in entries:
        key = entry.device_path or entry.identifier
        if key in claimed_devices or normalize_identifier(entry.identifier) in claimed:
            continue
        if key in seen:
            continue
        seen.add(key)
        out.append(entry)
    return out


def require_candidates(candidates: List[DeviceCatalogEntry]) -> List[DeviceCatalogEntry]:
    if not candidates:
        raise NoCandidates("No candidate new disks found. Please insert a new disk and try again.")
    return candidates
