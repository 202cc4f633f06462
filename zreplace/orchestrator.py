"""
orchestrator.py
Coordinates one interactive replacement, strictly in order:
  - take a single `zpool status` snapshot
  - resilver guard on that snapshot
  - classify pools, pick the degraded one, find its missing member
  - enumerate the by-id catalog and subtract every pool's members
  - show candidates with model/serial/size and let the operator pick one
  - confirm, show the exact command, then run `zpool replace` once

Every early stop is a ReplaceHalt raised by the step that detects it; the
caller turns it into a message and an exit code.
"""

from __future__ import annotations
from typing import List
from .types import Config, DeviceCatalogEntry, DiskDescription
from .errors import Cancelled, Resilvering
from .prompt import Ask, choose_index, confirm, pause_before
from .resolver import (
    build_claimed_set,
    classify_pools,
    find_missing_member,
    require_candidates,
    resolve_candidates,
    select_pool,
)
from .catalog import describe_device, list_catalog
from .util import warn
from . import zpool


def _candidate_line(entry: DeviceCatalogEntry, desc: DiskDescription) -> str:
    return f"{entry.identifier} -> Device: {entry.device_path}, {desc}"


def run_replace(cfg: Config, ask: Ask = input) -> int:
    status_text = zpool.query_status(cfg)
    if zpool.is_resilvering(status_text, cfg.resilver_markers):
        raise Resilvering(
            "A pool is currently resilvering. Please wait until the resilver "
            "completes before attempting a replacement."
        )

    reports = zpool.parse_status(status_text)
    _, degraded = classify_pools(reports, cfg.healthy_state)
    pool = select_pool(degraded, ask)
    missing = find_missing_member(pool, cfg.missing_states)

    print(f"⚠️  Detected degraded pool: {pool.name} ({pool.state})")
    if pool.scan:
        print(f"   scan: {pool.scan}")
    print(f"❌ Missing disk identifier (from pool): {missing.identifier}")
    if missing.note:
        print(f"   ({missing.note})")
    print()

    claimed = build_claimed_set(reports)
    print("🔍 Scanning for candidate new disks (drives not in any pool)...")
    candidates: List[DeviceCatalogEntry] = require_candidates(
        resolve_candidates(list_catalog(cfg), claimed)
    )

    descriptions = [describe_device(cfg, c.device_path) for c in candidates]
    print("💡 Candidate new disks found:")
    idx = choose_index(
        [_candidate_line(c, d) for c, d in zip(candidates, descriptions)],
        "👉 Enter the number corresponding to the new disk you want to use: ",
        ask,
    )
    new_disk, new_desc = candidates[idx], descriptions[idx]

    print()
    print("✅ Selected new disk:")
    print(f"Identifier: {new_disk.identifier}")
    print(f"Device: {new_disk.device_path}")
    print(str(new_desc))
    print()

    if not confirm(
        f"❓ Would you like to replace missing disk {missing.identifier} with new disk {new_disk.identifier}?",
        ask,
    ):
        raise Cancelled("Replacement cancelled.")

    pause_before(f"{cfg.zpool_bin} replace {pool.name} {missing.identifier} {new_disk.identifier}", ask)
    rc = zpool.replace(cfg, pool.name, missing.identifier, new_disk.identifier)
    if rc != 0:
        warn(f"zpool replace exited with status {rc}. See its output above.")
        return rc
    if cfg.dry_run:
        print("[info] dry run: nothing was changed.")
    else:
        print("✅ Replacement command executed. Please check 'zpool status' for progress.")
    return 0
