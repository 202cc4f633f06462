"""
types.py
Dataclasses used across modules: Config, MemberLine, PoolStatusReport,
DeviceCatalogEntry, DiskDescription.

Everything here is built from live queries at the start of a run and
dropped at exit; nothing is written to disk.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List

UNKNOWN = "Unknown"


@dataclass
class Config:
    # zpool
    zpool_bin: str = "zpool"
    healthy_state: str = "ONLINE"
    missing_states: List[str] = field(
        default_factory=lambda: ["REMOVED", "MISSING", "UNAVAIL", "FAULTED", "DEGRADED"]
    )
    resilver_markers: List[str] = field(
        default_factory=lambda: ["resilver in progress", "(resilvering)"]
    )
    # catalog
    byid_dir: Path = Path("/dev/disk/by-id")
    id_prefixes: List[str] = field(default_factory=lambda: ["ata-", "scsi-"])
    # describe
    smartctl_bin: str = "smartctl"
    lsblk_bin: str = "lsblk"
    # runtime
    require_root: bool = True
    dry_run: bool = False


@dataclass
class MemberLine:
    identifier: str
    state: str
    note: Optional[str] = None


@dataclass
class PoolStatusReport:
    name: str
    state: str
    members: List[MemberLine] = field(default_factory=list)
    scan: Optional[str] = None


@dataclass
class DeviceCatalogEntry:
    identifier: str
    device_path: str


@dataclass
class DiskDescription:
    model: Optional[str] = None
    serial: Optional[str] = None
    size: Optional[str] = None

    def shown(self, attr: str) -> str:
        return getattr(self, attr) or UNKNOWN

    def __str__(self) -> str:
        return f"Model: {self.shown('model')}, Serial: {self.shown('serial')}, Size: {self.shown('size')}"
