"""
catalog.py
Block device catalog and disk descriptions:
- Enumerate /dev/disk/by-id links for the configured transport prefixes
  (whole disks only; -partN links are skipped)
- Resolve each link to its device path (readlink -f)
- Describe a disk: model and serial from `smartctl -i`, size from lsblk

Descriptions are best effort. Each attribute is looked up on its own and
comes back as None ("Unknown") when the tool is missing, the device is busy,
or the output has no matching field.
"""

from __future__ import annotations
import os, re
from pathlib import Path
from typing import List, Optional
from .errors import DescriptorUnavailable
from .types import Config, DeviceCatalogEntry, DiskDescription
from .util import run

_PART_LINK = re.compile(r"-part\d+$")

MODEL_KEYS = ("Device Model:", "Product:", "Product identification:", "Model Number:")
SERIAL_KEYS = ("Serial Number:", "Serial number:", "Unit serial number:")


def resolve_device(cfg: Config, identifier: str) -> str:
    return os.path.realpath(cfg.byid_dir / identifier)


def list_catalog(cfg: Config) -> List[DeviceCatalogEntry]:
    """By-id entries in enumeration order: prefix by prefix, names sorted like a shell glob."""
    entries: List[DeviceCatalogEntry] = []
    byid = Path(cfg.byid_dir)
    if not byid.is_dir():
        return entries
    names = sorted(p.name for p in byid.iterdir())
    for prefix in cfg.id_prefixes:
        for name in names:
            if not name.startswith(prefix) or _PART_LINK.search(name):
                continue
            if not (byid / name).exists():
                continue
            entries.append(DeviceCatalogEntry(name, resolve_device(cfg, name)))
    return entries


def _field(text: str, keys) -> Optional[str]:
    for line in text.splitlines():
        for key in keys:
            if line.startswith(key):
                value = line.split(":", 1)[1].strip()
                if value:
                    return value
    return None


def smart_info(cfg: Config, device: str) -> str:
    # smartctl exit status is a bit mask; identity lines are usable even when rc != 0
    rc, out = run([cfg.smartctl_bin, "-i", device], capture=True)
    if rc in (126, 127) or not out.strip():
        raise DescriptorUnavailable(f"smartctl gave nothing for {device}")
    return out


def disk_size(cfg: Config, device: str) -> str:
    rc, out = run([cfg.lsblk_bin, "-dn", "-o", "SIZE", device], capture=True)
    size = out.strip()
    if rc != 0 or not size:
        raise DescriptorUnavailable(f"lsblk could not size {device}")
    return size


def describe_device(cfg: Config, device: str) -> DiskDescription:
    desc = DiskDescription()
    try:
        info = smart_info(cfg, device)
        desc.model = _field(info, MODEL_KEYS)
        desc.serial = _field(info, SERIAL_KEYS)
    except DescriptorUnavailable:
        pass
    try:
        desc.size = disk_size(cfg, device)
    except DescriptorUnavailable:
        pass
    return desc


def describe(cfg: Config, identifier: str) -> DiskDescription:
    """Model, serial and size for a by-id identifier."""
    return describe_device(cfg, resolve_device(cfg, identifier))
