"""
util.py
Cross-cutting utilities:
- Process execution (argument list) with dry-run support
- PATH helpers and the helper-tools report
- Identifier normalization shared by the claimed-set builder and the
  candidate resolver
"""

from __future__ import annotations
import os, re, shlex, shutil, subprocess, sys


def run(cmd, capture=False, env=None, dry=False):
    """
    Execute a command given as an argument list.
    - Returns (rc, output_str).
    - A missing binary yields rc 127; one that cannot be executed
      (permission denied, bad format) yields rc 126, as a shell would.
    """
    if dry:
        print("[dry-run]", " ".join(shlex.quote(c) for c in cmd))
        return 0, ""
    try:
        if capture:
            out = subprocess.check_output(cmd, stderr=subprocess.STDOUT, env=env)
            return 0, out.decode("utf-8", "replace")
        else:
            rc = subprocess.call(cmd, env=env)
            return rc, ""
    except subprocess.CalledProcessError as e:
        return e.returncode, e.output.decode("utf-8", "replace") if e.output else ""
    except FileNotFoundError:
        return 127, f"{cmd[0]}: command not found"
    except OSError as e:
        return 126, f"{cmd[0]}: {e.strerror or e}"


def which_quiet(name: str) -> bool:
    """Check if command exists silently. Absolute paths are checked for the execute bit."""
    return bool(shutil.which(name))


def check_optional_tools(cfg) -> None:
    """Report configured helper tools that are missing, with Ubuntu install hints."""
    tools = [
        (cfg.zpool_bin, 'pool status and replace', 'zfsutils-linux'),
        (cfg.smartctl_bin, 'disk model and serial lookup', 'smartmontools'),
        (cfg.lsblk_bin, 'disk size lookup', 'util-linux'),
    ]

    missing = []
    apt_packages = []

    for tool, desc, package in tools:
        if not which_quiet(tool):
            missing.append((tool, desc, package))
            apt_packages.append(package)

    if missing:
        print(f"[info] Helper tools missing - install for full functionality:")
        for tool, desc, package in missing:
            print(f"  • {tool} ({desc}): sudo apt install {package}")
        if len(apt_packages) > 1:
            print(f"")
            print(f"💡 Install all: sudo apt install {' '.join(apt_packages)}")


def is_root() -> bool:
    return os.geteuid() == 0


_BYID_PART = re.compile(r"(?:-part\d+)+$")
_KERNEL_PART = re.compile(r"^((?:sd|vd|hd|xvd)[a-z]+)\d+$")
_KERNEL_P_PART = re.compile(r"^((?:nvme\d+n\d+)|(?:mmcblk\d+))p\d+$")


def normalize_identifier(ident: str) -> str:
    """
    Reduce a device identifier to its whole-disk key.

    ata-X-part1 -> ata-X, /dev/disk/by-id/ata-X -> ata-X, sdb1 -> sdb,
    nvme0n1p2 -> nvme0n1. Applying it twice gives the same result.
    """
    name = ident.rstrip("/").rsplit("/", 1)[-1]
    name = _BYID_PART.sub("", name)
    m = _KERNEL_PART.match(name) or _KERNEL_P_PART.match(name)
    if m:
        return m.group(1)
    return name


def warn(msg: str) -> None:
    print(f"[warn] {msg}", file=sys.stderr)
