"""
bundle.py
Where a source checkout of zreplace keeps its adjacent files.

- Run from a checkout (./main.py, or `pip install -e .`): the project root
  holds an optional `zreplace.toml` and an optional ./bin with helper tools
  that take precedence over the system ones.
- Installed from a wheel (console script in site-packages): there is no
  project root, so only $ZREPLACE_CONFIG and /etc/zreplace.toml apply and
  PATH is left alone.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

_ROOT_MARKERS = ("pyproject.toml", "main.py")


def project_root(package_dir: Optional[Path] = None) -> Optional[Path]:
    """The checkout directory above the package, or None when installed."""
    parent = (package_dir or Path(__file__).resolve().parent).parent
    if any((parent / marker).exists() for marker in _ROOT_MARKERS):
        return parent
    return None


PROJECT_DIR: Optional[Path] = project_root()
BIN_DIR: Optional[Path] = PROJECT_DIR / "bin" if PROJECT_DIR else None
DEFAULT_CONFIG_PATH: Optional[str] = str(PROJECT_DIR / "zreplace.toml") if PROJECT_DIR else None


def prepend_bin_to_path(bin_dir: Optional[Path] = None) -> bool:
    """Put the checkout's ./bin first on PATH so zpool/smartctl/lsblk there win."""
    bin_dir = bin_dir or BIN_DIR
    if bin_dir is None or not bin_dir.is_dir():
        return False
    current = os.environ.get("PATH", "")
    if current.split(os.pathsep)[:1] == [str(bin_dir)]:
        return True
    os.environ["PATH"] = str(bin_dir) + os.pathsep + current
    return True
