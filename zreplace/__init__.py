"""
zreplace package
- Interactive helper that finds the missing member of a degraded ZFS pool and replaces it with an unclaimed disk.
"""
__all__ = ["cli", "config", "orchestrator", "resolver", "zpool", "catalog", "prompt", "errors", "util", "types", "bundle"]
__version__ = "0.1.0"
