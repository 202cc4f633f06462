#!/usr/bin/env python3
"""
cli.py
Command-line interface for zreplace.
No options: loads config, checks privileges, runs the interactive flow and
maps its outcome to an exit code.
"""
from __future__ import annotations
import argparse, os, sys
from .bundle import prepend_bin_to_path
from .config import ENV_VAR, find_config, load_config
from .errors import ReplaceHalt
from .orchestrator import run_replace
from .util import check_optional_tools, is_root


def check_root_access() -> bool:
    """Explain why root is needed; return False when it is missing."""
    if is_root():
        return True
    user = os.environ.get('USER', 'mortal')
    print(f"\n🔒 Sorry {user}, zreplace needs root privileges to:")
    print(f"   • Read pool status and run 'zpool replace'")
    print(f"   • Query disk identity with smartctl")
    print(f"\n✨ Try this instead: sudo {' '.join(sys.argv)}\n")
    return False


def main(argv=None) -> int:
    try:
        ap = argparse.ArgumentParser(
            description="zreplace: interactively replace a missing disk in a degraded ZFS pool",
            epilog=f"\nConfiguration: ${ENV_VAR}, ./zreplace.toml or /etc/zreplace.toml (all optional).",
        )
        ap.parse_args(argv)

        try:
            cfg = load_config(find_config())
        except FileNotFoundError as e:
            print(f"❌ Error: {e}")
            print(f"💡 Hint: Unset {ENV_VAR} to use the default locations")
            return 1
        except Exception as e:
            print(f"❌ Error: Invalid configuration file: {e}")
            return 1

        if cfg.require_root and not cfg.dry_run and not check_root_access():
            return 1

        prepend_bin_to_path()
        check_optional_tools(cfg)
        return run_replace(cfg)

    except ReplaceHalt as halt:
        print(f"{halt.icon} {halt}")
        return halt.exit_code
    except EOFError:
        print(f"\n❌ Input closed before a choice was made. Exiting.")
        return 1
    except KeyboardInterrupt:
        print(f"\n\n⚡ Interrupted by user.")
        return 130
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        print(f"💡 Hint: Check that 'zpool status' works on this machine")
        return 1


if __name__ == "__main__":
    sys.exit(main())
