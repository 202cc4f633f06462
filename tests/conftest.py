"""
Pytest configuration and shared fixtures.
"""
import pytest
import tempfile
from pathlib import Path
from zreplace.types import Config


DEGRADED_STATUS = """\
  pool: tank
 state: DEGRADED
status: One or more devices could not be used because the label is missing or
\tinvalid.  Sufficient replicas exist for the pool to continue
\tfunctioning in a degraded state.
action: Replace the device using 'zpool replace'.
   see: https://openzfs.github.io/openzfs-docs/msg/ZFS-8000-4J
  scan: scrub repaired 0B in 05:12:44 with 0 errors on Sun Oct 11 05:36:45 2026
config:

\tNAME                                          STATE     READ WRITE CKSUM
\ttank                                          DEGRADED     0     0     0
\t  raidz1-0                                    DEGRADED     0     0     0
\t    ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000001  ONLINE       0     0     0
\t    ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000002  ONLINE       0     0     0
\t    9876543210123456789                       UNAVAIL      0     0     0  was /dev/disk/by-id/ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000003-part1

errors: No known data errors

  pool: backup
 state: ONLINE
  scan: scrub repaired 0B in 01:00:00 with 0 errors on Sun Oct 11 01:24:00 2026
config:

\tNAME                                      STATE     READ WRITE CKSUM
\tbackup                                    ONLINE       0     0     0
\t  mirror-0                                ONLINE       0     0     0
\t    scsi-SATA_ST4000VN008_ZDH00001-part1  ONLINE       0     0     0
\t    scsi-SATA_ST4000VN008_ZDH00002-part1  ONLINE       0     0     0
\tspares
\t  ata-ST4000VN008_ZDH00009                AVAIL

errors: No known data errors
"""

RESILVER_STATUS = """\
  pool: tank
 state: DEGRADED
status: One or more devices is currently being resilvered.  The pool will
\tcontinue to function, possibly in a degraded state.
action: Wait for the resilver to complete.
  scan: resilver in progress since Fri Oct 16 10:00:00 2026
\t1.20T scanned at 500M/s, 600G issued at 250M/s, 3.50T total
\t200G resilvered, 17.14% done, 02:40:00 to go
config:

\tNAME                                            STATE     READ WRITE CKSUM
\ttank                                            DEGRADED     0     0     0
\t  raidz1-0                                      DEGRADED     0     0     0
\t    ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000001    ONLINE       0     0     0
\t    replacing-2                                 DEGRADED     0     0     0
\t      9876543210123456789                       UNAVAIL      0     0     0
\t      ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000004  ONLINE       0     0     0  (resilvering)

errors: No known data errors
"""

RESILVERED_STATUS = """\
  pool: tank
 state: ONLINE
  scan: resilvered 1.20T in 05:00:00 with 0 errors on Fri Oct 16 15:00:00 2026
config:

\tNAME                                          STATE     READ WRITE CKSUM
\ttank                                          ONLINE       0     0     0
\t  mirror-0                                    ONLINE       0     0     0
\t    ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000001  ONLINE       0     0     0
\t    ata-WDC_WD40EFRX-68N32N0_WD-WCC7K0000004  ONLINE       0     0     0

errors: No known data errors
"""


def status_for(*pools):
    """Build `zpool status` text from (name, state, [(member, state), ...]) tuples."""
    chunks = []
    for name, state, members in pools:
        lines = [
            f"  pool: {name}",
            f" state: {state}",
            "config:",
            "",
            "\tNAME        STATE     READ WRITE CKSUM",
            f"\t{name}  {state}  0     0     0",
        ]
        for ident, mstate in members:
            lines.append(f"\t  {ident}  {mstate}  0     0     0")
        lines += ["", "errors: No known data errors", ""]
        chunks.append("\n".join(lines))
    return "\n".join(chunks)


@pytest.fixture
def answers():
    """Return a factory for a scripted input() replacement that records the prompts."""
    def make(*replies):
        queue = list(replies)
        prompts = []

        def ask(question):
            prompts.append(question)
            if not queue:
                raise AssertionError(f"unexpected prompt: {question}")
            return queue.pop(0)

        ask.prompts = prompts
        return ask
    return make


@pytest.fixture
def byid_dir(tmp_path):
    """A fake /dev/disk/by-id: sdb has ata- and scsi- links, sdc has scsi- and wwn- links."""
    dev = tmp_path / "dev"
    dev.mkdir()
    for name in ("sdb", "sdb1", "sdc", "sdd"):
        (dev / name).touch()
    byid = tmp_path / "by-id"
    byid.mkdir()
    links = {
        "ata-DISK_A": "sdb",
        "ata-DISK_A-part1": "sdb1",
        "scsi-SATA_DISK_A": "sdb",
        "scsi-DISK_B": "sdc",
        "wwn-0x5000c500a1b2c3d4": "sdc",
        "ata-DANGLING": "nope",
    }
    for link, target in links.items():
        (byid / link).symlink_to(Path("..") / "dev" / target)
    return byid


@pytest.fixture
def sample_config(byid_dir):
    """Create a sample configuration object for testing."""
    return Config(
        zpool_bin="zpool",
        healthy_state="ONLINE",
        missing_states=["REMOVED", "MISSING", "UNAVAIL", "FAULTED", "DEGRADED"],
        resilver_markers=["resilver in progress", "(resilvering)"],
        byid_dir=byid_dir,
        id_prefixes=["ata-", "scsi-"],
        smartctl_bin="smartctl",
        lsblk_bin="lsblk",
        require_root=False,
        dry_run=False,
    )


@pytest.fixture
def temp_config_file():
    """Create a temporary configuration file for testing."""
    toml_content = """
version = 1

[zpool]
bin = "/usr/sbin/zpool"
healthy_state = "ONLINE"
missing_states = ["MISSING", "UNAVAIL"]
resilver_markers = ["resilver in progress"]

[catalog]
byid_dir = "/tmp/zreplace-test/by-id"
id_prefixes = ["ata-", "scsi-", "nvme-"]

[describe]
smartctl = "/usr/sbin/smartctl"
lsblk = "/usr/bin/lsblk"

[runtime]
require_root = false
dry_run = true
"""

    with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
        f.write(toml_content)
        f.flush()
        yield Path(f.name)

    Path(f.name).unlink(missing_ok=True)


@pytest.fixture
def make_status():
    return status_for


@pytest.fixture
def degraded_status():
    return DEGRADED_STATUS


@pytest.fixture
def resilver_status():
    return RESILVER_STATUS


@pytest.fixture
def resilvered_status():
    return RESILVERED_STATUS
