"""
transport.py

Synchronise a local directory to a remote destination with rsync:

    rsync --progress -a -u -v -z [--exclude=PAT ...] <local_path> <destination>

    -a  archive (recurse, keep permissions/times/links)
    -u  skip files that are newer on the receiver
    -v  verbose
    -z  compress in transit

Progress is streamed to the terminal. A failed transfer is logged to the
diagnostic stream and reported through the returned TransferResult; sync()
never raises. Authentication (ssh keys, agent) is assumed to be in place.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from docpublish.runner import CommandRunner, run_command

logger = logging.getLogger("docpublish.transport")

RSYNC_FLAGS = ["--progress", "-a", "-u", "-v", "-z"]


@dataclass(frozen=True)
class TransferResult:
    ok: bool
    source: str
    destination: str
    returncode: Optional[int] = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.ok


def rsync_command(
    local_path: str, destination: str, excludes: Sequence[str] = ()
) -> list:
    return ["rsync", *RSYNC_FLAGS, *excludes, local_path, destination]


class RsyncTransport:
    def __init__(self, runner: CommandRunner = run_command, cwd: Optional[Path] = None):
        self.runner = runner
        self.cwd = cwd

    def sync(
        self,
        local_path: str,
        destination: str,
        excludes: Sequence[str] = (),
        cwd: Optional[Path] = None,
    ) -> TransferResult:
        cmd = rsync_command(local_path, destination, excludes)
        logger.info(f"Syncing {local_path} -> {destination}")
        try:
            code, _, _ = self.runner(cmd, cwd=cwd or self.cwd, check=True)
        except subprocess.CalledProcessError as e:
            detail = f"rsync exited with code {e.returncode}"
            logger.error(f"Transfer to {destination} failed: {detail}")
            return TransferResult(False, local_path, destination, e.returncode, detail)
        except OSError as e:
            detail = f"could not run rsync: {e}"
            logger.error(f"Transfer to {destination} failed: {detail}")
            return TransferResult(False, local_path, destination, None, detail)
        if code != 0:
            detail = f"rsync exited with code {code}"
            logger.error(f"Transfer to {destination} failed: {detail}")
            return TransferResult(False, local_path, destination, code, detail)
        return TransferResult(True, local_path, destination, code)


def rsync(path: str, site: str) -> TransferResult:
    """Copy `path` to `site` with the default runner."""
    return RsyncTransport().sync(path, site)
