"""
runner.py

Single seam through which every external command is launched. Components take
a runner callable so tests can substitute a fake without touching the network
or the filesystem.
"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger("docpublish.runner")

CommandRunner = Callable[..., Tuple[int, str, str]]


def run_command(
    cmd: Sequence[str],
    *,
    cwd: Optional[Path] = None,
    capture_output: bool = False,
    check: bool = False,
) -> Tuple[int, str, str]:
    """
    Run a subprocess command. Always returns (returncode, stdout, stderr) as strings.
    If capture_output=False, output goes straight to the terminal and the
    returned stdout/stderr are empty strings.

    With check=True a non-zero exit raises CalledProcessError. Launch failures
    (missing executable, bad cwd) raise OSError. Neither is handled here.
    """
    argv: List[str] = [str(part) for part in cmd]
    logger.debug(f"$ {' '.join(argv)}")
    if capture_output:
        result = subprocess.run(
            argv,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=check,
        )
        return (result.returncode, result.stdout.strip(), result.stderr.strip())
    result = subprocess.run(argv, cwd=cwd, check=check)
    return (result.returncode, "", "")
