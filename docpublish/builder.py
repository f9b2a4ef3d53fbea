"""
builder.py

Build the HTML documentation of one package with Sphinx:

    python -m sphinx -b html <docs_dir>/<package> <docs_dir>/build/<package>/html

The generator's exit status is reported unchanged in BuildResult. Errors
raised while launching it are not caught here.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from docpublish.config import PublishConfig
from docpublish.paths import normalize_package
from docpublish.runner import CommandRunner, run_command

logger = logging.getLogger("docpublish.builder")


@dataclass(frozen=True)
class BuildResult:
    ok: bool
    package: str
    output_dir: Path
    returncode: int

    def __bool__(self) -> bool:
        return self.ok


class DocBuilder:
    def __init__(self, config: PublishConfig, runner: CommandRunner = run_command):
        self.config = config
        self.runner = runner

    def command(self, package: str) -> list:
        return [
            sys.executable,
            "-m",
            "sphinx",
            "-b",
            "html",
            str(self.config.source_dir(package)),
            str(self.config.output_dir(package)),
        ]

    def build(self, package: str) -> BuildResult:
        name = normalize_package(package)
        output_dir = self.config.output_dir(name)
        logger.debug(f"Sphinx output for {name}: {output_dir}")
        code, _, _ = self.runner(self.command(name), cwd=self.config.working_dir())
        if code != 0:
            logger.warning(f"Sphinx exited with code {code} while building {name}")
        else:
            logger.info(f"Documentation for {name} written to {output_dir}")
        return BuildResult(code == 0, name, output_dir, code)
