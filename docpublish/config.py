"""
config.py

Read-only settings for a publishing run. A PublishConfig is built once and
handed to the Publisher; nothing mutates it afterwards. Use
dataclasses.replace() to derive a variant.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docpublish.paths import ROOT_PACKAGE, remote_destination

# ────────────────────────────────────────────────────────────────────────────────
# Reference deployment
# ────────────────────────────────────────────────────────────────────────────────
DEFAULT_LOCAL_PATH = f"docs/build/{ROOT_PACKAGE}/html/"
DEFAULT_REMOTE_HOST = "codex"
DEFAULT_REMOTE_ROOT = "/srv/www/codex/"
DEFAULT_DOCS_DIR = "docs"
DEFAULT_IGNORE_FILE = ".deployignore"


@dataclass(frozen=True)
class PublishConfig:
    local_path: str = DEFAULT_LOCAL_PATH
    remote_host: str = DEFAULT_REMOTE_HOST
    remote_root: str = DEFAULT_REMOTE_ROOT
    root_package: str = ROOT_PACKAGE
    default_package: str = ROOT_PACKAGE
    docs_dir: str = DEFAULT_DOCS_DIR
    # None: the current directory at the time a command runs.
    project_root: Optional[Path] = None
    # True keeps the historical gating: deploy only when the build reports failure.
    deploy_on_build_failure: bool = True
    ignore_file: str = DEFAULT_IGNORE_FILE

    @property
    def default_destination(self) -> str:
        return remote_destination(self.remote_host, self.remote_root)

    def working_dir(self) -> Path:
        if self.project_root is None:
            return Path.cwd()
        return self.project_root

    def output_dir(self, package: str) -> Path:
        """Directory Sphinx writes HTML for `package` into: <docs_dir>/build/<package>/html"""
        return Path(self.docs_dir) / "build" / package / "html"

    def source_dir(self, package: str) -> Path:
        return Path(self.docs_dir) / package


DEFAULT_CONFIG = PublishConfig()
