"""
publisher.py

Sequence a documentation build and its deployment.

    build_site(package)            Sphinx only
    deploy_site(source, dest)      rsync only
    publish_site(path, site, pkg)  build, then deploy depending on the build result
    build_and_publish(pkg)         publish_site for one package, all paths derived from it
    mcodex_path(pkg)               remote path a package is published under

Gating in publish_site is controlled by PublishConfig.deploy_on_build_failure:

    True   (historical behaviour) deploy only when the build reports failure
    False  deploy only when the build succeeds

Defaults for path and site are computed on every call from the package
being published.

The module-level functions operate on a Publisher built from DEFAULT_CONFIG.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from docpublish.builder import BuildResult, DocBuilder
from docpublish.config import DEFAULT_CONFIG, PublishConfig
from docpublish.ignore import exclude_options, list_site_files, load_ignore_spec
from docpublish.log import step_progress
from docpublish.paths import normalize_package, remote_destination, resolve_site_path
from docpublish.runner import CommandRunner, run_command
from docpublish.transport import RsyncTransport, TransferResult

logger = logging.getLogger("docpublish.publisher")

PublishResult = Union[TransferResult, BuildResult]


class Publisher:
    def __init__(self, config: PublishConfig = DEFAULT_CONFIG, runner: CommandRunner = run_command):
        self.config = config
        self.builder = DocBuilder(config, runner)
        self.transport = RsyncTransport(runner)

    # ──────────────────────────────────────────────────────────────────────────
    # Paths
    # ──────────────────────────────────────────────────────────────────────────
    def site_path(self, package: Optional[str] = None) -> str:
        """Remote path for `package` under the configured remote root."""
        if package is None:
            package = self.config.default_package
        return resolve_site_path(package, self.config.remote_root, self.config.root_package)

    def site_destination(self, package: Optional[str] = None) -> str:
        return remote_destination(self.config.remote_host, self.site_path(package))

    def local_path(self, package: Optional[str] = None) -> str:
        """Local directory to deploy: the build output of `package`, or the configured path."""
        if package is None:
            return self.config.local_path
        return f"{self.config.output_dir(normalize_package(package)).as_posix()}/"

    def source_root(self, source: str) -> Path:
        """`source` as an absolute path, relative ones taken from the working directory."""
        path = Path(source)
        if not path.is_absolute():
            path = self.config.working_dir() / path
        return path

    def excludes(self, source: str) -> List[str]:
        patterns, _ = load_ignore_spec(self.source_root(source), self.config.ignore_file)
        return exclude_options(patterns)

    def manifest(self, source: Optional[str] = None) -> List[Path]:
        """Files under `source` that a deploy would transfer."""
        root = self.source_root(source or self.config.local_path)
        _, spec = load_ignore_spec(root, self.config.ignore_file)
        return list_site_files(root, spec)

    # ──────────────────────────────────────────────────────────────────────────
    # Operations
    # ──────────────────────────────────────────────────────────────────────────
    def build_site(self, package: Optional[str] = None) -> BuildResult:
        if package is None:
            package = self.config.default_package
        return self.builder.build(package)

    def deploy_site(
        self, source: Optional[str] = None, destination: Optional[str] = None
    ) -> TransferResult:
        if source is None:
            source = self.config.local_path
        if destination is None:
            destination = self.config.default_destination
        return self.transport.sync(
            source, destination, self.excludes(source), cwd=self.config.working_dir()
        )

    def publish_site(
        self,
        path: Optional[str] = None,
        site: Optional[str] = None,
        package: Optional[str] = None,
    ) -> PublishResult:
        if package is None:
            package = self.config.default_package
        if path is None:
            path = self.local_path(package)
        if site is None:
            site = self.site_destination(package)

        step_progress(1, 2, f"Building documentation for {package}")
        built = self.build_site(package)

        if built.ok == self.config.deploy_on_build_failure:
            logger.info(f"Skipping deploy of {package} (build ok: {built.ok})")
            return built

        step_progress(2, 2, f"Deploying {path} to {site}")
        return self.deploy_site(path, site)

    def build_and_publish(self, package: Optional[str] = None) -> PublishResult:
        return self.publish_site(package=package)


# ──────────────────────────────────────────────────────────────────────────────
# Default-configuration entry points
# ──────────────────────────────────────────────────────────────────────────────
def build_site(package: Optional[str] = None) -> BuildResult:
    return Publisher().build_site(package)


def deploy_site(source: Optional[str] = None, destination: Optional[str] = None) -> TransferResult:
    return Publisher().deploy_site(source, destination)


def mcodex_path(package: Optional[str] = None) -> str:
    return Publisher().site_path(package)


def publish_site(
    path: Optional[str] = None, site: Optional[str] = None, package: Optional[str] = None
) -> PublishResult:
    return Publisher().publish_site(path, site, package)


def build_and_publish(package: Optional[str] = None) -> PublishResult:
    return Publisher().build_and_publish(package)
