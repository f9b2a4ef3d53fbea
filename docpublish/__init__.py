"""Build a package's Sphinx documentation and rsync it to the docs host."""

from docpublish.builder import BuildResult, DocBuilder
from docpublish.config import DEFAULT_CONFIG, PublishConfig
from docpublish.paths import InvalidPackageError, resolve_site_path
from docpublish.publisher import (
    Publisher,
    build_and_publish,
    build_site,
    deploy_site,
    mcodex_path,
    publish_site,
)
from docpublish.transport import RsyncTransport, TransferResult, rsync

__all__ = [
    "BuildResult",
    "DEFAULT_CONFIG",
    "DocBuilder",
    "InvalidPackageError",
    "PublishConfig",
    "Publisher",
    "RsyncTransport",
    "TransferResult",
    "build_and_publish",
    "build_site",
    "deploy_site",
    "mcodex_path",
    "publish_site",
    "resolve_site_path",
    "rsync",
]

__version__ = "0.1.0"
