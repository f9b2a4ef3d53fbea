#!/usr/bin/env python3
"""
cli.py

Command-line driver for docpublish.

Usage:
    docpublish path PACKAGE
    docpublish build [PACKAGE]
    docpublish deploy [--source DIR] [--destination HOST:PATH] [--dry-run]
    docpublish publish [--path DIR] [--site HOST:PATH] [--package NAME]
    docpublish build-and-publish [PACKAGE]

Global options:
    --project-root DIR    directory commands run in (default: nearest ancestor
                          of the cwd containing .gitignore, else the cwd)
    --corrected-gating    publish deploys after a successful build instead of
                          after a failed one
    --log-file PATH       also write a timestamped log to PATH
    --verbose             DEBUG logging

Exit codes: 0 success, 1 failed build/transfer, 2 usage error.
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional

from docpublish.config import DEFAULT_CONFIG, PublishConfig
from docpublish.log import logger, section, setup_logging
from docpublish.paths import InvalidPackageError
from docpublish.publisher import Publisher

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def find_project_root(start: Path) -> Optional[Path]:
    """Walk upward from `start` to find the directory containing .gitignore."""
    current = start.resolve()
    while True:
        if (current / ".gitignore").is_file():
            return current
        if current == current.parent:
            return None
        current = current.parent


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="docpublish",
        description="Build package documentation with Sphinx and rsync it to the docs host.",
    )
    ap.add_argument("--project-root", type=Path, help="Directory commands run in")
    ap.add_argument(
        "--corrected-gating",
        action="store_true",
        help="Deploy only after a successful build",
    )
    ap.add_argument("--log-file", type=Path, help="Also log to this file")
    ap.add_argument("--verbose", action="store_true", help="DEBUG logging")

    sub = ap.add_subparsers(dest="command", required=True)

    p_path = sub.add_parser("path", help="Print the remote path of a package")
    p_path.add_argument("package")

    p_build = sub.add_parser("build", help="Build documentation")
    p_build.add_argument("package", nargs="?")

    p_deploy = sub.add_parser("deploy", help="Sync built documentation")
    p_deploy.add_argument("--source")
    p_deploy.add_argument("--destination")
    p_deploy.add_argument("--dry-run", action="store_true", help="List files only")

    p_publish = sub.add_parser("publish", help="Build, then deploy")
    p_publish.add_argument("--path")
    p_publish.add_argument("--site")
    p_publish.add_argument("--package")

    p_both = sub.add_parser("build-and-publish", help="Publish one package")
    p_both.add_argument("package", nargs="?")
    return ap


def make_config(args: argparse.Namespace) -> PublishConfig:
    project_root = args.project_root or find_project_root(Path.cwd()) or Path.cwd()
    return dataclasses.replace(
        DEFAULT_CONFIG,
        project_root=project_root,
        deploy_on_build_failure=not args.corrected_gating,
    )


def run(args: argparse.Namespace, publisher: Publisher) -> int:
    logger.debug(f"Project root: {publisher.config.working_dir()}")

    if args.command == "path":
        print(publisher.site_path(args.package))
        return EXIT_OK

    if args.command == "build":
        section("Build")
        result = publisher.build_site(args.package)
    elif args.command == "deploy":
        if args.dry_run:
            section("Dry-run only")
            source = args.source or publisher.config.local_path
            if not publisher.source_root(source).is_dir():
                logger.warning(f"Nothing to deploy: {source} does not exist")
                return EXIT_FAILED
            for rel in publisher.manifest(source):
                logger.info(f"  {rel.as_posix()}")
            return EXIT_OK
        section("Deploy")
        result = publisher.deploy_site(args.source, args.destination)
    elif args.command == "publish":
        section("Publish")
        result = publisher.publish_site(args.path, args.site, args.package)
    else:
        section("Build and publish")
        result = publisher.build_and_publish(args.package)

    return EXIT_OK if result else EXIT_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    publisher = Publisher(make_config(args))
    setup_logging(verbose=args.verbose, log_file=args.log_file)
    try:
        return run(args, publisher)
    except InvalidPackageError as e:
        logger.error(str(e))
        return EXIT_USAGE
    except Exception as e:
        logger.error(f"Unhandled exception: {e}")
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
