"""
ignore.py

Read a .deployignore file (gitignore syntax) from the directory being
deployed. The raw patterns become rsync --exclude options; the compiled
PathSpec drives the dry-run listing of files that would be transferred.

rsync --exclude cannot re-include a path, so '!pattern' lines are dropped
(with a warning) and both the transfer and the listing ignore them.
"""

import logging
import re
from pathlib import Path
from typing import List, Tuple

from pathspec import PathSpec

logger = logging.getLogger("docpublish.ignore")

INLINE_COMMENT = re.compile(r"\s+#")


def read_patterns(ignore_path: Path) -> List[str]:
    """
    Read gitignore-style patterns from `ignore_path`.
    Blank lines and '#' comment lines are skipped; an inline comment starts at
    a '#' preceded by whitespace, so 'page#1.html' stays a pattern. Missing
    file -> no patterns.
    """
    patterns: List[str] = []
    if not ignore_path.is_file():
        return patterns
    for raw in ignore_path.read_text("utf-8", errors="ignore").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        line = INLINE_COMMENT.split(line, 1)[0].rstrip()
        if line:
            patterns.append(line)
    return patterns


def compile_spec(patterns: List[str]) -> PathSpec:
    """
    Build a PathSpec. For any pattern ending in '/', also add 'pattern/**'
    so that all children are ignored.
    """
    final_patterns: List[str] = []
    for pat in patterns:
        if pat.endswith("/"):
            base = pat.rstrip("/")
            final_patterns.append(base)
            final_patterns.append(f"{base}/**")
        else:
            final_patterns.append(pat)
    return PathSpec.from_lines("gitwildmatch", final_patterns)


def load_ignore_spec(root: Path, filename: str) -> Tuple[List[str], PathSpec]:
    """Patterns from root/filename; the ignore file itself is never deployed."""
    ignore_path = root / filename
    patterns = []
    for pat in read_patterns(ignore_path):
        if pat.startswith("!"):
            logger.warning(f"Ignoring unsupported negation '{pat}' in {ignore_path}")
            continue
        patterns.append(pat)
    if ignore_path.is_file():
        patterns.append(filename)
    return patterns, compile_spec(patterns)


def exclude_options(patterns: List[str]) -> List[str]:
    return [f"--exclude={pat}" for pat in patterns]


def list_site_files(root: Path, spec: PathSpec) -> List[Path]:
    """
    Walk all entries under `root`, pruning ignored directories, and return the
    files that would be deployed (relative to `root`, sorted).
    """
    files: List[Path] = []
    if not root.is_dir():
        return files
    stack: List[Path] = [root]
    while stack:
        parent = stack.pop()
        for child in parent.iterdir():
            rel = child.relative_to(root)
            if spec.match_file(rel.as_posix()):
                continue
            if child.is_dir():
                stack.append(child)
            elif child.is_file():
                files.append(rel)
    return sorted(files)
