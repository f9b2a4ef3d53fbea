"""
paths.py

Map a package identifier to the remote directory its documentation is
published under.

    resolve_site_path("Widgets", "/srv/www/codex/")  ->  "/srv/www/codex/widgets/"
    resolve_site_path("mcodex",  "/srv/www/codex/")  ->  "/srv/www/codex/"

The root package is served directly from the remote root; every other
package gets its own subdirectory.
"""

ROOT_PACKAGE = "mcodex"
REMOTE_SEP = "/"


class InvalidPackageError(ValueError):
    """Raised when a package identifier is empty after normalisation."""


def normalize_package(package: str) -> str:
    """Strip surrounding whitespace and lowercase. Raise on empty."""
    name = (package or "").strip().lower()
    if not name:
        raise InvalidPackageError(f"Package name must not be empty (got {package!r})")
    return name


def resolve_site_path(package: str, root: str, root_package: str = ROOT_PACKAGE) -> str:
    name = normalize_package(package)
    if name == root_package.lower():
        return root
    return f"{root}{name}{REMOTE_SEP}"


def remote_destination(host: str, path: str) -> str:
    """Join host and path as rsync expects (``host:path``); bare path without a host."""
    if not host:
        return path
    return f"{host}:{path}"
