import unittest

from docpublish.paths import (
    InvalidPackageError,
    normalize_package,
    remote_destination,
    resolve_site_path,
)

ROOT = "/srv/www/codex/"


class ResolveSitePathTestCase(unittest.TestCase):
    def test_root_package_maps_to_root(self):
        self.assertEqual(resolve_site_path("mcodex", ROOT), ROOT)

    def test_root_package_match_is_case_insensitive(self):
        self.assertEqual(resolve_site_path("MCodex", ROOT), ROOT)

    def test_other_package_gets_subdirectory(self):
        self.assertEqual(resolve_site_path("widgets", ROOT), "/srv/www/codex/widgets/")
        self.assertEqual(resolve_site_path("Test", ROOT), ROOT + "test/")

    def test_result_starts_with_root(self):
        for package in ("a", "Widgets", "mcodex", "docs-tools"):
            self.assertTrue(resolve_site_path(package, ROOT).startswith(ROOT))

    def test_repeated_calls_agree(self):
        first = resolve_site_path("Widgets", ROOT)
        self.assertEqual(first, resolve_site_path("widgets", ROOT))
        self.assertEqual(first, resolve_site_path("Widgets", ROOT))

    def test_empty_package_rejected(self):
        with self.assertRaises(InvalidPackageError):
            resolve_site_path("", ROOT)

    def test_whitespace_only_package_rejected(self):
        with self.assertRaises(InvalidPackageError):
            resolve_site_path("   ", ROOT)

    def test_invalid_package_is_value_error(self):
        with self.assertRaises(ValueError):
            normalize_package("")

    def test_custom_root_package(self):
        self.assertEqual(resolve_site_path("Handbook", "/docs/", root_package="handbook"), "/docs/")
        self.assertEqual(resolve_site_path("mcodex", "/docs/", root_package="handbook"), "/docs/mcodex/")


class RemoteDestinationTestCase(unittest.TestCase):
    def test_host_and_path_joined(self):
        self.assertEqual(remote_destination("codex", ROOT), "codex:/srv/www/codex/")

    def test_empty_host_leaves_path(self):
        self.assertEqual(remote_destination("", "/tmp/site/"), "/tmp/site/")


if __name__ == "__main__":
    unittest.main()
