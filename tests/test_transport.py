import unittest

from docpublish.transport import RSYNC_FLAGS, RsyncTransport, rsync_command

from tests.fakes import FakeRunner


class RsyncTransportTestCase(unittest.TestCase):
    def test_command_uses_archive_update_compress_flags(self):
        cmd = rsync_command("docs/build/mcodex/html/", "codex:/srv/www/codex/")
        self.assertEqual(
            cmd,
            ["rsync", "--progress", "-a", "-u", "-v", "-z", "docs/build/mcodex/html/", "codex:/srv/www/codex/"],
        )

    def test_excludes_precede_paths(self):
        cmd = rsync_command("src/", "dest/", ["--exclude=*.tmp"])
        self.assertEqual(cmd[len(RSYNC_FLAGS) + 1], "--exclude=*.tmp")
        self.assertEqual(cmd[-2:], ["src/", "dest/"])

    def test_success(self):
        runner = FakeRunner()
        result = RsyncTransport(runner).sync("src/", "host:/dest/")
        self.assertTrue(result)
        self.assertEqual(result.returncode, 0)
        self.assertEqual(len(runner.commands("rsync")), 1)
        self.assertTrue(runner.calls[0]["check"])

    def test_nonzero_exit_is_reported_not_raised(self):
        runner = FakeRunner(codes={"rsync": 23})
        with self.assertLogs("docpublish.transport", level="ERROR") as logs:
            result = RsyncTransport(runner).sync("src/", "host:/dest/")
        self.assertFalse(result)
        self.assertEqual(result.returncode, 23)
        self.assertIn("23", result.detail)
        self.assertIn("host:/dest/", " ".join(logs.output))

    def test_missing_rsync_is_reported_not_raised(self):
        runner = FakeRunner(errors={"rsync": FileNotFoundError(2, "No such file", "rsync")})
        with self.assertLogs("docpublish.transport", level="ERROR"):
            result = RsyncTransport(runner).sync("src/", "host:/dest/")
        self.assertFalse(result.ok)
        self.assertIsNone(result.returncode)

    def test_runner_returning_nonzero_without_raising(self):
        def runner(cmd, *, cwd=None, capture_output=False, check=False):
            return (12, "", "")

        with self.assertLogs("docpublish.transport", level="ERROR"):
            result = RsyncTransport(runner).sync("src/", "host:/dest/")
        self.assertFalse(result)
        self.assertEqual(result.returncode, 12)


if __name__ == "__main__":
    unittest.main()
