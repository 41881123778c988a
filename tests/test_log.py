import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from fhsrun import cli_logger
from fhsrun.main import cli

class TestLogCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.log_dir = tempfile.mkdtemp()
        with open(os.path.join(self.log_dir, "fhsrun_20260101_000000.log"), "w") as f:
            f.write("[10:00:00] [INFO] Resolving 1 libraries: libz.so.1\n")
            f.write("[10:00:01] [ERROR] Found no provider for libz.so.1\n")
        patcher = patch.object(cli_logger, 'LOG_DIR', self.log_dir)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(shutil.rmtree, self.log_dir)

    def test_list(self):
        result = self.runner.invoke(cli, ["log", "--list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("fhsrun_20260101_000000.log", result.output)

    def test_named_file(self):
        result = self.runner.invoke(cli, ["log", "--filename", "fhsrun_20260101_000000.log"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Found no provider for libz.so.1", result.output)

    def test_latest_file(self):
        result = self.runner.invoke(cli, ["log"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Resolving 1 libraries", result.output)

if __name__ == '__main__':
    unittest.main()
