import os
import toml
import unittest
from click.testing import CliRunner
from unittest.mock import patch
from fhsrun import config
from fhsrun.cli_logger import logger
from fhsrun.errors import ConfigError
from fhsrun.commands.config import config as config_command
import json

class TestConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = "test_project"
        os.makedirs(self.test_dir, exist_ok=True)
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "resolve": {
                "strategy": "take-all",
                "packages": ["zlib"]
            },
            "mapping": {
                "libfoo.so.1": "foo",
                "libbar.so.2": ["bar", "bar-compat"]
            }
        }
        config.save_config(self.sample_config, path=self.test_dir)

    def tearDown(self):
        if os.path.exists(self.config_path):
            os.remove(self.config_path)
        os.rmdir(self.test_dir)

    def test_load_config_not_found(self):
        """Test that loading a non-existent config returns an empty dict."""
        os.remove(self.config_path)
        cfg = config.load_config(path=self.test_dir)
        self.assertEqual(cfg, {})

    def test_load_config_malformed(self):
        """Test that a config with a syntax error loads as an empty dict."""
        with open(self.config_path, "w") as f:
            f.write("[resolve\nstrategy = ")
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_save_and_load_config(self):
        """Test saving a config and then loading it back."""
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config, self.sample_config)
        with open(self.config_path, "r") as f:
            self.assertEqual(toml.load(f), self.sample_config)

    def test_get_section_merges_defaults(self):
        section = config.get_section(self.sample_config, "resolve")
        self.assertEqual(section["strategy"], "take-all")
        self.assertEqual(section["packages"], ["zlib"])
        self.assertEqual(section["libs"], [])
        launcher = config.get_section({}, "launcher")
        self.assertEqual(launcher["name"], "run-with-nix")

    def test_get_mapping_accepts_strings_and_lists(self):
        self.assertEqual(
            config.get_mapping(self.sample_config),
            {"libfoo.so.1": ["foo"], "libbar.so.2": ["bar", "bar-compat"]},
        )

    def test_get_list(self):
        self.assertEqual(config.get_list({"libs": ["libz.so.1", ""]}, "libs"), ["libz.so.1"])
        self.assertEqual(config.get_list({"packages": "zlib"}, "packages"), ["zlib"])
        self.assertEqual(config.get_list({"packages": "zlib, glibc,"}, "packages"), ["zlib", "glibc"])
        self.assertEqual(config.get_list({}, "libs"), [])
        with self.assertRaises(ConfigError):
            config.get_list({"libs": 3}, "libs")

    def test_get_jobs(self):
        self.assertIsNone(config.get_jobs({}))
        self.assertEqual(config.get_jobs({"jobs": "4"}), 4)
        self.assertEqual(config.get_jobs({"jobs": 8}), 8)
        for bad in ("many", "0", -2):
            with self.assertRaises(ConfigError):
                config.get_jobs({"jobs": bad})

    def test_split_key_keeps_library_names_whole(self):
        self.assertEqual(config.split_key("mapping.libfoo.so.1"), ["mapping", "libfoo.so.1"])
        self.assertEqual(config.split_key("resolve.strategy"), ["resolve", "strategy"])

    @patch.object(logger, 'warning')
    def test_get_mapping_skips_nested_tables(self, mock_warning):
        conf = {"mapping": {"libfoo": {"so": {"1": "foo"}}, "libbar.so.2": "bar"}}
        self.assertEqual(config.get_mapping(conf), {"libbar.so.2": ["bar"]})
        mock_warning.assert_called_once()

    def test_get_value(self):
        """Test getting a value from the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'resolve.strategy'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), 'take-all')

    def test_get_non_existent_value(self):
        """Test getting a non-existent value from the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'resolve.nonexistent'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error: Key 'resolve.nonexistent' not found", result.output)

    def test_set_nested_value(self):
        """Test setting a nested value in the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['set', 'launcher.name', 'run-game'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config['launcher']['name'], 'run-game')

    def test_unset_nested_value(self):
        """Test unsetting a nested value in the config via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['unset', 'resolve.strategy'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        loaded_config = config.load_config(path=self.test_dir)
        self.assertNotIn('strategy', loaded_config['resolve'])

    def test_list_config(self):
        """Test listing all config values via the CLI."""
        runner = CliRunner()
        result = runner.invoke(config_command, ['list'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output.strip()), self.sample_config)

    def test_init_refuses_to_overwrite(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['init'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(config.load_config(path=self.test_dir), self.sample_config)

    def test_init_force(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['init', '--force'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(config.load_config(path=self.test_dir), config.DEFAULT_CONFIG)

if __name__ == "__main__":
    unittest.main()
