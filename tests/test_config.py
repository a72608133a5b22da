import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from pylinkval.core import config as config_module
from pylinkval.core.config import Config

from tests.helpers import make_config

try:
    import tomllib
except ImportError:
    import tomli as tomllib


class TestConfigLoading(unittest.TestCase):

    def test_defaults(self):
        config = make_config()
        self.assertEqual(config.get("postal_region"), "GENERIC")
        self.assertEqual(config.get("validators.PasswordStrength.minimum_score"), 3)
        self.assertEqual(config.get("missing.key", "fallback"), "fallback")

    def test_file_values_are_merged(self):
        """Test that a TOML file overrides defaults without dropping siblings."""
        config = make_config(
            'postal_region = "US"\n'
            'disable_validators = ["SSN"]\n'
            '[validators.PasswordStrength]\n'
            'enabled = false\n'
        )
        self.assertEqual(config.get("postal_region"), "US")
        self.assertEqual(config.get("validators.PasswordStrength.minimum_score"), 3)
        self.assertFalse(config.is_validator_enabled("SSN"))
        self.assertFalse(config.is_validator_enabled("PasswordStrength"))
        self.assertTrue(config.is_validator_enabled("Email"))

    def test_broken_file_keeps_defaults(self):
        with self.assertLogs("pylinkval.core.config", level="WARNING"):
            config = make_config("postal_region = \n")
        self.assertEqual(config.get("postal_region"), "GENERIC")

    def test_enable_list_wins_over_disable_list(self):
        config = make_config()
        config.set("enable_validators", ["Email"])
        config.set("disable_validators", ["Email"])
        self.assertTrue(config.is_validator_enabled("Email"))
        self.assertFalse(config.is_validator_enabled("URL"))


class TestEnvironmentVariables(unittest.TestCase):

    def test_env_overrides_file(self):
        with patch.dict(os.environ, {"LINKVAL_POSTAL_REGION": "CA"}):
            config = make_config('postal_region = "US"\n')
        self.assertEqual(config.get("postal_region"), "CA")

    def test_env_values_are_cast(self):
        env = {
            "LINKVAL_DISABLE_VALIDATORS": "Email, Phone,",
            "LINKVAL_COLORS": "0",
            "LINKVAL_VERBOSE": "yes",
            "LINKVAL_PASSWORD_MINIMUM_SCORE": "4",
        }
        with patch.dict(os.environ, env):
            config = make_config()
        self.assertEqual(config.get("disable_validators"), ["Email", "Phone"])
        self.assertFalse(config.get("colors"))
        self.assertTrue(config.get("verbose"))
        self.assertEqual(config.get("validators.PasswordStrength.minimum_score"), 4)

    def test_invalid_integer_is_ignored(self):
        with patch.dict(os.environ, {"LINKVAL_PASSWORD_MINIMUM_SCORE": "high"}):
            with self.assertLogs("pylinkval.core.config", level="WARNING"):
                config = make_config()
        self.assertEqual(config.get("validators.PasswordStrength.minimum_score"), 3)


class TestUserConfigFile(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.user_path = Path(self.tmp_dir.name) / "linkval" / "config.toml"
        patcher = patch.object(config_module, "USER_CONFIG_PATH", self.user_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.tmp_dir.cleanup)

    def test_save_writes_only_changed_values(self):
        config = Config()
        config.set("postal_region", "GB")
        config.save_user_config()

        with open(self.user_path, "rb") as f:
            saved = tomllib.load(f)
        self.assertEqual(saved, {"postal_region": "GB"})
        self.assertEqual(Config().get("postal_region"), "GB")

    def test_save_keeps_other_user_settings(self):
        self.user_path.parent.mkdir(parents=True)
        self.user_path.write_text('output = "json"\n', encoding="utf-8")

        config = Config()
        config.set("postal_region", "CA")
        config.save_user_config()

        with open(self.user_path, "rb") as f:
            saved = tomllib.load(f)
        self.assertEqual(saved, {"output": "json", "postal_region": "CA"})

    def test_reset_removes_the_file(self):
        config = Config()
        config.set("output", "json")
        config.save_user_config()

        self.assertTrue(config.reset_user_config())
        self.assertFalse(self.user_path.exists())
        self.assertEqual(config.get("output"), "table")
        self.assertFalse(config.reset_user_config())


if __name__ == '__main__':
    unittest.main()
