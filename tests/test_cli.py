import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from pylinkval.cli import main
from pylinkval.core import config as config_module


class CliTestCase(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        self.user_path = Path(self.tmp_dir.name) / "config.toml"
        patcher = patch.object(config_module, "USER_CONFIG_PATH", self.user_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def invoke(self, *args):
        return self.runner.invoke(main, list(args))


class TestUrlCommands(CliTestCase):

    def test_parse_json(self):
        result = self.invoke("parse", "https://A.com:443/x/../y?q=1#f", "--json")
        self.assertEqual(result.exit_code, 0)
        components = json.loads(result.output)
        self.assertEqual(components["host"], "a.com")
        self.assertIsNone(components["port"])
        self.assertEqual(components["effective_port"], 443)
        self.assertEqual(components["path"], "/y")
        self.assertEqual(components["serialized"], "https://a.com/y?q=1#f")

    def test_parse_alias_and_table(self):
        result = self.invoke("p", "https://a.com/")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("scheme", result.output)

    def test_parse_invalid(self):
        result = self.invoke("parse", "a.com")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid URL", result.output)

    def test_join(self):
        result = self.invoke("join", "https://a.com/x/y", "../z")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output, "https://a.com/z\n")

    def test_join_invalid_base(self):
        result = self.invoke("join", "nope", "x")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid base URL", result.output)

    def test_normalize(self):
        result = self.invoke("normalize", "https://a.com/path/#frag", "/docs/")
        self.assertEqual(result.output.splitlines(), ["https://a.com/path", "/docs"])

    def test_origin_comparison(self):
        result = self.invoke("origin", "https://a.com:443/x", "https://a.com/y")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.splitlines()[0], "https://a.com")
        self.assertIn("True", result.output)

    def test_query_json(self):
        result = self.invoke("query", "https://a.com?x=1&x=2", "--json")
        self.assertEqual(json.loads(result.output), [["x", "1"], ["x", "2"]])

    def test_query_set(self):
        result = self.invoke("query", "https://a.com/p?old=1#f", "--set", "a=1", "--set", "b=x y")
        self.assertEqual(result.output, "https://a.com/p?a=1&b=x+y#f\n")

    def test_segments(self):
        result = self.invoke("segments", "https://a.com/a//b/")
        self.assertEqual(result.output.splitlines(), ["a", "b"])

    def test_links(self):
        result = self.invoke("links", "https://x.com", "/about")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("external", result.output)
        self.assertIn("internal", result.output)


class TestValidationCommands(CliTestCase):

    def test_check_kind_json(self):
        result = self.invoke("check", "4532015112830366", "--kind", "credit-card", "--json")
        self.assertEqual(result.exit_code, 0)
        results = json.loads(result.output)
        self.assertEqual(results[0]["matches"], ["CreditCard"])

    def test_check_rejected_value_exits_with_error(self):
        result = self.invoke("check", "4532015112830367", "--kind", "credit-card")
        self.assertEqual(result.exit_code, 1)

    def test_check_postal_country(self):
        result = self.invoke("check", "K1A 0B1", "--kind", "postal-code", "--country", "CA", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output)[0]["matches"], ["PostalCode"])

    def test_check_markdown(self):
        result = self.invoke("c", "192.168.1.1", "--kind", "ipv4", "--md")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("# Validation of `192.168.1.1`", result.output)
        self.assertIn("## IPv4 (valid)", result.output)

    def test_check_all_formats_table(self):
        result = self.invoke("check", "user@example.com")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Check Complete", result.output)

    def test_detect(self):
        result = self.invoke("detect", "192.168.1.1")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("ipv4", result.output)

    def test_scan(self):
        data_file = Path(self.tmp_dir.name) / "cards.txt"
        data_file.write_text("4532015112830366\n\n4532015112830367\n", encoding="utf-8")
        result = self.invoke("scan", str(data_file), "--kind", "credit-card", "--json")
        self.assertEqual(result.exit_code, 1)
        self.assertIn('"line": 3', result.output)

    def test_scan_all_valid(self):
        data_file = Path(self.tmp_dir.name) / "ips.txt"
        data_file.write_text("10.0.0.1\n127.0.0.1\n", encoding="utf-8")
        result = self.invoke("scan", str(data_file), "--kind", "ipv4")
        self.assertEqual(result.exit_code, 0)


class TestTextCommands(CliTestCase):

    def test_match(self):
        self.assertEqual(self.invoke("match", "hello world", "wor").exit_code, 0)
        self.assertEqual(self.invoke("match", "hello world", "^world").exit_code, 1)

    def test_match_invalid_pattern(self):
        result = self.invoke("match", "text", "[unclosed")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid regex pattern", result.output)

    def test_digest_verify(self):
        result = self.invoke("digest", "", "--verify", "e3b0c442")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("checksum: e3b0c442", result.output)
        self.assertEqual(self.invoke("digest", "", "--verify", "00000000").exit_code, 1)


class TestConfigCommand(CliTestCase):

    def test_set_get_reset(self):
        self.assertEqual(self.invoke("config", "get", "postal_region").output, "GENERIC\n")

        result = self.invoke("config", "set", "postal_region", "US")
        self.assertEqual(result.exit_code, 0)
        self.assertTrue(self.user_path.exists())
        self.assertEqual(self.invoke("config", "get", "postal_region").output, "US\n")

        self.assertEqual(self.invoke("config", "reset").exit_code, 0)
        self.assertFalse(self.user_path.exists())

    def test_set_casts_integers(self):
        self.invoke("config", "set", "validators.PasswordStrength.minimum_score", "2")
        result = self.invoke("config", "get", "validators.PasswordStrength.minimum_score")
        self.assertEqual(result.output, "2\n")

    def test_get_requires_key(self):
        self.assertEqual(self.invoke("config", "get").exit_code, 1)


if __name__ == '__main__':
    unittest.main()
