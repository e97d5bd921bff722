"""
Tests for the schema-driven configuration loader.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from docdb_response.config.loader import ConfigLoader
from docdb_response.config.schema import ConfigSchema
from docdb_response.constants import DEFAULT_QUOTA_DELIMITERS


class TestConfigLoader(unittest.TestCase):
    """Test precedence and validation of configuration sources."""

    def setUp(self):
        """Isolate from any .env.local file."""
        patcher = patch('docdb_response.config.loader._load_from_dotenv_file')
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_schema_defaults(self):
        """Test defaults apply when nothing is set."""
        with patch.dict(os.environ, {}, clear=True):
            config = ConfigLoader.load()

        self.assertFalse(config.quota_strict_parsing)
        self.assertEqual(config.quota_delimiters, DEFAULT_QUOTA_DELIMITERS)
        self.assertFalse(config.quota_log_snapshots)

    def test_empty_env_value_uses_default(self):
        """Test empty environment values fall back to defaults."""
        with patch.dict(os.environ, {"QUOTA_DELIMITERS": "", "QUOTA_STRICT_PARSING": "  "}, clear=True):
            config = ConfigLoader.load()

        self.assertEqual(config.quota_delimiters, DEFAULT_QUOTA_DELIMITERS)
        self.assertFalse(config.quota_strict_parsing)

    def test_delimiters_keep_whitespace(self):
        """Test whitespace delimiters are not stripped."""
        with patch.dict(os.environ, {"QUOTA_DELIMITERS": " \t"}, clear=True):
            config = ConfigLoader.load()
        self.assertEqual(config.quota_delimiters, " \t")

    def test_cli_args_precedence(self):
        """Test CLI arguments override environment variables."""
        parser = ConfigLoader.generate_cli_parser()
        args = parser.parse_args(["--response-file", "r.json", "--quota-strict", "false"])

        with patch.dict(os.environ, {"QUOTA_STRICT_PARSING": "true"}, clear=True):
            config = ConfigLoader.load(cli_args=args)

        self.assertFalse(config.quota_strict_parsing)

    def test_validation_error_message(self):
        """Test validation errors name the environment variable."""
        with patch.dict(os.environ, {"QUOTA_STRICT_PARSING": "perhaps"}, clear=True):
            with self.assertRaises(ValueError) as cm:
                ConfigLoader.load()
        self.assertIn("QUOTA_STRICT_PARSING", str(cm.exception))

    def test_extra_fields_forbidden(self):
        """Test the schema rejects unknown fields."""
        with self.assertRaises(ValueError):
            ConfigSchema(unknown_field=1)

    def test_generated_parser(self):
        """Test the parser exposes schema fields and CLI-only options."""
        parser = ConfigLoader.generate_cli_parser()
        args = parser.parse_args([
            "--response-file", "r.json",
            "--json",
            "--quota-delimiters", ";=",
            "--quota-log-snapshots", "true",
        ])

        self.assertEqual(args.response_file, "r.json")
        self.assertTrue(args.json)
        self.assertFalse(args.verbose)
        self.assertEqual(args.quota_delimiters, ";=")
        self.assertEqual(args.quota_log_snapshots, "true")
        self.assertIsNone(args.quota_strict)


class TestDotenvLoading(unittest.TestCase):
    """Test loading values from a .env.local file."""

    def test_dotenv_file(self):
        """Test .env.local values are read without overriding the environment."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with open(os.path.join(tmpdir, ".env.local"), "w") as f:
                f.write("QUOTA_LOG_SNAPSHOTS=true\nQUOTA_STRICT_PARSING=true\n")

            cwd = os.getcwd()
            os.chdir(tmpdir)
            try:
                with patch.dict(os.environ, {"QUOTA_STRICT_PARSING": "false"}, clear=True):
                    config = ConfigLoader.load()
            finally:
                os.chdir(cwd)

        self.assertTrue(config.quota_log_snapshots)
        self.assertFalse(config.quota_strict_parsing)


if __name__ == '__main__':
    unittest.main()
