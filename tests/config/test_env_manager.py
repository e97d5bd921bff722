"""
Tests for the Environment Manager.

This module tests the Env configuration container including defaults,
the global instance and validation errors.
"""

import os
import unittest
from unittest.mock import patch

from docdb_response.config.env import Env, ConfigError
from docdb_response.constants import DEFAULT_QUOTA_DELIMITERS


class TestEnvManager(unittest.TestCase):
    """Test cases for the Environment Manager."""

    def setUp(self):
        """Set up test fixtures."""
        # Clear any existing singleton
        import docdb_response.config.env as env_module
        env_module._ENV = None

    def tearDown(self):
        """Clean up after tests."""
        import docdb_response.config.env as env_module
        env_module._ENV = None

    def test_defaults(self):
        """Test a default Env is lenient and uses the standard delimiters."""
        env = Env()
        self.assertFalse(env.QUOTA_STRICT_PARSING)
        self.assertEqual(env.QUOTA_DELIMITERS, DEFAULT_QUOTA_DELIMITERS)
        self.assertFalse(env.QUOTA_LOG_SNAPSHOTS)

    def test_from_mapping_success(self):
        """Test creating Env instance from valid mapping."""
        env = Env.from_mapping({
            "QUOTA_STRICT_PARSING": "yes",
            "QUOTA_DELIMITERS": ";=",
            "QUOTA_LOG_SNAPSHOTS": "1",
        })

        self.assertTrue(env.QUOTA_STRICT_PARSING)
        self.assertEqual(env.QUOTA_DELIMITERS, ";=")
        self.assertTrue(env.QUOTA_LOG_SNAPSHOTS)

    def test_from_mapping_invalid(self):
        """Test that invalid values raise ConfigError."""
        with self.assertRaises(ConfigError):
            Env.from_mapping({"QUOTA_STRICT_PARSING": "maybe"})
        with self.assertRaises(ConfigError):
            Env.from_mapping({"QUOTA_DELIMITERS": ""})

    def test_current_not_initialized(self):
        """Test that current() raises error when not initialized."""
        with self.assertRaises(ConfigError) as cm:
            Env.current()
        self.assertIn("not initialized", str(cm.exception))

    def test_current_or_default(self):
        """Test the fallback to defaults before anything is loaded."""
        self.assertEqual(Env.current_or_default(), Env())

        installed = Env.install(Env(QUOTA_STRICT_PARSING=True))
        self.assertIs(Env.current_or_default(), installed)
        self.assertIs(Env.current(), installed)

    @patch('docdb_response.config.loader._load_from_dotenv_file')
    def test_load_from_environment(self, mock_dotenv):
        """Test loading from environment variables."""
        mock_dotenv.return_value = None
        with patch.dict(os.environ, {"QUOTA_STRICT_PARSING": "true", "QUOTA_DELIMITERS": ";= "}, clear=True):
            env = Env.load()

        self.assertTrue(env.QUOTA_STRICT_PARSING)
        self.assertEqual(env.QUOTA_DELIMITERS, ";= ")
        self.assertIs(Env.current(), env)

    @patch('docdb_response.config.loader._load_from_dotenv_file')
    def test_load_with_overrides(self, mock_dotenv):
        """Test overrides take precedence over environment variables."""
        mock_dotenv.return_value = None
        with patch.dict(os.environ, {"QUOTA_STRICT_PARSING": "true"}, clear=True):
            env = Env.load(cli_overrides={"QUOTA_STRICT_PARSING": "false"})

        self.assertFalse(env.QUOTA_STRICT_PARSING)

    @patch('docdb_response.config.loader._load_from_dotenv_file')
    def test_load_invalid(self, mock_dotenv):
        """Test invalid environment values raise ConfigError."""
        mock_dotenv.return_value = None
        with patch.dict(os.environ, {"QUOTA_LOG_SNAPSHOTS": "sometimes"}, clear=True):
            with self.assertRaises(ConfigError) as cm:
                Env.load()
        self.assertIn("QUOTA_LOG_SNAPSHOTS", str(cm.exception))

    def test_to_dict(self):
        """Test converting Env to dictionary."""
        self.assertEqual(Env().to_dict(), {
            "QUOTA_STRICT_PARSING": False,
            "QUOTA_DELIMITERS": DEFAULT_QUOTA_DELIMITERS,
            "QUOTA_LOG_SNAPSHOTS": False,
        })

    def test_immutable(self):
        """Test Env cannot be modified."""
        env = Env()
        with self.assertRaises(Exception):
            env.QUOTA_STRICT_PARSING = True


if __name__ == '__main__':
    unittest.main()
