#!/usr/bin/env python3
"""
Tests for the docdb-quota command.
"""

import io
import json
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from docdb_response.cli.main import format_quota_table, load_captured_response, main
from docdb_response.api.response import ResourceResponse
from docdb_response.constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_QUOTA_HEADER_ERROR,
)
from docdb_response.models.resource import Resource


CAPTURED = {
    "status_code": 200,
    "headers": {
        "x-ms-resource-quota": "databases=100;collections=50;triggers=25",
        "x-ms-resource-usage": "databases=4;collections=10;triggers=5",
        "x-ms-request-charge": "1.25",
        "x-ms-activity-id": "7c1f",
    },
    "body": {"id": "mydb", "_etag": "e1"},
}


class TestQuotaCli(unittest.TestCase):
    """Test the command end to end."""

    def setUp(self):
        """Set up a temporary captured response."""
        self.tmpdir = tempfile.mkdtemp()
        self.path = self._write("response.json", CAPTURED)

        patcher = patch('docdb_response.config.loader._load_from_dotenv_file')
        patcher.start()
        self.addCleanup(patcher.stop)
        env_patcher = patch.dict(os.environ, {}, clear=True)
        env_patcher.start()
        self.addCleanup(env_patcher.stop)

    def tearDown(self):
        """Clean up temporary files and the global Env."""
        shutil.rmtree(self.tmpdir)
        import docdb_response.config.env as env_module
        env_module._ENV = None

    def _write(self, name, data):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path

    def _run(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_table_output(self):
        """Test the default table output."""
        code, output = self._run("--response-file", self.path)

        self.assertEqual(code, EXIT_SUCCESS)
        self.assertIn("databases", output)
        self.assertIn("request charge: 1.25", output)
        self.assertIn("activity id: 7c1f", output)
        triggers_line = next(line for line in output.splitlines() if line.startswith("triggers"))
        self.assertIn("20.0%", triggers_line)

    def test_json_output(self):
        """Test JSON output."""
        code, output = self._run("--response-file", self.path, "--json")

        self.assertEqual(code, EXIT_SUCCESS)
        data = json.loads(output)
        quotas = {item["kind"]: item for item in data["quotas"]}
        self.assertEqual(quotas["DATABASE"], {"kind": "DATABASE", "quota": 100, "usage": 4})
        self.assertEqual(quotas["USER"]["quota"], 0)
        self.assertEqual(data["request_charge"], 1.25)
        self.assertEqual(data["activity_id"], "7c1f")

    def test_missing_file(self):
        """Test a missing file is an input error."""
        code, _ = self._run("--response-file", os.path.join(self.tmpdir, "nope.json"))
        self.assertEqual(code, EXIT_INPUT_ERROR)

    def test_invalid_capture(self):
        """Test files that are not captured responses are input errors."""
        for name, content in [("a.json", "not json"), ("b.json", [1, 2]), ("c.json", {"headers": {}}),
                              ("d.json", {"status_code": None}),
                              ("e.json", {"status_code": 200, "headers": {"x-ms-request-charge": 2.3}}),
                              ("f.json", {"status_code": 200, "headers": ["x-ms-activity-id"]})]:
            code, _ = self._run("--response-file", self._write(name, content))
            self.assertEqual(code, EXIT_INPUT_ERROR, name)

    def test_invalid_config(self):
        """Test invalid configuration is a config error."""
        os.environ["QUOTA_STRICT_PARSING"] = "kinda"
        code, _ = self._run("--response-file", self.path)
        self.assertEqual(code, EXIT_CONFIG_ERROR)

    def test_strict_rejects_misaligned_headers(self):
        """Test strict mode reports misaligned headers."""
        captured = dict(CAPTURED, headers={
            "x-ms-resource-quota": "databases=100;collections=50",
            "x-ms-resource-usage": "databases=4",
        })
        path = self._write("bad.json", captured)

        code, _ = self._run("--response-file", path, "--quota-strict", "true")
        self.assertEqual(code, EXIT_QUOTA_HEADER_ERROR)

        code, _ = self._run("--response-file", path)
        self.assertEqual(code, EXIT_SUCCESS)


class TestCliHelpers(unittest.TestCase):
    """Test the helpers behind the command."""

    def test_load_captured_string_body(self):
        """Test a raw string body is kept as is."""
        with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as f:
            json.dump({"status_code": 204, "headers": {}, "body": ""}, f)
        try:
            service_response = load_captured_response(f.name)
        finally:
            os.unlink(f.name)

        self.assertEqual(service_response.status_code, 204)
        self.assertIsNone(service_response.get_resource(Resource))

    def test_format_quota_table(self):
        """Test one line per quota kind plus charge and activity id."""
        from docdb_response.api.service_response import DocumentServiceResponse

        response = ResourceResponse(DocumentServiceResponse(200, {}, None), Resource)
        lines = format_quota_table(response)

        self.assertEqual(len(lines), 1 + 9 + 2)
        self.assertEqual(lines[-1], "activity id: -")
        self.assertEqual(lines[-2], "request charge: 0.0")


if __name__ == "__main__":
    unittest.main()
